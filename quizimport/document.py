"""
Word (.docx) import.

Expected format:
  - every question starts on its own line with a number ("1.", "2)") or a
    "Soru 3:" / "Question 3." label
  - the rest of that line is the question text
  - options on separate lines: "A) ...", "B. ..."
  - correct answer on a line like "Doğru cevap: B" / "Correct: B"
  - a line containing both "Doğru" and "Yanlış" marks a true/false question

Points are always the default and explanations are not read from this format.
The 0-5 option range of multiple-choice questions is not enforced here: extra
option lines are kept, and an option line after the true/false line is appended
to the true/false pair and turns the question back into multiple choice.
"""
from __future__ import annotations
import re
import logging
from io import BytesIO
from typing import List, Optional
import mammoth
from .synonyms import TRUE_FALSE_MARKER_PAIRS, canonical_true_false
from .types import FatalImportError, ImportResult, ParsedQuestion, QuestionType
from .utils import default_points, norm_text, run_guarded

logger = logging.getLogger(__name__)

ERR_NO_TEXT = "no text found in the document"
ERR_NOTHING_PARSED = "no question could be parsed; check format"

QUESTION_MARKER_RE = re.compile(r"(?:^|\n)[ \t]*(?:\d+[.)][ \t]*|(?:soru|question)[ \t]*\d*[ \t]*[:.][ \t]*)", re.I)
OPTION_RE = re.compile(r"^([A-E])[.)]\s*(.+)$", re.I)
CORRECT_RE = re.compile(r"(?:doğru\s*cevap|correct\s*answer|correct|answer|cevap)\s*[:.]\s*([A-E])\b", re.I)


def extract_text(data: bytes) -> str:
    result = mammoth.extract_raw_text(BytesIO(data))
    for m in result.messages:
        logger.debug("mammoth: %s", m)
    return result.value


def split_into_blocks(text: str) -> List[str]:
    # markers are dropped; whatever sits between two markers is one block
    parts = QUESTION_MARKER_RE.split(text)
    return [p for p in parts if p.strip()]


def _is_true_false_marker(line: str) -> bool:
    t = norm_text(line)
    return any(a in t and b in t for a, b in TRUE_FALSE_MARKER_PAIRS)


def parse_block(block: str) -> Optional[ParsedQuestion]:
    lines = [ln.strip() for ln in block.split("\n")]
    lines = [ln for ln in lines if ln]
    if not lines:
        return None

    content = lines[0]
    options: List[str] = []
    correct_answer = ""
    qtype: Optional[QuestionType] = None

    for line in lines[1:]:
        m = OPTION_RE.match(line)
        if m:
            options.append(m.group(2).strip())
            qtype = QuestionType.MULTIPLE_CHOICE
            continue

        m = CORRECT_RE.search(line)
        if m:
            correct_answer = m.group(1).upper()
            continue

        if _is_true_false_marker(line):
            qtype = QuestionType.TRUE_FALSE
            options = canonical_true_false()

    if len(options) >= 2 and qtype is not QuestionType.TRUE_FALSE:
        qtype = QuestionType.MULTIPLE_CHOICE
    elif qtype is None:
        qtype = QuestionType.SHORT_ANSWER

    return ParsedQuestion(
        content=content,
        type=qtype,
        options=options,
        correct_answer=correct_answer,
        points=default_points(),
    )


def questions_from_text(text: str) -> ImportResult:
    if not text.strip():
        raise FatalImportError(ERR_NO_TEXT)

    blocks = split_into_blocks(text)
    logger.debug("document split into %d block(s)", len(blocks))

    questions: List[ParsedQuestion] = []
    warnings: List[str] = []
    for n, block in enumerate(blocks, start=1):
        q = run_guarded(lambda: parse_block(block), f"question block {n}", warnings)
        if q is not None:
            questions.append(q)

    return ImportResult.from_questions(questions, warnings, ERR_NOTHING_PARSED)


def parse_document(data: bytes) -> ImportResult:
    try:
        text = extract_text(data)
    except Exception as e:
        logger.warning("document could not be read: %s", e)
        return ImportResult.failure(f"file read error: {e}")

    try:
        result = questions_from_text(text)
    except FatalImportError as e:
        logger.info("document rejected: %s", e)
        return ImportResult.failure(str(e))

    logger.info(
        "document parsed: %d question(s), %d warning(s)",
        len(result.questions), len(result.warnings),
    )
    return result
