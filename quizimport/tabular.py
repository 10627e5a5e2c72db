"""
Spreadsheet import.

Expected layout (header names are matched loosely, see synonyms.py):
| Soru | Tip | A | B | C | D | E | Doğru Cevap | Puan | Açıklama |

Tip values: "Çoktan Seçmeli" (default), "Doğru/Yanlış", "Kısa Cevap".
"""
from __future__ import annotations
import logging
from typing import Any, List, Optional
import pandas as pd
from .header_detect import ColumnMapping, describe_mapping, detect_column_mapping
from .ingest import ORIGIN_COL, load_first_sheet
from .synonyms import (
    FALSE_ANSWERS,
    FALSE_TOKEN,
    OPTION_ROLES,
    SHORT_ANSWER_TYPE_KWS,
    TRUE_ANSWERS,
    TRUE_FALSE_TYPE_KWS,
    TRUE_TOKEN,
    ColumnRole,
    canonical_true_false,
)
from .types import FatalImportError, ImportResult, ParsedQuestion, QuestionType
from .utils import cell_text, norm_text, parse_points, run_guarded

logger = logging.getLogger(__name__)

ERR_NO_SHEET = "no sheet found in the workbook"
ERR_INSUFFICIENT = "insufficient data: a header row and at least one question row are required"
ERR_NO_QUESTION_COL = "question column not found: a 'Soru', 'Question' or 'Soru Metni' column is required"
ERR_NOTHING_PARSED = "no question could be parsed"
# =========================

# Row helpers
# =========================
def classify_type(type_cell: str) -> QuestionType:
    t = norm_text(type_cell)
    if any(k in t for k in TRUE_FALSE_TYPE_KWS):
        return QuestionType.TRUE_FALSE
    if any(k in t for k in SHORT_ANSWER_TYPE_KWS):
        return QuestionType.SHORT_ANSWER
    return QuestionType.MULTIPLE_CHOICE


def normalize_true_false_answer(raw: str) -> str:
    t = norm_text(raw)
    if t in TRUE_ANSWERS:
        return TRUE_TOKEN
    if t in FALSE_ANSWERS:
        return FALSE_TOKEN
    return raw


def _row_value(row: List[Any], mapping: ColumnMapping, role: ColumnRole) -> str:
    idx = mapping.get(role)
    if idx is None or idx >= len(row):
        return ""
    return cell_text(row[idx])


def parse_row(row: List[Any], mapping: ColumnMapping) -> Optional[ParsedQuestion]:
    """One data row -> question; None for spacer rows with an empty question cell."""
    content = _row_value(row, mapping, ColumnRole.QUESTION)
    if not content:
        return None

    qtype = classify_type(_row_value(row, mapping, ColumnRole.TYPE))
    answer = _row_value(row, mapping, ColumnRole.CORRECT_ANSWER)

    if qtype is QuestionType.TRUE_FALSE:
        options = canonical_true_false()
        answer = normalize_true_false_answer(answer)
    elif qtype is QuestionType.MULTIPLE_CHOICE:
        options = [v for v in (_row_value(row, mapping, r) for r in OPTION_ROLES) if v]
    elif qtype is QuestionType.SHORT_ANSWER:
        options = []
    else:
        raise ValueError(f"unsupported question type: {qtype}")

    explanation = _row_value(row, mapping, ColumnRole.EXPLANATION) or None

    return ParsedQuestion(
        content=content,
        type=qtype,
        options=options,
        correct_answer=answer,
        points=parse_points(_row_value(row, mapping, ColumnRole.POINTS)),
        explanation=explanation,
    )
# =========================

# Main: workbook bytes -> ImportResult
# =========================
def questions_from_frame(df_raw: pd.DataFrame) -> ImportResult:
    if len(df_raw) < 2:
        raise FatalImportError(ERR_INSUFFICIENT)

    cells = df_raw.drop(columns=[ORIGIN_COL])
    origin = df_raw[ORIGIN_COL].tolist()

    headers = [cell_text(v) for v in cells.iloc[0].tolist()]
    mapping = detect_column_mapping(headers)
    if ColumnRole.QUESTION not in mapping:
        raise FatalImportError(ERR_NO_QUESTION_COL)
    logger.debug("headers in use: %s", describe_mapping(mapping, headers))

    questions: List[ParsedQuestion] = []
    warnings: List[str] = []

    for i in range(1, len(cells)):
        row = cells.iloc[i].tolist()
        q = run_guarded(lambda: parse_row(row, mapping), f"row {origin[i]}", warnings)
        if q is not None:
            questions.append(q)

    return ImportResult.from_questions(questions, warnings, ERR_NOTHING_PARSED)


def parse_tabular(data: bytes) -> ImportResult:
    try:
        df_raw = load_first_sheet(data)
    except Exception as e:
        logger.warning("workbook could not be read: %s", e)
        return ImportResult.failure(f"file read error: {e}")

    try:
        if df_raw is None:
            raise FatalImportError(ERR_NO_SHEET)
        result = questions_from_frame(df_raw)
    except FatalImportError as e:
        logger.info("workbook rejected: %s", e)
        return ImportResult.failure(str(e))

    logger.info(
        "workbook parsed: %d question(s), %d warning(s)",
        len(result.questions), len(result.warnings),
    )
    return result
