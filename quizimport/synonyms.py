"""
Static synonym tables: column roles and the header spellings (Turkish and
English) that identify them, plus the keyword sets used to classify question
types and true/false answers. All spellings go through norm_text once, here.
"""
from __future__ import annotations
from enum import Enum
from typing import Dict, FrozenSet, List, NamedTuple, Sequence, Tuple
from .utils import norm_text


class ColumnRole(str, Enum):
    QUESTION = "question"
    TYPE = "type"
    OPTION_A = "option_a"
    OPTION_B = "option_b"
    OPTION_C = "option_c"
    OPTION_D = "option_d"
    OPTION_E = "option_e"
    CORRECT_ANSWER = "correct_answer"
    POINTS = "points"
    EXPLANATION = "explanation"


OPTION_ROLES: Tuple[ColumnRole, ...] = (
    ColumnRole.OPTION_A,
    ColumnRole.OPTION_B,
    ColumnRole.OPTION_C,
    ColumnRole.OPTION_D,
    ColumnRole.OPTION_E,
)
OPTION_LETTERS = "ABCDE"


class RoleSynonyms(NamedTuple):
    exact: FrozenSet[str]
    contains: Tuple[str, ...]


def _syn(exact: Sequence[str], contains: Sequence[str] = ()) -> RoleSynonyms:
    return RoleSynonyms(
        exact=frozenset(norm_text(x) for x in exact),
        contains=tuple(norm_text(x) for x in contains),
    )


def _option_syn(letter: str) -> RoleSynonyms:
    return _syn([letter, f"option {letter}", f"seçenek {letter}"])


# Order matters: a header is tested against roles top to bottom, first hit wins.
COLUMN_SYNONYMS: Dict[ColumnRole, RoleSynonyms] = {
    ColumnRole.QUESTION: _syn(["question", "soru", "content"], ["soru", "question"]),
    ColumnRole.TYPE: _syn(["type", "tip", "tür"]),
    ColumnRole.OPTION_A: _option_syn("a"),
    ColumnRole.OPTION_B: _option_syn("b"),
    ColumnRole.OPTION_C: _option_syn("c"),
    ColumnRole.OPTION_D: _option_syn("d"),
    ColumnRole.OPTION_E: _option_syn("e"),
    ColumnRole.CORRECT_ANSWER: _syn(["answer", "correct"], ["doğru", "cevap", "answer", "correct"]),
    ColumnRole.POINTS: _syn(["points", "score", "puan"]),
    ColumnRole.EXPLANATION: _syn(["explanation"], ["açıklama", "explanation"]),
}

# Question type keywords (substring match on the normalized type cell)
TRUE_FALSE_TYPE_KWS = tuple(norm_text(x) for x in ["doğru", "yanlış", "d/y", "true", "false", "truefalse"])
SHORT_ANSWER_TYPE_KWS = tuple(norm_text(x) for x in ["kısa", "short", "açık uçlu", "open ended", "shortanswer"])

TRUE_TOKEN = "Doğru"
FALSE_TOKEN = "Yanlış"
TRUE_FALSE_PAIR: Tuple[str, str] = (TRUE_TOKEN, FALSE_TOKEN)

TRUE_ANSWERS = frozenset(norm_text(x) for x in ["d", "doğru", "true", "t"])
FALSE_ANSWERS = frozenset(norm_text(x) for x in ["y", "yanlış", "false", "f"])

# Free-text true/false marker: both words of one pair on the same line
TRUE_FALSE_MARKER_PAIRS = (
    (norm_text("doğru"), norm_text("yanlış")),
    ("true", "false"),
)


def canonical_true_false() -> List[str]:
    # fresh list per question
    return list(TRUE_FALSE_PAIR)


def role_for_header(header: str) -> ColumnRole | None:
    h = norm_text(header)
    if not h:
        return None
    for role, syn in COLUMN_SYNONYMS.items():
        if h in syn.exact or any(k in h for k in syn.contains):
            return role
    return None
