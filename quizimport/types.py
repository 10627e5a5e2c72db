"""Question and import result records shared by both parsers."""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "MultipleChoice"
    TRUE_FALSE = "TrueFalse"
    SHORT_ANSWER = "ShortAnswer"


class FatalImportError(Exception):
    """Aborts the whole file; turned into ImportResult.errors at the parser boundary."""


@dataclass(frozen=True)
class ParsedQuestion:
    content: str
    type: QuestionType
    options: List[str] = field(default_factory=list)
    correct_answer: str = ""
    points: int = 10
    explanation: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "content": self.content,
            "type": self.type.value,
            "options": list(self.options),
            "correctAnswer": self.correct_answer,
            "points": self.points,
        }
        if self.explanation is not None:
            out["explanation"] = self.explanation
        return out


@dataclass(frozen=True)
class ImportResult:
    success: bool
    questions: List[ParsedQuestion] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def failure(cls, message: str, warnings: Optional[List[str]] = None) -> "ImportResult":
        return cls(success=False, questions=[], errors=[message], warnings=list(warnings or []))

    @classmethod
    def from_questions(cls, questions: List[ParsedQuestion], warnings: List[str], empty_error: str) -> "ImportResult":
        # success iff at least one question survived
        if not questions:
            return cls.failure(empty_error, warnings)
        return cls(success=True, questions=list(questions), errors=[], warnings=list(warnings))

    def without_question(self, index: int) -> "ImportResult":
        """
        Returns a copy with the question at `index` removed (review screen "remove").
        Errors and warnings are kept; success follows the remaining question list.
        """
        if index < 0 or index >= len(self.questions):
            raise IndexError(f"question index out of range: {index}")
        rest = self.questions[:index] + self.questions[index + 1:]
        return replace(self, questions=rest, success=self.success and bool(rest))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "questions": [q.to_dict() for q in self.questions],
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class CreateQuestionRequest:
    order_index: int
    type: QuestionType
    content: str
    points: int
    options: Optional[List[str]] = None
    correct_answer: Optional[str] = None
    explanation: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        # absent optionals are omitted, not sent as null / []
        out: Dict[str, Any] = {
            "orderIndex": self.order_index,
            "type": self.type.value,
            "content": self.content,
            "points": self.points,
        }
        if self.options is not None:
            out["options"] = list(self.options)
        if self.correct_answer is not None:
            out["correctAnswer"] = self.correct_answer
        if self.explanation is not None:
            out["explanation"] = self.explanation
        return out
