from __future__ import annotations
from typing import Iterable, List
from .types import CreateQuestionRequest, ParsedQuestion


def to_create_request(q: ParsedQuestion, order_index: int) -> CreateQuestionRequest:
    return CreateQuestionRequest(
        order_index=order_index,
        type=q.type,
        content=q.content,
        points=q.points,
        options=list(q.options) if q.options else None,
        correct_answer=q.correct_answer or None,
        explanation=q.explanation,
    )


def to_create_requests(questions: Iterable[ParsedQuestion], start_index: int = 1) -> List[CreateQuestionRequest]:
    """
    Parsed questions -> exam API requests. `start_index` is "questions already
    in the exam + 1"; it is used as given, without validation.
    """
    return [to_create_request(q, start_index + i) for i, q in enumerate(questions)]
