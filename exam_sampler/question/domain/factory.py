"""Builds Question value objects from raw, untyped records."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from exam_sampler.question.domain.errors import InvalidQuestionError
from exam_sampler.question.domain.question import Question


def build_question(record: Mapping[str, Any]) -> Question:
    """
    Validate a raw record and return the corresponding Question.

    Raises:
        InvalidQuestionError: if any Question invariant is violated. The reason
            names the record id when the record carries one.
    """
    try:
        return Question.model_validate(record)
    except ValidationError as exc:
        raise InvalidQuestionError(reasons=[describe_failure(record, exc)]) from exc


def describe_failure(record: Mapping[str, Any], exc: ValidationError) -> str:
    """Render a one-line reason for a failed record, e.g. ``q001: stem: ...``."""
    label = str(record.get("id") or "<no id>")
    details = ", ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'record'}: {err['msg']}"
        for err in exc.errors()
    )
    return f"{label}: {details}"
