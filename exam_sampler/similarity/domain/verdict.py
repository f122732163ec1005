"""DuplicationVerdict: the outcome of comparing two questions."""

from pydantic import BaseModel, Field

from exam_sampler.question.domain.question import Question


class DuplicationVerdict(BaseModel, frozen=True):
    """Immutable result of a single question comparison.

    ``similarity_score`` and ``matched`` are only set on a duplicate verdict.
    """

    is_duplicate: bool
    similarity_score: float | None = Field(default=None, ge=0.0, le=1.0)
    matched: Question | None = None


NOT_DUPLICATE = DuplicationVerdict(is_duplicate=False)
