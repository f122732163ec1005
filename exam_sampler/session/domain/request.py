"""SessionRequest: the options a caller supplies to start a practice or exam session."""

from enum import StrEnum

from pydantic import BaseModel, Field

from exam_sampler.question.domain.question import Domain
from exam_sampler.similarity.domain.engine import DEFAULT_SIMILARITY_THRESHOLD


class ExamMode(StrEnum):
    FULL_EXAM = "exam"
    PRACTICE = "practice"


class SessionRequest(BaseModel, frozen=True):
    """Immutable session options.

    ``count`` falls back to the configured default for the mode when omitted.
    """

    mode: ExamMode = ExamMode.FULL_EXAM
    domain: Domain | None = None
    count: int | None = Field(default=None, ge=1)
    lang: str | None = None
    prevent_duplication: bool = True
    similarity_threshold: float = Field(
        default=DEFAULT_SIMILARITY_THRESHOLD, gt=0.0, le=1.0
    )
    check_choices: bool = True
