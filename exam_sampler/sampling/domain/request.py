"""SamplingRequest: what the sampler is asked to pick."""

from pydantic import BaseModel, Field

from exam_sampler.question.domain.question import Domain
from exam_sampler.similarity.domain.engine import DEFAULT_SIMILARITY_THRESHOLD


class SamplingRequest(BaseModel, frozen=True):
    count: int = Field(ge=1)
    domain: Domain | None = None
    lang: str | None = None
    threshold: float = Field(default=DEFAULT_SIMILARITY_THRESHOLD, gt=0.0, le=1.0)
    check_choices: bool = True
