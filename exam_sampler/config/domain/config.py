"""Top-level SamplerConfig aggregate: the root configuration object."""

from pydantic import BaseModel, Field

from exam_sampler.config.domain.questions import QuestionSourceConfig
from exam_sampler.config.domain.sampling import SamplingConfig
from exam_sampler.config.domain.session import SessionConfig


class SamplerConfig(BaseModel, frozen=True):
    """Root configuration aggregate for an exam-sampler deployment."""

    name: str = Field(min_length=1)
    questions: QuestionSourceConfig
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
