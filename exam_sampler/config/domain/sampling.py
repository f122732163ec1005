"""Sampling configuration model."""

from pydantic import BaseModel, Field


class SamplingConfig(BaseModel, frozen=True):
    similarity_threshold: float = Field(default=0.8, gt=0.0, le=1.0)
    check_choices: bool = True
    seed: int | None = None
