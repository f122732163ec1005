"""Session configuration model: default question counts per exam mode."""

from pydantic import BaseModel, Field


class SessionConfig(BaseModel, frozen=True):
    exam_count: int = Field(default=20, ge=1)
    practice_count: int = Field(default=10, ge=1)
