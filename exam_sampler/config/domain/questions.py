"""Question source configuration model."""

from pathlib import Path

from pydantic import BaseModel


class QuestionSourceConfig(BaseModel, frozen=True):
    path: Path
