"""Question domain value object: one multiple-choice exam question."""

from collections.abc import Mapping
from datetime import UTC, datetime
from enum import StrEnum
from types import MappingProxyType

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

type ChoiceLabel = str
type QuestionId = str


class Domain(StrEnum):
    """Exam domains (categories) a question may belong to."""

    CLOUD_CONCEPTS = "cloud_concepts"
    SECURITY = "security"
    TECHNOLOGY = "technology"
    BILLING = "billing"


def _now() -> datetime:
    return datetime.now(UTC)


class Question(BaseModel):
    """Immutable value object representing a single exam question.

    Construction validates every invariant up front, so a Question instance is
    always complete: a stem with visible text, at least one choice, and an
    answer label that is one of the choice keys. The choice mapping is a
    read-only view, so the answer can never lose its label after construction.

    ``updated_at`` also accepts the camelCase ``updatedAt`` key used by the
    question files. Epoch integers are read as seconds or milliseconds.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: QuestionId = Field(min_length=1)
    lang: str = Field(min_length=1)
    domain: Domain
    stem: str
    choices: Mapping[ChoiceLabel, str] = Field(min_length=1)
    answer: ChoiceLabel
    explanation: str = ""
    updated_at: datetime = Field(default_factory=_now, alias="updatedAt")

    @field_validator("stem")
    @classmethod
    def _stem_has_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question stem is required")
        return value

    @field_validator("choices")
    @classmethod
    def _choices_are_read_only(
        cls, value: Mapping[ChoiceLabel, str]
    ) -> Mapping[ChoiceLabel, str]:
        return MappingProxyType(dict(value))

    @field_serializer("choices")
    def _serialize_choices(
        self, value: Mapping[ChoiceLabel, str]
    ) -> dict[ChoiceLabel, str]:
        return dict(value)

    @field_validator("explanation", mode="before")
    @classmethod
    def _explanation_defaults_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @model_validator(mode="after")
    def _answer_is_a_choice(self) -> "Question":
        if self.answer not in self.choices:
            labels = ", ".join(self.choices)
            raise ValueError(f"answer '{self.answer}' is not in choices: {labels}")
        return self
