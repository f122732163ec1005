"""Fake SessionObserver that records session events for assertions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class QuestionsSelectedEvent:
    mode: str
    requested: int
    selected: int
    deduplicated: bool


@dataclass(frozen=True)
class InsufficientQuestionsEvent:
    mode: str
    domain: str | None
    requested: int
    available: int


class FakeSessionObserver:
    def __init__(self) -> None:
        self.selected: list[QuestionsSelectedEvent] = []
        self.insufficient: list[InsufficientQuestionsEvent] = []

    def session_questions_selected(
        self, mode: str, requested: int, selected: int, deduplicated: bool
    ) -> None:
        self.selected.append(
            QuestionsSelectedEvent(
                mode=mode,
                requested=requested,
                selected=selected,
                deduplicated=deduplicated,
            )
        )

    def session_insufficient_questions(
        self, mode: str, domain: str | None, requested: int, available: int
    ) -> None:
        self.insufficient.append(
            InsufficientQuestionsEvent(
                mode=mode, domain=domain, requested=requested, available=available
            )
        )
