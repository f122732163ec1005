"""Events raised while starting a practice or exam session."""

from typing import Protocol


class SessionObserver(Protocol):
    def session_questions_selected(
        self, mode: str, requested: int, selected: int, deduplicated: bool
    ) -> None: ...

    def session_insufficient_questions(
        self, mode: str, domain: str | None, requested: int, available: int
    ) -> None: ...
