"""Events raised while reading the question pool."""

from typing import Protocol


class QuestionObserver(Protocol):
    def questions_loading_started(self, path: str) -> None: ...

    def questions_loading_completed(self, path: str, total_questions: int) -> None: ...

    def questions_loading_failed(self, path: str, reason: str) -> None: ...
