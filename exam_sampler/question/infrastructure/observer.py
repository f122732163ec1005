"""Structlog implementation of the QuestionObserver port."""

import structlog


class StructlogQuestionObserver:
    """Delegates question domain events to structlog.

    Satisfies the QuestionObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def questions_loading_started(self, path: str) -> None:
        self._log.info("questions.loading_started", path=path)

    def questions_loading_completed(self, path: str, total_questions: int) -> None:
        self._log.info(
            "questions.loading_completed",
            path=path,
            total_questions=total_questions,
        )

    def questions_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("questions.loading_failed", path=path, reason=reason)
