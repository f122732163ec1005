"""Structlog implementation of the SessionObserver port."""

import structlog


class StructlogSessionObserver:
    """Delegates session domain events to structlog.

    Satisfies the SessionObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def session_questions_selected(
        self, mode: str, requested: int, selected: int, deduplicated: bool
    ) -> None:
        self._log.info(
            "session.questions_selected",
            mode=mode,
            requested=requested,
            selected=selected,
            deduplicated=deduplicated,
        )

    def session_insufficient_questions(
        self, mode: str, domain: str | None, requested: int, available: int
    ) -> None:
        self._log.error(
            "session.insufficient_questions",
            mode=mode,
            domain=domain,
            requested=requested,
            available=available,
        )
