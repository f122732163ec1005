"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, questions_path: str) -> None:
        self._log.info("config.loaded", name=name, questions_path=questions_path)

    def config_threshold_at_floor_warning(self, threshold: float) -> None:
        self._log.warning(
            "config.threshold_at_floor_warning",
            threshold=threshold,
            message="Similarity threshold is at or below the relaxation floor; "
            "short question sets will not be retried",
        )
