"""StructlogSamplingObserver: production observer that delegates to structlog."""

import structlog


class StructlogSamplingObserver:
    """Logs sampling domain events to structlog.

    Does NOT inherit from SamplingObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def sampling_started(self, requested: int, candidates: int, threshold: float) -> None:
        self._log.info(
            "sampling.started",
            requested=requested,
            candidates=candidates,
            threshold=threshold,
        )

    def candidate_rejected(
        self, question_id: str, matched_id: str, similarity_score: float
    ) -> None:
        self._log.debug(
            "sampling.candidate_rejected",
            question_id=question_id,
            matched_id=matched_id,
            similarity_score=round(similarity_score, 3),
        )

    def threshold_relaxed(
        self,
        attempt: int,
        old_threshold: float,
        new_threshold: float,
        accepted: int,
        requested: int,
    ) -> None:
        self._log.warning(
            "sampling.threshold_relaxed",
            attempt=attempt,
            old_threshold=old_threshold,
            new_threshold=new_threshold,
            accepted=accepted,
            requested=requested,
        )

    def sampling_completed(
        self,
        accepted: int,
        requested: int,
        final_threshold: float,
        attempts: int,
    ) -> None:
        log = self._log.warning if accepted < requested else self._log.info
        log(
            "sampling.completed",
            accepted=accepted,
            requested=requested,
            final_threshold=final_threshold,
            attempts=attempts,
        )
