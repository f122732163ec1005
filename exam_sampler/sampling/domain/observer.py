"""Events raised while sampling a question set."""

from typing import Protocol


class SamplingObserver(Protocol):
    """Observer port emitting structured events while a question set is sampled.

    Implementations may log to structlog or record for tests.
    """

    def sampling_started(
        self, requested: int, candidates: int, threshold: float
    ) -> None: ...

    def candidate_rejected(
        self, question_id: str, matched_id: str, similarity_score: float
    ) -> None: ...

    def threshold_relaxed(
        self,
        attempt: int,
        old_threshold: float,
        new_threshold: float,
        accepted: int,
        requested: int,
    ) -> None: ...

    def sampling_completed(
        self,
        accepted: int,
        requested: int,
        final_threshold: float,
        attempts: int,
    ) -> None: ...
