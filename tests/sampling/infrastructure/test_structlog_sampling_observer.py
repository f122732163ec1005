"""Tests for StructlogSamplingObserver log levels and event names."""

from structlog.testing import capture_logs

from exam_sampler.sampling.infrastructure.observer import StructlogSamplingObserver


def test_rejection_is_logged_at_debug_with_rounded_score() -> None:
    with capture_logs() as logs:
        StructlogSamplingObserver().candidate_rejected(
            question_id="q002", matched_id="q001", similarity_score=0.97412
        )

    assert logs == [
        {
            "event": "sampling.candidate_rejected",
            "log_level": "debug",
            "question_id": "q002",
            "matched_id": "q001",
            "similarity_score": 0.974,
        }
    ]


def test_relaxation_is_logged_as_warning() -> None:
    with capture_logs() as logs:
        StructlogSamplingObserver().threshold_relaxed(
            attempt=1, old_threshold=0.8, new_threshold=0.7, accepted=1, requested=3
        )

    assert logs[0]["event"] == "sampling.threshold_relaxed"
    assert logs[0]["log_level"] == "warning"


def test_short_result_is_logged_as_warning() -> None:
    with capture_logs() as logs:
        observer = StructlogSamplingObserver()
        observer.sampling_completed(
            accepted=1, requested=3, final_threshold=0.5, attempts=4
        )
        observer.sampling_completed(
            accepted=3, requested=3, final_threshold=0.8, attempts=1
        )

    assert [entry["log_level"] for entry in logs] == ["warning", "info"]
