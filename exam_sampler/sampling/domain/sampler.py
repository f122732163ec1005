"""DeduplicatedSampler: picks a random question set with no near-duplicate pairs."""

from exam_sampler.question.domain.question import Question
from exam_sampler.sampling.domain.observer import SamplingObserver
from exam_sampler.sampling.domain.random_source import RandomSource
from exam_sampler.sampling.domain.request import SamplingRequest
from exam_sampler.similarity.domain.engine import compare
from exam_sampler.similarity.domain.verdict import DuplicationVerdict

# Relaxation stops once the threshold reaches this value.
THRESHOLD_FLOOR = 0.5
RELAXATION_STEP = 0.1
# Upper bound on sampling passes regardless of threshold arithmetic.
MAX_ATTEMPTS = 10


def filter_pool(pool: list[Question], request: SamplingRequest) -> list[Question]:
    """Return the pool entries matching the request's language and domain filters."""
    return [
        q
        for q in pool
        if (request.lang is None or q.lang == request.lang)
        and (request.domain is None or q.domain == request.domain)
    ]


class DeduplicatedSampler:
    """Draws questions in random order, keeping only those unlike every accepted one.

    When a pass over the shuffled candidates ends short of the requested count,
    the similarity threshold is lowered by RELAXATION_STEP and the whole pass is
    repeated from a fresh shuffle. Relaxation stops at THRESHOLD_FLOOR; whatever
    was accepted on the last pass is returned, which may be fewer questions than
    requested. Callers decide whether a short result is an error.

    The pool is never modified; the returned list is new and owned by the caller.
    """

    def __init__(self, observer: SamplingObserver, rng: RandomSource) -> None:
        self._observer = observer
        self._rng = rng

    def sample(self, pool: list[Question], request: SamplingRequest) -> list[Question]:
        """Return up to ``request.count`` questions, in acceptance order."""
        candidates = filter_pool(pool=pool, request=request)
        threshold = request.threshold
        self._observer.sampling_started(
            requested=request.count,
            candidates=len(candidates),
            threshold=threshold,
        )

        attempt = 1
        while True:
            accepted = self._pick_unique(
                candidates=candidates,
                count=request.count,
                threshold=threshold,
                check_choices=request.check_choices,
            )
            if (
                len(accepted) >= request.count
                or threshold <= THRESHOLD_FLOOR
                or attempt >= MAX_ATTEMPTS
            ):
                break

            relaxed = round(threshold - RELAXATION_STEP, 1)
            self._observer.threshold_relaxed(
                attempt=attempt,
                old_threshold=threshold,
                new_threshold=relaxed,
                accepted=len(accepted),
                requested=request.count,
            )
            threshold = relaxed
            attempt += 1

        self._observer.sampling_completed(
            accepted=len(accepted),
            requested=request.count,
            final_threshold=threshold,
            attempts=attempt,
        )
        return accepted

    def sample_random(
        self, pool: list[Question], request: SamplingRequest
    ) -> list[Question]:
        """Return up to ``request.count`` filtered questions without duplicate checks."""
        candidates = filter_pool(pool=pool, request=request)
        self._rng.shuffle(candidates)
        return candidates[: request.count]

    def _pick_unique(
        self,
        candidates: list[Question],
        count: int,
        threshold: float,
        check_choices: bool,
    ) -> list[Question]:
        """One pass: shuffle, then accept each candidate unlike all accepted so far."""
        shuffled = list(candidates)
        self._rng.shuffle(shuffled)

        accepted: list[Question] = []
        for candidate in shuffled:
            if len(accepted) >= count:
                break
            verdict = self._first_duplicate(
                candidate=candidate,
                accepted=accepted,
                threshold=threshold,
                check_choices=check_choices,
            )
            if verdict is None:
                accepted.append(candidate)
            elif verdict.matched is not None and verdict.similarity_score is not None:
                self._observer.candidate_rejected(
                    question_id=candidate.id,
                    matched_id=verdict.matched.id,
                    similarity_score=verdict.similarity_score,
                )
        return accepted

    def _first_duplicate(
        self,
        candidate: Question,
        accepted: list[Question],
        threshold: float,
        check_choices: bool,
    ) -> DuplicationVerdict | None:
        for existing in accepted:
            verdict = compare(
                candidate, existing, threshold=threshold, check_choices=check_choices
            )
            if verdict.is_duplicate:
                return verdict
        return None
