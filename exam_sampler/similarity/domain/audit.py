"""Pool audit: lists every near-duplicate pair inside a question pool."""

from pydantic import BaseModel, Field

from exam_sampler.core.errors import ExamSamplerError
from exam_sampler.question.domain.question import Question
from exam_sampler.similarity.domain.engine import DEFAULT_SIMILARITY_THRESHOLD, compare


class DuplicatePair(BaseModel, frozen=True):
    """Two pool entries classified as duplicates of each other."""

    first_id: str
    second_id: str
    second_stem: str
    similarity_score: float = Field(ge=0.0, le=1.0)


class DuplicateQuestionsError(ExamSamplerError):
    """Raised when a pool that must be duplicate-free contains duplicates."""

    def __init__(self, duplicates: list[DuplicatePair]) -> None:
        self.duplicates = duplicates
        details = "; ".join(
            f"{pair.first_id} ~ {pair.second_id} "
            f"(score {pair.similarity_score:.2f}): {pair.second_stem}"
            for pair in duplicates
        )
        super().__init__(
            f"Found {len(duplicates)} duplicate question(s): {details}"
        )


def find_duplicates(
    questions: list[Question],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    check_choices: bool = True,
) -> list[DuplicatePair]:
    """Return every duplicate pair, in pool order (earlier entry first)."""
    pairs: list[DuplicatePair] = []
    for i, first in enumerate(questions):
        for second in questions[i + 1 :]:
            verdict = compare(
                first, second, threshold=threshold, check_choices=check_choices
            )
            if verdict.is_duplicate and verdict.similarity_score is not None:
                pairs.append(
                    DuplicatePair(
                        first_id=first.id,
                        second_id=second.id,
                        second_stem=second.stem,
                        similarity_score=verdict.similarity_score,
                    )
                )
    return pairs


def ensure_no_duplicates(
    questions: list[Question],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    check_choices: bool = True,
) -> None:
    """
    Raises:
        DuplicateQuestionsError: listing every duplicate pair found.
    """
    pairs = find_duplicates(
        questions=questions, threshold=threshold, check_choices=check_choices
    )
    if pairs:
        raise DuplicateQuestionsError(duplicates=pairs)
