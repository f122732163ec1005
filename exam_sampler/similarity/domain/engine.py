"""Similarity engine: decides whether two questions are near-duplicates.

Rules are applied in order and the first match wins:

1. same id                      -> duplicate, score 1.0
2. identical stem (no trimming) -> duplicate, score 1.0
3. stem text similarity >= threshold -> duplicate, score = similarity
4. choice texts match (optional) -> duplicate, score CHOICE_MATCH_SCORE
5. otherwise                    -> not a duplicate
"""

from exam_sampler.question.domain.question import Question
from exam_sampler.similarity.domain.edit_distance import normalize, text_similarity
from exam_sampler.similarity.domain.verdict import NOT_DUPLICATE, DuplicationVerdict

DEFAULT_SIMILARITY_THRESHOLD = 0.8

# Choice-based matches are a weaker signal than stem matches and are reported
# with a fixed, lower score.
CHOICE_MATCH_SCORE = 0.7
# A sorted choice pair counts as matching at or above this similarity.
CHOICE_POSITION_THRESHOLD = 0.8
# Fraction of matching choice pairs needed to flag the questions.
CHOICE_MATCH_RATIO = 0.8


def compare(
    a: Question,
    b: Question,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    check_choices: bool = True,
) -> DuplicationVerdict:
    """
    Compare two questions and return a DuplicationVerdict.

    ``matched`` on a duplicate verdict is ``b``, the question compared against.

    Raises:
        ValueError: if threshold is outside (0, 1].
    """
    if not 0.0 < threshold <= 1.0:
        raise ValueError(f"similarity threshold must be in (0, 1], got {threshold}")

    if a.id == b.id or a.stem == b.stem:
        return DuplicationVerdict(is_duplicate=True, similarity_score=1.0, matched=b)

    similarity = text_similarity(a.stem, b.stem)
    if similarity >= threshold:
        return DuplicationVerdict(
            is_duplicate=True, similarity_score=similarity, matched=b
        )

    if check_choices and choices_match(a, b):
        return DuplicationVerdict(
            is_duplicate=True, similarity_score=CHOICE_MATCH_SCORE, matched=b
        )

    return NOT_DUPLICATE


def choices_match(a: Question, b: Question) -> bool:
    """True when the two choice sets are near-identical, ignoring their labels.

    Choice texts are normalized, sorted, and paired by position. Questions with a
    different number of choices never match.
    """
    left = sorted(normalize(text) for text in a.choices.values())
    right = sorted(normalize(text) for text in b.choices.values())
    if len(left) != len(right) or not left:
        return False

    matching = sum(
        1
        for first, second in zip(left, right, strict=True)
        if text_similarity(first, second) >= CHOICE_POSITION_THRESHOLD
    )
    return matching / len(left) >= CHOICE_MATCH_RATIO
