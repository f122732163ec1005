"""Edit distance and the normalized text similarity derived from it."""


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit cost for insertion, deletion and substitution.

    Uses the two-row dynamic-programming table, so memory is O(min(len(a), len(b))).
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            substitution = previous[j - 1] + (char_a != char_b)
            current.append(min(previous[j] + 1, current[j - 1] + 1, substitution))
        previous = current
    return previous[-1]


def normalize(text: str) -> str:
    return text.strip().lower()


def text_similarity(a: str, b: str) -> float:
    """
    Similarity in [0, 1] between two strings after lower-casing and trimming.

    Defined as ``1 - distance / max(len(a), len(b))``. Two strings that are both
    empty after normalization are identical, so the result is 1.0.
    """
    left = normalize(a)
    right = normalize(b)
    max_length = max(len(left), len(right))
    if max_length == 0:
        return 1.0
    return 1.0 - edit_distance(left, right) / max_length
