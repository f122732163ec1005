"""Tests for edit distance and normalized text similarity."""

import pytest

from exam_sampler.similarity.domain.edit_distance import edit_distance, text_similarity


class TestEditDistance:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("", "abc", 3),
            ("abc", "", 3),
            ("", "", 0),
            ("same", "same", 0),
            ("正しいもの", "正しいもの、", 1),
        ],
    )
    def test_known_distances(self, a: str, b: str, expected: int) -> None:
        assert edit_distance(a, b) == expected

    def test_is_symmetric(self) -> None:
        assert edit_distance("intention", "execution") == edit_distance(
            "execution", "intention"
        )


class TestTextSimilarity:
    def test_identical_strings_are_fully_similar(self) -> None:
        assert text_similarity("Amazon S3", "Amazon S3") == 1.0

    def test_comparison_ignores_case_and_surrounding_whitespace(self) -> None:
        assert text_similarity("  Amazon S3 ", "amazon s3") == 1.0

    def test_both_empty_after_normalization_is_fully_similar(self) -> None:
        assert text_similarity("", "   ") == 1.0

    def test_one_empty_string_is_fully_dissimilar(self) -> None:
        assert text_similarity("", "abc") == 0.0

    def test_similarity_uses_longer_length(self) -> None:
        # kitten -> sitting is 3 edits over 7 characters
        assert text_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_is_symmetric(self) -> None:
        a = "Which AWS service provides scalable object storage?"
        b = "What does the shared responsibility model assign to the customer?"
        assert text_similarity(a, b) == text_similarity(b, a)
