"""Tests for field similarity metrics."""

import pytest

from entity_resolution.comparison.similarity import (
    dice_coefficient,
    levenshtein_similarity,
    score_field,
)


class TestDiceCoefficient:
    """Tests for the bigram Dice coefficient."""

    def test_identical_strings(self):
        assert dice_coefficient("new york", "new york") == 1.0

    def test_both_empty(self):
        assert dice_coefficient("", "") == 1.0

    def test_completely_different(self):
        assert dice_coefficient("abc", "xyz") == 0.0

    def test_single_character_has_no_bigrams(self):
        assert dice_coefficient("a", "ab") == 0.0
        assert dice_coefficient("", "ab") == 0.0

    def test_whitespace_ignored(self):
        assert dice_coefficient("new york", "newyork") == 1.0

    def test_known_value(self):
        # johnsmith: jo oh hn ns sm mi it th / jonsmith: jo on ns sm mi it th
        assert dice_coefficient("john smith", "jon smith") == pytest.approx(0.8)

    def test_repeated_bigrams_counted_as_multiset(self):
        # aaaa -> aa x3, aa -> aa x1: overlap 1
        assert dice_coefficient("aaaa", "aa") == pytest.approx(2 * 1 / (3 + 1))

    def test_symmetric(self):
        assert dice_coefficient("healed", "sealed") == dice_coefficient("sealed", "healed")

    @pytest.mark.parametrize(
        "first,second",
        [("france", "french"), ("abc", "abcabc"), ("東京都", "東京"), ("x", "y")],
    )
    def test_in_unit_range(self, first, second):
        assert 0.0 <= dice_coefficient(first, second) <= 1.0


class TestLevenshteinSimilarity:
    """Tests for normalized Levenshtein similarity."""

    def test_identical_strings(self):
        assert levenshtein_similarity("new york", "new york") == 1.0

    def test_both_empty(self):
        assert levenshtein_similarity("", "") == 1.0

    def test_one_empty(self):
        assert levenshtein_similarity("", "abc") == 0.0

    def test_single_deletion(self):
        assert levenshtein_similarity("john smith", "jon smith") == pytest.approx(0.9)

    def test_substitution_costs_one(self):
        assert levenshtein_similarity("kitten", "sitten") == pytest.approx(1 - 1 / 6)

    def test_kitten_sitting(self):
        assert levenshtein_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_symmetric(self):
        assert levenshtein_similarity("abc", "abd") == levenshtein_similarity("abd", "abc")


class TestScoreField:
    """Tests for score_field."""

    def test_returns_both_scores(self):
        dice, levenshtein = score_field("john smith", "jon smith")
        assert dice == pytest.approx(0.8)
        assert levenshtein == pytest.approx(0.9)

    def test_identical(self):
        assert score_field("30", "30") == (1.0, 1.0)
