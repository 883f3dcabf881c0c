"""
Field Similarity Scoring

Two independent string metrics computed over normalized field values:

    - Dice coefficient over character bigrams (whitespace ignored)
    - Levenshtein similarity: 1 - distance / max(len1, len2)

Both are symmetric, lie in [0, 1], and score identical strings as 1.0.
"""

from __future__ import annotations

from collections import Counter

from rapidfuzz.distance import Levenshtein


def _bigrams(text: str) -> Counter[str]:
    return Counter(text[i:i + 2] for i in range(len(text) - 1))


def dice_coefficient(first: str, second: str) -> float:
    """
    Dice coefficient over the bigram multisets of two strings.

    Whitespace is removed before comparison. Identical strings (including two
    empty strings) score 1.0; a string shorter than two characters has no
    bigrams and scores 0.0 against anything but itself.

    Example:
        >>> dice_coefficient("john smith", "jon smith")
        0.8
    """
    first = "".join(first.split())
    second = "".join(second.split())

    if first == second:
        return 1.0
    if len(first) < 2 or len(second) < 2:
        return 0.0

    first_bigrams = _bigrams(first)
    second_bigrams = _bigrams(second)
    overlap = sum((first_bigrams & second_bigrams).values())

    return (2.0 * overlap) / (len(first) + len(second) - 2)


def levenshtein_similarity(first: str, second: str) -> float:
    """Edit-distance similarity with unit insert/delete/substitute costs."""
    max_length = max(len(first), len(second))
    if max_length == 0:
        return 1.0
    distance = Levenshtein.distance(first, second, weights=(1, 1, 1))
    return 1.0 - (distance / max_length)


def score_field(first: str, second: str) -> tuple[float, float]:
    """
    Score two normalized field values.

    Returns:
        (dice, levenshtein)
    """
    return dice_coefficient(first, second), levenshtein_similarity(first, second)
