"""
Entity Syntactic Comparison

Aligns two entities on their shared field names and scores each shared field
with both similarity metrics.

Steps:
    1. Shared keys: entity1's keys, in order, that also appear in entity2
    2. Normalize both values and score them (Dice + Levenshtein)
    3. Aggregate per-field scores into weighted means

Only the Dice mean decides a syntactic match. The Levenshtein mean is
reported alongside it but never enters the decision.

Example:
    >>> summary = compare_syntactic({"city": "New York"}, {"city": "new york!"})
    >>> summary.dice
    1.0
    >>> is_syntactic_match(summary, 0.8)
    True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from entity_resolution.comparison.similarity import score_field
from entity_resolution.types.comparison import FieldComparison, SyntacticSummary
from entity_resolution.utils.text import normalize_text

DEFAULT_FIELD_WEIGHT = 1.0
"""Weight for any field without an explicit entry in the weights mapping."""


def shared_fields(entity1: Mapping[str, Any], entity2: Mapping[str, Any]) -> list[str]:
    """Field names present in both entities, in entity1's order."""
    return [key for key in entity1 if key in entity2]


def compare_syntactic(
    entity1: Mapping[str, Any],
    entity2: Mapping[str, Any],
    *,
    weights: Mapping[str, float] | None = None,
) -> SyntacticSummary:
    """
    Compare two entities field by field.

    Args:
        entity1: First entity (field name -> value)
        entity2: Second entity (field name -> value)
        weights: Optional per-field weights. Fields not listed use
                 DEFAULT_FIELD_WEIGHT, so every field currently counts equally.

    Returns:
        SyntacticSummary with overall weighted means and per-field details.
        Entities without shared fields yield zero scores and no details.
    """
    weights = weights or {}
    keys = shared_fields(entity1, entity2)
    if not keys:
        return SyntacticSummary(dice=0.0, levenshtein=0.0, field_details={})

    total_weight = 0.0
    weighted_dice = 0.0
    weighted_levenshtein = 0.0
    field_details: dict[str, FieldComparison] = {}

    for key in keys:
        value1 = entity1[key]
        value2 = entity2[key]
        normalized1 = normalize_text(value1)
        normalized2 = normalize_text(value2)
        dice, levenshtein = score_field(normalized1, normalized2)

        weight = weights.get(key, DEFAULT_FIELD_WEIGHT)
        total_weight += weight
        weighted_dice += dice * weight
        weighted_levenshtein += levenshtein * weight

        field_details[key] = FieldComparison(
            name=key,
            dice=dice,
            levenshtein=levenshtein,
            normalized1=normalized1,
            normalized2=normalized2,
            value1=value1,
            value2=value2,
        )

    overall_dice = weighted_dice / total_weight if total_weight > 0 else 0.0
    overall_levenshtein = weighted_levenshtein / total_weight if total_weight > 0 else 0.0

    return SyntacticSummary(
        dice=overall_dice,
        levenshtein=overall_levenshtein,
        field_details=field_details,
    )


def is_syntactic_match(summary: SyntacticSummary, threshold: float) -> bool:
    """Match decision: overall Dice score at or above the threshold."""
    return summary.dice >= threshold
