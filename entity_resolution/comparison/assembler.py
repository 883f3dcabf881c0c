"""
Verdict Assembler

Merges the syntactic summary and the semantic annotation into the
ComparisonVerdict returned to callers. No scoring happens here.
"""

from __future__ import annotations

import logging

from entity_resolution.comparison.syntactic import is_syntactic_match
from entity_resolution.types.comparison import (
    ComparisonVerdict,
    FieldVerdict,
    OverallSimilarity,
    SemanticAnnotation,
    SemanticCheck,
    SyntacticSummary,
)

logger = logging.getLogger(__name__)

NOT_PROCESSED_ERROR = "Not processed"


def explain_match(dice: float, threshold: float, is_match: bool) -> str:
    """Human-readable explanation of the syntactic match decision."""
    likelihood = "likely" if is_match else "unlikely"
    return (
        f"Entities are {likelihood} to be the same based ONLY on Dice similarity "
        f"({dice * 100:.2f}%) and threshold {threshold}."
    )


def assemble_verdict(
    summary: SyntacticSummary,
    annotation: SemanticAnnotation,
    threshold: float,
) -> ComparisonVerdict:
    """
    Build the final verdict for one entity pair.

    Args:
        summary: Syntactic comparison
        annotation: Semantic annotation (checks, holistic analysis, error)
        threshold: Dice threshold for the match decision

    Returns:
        ComparisonVerdict whose field_details has the same keys, in the same
        order, as summary.field_details
    """
    is_match = is_syntactic_match(summary, threshold)

    field_details: dict[str, FieldVerdict] = {}
    for key, details in summary.field_details.items():
        check = annotation.field_checks.get(key)
        if check is None:
            logger.warning(f"No semantic check recorded for field {key}")
            check = SemanticCheck(llm_says_equal=None, error=NOT_PROCESSED_ERROR)
        field_details[key] = FieldVerdict(
            **details.model_dump(),
            name=details.name,
            llm_semantic_check=check,
        )

    return ComparisonVerdict(
        overall_syntactic_similarity=OverallSimilarity(
            dice=summary.dice,
            levenshtein=summary.levenshtein,
        ),
        is_match_syntactic=is_match,
        threshold=threshold,
        match_details_syntactic=explain_match(summary.dice, threshold, is_match),
        field_details=field_details,
        final_llm_analysis=annotation.final_analysis,
        llm_processing_error=annotation.processing_error,
    )
