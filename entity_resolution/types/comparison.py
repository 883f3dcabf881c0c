"""
Comparison Types

Pydantic models for the entity comparison pipeline.

Pipeline Models:
    - FieldComparison: Syntactic scores for one shared field
    - SyntacticSummary: Aggregated syntactic scores for an entity pair
    - SemanticCheck: LLM verdict for one field
    - SemanticAnnotation: All LLM verdicts plus the holistic analysis

Response Models:
    - FieldVerdict: FieldComparison enriched with its SemanticCheck
    - ComparisonVerdict: Final document returned by the compare_entities tool

All models serialize with camelCase keys (by_alias=True), which is the wire
format of the tool result.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    """Immutable model with camelCase aliases."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """JSON-compatible dict using wire (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True)


# -----------------------------------------------------------------------------
# Syntactic Models
# -----------------------------------------------------------------------------


class FieldComparison(_WireModel):
    """
    Syntactic comparison of one field shared by both entities.

    Attributes:
        name: Field name (the key in field_details; not serialized)
        dice: Bigram Dice coefficient of the normalized values
        levenshtein: Normalized Levenshtein similarity of the normalized values
        normalized1: Normalized value from entity1
        normalized2: Normalized value from entity2
        value1: Raw value from entity1
        value2: Raw value from entity2
    """

    name: str = Field(exclude=True)
    dice: float = Field(ge=0.0, le=1.0)
    levenshtein: float = Field(ge=0.0, le=1.0)
    normalized1: str
    normalized2: str
    value1: Any = None
    value2: Any = None


class SyntacticSummary(_WireModel):
    """
    Syntactic comparison of an entity pair.

    field_details preserves entity1's key order. Both overall scores are 0.0
    when the entities share no field names.
    """

    dice: float = Field(default=0.0, ge=0.0, le=1.0)
    levenshtein: float = Field(default=0.0, ge=0.0, le=1.0)
    field_details: dict[str, FieldComparison] = Field(default_factory=dict)


# -----------------------------------------------------------------------------
# Semantic Models
# -----------------------------------------------------------------------------


class SemanticCheck(_WireModel):
    """
    LLM verdict for one field.

    llm_says_equal is True/False for a parsed answer, the raw text prefixed
    with "Unexpected LLM response: " for anything else, or None when no
    verdict was obtained (error then carries the reason).
    """

    llm_says_equal: bool | str | None = None
    error: str | None = None


class SemanticAnnotation(BaseModel):
    """Output of the semantic phase for one entity pair."""

    field_checks: dict[str, SemanticCheck] = Field(default_factory=dict)
    final_analysis: str | None = None
    processing_error: str | None = None


# -----------------------------------------------------------------------------
# Response Models
# -----------------------------------------------------------------------------


class OverallSimilarity(_WireModel):
    """Overall syntactic scores."""

    dice: float
    levenshtein: float


class FieldVerdict(FieldComparison):
    """Field comparison enriched with its semantic check."""

    llm_semantic_check: SemanticCheck


class ComparisonVerdict(_WireModel):
    """
    Result of comparing two entities.

    Attributes:
        overall_syntactic_similarity: Overall Dice and Levenshtein scores
        is_match_syntactic: overall Dice >= threshold
        threshold: Threshold used for the match decision
        match_details_syntactic: Human-readable explanation of the decision
        field_details: Per-field scores and semantic checks, in entity1 key order
        final_llm_analysis: Holistic LLM analysis, skip notice, or error text
        llm_processing_error: Top-level semantic processing error, if any
    """

    overall_syntactic_similarity: OverallSimilarity
    is_match_syntactic: bool
    threshold: float
    match_details_syntactic: str
    field_details: dict[str, FieldVerdict] = Field(default_factory=dict)
    final_llm_analysis: str | None = None
    llm_processing_error: str | None = None

    def to_json(self) -> str:
        """Pretty-printed JSON document in wire format."""
        return json.dumps(self.to_wire(), indent=2, ensure_ascii=False)
