"""
Type Definitions

Pydantic models shared across the comparison pipeline and the MCP server.
"""

from entity_resolution.types.comparison import (
    ComparisonVerdict,
    FieldComparison,
    FieldVerdict,
    OverallSimilarity,
    SemanticAnnotation,
    SemanticCheck,
    SyntacticSummary,
)

__all__ = [
    "ComparisonVerdict",
    "FieldComparison",
    "FieldVerdict",
    "OverallSimilarity",
    "SemanticAnnotation",
    "SemanticCheck",
    "SyntacticSummary",
]
