"""
Entity Comparison

Scores two key/value entities for likely real-world equivalence.

Modules:
    similarity: Dice and Levenshtein scores for two normalized strings
    syntactic: Field alignment and aggregation of syntactic scores
    semantic: Optional LLM field checks and holistic analysis
    assembler: Merge into the final ComparisonVerdict
    comparator: EntityComparator running all phases

Match Decision:
    Only the overall Dice score is compared against the threshold. The
    Levenshtein score is reported but does not take part in the decision.
"""

from entity_resolution.comparison.comparator import EntityComparator, build_semantic_judge
from entity_resolution.comparison.semantic import (
    LLMSemanticJudge,
    NullSemanticJudge,
    SemanticJudge,
    annotate,
)
from entity_resolution.comparison.syntactic import compare_syntactic, is_syntactic_match

__all__ = [
    "EntityComparator",
    "build_semantic_judge",
    "SemanticJudge",
    "LLMSemanticJudge",
    "NullSemanticJudge",
    "annotate",
    "compare_syntactic",
    "is_syntactic_match",
]
