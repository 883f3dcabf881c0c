"""
Entity Resolution - MCP server for pairwise entity comparison

Scores two arbitrary key/value records for likely real-world equivalence
using field-wise syntactic similarity, optionally enriched with a semantic
judgment from an LLM.

Example:
    >>> from entity_resolution import EntityComparator
    >>> comparator = EntityComparator()
    >>> verdict = await comparator.compare(
    ...     {"name": "John Smith", "age": "30"},
    ...     {"name": "Jon Smith", "age": "30"},
    ... )
    >>> print(verdict.is_match_syntactic)

Main Classes:
    EntityComparator: Runs syntactic + semantic comparison for one entity pair
    ResolverConfig: Configuration management

Usage:
    python -m entity_resolution.mcp
"""

__version__ = "0.2.1"

# Public API - lazy imports to avoid loading optional dependencies
def __getattr__(name: str):
    """Lazy import public API components."""

    if name == "EntityComparator":
        from entity_resolution.comparison.comparator import EntityComparator
        return EntityComparator

    if name == "ResolverConfig":
        from entity_resolution.config.settings import ResolverConfig
        return ResolverConfig

    # Types
    if name in ("ComparisonVerdict", "FieldComparison", "SemanticCheck", "SyntacticSummary"):
        from entity_resolution import types
        return getattr(types, name)

    raise AttributeError(f"module 'entity_resolution' has no attribute {name!r}")


__all__ = [
    # Main classes
    "EntityComparator",
    "ResolverConfig",

    # Types
    "ComparisonVerdict",
    "FieldComparison",
    "SemanticCheck",
    "SyntacticSummary",

    # Version
    "__version__",
]
