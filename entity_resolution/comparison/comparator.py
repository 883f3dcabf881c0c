"""
Entity Comparator

Runs the three phases of a comparison for one entity pair:

    1. Syntactic: normalize + score shared fields (always, local)
    2. Semantic: per-field LLM checks + holistic analysis (only with an API key)
    3. Assembly: merge into a ComparisonVerdict

Example:
    >>> comparator = EntityComparator()
    >>> verdict = await comparator.compare(
    ...     {"name": "John Smith", "age": "30"},
    ...     {"name": "Jon Smith", "age": "30"},
    ... )
    >>> verdict.overall_syntactic_similarity.dice
    0.9
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

from entity_resolution.comparison.assembler import assemble_verdict
from entity_resolution.comparison.semantic import (
    LLMSemanticJudge,
    NullSemanticJudge,
    SemanticJudge,
    annotate,
    failed_annotation,
)
from entity_resolution.comparison.syntactic import compare_syntactic
from entity_resolution.config.settings import ResolverConfig
from entity_resolution.providers import create_llm_provider
from entity_resolution.types.comparison import (
    ComparisonVerdict,
    SemanticAnnotation,
    SyntacticSummary,
)

logger = logging.getLogger(__name__)


def build_semantic_judge(api_key: str | None, config: ResolverConfig) -> SemanticJudge:
    """
    Build the semantic judge for one request.

    Without an API key the NullSemanticJudge is returned. Otherwise an LLM
    provider is constructed for the configured backend, which may raise if
    the key or SDK is unusable.
    """
    if not api_key:
        return NullSemanticJudge()

    llm = create_llm_provider(
        config.llm_provider,
        api_key=api_key,
        model=config.resolved_llm_model,
    )
    return LLMSemanticJudge(llm, temperature=config.llm_temperature)


class EntityComparator:
    """
    Compares two entities syntactically and, optionally, semantically.

    Holds only configuration; every compare() call is independent.

    Args:
        config: Resolver configuration (defaults to ResolverConfig())
    """

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self.config = config or ResolverConfig()

    async def compare(
        self,
        entity1: Mapping[str, Any],
        entity2: Mapping[str, Any],
        *,
        threshold: float | None = None,
        api_key: str | None = None,
        judge: SemanticJudge | None = None,
    ) -> ComparisonVerdict:
        """
        Compare two entities.

        Args:
            entity1: First entity (field name -> value)
            entity2: Second entity (field name -> value)
            threshold: Dice threshold for the match decision
                       (defaults to config.default_threshold)
            api_key: API key enabling the semantic phase
            judge: Explicit semantic judge, bypassing api_key

        Returns:
            ComparisonVerdict. Semantic failures are reported inside it and
            never raised.
        """
        if threshold is None:
            threshold = self.config.default_threshold

        start = time.perf_counter_ns()
        summary = compare_syntactic(entity1, entity2)
        syntactic_ms = (time.perf_counter_ns() - start) // 1_000_000
        logger.info(
            f"Syntactic: {len(summary.field_details)} shared fields, "
            f"dice={summary.dice:.4f}, levenshtein={summary.levenshtein:.4f}, "
            f"{syntactic_ms}ms"
        )

        start = time.perf_counter_ns()
        annotation = await self._annotate(summary, api_key=api_key, judge=judge)
        semantic_ms = (time.perf_counter_ns() - start) // 1_000_000
        logger.info(
            f"Semantic: processing_error={annotation.processing_error is not None}, "
            f"{semantic_ms}ms"
        )

        return assemble_verdict(summary, annotation, threshold)

    async def _annotate(
        self,
        summary: SyntacticSummary,
        *,
        api_key: str | None,
        judge: SemanticJudge | None,
    ) -> SemanticAnnotation:
        try:
            if judge is None:
                judge = build_semantic_judge(api_key, self.config)
            return await annotate(
                summary,
                judge,
                concurrency=self.config.semantic_concurrency,
            )
        except Exception as e:
            logger.error(f"Error during LLM processing: {e}")
            return failed_annotation(summary, e)
