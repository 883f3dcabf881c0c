"""
Semantic Annotation

Optional LLM phase of an entity comparison.

For every field in the syntactic summary the judge is asked, independently
and concurrently, whether the two raw values mean the same thing. Once all
field checks have settled, the judge receives the full syntactic + semantic
evidence and returns a free-text holistic analysis.

Failures never escape this module: a failed field check, a failed holistic
call, or an unparsable answer is recorded in the SemanticAnnotation.

Judges:
    - LLMSemanticJudge: asks an LLMProvider
    - NullSemanticJudge: used when no API key was supplied; every field is
      marked as skipped without any call being made
"""

from __future__ import annotations

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from contextlib import nullcontext
from typing import TYPE_CHECKING, Any

from entity_resolution.types.comparison import (
    FieldComparison,
    SemanticAnnotation,
    SemanticCheck,
    SyntacticSummary,
)

if TYPE_CHECKING:
    from entity_resolution.providers.base import LLMProvider

logger = logging.getLogger(__name__)

SKIPPED_FIELD_ERROR = "Skipped (no API key)"
SKIPPED_ANALYSIS = "Semantic analysis skipped (no API key)."
SKIPPED_PROCESSING_ERROR = "API Key not provided. Skipping semantic analysis."
UNEXPECTED_RESPONSE_PREFIX = "Unexpected LLM response: "
EMPTY_RESPONSE_ERROR = "Empty LLM response"


# -----------------------------------------------------------------------------
# LLM Prompts
# -----------------------------------------------------------------------------

_FIELD_CHECK_PROMPT = """\
Decide whether these two values are semantically equivalent, i.e. whether they
express the same information even if written differently.
Reply with only "true" or "false".
Value 1: {value1}
Value 2: {value2}"""

_FINAL_ANALYSIS_PROMPT = """\
Using the syntactic and semantic comparison of each field below, decide whether
these two entities are likely to refer to the same real-world subject.
Give a brief analysis and a final judgment (likely match / unlikely match).

Comparison details:
{details}"""


def parse_equivalence(text: str | None) -> bool | str | None:
    """
    Parse a field-check answer.

    Returns:
        True/False for "true"/"false" (case-insensitive, surrounding whitespace
        ignored), None for no answer, otherwise the answer prefixed with
        UNEXPECTED_RESPONSE_PREFIX so it can be audited.
    """
    if text is None:
        return None
    answer = text.strip()
    if not answer:
        return None
    folded = answer.casefold()
    if folded == "true":
        return True
    if folded == "false":
        return False
    return f"{UNEXPECTED_RESPONSE_PREFIX}{answer}"


def _error_message(error: BaseException) -> str:
    return str(error) or "Unknown LLM error"


# -----------------------------------------------------------------------------
# Judges
# -----------------------------------------------------------------------------


class SemanticJudge(ABC):
    """Capability to judge semantic equivalence of values and entity pairs."""

    enabled: bool = True
    """False for judges that skip the semantic phase entirely."""

    @abstractmethod
    async def compare_values(self, value1: Any, value2: Any) -> bool | str | None:
        """Judge whether two raw field values are semantically equivalent."""
        ...

    @abstractmethod
    async def analyze(self, evidence: dict[str, Any]) -> str | None:
        """Free-text holistic judgment over the comparison evidence."""
        ...


class NullSemanticJudge(SemanticJudge):
    """Judge used when no API key was supplied."""

    enabled = False

    async def compare_values(self, value1: Any, value2: Any) -> bool | str | None:
        return None

    async def analyze(self, evidence: dict[str, Any]) -> str | None:
        return SKIPPED_ANALYSIS


class LLMSemanticJudge(SemanticJudge):
    """
    Judge backed by an LLM provider.

    Args:
        llm: Provider used for both field checks and the holistic analysis
        temperature: Sampling temperature for every call
    """

    def __init__(self, llm: "LLMProvider", *, temperature: float = 0.0) -> None:
        self.llm = llm
        self.temperature = temperature

    async def compare_values(self, value1: Any, value2: Any) -> bool | str | None:
        prompt = _FIELD_CHECK_PROMPT.format(
            value1=json.dumps(value1, ensure_ascii=False, default=str),
            value2=json.dumps(value2, ensure_ascii=False, default=str),
        )
        text = await self.llm.generate(prompt, temperature=self.temperature)
        return parse_equivalence(text)

    async def analyze(self, evidence: dict[str, Any]) -> str | None:
        prompt = _FINAL_ANALYSIS_PROMPT.format(
            details=json.dumps(evidence, indent=2, ensure_ascii=False, default=str),
        )
        return await self.llm.generate(prompt, temperature=self.temperature)


# -----------------------------------------------------------------------------
# Annotation
# -----------------------------------------------------------------------------


def skipped_annotation(summary: SyntacticSummary) -> SemanticAnnotation:
    """Annotation for a comparison made without an API key."""
    return SemanticAnnotation(
        field_checks={
            key: SemanticCheck(llm_says_equal=None, error=SKIPPED_FIELD_ERROR)
            for key in summary.field_details
        },
        final_analysis=SKIPPED_ANALYSIS,
        processing_error=SKIPPED_PROCESSING_ERROR,
    )


def failed_annotation(
    summary: SyntacticSummary,
    error: BaseException,
    partial: dict[str, SemanticCheck] | None = None,
) -> SemanticAnnotation:
    """
    Annotation for a semantic phase that could not run (or finish).

    Fields already checked keep their result; every other field carries the
    shared error.
    """
    processing_error = f"LLM Initialization or Processing Error: {_error_message(error)}"
    partial = partial or {}
    return SemanticAnnotation(
        field_checks={
            key: partial.get(key) or SemanticCheck(llm_says_equal=None, error=processing_error)
            for key in summary.field_details
        },
        final_analysis=f"Analysis skipped due to error: {processing_error}",
        processing_error=processing_error,
    )


def build_evidence(
    summary: SyntacticSummary,
    field_checks: dict[str, SemanticCheck],
) -> dict[str, Any]:
    """Evidence bundle handed to the holistic analysis."""
    return {
        "syntactic": summary.to_wire(),
        "semanticFieldChecks": {key: check.to_wire() for key, check in field_checks.items()},
    }


async def _check_fields(
    summary: SyntacticSummary,
    judge: SemanticJudge,
    concurrency: int,
) -> dict[str, SemanticCheck]:
    """Run all field checks concurrently; each task writes only its own key."""
    results: dict[str, SemanticCheck] = {}
    semaphore = asyncio.Semaphore(concurrency) if concurrency > 0 else None

    async def check_field(key: str, details: FieldComparison) -> None:
        try:
            async with semaphore if semaphore is not None else nullcontext():
                verdict = await judge.compare_values(details.value1, details.value2)
        except Exception as e:
            logger.warning(f"LLM error comparing field {key}: {e}")
            results[key] = SemanticCheck(llm_says_equal=None, error=_error_message(e))
            return

        error = EMPTY_RESPONSE_ERROR if verdict is None else None
        results[key] = SemanticCheck(llm_says_equal=verdict, error=error)

    keys = list(summary.field_details)
    tasks = [
        asyncio.create_task(check_field(key, summary.field_details[key]))
        for key in keys
    ]
    outcomes = await asyncio.gather(*tasks, return_exceptions=True)

    for key, outcome in zip(keys, outcomes):
        if isinstance(outcome, BaseException) and key not in results:
            logger.error(f"Field check task for {key} failed: {outcome}")
            results[key] = SemanticCheck(llm_says_equal=None, error=_error_message(outcome))

    # Preserve field order of the syntactic summary
    return {key: results[key] for key in keys}


async def annotate(
    summary: SyntacticSummary,
    judge: SemanticJudge,
    *,
    concurrency: int = 0,
) -> SemanticAnnotation:
    """
    Run the semantic phase for one entity pair.

    Args:
        summary: Syntactic comparison to annotate
        judge: Semantic judge (NullSemanticJudge skips the phase)
        concurrency: Max concurrent field checks (0 = unbounded)

    Returns:
        SemanticAnnotation with one check per field and the holistic analysis
    """
    if not judge.enabled:
        return skipped_annotation(summary)

    field_checks = await _check_fields(summary, judge, concurrency)

    evidence = build_evidence(summary, field_checks)
    try:
        final_analysis = await judge.analyze(evidence)
    except Exception as e:
        logger.error(f"LLM error during final analysis: {e}")
        final_analysis = f"Error during final analysis: {_error_message(e)}"

    return SemanticAnnotation(
        field_checks=field_checks,
        final_analysis=final_analysis,
        processing_error=None,
    )
