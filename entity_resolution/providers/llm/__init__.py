"""
LLM Provider Implementations

Modules:
    google: Google provider (gemini-2.5-flash) via google-genai
    openai: OpenAI provider (gpt-4o-mini) via LangChain

Each provider implements the LLMProvider interface with:
    - generate(): Text completion
    - model_name: Current model

Example:
    >>> from entity_resolution.providers.llm import GoogleLLMProvider
    >>> provider = GoogleLLMProvider(api_key="...", model="gemini-2.5-flash")
    >>> response = await provider.generate("Hello!")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from entity_resolution.providers.llm.google import GoogleLLMProvider
    from entity_resolution.providers.llm.openai import OpenAILLMProvider


def __getattr__(name: str):
    """Lazy import of providers to avoid requiring all dependencies."""
    if name == "GoogleLLMProvider":
        from entity_resolution.providers.llm.google import GoogleLLMProvider
        return GoogleLLMProvider
    if name == "OpenAILLMProvider":
        from entity_resolution.providers.llm.openai import OpenAILLMProvider
        return OpenAILLMProvider
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["GoogleLLMProvider", "OpenAILLMProvider"]
