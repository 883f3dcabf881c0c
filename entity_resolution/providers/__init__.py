"""
LLM Providers

Provider-agnostic interface for the LLM calls made during semantic comparison.

Modules:
    base: Abstract provider interface
    llm/: Provider implementations

Supported LLM Providers:
    - Google (gemini-2.5-flash) via google-genai
    - OpenAI (gpt-4o-mini) via LangChain

Design:
    - All providers implement LLMProvider
    - Lazy import to avoid requiring all dependencies
    - Providers are built per request from the caller's API key

Example:
    >>> from entity_resolution.providers import create_llm_provider
    >>> llm = create_llm_provider("google", api_key="...", model="gemini-2.5-flash")
    >>> await llm.generate("Reply with true or false: is 2 + 2 = 4?")
"""

from entity_resolution.providers.base import LLMProvider


def create_llm_provider(provider: str, *, api_key: str, model: str) -> LLMProvider:
    """
    Build an LLM provider by name.

    Args:
        provider: "google" or "openai"
        api_key: Caller-supplied API key
        model: Model name for the provider

    Raises:
        ValueError: If the provider name is unknown or the API key is empty
        ImportError: If the provider's SDK is not installed
    """
    if not api_key or not api_key.strip():
        raise ValueError("API key must be a non-empty string")

    name = provider.lower()
    if name == "google":
        from entity_resolution.providers.llm.google import GoogleLLMProvider
        return GoogleLLMProvider(api_key=api_key, model=model)
    if name == "openai":
        from entity_resolution.providers.llm.openai import OpenAILLMProvider
        return OpenAILLMProvider(api_key=api_key, model=model)

    raise ValueError(f"Unknown LLM provider: {provider!r}. Use: google, openai")


__all__ = ["LLMProvider", "create_llm_provider"]
