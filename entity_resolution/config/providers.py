"""
Provider Configurations

Default model for each LLM provider.

When a provider is selected without an explicit model, its default applies:
    >>> config = ResolverConfig(llm_provider="openai")
    >>> config.llm_model
    'gpt-4o-mini'
"""

# Provider default models
PROVIDER_DEFAULTS = {
    "google": {
        "llm_model": "gemini-2.5-flash",
    },
    "openai": {
        "llm_model": "gpt-4o-mini",
    },
}
