"""
ResolverConfig - Configuration Management

Sensible defaults with full override capability.

Example:
    >>> # Use defaults (reads from environment)
    >>> comparator = EntityComparator()

    >>> # Explicit configuration
    >>> config = ResolverConfig(llm_provider="openai", semantic_concurrency=4)
    >>> comparator = EntityComparator(config)

    >>> # From config file
    >>> config = ResolverConfig.from_file("./resolver.toml")

Environment Variables:
    ER_LLM_PROVIDER - LLM provider name ("google" or "openai")
    ER_LLM_MODEL - Model for semantic comparison
    ER_DEFAULT_THRESHOLD - Dice threshold used when the caller passes none
    ER_SEMANTIC_CONCURRENCY - Max concurrent per-field LLM calls (0 = unbounded)
    ER_LOG_LEVEL - Logging level for the server process

API keys are not configuration: semantic analysis runs only when the caller
passes an apiKey with the request.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from entity_resolution.config.providers import PROVIDER_DEFAULTS


class ResolverConfig:
    """Configuration for the entity resolution server."""

    # === LLM Configuration ===

    llm_provider: str = "google"
    """LLM provider: "google", "openai" """

    llm_model: str | None = None
    """Model for semantic comparison (None = provider default)"""

    llm_temperature: float = 0.0
    """Sampling temperature for semantic comparison calls"""

    # === Comparison Configuration ===

    default_threshold: float = 0.8
    """Dice threshold for the syntactic match decision when none is given"""

    semantic_concurrency: int = 0
    """Max concurrent per-field LLM calls (0 = unbounded)"""

    # === Server Configuration ===

    log_level: str = "INFO"
    """Logging level for the server process"""

    def __init__(self, **kwargs: Any) -> None:
        """
        Initialize configuration.

        Args:
            **kwargs: Override any configuration option

        Raises:
            ValueError: If an option is unknown or a value is out of range
        """
        # Load from environment first
        self._load_from_env()

        # Apply explicit overrides
        for key, value in kwargs.items():
            if key.startswith("_") or not hasattr(type(self), key):
                raise ValueError(f"Unknown configuration option: {key}")
            setattr(self, key, value)

        self._validate()

    def _load_from_env(self) -> None:
        """Load configuration from ER_* environment variables."""
        if provider := os.getenv("ER_LLM_PROVIDER"):
            self.llm_provider = provider
        if model := os.getenv("ER_LLM_MODEL"):
            self.llm_model = model
        if threshold := os.getenv("ER_DEFAULT_THRESHOLD"):
            self.default_threshold = float(threshold)
        if concurrency := os.getenv("ER_SEMANTIC_CONCURRENCY"):
            self.semantic_concurrency = int(concurrency)
        if level := os.getenv("ER_LOG_LEVEL"):
            self.log_level = level

    def _validate(self) -> None:
        self.llm_provider = self.llm_provider.lower()
        if self.llm_provider not in PROVIDER_DEFAULTS:
            raise ValueError(
                f"Unknown LLM provider: {self.llm_provider!r}. "
                f"Use: {', '.join(PROVIDER_DEFAULTS)}"
            )
        if not 0.0 <= self.default_threshold <= 1.0:
            raise ValueError(
                f"default_threshold must be between 0 and 1, got {self.default_threshold}"
            )
        if self.semantic_concurrency < 0:
            raise ValueError(
                f"semantic_concurrency must be >= 0, got {self.semantic_concurrency}"
            )

    @property
    def resolved_llm_model(self) -> str:
        """Configured model, or the provider's default model."""
        return self.llm_model or PROVIDER_DEFAULTS[self.llm_provider]["llm_model"]

    @classmethod
    def from_file(cls, path: str | Path, **overrides: Any) -> "ResolverConfig":
        """
        Load configuration from TOML file.

        Nested sections are flattened with their section prefix.

        Example TOML:
            [llm]
            provider = "openai"
            model = "gpt-4o"
            temperature = 0.0

            [comparison]
            default_threshold = 0.75
            semantic_concurrency = 8

            log_level = "DEBUG"

        Args:
            path: Path to TOML configuration file
            **overrides: Options that take precedence over the file

        Returns:
            ResolverConfig instance with values from file

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "rb") as f:
            data = tomllib.load(f)

        flat_config: dict[str, Any] = {}

        # Map section names to config key prefixes
        section_mapping = {
            "llm": "llm_",
            "comparison": "",
            "server": "",
        }

        for section, prefix in section_mapping.items():
            if section in data:
                for key, value in data[section].items():
                    flat_config[f"{prefix}{key}"] = value

        # Also support flat top-level keys
        for key, value in data.items():
            if key not in section_mapping and not isinstance(value, dict):
                flat_config[key] = value

        flat_config.update(overrides)
        return cls(**flat_config)

    @classmethod
    def from_env(cls) -> "ResolverConfig":
        """Load configuration from environment variables only."""
        return cls()
