"""Tests for ResolverConfig."""

import pytest

from entity_resolution.config.settings import ResolverConfig

_ENV_VARS = (
    "ER_LLM_PROVIDER",
    "ER_LLM_MODEL",
    "ER_DEFAULT_THRESHOLD",
    "ER_SEMANTIC_CONCURRENCY",
    "ER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


class TestDefaults:
    """Built-in defaults."""

    def test_defaults(self):
        config = ResolverConfig()
        assert config.llm_provider == "google"
        assert config.llm_model is None
        assert config.resolved_llm_model == "gemini-2.5-flash"
        assert config.default_threshold == 0.8
        assert config.semantic_concurrency == 0
        assert config.log_level == "INFO"

    def test_openai_default_model(self):
        config = ResolverConfig(llm_provider="openai")
        assert config.resolved_llm_model == "gpt-4o-mini"

    def test_explicit_model_wins(self):
        config = ResolverConfig(llm_model="gemini-2.5-pro")
        assert config.resolved_llm_model == "gemini-2.5-pro"


class TestOverrides:
    """Keyword overrides and validation."""

    def test_unknown_option_raises(self):
        with pytest.raises(ValueError, match="Unknown configuration option"):
            ResolverConfig(api_key="secret")

    def test_unknown_provider_raises(self):
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            ResolverConfig(llm_provider="mystery")

    def test_provider_name_case_insensitive(self):
        assert ResolverConfig(llm_provider="OpenAI").llm_provider == "openai"

    def test_threshold_out_of_range_raises(self):
        with pytest.raises(ValueError, match="default_threshold"):
            ResolverConfig(default_threshold=1.5)

    def test_negative_concurrency_raises(self):
        with pytest.raises(ValueError, match="semantic_concurrency"):
            ResolverConfig(semantic_concurrency=-1)


class TestEnvironment:
    """ER_* environment variables."""

    def test_env_values_loaded(self, monkeypatch):
        monkeypatch.setenv("ER_LLM_PROVIDER", "openai")
        monkeypatch.setenv("ER_LLM_MODEL", "gpt-4o")
        monkeypatch.setenv("ER_DEFAULT_THRESHOLD", "0.7")
        monkeypatch.setenv("ER_SEMANTIC_CONCURRENCY", "4")
        monkeypatch.setenv("ER_LOG_LEVEL", "DEBUG")

        config = ResolverConfig.from_env()

        assert config.llm_provider == "openai"
        assert config.llm_model == "gpt-4o"
        assert config.default_threshold == 0.7
        assert config.semantic_concurrency == 4
        assert config.log_level == "DEBUG"

    def test_override_beats_env(self, monkeypatch):
        monkeypatch.setenv("ER_DEFAULT_THRESHOLD", "0.7")
        assert ResolverConfig(default_threshold=0.9).default_threshold == 0.9


class TestFromFile:
    """TOML configuration files."""

    def test_sections_flattened(self, tmp_path):
        path = tmp_path / "resolver.toml"
        path.write_text(
            'log_level = "WARNING"\n'
            "\n"
            "[llm]\n"
            'provider = "openai"\n'
            'model = "gpt-4o"\n'
            "temperature = 0.3\n"
            "\n"
            "[comparison]\n"
            "default_threshold = 0.75\n"
            "semantic_concurrency = 8\n"
        )

        config = ResolverConfig.from_file(path)

        assert config.llm_provider == "openai"
        assert config.llm_model == "gpt-4o"
        assert config.llm_temperature == 0.3
        assert config.default_threshold == 0.75
        assert config.semantic_concurrency == 8
        assert config.log_level == "WARNING"

    def test_overrides_beat_file(self, tmp_path):
        path = tmp_path / "resolver.toml"
        path.write_text('[server]\nlog_level = "WARNING"\n')

        config = ResolverConfig.from_file(path, log_level="DEBUG")

        assert config.log_level == "DEBUG"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ResolverConfig.from_file(tmp_path / "missing.toml")

    def test_unknown_key_in_file_raises(self, tmp_path):
        path = tmp_path / "resolver.toml"
        path.write_text("[comparison]\nweights = 1\n")

        with pytest.raises(ValueError, match="Unknown configuration option"):
            ResolverConfig.from_file(path)
