"""Tests for LLM provider construction and response handling."""

import sys
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from entity_resolution.providers import create_llm_provider


class TestCreateLLMProvider:
    """Tests for create_llm_provider."""

    def test_empty_api_key_raises(self):
        with pytest.raises(ValueError, match="non-empty"):
            create_llm_provider("google", api_key="  ", model="gemini-2.5-flash")

    def test_unknown_provider_raises(self):
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            create_llm_provider("mystery", api_key="key", model="m")

    def test_google_provider(self):
        with patch(
            "entity_resolution.providers.llm.google._get_genai_client",
            return_value=MagicMock(),
        ) as get_client:
            provider = create_llm_provider("google", api_key="key", model="gemini-2.5-flash")

        get_client.assert_called_once_with("key")
        assert provider.model_name == "gemini-2.5-flash"

    def test_openai_provider(self):
        with patch(
            "entity_resolution.providers.llm.openai._get_chat_openai",
            return_value=MagicMock(temperature=0.0),
        ) as get_chat:
            provider = create_llm_provider("openai", api_key="sk-test", model="gpt-4o-mini")

        get_chat.assert_called_once_with(api_key="sk-test", model="gpt-4o-mini")
        assert provider.model_name == "gpt-4o-mini"


class TestGoogleLLMProvider:
    """Tests for GoogleLLMProvider.generate."""

    def _provider(self, response):
        from entity_resolution.providers.llm.google import GoogleLLMProvider

        client = MagicMock()
        client.aio.models.generate_content = AsyncMock(return_value=response)
        with patch(
            "entity_resolution.providers.llm.google._get_genai_client",
            return_value=client,
        ):
            provider = GoogleLLMProvider(api_key="key", model="gemini-2.5-flash")
        return provider, client

    @pytest.mark.asyncio
    async def test_generate_strips_text(self):
        provider, client = self._provider(SimpleNamespace(text="  TRUE \n"))
        config = object()

        with patch.object(provider, "_build_config", return_value=config):
            result = await provider.generate("prompt", temperature=0.0)

        assert result == "TRUE"
        kwargs = client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert kwargs["contents"] == "prompt"
        assert kwargs["config"] is config

    @pytest.mark.asyncio
    async def test_generate_without_text_returns_none(self):
        provider, _ = self._provider(SimpleNamespace(text=None))

        with patch.object(provider, "_build_config", return_value=object()):
            assert await provider.generate("prompt") is None


class TestOpenAILLMProvider:
    """Tests for OpenAILLMProvider.generate."""

    @pytest.mark.asyncio
    async def test_generate_returns_content(self):
        pytest.importorskip("langchain_core")
        from entity_resolution.providers.llm.openai import OpenAILLMProvider

        client = MagicMock(temperature=0.0)
        client.ainvoke = AsyncMock(return_value=SimpleNamespace(content=" false "))
        with patch(
            "entity_resolution.providers.llm.openai._get_chat_openai",
            return_value=client,
        ):
            provider = OpenAILLMProvider(api_key="sk-test")
            result = await provider.generate("prompt", system="be brief")

        assert result == "false"
        messages = client.ainvoke.call_args.args[0]
        assert [m.content for m in messages] == ["be brief", "prompt"]

    def test_missing_sdk_raises_import_error(self):
        from entity_resolution.providers.llm import openai as openai_module

        with patch.dict(sys.modules, {"langchain_openai": None}):
            with pytest.raises(ImportError, match="langchain-openai"):
                openai_module._get_chat_openai(api_key="sk-test")
