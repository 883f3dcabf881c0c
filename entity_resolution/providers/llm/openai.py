"""
OpenAI LLM Provider (LangChain-based)

Implements LLMProvider interface using LangChain's ChatOpenAI.

Models:
    - gpt-4o-mini: Fast and cheap, default for field checks
    - gpt-4o: Better holistic analysis

Example:
    >>> provider = OpenAILLMProvider(api_key="sk-...", model="gpt-4o-mini")
    >>> response = await provider.generate("Reply with true or false: 2 + 2 = 4")
    >>> print(response)
    "true"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from entity_resolution.providers.base import LLMProvider

if TYPE_CHECKING:
    from langchain_openai import ChatOpenAI


def _get_chat_openai(
    api_key: str,
    model: str = "gpt-4o-mini",
    temperature: float = 0.0,
) -> "ChatOpenAI":
    """
    Get a ChatOpenAI instance.

    Uses lazy import to avoid requiring langchain-openai unless actually used.

    Args:
        api_key: OpenAI API key supplied by the caller.
        model: Model name to use.
        temperature: Sampling temperature.

    Returns:
        ChatOpenAI instance

    Raises:
        ImportError: If langchain-openai package is not installed
    """
    try:
        from langchain_openai import ChatOpenAI
    except ImportError:
        raise ImportError(
            "OpenAI provider requires the 'langchain-openai' package. "
            "Install with: pip install entity-resolution-mcp[openai]"
        )

    kwargs: dict[str, Any] = {"model": model, "temperature": temperature, "api_key": api_key}
    return ChatOpenAI(**kwargs)


class OpenAILLMProvider(LLMProvider):
    """
    OpenAI LLM provider implementation using LangChain.

    Args:
        api_key: OpenAI API key supplied by the caller
        model: Model to use (default: "gpt-4o-mini")
    """

    def __init__(self, api_key: str, model: str = "gpt-4o-mini") -> None:
        self._api_key = api_key
        self._model = model
        # Fail fast on an unusable key/model before any request is attempted
        self._client = _get_chat_openai(api_key=api_key, model=model)

    @property
    def model_name(self) -> str:
        """Current model name."""
        return self._model

    async def generate(
        self,
        prompt: str,
        *,
        system: str | None = None,
        temperature: float = 0.0,
        max_tokens: int | None = None,
    ) -> str | None:
        """
        Generate a text completion.

        Args:
            prompt: User prompt/question
            system: Optional system message for context
            temperature: Sampling temperature (0.0 = deterministic)
            max_tokens: Maximum tokens in response (None = model default)

        Returns:
            Stripped response text, or None if the response was empty
        """
        from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

        client: Any = self._client
        if temperature != self._client.temperature:
            client = _get_chat_openai(
                api_key=self._api_key,
                model=self._model,
                temperature=temperature,
            )
        if max_tokens is not None:
            client = client.bind(max_tokens=max_tokens)

        messages: list[BaseMessage] = []
        if system:
            messages.append(SystemMessage(content=system))
        messages.append(HumanMessage(content=prompt))

        response = await client.ainvoke(messages)
        output_text = str(response.content).strip()
        return output_text or None
