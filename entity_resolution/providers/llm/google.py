"""
Google LLM Provider (google-genai)

Implements LLMProvider using the google-genai async client.

Safety filters are disabled for every harm category: the provider only ever
sees field values of the entities being compared, and a blocked response
would otherwise surface as a missing verdict.

Models:
    - gemini-2.5-flash: Default, fast and cheap
    - gemini-2.5-pro: Higher quality holistic analysis

Example:
    >>> provider = GoogleLLMProvider(api_key="...", model="gemini-2.5-flash")
    >>> response = await provider.generate("Reply with true or false: 2 + 2 = 4")
    >>> print(response)
    "true"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from entity_resolution.providers.base import LLMProvider

if TYPE_CHECKING:
    from google import genai

_UNFILTERED_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)


def _get_genai_client(api_key: str) -> "genai.Client":
    """
    Create a google-genai client.

    Uses lazy import to avoid requiring google-genai unless actually used.

    Raises:
        ImportError: If google-genai package is not installed
    """
    try:
        from google import genai
    except ImportError:
        raise ImportError(
            "Google provider requires the 'google-genai' package. "
            "Install with: pip install google-genai"
        )

    return genai.Client(api_key=api_key)


def _response_text(response: Any) -> str | None:
    """Extract stripped text from a generate_content response, if any."""
    text = getattr(response, "text", None)
    if text is None:
        return None
    return str(text).strip() or None


class GoogleLLMProvider(LLMProvider):
    """
    Google Gemini provider.

    The client is created eagerly so that an unusable API key fails at
    construction time, before any request is attempted.

    Args:
        api_key: Google Generative AI API key
        model: Model to use (default: "gemini-2.5-flash")
    """

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash") -> None:
        self._model = model
        self._client = _get_genai_client(api_key)

    @property
    def model_name(self) -> str:
        """Current model name."""
        return self._model

    def _build_config(
        self,
        *,
        system: str | None,
        temperature: float,
        max_tokens: int | None,
    ) -> Any:
        from google.genai import types

        safety_settings = [
            types.SafetySetting(
                category=getattr(types.HarmCategory, category),
                threshold=types.HarmBlockThreshold.BLOCK_NONE,
            )
            for category in _UNFILTERED_CATEGORIES
        ]
        return types.GenerateContentConfig(
            system_instruction=system,
            temperature=temperature,
            max_output_tokens=max_tokens,
            safety_settings=safety_settings,
        )

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
            prompt: User prompt
            system: Optional system instruction
            temperature: Sampling temperature (0.0 = deterministic)
            max_tokens: Maximum output tokens (None = model default)

        Returns:
            Stripped response text, or None if the model returned no text
        """
        config = self._build_config(
            system=system,
            temperature=temperature,
            max_tokens=max_tokens,
        )
        response = await self._client.aio.models.generate_content(
            model=self._model,
            contents=prompt,
            config=config,
        )
        return _response_text(response)
