"""Gemini client used for question generation and answer scoring."""

from __future__ import annotations

import logging
import re

from google import genai

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.0-flash"
PLACEHOLDER_API_KEY = "your-gemini-api-key-here"

_FENCE_RE = re.compile(r"```(?:json)?\n?")


class LLMError(RuntimeError):
    """The model call failed."""


class LLMUnavailableError(LLMError):
    """No model is configured."""


class LLMAuthError(LLMError):
    """The provider rejected the API key."""


def has_api_key(api_key: str | None) -> bool:
    return bool(api_key) and api_key != PLACEHOLDER_API_KEY


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", text).strip()


class GeminiClient:
    def __init__(self, api_key: str | None, model: str = DEFAULT_MODEL) -> None:
        self.model = model
        self._client: genai.Client | None = None
        if not has_api_key(api_key):
            logger.error("GEMINI_API_KEY is not set or is using the placeholder value")
            return
        try:
            self._client = genai.Client(api_key=api_key)
            logger.info("Gemini client initialised for %s", model)
        except Exception as exc:
            logger.error("Failed to initialise Gemini client: %s", exc)

    @property
    def available(self) -> bool:
        return self._client is not None

    async def generate(self, prompt: str) -> str:
        """Send ``prompt`` and return the reply with Markdown code fences removed."""
        if self._client is None:
            raise LLMUnavailableError("Gemini model is not configured")
        try:
            response = await self._client.aio.models.generate_content(model=self.model, contents=prompt)
        except Exception as exc:
            if "API key" in str(exc):
                raise LLMAuthError(str(exc)) from exc
            raise LLMError(str(exc)) from exc
        return strip_code_fences(response.text or "")
