"""Generative backend clients.

The plan service talks to any object with ``generate(prompt) -> str``.
`GeminiBackend` is the production implementation on top of the google-genai
SDK: one request, JSON response type, bounded by a request timeout.
"""

from typing import Protocol

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from core.exceptions import GenerationError
from core.logger import get_logger

logger = get_logger("services.generative_backend")


class GenerativeBackend(Protocol):
    def generate(self, prompt: str) -> str:
        """Return the model's raw text for ``prompt``; raise GenerationError on failure."""
        ...


class GeminiBackend:
    """Gemini text generation with ``application/json`` output."""

    def __init__(self, api_key: str, model_name: str = "gemini-2.5-flash", timeout: float = 60.0):
        self.model_name = model_name
        self.timeout = timeout
        self._client = genai.Client(api_key=api_key) if api_key else None

    def _config(self) -> genai_types.GenerateContentConfig:
        return genai_types.GenerateContentConfig(
            response_mime_type="application/json",
            # HttpOptions.timeout is in milliseconds
            http_options=genai_types.HttpOptions(timeout=int(self.timeout * 1000)),
        )

    def generate(self, prompt: str) -> str:
        if self._client is None:
            raise GenerationError("Generative backend is not configured", cause="missing GEMINI_API_KEY")

        logger.info("Requesting plan from %s (timeout=%ss)", self.model_name, self.timeout)
        try:
            response = self._client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=self._config(),
            )
        except genai_errors.APIError as exc:
            raise GenerationError("Generative backend request failed", cause=str(exc)) from exc
        except httpx.HTTPError as exc:
            raise GenerationError("Generative backend unreachable", cause=str(exc)) from exc

        # blocked or empty candidates come back with no text
        text = response.text
        if not text or not text.strip():
            raise GenerationError("Empty response from generative backend")
        return text
