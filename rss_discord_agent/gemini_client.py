"""Gemini generateContent client over plain HTTP."""

import logging
from typing import Any, Dict, Optional

import requests

from .config import DEFAULT_GEMINI_BASE_URL, LLMConfig
from .llm_client import LLMClient

logger = logging.getLogger(__name__)


class LLMResponseError(Exception):
    """The completion service could not be called or returned no text."""


class GeminiLLMClient(LLMClient):
    """Client for the Gemini ``models/{model}:generateContent`` endpoint."""

    def __init__(self, config: LLMConfig):
        self.config = config
        self.api_key = config.api_key
        self.model = config.model
        self.base_url = (config.base_url or DEFAULT_GEMINI_BASE_URL).rstrip("/")

    def _generation_config(
        self, max_tokens: Optional[int], temperature: Optional[float]
    ) -> Dict[str, Any]:
        generation_config: Dict[str, Any] = {}
        if max_tokens is not None:
            generation_config["maxOutputTokens"] = max_tokens
        if temperature is not None:
            generation_config["temperature"] = temperature
        return generation_config

    def complete(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """
        Generate text for a single-turn prompt.

        Raises:
            LLMResponseError: If the API key is missing, the response is not
                2xx, or the body has no candidate text.
            requests.RequestException: On network errors.
        """
        if not self.api_key:
            raise LLMResponseError("Gemini API key is missing")

        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": self._generation_config(max_tokens, temperature),
        }

        response = requests.post(
            url,
            params={"key": self.api_key},
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        if not response.ok:
            raise LLMResponseError(
                f"Gemini API error: {response.status_code} {response.text}"
            )

        try:
            data = response.json()
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise LLMResponseError(f"Malformed Gemini response ({self.model}): {e}") from e

        logger.debug(f"Gemini ({self.model}) returned {len(text)} chars")
        return text.strip()
