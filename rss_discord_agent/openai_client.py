"""OpenAI LLM client implementation."""

import logging
from typing import Optional

from openai import OpenAI

from .config import LLMConfig
from .llm_client import LLMClient

logger = logging.getLogger(__name__)


class OpenAILLMClient(LLMClient):
    """OpenAI chat-completions client, used when LLM_PROVIDER=openai."""

    def __init__(self, config: LLMConfig):
        """
        Initialize the OpenAI client.

        Args:
            config: LLM configuration.
        """
        self.config = config
        self.client = OpenAI(
            api_key=config.api_key or None,
            base_url=config.base_url if config.base_url else None
        )

    def complete(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> str:
        kwargs = {}
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        if temperature is not None:
            kwargs["temperature"] = temperature

        try:
            response = self.client.chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "user", "content": prompt}
                ],
                **kwargs,
            )
            return response.choices[0].message.content.strip()
        except Exception as e:
            logger.error(f"OpenAI API error: {e}")
            raise
