"""Abstract text-completion client interface."""

from abc import ABC, abstractmethod
from typing import Optional


class LLMClient(ABC):
    """Base class for single-turn text-completion backends."""

    @abstractmethod
    def complete(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """
        Send one prompt and return the generated text.

        Args:
            prompt: The full prompt text.
            max_tokens: Output token limit, or None for the backend default.
            temperature: Sampling temperature, or None for the backend default.

        Returns:
            The generated text (trimmed).

        Raises:
            Exception: Implementations raise on any failure; callers decide
                whether to degrade.
        """
