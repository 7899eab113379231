"""Abstract interface for completion backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class LLMResponse:
    """Response from a completion call."""

    content: str
    tokens_used: int
    model: str
    finish_reason: str | None = None


class LLMProvider(ABC):
    """Opaque text-completion service used to propose lookup commands."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""

    @property
    @abstractmethod
    def model(self) -> str:
        """Default model name."""

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        model: str | None = None,
        timeout: float | None = None,
    ) -> LLMResponse:
        """Send `prompt` as a single user message and return the completion.

        Args:
            prompt: Full user message
            model: Optional per-request model override
            timeout: Optional timeout in seconds (overrides default)
        """

    def get_usage_stats(self) -> dict[str, Any]:
        return {}
