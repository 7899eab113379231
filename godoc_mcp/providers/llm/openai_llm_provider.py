"""OpenAI-compatible chat-completion provider (OpenRouter by default)."""

from typing import Any

from loguru import logger
from openai import APIError, AsyncOpenAI, OpenAIError

from godoc_mcp.core.config.llm_config import CREDENTIAL_ENV, LLMConfig
from godoc_mcp.core.exceptions import BackendError, ConfigurationError
from godoc_mcp.interfaces.llm_provider import LLMProvider, LLMResponse


class OpenAILLMProvider(LLMProvider):
    """Provider backed by the official `openai` async client.

    The credential is read when the provider is constructed; a missing
    credential raises ConfigurationError immediately.
    """

    def __init__(self, config: LLMConfig):
        if not config.is_configured():
            raise ConfigurationError(
                f"{CREDENTIAL_ENV} environment variable is required"
            )
        assert config.api_key is not None

        self._config = config
        self._model = config.model
        self._timeout = config.timeout

        self._client = AsyncOpenAI(
            api_key=config.api_key.get_secret_value(),
            base_url=config.base_url,
            default_headers=config.default_headers(),
            timeout=config.timeout,
            max_retries=config.max_retries,
        )

        # Usage tracking
        self._requests_made = 0
        self._tokens_used = 0
        self._prompt_tokens = 0
        self._completion_tokens = 0

        logger.debug(f"OpenAI-compatible provider ready: {config!r}")

    @property
    def name(self) -> str:
        """Provider name."""
        return "openai"

    @property
    def model(self) -> str:
        """Model name."""
        return self._model

    async def complete(
        self,
        prompt: str,
        model: str | None = None,
        timeout: float | None = None,
    ) -> LLMResponse:
        """Run one chat completion with `prompt` as the only user message.

        Raises:
            BackendError: If the call fails or returns no text
        """
        effective_model = model or self._model
        request_timeout = timeout if timeout is not None else self._timeout

        try:
            response = await self._client.chat.completions.create(
                model=effective_model,
                messages=[{"role": "user", "content": prompt}],
                timeout=request_timeout,
            )
        except APIError as e:
            logger.error(f"Completion request failed ({effective_model}): {e}")
            raise BackendError(f"Completion request failed: {e}") from e
        except OpenAIError as e:
            logger.error(f"Completion client error ({effective_model}): {e}")
            raise BackendError(f"Completion client error: {e}") from e

        if not response.choices:
            raise BackendError("No response received from the completion backend")

        choice = response.choices[0]
        content = choice.message.content if choice.message else None
        if not content or not content.strip():
            raise BackendError("No response received from the completion backend")

        tokens = 0
        if response.usage:
            tokens = response.usage.total_tokens or 0
            self._prompt_tokens += response.usage.prompt_tokens or 0
            self._completion_tokens += response.usage.completion_tokens or 0
        self._requests_made += 1
        self._tokens_used += tokens

        return LLMResponse(
            content=content,
            tokens_used=tokens,
            model=response.model or effective_model,
            finish_reason=choice.finish_reason,
        )

    def get_usage_stats(self) -> dict[str, Any]:
        return {
            "requests_made": self._requests_made,
            "total_tokens": self._tokens_used,
            "prompt_tokens": self._prompt_tokens,
            "completion_tokens": self._completion_tokens,
        }
