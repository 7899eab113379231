"""Process-scoped backend client.

The provider is built lazily on first use and then reused for every
request. `get_llm_provider` is the only place a provider is constructed.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from loguru import logger

from godoc_mcp.core.config.llm_config import LLMConfig
from godoc_mcp.interfaces.llm_provider import LLMProvider

ProviderFactory = Callable[[LLMConfig], LLMProvider]

_provider: LLMProvider | None = None
_lock = threading.Lock()


def _default_factory(config: LLMConfig) -> LLMProvider:
    from godoc_mcp.providers.llm.openai_llm_provider import OpenAILLMProvider

    return OpenAILLMProvider(config)


def get_llm_provider(
    config: LLMConfig, factory: ProviderFactory | None = None
) -> LLMProvider:
    """Return the shared provider, constructing it on first call.

    Raises:
        ConfigurationError: If the provider cannot be built (no credential)
    """
    global _provider
    if _provider is not None:
        return _provider
    with _lock:
        if _provider is None:
            _provider = (factory or _default_factory)(config)
            logger.debug(f"LLM provider initialized: {_provider.name}/{_provider.model}")
    return _provider


def reset_llm_provider() -> None:
    """Forget the shared provider (tests and config reloads only)."""
    global _provider
    with _lock:
        _provider = None
