"""LLM providers for godoc-mcp."""

from .openai_llm_provider import OpenAILLMProvider

__all__ = ["OpenAILLMProvider"]
