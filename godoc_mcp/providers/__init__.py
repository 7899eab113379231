"""Concrete implementations of the abstract interfaces.

Use lazy import so the openai client is only loaded when a backend is built.
"""

__all__ = ["OpenAILLMProvider"]


def __getattr__(name: str):
    if name == "OpenAILLMProvider":
        from .llm import OpenAILLMProvider  # lazy

        return OpenAILLMProvider
    raise AttributeError(name)
