"""Configuration models for godoc-mcp."""

from .config import Config
from .godoc_config import GodocConfig
from .llm_config import LLMConfig

__all__ = ["Config", "GodocConfig", "LLMConfig"]
