"""Top-level configuration for godoc-mcp.

Sources are layered as defaults < environment < CLI arguments.
"""

import argparse
from typing import Any

from pydantic import BaseModel, Field

from godoc_mcp.core.config.godoc_config import GodocConfig
from godoc_mcp.core.config.llm_config import LLMConfig
from godoc_mcp.utils.env import env_true


class Config(BaseModel):
    """Process-wide configuration, established once at startup."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    godoc: GodocConfig = Field(default_factory=GodocConfig)
    debug: bool = Field(default=False, description="Enable debug logging")

    @classmethod
    def add_cli_arguments(cls, parser: argparse.ArgumentParser) -> None:
        LLMConfig.add_cli_arguments(parser)
        GodocConfig.add_cli_arguments(parser)
        parser.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug logging",
        )

    @classmethod
    def from_sources(cls, args: Any = None) -> "Config":
        """Build configuration from environment variables and CLI arguments."""
        llm: dict[str, Any] = LLMConfig.load_from_env()
        godoc: dict[str, Any] = GodocConfig.load_from_env()
        debug = env_true("GODOC_MCP_DEBUG")

        if args is not None:
            llm.update(LLMConfig.extract_cli_overrides(args))
            godoc.update(GodocConfig.extract_cli_overrides(args))
            debug = debug or bool(getattr(args, "debug", False))

        return cls(llm=LLMConfig(**llm), godoc=GodocConfig(**godoc), debug=debug)
