"""Base class for MCP servers providing configuration and logging setup.

Subclasses implement the protocol-specific pieces:
- _register_tools(): Register tool handlers
- run(): Main server execution loop
"""

import os
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from loguru import logger

from godoc_mcp.core.config.config import Config
from godoc_mcp.core.exceptions import ConfigurationError
from godoc_mcp.llm_manager import ProviderFactory, get_llm_provider
from godoc_mcp.utils.env import debug_log_path


class MCPServerBase(ABC):
    """Common initialization for MCP server implementations."""

    def __init__(
        self,
        config: Config,
        provider_factory: ProviderFactory | None = None,
        args: Any = None,
    ):
        """Initialize base MCP server.

        Args:
            config: Validated configuration object
            provider_factory: Optional backend factory (tests inject stubs)
            args: Original CLI arguments
        """
        self.config = config
        self.args = args
        self.provider_factory = provider_factory
        self.debug_mode = config.debug
        self._initialized = False

    def configure_logging(self) -> None:
        """Route loguru away from stdout, which carries JSON-RPC.

        Logs go to a debug file only when debug mode is on.
        """
        logger.remove()
        if self.debug_mode:
            logger.add(debug_log_path(), level="DEBUG", enqueue=True)

    def debug_log(self, message: str) -> None:
        """Log a server lifecycle message when debug mode is on."""
        if self.debug_mode:
            logger.debug(f"[{datetime.now().isoformat()}] [MCP] {message}")

    async def initialize(self) -> None:
        """Warm up the backend client.

        A missing credential is reported right away but does not stop the
        server: every tool call surfaces it as an error response.
        """
        if self._initialized:
            return
        try:
            get_llm_provider(self.config.llm, self.provider_factory)
        except ConfigurationError as e:
            logger.warning(f"Backend unavailable: {e}")
        self._initialized = True
        self.debug_log(f"Initialized (pid={os.getpid()})")

    @abstractmethod
    def _register_tools(self) -> None:
        """Register tools with the protocol-specific server."""

    @abstractmethod
    async def run(self) -> None:
        """Run the server."""
