"""Stdio MCP server exposing the `godoc` tool.

CRITICAL: NO stdout output allowed - breaks JSON-RPC protocol
"""

from __future__ import annotations

import asyncio
from typing import Any

import mcp.server.stdio
import mcp.types as types
from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.models import InitializationOptions

from godoc_mcp.core.config.config import Config
from godoc_mcp.llm_manager import ProviderFactory
from godoc_mcp.version import __version__

from .base import MCPServerBase
from .common import handle_tool_call
from .tools import TOOL_REGISTRY

SERVER_NAME = "godoc-mcp"


class StdioMCPServer(MCPServerBase):
    """MCP server implementation for the stdio protocol."""

    def __init__(
        self,
        config: Config,
        provider_factory: ProviderFactory | None = None,
        args: Any = None,
    ):
        super().__init__(config, provider_factory=provider_factory, args=args)
        self.server: Server = Server(SERVER_NAME)
        self._register_tools()

    def _register_tools(self) -> None:
        """Register tool handlers with the stdio server."""

        # The SDK's call_tool decorator expects a SINGLE handler for ALL tools
        @self.server.call_tool()
        async def handle_all_tools(
            tool_name: str, arguments: dict[str, Any]
        ) -> list[types.TextContent]:
            return await handle_tool_call(
                tool_name=tool_name,
                arguments=arguments,
                config=self.config,
                provider_factory=self.provider_factory,
            )

        @self.server.list_tools()
        async def list_tools() -> list[types.Tool]:
            return [
                types.Tool(
                    name=tool.name,
                    title=tool.title,
                    description=tool.description,
                    inputSchema=tool.parameters,
                )
                for tool in TOOL_REGISTRY.values()
            ]

    async def run(self) -> None:
        """Run the stdio server until the client disconnects."""
        self.configure_logging()
        await self.initialize()

        init_options = InitializationOptions(
            server_name=SERVER_NAME,
            server_version=__version__,
            capabilities=self.server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={},
            ),
        )

        try:
            async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
                self.debug_log("Stdio server started, awaiting requests")
                await self.server.run(read_stream, write_stream, init_options)
        except KeyboardInterrupt:
            self.debug_log("Server interrupted by user")


async def main(config: Config | None = None, args: Any = None) -> None:
    """Main entry point for the MCP stdio server."""
    server = StdioMCPServer(config or Config.from_sources(args), args=args)
    await server.run()


def main_sync() -> None:
    """Synchronous wrapper for CLI entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    main_sync()
