"""MCP command: serve the godoc tool over stdio."""

from __future__ import annotations

import argparse

from godoc_mcp.core.config.config import Config


async def mcp_command(args: argparse.Namespace, config: Config) -> int:
    # Deferred so `analyze` works without loading the MCP SDK
    from godoc_mcp.mcp_server.stdio import main as stdio_main

    await stdio_main(config=config, args=args)
    return 0
