"""MCP command argument parser."""

import argparse
from typing import Any, cast

from godoc_mcp.core.config.config import Config


def add_mcp_subparser(subparsers: Any) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        "mcp",
        help="Run the MCP stdio server",
        description="Serve the godoc tool over the MCP stdio transport.",
    )
    Config.add_cli_arguments(parser)
    return cast(argparse.ArgumentParser, parser)


__all__: list[str] = ["add_mcp_subparser"]
