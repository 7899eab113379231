"""Argument parsers for the godoc-mcp CLI."""

import argparse

from godoc_mcp.version import __version__

from .analyze_parser import add_analyze_subparser
from .mcp_parser import add_mcp_subparser


def create_main_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="godoc-mcp",
        description="AI-assisted go doc lookups for Go source files",
    )
    parser.add_argument(
        "--version", action="version", version=f"godoc-mcp {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True
    add_mcp_subparser(subparsers)
    add_analyze_subparser(subparsers)
    return parser


__all__ = ["create_main_parser", "add_analyze_subparser", "add_mcp_subparser"]
