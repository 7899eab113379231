"""Analyze command argument parser."""

import argparse
from pathlib import Path
from typing import Any, cast

from godoc_mcp.core.config.config import Config


def add_analyze_subparser(subparsers: Any) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        "analyze",
        help="Look up go doc output for the dependencies of a Go file",
        description=(
            "Ask the backend which go doc lookups matter for FILE, run them "
            "against the local toolchain and print the combined report."
        ),
    )

    parser.add_argument(
        "file",
        type=Path,
        help="Go source file to analyze",
    )

    parser.add_argument(
        "--root",
        type=Path,
        help="Go module root (default: nearest directory containing go.mod)",
    )

    parser.add_argument(
        "--model",
        help="Backend model for this request (overrides --llm-model)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log pipeline progress to stderr",
    )

    Config.add_cli_arguments(parser)

    return cast(argparse.ArgumentParser, parser)


__all__: list[str] = ["add_analyze_subparser"]
