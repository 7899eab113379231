"""godoc-mcp command line entry point."""

from __future__ import annotations

import asyncio
import sys

from pydantic import ValidationError

from godoc_mcp.core.config.config import Config

from .commands.analyze import analyze_command
from .commands.mcp import mcp_command
from .parsers import create_main_parser


async def async_main(argv: list[str] | None = None) -> int:
    parser = create_main_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_sources(args)
    except (ValidationError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    if args.command == "mcp":
        return await mcp_command(args, config)
    if args.command == "analyze":
        return await analyze_command(args, config)

    parser.error(f"Unknown command: {args.command}")
    return 2


def main() -> None:
    """Synchronous wrapper for the console script."""
    try:
        sys.exit(asyncio.run(async_main()))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
