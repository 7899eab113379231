"""Protocol helpers shared by MCP server implementations."""

from __future__ import annotations

import json
from typing import Any

import mcp.types as types
from loguru import logger

from godoc_mcp.core.config.config import Config
from godoc_mcp.llm_manager import ProviderFactory

from .tools import execute_tool


class ToolCallError(Exception):
    """Raised so the MCP SDK reports the call with isError=True."""


def parse_mcp_arguments(arguments: Any) -> dict[str, Any]:
    """Normalize tool arguments that some clients send as a JSON string."""
    if arguments is None:
        return {}
    if isinstance(arguments, str):
        try:
            parsed = json.loads(arguments)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid tool arguments: {e}") from e
        arguments = parsed
    if not isinstance(arguments, dict):
        raise ValueError("Tool arguments must be an object")
    return dict(arguments)


async def handle_tool_call(
    tool_name: str,
    arguments: Any,
    config: Config,
    provider_factory: ProviderFactory | None = None,
) -> list[types.TextContent]:
    """Run a tool and convert its response to MCP content.

    Raises:
        ToolCallError: For invalid calls and error-flagged responses
    """
    try:
        response = await execute_tool(
            tool_name=tool_name,
            config=config,
            arguments=parse_mcp_arguments(arguments),
            provider_factory=provider_factory,
        )
    except ValueError as e:
        logger.error(f"Invalid call to {tool_name}: {e}")
        raise ToolCallError(f"Error: {e}") from e

    if response.is_error:
        raise ToolCallError(response.text)
    return [types.TextContent(type="text", text=response.text)]
