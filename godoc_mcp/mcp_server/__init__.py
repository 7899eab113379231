"""MCP server exposing the godoc tool."""

from .tools import TOOL_REGISTRY, execute_tool

__all__ = ["TOOL_REGISTRY", "execute_tool"]
