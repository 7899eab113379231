"""Environment helpers shared by the CLI and the MCP server."""

from __future__ import annotations

import os

DEFAULT_DEBUG_FILE = "/tmp/godoc_mcp_debug.log"


def env_true(name: str) -> bool:
    val = os.getenv(name, "")
    return str(val).strip().lower() in ("1", "true", "yes", "on")


def debug_log_path() -> str:
    """Return the debug log file used in MCP mode, where stdout is reserved."""
    return os.getenv("GODOC_MCP_DEBUG_FILE", DEFAULT_DEBUG_FILE)
