"""Version information for godoc-mcp."""

__version__ = "1.0.0"
