"""godoc-mcp: AI-assisted `go doc` lookups for a Go source file."""

from .version import __version__

__all__ = ["__version__"]
