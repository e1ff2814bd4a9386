"""xan-docs MCP tool implementations."""

from . import browse_functions, render_help

__all__ = [
    "browse_functions",
    "render_help",
]
