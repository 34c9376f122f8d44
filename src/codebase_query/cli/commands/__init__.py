"""CLI commands for codebase-query."""

from . import embed, mcp, query

__all__ = ["embed", "mcp", "query"]
