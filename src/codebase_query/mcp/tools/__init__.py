"""MCP tools for Codebase Query.

Importing this package registers every tool with the server.
"""

from codebase_query.mcp.tools.query_codebase import query_codebase

__all__ = ["query_codebase"]
