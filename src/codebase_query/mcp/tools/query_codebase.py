"""Semantic codebase search tool for the Codebase Query MCP server."""

from fastmcp import Context
from fastmcp.exceptions import ToolError
from loguru import logger

from codebase_query.mcp.container import get_container
from codebase_query.mcp.formatting import format_excerpts
from codebase_query.mcp.server import mcp

TOOL_DESCRIPTION = (
    "Executes a query against the codebase, returning excerpts related to the query"
)


@mcp.tool("query_codebase", description=TOOL_DESCRIPTION)
async def query_codebase(query: str, context: Context | None = None) -> str:
    """Search the codebase and return matching excerpts.

    Hits whose files can no longer be read are left out; the remaining
    excerpts keep the order the index ranked them in.

    Args:
        query: Natural language description of the code to find

    Returns:
        Text block with one fenced excerpt per hit, each preceded by its
        path and score
    """
    container = get_container()
    logger.info(f"Querying codebase: {query}")

    if context:  # pragma: no cover
        await context.info("Searching codebase...")

    try:
        excerpts = await container.excerpt_service().materialize(
            query, container.config.search_limit
        )
    except Exception as e:
        logger.error(f"Semantic search failed: {e}")
        raise ToolError(f"Semantic search failed: {e}") from e

    return format_excerpts(excerpts)
