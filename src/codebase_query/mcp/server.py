"""
Codebase Query FastMCP server.
"""

from contextlib import asynccontextmanager

from fastmcp import FastMCP
from loguru import logger

from codebase_query.mcp.container import MCPContainer, get_container, set_container


@asynccontextmanager
async def lifespan(app: FastMCP):
    """Lifecycle manager for the MCP server.

    Builds the container unless one was installed before startup.
    """
    try:
        get_container()
    except RuntimeError:
        set_container(MCPContainer.create())

    logger.info("Starting Codebase Query MCP server")
    try:
        yield
    finally:
        logger.info("Shutting down Codebase Query MCP server")


mcp = FastMCP(
    name="Codebase Query",
    lifespan=lifespan,
)
