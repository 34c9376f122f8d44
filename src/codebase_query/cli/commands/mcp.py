"""MCP server command."""

from loguru import logger

import codebase_query
from codebase_query.cli.app import app
from codebase_query.mcp.container import MCPContainer, set_container

# Import mcp instance
from codebase_query.mcp.server import mcp as mcp_server  # pragma: no cover

# Import mcp tools to register them
import codebase_query.mcp.tools  # noqa: F401  # pragma: no cover


@app.command()
def mcp():  # pragma: no cover
    """Run the MCP server over stdio."""
    container = MCPContainer.create()
    set_container(container)

    logger.info(f"Starting Codebase Query MCP server {codebase_query.__version__}")
    logger.info(f"Embedding model: {container.config.embedding_model.value}")
    logger.info(f"Search limit: {container.config.search_limit}")

    mcp_server.run()
