"""Query command: semantic search over the codebase from the command line."""

from typing import Annotated, Optional

import typer

from codebase_query.cli.app import app
from codebase_query.cli.commands.tool_utils import run_async_tool
from codebase_query.config import ConfigManager
from codebase_query.file_utils import LocalFs
from codebase_query.mcp.container import load_project_index
from codebase_query.mcp.formatting import format_excerpts
from codebase_query.services.excerpt_service import ExcerptService


async def run_query(query_text: str, limit: int) -> str:
    config = ConfigManager().config
    if not config.project_index:
        raise RuntimeError("No project index configured. Set CODEBASE_QUERY_PROJECT_INDEX.")

    service = ExcerptService(load_project_index(config.project_index), LocalFs())
    excerpts = await service.materialize(query_text, limit)
    return format_excerpts(excerpts)


@app.command()
def query(
    query_text: Annotated[str, typer.Argument(help="The query to run against the codebase")],
    limit: Annotated[
        Optional[int],
        typer.Option(min=1, help="Maximum number of hits. Defaults to the configured limit."),
    ] = None,
):
    """Run a semantic query and print the excerpts as the MCP tool returns them."""
    limit = limit or ConfigManager().config.search_limit
    typer.echo(run_async_tool(run_query, query_text, limit), nl=False)
