from typing import Optional

import typer

from codebase_query.config import init_cli_logging


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:  # pragma: no cover
        import codebase_query

        typer.echo(f"Codebase Query version: {codebase_query.__version__}")
        raise typer.Exit()


app = typer.Typer(name="codebase-query")


@app.callback()
def app_callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Codebase Query - embeddings and semantic excerpts for codebase search."""

    # The mcp command configures its own file-only logging
    if ctx.invoked_subcommand not in (None, "mcp"):
        init_cli_logging()
