"""Embed command: produce a normalized embedding for a piece of text."""

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from codebase_query.cli.app import app
from codebase_query.cli.commands.tool_utils import run_async_tool
from codebase_query.config import ConfigManager
from codebase_query.embedding.embedding_provider_factory import create_embedding_provider
from codebase_query.embedding.models import Embedding, EmbeddingModel

console = Console()


async def get_embedding(text: str, model: Optional[EmbeddingModel] = None) -> Embedding:
    """Embed ``text`` with the provider serving ``model`` (default: configured model)."""
    provider = create_embedding_provider(ConfigManager().config, model)
    try:
        return await provider.get_embedding(text)
    finally:
        await provider.aclose()


@app.command()
def embed(
    text: Annotated[str, typer.Argument(help="The text to embed")],
    model: Annotated[
        Optional[EmbeddingModel],
        typer.Option(help="Embedding model. If not provided, the configured model is used."),
    ] = None,
    preview: Annotated[
        int, typer.Option(min=0, help="Number of vector components to print")
    ] = 8,
):
    """Embed text with the configured embedding provider and show the normalized vector."""
    embedding = run_async_tool(get_embedding, text, model)

    table = Table(title="Embedding")
    table.add_column("Model", style="cyan")
    table.add_column("Dimensions", justify="right")
    table.add_column("Preview")
    values = ", ".join(f"{value:.6f}" for value in embedding.tolist()[:preview])
    suffix = ", ..." if preview < len(embedding) else ""
    table.add_row(embedding.model.value, str(len(embedding)), f"[{values}{suffix}]")
    console.print(table)
