"""Shared utilities for CLI commands."""

import asyncio
from typing import Any, Callable

import typer


def run_async_tool(tool_func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run an async function with proper error handling.

    Args:
        tool_func: The async function to execute.
        *args: Positional arguments to pass to the function.
        **kwargs: Keyword arguments to pass to the function.

    Returns:
        The result from the async function.

    Raises:
        typer.Exit: If an error occurs during execution.
    """
    try:
        return asyncio.run(tool_func(*args, **kwargs))
    except Exception as e:
        if not isinstance(e, typer.Exit):
            func_name = getattr(tool_func, "__name__", "tool")
            typer.echo(f"Error during {func_name}: {e}", err=True)
            raise typer.Exit(1)
        raise
