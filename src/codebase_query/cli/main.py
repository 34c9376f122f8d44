"""Main CLI entry point for codebase-query."""  # pragma: no cover

from codebase_query.cli.app import app  # pragma: no cover

# Register commands
from codebase_query.cli.commands import embed, mcp, query  # noqa: F401  # pragma: no cover

if __name__ == "__main__":  # pragma: no cover
    app()
