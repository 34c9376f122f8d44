"""Command line interface for codebase-query."""
