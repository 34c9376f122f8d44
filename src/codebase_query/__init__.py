"""codebase-query - embeddings and semantic excerpts for codebase search."""

__version__ = "0.1.0"
