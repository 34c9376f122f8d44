"""MCP server exposing semantic codebase search to language models."""
