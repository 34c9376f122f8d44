"""Tests for the query_codebase MCP tool."""

import pytest
from fastmcp.exceptions import ToolError

from codebase_query.mcp.container import get_container
from codebase_query.mcp.tools import query_codebase


@pytest.mark.asyncio
async def test_query_codebase_formats_excerpts(install_container, stub_index, make_hit):
    index = stub_index(
        [
            make_hit("src/main.py", 0, 11, score=0.9),
            make_hit("README.md", 2, 9, score=0.5),
        ]
    )
    install_container(index)

    result = await query_codebase.fn(query="entry point")

    assert index.calls == [("entry point", 10)]
    assert result == (
        "Semantic search results for user query:\n"
        "Excerpt from src/main.py, score 0.9:\n"
        "~~~\n"
        "def main():~~~\n"
        "Excerpt from README.md, score 0.5:\n"
        "~~~\n"
        "Project~~~\n"
    )


@pytest.mark.asyncio
async def test_query_codebase_skips_missing_files(install_container, stub_index, make_hit):
    install_container(
        stub_index([make_hit("deleted.py", 0, 10, score=0.9), make_hit("src/main.py", 0, 3)])
    )

    result = await query_codebase.fn(query="anything")

    assert "deleted.py" not in result
    assert "Excerpt from src/main.py, score 0.5:\n~~~\ndef~~~\n" in result


@pytest.mark.asyncio
async def test_query_codebase_uses_configured_limit(install_container, stub_index, make_hit, app_config):
    app_config.search_limit = 1
    index = stub_index([make_hit("src/main.py", 0, 3), make_hit("README.md", 0, 1)])
    install_container(index)

    result = await query_codebase.fn(query="limit")

    assert index.calls == [("limit", 1)]
    assert result.count("Excerpt from") == 1


class _FailingIndex:
    async def search(self, query: str, limit: int):
        raise ConnectionError("index unavailable")


@pytest.mark.asyncio
async def test_query_codebase_index_failure_raises_tool_error(install_container):
    install_container(_FailingIndex())

    with pytest.raises(ToolError, match="index unavailable"):
        await query_codebase.fn(query="anything")


def test_get_container_requires_initialization():
    with pytest.raises(RuntimeError):
        get_container()
