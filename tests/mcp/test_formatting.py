"""Tests for MCP output formatting."""

from codebase_query.mcp.formatting import format_excerpts, format_score
from codebase_query.schemas.search import CodebaseExcerpt


def test_format_score_uses_shortest_float32_form():
    assert format_score(1.0) == "1"
    assert format_score(0.5) == "0.5"
    assert format_score(0.87) == "0.87"


def test_format_excerpts_empty():
    assert format_excerpts([]) == "Semantic search results for user query:\n"


def test_format_excerpts_stable_framing():
    excerpts = [
        CodebaseExcerpt(path="src/main.py", text="def main():\n", score=0.75),
        CodebaseExcerpt(path="README.md", text="Project", score=1.0),
    ]

    assert format_excerpts(excerpts) == (
        "Semantic search results for user query:\n"
        "Excerpt from src/main.py, score 0.75:\n"
        "~~~\n"
        "def main():\n"
        "~~~\n"
        "Excerpt from README.md, score 1:\n"
        "~~~\n"
        "Project~~~\n"
    )


def test_format_score_nan():
    assert format_score(float("nan")) == "NaN"
    excerpt = CodebaseExcerpt(path="a.py", text="x", score=float("nan"))
    assert "Excerpt from a.py, score NaN:\n" in format_excerpts([excerpt])
