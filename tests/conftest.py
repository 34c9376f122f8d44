"""Common test fixtures."""

from pathlib import Path
from typing import Sequence

import pytest

from codebase_query.config import CodebaseQueryConfig, ConfigManager
from codebase_query.schemas.search import SearchHit


class StubProjectIndex:
    """Project index returning a fixed list of hits."""

    def __init__(self, hits: Sequence[SearchHit]):
        self.hits = list(hits)
        self.calls: list[tuple[str, int]] = []

    async def search(self, query: str, limit: int) -> list[SearchHit]:
        self.calls.append((query, limit))
        return self.hits[:limit]


@pytest.fixture
def worktree(tmp_path) -> Path:
    """A small worktree with ASCII and multi-byte source files."""
    root = tmp_path / "worktree"
    (root / "src").mkdir(parents=True)
    (root / "src" / "main.py").write_text(
        "def main():\n    print('hello')\n", encoding="utf-8", newline=""
    )
    (root / "src" / "greek.txt").write_text("αβγδ", encoding="utf-8", newline="")
    (root / "README.md").write_text("# Project\n\nSearchable text.\n", encoding="utf-8", newline="")
    return root


@pytest.fixture
def make_hit(worktree):
    def _make_hit(path: str, start: int, end: int, score: float = 0.5) -> SearchHit:
        return SearchHit(worktree_root=worktree, path=Path(path), start=start, end=end, score=score)

    return _make_hit


@pytest.fixture
def app_config(monkeypatch, tmp_path) -> CodebaseQueryConfig:
    """Test configuration installed as the process configuration."""
    for name in (
        "CODEBASE_QUERY_EMBEDDING_MODEL",
        "CODEBASE_QUERY_PROJECT_INDEX",
        "CODEBASE_QUERY_OPENAI_API_KEY",
        "CODEBASE_QUERY_SEARCH_LIMIT",
    ):
        monkeypatch.delenv(name, raising=False)

    config = CodebaseQueryConfig(env="test", log_dir=tmp_path / "logs")
    monkeypatch.setattr(ConfigManager, "_config", config)
    return config


@pytest.fixture
def stub_index():
    """Factory for project indexes returning fixed hits."""
    return StubProjectIndex
