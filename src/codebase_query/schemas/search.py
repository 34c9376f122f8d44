"""Schemas for semantic search hits and the excerpts materialized from them."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchHit(BaseModel):
    """A ranked match produced by the project index.

    The byte range ``[start, end)`` refers to the UTF-8 encoding of the file
    as it was when the index was built.
    """

    model_config = ConfigDict(frozen=True)

    worktree_root: Optional[Path] = Field(
        None, description="Absolute root of the worktree, None once the worktree is gone"
    )
    path: Path = Field(..., description="Worktree-relative path of the file")
    start: int = Field(..., ge=0, description="Byte offset where the match starts")
    end: int = Field(..., ge=0, description="Byte offset where the match ends (exclusive)")
    score: float = Field(..., description="Relevance score")


class CodebaseExcerpt(BaseModel):
    """Text of a search hit, sliced from the current file content."""

    path: str = Field(..., description="Display path of the file")
    text: str = Field(..., description="Excerpt text")
    score: float = Field(..., description="Relevance score of the hit")

