"""Pydantic schemas for search hits and excerpts."""

from codebase_query.schemas.search import CodebaseExcerpt, SearchHit

__all__ = ["CodebaseExcerpt", "SearchHit"]
