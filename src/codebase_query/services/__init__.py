"""Services for codebase-query."""

from codebase_query.services.excerpt_service import ExcerptService, ProjectIndex

__all__ = ["ExcerptService", "ProjectIndex"]
