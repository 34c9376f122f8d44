"""Embedding provider protocol for pluggable embedding backends."""

from typing import Protocol

from codebase_query.embedding.models import Embedding, EmbeddingModel


class EmbeddingProvider(Protocol):
    """Contract for embedding providers. Text in, normalized embedding out."""

    model: EmbeddingModel

    async def get_embedding(self, text: str) -> Embedding:
        """Embed a single text."""
        ...

    async def aclose(self) -> None:
        """Release any HTTP client owned by the provider."""
        ...
