"""Embedding models, normalization and provider implementations."""

from codebase_query.embedding.embedding_provider import EmbeddingProvider
from codebase_query.embedding.models import (
    EMBEDDING_DIMENSIONS,
    Embedding,
    EmbeddingModel,
    embedding_dimension,
)
from codebase_query.embedding.ollama_provider import OllamaEmbeddingProvider
from codebase_query.embedding.openai_provider import OpenAIEmbeddingProvider
from codebase_query.embedding.vectors import normalize_embedding, normalize_vector

__all__ = [
    "EMBEDDING_DIMENSIONS",
    "Embedding",
    "EmbeddingModel",
    "EmbeddingProvider",
    "OllamaEmbeddingProvider",
    "OpenAIEmbeddingProvider",
    "embedding_dimension",
    "normalize_embedding",
    "normalize_vector",
]
