"""Embedding model tags and their dimension-typed embedding values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Sequence

import numpy as np

from codebase_query.embedding.semantic_errors import DimensionMismatchError

# Ollama's nomic-embed-text
EMBEDDING_SIZE_TINY = 768
# Ollama's mxbai-embed-large
EMBEDDING_SIZE_XSMALL = 1024
# OpenAI's text-embedding-3-small
EMBEDDING_SIZE_SMALL = 1536
# OpenAI's text-embedding-3-large
EMBEDDING_SIZE_LARGE = 3072


class EmbeddingModel(str, Enum):
    """Backend and model combination that produced an embedding."""

    OLLAMA_NOMIC_EMBED_TEXT = "ollama-nomic-embed-text"
    OLLAMA_MXBAI_EMBED_LARGE = "ollama-mxbai-embed-large"
    OPENAI_TEXT_EMBEDDING_3_SMALL = "openai-text-embedding-3-small"
    OPENAI_TEXT_EMBEDDING_3_LARGE = "openai-text-embedding-3-large"

    @property
    def dimensions(self) -> int:
        return embedding_dimension(self)


EMBEDDING_DIMENSIONS: dict[EmbeddingModel, int] = {
    EmbeddingModel.OLLAMA_NOMIC_EMBED_TEXT: EMBEDDING_SIZE_TINY,
    EmbeddingModel.OLLAMA_MXBAI_EMBED_LARGE: EMBEDDING_SIZE_XSMALL,
    EmbeddingModel.OPENAI_TEXT_EMBEDDING_3_SMALL: EMBEDDING_SIZE_SMALL,
    EmbeddingModel.OPENAI_TEXT_EMBEDDING_3_LARGE: EMBEDDING_SIZE_LARGE,
}


def embedding_dimension(model: EmbeddingModel) -> int:
    """Return the canonical vector length produced by ``model``."""
    return EMBEDDING_DIMENSIONS[EmbeddingModel(model)]


_VARIANTS: dict[EmbeddingModel, type["Embedding"]] = {}


@dataclass(frozen=True, eq=False)
class Embedding:
    """A normalized vector tagged with the model that produced it.

    Each model has its own subclass; the subclass fixes the vector length,
    so an instance can only exist if its vector has the canonical dimension
    of its model. The stored array is read-only.

    Use ``normalize_embedding`` to build one from a raw provider vector, or
    ``Embedding.for_model`` when the vector is already normalized.
    """

    model: ClassVar[EmbeddingModel]
    dimensions: ClassVar[int]

    vector: np.ndarray

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls.dimensions = EMBEDDING_DIMENSIONS[cls.model]
        _VARIANTS[cls.model] = cls

    def __post_init__(self) -> None:
        if type(self) is Embedding:
            raise TypeError("Embedding must be created through a model-specific variant")

        vector = np.array(self.vector, dtype=np.float32)
        if vector.ndim != 1 or vector.shape[0] != self.dimensions:
            raise DimensionMismatchError(self.model.value, self.dimensions, vector.size)

        vector.setflags(write=False)
        object.__setattr__(self, "vector", vector)

    @classmethod
    def for_model(cls, model: EmbeddingModel, vector: Sequence[float] | np.ndarray) -> "Embedding":
        """Wrap ``vector`` in the variant registered for ``model``."""
        variant = _VARIANTS[EmbeddingModel(model)]
        return variant(np.asarray(vector, dtype=np.float32))

    def tolist(self) -> list[float]:
        return [float(value) for value in self.vector]

    def __len__(self) -> int:
        return self.vector.shape[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Embedding):
            return NotImplemented
        return self.model == other.model and bool(np.array_equal(self.vector, other.vector))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dimensions={self.dimensions})"


class NomicEmbedTextEmbedding(Embedding):
    model = EmbeddingModel.OLLAMA_NOMIC_EMBED_TEXT


class MxbaiEmbedLargeEmbedding(Embedding):
    model = EmbeddingModel.OLLAMA_MXBAI_EMBED_LARGE


class TextEmbedding3SmallEmbedding(Embedding):
    model = EmbeddingModel.OPENAI_TEXT_EMBEDDING_3_SMALL


class TextEmbedding3LargeEmbedding(Embedding):
    model = EmbeddingModel.OPENAI_TEXT_EMBEDDING_3_LARGE
