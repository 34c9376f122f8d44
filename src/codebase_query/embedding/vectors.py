"""Vector normalization and binding of raw provider output to embedding models."""

from typing import Sequence

import numpy as np

from codebase_query.embedding.models import Embedding, EmbeddingModel, embedding_dimension
from codebase_query.embedding.semantic_errors import DimensionMismatchError


def normalize_vector(embedding: Sequence[float] | np.ndarray) -> np.ndarray:
    """Scale ``embedding`` to unit Euclidean length.

    There is no epsilon guard: an all-zero vector divides by a zero norm and
    every component of the result is NaN. Floating point warnings for that
    case are suppressed so the NaN vector is returned to the caller.

    Args:
        embedding: Raw vector of any length

    Returns:
        float32 array of the same length
    """
    vector = np.asarray(embedding, dtype=np.float32)
    norm = np.sqrt(np.dot(vector, vector))
    with np.errstate(divide="ignore", invalid="ignore"):
        return vector / norm


def normalize_embedding(
    embedding: Sequence[float] | np.ndarray, model: EmbeddingModel
) -> Embedding:
    """Normalize a raw provider vector and bind it to ``model``.

    Raises:
        DimensionMismatchError: If the vector length is not the canonical
            dimension of ``model``
    """
    normalized = normalize_vector(embedding)

    expected = embedding_dimension(model)
    if normalized.shape[0] != expected:
        raise DimensionMismatchError(EmbeddingModel(model).value, expected, normalized.shape[0])

    return Embedding.for_model(model, normalized)
