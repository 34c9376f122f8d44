"""Tests for vector normalization and model binding."""

import math

import numpy as np
import pytest

from codebase_query.embedding.models import (
    EMBEDDING_SIZE_LARGE,
    EMBEDDING_SIZE_SMALL,
    EMBEDDING_SIZE_TINY,
    EmbeddingModel,
    NomicEmbedTextEmbedding,
    TextEmbedding3SmallEmbedding,
)
from codebase_query.embedding.semantic_errors import DimensionMismatchError
from codebase_query.embedding.vectors import normalize_embedding, normalize_vector


def test_normalize_vector_of_ones():
    normalized = normalize_vector([1.0, 1.0, 1.0])

    expected = 1.0 / math.sqrt(3.0)
    assert normalized.tolist() == pytest.approx([expected] * 3, rel=1e-6)


@pytest.mark.parametrize(
    "vector",
    [
        [3.0, 4.0],
        [0.1, -0.2, 0.3, -0.4],
        [1e-3] * 768,
        [float(i) for i in range(1, 1025)],
    ],
)
def test_normalize_vector_has_unit_norm(vector):
    normalized = normalize_vector(vector)

    assert len(normalized) == len(vector)
    assert float(np.linalg.norm(normalized)) == pytest.approx(1.0, abs=1e-5)


def test_normalize_vector_keeps_direction():
    assert normalize_vector([3.0, 4.0]).tolist() == pytest.approx([0.6, 0.8], rel=1e-6)


def test_normalize_vector_is_idempotent():
    once = normalize_vector([0.5, -1.5, 2.0, 7.25])
    twice = normalize_vector(once)

    assert twice.tolist() == pytest.approx(once.tolist(), rel=1e-6)


def test_normalize_zero_vector_returns_nan():
    """Zero vectors are not special-cased: every component is NaN."""
    normalized = normalize_vector([0.0, 0.0, 0.0])

    assert len(normalized) == 3
    assert np.isnan(normalized).all()


def test_normalize_embedding_binds_matching_dimension():
    embedding = normalize_embedding([1.0] * EMBEDDING_SIZE_SMALL, EmbeddingModel.OPENAI_TEXT_EMBEDDING_3_SMALL)

    assert isinstance(embedding, TextEmbedding3SmallEmbedding)
    assert embedding.model is EmbeddingModel.OPENAI_TEXT_EMBEDDING_3_SMALL
    assert len(embedding) == EMBEDDING_SIZE_SMALL
    assert float(np.linalg.norm(embedding.vector)) == pytest.approx(1.0, abs=1e-5)


def test_normalize_embedding_rejects_other_model_dimension():
    with pytest.raises(DimensionMismatchError) as error:
        normalize_embedding([1.0] * EMBEDDING_SIZE_SMALL, EmbeddingModel.OPENAI_TEXT_EMBEDDING_3_LARGE)

    assert error.value.expected == EMBEDDING_SIZE_LARGE
    assert error.value.actual == EMBEDDING_SIZE_SMALL


def test_normalize_embedding_rejects_unknown_length():
    with pytest.raises(DimensionMismatchError) as error:
        normalize_embedding([1.0, 2.0, 3.0], EmbeddingModel.OLLAMA_NOMIC_EMBED_TEXT)

    assert error.value.expected == EMBEDDING_SIZE_TINY
    assert error.value.actual == 3
    assert "768-dimensional" in str(error.value)


def test_normalize_embedding_normalizes_before_binding():
    raw = [2.0] + [0.0] * (EMBEDDING_SIZE_TINY - 1)

    embedding = normalize_embedding(raw, EmbeddingModel.OLLAMA_NOMIC_EMBED_TEXT)

    assert isinstance(embedding, NomicEmbedTextEmbedding)
    assert embedding.vector[0] == pytest.approx(1.0)
    assert embedding.vector[1:].sum() == 0.0
