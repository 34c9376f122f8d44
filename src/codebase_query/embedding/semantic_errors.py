"""Typed errors for embedding providers and vector binding."""


class EmbeddingError(RuntimeError):
    """Base class for failures while producing an embedding."""


class TransportError(EmbeddingError):
    """Raised when the request to the embedding service could not be completed."""


class DecodeError(EmbeddingError):
    """Raised when the embedding service returned a body we could not parse."""


class UnsupportedModelError(EmbeddingError):
    """Raised when a provider is configured with a model it cannot serve."""

    def __init__(self, provider: str, model: str) -> None:
        self.provider = provider
        self.model = model
        super().__init__(f"{provider} provider does not support embedding model {model}")


class DimensionMismatchError(EmbeddingError):
    """Raised when a vector's length disagrees with the canonical dimension of its model."""

    def __init__(self, model: str, expected: int, actual: int) -> None:
        self.model = model
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Embedding model {model} produces {expected}-dimensional vectors "
            f"but received a {actual}-dimensional vector."
        )


class EmptyResponseError(EmbeddingError):
    """Raised when the embedding service returned no embedding records."""


class SemanticDependenciesMissingError(EmbeddingError):
    """Raised when a provider is missing credentials or other required configuration."""
