"""Factory for creating configured embedding providers."""

from codebase_query.config import CodebaseQueryConfig
from codebase_query.embedding.embedding_provider import EmbeddingProvider
from codebase_query.embedding.models import EmbeddingModel
from codebase_query.embedding.ollama_provider import OllamaEmbeddingProvider
from codebase_query.embedding.openai_provider import OpenAIEmbeddingProvider

OLLAMA_MODELS = frozenset(
    {EmbeddingModel.OLLAMA_NOMIC_EMBED_TEXT, EmbeddingModel.OLLAMA_MXBAI_EMBED_LARGE}
)
OPENAI_MODELS = frozenset(
    {EmbeddingModel.OPENAI_TEXT_EMBEDDING_3_SMALL, EmbeddingModel.OPENAI_TEXT_EMBEDDING_3_LARGE}
)


def create_embedding_provider(
    app_config: CodebaseQueryConfig, model: EmbeddingModel | None = None
) -> EmbeddingProvider:
    """Create the provider that serves ``model`` (default: the configured model)."""
    model = EmbeddingModel(model or app_config.embedding_model)

    if model in OLLAMA_MODELS:
        return OllamaEmbeddingProvider(
            model,
            endpoint=app_config.ollama_url,
            timeout=app_config.request_timeout,
        )

    if model in OPENAI_MODELS:
        return OpenAIEmbeddingProvider(
            model,
            api_key=app_config.openai_api_key,
            endpoint=app_config.openai_url,
            timeout=app_config.request_timeout,
        )

    raise ValueError(f"Unsupported embedding model: {model}")  # pragma: no cover
