"""Ollama-based local embedding provider."""

from __future__ import annotations

from typing import Optional

import httpx
from pydantic import BaseModel, StrictFloat

from codebase_query.embedding.http_provider import DEFAULT_TIMEOUT, HttpEmbeddingProvider
from codebase_query.embedding.models import Embedding, EmbeddingModel
from codebase_query.embedding.semantic_errors import UnsupportedModelError
from codebase_query.embedding.vectors import normalize_embedding

OLLAMA_EMBEDDINGS_URL = "http://localhost:11434/api/embeddings"


class OllamaEmbeddingRequest(BaseModel):
    model: str
    prompt: str


class OllamaEmbeddingResponse(BaseModel):
    embedding: list[StrictFloat]


class OllamaEmbeddingProvider(HttpEmbeddingProvider):
    """Embedding provider backed by a local Ollama embeddings endpoint."""

    provider_name = "Ollama"

    _MODEL_NAMES = {
        EmbeddingModel.OLLAMA_NOMIC_EMBED_TEXT: "nomic-embed-text",
        EmbeddingModel.OLLAMA_MXBAI_EMBED_LARGE: "mxbai-embed-large",
    }

    def __init__(
        self,
        model: EmbeddingModel = EmbeddingModel.OLLAMA_NOMIC_EMBED_TEXT,
        *,
        endpoint: str = OLLAMA_EMBEDDINGS_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(model, endpoint=endpoint, client=client, timeout=timeout)

    async def get_embedding(self, text: str) -> Embedding:
        model_name = self._MODEL_NAMES.get(self.model)
        if model_name is None:
            raise UnsupportedModelError(self.provider_name, self.model.value)

        request = OllamaEmbeddingRequest(model=model_name, prompt=text)
        body = await self._post_json(request.model_dump())
        response = self._decode(OllamaEmbeddingResponse, body)

        return normalize_embedding(response.embedding, self.model)
