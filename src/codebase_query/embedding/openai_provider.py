"""OpenAI-based embedding provider for API-backed embeddings."""

from __future__ import annotations

import os
from typing import Optional

import httpx
from pydantic import BaseModel, StrictFloat

from codebase_query.embedding.http_provider import DEFAULT_TIMEOUT, HttpEmbeddingProvider
from codebase_query.embedding.models import Embedding, EmbeddingModel
from codebase_query.embedding.semantic_errors import (
    EmptyResponseError,
    SemanticDependenciesMissingError,
    UnsupportedModelError,
)
from codebase_query.embedding.vectors import normalize_embedding

OPENAI_EMBEDDINGS_URL = "https://api.openai.com/v1/embeddings"


class OpenAIEmbeddingRequest(BaseModel):
    model: str
    prompt: str


class OpenAIEmbeddingData(BaseModel):
    embedding: list[StrictFloat]


class OpenAIEmbeddingResponse(BaseModel):
    object: str
    model: str
    data: list[OpenAIEmbeddingData]


class OpenAIEmbeddingProvider(HttpEmbeddingProvider):
    """Embedding provider backed by OpenAI's embeddings API."""

    provider_name = "OpenAI"

    _MODEL_NAMES = {
        EmbeddingModel.OPENAI_TEXT_EMBEDDING_3_SMALL: "text-embedding-3-small",
        EmbeddingModel.OPENAI_TEXT_EMBEDDING_3_LARGE: "text-embedding-3-large",
    }

    def __init__(
        self,
        model: EmbeddingModel = EmbeddingModel.OPENAI_TEXT_EMBEDDING_3_SMALL,
        *,
        api_key: Optional[str] = None,
        endpoint: str = OPENAI_EMBEDDINGS_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(model, endpoint=endpoint, client=client, timeout=timeout)
        self._api_key = api_key

    def _resolve_api_key(self) -> str:
        api_key = self._api_key or os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise SemanticDependenciesMissingError(
                "OpenAI embedding provider requires OPENAI_API_KEY."
            )
        return api_key

    async def get_embedding(self, text: str) -> Embedding:
        model_name = self._MODEL_NAMES.get(self.model)
        if model_name is None:
            raise UnsupportedModelError(self.provider_name, self.model.value)

        api_key = self._resolve_api_key()
        request = OpenAIEmbeddingRequest(model=model_name, prompt=text)
        body = await self._post_json(
            request.model_dump(),
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}",
            },
        )
        response = self._decode(OpenAIEmbeddingResponse, body)

        if not response.data:
            raise EmptyResponseError("No embedding data found in OpenAI response")

        return normalize_embedding(response.data[0].embedding, self.model)
