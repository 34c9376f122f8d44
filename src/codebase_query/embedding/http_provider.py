"""Shared HTTP plumbing for embedding providers backed by a JSON API."""

from __future__ import annotations

import asyncio
from typing import Any, ClassVar, Mapping, Optional, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from codebase_query.embedding.embedding_provider import EmbeddingProvider
from codebase_query.embedding.models import EmbeddingModel
from codebase_query.embedding.semantic_errors import DecodeError, TransportError

ResponseT = TypeVar("ResponseT", bound=BaseModel)

DEFAULT_TIMEOUT = 30.0


class HttpEmbeddingProvider(EmbeddingProvider):
    """Base class owning the httpx client of a provider.

    Subclasses build their own request body and parse their own response
    model; this class only sends one POST and turns transport and JSON
    failures into typed errors. No retries.
    """

    provider_name: ClassVar[str]

    def __init__(
        self,
        model: EmbeddingModel,
        *,
        endpoint: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.model = EmbeddingModel(model)
        self.endpoint = endpoint
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None
        self._client_lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client

        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(timeout=self._timeout)
            return self._client

    async def _post_json(
        self, payload: Mapping[str, Any], headers: Optional[Mapping[str, str]] = None
    ) -> Any:
        client = await self._get_client()
        logger.debug(f"POST {self.endpoint} model={payload.get('model')}")

        try:
            response = await client.post(self.endpoint, json=payload, headers=headers)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error(f"{self.provider_name} embedding request failed: {exc}")
            raise TransportError(f"Failed to embed with {self.provider_name}: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            logger.error(f"{self.provider_name} returned a non-JSON response: {exc}")
            raise DecodeError(f"Unable to parse {self.provider_name} response: {exc}") from exc

    def _decode(self, response_model: type[ResponseT], body: Any) -> ResponseT:
        try:
            return response_model.model_validate(body)
        except ValidationError as exc:
            logger.error(f"{self.provider_name} response did not match the expected shape: {exc}")
            raise DecodeError(f"Unexpected {self.provider_name} response shape: {exc}") from exc

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
