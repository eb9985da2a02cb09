"""Qdrant similarity search adapter.

Searches an existing collection whose points carry the document text in
their payload. The collection is populated elsewhere; this adapter never
writes to it.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from qdrant_client import QdrantClient

from ....core.domain import RetrievedDocument
from ....core.domain.exceptions import (
    VectorStoreConnectionError,
    VectorStoreQueryError,
    VectorStoreResponseError,
)
from ....core.ports.vector_store_port import VectorStorePort
from .parsing import parse_match

logger = logging.getLogger(__name__)


class QdrantAdapter(VectorStorePort):
    """Read-only vector search against a Qdrant collection."""

    backend_name = "qdrant"

    def __init__(
        self,
        url: str,
        api_key: str,
        collection_name: str = "legal_documents",
        content_field: str = "content",
        timeout_seconds: float | None = None,
        client: "QdrantClient | None" = None,
    ) -> None:
        """Initialize the Qdrant adapter.

        Args:
            url: Qdrant cluster URL.
            api_key: Qdrant API key.
            collection_name: Collection holding the legal documents.
            content_field: Payload field with the document text.
            timeout_seconds: Optional per-request timeout.
            client: Pre-built client (mainly for tests).
        """
        self.url = url
        self.api_key = api_key
        self.collection_name = collection_name
        self.content_field = content_field
        self.timeout_seconds = timeout_seconds
        self._client = client

    def _get_client(self) -> "QdrantClient":
        """Get or create the Qdrant client connection."""
        if self._client is None:
            try:
                from qdrant_client import QdrantClient

                self._client = QdrantClient(
                    url=self.url,
                    api_key=self.api_key or None,
                    timeout=int(self.timeout_seconds) if self.timeout_seconds else None,
                )
                logger.info("Connected to Qdrant at: %s", self.url)
            except Exception as e:
                raise VectorStoreConnectionError(
                    f"Failed to connect to Qdrant at {self.url}",
                    cause=e,
                    context={"url": self.url},
                ) from e
        return self._client

    def search(self, embedding: list[float], limit: int) -> list[RetrievedDocument]:
        client = self._get_client()

        try:
            results = client.query_points(
                collection_name=self.collection_name,
                query=embedding,
                limit=limit,
                with_payload=True,
            )
        except Exception as e:
            raise VectorStoreQueryError(
                f"Failed to query Qdrant collection {self.collection_name}",
                cause=e,
                context={"collection": self.collection_name, "limit": limit},
            ) from e

        points = getattr(results, "points", None)
        if points is None:
            raise VectorStoreResponseError(
                "Qdrant response has no points",
                context={"collection": self.collection_name},
            )

        documents = []
        for position, point in enumerate(points):
            payload = dict(point.payload) if point.payload else {}
            documents.append(
                parse_match(payload.get(self.content_field), point.score, point.id, position)
            )

        logger.debug("Qdrant returned %d points (limit=%d)", len(documents), limit)
        return documents[:limit]
