"""Supabase (pgvector) similarity search over PostgREST RPC.

The index lives in a Supabase project that exposes a ``match_documents``
SQL function taking ``query_embedding`` and ``match_count`` and returning
rows with ``content`` and ``similarity``.
"""

import logging
from typing import Any

import requests

from ....core.domain import RetrievedDocument
from ....core.domain.exceptions import (
    VectorStoreConnectionError,
    VectorStoreQueryError,
    VectorStoreResponseError,
)
from ....core.ports.vector_store_port import VectorStorePort
from .parsing import parse_match

logger = logging.getLogger(__name__)


class SupabaseAdapter(VectorStorePort):
    """Read-only vector search against a Supabase ``match_documents`` RPC."""

    backend_name = "supabase"

    def __init__(
        self,
        url: str,
        api_key: str,
        match_function: str = "match_documents",
        timeout_seconds: float | None = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            url: Supabase project URL.
            api_key: Supabase anon or service key.
            match_function: Name of the SQL similarity function.
            timeout_seconds: Optional per-request timeout.
            session: Optional requests session to reuse connections.
        """
        self.url = url.rstrip("/")
        self.api_key = api_key
        self.match_function = match_function
        self.timeout_seconds = timeout_seconds
        self._session = session or requests.Session()

    @property
    def rpc_url(self) -> str:
        return f"{self.url}/rest/v1/rpc/{self.match_function}"

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def search(self, embedding: list[float], limit: int) -> list[RetrievedDocument]:
        payload = {"query_embedding": embedding, "match_count": limit}

        try:
            response = self._session.post(
                self.rpc_url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as e:
            raise VectorStoreConnectionError(
                f"Failed to reach Supabase at {self.url}",
                cause=e,
                context={"url": self.url},
            ) from e

        if response.status_code >= 400:
            raise VectorStoreQueryError(
                f"Supabase RPC {self.match_function} failed with status {response.status_code}",
                context={
                    "function": self.match_function,
                    "status": response.status_code,
                    "body": response.text[:500],
                },
            )

        try:
            rows: Any = response.json()
        except ValueError as e:
            raise VectorStoreResponseError(
                "Supabase returned a non-JSON response",
                cause=e,
                context={"function": self.match_function},
            ) from e

        if not isinstance(rows, list):
            raise VectorStoreResponseError(
                f"Expected a list of matches, got {type(rows).__name__}",
                context={"function": self.match_function},
            )

        documents = []
        for position, row in enumerate(rows):
            if not isinstance(row, dict):
                raise VectorStoreResponseError(
                    f"Match {position} is not an object",
                    context={"function": self.match_function},
                )
            documents.append(
                parse_match(row.get("content"), row.get("similarity"), row.get("id"), position)
            )

        logger.debug("Supabase returned %d matches (limit=%d)", len(documents), limit)
        return documents[:limit]
