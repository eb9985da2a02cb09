"""Vector Store Port Interface."""

from abc import ABC, abstractmethod

from ..domain import RetrievedDocument


class VectorStorePort(ABC):
    """Read-only similarity search over a pre-populated document index."""

    #: Name reported by the health endpoint
    backend_name: str = "unknown"

    @abstractmethod
    def search(self, embedding: list[float], limit: int) -> list[RetrievedDocument]:
        """Return up to ``limit`` nearest documents, most similar first.

        Raises:
            VectorStoreError: If the search fails or returns an unexpected shape.
        """
        ...
