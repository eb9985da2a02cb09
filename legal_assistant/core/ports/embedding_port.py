"""Embedding Port Interface."""

from abc import ABC, abstractmethod


class EmbeddingPort(ABC):
    """Abstract interface for query embedding models."""

    @abstractmethod
    def embed(self, text: str) -> list[float]:
        """Embed a single text into a fixed-length vector.

        Raises:
            InvalidInputError: If the text is empty after trimming.
            EmbeddingError: If the remote model fails or returns a bad vector.
        """
        ...
