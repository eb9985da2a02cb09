"""LLM Port Interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterator


class LLMPort(ABC):
    """Abstract interface for text generation models."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Generate a complete answer for the prompt.

        Raises:
            GenerationError: If the model is unreachable, rejects the prompt,
                or returns no text.
        """
        ...

    @abstractmethod
    def generate_stream(self, prompt: str) -> Iterator[str]:
        """Generate an answer as a stream of text chunks."""
        ...
