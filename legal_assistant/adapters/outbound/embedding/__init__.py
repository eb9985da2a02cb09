"""Embedding model adapters."""

from .gemini_embedding_adapter import GeminiEmbeddingAdapter

__all__ = ["GeminiEmbeddingAdapter"]
