"""Core services of the RAG query pipeline."""

from .context_assembler import ContextAssembler
from .prompt_builder import PromptBuilder
from .query_pipeline import MESSAGE_REQUIRED, QueryPipeline, validate_message
from .retrieval_service import RetrievalService

__all__ = [
    "MESSAGE_REQUIRED",
    "ContextAssembler",
    "PromptBuilder",
    "QueryPipeline",
    "RetrievalService",
    "validate_message",
]
