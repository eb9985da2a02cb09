"""Composition root wiring adapters into the query pipeline."""

import logging

from ..adapters.outbound.embedding.gemini_embedding_adapter import GeminiEmbeddingAdapter
from ..adapters.outbound.llm.gemini_adapter import GeminiAdapter
from ..adapters.outbound.vector_store.qdrant_adapter import QdrantAdapter
from ..adapters.outbound.vector_store.supabase_adapter import SupabaseAdapter
from ..config.settings import Settings
from ..core.domain.exceptions import InvalidConfigurationError, MissingAPIKeyError
from ..core.ports.vector_store_port import VectorStorePort
from ..core.services import ContextAssembler, PromptBuilder, QueryPipeline, RetrievalService

logger = logging.getLogger(__name__)


def build_vector_store(cfg: Settings) -> VectorStorePort:
    """Create the vector store adapter selected by ``vector_backend``."""
    if cfg.vector_backend == "supabase":
        if not cfg.supabase_url or not cfg.supabase_key:
            raise MissingAPIKeyError(
                "Supabase credentials not set. Set SUPABASE_URL and SUPABASE_KEY in .env",
                context={"vector_backend": cfg.vector_backend},
            )
        return SupabaseAdapter(
            url=cfg.supabase_url,
            api_key=cfg.supabase_key,
            match_function=cfg.supabase_match_function,
            timeout_seconds=cfg.request_timeout_seconds,
        )

    if cfg.vector_backend == "qdrant":
        if not cfg.qdrant_url:
            raise MissingAPIKeyError(
                "Qdrant URL not set. Set QDRANT_URL (and QDRANT_API_KEY) in .env",
                context={"vector_backend": cfg.vector_backend},
            )
        return QdrantAdapter(
            url=cfg.qdrant_url,
            api_key=cfg.qdrant_api_key,
            collection_name=cfg.qdrant_collection,
            timeout_seconds=cfg.request_timeout_seconds,
        )

    raise InvalidConfigurationError(
        f"Unknown vector backend '{cfg.vector_backend}'",
        context={"vector_backend": cfg.vector_backend},
    )


def build_pipeline(cfg: Settings) -> QueryPipeline:
    """Build a fully wired QueryPipeline from settings.

    Raises:
        MissingAPIKeyError: If a required credential is not configured.
    """
    if not cfg.google_api_key:
        raise MissingAPIKeyError(
            "Google API key not set. Get one at https://aistudio.google.com/ "
            "and set GOOGLE_API_KEY in your .env file."
        )

    logger.info("Initializing QueryPipeline (vector backend: %s)...", cfg.vector_backend)

    embedder = GeminiEmbeddingAdapter(
        api_key=cfg.google_api_key,
        model_name=cfg.embedding_model,
        dimension=cfg.embedding_dimension,
        timeout_seconds=cfg.request_timeout_seconds,
    )
    llm = GeminiAdapter(
        api_key=cfg.google_api_key,
        model=cfg.llm_model,
        temperature=cfg.llm_temperature,
        max_output_tokens=cfg.llm_max_output_tokens,
        timeout_seconds=cfg.request_timeout_seconds,
    )
    retriever = RetrievalService(
        embedder,
        build_vector_store(cfg),
        strip_language_marker=cfg.strip_language_marker_for_embedding,
    )

    return QueryPipeline(
        retriever=retriever,
        assembler=ContextAssembler(max_chars=cfg.max_context_chars),
        prompt_builder=PromptBuilder(jurisdiction=cfg.jurisdiction),
        llm=llm,
        top_k=cfg.top_k_results,
    )
