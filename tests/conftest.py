"""
Pytest configuration and shared fixtures.
"""

from unittest.mock import MagicMock

import pytest

from legal_assistant.core.domain import RetrievedDocument
from legal_assistant.core.ports import EmbeddingPort, LLMPort, VectorStorePort
from legal_assistant.core.services import (
    ContextAssembler,
    PromptBuilder,
    QueryPipeline,
    RetrievalService,
)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (HTTP surface with test doubles)")


@pytest.fixture
def mock_embedding():
    """A mock 768-dimensional embedding vector."""
    return [0.01 * i for i in range(768)]


@pytest.fixture
def sample_documents():
    """Two retrieved legal documents, most similar first."""
    return [
        RetrievedDocument(
            content="Section 13 of the Hindu Marriage Act lists the grounds for divorce, "
            "including cruelty, desertion and adultery.",
            similarity=0.91,
            doc_id="1",
        ),
        RetrievedDocument(
            content="A petition for divorce by mutual consent may be presented under Section 13B.",
            similarity=0.77,
            doc_id="2",
        ),
    ]


@pytest.fixture
def mock_embedder(mock_embedding):
    """Embedding port double returning a fixed vector."""
    embedder = MagicMock(spec=EmbeddingPort)
    embedder.embed.return_value = mock_embedding
    return embedder


@pytest.fixture
def mock_vector_store(sample_documents):
    """Vector store double returning the sample documents."""
    store = MagicMock(spec=VectorStorePort)
    store.backend_name = "mock"
    store.search.return_value = sample_documents
    return store


@pytest.fixture
def mock_llm():
    """LLM port double returning a fixed answer."""
    llm = MagicMock(spec=LLMPort)
    llm.generate.return_value = "Divorce may be sought on the grounds listed in Document 1."
    llm.generate_stream.return_value = iter(["Divorce may be ", "sought on several grounds."])
    return llm


@pytest.fixture
def retriever(mock_embedder, mock_vector_store):
    return RetrievalService(mock_embedder, mock_vector_store)


@pytest.fixture
def pipeline(retriever, mock_llm):
    """Pipeline with real core services and mocked external clients."""
    return QueryPipeline(
        retriever=retriever,
        assembler=ContextAssembler(),
        prompt_builder=PromptBuilder(),
        llm=mock_llm,
        top_k=5,
    )
