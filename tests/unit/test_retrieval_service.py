"""Tests for RetrievalService."""

import logging

import pytest

from legal_assistant.core.domain import RetrievedDocument
from legal_assistant.core.domain.exceptions import (
    EmbeddingAPIError,
    InvalidInputError,
    VectorStoreQueryError,
)
from legal_assistant.core.services import RetrievalService

pytestmark = pytest.mark.unit


def test_retrieve_embeds_then_searches(retriever, mock_embedder, mock_vector_store, mock_embedding):
    docs = retriever.retrieve("What are the grounds for divorce?", k=5)

    mock_embedder.embed.assert_called_once_with("What are the grounds for divorce?")
    mock_vector_store.search.assert_called_once_with(mock_embedding, limit=5)
    assert [d.similarity for d in docs] == [0.91, 0.77]


def test_order_is_not_resorted(mock_embedder, mock_vector_store):
    docs = [
        RetrievedDocument(content="a", similarity=0.5),
        RetrievedDocument(content="b", similarity=0.5),
        RetrievedDocument(content="c", similarity=0.6),
    ]
    mock_vector_store.search.return_value = docs

    assert RetrievalService(mock_embedder, mock_vector_store).retrieve("q", k=3) == docs


def test_results_truncated_to_k(mock_embedder, mock_vector_store):
    mock_vector_store.search.return_value = [
        RetrievedDocument(content=str(i), similarity=0.9) for i in range(7)
    ]

    docs = RetrievalService(mock_embedder, mock_vector_store).retrieve("q", k=5)

    assert len(docs) == 5
    assert [d.content for d in docs] == ["0", "1", "2", "3", "4"]


def test_vector_store_failure_returns_empty(retriever, mock_vector_store, caplog):
    mock_vector_store.search.side_effect = VectorStoreQueryError("rpc failed")

    with caplog.at_level(logging.WARNING):
        assert retriever.retrieve("q") == []

    assert "RetrievalError" in caplog.text


def test_unexpected_vector_store_exception_returns_empty(retriever, mock_vector_store):
    mock_vector_store.search.side_effect = RuntimeError("socket closed")
    assert retriever.retrieve("q") == []


def test_embedding_failure_propagates(retriever, mock_embedder, mock_vector_store):
    mock_embedder.embed.side_effect = EmbeddingAPIError("quota")

    with pytest.raises(EmbeddingAPIError):
        retriever.retrieve("q")

    mock_vector_store.search.assert_not_called()


def test_invalid_k(retriever):
    with pytest.raises(InvalidInputError):
        retriever.retrieve("q", k=0)


def test_marker_kept_by_default(retriever, mock_embedder):
    retriever.retrieve("[Language: Hindi] what is divorce")
    mock_embedder.embed.assert_called_once_with("[Language: Hindi] what is divorce")


def test_marker_stripped_when_configured(mock_embedder, mock_vector_store):
    service = RetrievalService(mock_embedder, mock_vector_store, strip_language_marker=True)

    service.retrieve("[Language: Hindi] what is divorce")

    mock_embedder.embed.assert_called_once_with("what is divorce")


def test_bare_marker_is_embedded_unchanged(mock_embedder, mock_vector_store):
    service = RetrievalService(mock_embedder, mock_vector_store, strip_language_marker=True)

    service.retrieve("[Language: Hindi]")

    mock_embedder.embed.assert_called_once_with("[Language: Hindi]")
