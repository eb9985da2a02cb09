"""Tests for ContextAssembler formatting and budgeting."""

import pytest

from legal_assistant.core.domain import RetrievedDocument
from legal_assistant.core.services import ContextAssembler

pytestmark = pytest.mark.unit


def test_empty_documents_give_empty_context():
    assert ContextAssembler().assemble([]) == ""


def test_blocks_are_labeled_and_ordered(sample_documents):
    context = ContextAssembler().assemble(sample_documents)

    assert context == (
        "Document 1 (Similarity: 91.0%):\n"
        f"{sample_documents[0].content}\n\n"
        "Document 2 (Similarity: 77.0%):\n"
        f"{sample_documents[1].content}"
    )


def test_order_follows_input_not_similarity():
    docs = [
        RetrievedDocument(content="low", similarity=0.2),
        RetrievedDocument(content="high", similarity=0.9),
    ]
    context = ContextAssembler().assemble(docs)

    assert context.index("Document 1 (Similarity: 20.0%):\nlow") < context.index(
        "Document 2 (Similarity: 90.0%):\nhigh"
    )


def test_assemble_is_idempotent(sample_documents):
    assembler = ContextAssembler()
    assert assembler.assemble(sample_documents) == assembler.assemble(sample_documents)


def test_percentage_rounds_to_one_decimal():
    context = ContextAssembler().assemble([RetrievedDocument(content="c", similarity=0.87654)])
    assert context.startswith("Document 1 (Similarity: 87.7%):")


def test_select_without_budget_keeps_everything(sample_documents):
    assert ContextAssembler().select(sample_documents) == sample_documents


def test_select_drops_trailing_documents_over_budget():
    docs = [RetrievedDocument(content="a" * 50, similarity=0.9) for _ in range(3)]
    block = len(ContextAssembler.format_document(0, docs[0]))
    assembler = ContextAssembler(max_chars=block * 2 + 2)

    assert len(assembler.select(docs)) == 2


def test_select_always_keeps_first_document():
    docs = [RetrievedDocument(content="a" * 500, similarity=0.9)]
    assert ContextAssembler(max_chars=10).select(docs) == docs


def test_select_empty():
    assert ContextAssembler(max_chars=10).select([]) == []
