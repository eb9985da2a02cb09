"""Retrieved document model for the RAG pipeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RetrievedDocument:
    """A document returned by a similarity search.

    Rank is implicit: the position in the list returned by the vector
    store, descending by similarity.

    Attributes:
        content: The text body of the document.
        similarity: Similarity to the query (0.0 to 1.0, higher is more relevant).
        doc_id: Identifier assigned by the vector store, when it returns one.
    """

    content: str
    similarity: float
    doc_id: str | None = None

    @property
    def similarity_percent(self) -> float:
        """Similarity expressed as a percentage."""
        return self.similarity * 100
