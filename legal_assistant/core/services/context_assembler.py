"""Formats retrieved documents into the context block of the prompt."""

from ..domain import RetrievedDocument

BLOCK_SEPARATOR = "\n\n"


class ContextAssembler:
    """Turns ranked documents into labeled context text.

    Each document becomes a block labeled with its 1-based rank and its
    similarity as a percentage. Rank order is preserved.
    """

    def __init__(self, max_chars: int | None = None) -> None:
        """Initialize the assembler.

        Args:
            max_chars: Optional budget for the assembled context, in
                characters. ``None`` keeps every document.
        """
        self.max_chars = max_chars

    @staticmethod
    def format_document(index: int, document: RetrievedDocument) -> str:
        """Format one document given its 0-based rank."""
        return (
            f"Document {index + 1} (Similarity: {document.similarity_percent:.1f}%):\n"
            f"{document.content}"
        )

    def select(self, documents: list[RetrievedDocument]) -> list[RetrievedDocument]:
        """Return the leading documents that fit within ``max_chars``.

        The first document is always kept so a single long document
        still grounds the answer.
        """
        if self.max_chars is None or not documents:
            return list(documents)

        selected: list[RetrievedDocument] = []
        total = 0
        for index, document in enumerate(documents):
            block_length = len(self.format_document(index, document))
            if selected:
                block_length += len(BLOCK_SEPARATOR)
                if total + block_length > self.max_chars:
                    break
            selected.append(document)
            total += block_length
        return selected

    def assemble(self, documents: list[RetrievedDocument]) -> str:
        """Join all documents into a single context string.

        Returns:
            The formatted context, or an empty string for no documents.
        """
        return BLOCK_SEPARATOR.join(
            self.format_document(index, document) for index, document in enumerate(documents)
        )
