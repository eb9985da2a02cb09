"""Document retriever: embeds a query and runs a similarity search."""

import logging

from ...common.exception_handler import log_exception
from ..domain import Query, RetrievedDocument
from ..domain.exceptions import InvalidInputError, RetrievalError
from ..ports.embedding_port import EmbeddingPort
from ..ports.vector_store_port import VectorStorePort

logger = logging.getLogger(__name__)


class RetrievalService:
    """Retrieves the legal documents most similar to a query.

    Embedding failures propagate: without a query vector the request
    cannot be processed. Vector store failures are absorbed and logged,
    and the caller receives no documents so an ungrounded answer can
    still be attempted.
    """

    def __init__(
        self,
        embedder: EmbeddingPort,
        vector_store: VectorStorePort,
        strip_language_marker: bool = False,
    ) -> None:
        """Initialize the retriever.

        Args:
            embedder: Embedding model used for the query vector.
            vector_store: Similarity search backend.
            strip_language_marker: Remove ``[Language: ...]`` markers from the
                query before embedding it.
        """
        self.embedder = embedder
        self.vector_store = vector_store
        self.strip_language_marker = strip_language_marker

    def _embedding_text(self, query: str) -> str:
        if self.strip_language_marker:
            stripped = Query.parse(query).text
            # A bare marker has no content left to embed; fall back to the full text
            return stripped or query
        return query

    def retrieve(self, query: str, k: int = 5) -> list[RetrievedDocument]:
        """Return the top ``k`` documents for a query, most similar first.

        Args:
            query: The user's question.
            k: Maximum number of documents to return.

        Returns:
            Documents in the vector store's order, at most ``k`` of them.
            Empty if the vector store fails.

        Raises:
            InvalidInputError: If ``k`` is less than 1 or the query is blank.
            EmbeddingError: If the query cannot be embedded.
        """
        if k < 1:
            raise InvalidInputError("k must be at least 1", context={"k": k})

        embedding = self.embedder.embed(self._embedding_text(query))

        try:
            documents = self.vector_store.search(embedding, limit=k)
        except Exception as e:
            log_exception(
                RetrievalError("Similarity search failed, continuing without documents", cause=e),
                stage="retrieval",
                log=logger,
                level=logging.WARNING,
                backend=self.vector_store.backend_name,
                k=k,
            )
            return []

        if len(documents) > k:
            logger.debug("Vector store returned %d documents for k=%d, truncating", len(documents), k)
            documents = documents[:k]

        logger.info("Retrieved %d documents (k=%d)", len(documents), k)
        return list(documents)
