"""Validation of similarity search rows into RetrievedDocument."""

import logging
import math
from typing import Any

from ....core.domain import RetrievedDocument
from ....core.domain.exceptions import VectorStoreResponseError

logger = logging.getLogger(__name__)


def parse_match(content: Any, similarity: Any, doc_id: Any, position: int) -> RetrievedDocument:
    """Build a RetrievedDocument from one search row.

    Similarity is clamped to [0, 1]; cosine scores from pgvector or Qdrant
    can fall slightly outside that range.

    Raises:
        VectorStoreResponseError: If content is not a string or similarity
            is not a number.
    """
    if not isinstance(content, str):
        raise VectorStoreResponseError(
            f"Match {position} has no text content",
            context={"position": position, "content_type": type(content).__name__},
        )

    if isinstance(similarity, bool) or not isinstance(similarity, int | float):
        raise VectorStoreResponseError(
            f"Match {position} has a non-numeric similarity",
            context={"position": position, "similarity_type": type(similarity).__name__},
        )

    score = float(similarity)
    if math.isnan(score):
        raise VectorStoreResponseError(
            f"Match {position} has a NaN similarity", context={"position": position}
        )

    if not 0.0 <= score <= 1.0:
        logger.debug("Clamping similarity %.4f of match %d", score, position)
        score = min(max(score, 0.0), 1.0)

    return RetrievedDocument(
        content=content,
        similarity=score,
        doc_id=str(doc_id) if doc_id is not None else None,
    )
