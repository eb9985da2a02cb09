"""Pipeline result types."""

from dataclasses import dataclass
from enum import Enum

from .query import Language


class ErrorKind(Enum):
    """Category of a failed pipeline run."""

    INVALID_INPUT = "invalid_input"
    EMBEDDING_FAILED = "embedding_failed"
    GENERATION_FAILED = "generation_failed"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Success:
    """A generated answer and the number of documents behind it."""

    answer: str
    source_count: int

    ok = True


@dataclass(frozen=True)
class Failure:
    """A pipeline run that could not produce an answer."""

    error_kind: ErrorKind
    message: str

    ok = False

    @property
    def http_status(self) -> int:
        if self.error_kind is ErrorKind.INVALID_INPUT:
            return 400
        return 500


PipelineResult = Success | Failure


@dataclass(frozen=True)
class PreparedPrompt:
    """Everything needed to call the LLM for one request.

    Attributes:
        prompt: The final generation prompt.
        source_count: Number of documents placed in the context.
        language: The answer language requested by the query.
    """

    prompt: str
    source_count: int
    language: Language
