"""Query pipeline: retrieve, assemble, prompt, generate."""

import logging
from collections.abc import Iterator

from ...common.exception_handler import log_exception
from ..domain import ErrorKind, Failure, PipelineResult, PreparedPrompt, Query, Success
from ..domain.exceptions import EmbeddingError, InvalidInputError
from ..ports.llm_port import LLMPort
from .context_assembler import ContextAssembler
from .prompt_builder import PromptBuilder
from .retrieval_service import RetrievalService

logger = logging.getLogger(__name__)

MESSAGE_REQUIRED = "Message is required"


def validate_message(raw_query: str | None) -> Query | Failure:
    """Parse a submitted message, or fail with ``Message is required``."""
    if raw_query is None:
        return Failure(ErrorKind.INVALID_INPUT, MESSAGE_REQUIRED)
    query = Query.parse(raw_query)
    if query.is_blank:
        return Failure(ErrorKind.INVALID_INPUT, MESSAGE_REQUIRED)
    return query


class QueryPipeline:
    """Answers a legal question with retrieval-augmented generation.

    Each call is independent: the pipeline keeps no per-request state and
    makes its embedding, search and generation calls strictly in sequence.
    Nothing is retried; a failed request is reported once and the user can
    resubmit.
    """

    def __init__(
        self,
        retriever: RetrievalService,
        assembler: ContextAssembler,
        prompt_builder: PromptBuilder,
        llm: LLMPort,
        top_k: int = 5,
    ) -> None:
        self.retriever = retriever
        self.assembler = assembler
        self.prompt_builder = prompt_builder
        self.llm = llm
        self.top_k = top_k

    def prepare(self, raw_query: str | None) -> PreparedPrompt | Failure:
        """Validate the query and build the generation prompt.

        Retrieval problems other than embedding failures are absorbed and
        leave the prompt without documents.
        """
        query = validate_message(raw_query)
        if isinstance(query, Failure):
            return query

        try:
            documents = self.retriever.retrieve(query.raw, k=self.top_k)
        except EmbeddingError as e:
            log_exception(e, stage="embedding", log=logger)
            return Failure(ErrorKind.EMBEDDING_FAILED, e.message)
        except InvalidInputError as e:
            # Message already validated; only a bad top_k gets here
            log_exception(e, stage="retrieval", log=logger, top_k=self.top_k)
            return Failure(ErrorKind.INTERNAL, e.message)
        except Exception as e:
            logger.warning("Unexpected retrieval failure, answering without documents: %s", e)
            documents = []

        selected = self.assembler.select(documents)
        context = self.assembler.assemble(selected)
        prompt = self.prompt_builder.build(query.raw, context)

        return PreparedPrompt(prompt=prompt, source_count=len(selected), language=query.language)

    def run(self, raw_query: str | None) -> PipelineResult:
        """Answer a query.

        Args:
            raw_query: The message as submitted, possibly carrying a
                language marker.

        Returns:
            ``Success`` with the answer and source count, or ``Failure``.
            Never raises.
        """
        try:
            prepared = self.prepare(raw_query)
        except Exception as e:
            log_exception(e, stage="prepare", log=logger)
            return Failure(ErrorKind.INTERNAL, str(e) or type(e).__name__)

        if isinstance(prepared, Failure):
            return prepared

        try:
            answer = self.llm.generate(prepared.prompt)
        except Exception as e:
            log_exception(e, stage="generation", log=logger)
            return Failure(ErrorKind.GENERATION_FAILED, str(e) or type(e).__name__)

        logger.info(
            "Answered query in %s using %d sources",
            prepared.language.value,
            prepared.source_count,
        )
        return Success(answer=answer, source_count=prepared.source_count)

    def stream(self, prepared: PreparedPrompt) -> Iterator[str]:
        """Stream the answer for a prompt returned by ``prepare``.

        Generation errors are raised from the iterator.
        """
        yield from self.llm.generate_stream(prepared.prompt)
