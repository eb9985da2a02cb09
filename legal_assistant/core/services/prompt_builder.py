"""Prompt construction for legal questions."""

from ..domain import Language, detect_language
from .prompts import (
    CONTEXT_SECTION,
    GROUNDED_CLOSING,
    LANGUAGE_INSTRUCTION,
    LEGAL_SYSTEM_PROMPT,
    NO_CONTEXT_SECTION,
    QUERY_SECTION,
    UNGROUNDED_CLOSING,
)


class PromptBuilder:
    """Build the generation prompt from a query and its retrieved context.

    Pure: the same query and context always give the same prompt.
    """

    def __init__(self, jurisdiction: str = "Indian law") -> None:
        self.jurisdiction = jurisdiction

    def language_instruction(self, language: Language) -> str:
        return LANGUAGE_INSTRUCTION.format(language=language.value)

    def build(self, query: str, context: str) -> str:
        """Build the prompt.

        Args:
            query: The raw user query, language marker included.
            context: Assembled document context; may be empty.

        Returns:
            The prompt to send to the LLM.
        """
        language = detect_language(query)

        if context.strip():
            context_section = CONTEXT_SECTION.format(context=context)
            closing = GROUNDED_CLOSING
        else:
            context_section = NO_CONTEXT_SECTION
            closing = UNGROUNDED_CLOSING

        sections = [
            LEGAL_SYSTEM_PROMPT.format(jurisdiction=self.jurisdiction),
            self.language_instruction(language),
            context_section,
            QUERY_SECTION.format(query=query, closing=closing),
        ]
        return "\n\n".join(sections)
