"""User query and response language models.

The web front-end prefixes questions with a marker such as
``[Language: Hindi]``. The marker selects the answer language; the rest of
the message is the legal question itself.
"""

from dataclasses import dataclass
from enum import Enum


class Language(Enum):
    """Languages the assistant can answer in.

    The value is the display name used in the marker and in the
    ``Respond in ...`` instruction.
    """

    ENGLISH = "English"
    HINDI = "Hindi"
    MARATHI = "Marathi"

    @property
    def code(self) -> str:
        """ISO 639-1 code used by the front-end language switcher."""
        return _LANGUAGE_CODES[self]

    @property
    def marker(self) -> str:
        """Marker embedded in a message to request this language."""
        return f"[Language: {self.value}]"

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """Look up a language by ISO code (``en``, ``hi``, ``mr``).

        Raises:
            ValueError: If the code is not supported.
        """
        normalized = code.strip().lower()
        for language, language_code in _LANGUAGE_CODES.items():
            if language_code == normalized:
                return language
        supported = ", ".join(_LANGUAGE_CODES.values())
        raise ValueError(f"Unsupported language code '{code}' (expected one of: {supported})")


_LANGUAGE_CODES = {
    Language.ENGLISH: "en",
    Language.HINDI: "hi",
    Language.MARATHI: "mr",
}

# Checked in this order when a message carries more than one marker
_DETECTION_ORDER = (Language.HINDI, Language.MARATHI)


def detect_language(text: str) -> Language:
    """Detect the requested answer language from a message.

    Markers are matched exactly, anywhere in the text. Without a
    recognized marker the answer language is English.
    """
    for language in _DETECTION_ORDER:
        if language.marker in text:
            return language
    return Language.ENGLISH


def strip_language_marker(text: str) -> str:
    """Remove every recognized language marker and trim whitespace."""
    for language in Language:
        text = text.replace(language.marker, "")
    return text.strip()


@dataclass(frozen=True)
class Query:
    """A user query split into its language and its question text.

    Attributes:
        raw: The message exactly as submitted, marker included.
        text: The question with language markers removed.
        language: The requested answer language.
    """

    raw: str
    text: str
    language: Language

    @classmethod
    def parse(cls, raw: str) -> "Query":
        return cls(raw=raw, text=strip_language_marker(raw), language=detect_language(raw))

    @property
    def is_blank(self) -> bool:
        return not self.raw.strip()
