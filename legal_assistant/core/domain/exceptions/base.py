"""Root of the legal assistant error hierarchy.

Errors carry a stable ``error_code`` (``LA_<AREA>_<NNN>``) that appears in
logs and in CLI output, plus the place in our code where they were raised.
"""

import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import Any

_THIS_FILE = Path(__file__).name


@dataclass(frozen=True)
class RaiseSite:
    """Function, file and line where an error was created."""

    function: str
    file: str
    line: int

    @classmethod
    def capture(cls) -> "RaiseSite":
        # Walk out of this module and any exception constructors
        for frame in reversed(traceback.extract_stack()):
            file_name = Path(frame.filename).name
            if file_name == _THIS_FILE or frame.name == "__init__":
                continue
            return cls(frame.name, file_name, frame.lineno or 0)
        return cls("<unknown>", "<unknown>", 0)

    def as_dict(self) -> dict[str, Any]:
        return {"function": self.function, "file": self.file, "line": self.line}


class LegalAssistantError(Exception):
    """Base class for every error the service raises on purpose.

    Adapters wrap client-library failures in a subclass and chain the
    original exception::

        except Exception as e:
            raise EmbeddingAPIError("Embedding request failed", cause=e) from e
    """

    error_code: str = "LA_ERR_001"

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.extra_context = context or {}
        self.raised_at = RaiseSite.capture()

    def to_dict(self, include_trace: bool = False) -> dict[str, Any]:
        """Serialize for structured logs.

        Args:
            include_trace: Add the traceback of ``cause``, when there is one.
        """
        data: dict[str, Any] = {
            "error": {
                "type": type(self).__name__,
                "code": self.error_code,
                "message": self.message,
            },
            "raised_at": self.raised_at.as_dict(),
        }
        if self.extra_context:
            data["context"] = dict(self.extra_context)
        if self.cause is not None:
            data["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}
            if include_trace and self.cause.__traceback__ is not None:
                data["trace"] = traceback.format_exception(self.cause)
        return data
