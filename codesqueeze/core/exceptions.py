"""
Exception hierarchy for codesqueeze.

Every failure a transform can report is a ``CodeSqueezeError``; the
dispatcher turns these into failed ``TransformResult`` values.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .error_handling import BracketRecord


class CodeSqueezeError(Exception):
    """Base exception for codesqueeze errors."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = self.message
        if self.position is not None:
            msg += f" at position {self.position}"
        if self.suggestions:
            msg += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                msg += f"\n  - {suggestion}"
        return msg


class EmptyInputError(CodeSqueezeError):
    """Raised when the input is empty or whitespace only."""

    def __init__(self, message: str = "Input is empty, nothing to process"):
        super().__init__(message)


class MalformedInputError(CodeSqueezeError):
    """Raised when JSON repair finds bare values it cannot fix."""

    def __init__(self, tokens: Sequence[str]):
        self.tokens = list(tokens)
        super().__init__(
            f"Invalid bare values detected: {', '.join(self.tokens)}",
            suggestions=[
                'Make sure every value is valid JSON; strings must be quoted, '
                'e.g. "unknown"'
            ],
        )


class ParseError(CodeSqueezeError):
    """Raised when the JSON parser rejects the repaired text.

    ``message`` is the parser's own diagnostic, unchanged.
    """

    def _format_message(self) -> str:
        # The parser diagnostic already names the position
        return self.message


class UnknownOperationError(CodeSqueezeError):
    """Raised when an operation is not recognised for the content kind."""

    def __init__(self, operation: Any, kind: Optional[str] = None):
        self.operation = operation
        self.kind = kind
        label = getattr(operation, "value", operation)
        message = f"Unknown operation: {label!r}"
        if kind:
            message += f" for {kind} content"
        super().__init__(message)


class BracketMismatchError(CodeSqueezeError):
    """Raised by JavaScript validation with every bracket problem found."""

    def __init__(self, records: Sequence["BracketRecord"]):
        self.records = list(records)
        super().__init__("; ".join(record.describe() for record in self.records))
