"""
Request, result and statistics models exchanged by codesqueeze components.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ContentKind(Enum):
    """Declared kind of the text being processed."""

    JSON = "json"
    JAVASCRIPT = "js"


class Operation(Enum):
    """Transform operations. ``MINIFY`` exists for JavaScript only."""

    COMPRESS = "compress"
    FORMAT = "format"
    VALIDATE = "validate"
    MINIFY = "minify"


SUPPORTED_OPERATIONS = {
    ContentKind.JSON: frozenset(
        [Operation.COMPRESS, Operation.FORMAT, Operation.VALIDATE]
    ),
    ContentKind.JAVASCRIPT: frozenset(Operation),
}


@dataclass(frozen=True)
class TransformRequest:
    """Immutable unit of work handed to a transform."""

    text: str
    operation: Operation
    kind: ContentKind = ContentKind.JSON

    def to_message(self) -> dict[str, str]:
        """Plain message used across the offload boundary."""
        return {
            "type": self.operation.value,
            "kind": self.kind.value,
            "data": self.text,
        }

    @classmethod
    def from_message(cls, message: dict[str, str]) -> "TransformRequest":
        return cls(
            text=message["data"],
            operation=Operation(message["type"]),
            kind=ContentKind(message["kind"]),
        )


@dataclass(frozen=True)
class TransformResult:
    """Outcome of a single transform call.

    Exactly one of ``output`` and ``error_message`` is set, depending on
    ``success``.
    """

    success: bool
    output: Optional[str] = None
    error_message: Optional[str] = None
    elapsed_millis: int = 0
    error_type: Optional[str] = None

    def __post_init__(self) -> None:
        if self.success and (self.output is None or self.error_message is not None):
            raise ValueError("successful result must carry output and no error")
        if not self.success and (
            self.error_message is None or self.output is not None
        ):
            raise ValueError("failed result must carry an error and no output")
        if self.elapsed_millis < 0:
            raise ValueError("elapsed_millis must be non-negative")

    @classmethod
    def ok(cls, output: str, elapsed_millis: int = 0) -> "TransformResult":
        return cls(success=True, output=output, elapsed_millis=elapsed_millis)

    @classmethod
    def failure(
        cls,
        error_message: str,
        elapsed_millis: int = 0,
        error_type: Optional[str] = None,
    ) -> "TransformResult":
        return cls(
            success=False,
            error_message=error_message,
            elapsed_millis=elapsed_millis,
            error_type=error_type,
        )

    def to_message(self) -> dict[str, Any]:
        """Worker reply shape."""
        return {
            "success": self.success,
            "result": self.output,
            "error": self.error_message,
            "errorType": self.error_type,
            "processingTime": self.elapsed_millis,
        }

    @classmethod
    def from_message(cls, message: dict[str, Any]) -> "TransformResult":
        return cls(
            success=bool(message["success"]),
            output=message.get("result"),
            error_message=message.get("error"),
            elapsed_millis=int(message.get("processingTime", 0)),
            error_type=message.get("errorType"),
        )


@dataclass(frozen=True)
class StatsReport:
    """Before/after size and timing statistics for a processed text."""

    original_bytes: int
    processed_bytes: int
    compression_ratio_percent: int
    elapsed_millis: int
    original_line_count: Optional[int] = None
    processed_line_count: Optional[int] = None
