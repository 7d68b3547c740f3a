"""
Common error handling utilities for codesqueeze transforms.

This module provides error record collection and position-to-line/column
context building shared by the validation passes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .exceptions import BracketMismatchError


class RecordKind(Enum):
    """Kinds of structural problems found by validation."""

    MISMATCH = "mismatch"
    UNEXPECTED = "unexpected"
    UNCLOSED = "unclosed"
    UNTERMINATED = "unterminated"


@dataclass
class ErrorContext:
    """Context information for an error position."""

    position: int
    line: int
    column: int
    context_text: str


@dataclass
class BracketRecord:
    """A single structural problem at a 0-based ``position``."""

    char: str
    position: int
    kind: RecordKind
    line: int = 1
    column: int = 1
    expected: Optional[str] = None

    def describe(self) -> str:
        where = f"at position {self.position + 1} (line {self.line}, column {self.column})"
        if self.kind is RecordKind.MISMATCH:
            return (
                f"Mismatched bracket '{self.char}' {where}, "
                f"expected '{self.expected}'"
            )
        if self.kind is RecordKind.UNEXPECTED:
            return f"Unexpected closing bracket '{self.char}' {where}"
        if self.kind is RecordKind.UNCLOSED:
            return f"Unclosed bracket '{self.char}' {where}"
        construct = "block comment" if self.char == "/*" else "string literal"
        return f"Unterminated {construct} starting {where}"


class ErrorContextBuilder:
    """Builds error context information from an offset into a text."""

    @staticmethod
    def build_context(
        position: int, original_text: str, context_length: int = 50
    ) -> ErrorContext:
        """Build error context from position and original text."""
        if not original_text:
            return ErrorContext(
                position=position, line=1, column=position + 1, context_text=""
            )

        line = original_text.count("\n", 0, position) + 1
        line_start = original_text.rfind("\n", 0, position) + 1
        column = position - line_start + 1

        start = max(0, position - context_length // 2)
        end = min(len(original_text), position + context_length // 2)
        return ErrorContext(
            position=position,
            line=line,
            column=column,
            context_text=original_text[start:end],
        )


@dataclass
class ErrorCollector:
    """Collects bracket records during a validation scan without aborting it."""

    original_text: str = ""
    records: list[BracketRecord] = field(default_factory=list)

    def add(
        self,
        char: str,
        position: int,
        kind: RecordKind,
        expected: Optional[str] = None,
    ) -> None:
        """Record a problem found at ``position``."""
        context = ErrorContextBuilder.build_context(position, self.original_text)
        self.records.append(
            BracketRecord(
                char=char,
                position=position,
                kind=kind,
                line=context.line,
                column=context.column,
                expected=expected,
            )
        )

    def has_errors(self) -> bool:
        return bool(self.records)

    def raise_if_errors(self) -> None:
        """Raise one aggregated error when anything was recorded."""
        if self.records:
            raise BracketMismatchError(self.records)

    def clear(self) -> None:
        self.records.clear()
