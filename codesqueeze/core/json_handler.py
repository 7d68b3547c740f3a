"""
JSON compress, format and validate operations.

Input is repaired into strict JSON first, then parsed with the standard
``json`` module and serialised again.
"""

import json
import math
from typing import Any, NoReturn, Optional

from ..preprocessing.pipeline import repair
from ..utils.config import RepairSettings
from .constants import DEFAULT_INDENT, JSON_VALIDATION_MESSAGE
from .exceptions import ParseError


def _reject_constant(name: str) -> NoReturn:
    # json accepts NaN and Infinity by default; strict JSON does not
    raise ParseError(f"Unexpected token {name!r}: not valid JSON")


def _parse_finite_float(literal: str) -> float:
    # 1e400 is valid JSON text but becomes inf, which json.dumps writes as Infinity
    value = float(literal)
    if not math.isfinite(value):
        raise ParseError(f"Number {literal!r} is out of range for a JSON number")
    return value


class JSONHandler:
    """Operations on JSON and JSON-like text."""

    @staticmethod
    def parse(text: str, settings: Optional[RepairSettings] = None) -> Any:
        """
        Repair and parse text.

        Raises:
            MalformedInputError: bare values found during repair
            ParseError: repaired text is still not valid JSON
        """
        repaired = repair(text, settings)
        return JSONHandler.loads_strict(repaired)

    @staticmethod
    def loads_strict(text: str) -> Any:
        """Parse strict JSON, surfacing the parser's own diagnostic."""
        try:
            return json.loads(
                text, parse_constant=_reject_constant, parse_float=_parse_finite_float
            )
        except json.JSONDecodeError as e:
            raise ParseError(str(e), position=e.pos) from e

    @staticmethod
    def compress(text: str, settings: Optional[RepairSettings] = None) -> str:
        """Minify: repair, parse and serialise without extra whitespace."""
        value = JSONHandler.parse(text, settings)
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)

    @staticmethod
    def format(
        text: str,
        indent: int = DEFAULT_INDENT,
        settings: Optional[RepairSettings] = None,
    ) -> str:
        """Pretty-print with ``indent`` spaces per level."""
        value = JSONHandler.parse(text, settings)
        return json.dumps(value, indent=indent, ensure_ascii=False)

    @staticmethod
    def validate(text: str, settings: Optional[RepairSettings] = None) -> str:
        """Return a confirmation message when the text repairs and parses."""
        JSONHandler.parse(text, settings)
        return JSON_VALIDATION_MESSAGE

    @staticmethod
    def is_valid(text: str) -> bool:
        """Strict check, no repair."""
        try:
            JSONHandler.loads_strict(text)
            return True
        except ParseError:
            return False
