"""
JSON repair steps.

Each step rewrites loosely formatted, JS-object-literal-like text one notch
closer to strict JSON. Steps only touch live code: string literals and
comments are located with the shared scanner, and regex matches are taken
from a masked copy of the text where those regions are blanked out.
"""

from typing import Optional

import regex

from ..core.constants import JSON_LITERALS
from ..core.exceptions import MalformedInputError
from ..core.scanner import Region, Scanner, mask_inert
from ..utils.config import RepairSettings
from .base import RepairStepBase
from .string_utils import (
    Edit,
    apply_edits,
    next_significant_char,
    previous_significant_char,
    single_to_double_quoted,
)

# Variable-width lookbehinds need the third-party regex engine
TRAILING_COMMA_PATTERN = regex.compile(r",(?=\s*[}\]])")
BARE_KEY_PATTERN = regex.compile(r"(?<=[{,]\s*)[\p{L}\p{N}_$]+(?=\s*:)")
BARE_VALUE_PATTERN = regex.compile(r"(?<=:\s*)[\p{L}_$][\p{L}\p{N}_$]*")


class CommentStripper(RepairStepBase):
    """Removes line and block comments outside string literals."""

    def should_apply(self, settings: RepairSettings) -> bool:
        return settings.strip_comments

    def process(self, text: str, settings: RepairSettings) -> str:
        result = []
        for item in Scanner(text).scan():
            if item.state.is_live or item.state.in_string:
                result.append(item.char)
            elif item.state.in_block_comment and item.opens:
                # A block comment still separates the tokens around it
                result.append(" ")
        return "".join(result).strip()


class TrailingCommaRemover(RepairStepBase):
    """Drops commas that directly precede a closing brace or bracket."""

    def should_apply(self, settings: RepairSettings) -> bool:
        return settings.remove_trailing_commas

    def process(self, text: str, settings: RepairSettings) -> str:
        masked = mask_inert(text)
        edits = [
            (match.start(), match.end(), "")
            for match in TRAILING_COMMA_PATTERN.finditer(masked)
        ]
        return apply_edits(text, edits)


class KeyQuoter(RepairStepBase):
    """Wraps bare object keys in double quotes.

    A key is any run of letters, digits, ``_`` and ``$`` between ``{`` or
    ``,`` and ``:``; leading digits and purely numeric keys are accepted.
    """

    def should_apply(self, settings: RepairSettings) -> bool:
        return settings.quote_keys

    def process(self, text: str, settings: RepairSettings) -> str:
        masked = mask_inert(text)
        edits = [
            (match.start(), match.end(), f'"{match.group(0)}"')
            for match in BARE_KEY_PATTERN.finditer(masked)
        ]
        return apply_edits(text, edits)


class SingleQuoteConverter(RepairStepBase):
    """Rewrites single-quoted keys or values as double-quoted strings."""

    KEYS = "keys"
    VALUES = "values"

    def __init__(self, target: str = VALUES):
        if target not in (self.KEYS, self.VALUES):
            raise ValueError(f"unknown target: {target}")
        self.target = target

    def should_apply(self, settings: RepairSettings) -> bool:
        return settings.convert_single_quotes

    def process(self, text: str, settings: RepairSettings) -> str:
        scanner = Scanner(text)
        segments = list(scanner.segments())
        open_start = scanner.construct_start
        masked = mask_inert(text)

        edits: list[Edit] = []
        for segment in segments:
            if segment.region is not Region.STRING or segment.delimiter != "'":
                continue
            if segment.start == open_start:
                continue  # unterminated literal, leave it to the parser
            before = previous_significant_char(masked, segment.start)
            after = next_significant_char(masked, segment.end)
            if self._matches(before, after):
                edits.append(
                    (segment.start, segment.end, single_to_double_quoted(segment.text))
                )
        return apply_edits(text, edits)

    def _matches(self, before: Optional[str], after: Optional[str]) -> bool:
        if self.target == self.KEYS:
            return before is not None and before in "{," and after == ":"
        return before is not None and before in ":[,"


class BareValueDetector(RepairStepBase):
    """Rejects unquoted identifiers used as values.

    Every offending token is collected before failing, so one error names all
    of them. Telling an intended string from a typo needs a schema; this is a
    heuristic.
    """

    def process(self, text: str, settings: RepairSettings) -> str:
        masked = mask_inert(text)
        tokens = [
            match.group(0)
            for match in BARE_VALUE_PATTERN.finditer(masked)
            if match.group(0) not in JSON_LITERALS
        ]
        if tokens:
            raise MalformedInputError(tokens)
        return text
