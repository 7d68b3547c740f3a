"""
Lexical scanner shared by every codesqueeze transform.

The scanner walks a text once, left to right, and classifies each character
as live code, string literal, line comment or block comment. Transforms drive
their own accumulators (output buffer, line buffer, bracket stack) off this
classification instead of running independent regex passes.
"""

from collections.abc import Iterator
from enum import Enum
from typing import NamedTuple, Optional

from .constants import LINE_TERMINATORS, QUOTE_CHARS


class Region(Enum):
    """Lexical region a character belongs to."""

    CODE = "CODE"
    STRING = "STRING"
    LINE_COMMENT = "LINE_COMMENT"
    BLOCK_COMMENT = "BLOCK_COMMENT"


class ScanState(NamedTuple):
    """Scanner state applying to a single character position."""

    in_string: bool = False
    string_delimiter: Optional[str] = None
    in_line_comment: bool = False
    in_block_comment: bool = False

    @property
    def in_comment(self) -> bool:
        return self.in_line_comment or self.in_block_comment

    @property
    def is_live(self) -> bool:
        """True when the character is code, not string or comment text."""
        return not (self.in_string or self.in_comment)

    @property
    def region(self) -> Region:
        if self.in_string:
            return Region.STRING
        if self.in_line_comment:
            return Region.LINE_COMMENT
        if self.in_block_comment:
            return Region.BLOCK_COMMENT
        return Region.CODE


LIVE = ScanState()
LINE_COMMENT = ScanState(in_line_comment=True)
BLOCK_COMMENT = ScanState(in_block_comment=True)
_STRING_STATES = {
    quote: ScanState(in_string=True, string_delimiter=quote) for quote in QUOTE_CHARS
}


class ScannedChar(NamedTuple):
    """A character with its position and classification.

    ``opens`` is set on the first character of a string literal or comment.
    """

    index: int
    char: str
    state: ScanState
    opens: bool = False


class Segment(NamedTuple):
    """Maximal run of characters belonging to one region."""

    region: Region
    text: str
    start: int
    delimiter: Optional[str] = None

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def is_live(self) -> bool:
        return self.region is Region.CODE


class Scanner:
    """Character-level state machine over JavaScript-like text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self._state = LIVE
        self._escaped = False
        self._construct_start: Optional[int] = None

    def peek(self, offset: int = 0) -> str:
        """Peek at character at given offset without consuming it."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    @property
    def final_state(self) -> ScanState:
        """State left behind once the text has been scanned."""
        return self._state

    @property
    def construct_start(self) -> Optional[int]:
        """Start offset of the string or comment that is still open, if any."""
        if self._state is LIVE:
            return None
        return self._construct_start

    def is_terminated(self) -> bool:
        """False when the text ends inside a string literal or block comment.

        A line comment running to end-of-input is closed by the end of input.
        """
        return not (self._state.in_string or self._state.in_block_comment)

    def scan(self) -> Iterator[ScannedChar]:
        """Yield every character with the state that applies to it."""
        self.pos = 0
        self._state = LIVE
        self._escaped = False
        self._construct_start = None

        text = self.text
        while self.pos < len(text):
            char = text[self.pos]
            state = self._state

            if state.in_block_comment:
                if char == "*" and self.peek(1) == "/":
                    yield ScannedChar(self.pos, char, state)
                    yield ScannedChar(self.pos + 1, "/", state)
                    self._state = LIVE
                    self.pos += 2
                    continue
                yield ScannedChar(self.pos, char, state)
                self.pos += 1
                continue

            if state.in_line_comment:
                if char not in LINE_TERMINATORS:
                    yield ScannedChar(self.pos, char, state)
                    self.pos += 1
                    continue
                # The terminator itself is live code again
                self._state = state = LIVE

            if state.in_string:
                if self._escaped:
                    self._escaped = False
                elif char == "\\":
                    self._escaped = True
                elif char == state.string_delimiter:
                    self._state = LIVE
                yield ScannedChar(self.pos, char, state)
                self.pos += 1
                continue

            yield from self._scan_live(char)

    def _scan_live(self, char: str) -> Iterator[ScannedChar]:
        """Classify a character met while in live code."""
        if self._escaped:
            self._escaped = False
            yield ScannedChar(self.pos, char, LIVE)
            self.pos += 1
            return

        if char == "\\":
            self._escaped = True
            yield ScannedChar(self.pos, char, LIVE)
            self.pos += 1
            return

        if char in QUOTE_CHARS:
            self._state = _STRING_STATES[char]
            self._construct_start = self.pos
            yield ScannedChar(self.pos, char, self._state, opens=True)
            self.pos += 1
            return

        if char == "/" and self.peek(1) == "/":
            self._state = LINE_COMMENT
            self._construct_start = self.pos
            yield ScannedChar(self.pos, char, LINE_COMMENT, opens=True)
            self.pos += 1
            return

        if char == "/" and self.peek(1) == "*":
            self._state = BLOCK_COMMENT
            self._construct_start = self.pos
            yield ScannedChar(self.pos, char, BLOCK_COMMENT, opens=True)
            yield ScannedChar(self.pos + 1, "*", BLOCK_COMMENT)
            self.pos += 2
            return

        yield ScannedChar(self.pos, char, LIVE)
        self.pos += 1

    def segments(self) -> Iterator[Segment]:
        """Group scanned characters into maximal single-region runs."""
        current: list[str] = []
        region: Optional[Region] = None
        delimiter: Optional[str] = None
        start = 0

        for item in self.scan():
            item_region = item.state.region
            if current and (item_region is not region or item.opens):
                yield Segment(region, "".join(current), start, delimiter)  # type: ignore[arg-type]
                current = []
            if not current:
                region = item_region
                delimiter = item.state.string_delimiter
                start = item.index
            current.append(item.char)

        if current:
            yield Segment(region, "".join(current), start, delimiter)  # type: ignore[arg-type]


def scan(text: str) -> Iterator[ScannedChar]:
    """Scan text with a fresh scanner."""
    return Scanner(text).scan()


def iter_segments(text: str) -> Iterator[Segment]:
    """Split text into code, string and comment segments."""
    return Scanner(text).segments()


def mask_inert(text: str, fill: str = "\x00") -> str:
    """
    Replace every string and comment character with ``fill``.

    The result has the same length as ``text``, so match offsets found in the
    masked text can be applied to the original.
    """
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    return "".join(
        item.char if item.state.is_live else fill for item in scan(text)
    )
