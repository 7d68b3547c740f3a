"""
Utility functions shared by the repair steps.

Repair steps look for patterns in a masked copy of the text (strings and
comments blanked out, same length) and apply the resulting edits to the
original text.
"""

from collections.abc import Iterable
from typing import Optional

Edit = tuple[int, int, str]


def apply_edits(text: str, edits: Iterable[Edit]) -> str:
    """
    Apply non-overlapping ``(start, end, replacement)`` edits to text.

    Args:
        text: Original text
        edits: Edits with offsets into the original text

    Returns:
        Text with every edit applied
    """
    result = []
    last = 0
    for start, end, replacement in sorted(edits, key=lambda edit: edit[0]):
        if start < last:
            raise ValueError(f"overlapping edit at offset {start}")
        result.append(text[last:start])
        result.append(replacement)
        last = end
    result.append(text[last:])
    return "".join(result)


def previous_significant_char(masked: str, index: int) -> Optional[str]:
    """Return the nearest non-whitespace character before ``index``."""
    i = index - 1
    while i >= 0 and masked[i].isspace():
        i -= 1
    return masked[i] if i >= 0 else None


def next_significant_char(masked: str, index: int) -> Optional[str]:
    """Return the nearest non-whitespace character at or after ``index``."""
    i = index
    while i < len(masked) and masked[i].isspace():
        i += 1
    return masked[i] if i < len(masked) else None


def single_to_double_quoted(literal: str) -> str:
    """
    Convert a complete single-quoted literal to a double-quoted one.

    Escape sequences are kept as written, except ``\\'`` which has no JSON
    equivalent and becomes a plain apostrophe. Bare double quotes in the
    content are escaped.
    """
    content = literal[1:-1]
    result = ['"']
    i = 0
    while i < len(content):
        char = content[i]
        if char == "\\" and i + 1 < len(content):
            next_char = content[i + 1]
            result.append("'" if next_char == "'" else char + next_char)
            i += 2
            continue
        result.append('\\"' if char == '"' else char)
        i += 1
    result.append('"')
    return "".join(result)
