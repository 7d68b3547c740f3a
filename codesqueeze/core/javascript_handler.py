"""
JavaScript compress, minify, format and validate operations.

None of these parse JavaScript. Each runs the shared scanner once and feeds
live code into its own accumulator: an output buffer for compress and
minify, a line buffer with a brace depth for format, a bracket stack for
validate. String literals and comments are never rewritten.
"""

from .constants import (
    BRACKET_PAIRS,
    CLOSING_BRACKETS,
    DEFAULT_INDENT,
    JS_PUNCTUATION,
    JS_VALIDATION_MESSAGE,
    LINE_TERMINATORS,
)
from .error_handling import ErrorCollector, RecordKind
from .scanner import Scanner


class JavaScriptHandler:
    """Best-effort, line and whitespace oriented JavaScript transforms."""

    @staticmethod
    def compress(code: str) -> str:
        """
        Strip comments and redundant whitespace.

        Comments count as whitespace. Runs of live whitespace, newlines
        included, become one space, and that space is dropped next to any
        punctuation character. String literals are copied unchanged. Since no
        live line breaks survive, the output is already trimmed and free of
        blank lines. An unterminated string or comment still yields output.

        Two cases differ from a plain regex strip-and-collapse: a comment
        between tokens leaves a space (``a/*c*/b`` gives ``a b``, not ``ab``),
        and the space in ``a + +b`` is kept so it does not become ``a++b``.
        """
        result: list[str] = []
        pending_space = False

        for item in Scanner(code).scan():
            state = item.state
            char = item.char

            if state.in_comment:
                pending_space = True
                continue
            if state.is_live and char.isspace():
                pending_space = True
                continue

            if pending_space and result:
                if JavaScriptHandler._needs_space(result[-1], char, state.is_live):
                    result.append(" ")
            pending_space = False
            result.append(char)

        return "".join(result)

    @staticmethod
    def _needs_space(previous: str, char: str, live: bool) -> bool:
        """Decide whether collapsed whitespace between two characters stays."""
        if live and char in "+-" and previous == char:
            # "a + +b" must not turn into "a++b"
            return True
        if previous in JS_PUNCTUATION:
            return False
        return not (live and char in JS_PUNCTUATION)

    @staticmethod
    def minify(code: str) -> str:
        """Compress, then drop every line terminator outside a string."""
        compressed = JavaScriptHandler.compress(code)
        return "".join(
            item.char
            for item in Scanner(compressed).scan()
            if not (item.state.is_live and item.char in LINE_TERMINATORS)
        )

    @staticmethod
    def format(code: str, indent: int = DEFAULT_INDENT) -> str:
        """
        Re-indent code by brace depth.

        ``{`` ends a line and opens a level, ``}`` closes the level and sits on
        its own line, ``;`` ends a line when code follows directly, and live
        line breaks end non-blank lines. Every line is indented by
        ``depth * indent`` spaces.
        """
        lines: list[str] = []
        buffer: list[str] = []
        depth = 0

        def flush() -> None:
            line = "".join(buffer).strip()
            if line:
                lines.append(" " * (depth * indent) + line)
            buffer.clear()

        for item in Scanner(code).scan():
            char = item.char
            if not item.state.is_live:
                buffer.append(char)
                continue

            if char == "{":
                buffer.append(char)
                flush()
                depth += 1
            elif char == "}":
                flush()
                depth = max(0, depth - 1)
                lines.append(" " * (depth * indent) + char)
            elif char == ";":
                buffer.append(char)
                next_char = code[item.index + 1 : item.index + 2]
                if next_char and not next_char.isspace():
                    flush()
            elif char in LINE_TERMINATORS:
                flush()
            else:
                buffer.append(char)

        flush()
        return "\n".join(lines)

    @staticmethod
    def validate(code: str) -> str:
        """
        Check that brackets balance outside strings and comments.

        Every problem is collected before failing. An unterminated string or
        block comment is also reported.

        Raises:
            BracketMismatchError: listing every problem found
        """
        collector = ErrorCollector(original_text=code)
        stack: list[tuple[str, int]] = []
        scanner = Scanner(code)

        for item in scanner.scan():
            if not item.state.is_live:
                continue
            char = item.char
            if char in BRACKET_PAIRS:
                stack.append((char, item.index))
            elif char in CLOSING_BRACKETS:
                if not stack:
                    collector.add(char, item.index, RecordKind.UNEXPECTED)
                    continue
                opener, _ = stack.pop()
                expected = BRACKET_PAIRS[opener]
                if expected != char:
                    collector.add(
                        char, item.index, RecordKind.MISMATCH, expected=expected
                    )

        for opener, position in stack:
            collector.add(opener, position, RecordKind.UNCLOSED)

        start = scanner.construct_start
        if not scanner.is_terminated() and start is not None:
            final = scanner.final_state
            marker = "/*" if final.in_block_comment else final.string_delimiter or ""
            collector.add(marker, start, RecordKind.UNTERMINATED)

        collector.raise_if_errors()
        return JS_VALIDATION_MESSAGE
