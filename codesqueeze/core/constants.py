"""
Common constants and mappings used across the codesqueeze library.
"""

# Characters that open a string literal
QUOTE_CHARS = frozenset(['"', "'", "`"])

LINE_TERMINATORS = frozenset(["\n", "\r"])

# Opening bracket -> expected closing bracket
BRACKET_PAIRS = {
    "(": ")",
    "[": "]",
    "{": "}",
}

CLOSING_BRACKETS = frozenset(BRACKET_PAIRS.values())

# Whitespace next to these characters is dropped by JavaScript compression
JS_PUNCTUATION = frozenset("{}();,=+-*/&|!<>?:")

JSON_LITERALS = frozenset(["true", "false", "null"])

JSON_VALIDATION_MESSAGE = "JSON validation passed!"
JS_VALIDATION_MESSAGE = "JavaScript validation passed!"

DEFAULT_SIZE_THRESHOLD_BYTES = 50_000
DEFAULT_INDENT = 2
