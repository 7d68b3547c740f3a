"""
Content-type detection.

Scores a pasted text as JSON or JavaScript so callers that do not declare the
kind can still route it to the right transforms.
"""

from dataclasses import dataclass
from typing import Any, Optional

import regex

from .exceptions import ParseError
from .json_handler import JSONHandler
from .models import ContentKind

DECISIVE_CONFIDENCE = 0.7
QUICK_CONFIDENCE = 0.5

JSON_FEATURE_PATTERNS = [
    regex.compile(r"^\s*[\{\[]"),
    regex.compile(r"[\}\]]\s*$"),
    regex.compile(r'"[^"]*"\s*:'),
    regex.compile(r':\s*"[^"]*"'),
    regex.compile(r":\s*\d+"),
    regex.compile(r":\s*(?:true|false|null)"),
]

JS_ONLY_PATTERNS = [
    regex.compile(r"\bfunction\s+\w+"),
    regex.compile(r"\bvar\s+\w+"),
    regex.compile(r"\blet\s+\w+"),
    regex.compile(r"\bconst\s+\w+"),
    regex.compile(r"\bif\s*\("),
    regex.compile(r"\bfor\s*\("),
    regex.compile(r"\bwhile\s*\("),
    regex.compile(r"\breturn\s+"),
    regex.compile(r"//.*$", regex.MULTILINE),
    regex.compile(r"/\*[\s\S]*?\*/"),
]

# (pattern, weight, description)
JS_WEIGHTED_PATTERNS = [
    (regex.compile(r"\bfunction\s+\w+"), 0.2, "function declaration"),
    (regex.compile(r"\b(?:var|let|const)\s+\w+"), 0.15, "variable declaration"),
    (regex.compile(r"\bif\s*\([^)]*\)\s*\{"), 0.1, "if statement"),
    (regex.compile(r"\bfor\s*\([^)]*\)\s*\{"), 0.1, "for loop"),
    (regex.compile(r"\bwhile\s*\([^)]*\)\s*\{"), 0.1, "while loop"),
    (regex.compile(r"\breturn\s+[^;]+;?"), 0.1, "return statement"),
    (regex.compile(r"//.*$", regex.MULTILINE), 0.05, "line comment"),
    (regex.compile(r"/\*[\s\S]*?\*/"), 0.05, "block comment"),
    (regex.compile(r"\w+\s*\([^)]*\)\s*\{"), 0.1, "function body"),
    (regex.compile(r"\.\w+\s*\("), 0.05, "method call"),
    (regex.compile(r"=>\s*\{?"), 0.1, "arrow function"),
    (regex.compile(r"\bclass\s+\w+"), 0.15, "class declaration"),
    (regex.compile(r"\bimport\s+"), 0.15, "import statement"),
    (regex.compile(r"\bexport\s+"), 0.15, "export statement"),
    (regex.compile(r"\bconsole\.(?:log|error|warn|info)"), 0.1, "console call"),
]

CODE_BLOCK_PATTERN = regex.compile(r"\{[\s\S]*?\}")


@dataclass(frozen=True)
class DetectionResult:
    """Detected kind (``None`` when unknown) with a confidence in [0, 1]."""

    kind: Optional[ContentKind]
    confidence: float
    reason: str


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def _try_parse(content: str) -> tuple[bool, Any]:
    try:
        return True, JSONHandler.loads_strict(content)
    except ParseError:
        return False, None


def detect_json(content: str) -> DetectionResult:
    """Score how much the content looks like JSON."""
    confidence = 0.0
    reasons = []

    parsed_ok, parsed = _try_parse(content)
    if parsed_ok:
        confidence += 0.6
        reasons.append("parses as JSON")
        if isinstance(parsed, (dict, list)):
            confidence += 0.2
            reasons.append("root is an object or array")
    else:
        confidence -= 0.3

    feature_matches = sum(
        1 for pattern in JSON_FEATURE_PATTERNS if pattern.search(content)
    )
    if feature_matches >= 3:
        confidence += 0.3
        reasons.append(f"matches {feature_matches} JSON features")

    js_matches = sum(1 for pattern in JS_ONLY_PATTERNS if pattern.search(content))
    if js_matches:
        confidence -= js_matches * 0.1
        reasons.append(f"contains {js_matches} JavaScript-only constructs")

    return DetectionResult(ContentKind.JSON, _clamp(confidence), ", ".join(reasons))


def detect_javascript(content: str) -> DetectionResult:
    """Score how much the content looks like JavaScript."""
    confidence = 0.0
    reasons = []

    for pattern, weight, description in JS_WEIGHTED_PATTERNS:
        if pattern.search(content):
            confidence += weight
            reasons.append(description)

    semicolon_lines = [
        line
        for line in content.split("\n")
        if line.strip().endswith(";") and not line.strip().startswith("//")
    ]
    if semicolon_lines:
        confidence += min(0.1, len(semicolon_lines) * 0.02)
        reasons.append(f"{len(semicolon_lines)} lines end with a semicolon")

    blocks = CODE_BLOCK_PATTERN.findall(content)
    if blocks:
        confidence += min(0.1, len(blocks) * 0.03)
        reasons.append(f"{len(blocks)} code blocks")

    parsed_ok, _ = _try_parse(content)
    if parsed_ok:
        confidence -= 0.3
        reasons.append("parses as JSON")
    else:
        confidence += 0.1

    return DetectionResult(
        ContentKind.JAVASCRIPT, _clamp(confidence), ", ".join(reasons)
    )


def detect_content_type(content: str) -> DetectionResult:
    """Detect whether content is JSON or JavaScript."""
    if not content or not content.strip():
        return DetectionResult(None, 0.0, "content is empty")

    trimmed = content.strip()

    json_result = detect_json(trimmed)
    if json_result.confidence > DECISIVE_CONFIDENCE:
        return json_result

    js_result = detect_javascript(trimmed)
    if js_result.confidence > DECISIVE_CONFIDENCE:
        return js_result

    if json_result.confidence >= js_result.confidence:
        return json_result
    return js_result


def quick_detect_content_type(content: str) -> Optional[ContentKind]:
    """Return the detected kind, or ``None`` when confidence is too low."""
    result = detect_content_type(content)
    return result.kind if result.confidence > QUICK_CONFIDENCE else None
