"""
codesqueeze Core Engine.

This module provides the lexical scanner and the JSON and JavaScript
transform operations built on it.
"""

from .javascript_handler import JavaScriptHandler
from .json_handler import JSONHandler
from .models import ContentKind, Operation, TransformRequest, TransformResult
from .scanner import Region, ScanState, Scanner, Segment

__all__ = [
    "Scanner",
    "ScanState",
    "Region",
    "Segment",
    "JSONHandler",
    "JavaScriptHandler",
    "ContentKind",
    "Operation",
    "TransformRequest",
    "TransformResult",
]
