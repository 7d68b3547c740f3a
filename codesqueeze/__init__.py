"""
codesqueeze - compress, format and validate JSON and JavaScript text.

codesqueeze runs every transform off one lexical scanner that knows which
characters are code and which sit inside strings or comments, so a ``//``
inside a string literal is never mistaken for a comment.

Key Features:
- JSON repair: unquoted keys, single quotes, trailing commas and comments
- JSON compress / format / validate with the standard json module
- JavaScript compress / minify / format / validate (bracket balance)
- Size-based dispatch to an isolated worker pool for large inputs
- Before/after size statistics

Quick Start:
    import codesqueeze

    result = codesqueeze.run("{ name: 'a', age: 30, }", "compress")
    result.output  # '{"name":"a","age":30}'

    from codesqueeze import ContentKind
    result = codesqueeze.run("(1,2]", "validate", ContentKind.JAVASCRIPT)
    result.success  # False
"""

from .core.detection import DetectionResult, detect_content_type, quick_detect_content_type
from .core.exceptions import (
    BracketMismatchError,
    CodeSqueezeError,
    EmptyInputError,
    MalformedInputError,
    ParseError,
    UnknownOperationError,
)
from .core.javascript_handler import JavaScriptHandler
from .core.json_handler import JSONHandler
from .core.models import (
    ContentKind,
    Operation,
    StatsReport,
    TransformRequest,
    TransformResult,
)
from .core.scanner import Scanner, ScanState
from .preprocessing.pipeline import repair
from .processing.dispatcher import ProcessingDispatcher, run, run_auto
from .processing.executor import ExecutionContext
from .processing.stats import compute_stats, format_bytes
from .utils.config import (
    DispatchSettings,
    FormattingSettings,
    ProcessingConfig,
    RepairSettings,
)

__version__ = "0.1.0"
__author__ = "codesqueeze contributors"

__all__ = [
    # Entry points
    "run", "run_auto", "ProcessingDispatcher", "ExecutionContext",
    "compute_stats", "format_bytes", "repair",
    # Transforms
    "JSONHandler", "JavaScriptHandler", "Scanner", "ScanState",
    "detect_content_type", "quick_detect_content_type", "DetectionResult",
    # Models
    "ContentKind", "Operation", "TransformRequest", "TransformResult", "StatsReport",
    # Configuration classes
    "ProcessingConfig", "RepairSettings", "FormattingSettings", "DispatchSettings",
    # Exception classes
    "CodeSqueezeError", "EmptyInputError", "MalformedInputError", "ParseError",
    "UnknownOperationError", "BracketMismatchError",
]
