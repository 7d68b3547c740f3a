"""
Single entry point that executes a transform request.

Both the in-thread path and the offloaded path run ``execute_request``, so
the same request always produces the same result. Nothing raised by a
transform escapes: failures come back as ``TransformResult`` values.
"""

import logging
import time
from typing import Any, Callable, Optional, Union

from ..core.exceptions import CodeSqueezeError, UnknownOperationError
from ..core.javascript_handler import JavaScriptHandler
from ..core.json_handler import JSONHandler
from ..core.models import (
    SUPPORTED_OPERATIONS,
    ContentKind,
    Operation,
    TransformRequest,
    TransformResult,
)
from ..utils.config import ProcessingConfig

logger = logging.getLogger(__name__)

OperationFunc = Callable[[str, ProcessingConfig], str]

OPERATION_TABLE: dict[tuple[ContentKind, Operation], OperationFunc] = {
    (ContentKind.JSON, Operation.COMPRESS): lambda text, config: JSONHandler.compress(
        text, config.repair
    ),
    (ContentKind.JSON, Operation.FORMAT): lambda text, config: JSONHandler.format(
        text, config.json_indent, config.repair
    ),
    (ContentKind.JSON, Operation.VALIDATE): lambda text, config: JSONHandler.validate(
        text, config.repair
    ),
    (ContentKind.JAVASCRIPT, Operation.COMPRESS): lambda text, config: (
        JavaScriptHandler.compress(text)
    ),
    (ContentKind.JAVASCRIPT, Operation.MINIFY): lambda text, config: (
        JavaScriptHandler.minify(text)
    ),
    (ContentKind.JAVASCRIPT, Operation.FORMAT): lambda text, config: (
        JavaScriptHandler.format(text, config.js_indent)
    ),
    (ContentKind.JAVASCRIPT, Operation.VALIDATE): lambda text, config: (
        JavaScriptHandler.validate(text)
    ),
}


def resolve_kind(
    kind: Union[ContentKind, str], operation: Union[Operation, str]
) -> ContentKind:
    """
    Turn a content kind value into a ``ContentKind``.

    Raises:
        UnknownOperationError: kind not recognised
    """
    try:
        return ContentKind(kind)
    except (TypeError, ValueError) as e:
        raise UnknownOperationError(operation, str(kind)) from e


def resolve_operation(
    operation: Union[Operation, str], kind: Union[ContentKind, str]
) -> Operation:
    """
    Turn an operation value into an ``Operation`` supported for ``kind``.

    Raises:
        UnknownOperationError: value not recognised, or not valid for kind
    """
    kind = resolve_kind(kind, operation)
    try:
        resolved = Operation(operation)
    except (TypeError, ValueError) as e:
        raise UnknownOperationError(operation, kind.value) from e
    if resolved not in SUPPORTED_OPERATIONS[kind]:
        raise UnknownOperationError(resolved, kind.value)
    return resolved


def _elapsed_millis(start: float) -> int:
    return max(0, round((time.perf_counter() - start) * 1000))


def execute_request(
    request: TransformRequest, config: Optional[ProcessingConfig] = None
) -> TransformResult:
    """Run one request and time it, converting every failure into a result."""
    if config is None:
        config = ProcessingConfig()

    start = time.perf_counter()
    try:
        kind = resolve_kind(request.kind, request.operation)
        operation = resolve_operation(request.operation, kind)
        output = OPERATION_TABLE[(kind, operation)](request.text, config)
    except CodeSqueezeError as e:
        return TransformResult.failure(
            str(e), _elapsed_millis(start), type(e).__name__
        )
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning(
            "Unexpected %s during %s %s: %s",
            type(e).__name__,
            getattr(request.kind, "value", request.kind),
            getattr(request.operation, "value", request.operation),
            e,
        )
        return TransformResult.failure(
            f"Processing failed: {e}", _elapsed_millis(start), type(e).__name__
        )
    return TransformResult.ok(output, _elapsed_millis(start))


def handle_message(
    message: dict[str, Any], config: Optional[ProcessingConfig] = None
) -> dict[str, Any]:
    """Worker side of the offload boundary: request message in, reply out."""
    return execute_request(TransformRequest.from_message(message), config).to_message()
