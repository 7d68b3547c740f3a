"""
Processing dispatcher.

Validates input, resolves the operation and routes each request either to
in-thread execution or, for inputs above the size threshold, to an
offloaded execution context. Callers always get a ``TransformResult``;
no exception escapes ``run``.
"""

import logging
from typing import Optional, Union

from ..core.detection import detect_content_type
from ..core.exceptions import CodeSqueezeError, EmptyInputError
from ..core.interfaces import Offloader
from ..core.models import ContentKind, Operation, TransformRequest, TransformResult
from ..utils.config import ProcessingConfig
from .executor import ExecutionContext
from .stats import byte_length
from .worker import execute_request, resolve_kind, resolve_operation

logger = logging.getLogger(__name__)


def _failure(error: CodeSqueezeError) -> TransformResult:
    return TransformResult.failure(str(error), 0, type(error).__name__)


class ProcessingDispatcher:
    """Chooses between synchronous and offloaded execution by input size."""

    def __init__(
        self,
        config: Optional[ProcessingConfig] = None,
        context: Optional[Offloader] = None,
    ):
        self.config = config or ProcessingConfig()
        self.context = context

    def run(
        self,
        text: str,
        operation: Union[Operation, str],
        kind: Union[ContentKind, str] = ContentKind.JSON,
        size_threshold_bytes: Optional[int] = None,
    ) -> TransformResult:
        """
        Process ``text`` with ``operation``.

        Args:
            text: Input text
            operation: Operation or its string value
            kind: Declared kind of the text, or its string value
            size_threshold_bytes: Largest UTF-8 size processed in-thread;
                defaults to the configured threshold

        Returns:
            TransformResult with output or error message and elapsed time
        """
        if not text or not text.strip():
            return _failure(EmptyInputError())

        try:
            kind = resolve_kind(kind, operation)
            resolved = resolve_operation(operation, kind)
        except CodeSqueezeError as e:
            return _failure(e)

        request = TransformRequest(text=text, operation=resolved, kind=kind)
        threshold = (
            self.config.size_threshold_bytes
            if size_threshold_bytes is None
            else size_threshold_bytes
        )
        size = byte_length(text)

        if size <= threshold:
            logger.debug(
                "Running %s %s in-thread (%d bytes)", kind.value, resolved.value, size
            )
            return execute_request(request, self.config)

        logger.debug(
            "Offloading %s %s (%d bytes > %d)",
            kind.value,
            resolved.value,
            size,
            threshold,
        )
        try:
            return self._offload(request)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.warning("Offloaded execution failed: %s", e)
            return TransformResult.failure(
                f"Offloaded execution failed: {e}", 0, type(e).__name__
            )

    def _offload(self, request: TransformRequest) -> TransformResult:
        if self.context is not None:
            return self.context.submit(request)
        # No long-lived context: hold one for this call only
        with ExecutionContext.from_config(self.config) as context:
            return context.submit(request)

    def run_auto(
        self,
        text: str,
        operation: Union[Operation, str],
        size_threshold_bytes: Optional[int] = None,
    ) -> TransformResult:
        """Like ``run``, with the content kind detected from the text."""
        if not text or not text.strip():
            return _failure(EmptyInputError())
        detected = detect_content_type(text)
        kind = detected.kind or ContentKind.JSON
        logger.debug(
            "Detected %s content (confidence %.2f)", kind.value, detected.confidence
        )
        return self.run(text, operation, kind, size_threshold_bytes)


def run(
    text: str,
    operation: Union[Operation, str],
    kind: Union[ContentKind, str] = ContentKind.JSON,
    size_threshold_bytes: Optional[int] = None,
    config: Optional[ProcessingConfig] = None,
) -> TransformResult:
    """Process text with a one-off dispatcher."""
    return ProcessingDispatcher(config).run(text, operation, kind, size_threshold_bytes)


def run_auto(
    text: str,
    operation: Union[Operation, str],
    size_threshold_bytes: Optional[int] = None,
    config: Optional[ProcessingConfig] = None,
) -> TransformResult:
    """Process text with a one-off dispatcher, detecting its kind."""
    return ProcessingDispatcher(config).run_auto(text, operation, size_threshold_bytes)
