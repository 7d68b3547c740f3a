"""
Tests for the processing dispatcher.

Tests cover:
- Empty input and unknown operations
- Size-based routing between in-thread and offloaded execution
- Offload failures
- Same results from both paths
"""

import pytest

from codesqueeze.core.models import ContentKind, Operation, TransformResult
from codesqueeze.processing.dispatcher import ProcessingDispatcher, run, run_auto
from codesqueeze.processing.executor import ExecutionContext
from codesqueeze.processing.worker import execute_request
from codesqueeze.utils.config import ProcessingConfig

# ============================================================================
# Test Fixtures
# ============================================================================


class RecordingContext:
    """Offloader double that runs requests in-thread and records them."""

    def __init__(self):
        self.requests = []

    def submit(self, request):
        self.requests.append(request)
        return execute_request(request)


class FailingContext:
    """Offloader double whose worker never replies properly."""

    def submit(self, request):
        raise RuntimeError("worker crashed")


@pytest.fixture
def recording():
    return RecordingContext()


@pytest.fixture
def small_threshold(recording):
    """Dispatcher that offloads anything above 10 bytes."""
    return ProcessingDispatcher(ProcessingConfig(size_threshold_bytes=10), recording)


# ============================================================================
# Input Validation Tests
# ============================================================================


class TestInputValidation:
    """Failures detected before any transform runs."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_empty_input(self, text):
        result = run(text, Operation.COMPRESS)
        assert not result.success
        assert result.error_type == "EmptyInputError"
        assert result.elapsed_millis == 0

    def test_unknown_operation_string(self):
        result = run('{"a": 1}', "explode")
        assert not result.success
        assert result.error_type == "UnknownOperationError"
        assert "explode" in result.error_message

    def test_minify_is_javascript_only(self):
        result = run('{"a": 1}', Operation.MINIFY, ContentKind.JSON)
        assert not result.success
        assert result.error_type == "UnknownOperationError"

    def test_kind_as_string(self):
        result = run("{a: 1}", "compress", "json")
        assert result.success
        assert result.output == '{"a":1}'
        result = run("a = 1;\nb = 2;", "minify", "js")
        assert result.output == "a=1;b=2;"

    @pytest.mark.parametrize("kind", ["xml", None, ["json"]])
    def test_unknown_kind_becomes_result(self, kind):
        result = run("{}", "compress", kind)
        assert not result.success
        assert result.error_type == "UnknownOperationError"

    def test_operation_as_string(self):
        result = run('{"a": 1}', "compress")
        assert result.success
        assert result.output == '{"a":1}'

    def test_transform_errors_become_results(self):
        result = run("(1,2]", Operation.VALIDATE, ContentKind.JAVASCRIPT)
        assert not result.success
        assert result.output is None
        assert result.error_type == "BracketMismatchError"
        assert "position 5" in result.error_message


# ============================================================================
# Routing Tests
# ============================================================================


class TestRouting:
    """Size threshold routing."""

    def test_small_input_runs_in_thread(self, small_threshold, recording):
        result = small_threshold.run("[1,2]", Operation.COMPRESS)
        assert result.success
        assert recording.requests == []

    def test_large_input_is_offloaded(self, small_threshold, recording):
        result = small_threshold.run("[1, 2, 3, 4, 5]", Operation.COMPRESS)
        assert result.output == "[1,2,3,4,5]"
        assert len(recording.requests) == 1
        assert recording.requests[0].operation is Operation.COMPRESS

    def test_threshold_is_inclusive(self, small_threshold, recording):
        small_threshold.run("[1, 2, 33]", Operation.COMPRESS)  # exactly 10 bytes
        assert recording.requests == []

    def test_threshold_counts_utf8_bytes(self, small_threshold, recording):
        # 8 characters, 12 bytes
        small_threshold.run('["éééé"]', Operation.COMPRESS)
        assert len(recording.requests) == 1

    def test_threshold_override_per_call(self, small_threshold, recording):
        small_threshold.run("[1, 2, 3, 4, 5]", Operation.COMPRESS, size_threshold_bytes=100)
        assert recording.requests == []

    def test_offload_failure_becomes_result(self):
        dispatcher = ProcessingDispatcher(
            ProcessingConfig(size_threshold_bytes=0), FailingContext()
        )
        result = dispatcher.run('{"a": 1}', Operation.COMPRESS)
        assert not result.success
        assert result.error_message == "Offloaded execution failed: worker crashed"
        assert result.error_type == "RuntimeError"


# ============================================================================
# Sync / Offload Equivalence Tests
# ============================================================================


CASES = [
    ("{ name: 'a', age: 30, }", Operation.COMPRESS, ContentKind.JSON),
    ('{"a":1,"b":[1,2,3]}', Operation.FORMAT, ContentKind.JSON),
    ("{a: unknownVar}", Operation.VALIDATE, ContentKind.JSON),
    ("function f(){ // hi\n  return 1;\n}", Operation.COMPRESS, ContentKind.JAVASCRIPT),
    ("a = 1;\nb = 2;", Operation.MINIFY, ContentKind.JAVASCRIPT),
    ("if(a){b();}", Operation.FORMAT, ContentKind.JAVASCRIPT),
    ("(1,2]", Operation.VALIDATE, ContentKind.JAVASCRIPT),
]


def _same(left: TransformResult, right: TransformResult) -> bool:
    return (left.success, left.output, left.error_message) == (
        right.success,
        right.output,
        right.error_message,
    )


class TestEquivalence:
    """Both execution paths produce the same result for the same request."""

    @pytest.mark.parametrize("text,operation,kind", CASES)
    def test_thread_backend(self, text, operation, kind):
        sync = ProcessingDispatcher().run(text, operation, kind)
        config = ProcessingConfig(size_threshold_bytes=0, offload_backend="thread")
        offloaded = ProcessingDispatcher(config).run(text, operation, kind)
        assert _same(sync, offloaded)

    def test_process_backend(self):
        config = ProcessingConfig(size_threshold_bytes=0)
        with ExecutionContext.from_config(config) as context:
            dispatcher = ProcessingDispatcher(config, context)
            for text, operation, kind in CASES:
                sync = ProcessingDispatcher().run(text, operation, kind)
                assert _same(sync, dispatcher.run(text, operation, kind))


# ============================================================================
# Auto Detection Tests
# ============================================================================


class TestRunAuto:
    """Kind detection before dispatch."""

    def test_detects_javascript(self):
        code = "function add(a, b) {\n  return a + b;\n}\nconsole.log(add(1, 2));"
        result = run_auto(code, Operation.COMPRESS)
        assert result.output == "function add(a,b){return a+b;}console.log(add(1,2));"

    def test_detects_json(self):
        result = run_auto('{"a": [1, 2]}', Operation.COMPRESS)
        assert result.output == '{"a":[1,2]}'

    def test_empty_input(self):
        result = run_auto("  ", Operation.COMPRESS)
        assert result.error_type == "EmptyInputError"
