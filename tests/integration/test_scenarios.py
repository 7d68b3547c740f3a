"""
End-to-end scenarios through the public ``run`` entry point.
"""

import json
import unittest

import codesqueeze
from codesqueeze import ContentKind, Operation


class TestJSONScenarios(unittest.TestCase):
    """JSON requests from raw text to result."""

    def test_compress_object_literal(self):
        result = codesqueeze.run("{ name: 'a', age: 30, }", Operation.COMPRESS)
        self.assertTrue(result.success)
        self.assertEqual(result.output, '{"name":"a","age":30}')
        self.assertIsNone(result.error_message)

    def test_format_reproduces_value(self):
        text = '{"a":1,"b":[1,2,3]}'
        result = codesqueeze.run(text, Operation.FORMAT)
        self.assertTrue(result.success)
        self.assertIn("\n", result.output)
        self.assertTrue(result.output.splitlines()[1].startswith('  "a"'))
        self.assertEqual(json.loads(result.output), json.loads(text))

    def test_validate_names_bare_value(self):
        result = codesqueeze.run("{a: unknownVar}", Operation.VALIDATE)
        self.assertFalse(result.success)
        self.assertIsNone(result.output)
        self.assertIn("unknownVar", result.error_message)

    def test_overflowing_number_fails_cleanly(self):
        result = codesqueeze.run("[1e400]", Operation.COMPRESS)
        self.assertFalse(result.success)
        self.assertEqual(result.error_type, "ParseError")

    def test_validate_reports_success_message(self):
        result = codesqueeze.run('{"ok": true}', "validate")
        self.assertEqual(result.output, "JSON validation passed!")


class TestJavaScriptScenarios(unittest.TestCase):
    """JavaScript requests from raw text to result."""

    def test_compress_drops_comment(self):
        result = codesqueeze.run(
            "function f(){ // hi\n  return 1;\n}",
            Operation.COMPRESS,
            ContentKind.JAVASCRIPT,
        )
        self.assertEqual(result.output, "function f(){return 1;}")

    def test_validate_reports_mismatch_at_closer(self):
        result = codesqueeze.run("(1,2]", Operation.VALIDATE, ContentKind.JAVASCRIPT)
        self.assertFalse(result.success)
        self.assertIn("Mismatched bracket ']' at position 5", result.error_message)

    def test_validate_unterminated_string_fails(self):
        result = codesqueeze.run('x = "abc', Operation.VALIDATE, ContentKind.JAVASCRIPT)
        self.assertFalse(result.success)
        self.assertIn("Unterminated string literal", result.error_message)

    def test_compress_unterminated_string_still_returns_output(self):
        result = codesqueeze.run('x = "abc', Operation.COMPRESS, ContentKind.JAVASCRIPT)
        self.assertTrue(result.success)
        self.assertEqual(result.output, 'x="abc')

    def test_format_then_compress(self):
        code = "if(a){b();c();}"
        formatted = codesqueeze.run(code, "format", ContentKind.JAVASCRIPT).output
        self.assertEqual(formatted, "if(a){\n  b();\n  c();\n}")
        compressed = codesqueeze.run(formatted, "compress", ContentKind.JAVASCRIPT)
        self.assertEqual(compressed.output, code)


class TestEmptyInput(unittest.TestCase):
    """Empty input fails the same way for every operation."""

    def test_every_operation(self):
        cases = [
            (ContentKind.JSON, Operation.COMPRESS),
            (ContentKind.JSON, Operation.FORMAT),
            (ContentKind.JSON, Operation.VALIDATE),
            (ContentKind.JAVASCRIPT, Operation.COMPRESS),
            (ContentKind.JAVASCRIPT, Operation.MINIFY),
            (ContentKind.JAVASCRIPT, Operation.FORMAT),
            (ContentKind.JAVASCRIPT, Operation.VALIDATE),
        ]
        for kind, operation in cases:
            with self.subTest(kind=kind, operation=operation):
                result = codesqueeze.run("", operation, kind)
                self.assertFalse(result.success)
                self.assertEqual(result.error_message, "Input is empty, nothing to process")
                self.assertEqual(result.elapsed_millis, 0)


class TestStatsForResults(unittest.TestCase):
    """Statistics computed from a finished request."""

    def test_compress_stats(self):
        text = '{ "a" : 1 ,  "b" : 2 }'
        result = codesqueeze.run(text, Operation.COMPRESS)
        report = codesqueeze.compute_stats(text, result.output, result.elapsed_millis)
        self.assertEqual(report.original_bytes, 22)
        self.assertEqual(report.processed_bytes, 13)
        self.assertEqual(report.compression_ratio_percent, 41)
        self.assertGreaterEqual(report.elapsed_millis, 0)
        self.assertEqual(codesqueeze.format_bytes(report.original_bytes), "22 B")


if __name__ == "__main__":
    unittest.main()
