"""
Test cases for JSON / JavaScript content detection.
"""

import unittest

from codesqueeze.core.detection import (
    detect_content_type,
    detect_javascript,
    detect_json,
    quick_detect_content_type,
)
from codesqueeze.core.models import ContentKind

JSON_SAMPLE = '{"a": 1, "b": [true, null]}'
JS_SAMPLE = (
    "function add(a, b) {\n"
    "  return a + b;\n"
    "}\n"
    "console.log(add(1, 2));"
)


class TestDetectContentType(unittest.TestCase):
    """Test the combined detector."""

    def test_json_object(self):
        result = detect_content_type(JSON_SAMPLE)
        self.assertIs(result.kind, ContentKind.JSON)
        self.assertGreater(result.confidence, 0.7)

    def test_javascript_code(self):
        result = detect_content_type(JS_SAMPLE)
        self.assertIs(result.kind, ContentKind.JAVASCRIPT)

    def test_empty_content(self):
        result = detect_content_type("   ")
        self.assertIsNone(result.kind)
        self.assertEqual(result.confidence, 0.0)

    def test_confidence_is_bounded(self):
        for text in (JSON_SAMPLE, JS_SAMPLE, "hello world", "[]"):
            confidence = detect_content_type(text).confidence
            self.assertGreaterEqual(confidence, 0.0)
            self.assertLessEqual(confidence, 1.0)


class TestScorers(unittest.TestCase):
    """Test the per-kind scorers."""

    def test_javascript_scores_low_as_json(self):
        self.assertEqual(detect_json(JS_SAMPLE).confidence, 0.0)

    def test_json_scores_low_as_javascript(self):
        self.assertLess(detect_javascript(JSON_SAMPLE).confidence, 0.5)

    def test_reason_is_reported(self):
        self.assertIn("parses as JSON", detect_json(JSON_SAMPLE).reason)


class TestQuickDetect(unittest.TestCase):
    """Test the thresholded shortcut."""

    def test_confident_results(self):
        self.assertIs(quick_detect_content_type(JSON_SAMPLE), ContentKind.JSON)
        self.assertIs(quick_detect_content_type(JS_SAMPLE), ContentKind.JAVASCRIPT)

    def test_plain_text_is_unknown(self):
        self.assertIsNone(quick_detect_content_type("hello world"))


if __name__ == "__main__":
    unittest.main()
