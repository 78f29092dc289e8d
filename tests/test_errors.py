"""
Test suite for lexical error reporting.

Tests cover:
- Unexpected characters and unterminated strings
- Recovery after an error
- ErrorCollector, ScanResult and the raising convenience functions
"""

import unittest
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxscan.lexer.scanner import scan, scan_source, tokenize_string, tokenize_file
from loxscan.lexer.tokens import TokenKind
from loxscan.lexer.errors import (
    ErrorCollector, LexerError, UNEXPECTED_CHARACTER, UNTERMINATED_STRING
)


class RecordingReporter:
    """Plain (line, message) sink, no dependency on ErrorCollector."""

    def __init__(self):
        self.reports = []

    def __call__(self, line, message):
        self.reports.append((line, message))


class TestErrorReporting(unittest.TestCase):
    """Test cases for the scanner's error channel."""

    def test_unexpected_character(self):
        reporter = RecordingReporter()
        tokens = scan("a @ b", reporter)
        self.assertEqual(reporter.reports, [(1, UNEXPECTED_CHARACTER)])
        self.assertEqual([t.kind for t in tokens], [
            TokenKind.IDENTIFIER, TokenKind.IDENTIFIER, TokenKind.END_OF_INPUT,
        ])

    def test_each_bad_character_reported_once(self):
        reporter = RecordingReporter()
        tokens = scan("#$\n&", reporter)
        self.assertEqual(reporter.reports, [
            (1, UNEXPECTED_CHARACTER),
            (1, UNEXPECTED_CHARACTER),
            (2, UNEXPECTED_CHARACTER),
        ])
        self.assertEqual(len(tokens), 1)

    def test_non_ascii_letter_is_unexpected(self):
        reporter = RecordingReporter()
        tokens = scan("é", reporter)
        self.assertEqual(reporter.reports, [(1, UNEXPECTED_CHARACTER)])
        self.assertEqual([t.kind for t in tokens], [TokenKind.END_OF_INPUT])

    def test_scan_continues_after_error(self):
        reporter = RecordingReporter()
        tokens = scan("var x = 1 ? 2;", reporter)
        self.assertEqual(len(reporter.reports), 1)
        self.assertEqual([t.kind for t in tokens], [
            TokenKind.VAR, TokenKind.IDENTIFIER, TokenKind.EQUAL,
            TokenKind.NUMBER, TokenKind.NUMBER, TokenKind.SEMICOLON,
            TokenKind.END_OF_INPUT,
        ])

    def test_unterminated_string(self):
        reporter = RecordingReporter()
        tokens = scan('"abc', reporter)
        self.assertEqual(reporter.reports, [(1, UNTERMINATED_STRING)])
        self.assertEqual([t.kind for t in tokens], [TokenKind.END_OF_INPUT])

    def test_unterminated_string_reports_start_line(self):
        reporter = RecordingReporter()
        tokens = scan('x\n"one\ntwo\nthree', reporter)
        self.assertEqual(reporter.reports, [(2, UNTERMINATED_STRING)])
        self.assertNotIn(TokenKind.STRING, [t.kind for t in tokens])
        # Embedded newlines were still counted
        self.assertEqual(tokens[-1].line, 4)

    def test_no_reporter_logs_warnings(self):
        """Without a reporter every error still surfaces, once, as a WARNING."""
        with self.assertLogs("loxscan.lexer.scanner", "WARNING") as logs:
            tokens = scan('@ "open')
        self.assertEqual(tokens[-1].kind, TokenKind.END_OF_INPUT)
        warnings = [r.getMessage() for r in logs.records if r.levelname == "WARNING"]
        self.assertEqual(warnings, [
            f"<string>:1: {UNEXPECTED_CHARACTER}",
            f"<string>:1: {UNTERMINATED_STRING}",
        ])

    def test_custom_reporter_replaces_warning_log(self):
        reporter = RecordingReporter()
        with self.assertLogs("loxscan.lexer.scanner", "DEBUG") as logs:
            scan("@", reporter)
        self.assertEqual(reporter.reports, [(1, UNEXPECTED_CHARACTER)])
        self.assertFalse([r for r in logs.records if r.levelname == "WARNING"])


class TestErrorCollector(unittest.TestCase):
    """Test cases for the collecting reporter."""

    def test_collects_lexer_errors(self):
        collector = ErrorCollector("demo.lox")
        scan("@\n\"x", collector)
        self.assertTrue(collector.has_errors())
        self.assertEqual(len(collector.errors), 2)

        first, second = collector.errors
        self.assertIsInstance(first, LexerError)
        self.assertEqual(first.line, 1)
        self.assertEqual(first.message, UNEXPECTED_CHARACTER)
        self.assertEqual(first.code, "L001")
        self.assertEqual(first.diagnostic.filename, "demo.lox")
        self.assertEqual(second.line, 2)
        self.assertEqual(second.code, "L002")

    def test_clear(self):
        collector = ErrorCollector()
        collector(3, UNEXPECTED_CHARACTER)
        collector.clear()
        self.assertFalse(collector.has_errors())

    def test_collectors_are_independent(self):
        first = ErrorCollector()
        second = ErrorCollector()
        scan("@", first)
        scan("ok", second)
        self.assertTrue(first.has_errors())
        self.assertFalse(second.has_errors())

    def test_error_rendering(self):
        error = LexerError(UNEXPECTED_CHARACTER, 7)
        rendered = str(error)
        self.assertTrue(rendered.startswith("[line 7] Error: Unexpected character."))
        self.assertIn("help:", rendered)
        self.assertEqual(error.diagnostic.location, "<string>:7")

    def test_unknown_message_has_no_code(self):
        error = LexerError("Something else.", 1)
        self.assertIsNone(error.code)
        self.assertEqual(str(error), "[line 1] Error: Something else.")


class TestConvenienceFunctions(unittest.TestCase):
    """Test cases for scan_source, tokenize_string and tokenize_file."""

    def test_scan_source_result(self):
        result = scan_source("print 1 @", filename="repl")
        self.assertTrue(result.has_errors())
        self.assertEqual(len(result.errors), 1)
        self.assertEqual(result.errors[0].diagnostic.filename, "repl")
        self.assertEqual(result.tokens[-1].kind, TokenKind.END_OF_INPUT)

    def test_scan_source_clean(self):
        result = scan_source("print 1;")
        self.assertFalse(result.has_errors())
        self.assertEqual(len(result.tokens), 4)

    def test_tokenize_string_raises_first_error(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("ok\n@ \"open")
        self.assertEqual(ctx.exception.line, 2)
        self.assertEqual(ctx.exception.message, UNEXPECTED_CHARACTER)

    def test_tokenize_string_success(self):
        tokens = tokenize_string("1 + 2")
        self.assertEqual(len(tokens), 4)

    def test_tokenize_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "ok.lox")
            with open(path, "w", encoding="utf-8") as f:
                f.write("var greeting = \"hi\";\n")
            tokens = tokenize_file(path)
            self.assertEqual(tokens[3].literal, "hi")

            bad = os.path.join(tmp, "bad.lox")
            with open(bad, "w", encoding="utf-8") as f:
                f.write("\"never closed")
            with self.assertRaises(LexerError) as ctx:
                tokenize_file(bad)
            self.assertEqual(ctx.exception.code, "L002")
            self.assertEqual(ctx.exception.diagnostic.filename, bad)


if __name__ == '__main__':
    unittest.main()
