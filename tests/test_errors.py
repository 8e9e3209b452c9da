"""
Test suite for MiniLang diagnostics.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minilang.lexer.tokens import Token, TokenType, SourceLocation
from minilang.lexer.errors import (
    Diagnostic, create_invalid_number_error, create_skipped_character_warning
)
from minilang.parser.errors import (
    ParseError, ParseErrorKind, UnexpectedTokenError, UnexpectedEndOfInputError,
    NestingTooDeepError, create_unexpected_token_error, create_unexpected_eof_error,
    create_nesting_too_deep_error
)


class TestDiagnostics(unittest.TestCase):
    """Test cases for error construction and rendering."""

    def setUp(self):
        self.location = SourceLocation("expr.ml", 1, 7, 6)

    def test_diagnostic_rendering(self):
        diagnostic = Diagnostic(
            message="Something broke",
            location=self.location,
            severity="error",
            code="P001",
            help_text="Try again.",
            suggestions=["Fix it"]
        )
        text = str(diagnostic)

        self.assertTrue(text.startswith("ERROR: Something broke"))
        self.assertIn("--> expr.ml:1:7", text)
        self.assertIn("help: Try again.", text)
        self.assertIn("- Fix it", text)

    def test_diagnostic_without_location(self):
        diagnostic = Diagnostic("Nothing to parse", None, "error")
        self.assertNotIn("-->", str(diagnostic))

    def test_unexpected_token_error(self):
        token = Token(TokenType.NUMBER_LITERAL, 3.0, "3", self.location)
        error = create_unexpected_token_error(TokenType.RIGHT_PAREN, token)

        self.assertIsInstance(error, UnexpectedTokenError)
        self.assertIsInstance(error, ParseError)
        self.assertEqual(error.kind, ParseErrorKind.UNEXPECTED_TOKEN)
        self.assertEqual(error.code, "P001")
        self.assertIs(error.token, token)
        self.assertEqual(error.diagnostic.message, "Expected ')', found number 3")
        self.assertEqual(error.diagnostic.suggestions, ["Add a closing parenthesis ')'"])

    def test_unexpected_token_error_for_operator(self):
        token = Token(TokenType.LOGICAL_AND, None, "&&", self.location)
        error = create_unexpected_token_error("expression", token)

        self.assertEqual(error.diagnostic.message, "Expected expression, found '&&'")
        self.assertEqual(error.diagnostic.suggestions, [])

    def test_unexpected_eof_error(self):
        error = create_unexpected_eof_error(TokenType.RIGHT_PAREN, self.location)

        self.assertIsInstance(error, UnexpectedEndOfInputError)
        self.assertEqual(error.kind, ParseErrorKind.UNEXPECTED_END_OF_INPUT)
        self.assertEqual(error.code, "P010")
        self.assertIsNone(error.token)
        self.assertIn("Unexpected end of input, expected ')'", str(error))

    def test_eof_error_without_location(self):
        error = create_unexpected_eof_error("expression")

        self.assertIsNone(error.diagnostic.location)
        self.assertEqual(error.diagnostic.suggestions, ["Add the missing expression"])

    def test_nesting_too_deep_error(self):
        token = Token(TokenType.LEFT_PAREN, None, "(", self.location)
        error = create_nesting_too_deep_error(token, 64)

        self.assertIsInstance(error, NestingTooDeepError)
        self.assertIsInstance(error, UnexpectedTokenError)
        self.assertEqual(error.kind, ParseErrorKind.UNEXPECTED_TOKEN)
        self.assertEqual(error.code, "P020")
        self.assertIs(error.token, token)
        self.assertEqual(error.diagnostic.location, self.location)
        self.assertIn("nested too deeply (limit is 64 levels)", str(error))

    def test_invalid_number_error(self):
        error = create_invalid_number_error("1..2", self.location, "Too many decimal points")

        self.assertEqual(error.code, "L003")
        self.assertIn("Invalid numeric literal: '1..2'", str(error))

    def test_skipped_character_warning(self):
        warning = create_skipped_character_warning("|", self.location)

        self.assertEqual(warning.code, "L001")
        self.assertTrue(str(warning).startswith("WARNING:"))
        self.assertEqual(warning.diagnostic.suggestions, ["||"])


if __name__ == '__main__':
    unittest.main()
