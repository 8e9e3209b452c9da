"""
Error handling for the MiniLang parser.

A parse fails in exactly one of two ways: a token was present that the
grammar could not accept, or the tokens ran out while the grammar still
needed one. Each kind has its own exception class so callers can catch
either one, or ParseError for both. Parentheses nested past the parser's
limit are reported as an unexpected token with their own code.

Author: xwest
"""

from enum import Enum
from typing import Optional, List, Union

from ..lexer.tokens import Token, TokenType, SourceLocation, TOKEN_LEXEMES
from ..lexer.errors import Diagnostic


class ParseErrorKind(Enum):
    """The two ways a parse can fail."""
    UNEXPECTED_TOKEN = "UnexpectedToken"
    UNEXPECTED_END_OF_INPUT = "UnexpectedEndOfInput"


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    kind: ParseErrorKind

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedTokenError(ParseError):
    """A token was present but did not satisfy the grammar rule being applied."""
    kind = ParseErrorKind.UNEXPECTED_TOKEN


class UnexpectedEndOfInputError(ParseError):
    """The token sequence was exhausted while the grammar still expected a token."""
    kind = ParseErrorKind.UNEXPECTED_END_OF_INPUT


class NestingTooDeepError(UnexpectedTokenError):
    """
    An opening parenthesis went past the parser's nesting limit.

    Reported as an unexpected token: the grammar would accept the '(', but
    the parser refuses to descend any further.
    """


class SyntaxErrorRecovery:
    """Suggestions attached to parse errors."""

    @staticmethod
    def suggest_missing_token(expected: Union[TokenType, str]) -> List[str]:
        """Suggest what token might be missing."""
        token_suggestions = {
            TokenType.RIGHT_PAREN: ["Add a closing parenthesis ')'"],
        }

        return list(token_suggestions.get(expected, []))


def describe_token(token: Token) -> str:
    """Render a token for an error message."""
    if token.type == TokenType.NUMBER_LITERAL:
        return f"number {token.lexeme or token.value}"
    if token.type == TokenType.IDENTIFIER:
        return f"identifier '{token.value}'"
    return f"'{TOKEN_LEXEMES.get(token.type, token.type.name)}'"


def _describe_expected(expected: Union[TokenType, str]) -> str:
    if isinstance(expected, TokenType):
        return f"'{TOKEN_LEXEMES.get(expected, expected.name)}'"
    return expected


# Helper functions for creating common parser errors

def create_unexpected_token_error(expected: Union[TokenType, str], found: Token) -> UnexpectedTokenError:
    """Create an error for an unexpected token."""
    expected_str = _describe_expected(expected)
    found_str = describe_token(found)

    return UnexpectedTokenError(
        message=f"Expected {expected_str}, found {found_str}",
        location=found.location,
        token=found,
        code="P001",
        help_text=f"The parser expected to see {expected_str} at this position, but found {found_str} instead.",
        suggestions=SyntaxErrorRecovery.suggest_missing_token(expected)
    )


def create_unexpected_eof_error(expected: Union[TokenType, str],
                                location: Optional[SourceLocation] = None) -> UnexpectedEndOfInputError:
    """Create an error for unexpected end of input."""
    expected_str = _describe_expected(expected)

    return UnexpectedEndOfInputError(
        message=f"Unexpected end of input, expected {expected_str}",
        location=location,
        code="P010",
        help_text=f"The parser reached the end of the input while expecting {expected_str}.",
        suggestions=SyntaxErrorRecovery.suggest_missing_token(expected) or [f"Add the missing {expected_str}"]
    )


def create_nesting_too_deep_error(token: Token, limit: int) -> NestingTooDeepError:
    """Create an error for parentheses nested past the parser's limit."""
    return NestingTooDeepError(
        message=f"Expression nested too deeply (limit is {limit} levels)",
        location=token.location,
        token=token,
        code="P020",
        help_text="Parentheses may only be nested a limited number of levels deep.",
        suggestions=["Remove redundant parentheses", "Split the expression into smaller parts"]
    )
