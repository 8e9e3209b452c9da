"""
Error handling for the MiniLang lexer.

Provides error reporting with source location information and
correction suggestions for characters the scanner cannot use.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a fatal error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
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

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop tokenization.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """Suggestions for characters the scanner had to drop."""

    # Characters that only form a token together with a partner
    INCOMPLETE_OPERATORS = {
        '=': ['=='],
        '!': ['!='],
        '&': ['&&'],
        '|': ['||'],
    }

    @staticmethod
    def suggest_operator_corrections(char: str) -> List[str]:
        """Suggest the complete operators a lone character may belong to."""
        return list(ErrorRecovery.INCOMPLETE_OPERATORS.get(char, []))


# Helper functions for creating common diagnostics

def _describe_character(char: str) -> str:
    suggestions = ErrorRecovery.suggest_operator_corrections(char)
    if suggestions:
        return f"'{char}' is not an operator on its own; did you mean {', '.join(suggestions)}?"
    elif char.isprintable():
        return f"The character '{char}' is not valid in MiniLang expressions."
    return f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for an unrecognized character (strict mode)."""
    return LexerError(
        message=f"Unrecognized character: '{char}'",
        location=location,
        code="L001",
        help_text=_describe_character(char),
        suggestions=ErrorRecovery.suggest_operator_corrections(char)
    )


def create_skipped_character_warning(char: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a character that was dropped from the token stream."""
    return LexerWarning(
        message=f"Skipped unrecognized character: '{char}'",
        location=location,
        code="L001",
        help_text=_describe_character(char),
        suggestions=ErrorRecovery.suggest_operator_corrections(char)
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation, reason: str) -> LexerError:
    """Create an error for an invalid numeric literal."""
    return LexerError(
        message=f"Invalid numeric literal: '{lexeme}'",
        location=location,
        code="L003",
        help_text=reason,
        suggestions=["Check the numeric format", "Use at most one decimal point"]
    )
