"""
Token definitions for the MiniLang lexer.

This module defines the token vocabulary of the expression language:
- Literals (numbers)
- Identifiers
- Arithmetic, comparison and logical operators
- Parentheses

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


class TokenType(Enum):
    """
    Enumeration of all token types in MiniLang.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Literals and Identifiers
    # ========================================================================
    NUMBER_LITERAL = auto()         # 42, 3.14
    IDENTIFIER = auto()             # rate, max_value, x1

    # ========================================================================
    # Operators
    # ========================================================================

    # Arithmetic operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /

    # Comparison operators
    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=
    LESS_THAN = auto()              # <
    GREATER_THAN = auto()           # >
    LESS_EQUAL = auto()             # <=
    GREATER_EQUAL = auto()          # >=

    # Logical operators
    LOGICAL_AND = auto()            # &&
    LOGICAL_OR = auto()             # ||

    # ========================================================================
    # Punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting and debugging information.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the MiniLang language.

    Two tokens are equal when their type and semantic value match; the raw
    lexeme and the source location are carried for diagnostics only.
    """
    type: TokenType
    value: Any = None               # float for numbers, str for identifiers
    lexeme: str = field(default="", compare=False)
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.value!r}, "
                f"{self.lexeme!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type == TokenType.NUMBER_LITERAL

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or parenthesis."""
        return self.type in OPERATORS.values()

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER


# Lookup tables used by the lexer

SINGLE_CHAR_OPERATORS: Dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

# Two-character operators. A lone '=', '!', '&' or '|' forms no token.
TWO_CHAR_OPERATORS: Dict[str, TokenType] = {
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "<=": TokenType.LESS_EQUAL,
    ">=": TokenType.GREATER_EQUAL,
    "&&": TokenType.LOGICAL_AND,
    "||": TokenType.LOGICAL_OR,
}

OPERATORS: Dict[str, TokenType] = {
    **SINGLE_CHAR_OPERATORS,
    **TWO_CHAR_OPERATORS,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
}

# Reverse mapping, used when rendering diagnostics
TOKEN_LEXEMES: Dict[TokenType, str] = {
    token_type: lexeme for lexeme, token_type in OPERATORS.items()
}
