"""
MiniLang Expression Front-End

Turns source text for arithmetic/logical expressions into an abstract
syntax tree.

Architecture:
    minilang/
    ├── lexer/           # Tokenization and lexical analysis
    └── parser/          # Syntax analysis and AST generation

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@minilang.org"
__license__ = "MIT"

from .lexer import (
    Lexer, Token, TokenType, SourceLocation, LexerError, LexerWarning,
    tokenize, tokenize_file,
)
from .parser import (
    Parser, ParseResult, parse, try_parse, parse_string, parse_file,
    ASTVisitor, BinaryOperator, Expression, NumberLiteral, Identifier, BinaryOp,
    ParseError, ParseErrorKind, UnexpectedTokenError, UnexpectedEndOfInputError,
    NestingTooDeepError,
)

__all__ = [
    # Core entry points
    "tokenize",
    "tokenize_file",
    "parse",
    "try_parse",
    "parse_string",
    "parse_file",

    # Core classes
    "Lexer",
    "Parser",
    "ParseResult",
    "Token",
    "TokenType",
    "SourceLocation",

    # AST
    "ASTVisitor",
    "BinaryOperator",
    "Expression",
    "NumberLiteral",
    "Identifier",
    "BinaryOp",

    # Errors
    "LexerError",
    "LexerWarning",
    "ParseError",
    "ParseErrorKind",
    "UnexpectedTokenError",
    "UnexpectedEndOfInputError",
    "NestingTooDeepError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
