"""
MiniLang Parser Package

Implements a precedence-climbing recursive descent parser for MiniLang
expressions. Produces immutable, structurally comparable AST nodes.

Key Features:
- One grammar method per precedence level, all left-associative
- Unary minus desugared to subtraction from zero
- Two-kind error model: unexpected token, unexpected end of input
- Result-valued entry point (try_parse) alongside the raising one

Author: xwest
"""

from .ast_nodes import (
    ASTNodeType, ASTVisitor, BinaryOperator, Expression,
    NumberLiteral, Identifier, BinaryOp, SourceSpan,
)
from .parser import Parser, ParseResult, parse, try_parse, parse_string, parse_file
from .errors import (
    ParseError, ParseErrorKind, UnexpectedTokenError, UnexpectedEndOfInputError,
    NestingTooDeepError,
)

__all__ = [
    # Core parser
    "Parser",
    "ParseResult",
    "parse",
    "try_parse",
    "parse_string",
    "parse_file",

    # AST nodes
    "ASTNodeType", "ASTVisitor", "BinaryOperator", "Expression",
    "NumberLiteral", "Identifier", "BinaryOp", "SourceSpan",

    # Error handling
    "ParseError", "ParseErrorKind",
    "UnexpectedTokenError", "UnexpectedEndOfInputError", "NestingTooDeepError",
]
