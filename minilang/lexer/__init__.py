"""
MiniLang Lexer Package

Implements the lexical analyzer (tokenizer) for MiniLang expressions.

Key Features:
- Numeric literals, identifiers, arithmetic/comparison/logical operators
- One character of lookahead for two-character operators
- Lenient mode that skips unrecognized characters with warnings
- Strict mode that rejects them with a LexerError
- Source location tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize, tokenize_file
from .errors import Diagnostic, LexerError, LexerWarning

__all__ = [
    "Lexer",
    "tokenize",
    "tokenize_file",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
    "LexerWarning",
]
