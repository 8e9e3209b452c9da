"""
MiniLang Lexer - handles tokenizing expression source

Single pass over the source with one character of lookahead. Anything the
scanner can't use is dropped from the token stream; strict mode turns
that into a LexerError instead.

xwest
"""

import logging
from typing import List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, SINGLE_CHAR_OPERATORS, TWO_CHAR_OPERATORS
)
from .errors import (
    LexerWarning, create_invalid_character_error,
    create_skipped_character_warning, create_invalid_number_error
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    MiniLang lexical analyzer.

    Converts expression source text into a list of tokens. No EOF token is
    appended, so an empty source yields an empty list.
    """

    def __init__(self, source: str, filename: str = "<unknown>", strict: bool = False):
        """
        Initialize the lexer with source code.

        Args:
            source: Expression source string
            filename: Name of source file for error reporting
            strict: Raise LexerError on unrecognized characters instead of
                skipping them with a warning
        """
        self.source = source
        self.filename = filename
        self.strict = strict
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.warnings: List[LexerWarning] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens in source order

        Raises:
            LexerError: In strict mode, on the first unrecognized character
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []
        self.warnings = []

        while self.pos < len(self.source):
            token = self._next_token()
            if token:
                self.tokens.append(token)

        logger.debug(
            "tokenized %s: %d tokens, %d skipped characters",
            self.filename, len(self.tokens), len(self.warnings)
        )
        return self.tokens

    def _next_token(self) -> Optional[Token]:
        """Scan one token, or skip one character and return None."""
        location = self._location()
        current_char = self.source[self.pos]

        if current_char.isspace():
            self._advance()
            return None

        if self._is_digit(current_char):
            return self._tokenize_number(location)

        if current_char.isalpha():
            return self._tokenize_identifier(location)

        if current_char in SINGLE_CHAR_OPERATORS:
            self._advance()
            return Token(SINGLE_CHAR_OPERATORS[current_char], None, current_char, location)

        # Two-character operators first, then the bare comparisons
        pair = current_char + self._peek()
        if pair in TWO_CHAR_OPERATORS:
            self._advance_by(2)
            return Token(TWO_CHAR_OPERATORS[pair], None, pair, location)

        if current_char == '<':
            self._advance()
            return Token(TokenType.LESS_THAN, None, '<', location)
        if current_char == '>':
            self._advance()
            return Token(TokenType.GREATER_THAN, None, '>', location)

        # Lone '=', '!', '&', '|' and every other symbol
        self._skip_unrecognized(current_char, location)
        return None

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Tokenize a decimal literal with at most one decimal point."""
        start_pos = self.pos
        seen_dot = False

        while self.pos < len(self.source):
            char = self.source[self.pos]
            if self._is_digit(char):
                self._advance()
            elif char == '.' and not seen_dot:
                seen_dot = True
                self._advance()
            else:
                break

        lexeme = self.source[start_pos:self.pos]

        # Digits with at most one '.' always convert; checked anyway
        try:
            value = float(lexeme)
        except ValueError:
            raise create_invalid_number_error(
                lexeme, location, "Cannot parse floating-point number"
            )

        return Token(TokenType.NUMBER_LITERAL, value, lexeme, location)

    def _tokenize_identifier(self, location: SourceLocation) -> Token:
        """Tokenize an identifier."""
        start_pos = self.pos

        # First character is already validated as alphabetic
        self._advance()

        while self.pos < len(self.source) and self._is_identifier_continue(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.IDENTIFIER, lexeme, lexeme, location)

    def _skip_unrecognized(self, char: str, location: SourceLocation):
        """Drop a character that starts no token."""
        if self.strict:
            raise create_invalid_character_error(char, location)

        logger.debug("skipping unrecognized character %r at %s", char, location)
        self.warnings.append(create_skipped_character_warning(char, location))
        self._advance()

    @staticmethod
    def _is_digit(char: str) -> bool:
        return '0' <= char <= '9'

    @staticmethod
    def _is_identifier_continue(char: str) -> bool:
        """Check if character can continue an identifier."""
        return char.isalnum() or char == '_'

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def has_warnings(self) -> bool:
        """Check if lexer skipped any characters."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[LexerWarning]:
        """Get the warnings collected by the last run."""
        return list(self.warnings)


def tokenize(source: str, filename: str = "<string>", strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Expression source string
        filename: Filename for error reporting
        strict: Reject unrecognized characters instead of skipping them

    Returns:
        List of tokens

    Raises:
        LexerError: In strict mode, if an unrecognized character is found
    """
    return Lexer(source, filename, strict=strict).tokenize()


def tokenize_file(filepath: str, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file
        strict: Reject unrecognized characters instead of skipping them

    Returns:
        List of tokens

    Raises:
        LexerError: In strict mode, if an unrecognized character is found
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize(source, filepath, strict=strict)
