"""
MiniLang Recursive Descent Parser

Precedence climbing with one method per precedence level, lowest first:

    expression      := logical_or
    logical_or      := logical_and ( "||" logical_and )*
    logical_and     := equality ( "&&" equality )*
    equality        := comparison ( ("==" | "!=") comparison )*
    comparison      := additive ( ("<" | ">" | "<=" | ">=") additive )*
    additive        := multiplicative ( ("+" | "-") multiplicative )*
    multiplicative  := unary ( ("*" | "/") unary )*
    unary           := "-" primary | primary
    primary         := NUMBER | IDENTIFIER | "(" expression ")"

Every binary level is left-associative. The first syntax error aborts the
parse; there is no recovery.

Author: xwest
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple

from ..lexer.tokens import Token, TokenType, SourceLocation
from .ast_nodes import (
    Expression, NumberLiteral, Identifier, BinaryOp, BinaryOperator, SourceSpan
)
from .errors import (
    ParseError, create_unexpected_token_error, create_unexpected_eof_error,
    create_nesting_too_deep_error
)

logger = logging.getLogger(__name__)

# Deepest parenthesis nesting accepted by default
MAX_NESTING_DEPTH = 64


class Precedence(IntEnum):
    """Operator precedence levels, loosest first."""
    OR = 1              # ||
    AND = 2             # &&
    EQUALITY = 3        # ==, !=
    COMPARISON = 4      # <, >, <=, >=
    TERM = 5            # +, -
    FACTOR = 6          # *, /


# Operators accepted at each binary level, in match order
LEVEL_OPERATORS = {
    Precedence.OR: (TokenType.LOGICAL_OR,),
    Precedence.AND: (TokenType.LOGICAL_AND,),
    Precedence.EQUALITY: (TokenType.EQUAL, TokenType.NOT_EQUAL),
    Precedence.COMPARISON: (
        TokenType.LESS_THAN, TokenType.GREATER_THAN,
        TokenType.LESS_EQUAL, TokenType.GREATER_EQUAL,
    ),
    Precedence.TERM: (TokenType.PLUS, TokenType.MINUS),
    Precedence.FACTOR: (TokenType.MULTIPLY, TokenType.DIVIDE),
}


class Parser:
    """
    MiniLang expression parser.

    Consumes a token list produced by the lexer and builds a single
    expression tree. A Parser is single use: its cursor only moves forward.
    """

    def __init__(self, tokens: Sequence[Token], max_depth: int = MAX_NESTING_DEPTH):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Tokens from the lexer, without an EOF marker
            max_depth: Deepest parenthesis nesting to accept
        """
        self.tokens: List[Token] = list(tokens)
        self.current = 0
        self.depth = 0
        self.max_depth = max_depth

    def parse(self) -> Expression:
        """
        Parse the token list into an expression tree.

        Returns:
            Root node of the expression

        Raises:
            UnexpectedTokenError: If a token does not fit the grammar,
                including tokens left over after a complete expression
            UnexpectedEndOfInputError: If the tokens run out mid-expression
            NestingTooDeepError: If parentheses nest deeper than max_depth
        """
        try:
            try:
                expression = self._parse_expression()
            except RecursionError:
                # The interpreter stack ran out before max_depth was reached
                token = self._previous() if self._is_at_end() else self._peek()
                raise create_nesting_too_deep_error(token, self.depth) from None

            if not self._is_at_end():
                raise create_unexpected_token_error("end of input", self._peek())

        except ParseError as e:
            logger.debug("parse failed at token %d: %s", self.current, e.diagnostic.message)
            raise

        return expression

    # Grammar levels, loosest binding first

    def _parse_expression(self) -> Expression:
        return self._parse_logical_or()

    def _parse_logical_or(self) -> Expression:
        left = self._parse_logical_and()
        operator_token = self._match_any(LEVEL_OPERATORS[Precedence.OR])
        while operator_token is not None:
            left = self._fold(left, operator_token, self._parse_logical_and())
            operator_token = self._match_any(LEVEL_OPERATORS[Precedence.OR])
        return left

    def _parse_logical_and(self) -> Expression:
        left = self._parse_equality()
        operator_token = self._match_any(LEVEL_OPERATORS[Precedence.AND])
        while operator_token is not None:
            left = self._fold(left, operator_token, self._parse_equality())
            operator_token = self._match_any(LEVEL_OPERATORS[Precedence.AND])
        return left

    def _parse_equality(self) -> Expression:
        left = self._parse_comparison()
        operator_token = self._match_any(LEVEL_OPERATORS[Precedence.EQUALITY])
        while operator_token is not None:
            left = self._fold(left, operator_token, self._parse_comparison())
            operator_token = self._match_any(LEVEL_OPERATORS[Precedence.EQUALITY])
        return left

    def _parse_comparison(self) -> Expression:
        left = self._parse_additive()
        operator_token = self._match_any(LEVEL_OPERATORS[Precedence.COMPARISON])
        while operator_token is not None:
            left = self._fold(left, operator_token, self._parse_additive())
            operator_token = self._match_any(LEVEL_OPERATORS[Precedence.COMPARISON])
        return left

    def _parse_additive(self) -> Expression:
        left = self._parse_multiplicative()
        operator_token = self._match_any(LEVEL_OPERATORS[Precedence.TERM])
        while operator_token is not None:
            left = self._fold(left, operator_token, self._parse_multiplicative())
            operator_token = self._match_any(LEVEL_OPERATORS[Precedence.TERM])
        return left

    def _parse_multiplicative(self) -> Expression:
        left = self._parse_unary()
        operator_token = self._match_any(LEVEL_OPERATORS[Precedence.FACTOR])
        while operator_token is not None:
            left = self._fold(left, operator_token, self._parse_unary())
            operator_token = self._match_any(LEVEL_OPERATORS[Precedence.FACTOR])
        return left

    def _fold(self, left: Expression, operator_token: Token, right: Expression) -> BinaryOp:
        """Combine an operator chain so far with its next operand."""
        return BinaryOp(
            BinaryOperator.from_token_type(operator_token.type),
            left,
            right,
            self._join_spans(left, right)
        )

    def _parse_unary(self) -> Expression:
        """Parse an optional leading minus, desugared to `0.0 - operand`."""
        if self._check(TokenType.MINUS):
            minus_token = self._advance()
            operand = self._parse_primary()
            zero = NumberLiteral(0.0, self._token_span(minus_token))
            return BinaryOp(
                BinaryOperator.MINUS,
                zero,
                operand,
                self._join_spans(zero, operand)
            )

        return self._parse_primary()

    def _parse_primary(self) -> Expression:
        """Parse a number, an identifier or a parenthesized expression."""
        if self._is_at_end():
            raise create_unexpected_eof_error("expression", self._end_location())

        token = self._peek()

        if token.type == TokenType.NUMBER_LITERAL:
            self._advance()
            return NumberLiteral(token.value, self._token_span(token))

        if token.type == TokenType.IDENTIFIER:
            self._advance()
            return Identifier(token.value, self._token_span(token))

        if token.type == TokenType.LEFT_PAREN:
            return self._parse_grouping()

        raise create_unexpected_token_error("expression", token)

    def _parse_grouping(self) -> Expression:
        """Parse parenthesized expression. Parentheses leave no node behind."""
        left_paren = self._advance()

        if self.depth >= self.max_depth:
            raise create_nesting_too_deep_error(left_paren, self.max_depth)

        self.depth += 1
        expr = self._parse_expression()
        self.depth -= 1

        self._consume(TokenType.RIGHT_PAREN)

        return expr

    # Utility methods

    def _match_any(self, token_types: Tuple[TokenType, ...]) -> Optional[Token]:
        """Consume and return the current token if it has one of the given types."""
        for token_type in token_types:
            if self._check(token_type):
                return self._advance()
        return None

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self.current >= len(self.tokens)

    def _peek(self) -> Token:
        """Return current token without consuming."""
        return self.tokens[self.current]

    def _previous(self) -> Token:
        """Return previous token."""
        return self.tokens[self.current - 1]

    def _consume(self, token_type: TokenType) -> Token:
        """Consume token of expected type or raise error."""
        if self._check(token_type):
            return self._advance()

        if self._is_at_end():
            raise create_unexpected_eof_error(token_type, self._end_location())
        raise create_unexpected_token_error(token_type, self._peek())

    def _end_location(self) -> Optional[SourceLocation]:
        """Location of the last token, used for end-of-input errors."""
        if self.tokens:
            return self.tokens[-1].location
        return None

    @staticmethod
    def _token_span(token: Token) -> Optional[SourceSpan]:
        if token.location is None:
            return None
        return SourceSpan(token.location, token.location)

    @staticmethod
    def _join_spans(left: Expression, right: Expression) -> Optional[SourceSpan]:
        if left.span is None or right.span is None:
            return None
        return SourceSpan(left.span.start, right.span.end)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of try_parse: either a tree or the error that stopped the parse."""
    ast: Optional[Expression] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def has_errors(self) -> bool:
        return self.error is not None


def parse(tokens: Sequence[Token]) -> Expression:
    """
    Parse a token list into an expression tree.

    Raises:
        ParseError: UnexpectedTokenError or UnexpectedEndOfInputError
    """
    return Parser(tokens).parse()


def try_parse(tokens: Sequence[Token]) -> ParseResult:
    """Parse a token list, returning the tree or the error as a value."""
    try:
        return ParseResult(ast=parse(tokens))
    except ParseError as e:
        return ParseResult(error=e)


def parse_string(source: str, filename: str = "<string>", strict: bool = False) -> Expression:
    """
    Convenience function to parse a source string.

    Args:
        source: Expression source string
        filename: Filename for error reporting
        strict: Reject unrecognized characters instead of skipping them

    Returns:
        Expression AST

    Raises:
        LexerError: In strict mode, on an unrecognized character
        ParseError: If parsing fails
    """
    from ..lexer import tokenize

    tokens = tokenize(source, filename, strict=strict)
    return parse(tokens)


def parse_file(filepath: str, strict: bool = False) -> Expression:
    """
    Convenience function to parse a source file.

    Args:
        filepath: Path to source file
        strict: Reject unrecognized characters instead of skipping them

    Returns:
        Expression AST

    Raises:
        ParseError: If parsing fails
        IOError: If file cannot be read
    """
    from ..lexer import tokenize_file

    tokens = tokenize_file(filepath, strict=strict)
    return parse(tokens)
