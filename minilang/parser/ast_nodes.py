"""
Abstract Syntax Tree node definitions for MiniLang.

Nodes are immutable and compare structurally: two trees are equal when
they have the same shape, operators and leaf values. Source spans ride
along for diagnostics but take no part in equality.

Author: xwest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..lexer.tokens import SourceLocation, TokenType


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    NUMBER_LITERAL = "NumberLiteral"
    IDENTIFIER = "Identifier"
    BINARY_OP = "BinaryOp"


class BinaryOperator(Enum):
    """Binary operators, valued by their source symbol."""
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN_OR_EQUAL = ">="
    AND = "&&"
    OR = "||"

    @classmethod
    def from_token_type(cls, token_type: TokenType) -> "BinaryOperator":
        """Map an operator token type to its binary operator."""
        try:
            return _TOKEN_OPERATORS[token_type]
        except KeyError:
            raise ValueError(f"{token_type.name} is not a binary operator") from None

    def __str__(self) -> str:
        return self.value


_TOKEN_OPERATORS: Dict[TokenType, BinaryOperator] = {
    TokenType.PLUS: BinaryOperator.PLUS,
    TokenType.MINUS: BinaryOperator.MINUS,
    TokenType.MULTIPLY: BinaryOperator.MULTIPLY,
    TokenType.DIVIDE: BinaryOperator.DIVIDE,
    TokenType.EQUAL: BinaryOperator.EQUAL,
    TokenType.NOT_EQUAL: BinaryOperator.NOT_EQUAL,
    TokenType.LESS_THAN: BinaryOperator.LESS_THAN,
    TokenType.GREATER_THAN: BinaryOperator.GREATER_THAN,
    TokenType.LESS_EQUAL: BinaryOperator.LESS_THAN_OR_EQUAL,
    TokenType.GREATER_EQUAL: BinaryOperator.GREATER_THAN_OR_EQUAL,
    TokenType.LOGICAL_AND: BinaryOperator.AND,
    TokenType.LOGICAL_OR: BinaryOperator.OR,
}


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    def visit(self, node: 'Expression') -> Any:
        """Visit a node by dispatching on its type."""
        return node.accept(self)

    @abstractmethod
    def visit_number_literal(self, node: 'NumberLiteral') -> Any:
        pass

    @abstractmethod
    def visit_identifier(self, node: 'Identifier') -> Any:
        pass

    @abstractmethod
    def visit_binary_op(self, node: 'BinaryOp') -> Any:
        pass


class Expression(ABC):
    """Base class for all expression nodes."""

    @property
    @abstractmethod
    def node_type(self) -> ASTNodeType:
        pass

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get all child nodes."""
        pass


@dataclass(frozen=True)
class NumberLiteral(Expression):
    """Numeric literal."""
    value: float
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    @property
    def node_type(self) -> ASTNodeType:
        return ASTNodeType.NUMBER_LITERAL

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_number_literal(self)

    def children(self) -> List[Expression]:
        return []

    def __str__(self) -> str:
        if float(self.value).is_integer():
            return str(int(self.value))
        return repr(float(self.value))


@dataclass(frozen=True)
class Identifier(Expression):
    """Identifier expression."""
    name: str
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    @property
    def node_type(self) -> ASTNodeType:
        return ASTNodeType.IDENTIFIER

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_identifier(self)

    def children(self) -> List[Expression]:
        return []

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class BinaryOp(Expression):
    """Binary operation expression. Owns both operands."""
    operator: BinaryOperator
    left: Expression
    right: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    @property
    def node_type(self) -> ASTNodeType:
        return ASTNodeType.BINARY_OP

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_binary_op(self)

    def children(self) -> List[Expression]:
        return [self.left, self.right]

    def __str__(self) -> str:
        return f"({self.operator.value} {self.left} {self.right})"
