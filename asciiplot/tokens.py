"""Token types produced by the tokenizer and consumed by the RPN converter."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MAX_VALUE_LENGTH = 31


class TokenType(enum.Enum):
    """Kind of a single element of an expression."""

    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    VARIABLE = enum.auto()
    FUNCTION = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()


@dataclass(frozen=True)
class Token:
    """One element of an expression.

    ``value`` holds the text of a number or the name of a function;
    ``op`` holds the operator character (``~`` marks unary minus).
    """

    type: TokenType
    value: str = ""
    op: str = ""

    @classmethod
    def number(cls, text: str) -> Token:
        """A numeric literal; its text is kept to at most 31 characters."""
        return cls(TokenType.NUMBER, value=text[:MAX_VALUE_LENGTH])

    @classmethod
    def operator(cls, op: str) -> Token:
        """An operator such as ``+``, ``-``, ``*``, ``/``, ``^`` or unary ``~``."""
        return cls(TokenType.OPERATOR, op=op)

    @classmethod
    def function(cls, name: str) -> Token:
        """A call of a named function such as ``sin``."""
        return cls(TokenType.FUNCTION, value=name[:MAX_VALUE_LENGTH])

    @classmethod
    def variable(cls) -> Token:
        """The variable ``x``."""
        return cls(TokenType.VARIABLE)

    @classmethod
    def lparen(cls) -> Token:
        """An opening parenthesis."""
        return cls(TokenType.LPAREN)

    @classmethod
    def rparen(cls) -> Token:
        """A closing parenthesis."""
        return cls(TokenType.RPAREN)