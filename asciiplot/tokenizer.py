"""Splitting an expression string into tokens."""

from __future__ import annotations

import re

from .tokens import Token

FUNCTIONS = ("sin", "cos", "tan", "ctg", "sqrt", "ln")
OPERATORS = "+-*/^"

_NUMBER = re.compile(r"[0-9.]{1,63}")
_UNARY_AFTER = "(" + OPERATORS


class TokenizeError(ValueError):
    """The expression holds a character that cannot start any token."""

    def __init__(self, expr: str, position: int | None = None) -> None:
        if position is None:
            message = "empty expression"
        else:
            message = f"unexpected character {expr[position]!r} at position {position}"
        super().__init__(message)
        self.expr = expr
        self.position = position


def match_function(text: str) -> str | None:
    """Return the name of the function that ``text`` starts with, if any."""
    return next((name for name in FUNCTIONS if text.startswith(name)), None)


def _is_unary_minus(expr: str, pos: int) -> bool:
    before = expr[:pos].rstrip(" ")
    return not before or before[-1] in _UNARY_AFTER


def _operator_or_paren(expr: str, pos: int) -> Token | None:
    char = expr[pos]
    if char == "-":
        return Token.operator("~" if _is_unary_minus(expr, pos) else "-")
    if char in OPERATORS:
        return Token.operator(char)
    if char == "(":
        return Token.lparen()
    if char == ")":
        return Token.rparen()
    return None


def tokenize(expr: str) -> list[Token]:
    """Split ``expr`` into tokens.

    A ``*`` is inserted wherever a number, function name or ``x`` is
    directly followed by ``x`` (``2x`` reads as ``2*x``).  Raises
    :class:`TokenizeError` for an empty expression or an unknown character.
    """
    if not expr:
        raise TokenizeError(expr)

    tokens: list[Token] = []
    pos = 0
    while pos < len(expr):
        if expr[pos] == " ":
            pos += 1
            continue

        parsed = False
        number = _NUMBER.match(expr, pos)
        if number:
            tokens.append(Token.number(number.group()))
            pos = number.end()
            parsed = True
        else:
            name = match_function(expr[pos:])
            if name is not None:
                tokens.append(Token.function(name))
                pos += len(name)
                parsed = True
            elif expr[pos] == "x":
                tokens.append(Token.variable())
                pos += 1
                parsed = True

        if pos < len(expr) and expr[pos] == "x":
            tokens.append(Token.operator("*"))

        if not parsed:
            token = _operator_or_paren(expr, pos)
            if token is None:
                raise TokenizeError(expr, pos)
            tokens.append(token)
            pos += 1

    return tokens