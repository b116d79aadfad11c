"""Conversion of infix tokens to reverse Polish notation and its evaluation."""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable, Sequence

from .tokens import Token, TokenType

MAX_DEPTH = 128
"""Capacity of the operator stack, the output list and the value stack."""

DIVISION_EPSILON = 1e-6
TAN_LIMIT = 1e6
COTAN_EPSILON = 1e-6

_NUMBER_PREFIX = re.compile(r"[0-9]*\.?[0-9]*")


class ParseError(ValueError):
    """The token sequence has unbalanced parentheses or is too large."""


class EvaluationError(ValueError):
    """The RPN sequence cannot be evaluated."""


def precedence(op: str) -> int:
    """Binding strength of an operator; higher binds tighter."""
    if op == "~":
        return 3
    if op in ("*", "/"):
        return 2
    if op in ("+", "-"):
        return 1
    return 0


def _push(stack: list, item, what: str) -> None:
    if len(stack) >= MAX_DEPTH:
        raise ParseError(f"{what} holds more than {MAX_DEPTH} tokens")
    stack.append(item)


def _pops_before(top: Token, incoming: Token) -> bool:
    if top.type is TokenType.FUNCTION:
        return True
    if top.type is not TokenType.OPERATOR:
        return False
    # Every operator is left-associative, so equal precedence pops too.
    return precedence(top.op) >= precedence(incoming.op)


def to_rpn(tokens: Iterable[Token]) -> list[Token]:
    """Reorder infix ``tokens`` into RPN with the shunting-yard algorithm.

    Raises :class:`ParseError` for unbalanced parentheses or when the
    operator stack or output would exceed :data:`MAX_DEPTH` tokens.
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        kind = token.type
        if kind in (TokenType.NUMBER, TokenType.VARIABLE):
            _push(output, token, "output")
        elif kind in (TokenType.FUNCTION, TokenType.LPAREN):
            _push(stack, token, "operator stack")
        elif kind is TokenType.OPERATOR:
            while stack and _pops_before(stack[-1], token):
                _push(output, stack.pop(), "output")
            _push(stack, token, "operator stack")
        elif kind is TokenType.RPAREN:
            while True:
                if not stack:
                    raise ParseError("unmatched ')'")
                top = stack.pop()
                if top.type is TokenType.LPAREN:
                    break
                _push(output, top, "output")
            if stack and stack[-1].type is TokenType.FUNCTION:
                _push(output, stack.pop(), "output")

    while stack:
        top = stack.pop()
        if top.type in (TokenType.LPAREN, TokenType.RPAREN):
            raise ParseError("unmatched '('")
        _push(output, top, "output")

    return output


def _parse_number(text: str) -> float:
    """Read the longest numeric prefix of ``text``; 0.0 if there is none."""
    prefix = _NUMBER_PREFIX.match(text).group()
    if prefix in ("", "."):
        return 0.0
    return float(prefix)


def _guarded(func: Callable[[float], float], arg: float) -> float:
    try:
        return func(arg)
    except (ValueError, OverflowError):
        return math.nan


def _tan(arg: float) -> float:
    value = _guarded(math.tan, arg)
    return value if abs(value) < TAN_LIMIT else math.nan


def _ctg(arg: float) -> float:
    value = _guarded(math.tan, arg)
    return 1.0 / value if abs(value) > COTAN_EPSILON else math.nan


def _sqrt(arg: float) -> float:
    return math.sqrt(arg) if arg >= 0 else math.nan


def _ln(arg: float) -> float:
    return math.log(arg) if arg > 0 else math.nan


_FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sin": lambda arg: _guarded(math.sin, arg),
    "cos": lambda arg: _guarded(math.cos, arg),
    "tan": _tan,
    "ctg": _ctg,
    "sqrt": _sqrt,
    "ln": _ln,
}


def _divide(a: float, b: float) -> float:
    return a / b if abs(b) > DIVISION_EPSILON else math.nan


_BINARY: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
}


def _pop(stack: list[float]) -> float:
    if not stack:
        raise EvaluationError("missing operand")
    return stack.pop()


def _push_value(stack: list[float], value: float) -> None:
    if len(stack) >= MAX_DEPTH:
        raise EvaluationError(f"value stack holds more than {MAX_DEPTH} values")
    stack.append(value)


def evaluate(rpn: Sequence[Token], x: float) -> float:
    """Evaluate an RPN token sequence with the variable set to ``x``.

    Undefined points (division by almost zero, ``sqrt`` of a negative
    number and the like) give NaN.  Raises :class:`EvaluationError` for a
    malformed sequence, an unknown operator or function, or a literal that
    does not read as a number.
    """
    stack: list[float] = []

    for token in rpn:
        kind = token.type
        if kind is TokenType.VARIABLE:
            _push_value(stack, x)
        elif kind is TokenType.NUMBER:
            value = _parse_number(token.value)
            if value == 0.0 and token.value != "0":
                raise EvaluationError(f"invalid number {token.value!r}")
            _push_value(stack, value)
        elif kind is TokenType.OPERATOR:
            if token.op == "~":
                _push_value(stack, -_pop(stack))
                continue
            b = _pop(stack)
            a = _pop(stack)
            operation = _BINARY.get(token.op)
            if operation is None:
                raise EvaluationError(f"unsupported operator {token.op!r}")
            _push_value(stack, operation(a, b))
        elif kind is TokenType.FUNCTION:
            arg = _pop(stack)
            function = _FUNCTIONS.get(token.value)
            if function is None:
                raise EvaluationError(f"unknown function {token.value!r}")
            _push_value(stack, function(arg))

    if len(stack) != 1:
        raise EvaluationError("expression does not reduce to a single value")
    return stack[0]