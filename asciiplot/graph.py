"""Plotting an RPN expression as ASCII art."""

from __future__ import annotations

import math
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from .rpn import EvaluationError, evaluate
from .tokens import Token

HEIGHT = 25
WIDTH = 80
X_START = 0.0
X_END = 4.0 * math.pi
Y_MIN = -1.0
Y_MAX = 1.0

BACKGROUND = "."
POINT = "*"


def sample(rpn: Sequence[Token]) -> list[float | None]:
    """Evaluate ``rpn`` at each of the ``WIDTH`` columns across [0, 4π].

    A column holds ``None`` where the expression cannot be evaluated, is
    NaN, or lies outside [-1, 1].
    """
    step = (X_END - X_START) / (WIDTH - 1)
    values: list[float | None] = []
    for col in range(WIDTH):
        x = X_START + col * step
        try:
            y = evaluate(rpn, x)
        except EvaluationError:
            values.append(None)
            continue
        values.append(y if not math.isnan(y) and Y_MIN <= y <= Y_MAX else None)
    return values


def _row_of(y: float) -> int:
    return int(12.0 - y * 12.0 + 0.5)


def render(rpn: Sequence[Token]) -> str:
    """Return the plot as ``HEIGHT`` lines of ``WIDTH`` characters, each ending in a newline."""
    screen = [[BACKGROUND] * WIDTH for _ in range(HEIGHT)]
    for col, y in enumerate(sample(rpn)):
        if y is None:
            continue
        row = _row_of(y)
        if 0 <= row < HEIGHT:
            screen[row][col] = POINT
    return "".join("".join(line) + "\n" for line in screen)


def draw_graph(rpn: Sequence[Token], stream: TextIO | None = None) -> None:
    """Write the plot to ``stream`` (standard output by default)."""
    out = sys.stdout if stream is None else stream
    out.write(render(rpn))
    out.flush()


def save_graph(rpn: Sequence[Token], path: str | os.PathLike[str]) -> None:
    """Write the plot to the text file at ``path``; raises :class:`OSError` on failure."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(render(rpn))