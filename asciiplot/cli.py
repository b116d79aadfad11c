"""Interactive command that reads expressions and plots them."""

from __future__ import annotations

import argparse
import sys

from .graph import draw_graph, save_graph
from .rpn import EvaluationError, ParseError, evaluate, to_rpn
from .tokenizer import TokenizeError, tokenize

DEFAULT_FILENAME = "graph.txt"


def _prompt(text: str) -> str | None:
    """Show ``text`` and read one line without its newline; ``None`` at end of input."""
    print(text, end="", flush=True)
    line = sys.stdin.readline()
    if not line:
        return None
    return line.split("\n", 1)[0]


def _offer_save(rpn) -> None:
    answer = _prompt("Сохранить график в файл? (y/n): ")
    if not answer or answer[0] not in "yY":
        return
    filename = _prompt(f"Имя файла (по умолчанию {DEFAULT_FILENAME}): ")
    if not filename:
        filename = DEFAULT_FILENAME
    try:
        save_graph(rpn, filename)
    except OSError:
        print("Ошибка при сохранении файла!")
    else:
        print(f"График сохранён в файл: {filename}")


def _plot(expr: str) -> bool:
    try:
        tokens = tokenize(expr)
    except TokenizeError:
        print(
            "Ошибка: лексический разбор не удался "
            "(неизвестный символ, синтаксис или функция).",
            file=sys.stderr,
        )
        return False
    try:
        rpn = to_rpn(tokens)
    except ParseError:
        print(
            "Ошибка: несбалансированные скобки или синтаксическая ошибка.",
            file=sys.stderr,
        )
        return False
    try:
        evaluate(rpn, 0.0)
    except EvaluationError:
        print(
            "Ошибка: вычисление не удалось (например, деление на 0, "
            "некорректная функция или выражение).",
            file=sys.stderr,
        )
        return False
    draw_graph(rpn, sys.stdout)
    _offer_save(rpn)
    return True


def main(argv: list[str] | None = None) -> int:
    """Run the interactive plotter until ``exit``, ``quit`` or end of input."""
    parser = argparse.ArgumentParser(
        prog="asciiplot", description="Plot expressions of x as ASCII art."
    )
    parser.parse_args(argv)

    print("ASCII Graph Plotter\nВведите выражение (или 'exit' для выхода):")
    while True:
        expr = _prompt("> ")
        if expr is None:
            print("Ошибка: не удалось прочитать ввод.", file=sys.stderr)
            break
        if expr in ("exit", "quit"):
            print("Выход.")
            break
        if not expr:
            continue
        if not _plot(expr):
            print("n/a")
    return 0


if __name__ == "__main__":
    sys.exit(main())