# asciiplot

asciiplot draws a function of `x` as ASCII art in your terminal.

The plot is 80 columns wide and 25 rows high. `x` runs from 0 to 4π, and `y` is shown between -1 and 1, with `y = 0` on the middle row. Points that can be computed are drawn with `*`. All other cells are drawn with `.`. A column stays empty if its value cannot be computed, is not a number, or falls outside [-1, 1].

## Installation

```
pip install .
```

## Interactive use

```
asciiplot
```

Type an expression at the `>` prompt. asciiplot checks the expression at `x = 0`, draws the graph, and then asks whether to save it to a text file. If you answer `y` or `Y` and give no file name, it uses `graph.txt`.

To leave, type `exit` or `quit`, or end the input. An empty line is ignored. If the input cannot be tokenized, has unbalanced parentheses, or cannot be evaluated, asciiplot prints an error on standard error and `n/a` on standard output.

`asciiplot --help` shows a short usage message. The command takes no other options.

Example expressions:

```
sin(x)
cos(2x)
-sin(x) * cos(x)
sqrt(x) / 4
ln(x) / 3
```

### Supported syntax

- The variable `x`.
- Numbers made of digits and `.`, such as `2` or `0.5`. Write zero as `0`: a literal that reads as zero in any other form, such as `0.0`, is rejected when it is evaluated.
- The operators `+ - * /`. Unary minus binds tighter than any other operator, and all binary operators are left-associative. `^` is accepted by the tokenizer, but an expression that uses it cannot be evaluated.
- Implicit multiplication when a number or `x` is directly followed by `x`. For example, `2x` means `2*x`.
- The functions `sin`, `cos`, `tan`, `ctg`, `sqrt` and `ln`.
- Parentheses and spaces.

Some points are undefined: division by a value within 1e-6 of zero, `sqrt` of a negative number, `ln` of a non-positive number, `tan` at or beyond ±1e6, and `ctg` where the tangent is near zero. These points evaluate to NaN and are left out of the plot. They are not treated as errors.

## Library use

```python
import io

from asciiplot.tokenizer import tokenize
from asciiplot.rpn import to_rpn, evaluate
from asciiplot.graph import sample, render, draw_graph, save_graph

rpn = to_rpn(tokenize("sin(x)"))
print(evaluate(rpn, 0.0))   # 0.0
values = sample(rpn)        # 80 floats, None where nothing is plotted
text = render(rpn)          # the 25-line plot as one string
draw_graph(rpn)             # writes the plot to standard output
draw_graph(rpn, io.StringIO())
save_graph(rpn, "sine.txt")
```

The modules are:

- `asciiplot.tokens`: `TokenType` and the frozen `Token` dataclass, with the constructors `Token.number`, `Token.operator`, `Token.function`, `Token.variable`, `Token.lparen` and `Token.rparen`.
- `asciiplot.tokenizer`: `tokenize(expr)` and `match_function(text)`. `tokenize` raises `TokenizeError` for an empty expression or an unknown character.
- `asciiplot.rpn`: `to_rpn(tokens)` uses the shunting-yard algorithm and raises `ParseError` for unbalanced parentheses or for more than 128 tokens on a stack. `evaluate(rpn, x)` raises `EvaluationError` for a malformed sequence, an unsupported operator or an invalid number. `precedence(op)` gives an operator's binding strength.
- `asciiplot.graph`: `sample`, `render`, `draw_graph` and `save_graph`. `save_graph` raises `OSError` if the file cannot be written.
- `asciiplot.cli`: `main()`, the interactive command.

## Limitations

The plot range and size are fixed: x runs over [0, 4π], y over [-1, 1], on an 80×25 grid. The command only works interactively. It cannot take an expression or an output file on its command line. Exponentiation is not evaluated.

## Running the tests

```
pip install ".[test]"
pytest
```