# limbo

`limbo` runs Limbo scripts. Limbo is a small expression language. A script
declares variables, reassigns them, opens nested scopes, branches on
conditions, and ends by yielding one value.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Give the script's path on the command line:

```
limbo script.lb
```

If the script reaches a top-level `out` statement, its value is written to
standard output with no trailing newline. If the script has a compile error
or a runtime error, a coloured report goes to standard error and the command
exits with status 255. Run without an argument, the command does nothing and
exits with status 0.

## The language

```
var greeting = "hello"
var count = 3
count = count + 1

if count >= 4 { greeting = greeting + " world" } else { greeting = "too few" }

out greeting
```

This prints `hello world`.

- `var name = expr` declares a variable in the current scope.
- `name = expr` changes an existing variable, looked up through the
  enclosing scopes. Assigning to a name that has not been declared is a
  runtime error.
- `{ ... }` opens a new scope. A block may hold at most one `out`; a second
  one is a compile error. The first statement must follow the `{` on the
  same line.
- A block can also be used as an expression. Its value is the value of its
  `out` statement; a block expression without one is a runtime error.
- `if cond stmt else stmt` runs the statement chosen by the condition, which
  must be a number or a boolean. The `else` part is optional.
- `out expr` at the top level ends the script with the value of `expr`.
  An `out` inside a block statement or an `if` branch only ends that block
  or branch; its value is discarded.

Values are numbers, strings and the booleans `true` and `false`.

- Identifiers start with an ASCII letter and continue with letters, digits
  and `_`.
- Strings are written in single or double quotes; either quote closes the
  string. The escapes `\n`, `\t`, `\r` and `\\` are understood; any other
  escaped character stands for itself. An unterminated string is a compile
  error.
- Numbers are decimal. Each digit after the decimal point adds a tenth of
  its value, so `1.25` reads as `1.7`. A second decimal point is a compile
  error.

Operators, from lowest to highest precedence:

| Operators | Operands |
|-----------|----------|
| `&&` `\|\|` | numbers and booleans; both sides are always evaluated |
| `==` `!=` | two numbers or two strings |
| `<` `>` `<=` `>=` | numbers and booleans; a number against a boolean is `false` |
| `+` | two numbers, or a string followed by a number or a string (joined as text) |
| `-` `*` `/` | two numbers; dividing by zero gives an infinity or `NaN` |
| unary `-` | a number |
| unary `!` | a boolean |

Any other combination is a runtime error. Each binary operator groups to the
right, so `8 - 2 - 1` is read as `8 - (2 - 1)`.

## Using it from Python

```python
from limbo.tokenizer import tokenize_text
from limbo.parser import analyze
from limbo.interpreter import Interpreter

statements = analyze(tokenize_text("var x = 2\nout x * 21\n", "<example>"))
value, location = Interpreter(None).run(statements)
```

`Interpreter.run` returns a `(value, location)` pair for the first top-level
`out`, or `None` if there is none. Numbers come back as `float`.

- `limbo.tokenizer.tokenize(path)` reads a file into a
  `limbo.tokens.TokenStream`; `tokenize_text(text, path)` does the same for
  a string.
- `limbo.parser.analyze(tokens)` parses a stream into a list of statement
  nodes from `limbo.ast`.
- `limbo.interpreter.compute(statements, prev_env)` runs statements, prints
  the yielded value and returns it. `prev_env` may be a
  `limbo.environment.Environment` to use as the enclosing scope.
- `limbo.cli.run_file(path)` tokenizes, parses and runs one file.
- `limbo.values.format_value(value)` renders a value as the language prints
  it.

Compile errors are subclasses of `limbo.errors.CompileError`, and runtime
errors are subclasses of `limbo.errors.LimboRuntimeError`. Both derive from
`limbo.errors.LimboError`. `limbo.errors.format_report(error)` renders a
report in the same form the command line prints it.

## What it does not do

There is no interactive prompt and no way to print more than one value: a
script produces at most one result. There are no loops, functions or
comments.