# echoscript

Building blocks for running EchoScript, a small scripting language with
`let` bindings, functions with parameters and `return`, `print`/`println`,
arithmetic over integers, floats, booleans and characters, and string
concatenation.

The package has three modules:

- `echoscript.lexer` turns source text into tokens.
- `echoscript.value` holds the runtime value model (`Value`, `Char`) and
  `EchoScriptError`, the error raised when a program cannot be scanned or run.
- `echoscript.nodes` holds the syntax tree: expressions and statements that
  evaluate and execute themselves.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Tokenizing

```python
from echoscript.lexer import TokenType, tokenize

tokens = tokenize('let x = 3.5; ## a comment\nprint(x + 1);')
for token in tokens:
    print(token.type, repr(token.lexeme), token.line)
```

`tokenize(source)` and `Lexer(source).tokenize()` return a list of `Token`
objects, each with a `type` (a `TokenType`), a `lexeme` and a `line`. The
list always ends with a `TokenType.END_OF_FILE` token.

- Keywords are `let`, `func`, `return`, `print`, `println`, `true` and
  `false`; other words of letters, digits and `_` are `IDENTIFIER` tokens.
- Digits give `NUMBER` tokens; digits with a fractional part (`3.5`) give
  `FLOAT` tokens.
- `"text"` gives a `STRING` token whose lexeme is the text without quotes.
  A string with no closing quote is dropped without a token.
- `'a'` gives a `CHAR` token; `'''` gives a `CHAR` token holding a single
  quote. A malformed character literal raises `LexError`, which carries the
  `line` it was found on.
- Comments start with `##` and run to the end of the line. A lone `#` or any
  other unrecognised character becomes a `TokenType.UNKNOWN` token.

## Values

`Value` wraps one of: an `int`, a `float`, a `str`, a `bool` or a `Char` (a
single character kept apart from one-character strings). Anything else
raises `TypeError`. Two values are equal only when both the kind and the
contents match, so `Value(1) != Value(True)`.

`Value.to_string()` renders a value the way the language prints it:
booleans as `true`/`false`, whole floats with a trailing `.0` (`Value(2.0)`
gives `"2.0"`), other floats without trailing zeros. The `is_*` methods tell
the kinds apart, and the `as_int`, `as_bool`, `as_char`, `as_double` and
`as_number` accessors raise `EchoScriptError` when the value holds the wrong
kind (`as_number` accepts integers, booleans and characters).

## Evaluating trees

Expressions provide `evaluate(env, funcs)` and statements provide
`execute(env, funcs)`, where `env` is a dict of variable names to `Value`
and `funcs` is a dict of function names to `FuncStmt`.

```python
from echoscript.nodes import (
    BinaryExpr, CallExpr, FuncStmt, LetStmt, LiteralExpr,
    PrintStmt, ReturnStmt, StringExpr, VariableExpr,
)

program = [
    FuncStmt("add", ["a", "b"], [
        ReturnStmt(BinaryExpr(VariableExpr("a"), "+", VariableExpr("b"))),
    ]),
    LetStmt("x", CallExpr("add", [LiteralExpr(2), LiteralExpr(3)])),
    PrintStmt(BinaryExpr(StringExpr("x = "), "+", VariableExpr("x"))),
]

env, funcs = {}, {}
for stmt in program:
    stmt.execute(env, funcs)   # prints "x = 5"
```

- Executing a `FuncStmt` registers it in `funcs`. A `CallExpr` evaluates its
  arguments and calls the function with a copy of the caller's variables
  plus its bound parameters; assignments inside the call do not leak out.
  A `ReturnStmt` ends the call with a value; a body that finishes without
  one gives `Value(0)`. Calling with fewer arguments than parameters raises
  `EchoScriptError`.
- `BinaryExpr` supports `+`, `-`, `*` and `/`. If either side is a string,
  the result is the concatenation of both sides' text, whatever the
  operator. Otherwise booleans count as 0/1 and characters as their code
  points; arithmetic on integer-like operands stays integral, and `/` gives
  an integer only when the division is exact (`7 / 2` gives `3.5`).
- `PrintStmt` and `PrintlnStmt` both write the value's text and a newline to
  standard output. `ExpressionStmt` evaluates an expression and drops the
  result.
- Division by zero, undefined variables, undefined functions and unknown
  operators raise `EchoScriptError`.

## What this package does not do

There is no parser: tokens from `echoscript.lexer` are not turned into a
syntax tree for you, so trees are built from the `echoscript.nodes` classes
directly. There is also no command-line program for running `.es` script
files.