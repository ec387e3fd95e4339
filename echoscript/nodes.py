"""Syntax tree nodes of EchoScript and how they run."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple, Union

from echoscript.value import Char, Data, EchoScriptError, Value

Env = Dict[str, Value]
Funcs = Dict[str, "FuncStmt"]


class ReturnSignal(Exception):
    """Carries a returned value out of a function body."""

    def __init__(self, value: Value) -> None:
        super().__init__("Function return exception")
        self.value = value


class Expression(ABC):
    """A node that produces a value."""

    @abstractmethod
    def evaluate(self, env: Env, funcs: Funcs) -> Value:
        """Compute the value of this expression."""


class Statement(ABC):
    """A node that is run for its effect."""

    @abstractmethod
    def execute(self, env: Env, funcs: Funcs) -> None:
        """Run this statement."""


@dataclass
class ExpressionStmt(Statement):
    """An expression evaluated for its side effects; the value is dropped."""

    expr: Expression

    def execute(self, env: Env, funcs: Funcs) -> None:
        self.expr.evaluate(env, funcs)


@dataclass
class VariableExpr(Expression):
    """A reference to a variable by name."""

    name: str

    def evaluate(self, env: Env, funcs: Funcs) -> Value:
        try:
            return env[self.name]
        except KeyError:
            raise EchoScriptError(f"Undefined variable: {self.name}") from None


@dataclass
class LiteralExpr(Expression):
    """A constant value."""

    value: Union[Value, Data]

    def __post_init__(self) -> None:
        if not isinstance(self.value, Value):
            self.value = Value(self.value)

    def evaluate(self, env: Env, funcs: Funcs) -> Value:
        return self.value  # type: ignore[return-value]


@dataclass
class LetStmt(Statement):
    """Binds the value of an expression to a name."""

    name: str
    value: Expression

    def execute(self, env: Env, funcs: Funcs) -> None:
        env[self.name] = self.value.evaluate(env, funcs)


@dataclass
class PrintStmt(Statement):
    """Writes the value of an expression followed by a newline."""

    value: Expression

    def execute(self, env: Env, funcs: Funcs) -> None:
        print(self.value.evaluate(env, funcs).to_string())


@dataclass
class PrintlnStmt(Statement):
    """Writes the value of an expression followed by a newline."""

    value: Expression

    def execute(self, env: Env, funcs: Funcs) -> None:
        print(self.value.evaluate(env, funcs).to_string())


def _numeric(value: Value) -> Tuple[Union[int, float], bool]:
    """Return the operand as a number and whether it counts as an integer."""
    data = value.data
    if isinstance(data, bool):
        return (1 if data else 0), True
    if isinstance(data, Char):
        return data.code, True
    if isinstance(data, int):
        return data, True
    if isinstance(data, float):
        return data, False
    raise EchoScriptError("Invalid operand type for arithmetic operation")


def _divide(left: Union[int, float], right: Union[int, float], both_int: bool) -> Value:
    if right == 0:
        raise EchoScriptError("Division by zero")
    result = left / right
    if both_int and math.isfinite(result) and math.floor(result) == result:
        return Value(int(result))
    return Value(float(result))


@dataclass
class BinaryExpr(Expression):
    """An arithmetic operation, or concatenation when a string is involved."""

    left: Expression
    op: str
    right: Expression

    def evaluate(self, env: Env, funcs: Funcs) -> Value:
        lhs = self.left.evaluate(env, funcs)
        rhs = self.right.evaluate(env, funcs)

        if lhs.is_string() or rhs.is_string():
            return Value(lhs.to_string() + rhs.to_string())

        l_num, l_int = _numeric(lhs)
        r_num, r_int = _numeric(rhs)
        both_int = l_int and r_int

        if self.op == "/":
            return _divide(l_num, r_num, both_int)
        if self.op == "+":
            result = l_num + r_num
        elif self.op == "-":
            result = l_num - r_num
        elif self.op == "*":
            result = l_num * r_num
        else:
            raise EchoScriptError("Unknown operator")
        return Value(int(result)) if both_int else Value(float(result))


@dataclass
class StringExpr(Expression):
    """A string literal."""

    value: str

    def evaluate(self, env: Env, funcs: Funcs) -> Value:
        return Value(self.value)


@dataclass(eq=False)
class FuncStmt(Statement):
    """A function definition; running it registers the function."""

    name: str
    params: List[str] = field(default_factory=list)
    body: List[Statement] = field(default_factory=list)

    def execute(self, env: Env, funcs: Funcs) -> None:
        funcs[self.name] = self

    def call(self, env: Env, funcs: Funcs, args: Sequence[Value]) -> Value:
        """Run the body in a copy of ``env`` with the parameters bound."""
        if len(args) < len(self.params):
            raise EchoScriptError(
                f"Function {self.name} expects {len(self.params)} arguments, "
                f"got {len(args)}"
            )
        local_env = dict(env)
        local_env.update(zip(self.params, args))
        try:
            for stmt in self.body:
                stmt.execute(local_env, funcs)
        except ReturnSignal as ret:
            return ret.value
        return Value()


@dataclass
class CallExpr(Expression):
    """A call of a named function."""

    name: str
    arguments: List[Expression] = field(default_factory=list)

    def evaluate(self, env: Env, funcs: Funcs) -> Value:
        func = funcs.get(self.name)
        if func is None:
            raise EchoScriptError(f"Function not defined: {self.name}")
        args = [expr.evaluate(env, funcs) for expr in self.arguments]
        return func.call(env, funcs, args)


@dataclass
class ReturnStmt(Statement):
    """Leaves the enclosing function with a value."""

    expr: Expression

    def execute(self, env: Env, funcs: Funcs) -> None:
        raise ReturnSignal(self.expr.evaluate(env, funcs))


@dataclass
class BooleanExpr(Expression):
    """A boolean literal."""

    value: bool

    def evaluate(self, env: Env, funcs: Funcs) -> Value:
        return Value(self.value)


@dataclass
class CharExpr(Expression):
    """A character literal."""

    value: Union[Char, str]

    def __post_init__(self) -> None:
        if not isinstance(self.value, Char):
            self.value = Char(self.value)

    def evaluate(self, env: Env, funcs: Funcs) -> Value:
        return Value(self.value)