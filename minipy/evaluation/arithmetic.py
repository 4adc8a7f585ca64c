from __future__ import annotations
from typing import Callable

from minipy.errors import MiniPySyntaxError, MiniPyTypeError, MiniPyValueError
from minipy.types.value import Value, Integer, Float


# -------------------------------
# Integer arithmetic
# -------------------------------
def int_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise MiniPyValueError("Division by zero.")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


INT_OPS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": int_div,
}


# -------------------------------
# Float arithmetic
# -------------------------------
def float_div(a: float, b: float) -> float:
    if b == 0.0:
        raise MiniPyValueError("Division by zero.")
    return a / b


FLOAT_OPS: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": float_div,
}


def apply_operator(left: Value, op: str, right: Value) -> Value:
    """Apply a binary operator to two operands of the same numeric variant.

    There is no coercion: Integer with Float is a type error, as is any
    non-numeric operand.
    """
    if op not in INT_OPS:
        raise MiniPySyntaxError(f"Unknown operator {op!r}.")
    match (left, right):
        case (Integer(), Integer()):
            return Integer(INT_OPS[op](left.value, right.value))
        case (Float(), Float()):
            return Float(FLOAT_OPS[op](left.value, right.value))
    raise MiniPyTypeError(
        f"Mismatched or unsupported types for arithmetic operation: "
        f"{left.kind} {op} {right.kind}."
    )
