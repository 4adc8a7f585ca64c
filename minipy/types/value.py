"""Runtime values for minipy.

Every datum the language manipulates is one of a closed set of variants:
Integer, Float, Char, Text, List, or the Empty sentinel. Each variant carries
a ``kind`` tag (ValueKind) so callers can match exhaustively, and a ``copy``
method that returns an independent deep copy.
"""

from __future__ import annotations

from typing import Union

from minipy.types.kinds import ValueKind
from minipy.types.empty import Empty, EmptyType
from minipy.types.list_store import ListStore


class Scalar:
    """Shared behaviour of the immutable-payload variants."""

    __slots__ = ("value",)
    kind: ValueKind

    def __init__(self, value):
        self.value = value

    def copy(self):
        return type(self)(self.value)

    def __eq__(self, other) -> bool:
        return type(other) is type(self) and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


INT_BITS = 64
_INT_SPAN = 1 << INT_BITS
_INT_HALF = 1 << (INT_BITS - 1)


def wrap_int64(value: int) -> int:
    """Reduce `value` to signed 64-bit two's complement."""
    return ((value + _INT_HALF) % _INT_SPAN) - _INT_HALF


class Integer(Scalar):
    __slots__ = ()
    kind = ValueKind.INTEGER

    def __init__(self, value: int):
        super().__init__(wrap_int64(int(value)))


class Float(Scalar):
    __slots__ = ()
    kind = ValueKind.FLOAT

    def __init__(self, value: float):
        super().__init__(float(value))


class Char(Scalar):
    __slots__ = ()
    kind = ValueKind.CHAR

    def __init__(self, value: str):
        if len(value) != 1:
            raise ValueError(f"Char needs exactly one character, got {value!r}")
        super().__init__(value)


class Text(Scalar):
    __slots__ = ()
    kind = ValueKind.TEXT

    def __init__(self, value: str):
        super().__init__(str(value))


class List:
    """A list value; exclusively owns its ListStore."""

    __slots__ = ("store",)
    kind = ValueKind.LIST

    def __init__(self, store: ListStore | None = None):
        self.store: ListStore = store if store is not None else ListStore()

    def copy(self) -> List:
        return List(self.store.deep_copy())

    def __eq__(self, other) -> bool:
        return isinstance(other, List) and self.store == other.store

    __hash__ = None

    def __repr__(self) -> str:
        return f"List({list(self.store)!r})"


Value = Union[Integer, Float, Char, Text, List, EmptyType]

__all__ = [
    "Value",
    "ValueKind",
    "Integer",
    "Float",
    "Char",
    "Text",
    "List",
    "Empty",
    "EmptyType",
    "ListStore",
]
