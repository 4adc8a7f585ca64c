"""Canonical text form of minipy values, as shown by ``print(name)``."""

from __future__ import annotations

from io import StringIO

from minipy.types.value import Value, Integer, Float, Char, Text, List, EmptyType


def format_float(x: float) -> str:
    """Five significant digits, general format (C's ``%.5g``)."""
    return format(x, ".5g")


def _write(value: Value, buffer: StringIO) -> None:
    match value:
        case Integer():
            buffer.write(str(value.value))
        case Float():
            buffer.write(format_float(value.value))
        case Char():
            buffer.write(f"'{value.value}'")
        case Text():
            buffer.write(f'"{value.value}"')
        case List():
            buffer.write("[")
            first = True
            for item in value.store:
                if not first:
                    buffer.write(", ")
                _write(item, buffer)
                first = False
            buffer.write("]")
        case EmptyType():
            buffer.write("None")
        case _:
            raise TypeError(f"Not a minipy value: {value!r}")


def render(value: Value) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
