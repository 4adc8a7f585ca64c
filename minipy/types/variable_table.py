"""Variable storage for a minipy session.

The VariableTable maps validated names to Variables. Each Variable owns its
value outright: storing replaces (and so releases) whatever was bound
before, and nothing outside the table ever holds a reference into a stored
value. Readers get copies via ``Value.copy``.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from minipy.config import MAX_VAR_NAME
from minipy.types.value import Value, Empty


def is_valid_name(name: str) -> bool:
    """Length 1..MAX_VAR_NAME, alphabetic first, then alphanumerics or '_'."""
    if not name or len(name) > MAX_VAR_NAME:
        return False
    if not (name[0].isascii() and name[0].isalpha()):
        return False
    return all(c.isascii() and (c.isalnum() or c == "_") for c in name[1:])


class Variable:
    """A named binding to an owned Value."""

    __slots__ = ("name", "value")

    def __init__(self, name: str, value: Value = Empty):
        self.name: str = name
        self.value: Value = value

    def replace(self, value: Value) -> None:
        # The previous value is dropped here; nothing else references it.
        self.value = value

    def __repr__(self) -> str:
        return f"Variable({self.name!r}, {self.value!r})"


class VariableTable:
    """Mapping from names to Variables; lookups are by exact name."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[str, Variable] = {}

    def find(self, name: str) -> Optional[Variable]:
        return self.vars.get(name)

    def create(self, name: str) -> Variable:
        """Insert a new Variable bound to Empty.

        The name is expected to have been checked with `is_valid_name`.
        An existing binding of the same name is replaced.
        """
        var = Variable(name)
        self.vars[name] = var
        return var

    def find_or_create(self, name: str) -> Variable:
        var = self.find(name)
        if var is None:
            var = self.create(name)
        return var

    def names(self) -> list[str]:
        return list(self.vars)

    def clear(self) -> None:
        """Release every variable (session teardown)."""
        self.vars.clear()

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[Variable]:
        return iter(self.vars.values())

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for name, var in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{name}: {var.value!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<VariableTable ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
