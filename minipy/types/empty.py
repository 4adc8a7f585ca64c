from __future__ import annotations

from minipy.types.kinds import ValueKind


class EmptyType:
    """The "no value" sentinel; also what a failed evaluation yields."""

    __slots__ = ()
    kind = ValueKind.EMPTY

    def __repr__(self): return "Empty"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, EmptyType)

    def __hash__(self):
        return hash(ValueKind.EMPTY)

    def copy(self) -> EmptyType:
        return self


Empty = EmptyType()
