"""Owned, growable sequence backing the List value variant."""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from minipy.types.value import Value


class ListStore:
    """Ordered sequence of owned Values, indexed from 0.

    The store never copies what it is given: callers hand over values they
    already own (fresh evaluation results or explicit copies). Reading
    callers that need an independent value use ``deep_copy`` or
    ``Value.copy`` themselves.
    """

    __slots__ = ("items",)

    def __init__(self, items: Iterable[Value] | None = None):
        self.items: list[Value] = list(items) if items is not None else []

    def append(self, value: Value) -> None:
        self.items.append(value)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self.items)

    def get(self, index: int) -> Optional[Value]:
        """Return the element at `index`, or None when out of range."""
        if not self._in_range(index):
            return None
        return self.items[index]

    def set(self, index: int, value: Value) -> bool:
        """Replace the element at `index`; False when out of range.

        On False nothing is stored and the caller still owns `value`.
        """
        if not self._in_range(index):
            return False
        self.items[index] = value
        return True

    def deep_copy(self) -> ListStore:
        return ListStore(item.copy() for item in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __eq__(self, other) -> bool:
        return isinstance(other, ListStore) and self.items == other.items

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("ListStore(")
            buffer.write(", ".join(repr(v) for v in self.items))
            buffer.write(")")
            return buffer.getvalue()
