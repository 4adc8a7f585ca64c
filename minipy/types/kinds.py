from __future__ import annotations

from enum import Enum


class ValueKind(Enum):
    INTEGER = "int"
    FLOAT = "float"
    CHAR = "char"
    TEXT = "str"
    LIST = "list"
    EMPTY = "None"

    def __str__(self) -> str:
        return self.value
