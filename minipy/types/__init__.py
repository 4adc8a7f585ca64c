from __future__ import annotations

# Public surface for the value model
from .kinds import ValueKind
from .empty import Empty, EmptyType
from .list_store import ListStore
from .value import Value, Integer, Float, Char, Text, List
from .variable_table import Variable, VariableTable, is_valid_name

__all__ = [
    "ValueKind",
    "Empty",
    "EmptyType",
    "ListStore",
    "Value",
    "Integer",
    "Float",
    "Char",
    "Text",
    "List",
    "Variable",
    "VariableTable",
    "is_valid_name",
]
