"""Expression evaluator for minipy.

Turns the text of an expression into a Value. An expression is either a
single operand or two operands joined by one of ``+ - * /``. Operands are
list literals, indexed list reads, variable references, or number, char and
string literals.

Everything read out of the variable table is copied, so the Value returned
by `Evaluator.evaluate` is always owned by the caller. Failures never
escape: they are reported through the session Reporter and the result is
`Empty`.
"""

from __future__ import annotations

import logging

from minipy.config import MAX_STRING_LEN
from minipy.diagnostics import Reporter
from minipy.errors import (
    MiniPyError,
    MiniPyNameError,
    MiniPyResourceError,
    MiniPySyntaxError,
    MiniPyTypeError,
    MiniPyValueError,
)
from minipy.evaluation.arithmetic import apply_operator
from minipy.reader.scanner import (
    find_operator,
    parse_float,
    parse_int,
    split_index,
    split_top_level,
)
from minipy.types.value import Value, Empty, Integer, Float, Char, Text, List
from minipy.types.list_store import ListStore
from minipy.types.variable_table import VariableTable, is_valid_name

logger = logging.getLogger(__name__)


def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def is_number_literal(text: str) -> bool:
    if not text:
        return False
    if _is_digit(text[0]):
        return True
    return text[0] == "-" and len(text) > 1 and _is_digit(text[1])


class Evaluator:
    """Evaluates expression text against a session's VariableTable."""

    def __init__(self, variables: VariableTable, reporter: Reporter | None = None):
        self.variables = variables
        self.reporter = reporter if reporter is not None else Reporter()

    # --- Public entry points: never raise ---
    def evaluate(self, expr: str) -> Value:
        return self._guard(self.evaluate_or_raise, expr)

    def resolve_operand(self, text: str) -> Value:
        return self._guard(self.resolve_or_raise, text)

    def _guard(self, fn, text: str) -> Value:
        try:
            result = fn(text)
        except MiniPyError as err:
            self.reporter.report_error(err)
            return Empty
        except MemoryError:
            self.reporter.report_error(
                MiniPyResourceError(f"Out of memory while evaluating '{text.strip()}'.")
            )
            return Empty
        logger.debug("evaluated %r -> %r", text, result)
        return result

    # --- Raising core ---
    def evaluate_or_raise(self, expr: str) -> Value:
        expr = expr.strip()
        if not expr:
            raise MiniPySyntaxError("Empty expression.")

        op_pos = find_operator(expr)
        if op_pos < 0:
            return self.resolve_or_raise(expr)

        op = expr[op_pos]
        left = self.resolve_or_raise(expr[:op_pos])
        right = self.resolve_or_raise(expr[op_pos + 1:])
        return apply_operator(left, op, right)

    def resolve_or_raise(self, text: str) -> Value:
        text = text.strip()
        if not text:
            raise MiniPySyntaxError("Missing operand.")

        if text.startswith("[") and text.endswith("]"):
            return self.parse_list_literal(text[1:-1])

        if "[" in text:
            return self.read_index(text)

        var = self.variables.find(text)
        if var is not None:
            return var.value.copy()

        if is_number_literal(text):
            if "." in text:
                return Float(parse_float(text))
            return Integer(parse_int(text))

        if len(text) == 3 and text[0] == "'" and text[2] == "'":
            return Char(text[1])

        if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
            return Text(text[1:-1][:MAX_STRING_LEN])

        if is_valid_name(text):
            raise MiniPyNameError(f"name '{text}' is not defined.")
        raise MiniPySyntaxError(f"Unrecognized operand '{text}'.")

    def parse_list_literal(self, body: str) -> List:
        """Build a List from the text between a literal's outer brackets."""
        store = ListStore()
        for segment in split_top_level(body, ","):
            if not segment.strip():
                continue
            store.append(self.evaluate_or_raise(segment))
        return List(store)

    def lookup_list(self, name: str) -> List:
        """The List bound to `name`, as stored (not copied)."""
        var = self.variables.find(name)
        if var is None:
            raise MiniPyNameError(f"name '{name}' is not defined.")
        if not isinstance(var.value, List):
            raise MiniPyTypeError(f"Variable '{name}' is not a list.")
        return var.value

    def read_index(self, text: str) -> Value:
        name, index_text = split_index(text, "list access")
        target = self.lookup_list(name)
        element = target.store.get(parse_int(index_text))
        if element is None:
            raise MiniPyValueError("List index out of range.")
        return element.copy()
