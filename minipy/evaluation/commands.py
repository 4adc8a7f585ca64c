"""Command classification and dispatch for minipy.

A command is one trimmed line. Its shape decides what it is, checked in
this order:

    print(name)          -> print the variable's value
    append(name, expr)   -> append a value to a list variable
    name[index] = expr   -> overwrite one list element
    name = expr          -> bind a variable
    anything else        -> unrecognized (an empty line is a no-op)

Handlers raise MiniPyError subclasses; `CommandDispatcher.dispatch`
reports them and returns. A command that fails at any step leaves every
variable and list exactly as it found them.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from minipy import OutputSink
from minipy.diagnostics import Reporter
from minipy.errors import MiniPyError, MiniPyResourceError, MiniPySyntaxError, MiniPyNameError, MiniPyValueError
from minipy.evaluation.evaluator import Evaluator
from minipy.printer import render
from minipy.reader.scanner import find_top_level, parse_int, split_index
from minipy.types.value import Empty
from minipy.types.variable_table import VariableTable, is_valid_name

logger = logging.getLogger(__name__)

PRINT_PREFIX = "print("
APPEND_PREFIX = "append("
APPEND_CONFIRMATION = "Successfully appended value."


class CommandKind(Enum):
    PRINT = "print"
    APPEND = "append"
    INDEX_ASSIGN = "index-assign"
    ASSIGN = "assign"
    UNRECOGNIZED = "unrecognized"
    EMPTY = "empty"


def classify(command: str) -> CommandKind:
    """Decide what a trimmed command is from its shape alone."""
    if not command:
        return CommandKind.EMPTY
    if command.startswith(PRINT_PREFIX):
        return CommandKind.PRINT
    if command.startswith(APPEND_PREFIX):
        return CommandKind.APPEND
    eq = command.find("=")
    if eq >= 0:
        if "[" in command[:eq]:
            return CommandKind.INDEX_ASSIGN
        return CommandKind.ASSIGN
    return CommandKind.UNRECOGNIZED


def _call_argument(command: str, prefix: str, usage: str) -> str:
    """Text between `prefix` and the command's closing ')'."""
    if not command.endswith(")"):
        raise MiniPySyntaxError(f"Invalid {usage} syntax.")
    return command[len(prefix):-1]


class CommandDispatcher:
    """Routes each command to its handler against one session's state."""

    def __init__(
        self,
        variables: VariableTable,
        evaluator: Evaluator,
        reporter: Reporter,
        output: OutputSink = print,
    ):
        self.variables = variables
        self.evaluator = evaluator
        self.reporter = reporter
        self.output = output
        self.handlers: dict[CommandKind, Callable[[str], None]] = {
            CommandKind.PRINT: self.handle_print,
            CommandKind.APPEND: self.handle_append,
            CommandKind.INDEX_ASSIGN: self.handle_index_assignment,
            CommandKind.ASSIGN: self.handle_assignment,
            CommandKind.UNRECOGNIZED: self.handle_unrecognized,
            CommandKind.EMPTY: lambda command: None,
        }

    def dispatch(self, command: str) -> CommandKind:
        command = command.strip()
        kind = classify(command)
        logger.debug("dispatch %s: %r", kind.value, command)
        try:
            self.handlers[kind](command)
        except MiniPyError as err:
            self.reporter.report_error(err)
        except MemoryError:
            self.reporter.report_error(MiniPyResourceError("Out of memory; command aborted."))
        return kind

    # --- Handlers ---
    def handle_print(self, command: str) -> None:
        name = _call_argument(command, PRINT_PREFIX, "print").strip()
        if ")" in name or "(" in name:
            raise MiniPySyntaxError("Invalid print syntax.")
        var = self.variables.find(name)
        if var is None:
            raise MiniPyNameError(f"Variable '{name}' not found.")
        self.output(render(var.value))

    def handle_append(self, command: str) -> None:
        args = _call_argument(command, APPEND_PREFIX, "append")
        comma = find_top_level(args, ",")
        if comma < 0:
            raise MiniPySyntaxError("Invalid append syntax. Missing comma.")
        list_name = args[:comma].strip()
        target = self.evaluator.lookup_list(list_name)

        value = self.evaluator.evaluate(args[comma + 1:])
        if value is Empty:
            return
        target.store.append(value)
        logger.debug("appended %r to %s", value, list_name)
        self.output(APPEND_CONFIRMATION)

    def handle_index_assignment(self, command: str) -> None:
        lhs, rhs = command.split("=", 1)
        name, index_text = split_index(lhs.strip(), "list assignment")
        target = self.evaluator.lookup_list(name)
        index = parse_int(index_text)

        value = self.evaluator.evaluate(rhs)
        if value is Empty:
            return
        if not target.store.set(index, value.copy()):
            raise MiniPyValueError("List index out of range.")

    def handle_assignment(self, command: str) -> None:
        lhs, rhs = command.split("=", 1)
        name = lhs.strip()
        if not is_valid_name(name):
            raise MiniPySyntaxError(f"Invalid variable name '{name}'.")

        value = self.evaluator.evaluate(rhs)
        if value is Empty:
            return
        self.variables.find_or_create(name).replace(value.copy())

    def handle_unrecognized(self, command: str) -> None:
        raise MiniPySyntaxError("Unrecognized command or invalid syntax.")
