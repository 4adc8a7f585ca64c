from __future__ import annotations

import logging
from typing import Optional

from minipy import OutputSink, LineSource
from minipy.config import EXIT_KEYWORD, get_max_command_length
from minipy.diagnostics import Reporter
from minipy.errors import MiniPySyntaxError
from minipy.evaluation.commands import CommandDispatcher, CommandKind
from minipy.evaluation.evaluator import Evaluator
from minipy.types.variable_table import VariableTable

logger = logging.getLogger(__name__)


class Interpreter:
    """
    One minipy session: a VariableTable plus the evaluator and dispatcher
    that operate on it. Sessions share nothing, so several can live side by
    side. Commands are executed one at a time, each to completion.
    """

    def __init__(
        self,
        output: Optional[OutputSink] = print,
        *,
        max_command_length: int | None = None,
    ):
        self.output: OutputSink = output if output is not None else (lambda text: None)
        self.max_command_length = (
            get_max_command_length() if max_command_length is None else max_command_length
        )
        self.variables = VariableTable()
        self.reporter = Reporter(self.output)
        self.evaluator = Evaluator(self.variables, self.reporter)
        self.dispatcher = CommandDispatcher(
            self.variables, self.evaluator, self.reporter, self.output
        )

    @property
    def diagnostics(self):
        return self.reporter.history

    def execute(self, command: str) -> CommandKind | None:
        """Execute one command line. Returns what kind of command it was,
        or None when the line was rejected before classification."""
        command = command.rstrip("\r\n")
        if 0 < self.max_command_length < len(command):
            self.reporter.report_error(
                MiniPySyntaxError(f"Command exceeds {self.max_command_length} characters.")
            )
            return None
        return self.dispatcher.dispatch(command)

    def run(self, lines: LineSource) -> bool:
        """Execute lines until they run out or the exit keyword is seen.

        Returns True when stopped by the exit keyword.
        """
        for line in lines:
            if line.strip() == EXIT_KEYWORD:
                return True
            self.execute(line)
        return False

    def close(self) -> None:
        logger.debug("closing session with %d variable(s)", len(self.variables))
        self.variables.clear()

    def __enter__(self) -> Interpreter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
