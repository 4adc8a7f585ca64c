"""Diagnostic reporting for minipy sessions.

Errors never unwind past a command: the component that detects one turns it
into a Diagnostic, hands it to the session's Reporter and carries on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from minipy import OutputSink
from minipy.errors import MiniPyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    kind: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


@dataclass
class Reporter:
    """Collects diagnostics and echoes them to an output sink."""
    output: Optional[OutputSink] = print
    history: list[Diagnostic] = field(default_factory=list)

    def report(self, kind: str, message: str) -> Diagnostic:
        diag = Diagnostic(kind, message)
        self.history.append(diag)
        logger.debug("diagnostic %s", diag)
        if self.output is not None:
            self.output(str(diag))
        return diag

    def report_error(self, err: MiniPyError) -> Diagnostic:
        return self.report(err.kind, str(err))

    @property
    def last(self) -> Optional[Diagnostic]:
        return self.history[-1] if self.history else None

    def clear(self) -> None:
        self.history.clear()
