# Core type aliases for minipy.
# Runtime values are instances of the classes in minipy.types.value; the
# aliases here only name the callables that move text in and out of a session.
#
# Naming guidance:
# - OutputSink: receives one rendered line (no trailing newline) from print
#   commands and diagnostics.
# - LineSource: any iterable of raw command lines (a file, stdin, a list).

from typing import Callable, Iterable

OutputSink = Callable[[str], None]
LineSource = Iterable[str]

__version__ = "0.1.0"
