"""minipy entry point and REPL wiring."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from minipy.config import EXIT_KEYWORD, get_log_level
from minipy.interpreter import Interpreter

BANNER = "Python-like Interpreter (type 'exit' to quit)"
PROMPT = ">>> "
FAREWELL = "Exiting interpreter."


def run_repl(
    interpreter: Interpreter,
    stdin: TextIO,
    stdout: TextIO,
    quiet: bool = False,
) -> None:
    """Read commands from `stdin` until EOF or the exit keyword.

    The session is closed on the way out either way.
    """
    if not quiet:
        print(BANNER, file=stdout)
    try:
        while True:
            if not quiet:
                stdout.write(PROMPT)
                stdout.flush()
            line = stdin.readline()
            if not line:
                break
            if line.strip() == EXIT_KEYWORD:
                if not quiet:
                    print(FAREWELL, file=stdout)
                break
            interpreter.execute(line)
    finally:
        interpreter.close()


def run_cli(argv: Optional[List[str]] = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = argparse.ArgumentParser(description="minipy interpreter")
    parser.add_argument("script", nargs="?", help="File of commands to run instead of the interactive prompt")
    parser.add_argument("-q", "--quiet", action="store_true", help="No banner or prompts")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $MINIPY_LOG_LEVEL or WARNING)")
    args = parser.parse_args(argv)

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    level = logging.getLevelName(args.log_level.upper()) if args.log_level else get_log_level()
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    interpreter = Interpreter(output=lambda text: print(text, file=stdout))

    if args.script is None:
        run_repl(interpreter, stdin, stdout, quiet=args.quiet)
        return 0

    try:
        with open(args.script, "r", encoding="utf-8") as handle:
            with interpreter:
                interpreter.run(handle)
    except OSError as exc:
        print(f"Failed to read {args.script}: {exc}", file=sys.stderr)
        return 1
    return 0


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
