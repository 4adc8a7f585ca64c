"""
  Single-pass text scanners used by the evaluator and the command dispatcher.

minipy has no token stream: commands are classified and split by scanning
the raw text for a handful of characters. The helpers here are that scanning,
kept in one place:

    - find_operator     -> position of the (single) binary operator
    - find_top_level    -> first separator outside any [...] nesting
    - split_top_level   -> every segment between top-level separators
    - split_index       -> name[index] -> (name, index text)
    - parse_int/float   -> lenient numeric prefixes (text with no number is 0)
"""

from __future__ import annotations

import re

from minipy.errors import MiniPySyntaxError

OPERATORS = "+-*/"

INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")
FLOAT_PREFIX_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def find_operator(expr: str) -> int:
    """Index of the first arithmetic operator in `expr`, or -1.

    Only one operator is ever looked for; whatever follows it, operators
    included, belongs to the right operand. A '-' in the first position is
    the sign of the left operand, not an operator.
    """
    start = 1 if expr.startswith("-") else 0
    for i in range(start, len(expr)):
        if expr[i] in OPERATORS:
            return i
    return -1


def find_top_level(text: str, sep: str) -> int:
    """Index of the first `sep` at bracket depth zero, or -1."""
    depth = 0
    for i, ch in enumerate(text):
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        elif ch == sep and depth == 0:
            return i
    return -1


def split_top_level(text: str, sep: str = ",") -> list[str]:
    """Split `text` at every `sep` that is not nested inside brackets."""
    parts: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(text):
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        elif ch == sep and depth == 0:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return parts


def split_index(text: str, context: str = "list access") -> tuple[str, str]:
    """Split ``name[index]`` into its trimmed name and index text.

    The index ends at the first ']' after the '['; anything after it is
    ignored.
    """
    open_pos = text.find("[")
    if open_pos < 0:
        raise MiniPySyntaxError(f"Expected '[' in {context}.")
    close_pos = text.find("]", open_pos + 1)
    if close_pos < 0:
        raise MiniPySyntaxError(f"Mismatched brackets in {context}.")
    return text[:open_pos].strip(), text[open_pos + 1:close_pos].strip()


INT64_MAX = (1 << 63) - 1
INT64_MIN = -(1 << 63)


def parse_int(text: str) -> int:
    """Leading integer of `text`; 0 when there is none.

    Values outside the signed 64-bit range saturate at its bounds, as C's
    strtoll does.
    """
    m = INT_PREFIX_RE.match(text)
    if not m:
        return 0
    digits = m.group(1)
    negative = digits.startswith("-")
    body = digits.lstrip("+-").lstrip("0") or "0"
    if len(body) > 19:
        return INT64_MIN if negative else INT64_MAX
    value = -int(body) if negative else int(body)
    return max(INT64_MIN, min(INT64_MAX, value))


def parse_float(text: str) -> float:
    """Leading decimal number of `text`; 0.0 when there is none."""
    m = FLOAT_PREFIX_RE.match(text)
    return float(m.group(1)) if m else 0.0
