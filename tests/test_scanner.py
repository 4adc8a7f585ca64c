import pytest

from minipy.errors import MiniPySyntaxError
from minipy.reader.scanner import (
    find_operator,
    find_top_level,
    parse_float,
    parse_int,
    split_index,
    split_top_level,
)


@pytest.mark.parametrize(
    "expr,expected",
    [
        ("1 + 2", 2),
        ("a*b", 1),
        ("10 / 5", 3),
        ("x", -1),
        ("-5", -1),           # leading sign is not an operator
        ("-5 - 3", 3),
        ("5 - -3", 2),        # first operator wins; the rest is the right operand
        ("1 + 2 * 3", 2),
        ("[1, -2]", 4),       # the scan does not look at brackets
        ('"a-b"', 2),         # ...or at quotes
    ]
)
def test_find_operator(expr, expected):
    assert find_operator(expr) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1, 2, 3", ["1", " 2", " 3"]),
        ("1, [2, 3], 4", ["1", " [2, 3]", " 4"]),
        ("[[1, 2], [3]], 4", ["[[1, 2], [3]]", " 4"]),
        ("", [""]),
        ("a,,b", ["a", "", "b"]),
    ]
)
def test_split_top_level(text, expected):
    assert split_top_level(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("c, 1", 1),
        ("c, [1, 2]", 1),
        ("[1, 2], 3", 6),
        ("c 1", -1),
    ]
)
def test_find_top_level(text, expected):
    assert find_top_level(text, ",") == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("a[1]", ("a", "1")),
        ("  lst [ 2 ] ", ("lst", "2")),
        ("a[]", ("a", "")),
        ("a[1]junk", ("a", "1")),
    ]
)
def test_split_index(text, expected):
    assert split_index(text) == expected


def test_split_index_missing_close_bracket():
    with pytest.raises(MiniPySyntaxError, match="Mismatched brackets in list assignment"):
        split_index("a[1", "list assignment")


@pytest.mark.parametrize(
    "text,expected",
    [("42", 42), ("  7", 7), ("-3", -3), ("+4", 4), ("12abc", 12), ("abc", 0), ("", 0), ("3.9", 3),
     ("9223372036854775807", 2 ** 63 - 1), ("99999999999999999999", 2 ** 63 - 1),
     ("-99999999999999999999", -(2 ** 63)), ("0" * 30 + "7", 7)]
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [("3.5", 3.5), ("-0.25", -0.25), ("1.", 1.0), ("1.2.3", 1.2), ("2.5e2", 250.0), ("x", 0.0)]
)
def test_parse_float(text, expected):
    assert parse_float(text) == expected
