import pytest

from minipy.diagnostics import Reporter
from minipy.evaluation.evaluator import Evaluator
from minipy.types import (
    Char,
    Empty,
    Float,
    Integer,
    List,
    ListStore,
    Text,
    VariableTable,
)

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

def ints(*xs):
    return List(ListStore(Integer(x) for x in xs))


@pytest.fixture
def variables():
    table = VariableTable()
    table.create("a").replace(ints(10, 20, 30))
    table.create("n").replace(Integer(1))
    table.create("f").replace(Float(2.5))
    table.create("s").replace(Text("hey"))
    return table


@pytest.fixture
def reporter():
    return Reporter(output=None)


@pytest.fixture
def ev(variables, reporter):
    return Evaluator(variables, reporter)


# -----------------------------------------------------
# Literals and references
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", Integer(42)),
        ("  42  ", Integer(42)),
        ("-7", Integer(-7)),
        ("3.5", Float(3.5)),
        ("-0.5", Float(-0.5)),
        ("12abc", Integer(12)),
        ("'c'", Char("c")),
        ("' '", Char(" ")),
        ('"hi"', Text("hi")),
        ('""', Text("")),
        ("[]", List()),
        ("[ ]", List()),
        ("[1, 2, 3]", ints(1, 2, 3)),
        ("[1, , 2]", ints(1, 2)),
        ("[1, [2, 3], 4]", List(ListStore([Integer(1), ints(2, 3), Integer(4)]))),
        ("[[], [[]]]", List(ListStore([List(), List(ListStore([List()]))]))),
        ("['a', \"b\", 1.5]", List(ListStore([Char("a"), Text("b"), Float(1.5)]))),
        ("n", Integer(1)),
        ("s", Text("hey")),
        ("a", ints(10, 20, 30)),
        ("[n, s]", List(ListStore([Integer(1), Text("hey")]))),
    ]
)
def test_operands(ev, reporter, source, expected):
    assert ev.evaluate(source) == expected
    assert reporter.history == []


def test_text_literal_is_truncated_to_fifty_chars(ev):
    body = "x" * 60
    assert ev.evaluate(f'"{body}"') == Text("x" * 50)


# -----------------------------------------------------
# Arithmetic
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 + 2", Integer(3)),
        ("1+2", Integer(3)),
        ("10 - 4", Integer(6)),
        ("2 * 3", Integer(6)),
        ("7 / 2", Integer(3)),
        ("7.0 / 2.0", Float(3.5)),
        ("-5 - 3", Integer(-8)),
        ("5 - -3", Integer(8)),
        ("n + 41", Integer(42)),
        ("f * 2.0", Float(5.0)),
        ("a[1] + a[2]", Integer(50)),
        ("1 + 2 + 3", Integer(3)),    # one operator only: right operand "2 + 3" reads as 2
    ]
)
def test_binary_expressions(ev, source, expected):
    assert ev.evaluate(source) == expected


@pytest.mark.parametrize(
    "source,kind",
    [
        ("5 / 0", "ValueError"),
        ("5.0 / 0.0", "ValueError"),
        ('1 + "a"', "TypeError"),
        ("1 + 2.0", "TypeError"),
        ("s + s", "TypeError"),
        ("a + a", "TypeError"),
        ("1 +", "SyntaxError"),
        ("* 2", "SyntaxError"),
        ("zz + 1", "NameError"),
    ]
)
def test_failed_arithmetic_yields_empty(ev, reporter, source, kind):
    assert ev.evaluate(source) is Empty
    assert reporter.last.kind == kind


# -----------------------------------------------------
# Indexed reads
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("a[0]", Integer(10)),
        ("a[1]", Integer(20)),
        ("a[ 2 ]", Integer(30)),
        ("a[x]", Integer(10)),     # non-numeric index reads as 0
    ]
)
def test_index_reads(ev, source, expected):
    assert ev.evaluate(source) == expected


@pytest.mark.parametrize(
    "source,kind",
    [
        ("a[5]", "ValueError"),
        ("a[3]", "ValueError"),
        ("a[-1]", "SyntaxError"),   # the "-" is taken as the operator
        ("zz[0]", "NameError"),
        ("n[0]", "TypeError"),
        ("a[1", "SyntaxError"),
    ]
)
def test_bad_index_reads(ev, reporter, source, kind):
    assert ev.evaluate(source) is Empty
    assert reporter.last.kind == kind


def test_index_read_returns_a_copy(ev, variables):
    nested = List(ListStore([ints(1, 2)]))
    variables.create("m").replace(nested)
    got = ev.evaluate("m[0]")
    got.store.append(Integer(3))
    assert nested.store.get(0) == ints(1, 2)


def test_variable_read_returns_a_copy(ev, variables):
    got = ev.evaluate("a")
    got.store.append(Integer(99))
    got.store.set(0, Integer(-1))
    assert variables.find("a").value == ints(10, 20, 30)


# -----------------------------------------------------
# Errors never escape
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,kind,message",
    [
        ("", "SyntaxError", "Empty expression."),
        ("   ", "SyntaxError", "Empty expression."),
        ("zz", "NameError", "name 'zz' is not defined."),
        ("'ab'", "SyntaxError", "Unrecognized operand ''ab''."),
        ('"', "SyntaxError", "Unrecognized operand '\"'."),
        ("[1, zz]", "NameError", "name 'zz' is not defined."),
        ('"a-b"', "SyntaxError", "Unrecognized operand '\"a'."),
    ]
)
def test_diagnostics(ev, reporter, source, kind, message):
    assert ev.evaluate(source) is Empty
    assert len(reporter.history) == 1
    assert reporter.last.kind == kind
    assert reporter.last.message == message


def test_resolve_operand_skips_operator_scan(ev):
    assert ev.resolve_operand("2 + 3") == Integer(2)
    assert ev.resolve_operand("[1, 2]") == ints(1, 2)


def test_out_of_memory_becomes_resource_error(ev, reporter, monkeypatch):
    def boom(body):
        raise MemoryError
    monkeypatch.setattr(ev, "parse_list_literal", boom)
    assert ev.evaluate("[1]") is Empty
    assert reporter.last.kind == "ResourceError"
