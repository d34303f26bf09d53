"""Tests for multi-line statement reassembly."""

from scopedoc_mcp.parser.continuation import (
    UNRESOLVED,
    isolate_rhs,
    resolve_assignment,
    resolve_header,
)
from scopedoc_mcp.parser.lines import split_lines


def test_isolate_rhs():
    """Test the right-hand side is isolated after '=' or a value keyword."""
    assert isolate_rhs("x = (1 +") == "(1 +"
    assert isolate_rhs("return foo(a,") == "foo(a,"
    assert isolate_rhs("yield") == ""
    assert isolate_rhs("foo(a=1,") == "foo(a=1,"
    assert isolate_rhs("returned = 5") == "5"
    assert isolate_rhs("total += [") == "["


def test_resolve_assignment_joins_lines():
    """Test an open bracket joins continuation lines with single spaces."""
    lines = split_lines("x = (1 +\n    2)\n")
    comments = []
    assert resolve_assignment(lines, 0, comments) == (2, "(1 + 2)")
    assert comments == []


def test_resolve_assignment_skips_blank_lines():
    """Test blank lines inside a continuation do not terminate it."""
    lines = split_lines("x = [\n\n    1,\n    2]\ny = 3\n")
    assert resolve_assignment(lines, 0, []) == (4, "[ 1, 2]")


def test_resolve_assignment_queues_comments():
    """Test trailing comments of every continuation line are collected."""
    lines = split_lines("x = (1,  # first\n     2)  # second\n")
    comments = []
    next_index, text = resolve_assignment(lines, 0, comments)

    assert (next_index, text) == (2, "(1, 2)")
    assert [c.text for c in comments] == ["first", "second"]
    assert [c.line for c in comments] == [0, 1]


def test_resolve_assignment_backslash():
    """Test explicit backslash continuation drops the backslash."""
    lines = split_lines("x = 1 + \\\n    2\n")
    assert resolve_assignment(lines, 0, []) == (2, "1 + 2")


def test_resolve_assignment_multiline_string():
    """Test lines inside an open string are taken verbatim."""
    lines = split_lines('x = """abc\ndef f(): # not code\n"""\n')
    next_index, text = resolve_assignment(lines, 0, [])

    assert next_index == 3
    assert "def f(): # not code" in text


def test_resolve_assignment_unresolved_at_eof():
    """Test an expression left open at end of input reports failure."""
    lines = split_lines("x = (1 +\n")
    next_index, _ = resolve_assignment(lines, 0, [])
    assert next_index == UNRESOLVED


def test_resolve_header_multiline():
    """Test a header spanning lines resolves at its ':'."""
    lines = split_lines("def foo(a,\n        b):\n    pass\n")
    comments = []
    assert resolve_header(lines, 0, ":", comments) == (2, "def foo(a, b):")


def test_resolve_header_keeps_comments():
    """Test comments on header lines are queued."""
    lines = split_lines("class Foo(Base,  # base first\n          Mixin):\n")
    comments = []
    next_index, header = resolve_header(lines, 0, ":", comments)

    assert next_index == 2
    assert header == "class Foo(Base, Mixin):"
    assert [c.text for c in comments] == ["base first"]


def test_resolve_header_without_terminator():
    """Test a balanced header without ':' fails."""
    lines = split_lines("class Foo\nx = 1\n")
    next_index, _ = resolve_header(lines, 0, ":", [])
    assert next_index == UNRESOLVED


def test_resolve_header_unresolved_at_eof():
    """Test a header still open at end of input fails."""
    lines = split_lines("def foo(a,\n")
    next_index, _ = resolve_header(lines, 0, ":", [])
    assert next_index == UNRESOLVED
