"""Tests for comment extraction."""

from scopedoc_mcp.parser.comments import match_comment, read_comment, read_comment_group
from scopedoc_mcp.parser.lines import split_lines


def test_match_comment():
    """Test comment prefixes report indent and marker."""
    assert match_comment("    # note") == (4, "#")
    assert match_comment('"""Doc."""') == (0, '"""')
    assert match_comment("x = 1  # note") is None


def test_read_single_line_comment():
    """Test a '#' comment is read without its marker."""
    comment, next_index = read_comment(split_lines("# hello\n"), 0, 0)
    assert comment.text == "hello"
    assert comment.line == 0
    assert next_index == 1


def test_read_one_line_block_comment():
    """Test a block comment closed on its own line."""
    comment, next_index = read_comment(split_lines('"""Doc."""\n'), 0, 0)
    assert comment.text == "Doc."
    assert next_index == 1


def test_read_multiline_block_comment():
    """Test a block comment keeps its line breaks."""
    lines = split_lines("'''First line\n    second line\n'''\nx = 1\n")
    comment, next_index = read_comment(lines, 0, 0)

    assert comment.text == "First line\nsecond line"
    assert next_index == 3


def test_unterminated_block_comment_consumes_nothing():
    """Test a block comment that never closes is not consumed."""
    comment, next_index = read_comment(split_lines('"""never closed\nx = 1\n'), 0, 0)
    assert comment is None
    assert next_index == 0


def test_comment_below_floor():
    """Test a comment below the indent floor is left for the caller."""
    comment, next_index = read_comment(split_lines("# outer\n"), 0, 4)
    assert comment is None
    assert next_index == 0


def test_read_comment_group():
    """Test consecutive '#' lines are read as one group."""
    pending = []
    next_index = read_comment_group(split_lines("# a\n# b\nx = 1\n"), 0, 0, pending)

    assert [c.text for c in pending] == ["a", "b"]
    assert next_index == 2


def test_comment_group_stops_at_block_comment():
    """Test a block comment ends a '#' group."""
    pending = []
    next_index = read_comment_group(split_lines('# a\n"""doc"""\n'), 0, 0, pending)

    assert [c.text for c in pending] == ["a"]
    assert next_index == 1


def test_comment_group_skips_empty_comments():
    """Test bare '#' lines are consumed but not kept."""
    pending = []
    next_index = read_comment_group(split_lines("# a\n#\n# b\n"), 0, 0, pending)

    assert [c.text for c in pending] == ["a", "b"]
    assert next_index == 3
