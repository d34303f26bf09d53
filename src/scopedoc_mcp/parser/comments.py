"""Comment extraction: '#' lines and triple-quoted block comments."""

import re
from typing import Optional

from .entities import Comment
from .languages import PYTHON_SPEC
from .lines import SourceLine


COMMENT_PATTERN = re.compile(r"^(?P<space>[ \t]*)(?P<marker>#|\"\"\"|''')\s*(?P<content>.*?)\s*$")


def match_comment(text: str) -> Optional[tuple[int, str]]:
    """Return (indent, marker) if the line starts with a comment, else None."""
    m = COMMENT_PATTERN.match(text)
    if not m:
        return None
    return len(m.group("space")), m.group("marker")


def is_block_marker(marker: str) -> bool:
    return marker in PYTHON_SPEC.block_comment_quotes


def read_comment(
    lines: list[SourceLine],
    index: int,
    indent_floor: int
) -> tuple[Optional[Comment], int]:
    """Read one comment starting at lines[index].

    Returns (comment, next_index). When the line is not a comment, sits
    below indent_floor, or opens a block comment that never closes, the
    result is (None, index) and nothing is consumed.
    """
    if index >= len(lines):
        return None, index

    m = COMMENT_PATTERN.match(lines[index].text)
    if not m or len(m.group("space")) < indent_floor:
        return None, index

    marker = m.group("marker")
    content = m.group("content")

    if not is_block_marker(marker):
        return Comment(text=content, line=index), index + 1

    # Block comment closed on the same line
    close = content.find(marker)
    if close != -1:
        return Comment(text=content[:close].strip(), line=index), index + 1

    # Multi-line block: collect until the closing marker
    body = [content] if content else []
    for lp in range(index + 1, len(lines)):
        text = lines[lp].text.strip()
        close = text.find(marker)
        if close != -1:
            tail = text[:close].strip()
            if tail:
                body.append(tail)
            return Comment(text="\n".join(body).strip(), line=index), lp + 1
        body.append(text)

    return None, index


def read_comment_group(
    lines: list[SourceLine],
    index: int,
    indent_floor: int,
    pending: list[Comment]
) -> int:
    """Read consecutive '#' comment lines into pending.

    Stops at the first line that is not a '#' comment at or above
    indent_floor. Returns the next unread index.
    """
    while index < len(lines):
        found = match_comment(lines[index].text)
        if found is None or is_block_marker(found[1]):
            break
        comment, next_index = read_comment(lines, index, indent_floor)
        if comment is None:
            break
        if comment.text:
            pending.append(comment)
        index = next_index
    return index
