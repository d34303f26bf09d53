"""Multi-line statement reassembly.

Statements continue onto following lines while a bracket or quote is open
or the text ends in dangling punctuation. Both resolvers return the next
unconsumed line index, or UNRESOLVED when the input ends first.
"""

import re

from .balance import (
    delimiter_stack,
    find_assignment,
    find_terminator,
    has_dangling_end,
    is_terminated,
    quote_is_open,
    split_trailing_comment,
)
from .entities import Comment
from .languages import PYTHON_SPEC
from .lines import SourceLine


UNRESOLVED = -1

_VALUE_KEYWORD = re.compile(r"^(?:%s)\b" % "|".join(PYTHON_SPEC.value_keywords))


def isolate_rhs(text: str) -> str:
    """Strip everything up to and including the leading keyword or first top-level '='.

    Examples:
        "x = (1 +"      -> "(1 +"
        "return foo(a," -> "foo(a,"
        "foo(a=1,"      -> "foo(a=1,"
    """
    stripped = text.strip()

    m = _VALUE_KEYWORD.match(stripped)
    if m:
        return stripped[m.end():].strip()

    start, end = find_assignment(stripped)
    if start != -1:
        return stripped[end:].strip()

    return stripped


def resolve_assignment(
    lines: list[SourceLine],
    index: int,
    comments: list[Comment]
) -> tuple[int, str]:
    """Join an assignment's right-hand side across continuation lines.

    Trailing comments found outside open strings are appended to comments.
    Blank lines inside the continuation are skipped.

    Returns:
        (next_index, joined_text), next_index is UNRESOLVED when end of
        input is reached while the expression is still open.
    """
    n = len(lines)
    if index >= n:
        return UNRESOLVED, ""

    code, note = split_trailing_comment(lines[index].text)
    if note:
        comments.append(Comment(text=note, line=index))

    current = isolate_rhs(code)
    target = ""
    lp = index

    while True:
        piece = current.strip()
        dangling = has_dangling_end(piece)
        if piece.endswith("\\") and not quote_is_open(target):
            piece = piece[:-1].rstrip()
        if piece:
            target = f"{target} {piece}" if target else piece

        # A non-empty line without a dangling end closes the statement
        # once every bracket and quote is balanced
        if piece and not dangling and not delimiter_stack(target):
            return lp + 1, target

        lp += 1
        if lp >= n:
            return UNRESOLVED, target

        raw = lines[lp].text
        if quote_is_open(target):
            current = raw
        else:
            current, note = split_trailing_comment(raw)
            if note:
                comments.append(Comment(text=note, line=lp))


def resolve_header(
    lines: list[SourceLine],
    index: int,
    terminator: str,
    comments: list[Comment]
) -> tuple[int, str]:
    """Accumulate a block header until its terminator appears outside delimiters.

    Each line is stripped and the pieces are joined with single spaces.
    Fails (UNRESOLVED) when the text becomes balanced without the
    terminator, or when input ends first.

    Returns:
        (next_index, header_text)
    """
    n = len(lines)
    parts: list[str] = []
    lp = index

    while lp < n:
        raw = lines[lp].text
        if parts and quote_is_open(" ".join(parts)):
            code = raw
        else:
            code, note = split_trailing_comment(raw)
            if note:
                comments.append(Comment(text=note, line=lp))

        piece = code.strip()
        if piece:
            parts.append(piece)
            text = " ".join(parts)
            if find_terminator(text, terminator) != -1 and not delimiter_stack(text):
                return lp + 1, text
            if is_terminated(text):
                return UNRESOLVED, text

        lp += 1

    return UNRESOLVED, " ".join(parts)
