"""Lexical balance tracking over accumulated statement text.

A single left-to-right scan keeps a stack of open delimiters. Quote
families are mutually exclusive: while one is open, every other character
(brackets, other quotes, '#') is literal text until the same quote closes.
A closing bracket pops whatever bracket is on top; a stray closer with an
empty stack is ignored.
"""

from .languages import PYTHON_SPEC


# Longest first so '"""' wins over '"'
QUOTES = ('"""', "'''", '"', "'")
DOUBLE_QUOTES = ('"""', '"')
OPENERS = "([{"
CLOSERS = ")]}"


def _walk(text: str, quotes: tuple[str, ...] = QUOTES, brackets: bool = True):
    """Scan text and classify every character.

    Returns (stack, marks) where stack is the delimiter stack left open at
    the end of text and marks[i] is (in_string, depth) for character i.
    Quote characters themselves count as in_string. Depth is the bracket
    depth outside the character (an opening bracket sits at the outer
    depth).
    """
    stack: list[str] = []
    marks: list[tuple[bool, int]] = []
    i = 0
    n = len(text)

    while i < n:
        top = stack[-1] if stack else ""

        if top in quotes and top:
            # Inside a string: only an unescaped matching quote closes it
            if text[i] == "\\" and i + 1 < n:
                marks.extend([(True, len(stack))] * 2)
                i += 2
                continue
            if text.startswith(top, i):
                marks.extend([(True, len(stack))] * len(top))
                stack.pop()
                i += len(top)
                continue
            marks.append((True, len(stack)))
            i += 1
            continue

        quote = next((q for q in quotes if text.startswith(q, i)), None)
        if quote:
            marks.extend([(True, len(stack))] * len(quote))
            stack.append(quote)
            i += len(quote)
            continue

        ch = text[i]
        if brackets and ch in OPENERS:
            marks.append((False, len(stack)))
            stack.append(ch)
        elif brackets and ch in CLOSERS:
            if stack:
                stack.pop()
            marks.append((False, len(stack)))
        else:
            marks.append((False, len(stack)))
        i += 1

    return stack, marks


def delimiter_stack(text: str) -> list[str]:
    """Return the delimiters still open at the end of text, innermost last."""
    stack, _ = _walk(text)
    return stack


def has_dangling_end(text: str) -> bool:
    """Check whether text ends in punctuation that continues the statement."""
    stripped = text.rstrip()
    if not stripped or stripped.endswith("..."):
        return False
    return stripped[-1] in PYTHON_SPEC.dangling_chars


def is_terminated(text: str) -> bool:
    """Check whether accumulated text forms a complete statement.

    True iff no delimiter is left open and the text does not end in a
    dangling continuation character.
    """
    stripped = text.strip()
    if has_dangling_end(stripped):
        return False
    return not delimiter_stack(stripped)


def quote_is_open(text: str) -> bool:
    """Check whether a double or triple-double quote is unmatched at the end of text."""
    stack, _ = _walk(text, quotes=DOUBLE_QUOTES, brackets=False)
    return bool(stack)


def comment_offset(line: str) -> int:
    """Offset of the first '#' outside any quote, or -1."""
    _, marks = _walk(line, brackets=False)
    for i, (in_string, _depth) in enumerate(marks):
        if line[i] == "#" and not in_string:
            return i
    return -1


def extract_trailing_comment(line: str) -> str:
    """Return the raw '#...' comment at the end of a line, or ""."""
    offset = comment_offset(line)
    if offset == -1:
        return ""
    return line[offset:]


def remove_trailing_comment(line: str) -> str:
    """Return the line without its trailing comment."""
    offset = comment_offset(line)
    if offset == -1:
        return line
    return line[:offset]


def split_trailing_comment(line: str) -> tuple[str, str]:
    """Split a line into (code, comment text without the '#' marker)."""
    offset = comment_offset(line)
    if offset == -1:
        return line, ""
    return line[:offset], line[offset + 1:].strip()


def find_top_level(text: str, token: str, start: int = 0) -> int:
    """Offset of the first token outside strings and brackets, or -1."""
    _, marks = _walk(text)
    for i in range(start, len(text) - len(token) + 1):
        in_string, depth = marks[i]
        if not in_string and depth == 0 and text.startswith(token, i):
            return i
    return -1


def find_terminator(text: str, terminator: str = ":", start: int = 0) -> int:
    """Offset of the first top-level block terminator, skipping ':=' walrus operators."""
    offset = find_top_level(text, terminator, start)
    while offset != -1 and text.startswith("=", offset + len(terminator)):
        offset = find_top_level(text, terminator, offset + 1)
    return offset


def find_assignment(text: str) -> tuple[int, int]:
    """Locate the first top-level assignment operator.

    Returns (start, end) offsets of the operator including any augmenting
    character ('+=', '|=', ...), or (-1, -1). Comparison operators and
    keyword arguments inside brackets are skipped.
    """
    _, marks = _walk(text)
    for i, ch in enumerate(text):
        if ch != "=":
            continue
        in_string, depth = marks[i]
        if in_string or depth:
            continue
        prev = text[i - 1] if i else ""
        nxt = text[i + 1] if i + 1 < len(text) else ""
        if nxt == "=" or prev in "=<>!:":
            continue
        if prev and prev in "+-*/%&|":
            return i - 1, i + 1
        return i, i + 1
    return -1, -1


def mask_strings(text: str) -> str:
    """Replace string literal content (quotes included) with spaces.

    Offsets are preserved so positions in the masked text map back to the
    original text.
    """
    _, marks = _walk(text)
    return "".join(" " if marks[i][0] else ch for i, ch in enumerate(text))
