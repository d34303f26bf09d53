"""Identifier and call extraction from assignment text.

String literal content is masked before scanning, so names inside quotes
are never reported.
"""

import keyword
import re

from ..parser.balance import mask_strings


IDENTIFIER = re.compile(r"(?<![\w])[A-Za-z_]\w*")
CALL_START = re.compile(r"(?<![\w])([A-Za-z_]\w*)\s*\(")


def expression_entities(text: str) -> list[str]:
    """Every identifier token in order, duplicates preserved, keywords skipped.

    Example: "foo(a, b) + a" -> ["foo", "a", "b", "a"]
    """
    masked = mask_strings(text)
    return [
        m.group(0)
        for m in IDENTIFIER.finditer(masked)
        if not keyword.iskeyword(m.group(0))
    ]


def function_call_starts(text: str) -> list[int]:
    """Offsets of the first character of every called identifier.

    Example: "a.b(c(1))" -> [2, 4]
    """
    masked = mask_strings(text)
    return [
        m.start(1)
        for m in CALL_START.finditer(masked)
        if not keyword.iskeyword(m.group(1))
    ]


def function_name(text: str, offset: int) -> str:
    """The identifier starting at offset: the call target."""
    m = IDENTIFIER.match(text, offset)
    return m.group(0) if m else ""


def function_class_chain(text: str, offset: int) -> list[str]:
    """Dotted-access identifiers before the call at offset, outermost first.

    "a.b.c()" at c gives ["a", "b"]. A segment that is not a plain
    identifier (a call result, a subscript, a literal) is reported as ""
    and ends the walk, so such chains never resolve.
    """
    masked = mask_strings(text)
    chain: list[str] = []
    pos = offset

    while True:
        i = pos - 1
        while i >= 0 and masked[i] in " \t":
            i -= 1
        if i < 0 or masked[i] != ".":
            break

        i -= 1
        while i >= 0 and masked[i] in " \t":
            i -= 1
        end = i + 1
        while i >= 0 and (masked[i].isalnum() or masked[i] == "_"):
            i -= 1
        segment = masked[i + 1:end]

        if not segment or not IDENTIFIER.fullmatch(segment):
            chain.insert(0, "")
            break
        chain.insert(0, segment)
        pos = i + 1

    return chain
