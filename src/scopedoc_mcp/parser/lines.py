"""Source line store: ordered, indexed lines of one input file."""

import re
from dataclasses import dataclass


_INDENT = re.compile(r"^[ \t]*")


@dataclass(frozen=True)
class SourceLine:
    """One line of source text and its 0-based position in the file."""
    index: int
    text: str

    @property
    def indent(self) -> int:
        """Count of leading space/tab characters."""
        return len(_INDENT.match(self.text).group(0))

    def is_blank(self) -> bool:
        return not self.text.strip()


def split_lines(content: str) -> list[SourceLine]:
    """Split raw file content into SourceLines.

    Strips a UTF-8 byte order mark and normalizes line endings. An empty
    file yields an empty list.
    """
    content = content.lstrip("\ufeff")
    return [SourceLine(index=i, text=text) for i, text in enumerate(content.splitlines())]
