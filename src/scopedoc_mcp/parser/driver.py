"""Parse driver: the per-scope scan loop and the file entry point."""

import logging
import posixpath
from typing import Optional

from .balance import split_trailing_comment
from .context import RunContext
from .entities import Comment, Container, FileInfo
from .lines import SourceLine, split_lines
from .recognizers import RECOGNIZERS
from .tree import ScopeTree


logger = logging.getLogger("scopedoc.parser")


def parse_scope(
    tree: ScopeTree,
    scope: Container,
    lines: list[SourceLine],
    index: int,
    indent_floor: int,
    ctx: RunContext
) -> int:
    """Scan lines into scope until a line falls below indent_floor or input ends.

    Args:
        tree: Tree that owns scope
        scope: Container receiving the recognized children
        lines: Every line of the file
        index: First line to scan
        indent_floor: Minimum indent of a line belonging to this scope
        ctx: Run context for counters

    Returns:
        Index of the first line not consumed by this scope.
    """
    pending: list[Comment] = []

    while index < len(lines):
        line = lines[index]

        if line.is_blank():
            # A blank line detaches pending comments from whatever follows
            scope.comments.extend(pending)
            pending.clear()
            index += 1
            continue

        if line.indent < indent_floor:
            break

        start = index
        for recognizer in RECOGNIZERS:
            if recognizer.match_prefix(line.text):
                _, index = recognizer.parse(tree, scope, lines, index, indent_floor, pending, ctx)
                break

        if index == start:
            # Inert line: decorator, pass, one-line block, unterminated statement
            note = split_trailing_comment(line.text)[1]
            if note:
                pending.append(Comment(text=note, line=index))
            ctx.count("inert_lines")
            logger.debug(f"Inert line {index + 1}: {line.text.strip()[:60]}")
            index += 1

    scope.comments.extend(pending)
    return index


def parse_lines(tree: ScopeTree, lines: list[SourceLine], ctx: RunContext) -> ScopeTree:
    """Parse lines into the tree's file container."""
    parse_scope(tree, tree.file, lines, 0, 0, ctx)
    return tree


def parse_file(
    content: str,
    filename: str,
    directory: str = "",
    ctx: Optional[RunContext] = None
) -> ScopeTree:
    """Parse one source file into a scope tree.

    Args:
        content: Raw source text
        filename: File name, optionally with a path ("pkg/main.py")
        directory: Directory relative to the documentation root
        ctx: Run context; a fresh one is used when omitted

    Returns:
        ScopeTree rooted at the file's FileInfo
    """
    if ctx is None:
        ctx = RunContext()

    base = filename.replace("\\", "/").rsplit("/", 1)[-1]
    name = base.rsplit(".", 1)[0] if "." in base else base
    path = posixpath.join(directory, filename) if directory else filename

    tree = ScopeTree(FileInfo(name=name, filename=base, directory=directory, path=path))
    lines = split_lines(content)

    ctx.count("files")
    ctx.count("lines", len(lines))
    if ctx.verbosity >= 2:
        logger.info(f"Parsing file: {path} {len(lines)} lines")

    parse_lines(tree, lines, ctx)

    if ctx.verbosity >= 2:
        logger.info(
            f"Parsed {path}: {ctx.get('classes')} classes, {ctx.get('methods')} methods, "
            f"{ctx.get('variables')} variables, {ctx.get('imports')} imports"
        )
    return tree


def reparse_file(tree: ScopeTree, content: str, ctx: Optional[RunContext] = None) -> ScopeTree:
    """Clear a tree and parse new content into the same file container."""
    if ctx is None:
        ctx = RunContext()
    tree.clear_all()
    return parse_lines(tree, split_lines(content), ctx)
