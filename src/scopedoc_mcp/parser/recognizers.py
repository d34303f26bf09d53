"""Entity recognizers: one per entity kind.

Each recognizer offers a fast ``match_prefix`` test on a raw line and a full
``parse`` that either appends a complete entity to its parent (and recurses
into the body for block kinds) or consumes nothing. ``parse`` returns
``(entity, next_index)``; on failure the entity is None and next_index is
the start index unchanged.
"""

import keyword
import logging
import re
from typing import Optional

from .balance import find_terminator, find_top_level, is_terminated, split_trailing_comment
from .comments import COMMENT_PATTERN, is_block_marker, read_comment, read_comment_group
from .context import RunContext
from .continuation import UNRESOLVED, resolve_assignment, resolve_header
from .entities import ClassInfo, Comment, Container, FileInfo, Import, LogicInfo, MethodInfo, Variable
from .languages import PYTHON_SPEC
from .lines import SourceLine
from .tree import ScopeTree


logger = logging.getLogger("scopedoc.parser")


class Recognizer:
    """Base class: prefix test plus full multi-line parse."""
    kind = ""
    pattern: re.Pattern = re.compile(r"(?!)")

    def match_prefix(self, text: str) -> Optional[re.Match]:
        return self.pattern.match(text)

    def parse(
        self,
        tree: ScopeTree,
        parent: Container,
        lines: list[SourceLine],
        index: int,
        indent_floor: int,
        pending: list[Comment],
        ctx: RunContext
    ) -> tuple[Optional[object], int]:
        raise NotImplementedError


def _claim_comments(entity, pending: list[Comment], notes: list[Comment]):
    """Move pending comments, then the entity's own trailing notes, onto the entity."""
    entity.comments.extend(pending)
    entity.comments.extend(notes)
    pending.clear()


class CommentRecognizer(Recognizer):
    """'#' comment groups and triple-quoted block comments."""
    kind = "comment"
    pattern = COMMENT_PATTERN

    def parse(self, tree, parent, lines, index, indent_floor, pending, ctx):
        m = self.match_prefix(lines[index].text)
        if not m:
            return None, index
        indent = len(m.group("space"))
        if indent < indent_floor:
            return None, index

        if not is_block_marker(m.group("marker")):
            before = len(pending)
            next_index = read_comment_group(lines, index, indent, pending)
            ctx.count("comments", len(pending) - before)
            if not isinstance(parent, FileInfo) and not parent.has_children():
                # Comments opening a block body describe the block itself
                parent.comments.extend(pending)
                pending.clear()
            return None, next_index

        comment, next_index = read_comment(lines, index, indent_floor)
        if comment is None:
            ctx.count("unterminated")
            logger.debug(f"Unterminated block comment at line {index + 1}")
            return None, index

        if comment.text:
            ctx.count("comments")
            if not parent.has_children():
                # Docstring: leading text of the scope belongs to the scope
                parent.comments.extend(pending)
                pending.clear()
                parent.comments.append(comment)
            else:
                pending.append(comment)
        return comment, next_index


class ImportRecognizer(Recognizer):
    """'import a, b' and 'from x import a, b' statements."""
    kind = "import"
    pattern = re.compile(
        r"^(?P<space>[ \t]*)(?:from\s+(?P<library>[\w.]+)\s+)?import\s+(?P<names>.*?)\s*$"
    )

    def parse(self, tree, parent, lines, index, indent_floor, pending, ctx):
        code, note = split_trailing_comment(lines[index].text)
        m = self.match_prefix(code)
        if not m:
            return None, index
        indent = len(m.group("space"))
        if indent < indent_floor:
            return None, index

        notes = [Comment(text=note, line=index)] if note else []
        next_index = index + 1

        # A trailing '*' is "import *", not continuation
        if not code.rstrip().endswith("*") and not is_terminated(code):
            # Parenthesised or backslash-continued import list
            notes = []
            next_index, joined = resolve_assignment(lines, index, notes)
            if next_index == UNRESOLVED:
                ctx.count("unterminated")
                logger.debug(f"Unterminated import at line {index + 1}")
                return None, index
            m = self.match_prefix(joined)
            if not m:
                return None, index

        library = m.group("library") or ""
        names = [
            _import_target(n)
            for n in m.group("names").replace("(", " ").replace(")", " ").replace("\\", " ").split(",")
        ]
        names = [n for n in names if n]
        if not names:
            return None, index

        imports = []
        for name in names:
            if library:
                entity = Import(library=library, object_name=name, indent=indent, line=index)
            else:
                entity = Import(library=name, indent=indent, line=index)
            tree.add_child(parent, entity)
            imports.append(entity)

        # Comments describe the statement, so only the first import claims them
        _claim_comments(imports[0], pending, notes)
        ctx.count("imports", len(imports))
        return imports[0], next_index


def _import_target(name: str) -> str:
    """Drop an 'as alias' suffix: "numpy as np" -> "numpy"."""
    parts = name.split()
    return parts[0] if parts else ""


def _header_is_complete(header: str) -> bool:
    """The first top-level ':' must end the header; 'class A: pass' is not a block."""
    colon = find_terminator(header, ":")
    return colon != -1 and colon == len(header) - 1


def _parenthesised(header: str, start: int) -> Optional[tuple[str, int]]:
    """Return (contents, close_offset) of the bracket group opening at or after start."""
    open_offset = header.find("(", start)
    if open_offset == -1 or header[start:open_offset].strip():
        return None
    close = find_top_level(header, ")", open_offset + 1)
    if close == -1:
        return None
    return header[open_offset + 1:close].strip(), close


class BlockRecognizer(Recognizer):
    """Shared parse for class, method and logic headers terminated by ':'."""
    counter = ""

    def build(self, m: re.Match, header: str, indent: int, index: int) -> Optional[Container]:
        raise NotImplementedError

    def parse(self, tree, parent, lines, index, indent_floor, pending, ctx):
        m = self.match_prefix(lines[index].text)
        if not m:
            return None, index
        indent = len(m.group("space"))
        if indent < indent_floor:
            return None, index

        notes: list[Comment] = []
        next_index, header = resolve_header(lines, index, ":", notes)
        if next_index == UNRESOLVED:
            ctx.count("unterminated")
            logger.debug(f"Unresolved {self.kind} header at line {index + 1}: {header[:60]}")
            return None, index
        if not _header_is_complete(header):
            return None, index

        entity = self.build(self.pattern.match(header), header, indent, index)
        if entity is None:
            return None, index

        _claim_comments(entity, pending, notes)
        tree.add_child(parent, entity)
        ctx.count(self.counter)

        from .driver import parse_scope
        next_index = parse_scope(tree, entity, lines, next_index, indent + 1, ctx)
        return entity, next_index


class ClassRecognizer(BlockRecognizer):
    kind = "class"
    counter = "classes"
    pattern = re.compile(r"^(?P<space>[ \t]*)class\s+(?P<name>[^:(]+)")

    def build(self, m, header, indent, index):
        if not m:
            return None
        name = m.group("name").strip()
        parameters = ""
        group = _parenthesised(header, m.end("name"))
        if group:
            parameters = group[0]
        return ClassInfo(name=name, parameters=parameters, indent=indent, line=index)


class MethodRecognizer(BlockRecognizer):
    """'def' and 'async def', with an optional '-> annotation'."""
    kind = "method"
    counter = "methods"
    pattern = re.compile(r"^(?P<space>[ \t]*)(?:async\s+)?def\s+(?P<name>[^:(]+)")

    def build(self, m, header, indent, index):
        if not m:
            return None
        group = _parenthesised(header, m.end("name"))
        if group is None:
            return None
        parameters, close = group
        tail = header[close + 1:-1].strip()
        if tail and not tail.startswith("->"):
            return None
        return MethodInfo(name=m.group("name").strip(), parameters=parameters, indent=indent, line=index)


class LogicRecognizer(BlockRecognizer):
    """for/if/try/except blocks. The keyword is the name."""
    kind = "logic"
    counter = "logic"
    pattern = re.compile(
        r"^(?P<space>[ \t]*)(?P<keyword>%s)\b" % "|".join(PYTHON_SPEC.logic_keywords)
    )

    def build(self, m, header, indent, index):
        if not m:
            return None
        keyword = m.group("keyword")
        parameters = header[m.end("keyword"):-1].strip()
        return LogicInfo(name=keyword, parameters=parameters, indent=indent, line=index)


class VariableRecognizer(Recognizer):
    """Assignments, value statements and anonymous expression statements."""
    kind = "variable"

    value_pattern = re.compile(
        r"^(?P<space>[ \t]*)(?P<keyword>%s)\b\s*(?P<content>.*)$" % "|".join(PYTHON_SPEC.value_keywords)
    )
    annotated_pattern = re.compile(
        r"^(?P<space>[ \t]*)(?P<name>[A-Za-z_][\w.]*)\s*:\s*[^=]+?\s*(?P<operator>=)(?!=)\s*(?P<content>.*)$"
    )
    assignment_pattern = re.compile(
        r"^(?P<space>[ \t]*)(?P<name>[^\s(=<>!,:*/]+?(?:\s*,\s*[^\s(=<>!,:*/]+?)*)\s*"
        r"(?P<operator>%s)(?!=)\s*(?P<content>.*)$"
        % "|".join(re.escape(op) for op in PYTHON_SPEC.assignment_operators)
    )
    anonymous_pattern = re.compile(r"^(?P<space>[ \t]*)(?P<content>[\w({\[\"'.\-~].*)$")

    def match_prefix(self, text: str) -> Optional[re.Match]:
        code = split_trailing_comment(text)[0].rstrip()
        for pattern in (self.value_pattern, self.annotated_pattern, self.assignment_pattern):
            m = pattern.match(code)
            if m and not keyword.iskeyword(m.groupdict().get("name") or ""):
                return m
        m = self.anonymous_pattern.match(code)
        if m and m.group("content").strip() not in PYTHON_SPEC.inert_statements:
            return m
        return None

    def parse(self, tree, parent, lines, index, indent_floor, pending, ctx):
        raw = lines[index].text
        m = self.match_prefix(raw)
        if not m:
            return None, index
        indent = len(m.group("space"))
        if indent < indent_floor:
            return None, index

        fields = m.groupdict()
        name = fields.get("keyword") or fields.get("name") or ""
        operator = fields.get("operator") or ""
        content = fields["content"].strip()

        if is_terminated(content):
            note = split_trailing_comment(raw)[1]
            notes = [Comment(text=note, line=index)] if note else []
            next_index = index + 1
        else:
            notes = []
            next_index, content = resolve_assignment(lines, index, notes)
            if next_index == UNRESOLVED:
                ctx.count("unterminated")
                logger.debug(f"Unterminated expression at line {index + 1}: {raw.strip()[:60]}")
                return None, index

        entity = Variable(
            name=name.strip(),
            assignment=content,
            operator=operator,
            indent=indent,
            line=index,
        )
        _claim_comments(entity, pending, notes)
        tree.add_child(parent, entity)
        ctx.count("variables")
        return entity, next_index


# Fixed scan priority; the first recognizer whose prefix matches owns the line
RECOGNIZERS: tuple[Recognizer, ...] = (
    CommentRecognizer(),
    ImportRecognizer(),
    ClassRecognizer(),
    MethodRecognizer(),
    LogicRecognizer(),
    VariableRecognizer(),
)
