"""Parser package: line-oriented scanning of indentation-structured source."""

from .lines import SourceLine, split_lines
from .languages import LanguageSpec, LANGUAGE_REGISTRY, LANGUAGE_EXTENSIONS, PYTHON_SPEC, language_for_filename
from .balance import (
    is_terminated,
    quote_is_open,
    extract_trailing_comment,
    remove_trailing_comment,
    split_trailing_comment,
)
from .continuation import UNRESOLVED, resolve_assignment, resolve_header
from .context import RunContext
from .entities import (
    Comment,
    Import,
    Variable,
    Container,
    ClassInfo,
    MethodInfo,
    LogicInfo,
    FileInfo,
    Entity,
    local_name,
)
from .tree import ScopeTree
from .driver import parse_file, parse_scope, reparse_file
from .hierarchy import iter_children, walk_containers, flatten_tree, entity_to_dict

__all__ = [
    "SourceLine",
    "split_lines",
    "LanguageSpec",
    "LANGUAGE_REGISTRY",
    "LANGUAGE_EXTENSIONS",
    "PYTHON_SPEC",
    "language_for_filename",
    "is_terminated",
    "quote_is_open",
    "extract_trailing_comment",
    "remove_trailing_comment",
    "split_trailing_comment",
    "UNRESOLVED",
    "resolve_assignment",
    "resolve_header",
    "RunContext",
    "Comment",
    "Import",
    "Variable",
    "Container",
    "ClassInfo",
    "MethodInfo",
    "LogicInfo",
    "FileInfo",
    "Entity",
    "local_name",
    "ScopeTree",
    "parse_file",
    "parse_scope",
    "reparse_file",
    "iter_children",
    "walk_containers",
    "flatten_tree",
    "entity_to_dict",
]
