"""Entity dataclasses for the scope tree and qualified-name helpers."""

import re
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class Comment:
    """A single-line or block comment and the line it started on (0-indexed)."""
    text: str
    line: int


@dataclass
class Import:
    """One imported library or object."""
    library: str = ""               # "os" | "package.module"
    object_name: str = ""           # "path" for "from os import path", "" for "import os"
    indent: int = 0
    line: int = 0
    comments: list[Comment] = field(default_factory=list)
    id: int = -1                    # Arena index in the owning ScopeTree
    parent: Optional[int] = None    # Arena index of the owning container
    kind: str = "import"


@dataclass
class Variable:
    """An assignment, a value statement (return/yield/assert) or an expression statement."""
    name: str = ""                  # "" for anonymous expression statements
    assignment: str = ""            # Right-hand side, continuation lines joined with spaces
    operator: str = ""              # "=" | "+=" | ... | "" when none
    indent: int = 0
    line: int = 0
    comments: list[Comment] = field(default_factory=list)
    id: int = -1
    parent: Optional[int] = None
    kind: str = "variable"


@dataclass
class Container:
    """Shared shape of every scope-bearing entity."""
    name: str = ""
    parameters: str = ""
    indent: int = 0
    line: int = 0
    comments: list[Comment] = field(default_factory=list)
    classes: list["ClassInfo"] = field(default_factory=list)
    methods: list["MethodInfo"] = field(default_factory=list)
    variables: list[Variable] = field(default_factory=list)
    imports: list[Import] = field(default_factory=list)
    logic: list["LogicInfo"] = field(default_factory=list)
    id: int = -1
    parent: Optional[int] = None
    kind: str = "container"

    def collection_for(self, kind: str) -> list:
        """Return the child list that holds entities of the given kind."""
        collections = {
            "class": self.classes,
            "method": self.methods,
            "variable": self.variables,
            "import": self.imports,
            "logic": self.logic,
        }
        if kind not in collections:
            raise ValueError(f"Containers do not hold entities of kind: {kind}")
        return collections[kind]

    def has_children(self) -> bool:
        return bool(self.classes or self.methods or self.variables or self.imports or self.logic)

    def clear_all(self):
        """Drop every child and comment so the container can be parsed again."""
        self.comments.clear()
        self.classes.clear()
        self.methods.clear()
        self.variables.clear()
        self.imports.clear()
        self.logic.clear()


@dataclass
class ClassInfo(Container):
    kind: str = "class"


@dataclass
class MethodInfo(Container):
    kind: str = "method"


@dataclass
class LogicInfo(Container):
    """A for/if/try/except block. The keyword is stored as the name."""
    kind: str = "logic"


@dataclass
class FileInfo(Container):
    """Root container for one source file."""
    filename: str = ""              # "main.py"
    directory: str = ""             # Directory relative to the project base, "/"-separated
    path: str = ""                  # Full path as given by the caller
    kind: str = "file"


Entity = Union[ClassInfo, MethodInfo, LogicInfo, FileInfo, Variable, Import]


# Qualified-name tag per entity kind
KIND_TAGS = {
    "file": "_F_",
    "class": "_C_",
    "method": "_M_",
    "logic": "_B_",
    "variable": "_V_",
    "import": "_L_",
}

_NON_ALNUM = re.compile(r"[^0-9A-Za-z]+")


def sanitize(text: str) -> str:
    """Replace every run of non-alphanumeric characters with "_".

    Example: "src/utils" -> "src_utils"
    """
    return _NON_ALNUM.sub("_", text)


def local_name(entity: Entity) -> str:
    """Return the tagged, link-safe part an entity adds to its qualified name."""
    tag = KIND_TAGS[entity.kind]

    if isinstance(entity, FileInfo):
        return f"D_{sanitize(entity.directory)}{tag}{sanitize(entity.name)}"

    if isinstance(entity, Import):
        library = entity.library or entity.object_name
        result = f"{tag}{sanitize(library)}"
        if entity.library and entity.object_name:
            obj = "-asterisk-" if entity.object_name == "*" else sanitize(entity.object_name)
            result += f"_I_{obj}"
        return result

    if isinstance(entity, Variable):
        return f"{tag}{sanitize(entity.name) if entity.name else 'unnamed'}"

    return f"{tag}{sanitize(entity.name)}"
