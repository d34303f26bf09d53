"""Walk scope trees for outlines and cross-reference passes."""

from typing import Iterator

from .entities import Container, Entity, Import, Variable
from .tree import ScopeTree


def iter_children(container: Container) -> list[Entity]:
    """Return every direct child of a container in source order."""
    children = (
        list(container.imports)
        + list(container.classes)
        + list(container.methods)
        + list(container.logic)
        + list(container.variables)
    )
    return sorted(children, key=lambda e: (e.line, e.id))


def walk_containers(container: Container) -> Iterator[Container]:
    """Yield a container and every nested container, depth first in source order."""
    yield container
    for child in iter_children(container):
        if isinstance(child, Container):
            yield from walk_containers(child)


def flatten_tree(container: Container, depth: int = 0) -> list[tuple[Entity, int]]:
    """Flatten a container's descendants with depth information.

    Returns list of (entity, depth) tuples for indentation.
    """
    result = []
    for child in iter_children(container):
        result.append((child, depth))
        if isinstance(child, Container):
            result.extend(flatten_tree(child, depth + 1))
    return result


def entity_to_dict(tree: ScopeTree, entity: Entity, recursive: bool = True) -> dict:
    """Convert an entity to a JSON-ready dict. Lines are 1-based."""
    result = {
        "kind": entity.kind,
        "name": getattr(entity, "name", ""),
        "qualified_name": tree.qualified_name(entity),
        "line": entity.line + 1,
        "indent": entity.indent,
    }

    if isinstance(entity, Import):
        result["name"] = entity.object_name or entity.library
        result["library"] = entity.library
        result["object"] = entity.object_name
    elif isinstance(entity, Variable):
        result["operator"] = entity.operator
        result["assignment"] = entity.assignment
    else:
        result["parameters"] = entity.parameters

    if entity.comments:
        result["comments"] = [c.text for c in entity.comments]

    if recursive and isinstance(entity, Container):
        children = iter_children(entity)
        if children:
            result["children"] = [entity_to_dict(tree, c) for c in children]

    return result
