"""Name lookup over a scope tree: local member search and outward lexical search."""

from typing import Optional

from ..parser.entities import ClassInfo, Container, Entity, Variable
from ..parser.tree import ScopeTree


def _find(collection: list, name: str) -> Optional[Entity]:
    for entity in collection:
        if entity.name == name:
            return entity
    return None


def get_member_name(scope: Container, name: str) -> Optional[Entity]:
    """Search only scope's direct classes, then methods, then variables.

    There is no outward search; an unrelated same-named entity in an
    enclosing scope is never returned.
    """
    if not name or scope is None:
        return None
    for collection in (scope.classes, scope.methods, scope.variables):
        found = _find(collection, name)
        if found is not None:
            return found
    return None


def get_object_name(tree: ScopeTree, scope: Container, name: str) -> Optional[Entity]:
    """Resolve name from scope outward to the file; the closest declaration wins."""
    current: Optional[Container] = scope
    while current is not None:
        found = get_member_name(current, name)
        if found is not None:
            return found
        current = tree.parent_of(current)
    return None


def _exists_outward(tree: ScopeTree, scope: Container, name: str, collection: str) -> bool:
    current: Optional[Container] = scope
    while current is not None:
        if _find(getattr(current, collection), name) is not None:
            return True
        current = tree.parent_of(current)
    return False


def is_class(tree: ScopeTree, scope: Container, name: str) -> bool:
    """Check whether a class called name is visible from scope."""
    return bool(name) and _exists_outward(tree, scope, name, "classes")


def is_variable(tree: ScopeTree, scope: Container, name: str) -> bool:
    """Check whether a variable called name is visible from scope."""
    return bool(name) and _exists_outward(tree, scope, name, "variables")


def enclosing_class(tree: ScopeTree, entity: Entity) -> Optional[ClassInfo]:
    """Return the nearest class that is entity itself or one of its ancestors."""
    if isinstance(entity, ClassInfo):
        return entity
    for ancestor in tree.ancestors(entity):
        if isinstance(ancestor, ClassInfo):
            return ancestor
    return None


def declaring_scope(tree: ScopeTree, variable: Variable) -> Optional[Container]:
    return tree.parent_of(variable)
