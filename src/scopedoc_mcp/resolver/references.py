"""Cross-reference computation over parsed variables.

For every group of same-named variables in a container, three lists are
computed from the assignment texts: classes referenced, calls made and
variables referenced. A name that does not resolve is left out; nothing
here raises for unresolvable input.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from ..parser.entities import ClassInfo, Comment, Container, Entity, MethodInfo, Variable
from ..parser.tree import ScopeTree
from .expressions import expression_entities, function_call_starts, function_class_chain, function_name
from .scope import declaring_scope, enclosing_class, get_member_name, get_object_name, is_class, is_variable


logger = logging.getLogger("scopedoc.resolver")

SELF_NAMES = ("self", "cls")

# "Name(" or "pkg.Name(" at the start of an assignment
_CONSTRUCTOR = re.compile(r"^\s*(?:[A-Za-z_]\w*\s*\.\s*)*([A-Za-z_]\w*)\s*\(")


@dataclass
class NameValues:
    """Distinct assignment texts of every variable sharing one name."""
    name: str
    values: list[str] = field(default_factory=list)


@dataclass
class CrossReference:
    """Resolved references of one variable-name group."""
    name: str
    values: list[str] = field(default_factory=list)
    objects: list[ClassInfo] = field(default_factory=list)
    calls: list[Entity] = field(default_factory=list)
    variables: list[Variable] = field(default_factory=list)


def group_by_name(variables: list[Variable]) -> list[NameValues]:
    """Group variables by name in declaration order, keeping unique values."""
    groups: dict[str, NameValues] = {}
    for variable in variables:
        group = groups.setdefault(variable.name, NameValues(name=variable.name))
        if variable.assignment not in group.values:
            group.values.append(variable.assignment)
    return list(groups.values())


def comments_for_name(variables: list[Variable], name: str) -> list[Comment]:
    """Concatenate the comments of every variable called name."""
    result = []
    for variable in variables:
        if variable.name == name:
            result.extend(variable.comments)
    return result


def _instance_class(tree: ScopeTree, variable: Variable, seen: set[int]) -> Optional[ClassInfo]:
    """Class a variable holds an instance of, when its assignment is a constructor call."""
    m = _CONSTRUCTOR.match(variable.assignment)
    if not m:
        return None
    scope = declaring_scope(tree, variable)
    if scope is None:
        return None
    # A bare constructor names a class visible from the declaring scope
    if not function_class_chain(variable.assignment, m.start(1)):
        found = get_object_name(tree, scope, m.group(1))
    else:
        found = resolve_call(tree, scope, variable.assignment, m.start(1), seen)
    return found if isinstance(found, ClassInfo) else None


def _scope_of(tree: ScopeTree, entity: Optional[Entity], seen: set[int]) -> Optional[Container]:
    """Container in which the next chain segment is searched."""
    if isinstance(entity, Container):
        return entity
    if isinstance(entity, Variable):
        if entity.id in seen:
            return None
        seen.add(entity.id)
        instance = _instance_class(tree, entity, seen)
        if instance is not None:
            return instance
        return declaring_scope(tree, entity)
    return None


def resolve_call(
    tree: ScopeTree,
    scope: Container,
    text: str,
    offset: int,
    seen: Optional[set[int]] = None
) -> Optional[Entity]:
    """Resolve the call starting at offset in text to a class or method.

    The first chain segment is looked up outward from scope (self/cls fall
    back to the enclosing class); every later segment, and the call target,
    only inside the previous segment's scope. A bare call is looked up
    among the members of scope itself.
    """
    if seen is None:
        seen = set()

    target = function_name(text, offset)
    chain = function_class_chain(text, offset)

    if not chain:
        found = get_member_name(scope, target)
    else:
        head = chain[0]
        current: Optional[Entity] = get_object_name(tree, scope, head) if head else None
        if current is None and head in SELF_NAMES:
            current = enclosing_class(tree, scope)

        for segment in chain[1:] + [target]:
            inner = _scope_of(tree, current, seen)
            if inner is None:
                current = None
                break
            current = get_member_name(inner, segment)
            if current is None:
                break
        found = current

    if isinstance(found, (ClassInfo, MethodInfo)):
        return found
    logger.debug(f"Unresolved call {'.'.join(chain + [target])} in {scope.name or scope.kind}")
    return None


def referenced_calls(tree: ScopeTree, scope: Container, text: str) -> list[Entity]:
    """Classes instantiated and methods called in text."""
    result = []
    for offset in function_call_starts(text):
        found = resolve_call(tree, scope, text, offset)
        if found is not None:
            result.append(found)
    return result


def referenced_objects(tree: ScopeTree, scope: Container, text: str) -> list[ClassInfo]:
    """Classes named in text and visible from scope."""
    result = []
    for name in expression_entities(text):
        if is_class(tree, scope, name):
            found = get_object_name(tree, scope, name)
            if isinstance(found, ClassInfo):
                result.append(found)
    return result


def referenced_variables(tree: ScopeTree, scope: Container, text: str) -> list[Variable]:
    """Variables named in text and visible from scope."""
    result = []
    for name in expression_entities(text):
        if is_variable(tree, scope, name):
            found = get_object_name(tree, scope, name)
            if isinstance(found, Variable):
                result.append(found)
    return result


def cross_references(tree: ScopeTree, scope: Container) -> list[CrossReference]:
    """Compute references for every variable-name group declared directly in scope."""
    result = []
    for group in group_by_name(scope.variables):
        ref = CrossReference(name=group.name, values=list(group.values))
        for value in group.values:
            ref.objects.extend(referenced_objects(tree, scope, value))
            ref.calls.extend(referenced_calls(tree, scope, value))
            ref.variables.extend(referenced_variables(tree, scope, value))
        result.append(ref)
    return result
