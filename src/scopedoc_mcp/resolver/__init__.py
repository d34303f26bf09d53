"""Resolver package for name lookup and cross-references over scope trees."""

from .scope import get_member_name, get_object_name, is_class, is_variable, enclosing_class
from .expressions import expression_entities, function_call_starts, function_class_chain, function_name
from .references import (
    NameValues,
    CrossReference,
    group_by_name,
    comments_for_name,
    resolve_call,
    referenced_calls,
    referenced_objects,
    referenced_variables,
    cross_references,
)

__all__ = [
    "get_member_name",
    "get_object_name",
    "is_class",
    "is_variable",
    "enclosing_class",
    "expression_entities",
    "function_call_starts",
    "function_class_chain",
    "function_name",
    "NameValues",
    "CrossReference",
    "group_by_name",
    "comments_for_name",
    "resolve_call",
    "referenced_calls",
    "referenced_objects",
    "referenced_variables",
    "cross_references",
]
