"""Geometric operands, operator rules and predicate construction."""

from .operands import Bound, BoundParameter, Column, Expression, Operand, SqlFragment, as_expression
from .predicates import Predicate, PredicateBuilder, Relation, build_predicate, is_contained_by, same_as
from .rules import (
    CONTAINMENT_RULES,
    SAME_AS_KINDS,
    can_be_contained_by,
    check_containment,
    check_same_as,
    containment_bounds,
    containment_matrix,
    supports_same_as,
)

__all__ = [
    "CONTAINMENT_RULES",
    "SAME_AS_KINDS",
    "Bound",
    "BoundParameter",
    "Column",
    "Expression",
    "Operand",
    "Predicate",
    "PredicateBuilder",
    "Relation",
    "SqlFragment",
    "as_expression",
    "build_predicate",
    "can_be_contained_by",
    "check_containment",
    "check_same_as",
    "containment_bounds",
    "containment_matrix",
    "supports_same_as",
]
