"""Construction of the PostgreSQL ``~=`` and ``<@`` geometric predicates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from pg_geometry.errors import GeometryError
from pg_geometry.models import GeometricKind

from .operands import Bound, BoundParameter, Column, Operand, SqlFragment, as_expression
from .rules import check_containment, check_same_as


class Relation(str, Enum):
    """Geometric relations and the server operator token for each."""

    SAME_AS = "~="
    IS_CONTAINED_BY = "<@"

    @property
    def operator(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Predicate:
    """A validated infix comparison between two geometric operands."""

    relation: Relation
    left: Bound | Column | SqlFragment
    right: Bound | Column | SqlFragment

    @property
    def operator(self) -> str:
        return self.relation.operator

    @property
    def kinds(self) -> tuple[GeometricKind, GeometricKind]:
        return self.left.kind, self.right.kind

    def to_sql(self, binds: list[BoundParameter]) -> str:
        return f"{self.left.to_sql(binds)} {self.operator} {self.right.to_sql(binds)}"

    def render(self) -> tuple[str, list[BoundParameter]]:
        """Return the predicate SQL with ``$n`` placeholders and its binds."""
        binds: list[BoundParameter] = []
        sql = self.to_sql(binds)
        return sql, binds


class PredicateBuilder:
    """Validates operand kinds against the rule tables and builds predicates."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("pg_geometry.expression.predicates")

    def build(self, relation: Relation, left: Operand, right: Operand) -> Predicate:
        relation = Relation(relation)
        left_expr = as_expression(left)
        right_expr = as_expression(right)

        try:
            if relation is Relation.SAME_AS:
                check_same_as(left_expr.kind, right_expr.kind)
            else:
                check_containment(left_expr.kind, right_expr.kind)
        except GeometryError:
            self._logger.warning(
                "predicate_rejected",
                extra={
                    "relation": relation.name,
                    "left_kind": left_expr.kind.value,
                    "right_kind": right_expr.kind.value,
                },
            )
            raise

        predicate = Predicate(relation=relation, left=left_expr, right=right_expr)
        self._logger.debug(
            "predicate_built",
            extra={
                "operator": predicate.operator,
                "left_kind": left_expr.kind.value,
                "right_kind": right_expr.kind.value,
            },
        )
        return predicate

    def same_as(self, left: Operand, right: Operand) -> Predicate:
        """Build ``left ~= right``, the usual notion of equality for geometric types."""
        return self.build(Relation.SAME_AS, left, right)

    def is_contained_by(self, left: Operand, right: Operand) -> Predicate:
        """Build ``left <@ right``."""
        return self.build(Relation.IS_CONTAINED_BY, left, right)


_default_builder = PredicateBuilder()


def build_predicate(relation: Relation, left: Operand, right: Operand) -> Predicate:
    return _default_builder.build(relation, left, right)


def same_as(left: Operand, right: Operand) -> Predicate:
    return _default_builder.same_as(left, right)


def is_contained_by(left: Operand, right: Operand) -> Predicate:
    return _default_builder.is_contained_by(left, right)
