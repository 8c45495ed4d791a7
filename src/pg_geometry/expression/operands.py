"""Typed SQL operands that geometric predicates are built from."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Union

from pg_geometry.codecs import encode
from pg_geometry.models import Box, Circle, GeometricKind, Geometry, Point
from pg_geometry.sql_types import sql_type_for


@dataclass(frozen=True, slots=True)
class BoundParameter:
    """Kind-tagged binary payload handed to the transport layer."""

    kind: GeometricKind
    oid: int
    payload: bytes


class Expression(Protocol):
    """Anything with a geometric kind that can render itself into SQL."""

    kind: GeometricKind

    def to_sql(self, binds: list[BoundParameter]) -> str:
        """Render this operand, appending any bind parameters it needs."""


@dataclass(frozen=True, slots=True)
class Bound:
    """A geometric value sent as a positional bind parameter."""

    value: Geometry
    payload: bytes = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", encode(self.value))

    @property
    def kind(self) -> GeometricKind:
        return self.value.kind

    def parameter(self) -> BoundParameter:
        return BoundParameter(kind=self.kind, oid=sql_type_for(self.kind).oid, payload=self.payload)

    def to_sql(self, binds: list[BoundParameter]) -> str:
        binds.append(self.parameter())
        return f"${len(binds)}"


@dataclass(frozen=True, slots=True)
class Column:
    """Reference to a table column declared with a geometric type."""

    name: str
    kind: GeometricKind
    table: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", GeometricKind(self.kind))

    def to_sql(self, binds: list[BoundParameter]) -> str:
        return f"{self.table}.{self.name}" if self.table else self.name


@dataclass(frozen=True, slots=True)
class SqlFragment:
    """Raw SQL typed as a geometric kind, e.g. ``point '(3, 4)'``."""

    text: str
    kind: GeometricKind

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", GeometricKind(self.kind))

    def to_sql(self, binds: list[BoundParameter]) -> str:
        return self.text


Operand = Union[Geometry, Bound, Column, SqlFragment]


def as_expression(operand: Operand) -> Bound | Column | SqlFragment:
    """Coerce a plain geometric value into a bound parameter."""
    if isinstance(operand, (Point, Box, Circle)):
        return Bound(operand)
    if isinstance(operand, (Bound, Column, SqlFragment)):
        return operand
    raise TypeError(f"{type(operand).__name__} cannot be used as a geometric operand")
