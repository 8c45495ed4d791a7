"""PostgreSQL type metadata for the geometric kinds."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from pg_geometry.models import GeometricKind


@dataclass(frozen=True, slots=True)
class SqlType:
    name: str
    oid: int
    array_oid: int
    wire_size: int


SQL_TYPES = MappingProxyType(
    {
        GeometricKind.POINT: SqlType(name="point", oid=600, array_oid=1017, wire_size=16),
        GeometricKind.BOX: SqlType(name="box", oid=603, array_oid=1020, wire_size=32),
        GeometricKind.CIRCLE: SqlType(name="circle", oid=718, array_oid=719, wire_size=24),
    }
)

_KIND_BY_OID = MappingProxyType({sql_type.oid: kind for kind, sql_type in SQL_TYPES.items()})


def sql_type_for(kind: GeometricKind) -> SqlType:
    return SQL_TYPES[GeometricKind(kind)]


def kind_for_oid(oid: int) -> GeometricKind:
    """Map a server type OID back to its geometric kind."""
    if oid not in _KIND_BY_OID:
        raise KeyError(f"Unknown geometric type oid: {oid}")
    return _KIND_BY_OID[oid]
