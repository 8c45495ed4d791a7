"""Structured (dict / JSON) serialization of geometric values."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from pydantic import TypeAdapter

from pg_geometry.models import Box, Circle, GeometricKind, Geometry, Point, kind_of

ADAPTERS = MappingProxyType(
    {
        GeometricKind.POINT: TypeAdapter(Point),
        GeometricKind.BOX: TypeAdapter(Box),
        GeometricKind.CIRCLE: TypeAdapter(Circle),
    }
)


def adapter_for(kind: GeometricKind) -> TypeAdapter:
    return ADAPTERS[GeometricKind(kind)]


def dump_python(value: Geometry) -> dict[str, Any]:
    """Return ``value`` as nested plain dicts, e.g. ``{"x": 3.0, "y": 4.0}``."""
    return adapter_for(kind_of(value)).dump_python(value)


def load_python(kind: GeometricKind, data: dict[str, Any]) -> Geometry:
    return adapter_for(kind).validate_python(data)


def dump_json(value: Geometry) -> bytes:
    return adapter_for(kind_of(value)).dump_json(value)


def load_json(kind: GeometricKind, data: str | bytes) -> Geometry:
    """Parse JSON into a value; raises ``pydantic.ValidationError`` on bad input."""
    return adapter_for(kind).validate_json(data)
