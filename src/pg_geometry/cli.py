"""CLI-side helpers for turning command arguments into geometric values."""

from __future__ import annotations

from pg_geometry.models import Box, Circle, GeometricKind, Geometry, Point

_ARITY: dict[GeometricKind, int] = {
    GeometricKind.POINT: 2,
    GeometricKind.BOX: 4,
    GeometricKind.CIRCLE: 3,
}


def parse_geometry(kind: GeometricKind, values: list[float]) -> Geometry:
    """Build a value from flat coordinates.

    point: ``x y``; box: ``lower_x lower_y upper_x upper_y``; circle: ``x y radius``.
    """
    expected = _ARITY[kind]
    if len(values) != expected:
        raise ValueError(f"{kind.value} takes {expected} numbers, got {len(values)}")

    if kind is GeometricKind.POINT:
        return Point(values[0], values[1])
    if kind is GeometricKind.BOX:
        return Box(lower_left=Point(values[0], values[1]), upper_right=Point(values[2], values[3]))
    return Circle(center=Point(values[0], values[1]), radius=values[2])


def format_geometry(value: Geometry) -> str:
    """Render a value in PostgreSQL's text notation."""
    if isinstance(value, Point):
        return f"({value.x!r},{value.y!r})"
    if isinstance(value, Box):
        return f"{format_geometry(value.upper_right)},{format_geometry(value.lower_left)}"
    return f"<{format_geometry(value.center)},{value.radius!r}>"
