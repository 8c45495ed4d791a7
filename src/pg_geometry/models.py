from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class GeometricKind(str, Enum):
    POINT = "point"
    BOX = "box"
    CIRCLE = "circle"


@dataclass(frozen=True, slots=True)
class Point:
    """A PostgreSQL ``point``: a pair of 64 bit floats ``(x, y)``."""

    kind: ClassVar[GeometricKind] = GeometricKind.POINT

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Box:
    """A PostgreSQL ``box`` written as ``(lower left, upper right)``.

    Corners are kept exactly as given. The server reorders them on its side,
    so no check is made that ``lower_left`` actually lies below and left of
    ``upper_right``.
    """

    kind: ClassVar[GeometricKind] = GeometricKind.BOX

    lower_left: Point
    upper_right: Point


@dataclass(frozen=True, slots=True)
class Circle:
    """A PostgreSQL ``circle``: center point and radius."""

    kind: ClassVar[GeometricKind] = GeometricKind.CIRCLE

    center: Point
    radius: float


Geometry = Union[Point, Box, Circle]


def kind_of(value: object) -> GeometricKind:
    """Return the geometric kind of a value or typed expression."""
    kind = getattr(value, "kind", None)
    if isinstance(kind, GeometricKind):
        return kind
    raise TypeError(f"{type(value).__name__} is not a geometric value or expression")
