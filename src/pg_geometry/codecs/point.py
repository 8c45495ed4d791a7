"""Binary codec for the PostgreSQL ``point`` type."""

from __future__ import annotations

from pg_geometry.models import Point
from pg_geometry.wire import WireReader, WireWriter, require_size

POINT_SIZE = 16


def write_point(writer: WireWriter, point: Point) -> None:
    writer.write_f64(point.x)
    writer.write_f64(point.y)


def read_point(reader: WireReader) -> Point:
    x = reader.read_f64()
    y = reader.read_f64()
    return Point(x, y)


def encode_point(point: Point) -> bytes:
    """Encode ``point`` as 16 bytes: ``x`` then ``y``, big-endian f64."""
    writer = WireWriter()
    write_point(writer, point)
    return writer.getvalue()


def decode_point(data: bytes) -> Point:
    require_size(data, POINT_SIZE, "point")
    reader = WireReader(data, type_name="point")
    point = read_point(reader)
    reader.expect_end()
    return point
