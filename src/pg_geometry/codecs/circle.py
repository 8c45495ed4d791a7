"""Binary codec for the PostgreSQL ``circle`` type."""

from __future__ import annotations

from pg_geometry.codecs.point import read_point, write_point
from pg_geometry.models import Circle
from pg_geometry.wire import WireReader, WireWriter, require_size

CIRCLE_SIZE = 24


def write_circle(writer: WireWriter, circle: Circle) -> None:
    write_point(writer, circle.center)
    writer.write_f64(circle.radius)


def read_circle(reader: WireReader) -> Circle:
    center = read_point(reader)
    radius = reader.read_f64()
    return Circle(center=center, radius=radius)


def encode_circle(circle: Circle) -> bytes:
    writer = WireWriter()
    write_circle(writer, circle)
    return writer.getvalue()


def decode_circle(data: bytes) -> Circle:
    require_size(data, CIRCLE_SIZE, "circle")
    reader = WireReader(data, type_name="circle")
    circle = read_circle(reader)
    reader.expect_end()
    return circle
