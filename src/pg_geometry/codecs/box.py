"""Binary codec for the PostgreSQL ``box`` type.

By convention a box is written as ``(lower left, upper right)`` but the server
stores it as ``[high.x, high.y, low.x, low.y]``, so the upper right corner goes
on the wire first. The server reorders corners itself when they are not in
convention; this codec only swaps the order symmetrically.
"""

from __future__ import annotations

from pg_geometry.codecs.point import read_point, write_point
from pg_geometry.models import Box
from pg_geometry.wire import WireReader, WireWriter, require_size

BOX_SIZE = 32


def write_box(writer: WireWriter, box: Box) -> None:
    write_point(writer, box.upper_right)
    write_point(writer, box.lower_left)


def read_box(reader: WireReader) -> Box:
    upper_right = read_point(reader)
    lower_left = read_point(reader)
    return Box(lower_left=lower_left, upper_right=upper_right)


def encode_box(box: Box) -> bytes:
    writer = WireWriter()
    write_box(writer, box)
    return writer.getvalue()


def decode_box(data: bytes) -> Box:
    """Decode 32 wire bytes into a box in ``(lower left, upper right)`` order."""
    require_size(data, BOX_SIZE, "box")
    reader = WireReader(data, type_name="box")
    box = read_box(reader)
    reader.expect_end()
    return box
