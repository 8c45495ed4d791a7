from __future__ import annotations

import pytest

from pg_geometry.errors import MalformedInputError
from pg_geometry.wire import WireReader, WireWriter


def test_writer_appends_network_order_floats() -> None:
    writer = WireWriter()
    writer.write_f64(1.0)
    writer.write(b"\x01")

    assert len(writer) == 9
    assert writer.getvalue() == b"\x3f\xf0\x00\x00\x00\x00\x00\x00\x01"


def test_reader_read_exact_does_not_consume_on_underflow() -> None:
    reader = WireReader(b"\x00" * 10, type_name="point")
    reader.read_exact(4)

    with pytest.raises(MalformedInputError):
        reader.read_exact(8)

    assert reader.remaining == 6
    assert reader.read_exact(6) == b"\x00" * 6
    reader.expect_end()
