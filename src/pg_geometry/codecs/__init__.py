"""Binary codecs for PostgreSQL geometric types, dispatched by kind."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable

from pg_geometry.errors import MalformedInputError
from pg_geometry.models import GeometricKind, Geometry, kind_of

from .box import BOX_SIZE, decode_box, encode_box
from .circle import CIRCLE_SIZE, decode_circle, encode_circle
from .point import POINT_SIZE, decode_point, encode_point

_logger = logging.getLogger("pg_geometry.codecs")


@dataclass(frozen=True, slots=True)
class GeometryCodec:
    kind: GeometricKind
    size: int
    encode: Callable[[Geometry], bytes]
    decode: Callable[[bytes], Geometry]


CODECS = MappingProxyType(
    {
        GeometricKind.POINT: GeometryCodec(GeometricKind.POINT, POINT_SIZE, encode_point, decode_point),
        GeometricKind.BOX: GeometryCodec(GeometricKind.BOX, BOX_SIZE, encode_box, decode_box),
        GeometricKind.CIRCLE: GeometryCodec(GeometricKind.CIRCLE, CIRCLE_SIZE, encode_circle, decode_circle),
    }
)


def codec_for(kind: GeometricKind) -> GeometryCodec:
    return CODECS[GeometricKind(kind)]


def encode(value: Geometry) -> bytes:
    """Encode any geometric value using the codec for its kind."""
    return codec_for(kind_of(value)).encode(value)


def decode(kind: GeometricKind, data: bytes) -> Geometry:
    """Decode wire bytes of the given kind."""
    codec = codec_for(kind)
    try:
        return codec.decode(data)
    except MalformedInputError as exc:
        _logger.debug(
            "geometry_decode_rejected",
            extra={"kind": codec.kind.value, "expected": exc.expected, "actual": exc.actual},
        )
        raise


def decode_nullable(kind: GeometricKind, data: bytes | None) -> Geometry | None:
    """Decode a nullable column value; SQL ``NULL`` arrives as ``None``."""
    if data is None:
        return None
    return decode(kind, data)


__all__ = [
    "BOX_SIZE",
    "CIRCLE_SIZE",
    "CODECS",
    "POINT_SIZE",
    "GeometryCodec",
    "codec_for",
    "decode",
    "decode_box",
    "decode_circle",
    "decode_nullable",
    "decode_point",
    "encode",
    "encode_box",
    "encode_circle",
    "encode_point",
]
