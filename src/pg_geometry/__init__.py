"""Binary codecs and predicate rules for PostgreSQL point, box and circle types."""

from .codecs import decode, decode_nullable, encode
from .errors import ContainmentNotSupportedError, EqualityNotSupportedError, GeometryError, MalformedInputError
from .expression import Bound, Column, Predicate, PredicateBuilder, Relation, SqlFragment, build_predicate, is_contained_by, same_as
from .models import Box, Circle, GeometricKind, Geometry, Point, kind_of
from .serialization import dump_json, dump_python, load_json, load_python

__all__ = [
    "Bound",
    "Box",
    "Circle",
    "Column",
    "ContainmentNotSupportedError",
    "EqualityNotSupportedError",
    "GeometricKind",
    "Geometry",
    "GeometryError",
    "MalformedInputError",
    "Point",
    "Predicate",
    "PredicateBuilder",
    "Relation",
    "SqlFragment",
    "build_predicate",
    "decode",
    "decode_nullable",
    "dump_json",
    "dump_python",
    "encode",
    "is_contained_by",
    "kind_of",
    "load_json",
    "load_python",
    "same_as",
]
