"""Error taxonomy for geometric codecs and predicate construction."""

from __future__ import annotations


class GeometryError(Exception):
    """Base class for every failure raised by pg_geometry."""


class MalformedInputError(GeometryError, ValueError):
    """Raised when wire bytes do not match the fixed size of a geometric type."""

    def __init__(self, type_name: str, expected: int, actual: int) -> None:
        self.type_name = type_name
        self.expected = expected
        self.actual = actual
        if actual < expected:
            detail = f"need {expected} bytes, got {actual}"
        else:
            detail = f"expected exactly {expected} bytes, got {actual}"
        super().__init__(f"Malformed {type_name} value: {detail}")


class EqualityNotSupportedError(GeometryError, TypeError):
    """Raised when a same-as comparison is requested for incompatible kinds."""

    def __init__(self, left: str, right: str) -> None:
        self.left = left
        self.right = right
        if left != right:
            message = f"Cannot compare {left} ~= {right}: same-as requires operands of one kind"
        else:
            message = f"Same-as (~=) is not supported for {left}"
        super().__init__(message)


class ContainmentNotSupportedError(GeometryError, TypeError):
    """Raised when a subject kind cannot be tested for containment in a bound kind."""

    def __init__(self, subject: str, bound: str) -> None:
        self.subject = subject
        self.bound = bound
        super().__init__(f"A {subject} cannot be tested as contained by a {bound} (<@)")
