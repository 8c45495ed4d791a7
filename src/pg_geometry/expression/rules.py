"""Which geometric kinds may be compared with ``~=`` and ``<@``.

Both tables are the single source of truth for operator legality; the
predicate builder consults them before constructing anything.
"""

from __future__ import annotations

from types import MappingProxyType

from pg_geometry.errors import ContainmentNotSupportedError, EqualityNotSupportedError
from pg_geometry.models import GeometricKind

# A circle can contain a point or a circle but not a box.
# A box can contain a point, a circle and a box.
CONTAINMENT_RULES: frozenset[tuple[GeometricKind, GeometricKind]] = frozenset(
    {
        (GeometricKind.POINT, GeometricKind.CIRCLE),
        (GeometricKind.CIRCLE, GeometricKind.CIRCLE),
        (GeometricKind.POINT, GeometricKind.BOX),
        (GeometricKind.CIRCLE, GeometricKind.BOX),
        (GeometricKind.BOX, GeometricKind.BOX),
    }
)

SAME_AS_KINDS: frozenset[GeometricKind] = frozenset(
    {GeometricKind.POINT, GeometricKind.BOX, GeometricKind.CIRCLE}
)


def can_be_contained_by(subject: GeometricKind, bound: GeometricKind) -> bool:
    return (GeometricKind(subject), GeometricKind(bound)) in CONTAINMENT_RULES


def supports_same_as(kind: GeometricKind) -> bool:
    return GeometricKind(kind) in SAME_AS_KINDS


def containment_bounds(subject: GeometricKind) -> tuple[GeometricKind, ...]:
    """Return the bound kinds a subject may be tested against, in enum order."""
    return tuple(bound for bound in GeometricKind if can_be_contained_by(subject, bound))


def containment_matrix() -> MappingProxyType[tuple[GeometricKind, GeometricKind], bool]:
    return MappingProxyType(
        {
            (subject, bound): can_be_contained_by(subject, bound)
            for subject in GeometricKind
            for bound in GeometricKind
        }
    )


def check_containment(subject: GeometricKind, bound: GeometricKind) -> None:
    if not can_be_contained_by(subject, bound):
        raise ContainmentNotSupportedError(GeometricKind(subject).value, GeometricKind(bound).value)


def check_same_as(left: GeometricKind, right: GeometricKind) -> None:
    left, right = GeometricKind(left), GeometricKind(right)
    if left != right or not supports_same_as(left):
        raise EqualityNotSupportedError(left.value, right.value)
