from __future__ import annotations

import pytest

from pg_geometry.errors import ContainmentNotSupportedError, EqualityNotSupportedError
from pg_geometry.expression.rules import (
    SAME_AS_KINDS,
    can_be_contained_by,
    check_containment,
    check_same_as,
    containment_bounds,
    containment_matrix,
    supports_same_as,
)
from pg_geometry.models import GeometricKind

POINT, BOX, CIRCLE = GeometricKind.POINT, GeometricKind.BOX, GeometricKind.CIRCLE


def test_containment_matrix_matches_server_operators() -> None:
    assert dict(containment_matrix()) == {
        (POINT, POINT): False,
        (POINT, BOX): True,
        (POINT, CIRCLE): True,
        (BOX, POINT): False,
        (BOX, BOX): True,
        (BOX, CIRCLE): False,
        (CIRCLE, POINT): False,
        (CIRCLE, BOX): True,
        (CIRCLE, CIRCLE): True,
    }


def test_containment_bounds_per_subject() -> None:
    assert containment_bounds(POINT) == (BOX, CIRCLE)
    assert containment_bounds(BOX) == (BOX,)
    assert containment_bounds(CIRCLE) == (BOX, CIRCLE)


def test_rules_accept_kind_values_as_strings() -> None:
    assert can_be_contained_by("point", "circle")
    assert supports_same_as("circle")


def test_check_containment_names_both_kinds() -> None:
    with pytest.raises(ContainmentNotSupportedError) as excinfo:
        check_containment(BOX, CIRCLE)

    assert excinfo.value.subject == "box"
    assert excinfo.value.bound == "circle"
    assert "box" in str(excinfo.value) and "circle" in str(excinfo.value)


def test_same_as_supported_for_every_kind() -> None:
    assert SAME_AS_KINDS == frozenset(GeometricKind)
    for kind in GeometricKind:
        check_same_as(kind, kind)


def test_check_same_as_rejects_mixed_kinds() -> None:
    with pytest.raises(EqualityNotSupportedError) as excinfo:
        check_same_as(POINT, CIRCLE)

    assert (excinfo.value.left, excinfo.value.right) == ("point", "circle")
