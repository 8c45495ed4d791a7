from __future__ import annotations

import logging
from itertools import product

import pytest

from pg_geometry.codecs import encode_point
from pg_geometry.errors import ContainmentNotSupportedError, EqualityNotSupportedError
from pg_geometry.expression import (
    Bound,
    Column,
    PredicateBuilder,
    Relation,
    SqlFragment,
    build_predicate,
    is_contained_by,
    same_as,
)
from pg_geometry.models import Box, Circle, GeometricKind, Point

SAMPLES = {
    GeometricKind.POINT: Point(1.0, 1.0),
    GeometricKind.BOX: Box(Point(0.0, 0.0), Point(2.0, 2.0)),
    GeometricKind.CIRCLE: Circle(Point(0.0, 0.0), 3.0),
}

ALLOWED_CONTAINMENT = {
    (GeometricKind.POINT, GeometricKind.BOX),
    (GeometricKind.POINT, GeometricKind.CIRCLE),
    (GeometricKind.BOX, GeometricKind.BOX),
    (GeometricKind.CIRCLE, GeometricKind.BOX),
    (GeometricKind.CIRCLE, GeometricKind.CIRCLE),
}


def test_same_as_between_points_emits_same_as_operator() -> None:
    predicate = same_as(Point(3.0, 4.0), Point(3.0, 4.0))

    sql, binds = predicate.render()

    assert predicate.operator == "~="
    assert sql == "$1 ~= $2"
    assert [bind.payload for bind in binds] == [encode_point(Point(3.0, 4.0))] * 2
    assert [bind.oid for bind in binds] == [600, 600]


@pytest.mark.parametrize(("subject", "bound"), list(product(GeometricKind, repeat=2)))
def test_containment_for_every_ordered_pair(subject: GeometricKind, bound: GeometricKind) -> None:
    if (subject, bound) in ALLOWED_CONTAINMENT:
        predicate = build_predicate(Relation.IS_CONTAINED_BY, SAMPLES[subject], SAMPLES[bound])
        assert predicate.operator == "<@"
        assert predicate.kinds == (subject, bound)
    else:
        with pytest.raises(ContainmentNotSupportedError):
            build_predicate(Relation.IS_CONTAINED_BY, SAMPLES[subject], SAMPLES[bound])


@pytest.mark.parametrize(("left", "right"), list(product(GeometricKind, repeat=2)))
def test_same_as_requires_matching_kinds(left: GeometricKind, right: GeometricKind) -> None:
    if left == right:
        assert build_predicate(Relation.SAME_AS, SAMPLES[left], SAMPLES[right]).operator == "~="
    else:
        with pytest.raises(EqualityNotSupportedError):
            build_predicate(Relation.SAME_AS, SAMPLES[left], SAMPLES[right])


def test_box_contained_by_circle_is_rejected() -> None:
    with pytest.raises(ContainmentNotSupportedError) as excinfo:
        is_contained_by(SAMPLES[GeometricKind.BOX], SAMPLES[GeometricKind.CIRCLE])

    assert (excinfo.value.subject, excinfo.value.bound) == ("box", "circle")


def test_column_filter_renders_with_bound_box() -> None:
    centroid = Column("centroid", GeometricKind.POINT, table="shapes")
    bounds = Box(Point(0.5, 1.5), Point(3.0, 5.0))

    sql, binds = is_contained_by(centroid, bounds).render()

    assert sql == "shapes.centroid <@ $1"
    assert len(binds) == 1
    assert binds[0].kind == GeometricKind.BOX
    assert binds[0].oid == 603
    assert binds[0].payload[:16] == encode_point(Point(3.0, 5.0))


def test_sql_fragment_operand_is_rendered_verbatim() -> None:
    literal = SqlFragment("point '(3, 4)'", GeometricKind.POINT)

    sql, binds = same_as(literal, Bound(Point(3.0, 4.0))).render()

    assert sql == "point '(3, 4)' ~= $1"
    assert len(binds) == 1


def test_relation_accepts_operator_token() -> None:
    predicate = build_predicate("<@", SAMPLES[GeometricKind.POINT], SAMPLES[GeometricKind.CIRCLE])

    assert predicate.relation is Relation.IS_CONTAINED_BY


def test_non_geometric_operand_is_rejected() -> None:
    with pytest.raises(TypeError):
        same_as((3.0, 4.0), Point(3.0, 4.0))


def test_builder_logs_rejections(caplog: pytest.LogCaptureFixture) -> None:
    builder = PredicateBuilder(logger=logging.getLogger("tests.predicates"))

    with caplog.at_level(logging.WARNING, logger="tests.predicates"):
        with pytest.raises(EqualityNotSupportedError):
            builder.same_as(SAMPLES[GeometricKind.BOX], SAMPLES[GeometricKind.POINT])

    assert [record.getMessage() for record in caplog.records] == ["predicate_rejected"]
    assert caplog.records[0].left_kind == "box"
    assert caplog.records[0].right_kind == "point"


def test_string_kinds_on_operands_are_coerced() -> None:
    centroid = Column("centroid", "point")
    literal = SqlFragment("circle '<(0,0),3>'", "circle")

    predicate = is_contained_by(centroid, Box(Point(0.0, 0.0), Point(2.0, 2.0)))

    assert centroid.kind is GeometricKind.POINT
    assert literal.kind is GeometricKind.CIRCLE
    assert predicate.kinds == (GeometricKind.POINT, GeometricKind.BOX)
    assert is_contained_by(centroid, literal).render() == ("centroid <@ circle '<(0,0),3>'", [])


def test_unknown_column_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        Column("outline", "polygon")
