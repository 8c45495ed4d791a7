"""CLI entrypoint for inspecting geometric wire bytes and operator rules."""

from __future__ import annotations

import logging

import typer
from rich import print
from rich.table import Table

from pg_geometry.cli import format_geometry, parse_geometry
from pg_geometry.codecs import decode, encode
from pg_geometry.config import get_settings
from pg_geometry.errors import GeometryError, MalformedInputError
from pg_geometry.expression import Column, Relation, build_predicate, containment_matrix, supports_same_as
from pg_geometry.models import GeometricKind

app = typer.Typer(help="PostgreSQL geometric type codec and predicate tooling")


@app.callback()
def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s %(message)s")


@app.command()
def info() -> None:
    """Show resolved configuration."""
    settings = get_settings()
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "database_url_configured": settings.database_url is not None,
        }
    )


@app.command("encode")
def encode_value(
    kind: GeometricKind = typer.Argument(..., help="point, box or circle"),
    values: list[float] = typer.Argument(..., help="Coordinates; box takes lower-left then upper-right"),
) -> None:
    """Print the binary wire representation of a value as hex."""
    try:
        value = parse_geometry(kind, values)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    print({"kind": kind.value, "value": format_geometry(value), "hex": encode(value).hex()})


@app.command("decode")
def decode_value(
    kind: GeometricKind = typer.Argument(..., help="point, box or circle"),
    hex_bytes: str = typer.Argument(..., help="Wire bytes as hex"),
) -> None:
    """Decode hex wire bytes into a value."""
    try:
        value = decode(kind, bytes.fromhex(hex_bytes))
    except (MalformedInputError, ValueError) as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)
    print({"kind": kind.value, "value": format_geometry(value)})


@app.command()
def rules() -> None:
    """Show which kinds support ~= and which pairs support <@."""
    matrix = containment_matrix()

    containment = Table(title="is contained by (<@)")
    containment.add_column("subject")
    for bound in GeometricKind:
        containment.add_column(bound.value)
    for subject in GeometricKind:
        containment.add_row(subject.value, *("yes" if matrix[(subject, bound)] else "no" for bound in GeometricKind))

    equality = Table(title="same as (~=)")
    equality.add_column("kind")
    equality.add_column("supported")
    for kind in GeometricKind:
        equality.add_row(kind.value, "yes" if supports_same_as(kind) else "no")

    print(containment)
    print(equality)


@app.command()
def check(
    relation: str = typer.Argument(..., help="same-as or is-contained-by"),
    left_kind: GeometricKind = typer.Argument(..., help="Kind of the left operand"),
    right_kind: GeometricKind = typer.Argument(..., help="Kind of the right operand"),
) -> None:
    """Validate an operator pairing and show the SQL it renders to."""
    try:
        rel = Relation[relation.replace("-", "_").upper()]
    except KeyError as exc:
        raise typer.BadParameter(f"Unknown relation: {relation}") from exc

    try:
        predicate = build_predicate(rel, Column("lhs", left_kind), Column("rhs", right_kind))
    except GeometryError as exc:
        print({"allowed": False, "error": str(exc)})
        raise typer.Exit(code=1)

    sql, _ = predicate.render()
    print({"allowed": True, "operator": predicate.operator, "sql": sql})


if __name__ == "__main__":
    app()
