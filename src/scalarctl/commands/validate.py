"""Command: validate a raw value against a scalar type."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scalarctl.commands._base import ScalarCommand

if TYPE_CHECKING:
    from scalarctl.commands._context import AppContext


@click.command(
    cls=ScalarCommand,
    examples="""\
  scalarctl validate Int 42
  scalarctl validate PositiveInt 0 --key age
  scalarctl validate "StringRange(3, 20)" '"jdoe"'
  scalarctl validate Date 2024-01-01T00:00:00Z --raw-string
  scalarctl --json validate Boolean true""",
)
@click.argument("type_expr", metavar="TYPE")
@click.argument("raw")
@click.option("--key", default=None, help="Field name used in error messages.")
@click.option("--raw-string", is_flag=True, help="Treat RAW as a string instead of JSON.")
@click.pass_obj
def validate(app: AppContext, type_expr: str, raw: str, key: str | None, raw_string: bool) -> None:
    """Validate RAW (JSON by default) against TYPE."""
    app.emit(app.service.validate(type_expr, raw, key=key, as_string=raw_string))
