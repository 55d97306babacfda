"""Commands: serialize and deserialize values through a scalar type."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scalarctl.commands._base import ScalarCommand

if TYPE_CHECKING:
    from scalarctl.commands._context import AppContext

_raw_string_option = click.option(
    "--raw-string", is_flag=True, help="Treat RAW as a string instead of JSON."
)


@click.command(
    cls=ScalarCommand,
    examples="""\
  scalarctl serialize Date 2024-01-01T00:00:00+00:00 --raw-string
  scalarctl serialize Float 1.5""",
)
@click.argument("type_expr", metavar="TYPE")
@click.argument("raw")
@_raw_string_option
@click.pass_obj
def serialize(app: AppContext, type_expr: str, raw: str, raw_string: bool) -> None:
    """Validate RAW and print its canonical wire form."""
    app.emit(app.service.serialize(type_expr, raw, as_string=raw_string))


@click.command(
    cls=ScalarCommand,
    examples="""\
  scalarctl deserialize Int 3.9
  scalarctl deserialize Date 2024-01-01T00:00:00Z --raw-string""",
)
@click.argument("type_expr", metavar="TYPE")
@click.argument("raw")
@_raw_string_option
@click.pass_obj
def deserialize(app: AppContext, type_expr: str, raw: str, raw_string: bool) -> None:
    """Convert wire value RAW into TYPE's internal value."""
    app.emit(app.service.deserialize(type_expr, raw, as_string=raw_string))
