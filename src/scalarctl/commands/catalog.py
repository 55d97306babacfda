"""Commands: list registered scalars and describe a type expression."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scalarctl.commands._base import ScalarCommand

if TYPE_CHECKING:
    from scalarctl.commands._context import AppContext


@click.command(
    cls=ScalarCommand,
    examples="""\
  scalarctl types
  scalarctl --json types""",
)
@click.pass_obj
def types(app: AppContext) -> None:
    """List registered scalars and refinement factories."""
    app.emit(app.service.list_types())


@click.command(
    cls=ScalarCommand,
    examples="""\
  scalarctl describe PositiveInt
  scalarctl describe 'IntRange(1, 10)'""",
)
@click.argument("type_expr", metavar="TYPE")
@click.pass_obj
def describe(app: AppContext, type_expr: str) -> None:
    """Show name, description, and bounds of TYPE."""
    app.emit(app.service.describe(type_expr))
