"""Subcommand modules for scalarctl.

register_commands() uses deferred imports so ``scalarctl --help`` stays
fast and never imports the service layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from scalarctl.commands.convert import deserialize, serialize
    from scalarctl.commands.catalog import describe, types
    from scalarctl.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(serialize)
    cli.add_command(deserialize)
    cli.add_command(types)
    cli.add_command(describe)
