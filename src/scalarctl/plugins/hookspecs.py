"""Pluggy hook specifications for scalarctl.

One setup-time hook lets plugins contribute named scalars to the
process-wide registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from scalarctl.domain.types import GraphQLType

PROJECT_NAME = "scalarctl"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class ScalarctlHookSpec:
    """Hook specifications for the scalarctl plugin system."""

    @hookspec
    def register_scalar_types(self) -> dict[str, GraphQLType] | None:
        """Return registry name -> descriptor mappings to add to SCALAR_REGISTRY."""
