"""Shared pytest fixtures for scalarctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from scalarctl.domain.registry import SCALAR_REGISTRY


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_registry() -> Generator[None]:
    """Undo plugin or test registrations in the process-wide registry."""
    snapshot = dict(SCALAR_REGISTRY)
    yield
    SCALAR_REGISTRY.clear()
    SCALAR_REGISTRY.update(snapshot)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on CLI test classes
    so no stray ``scalarctl.toml`` or local plugin directory is picked up.
    """
    monkeypatch.chdir(tmp_path)
    for var in ("SCALARCTL_CONFIG", "SCALARCTL_JSON_OUTPUT", "SCALARCTL_QUIET"):
        monkeypatch.delenv(var, raising=False)
