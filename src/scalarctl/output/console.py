"""Rich Console factory and theme for scalarctl output.

Consoles render into a StringIO buffer so formatters can keep returning
plain strings. Rich disables color codes when it detects no terminal
(tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SCALAR_THEME = Theme(
    {
        "scalar.ok": "bold green",
        "scalar.error": "bold red",
        "scalar.warning": "bold yellow",
        "scalar.op": "bold cyan",
        "scalar.key": "dim",
        "scalar.name": "bold blue",
        "scalar.kind.scalar": "green",
        "scalar.kind.refined": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (default 120).
    """
    return Console(
        file=StringIO(),
        theme=SCALAR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a descriptor kind."""
    return f"scalar.kind.{kind}" if kind in ("scalar", "refined") else ""
