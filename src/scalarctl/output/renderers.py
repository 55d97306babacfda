"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`;
unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from scalarctl.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from scalarctl.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render a single status line for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="scalar.ok"), Text(f"  {result.op}", style="scalar.op"))


def _field(console: Console, key: str, value: Any) -> None:
    style = "scalar.name" if key in ("name", "type") else ""
    console.print(Text(f"  {key}: ", style="scalar.key"), Text(str(value), style=style), sep="")


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_describe(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    for key in ("expression", "name", "description", "kind", "non_null"):
        _field(console, key, data.get(key))
    for bound, limit in data.get("bounds", {}).items():
        _field(console, bound, limit)


def _render_list_types(result: ServiceResult, console: Console) -> None:
    table = Table(title=f"Scalars ({result.data.get('count', 0)})")
    table.add_column("Registered as", style="scalar.name")
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("Description")
    for item in result.data.get("items", []):
        kind = item["kind"]
        table.add_row(
            item["id"], item["name"], Text(kind, style=style_for_kind(kind)), item["description"]
        )
    console.print(table)
    factories = result.data.get("factories", [])
    if factories:
        console.print(Text("Factories: ", style="scalar.key"), ", ".join(factories), sep="")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(
        Text("ERROR", style="scalar.error"),
        Text(f"  {result.op}", style="scalar.op"),
        Text(f" — {message}"),
    )
    if error is None:
        return
    errors = error.detail.get("errors", [])
    if len(errors) > 1:
        for line in errors:
            console.print(f"  - {line}")
    if verbose:
        for key, value in error.detail.items():
            if key != "errors":
                _field(console, key, value)
        _field(console, "code", error.code)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "describe": _render_describe,
    "list_types": _render_list_types,
}
