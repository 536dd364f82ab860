"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from magstripe.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from magstripe.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    show_descriptions: bool = True,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _status_line(console, result)
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result.data, console, show_descriptions=show_descriptions)
    else:
        _render_error(result, console)

    if verbose:
        _render_meta(console, result)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: one code per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("service_code", "")) for item in items)
    if "service_code" in result.data:
        return str(result.data["service_code"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="mag.ok")
    op = Text(f"  {result.op}", style="mag.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="mag.key")
    style = "mag.code" if key == "service_code" else ""
    console.print(Text.assemble(k, Text(str(value), style=style)))


def _render_error(result: ServiceResult, console: Console) -> None:
    msg = result.error.message if result.error else "Unknown error"
    console.print(Text("ERROR", style="mag.error"), Text(f"  {result.op} — {msg}"))
    if result.error and result.error.detail:
        for key, value in result.error.detail.items():
            _field(console, key, value)


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        console.print(f"    {key}: {value}", markup=False)


def _render_generic(data: dict[str, Any], console: Console, **_: Any) -> None:
    for key, value in data.items():
        _field(console, key, value)


def _render_service_code(
    data: dict[str, Any],
    console: Console,
    *,
    show_descriptions: bool = True,
) -> None:
    digits = data.get("service_code") or "(none)"
    _field(console, "service_code", digits)
    _field(console, "has_service_code", str(data.get("has_service_code", False)).lower())
    if data.get("exceeds_maximum_length"):
        console.print(Text("  exceeds maximum length", style="mag.warning"))

    table = Table(show_header=True, box=None, padding=(0, 2))
    table.add_column("Pos", justify="right")
    table.add_column("Digit", justify="right")
    table.add_column("Name")
    if show_descriptions:
        table.add_column("Description")

    for position in data.get("positions", []):
        unknown = position["value"] is None
        style = "mag.unknown" if unknown else ""
        row = [
            str(position["position"]),
            "-" if unknown else str(position["value"]),
            position["name"],
        ]
        if show_descriptions:
            row.append(position["description"])
        table.add_row(*row, style=style)

    console.print(table)


def _render_service_codes(
    data: dict[str, Any],
    console: Console,
    *,
    show_descriptions: bool = True,
) -> None:
    for item in data.get("items", []):
        console.print()
        _render_service_code(item, console, show_descriptions=show_descriptions)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "decode_service_code": _render_service_code,
    "decode_service_codes": _render_service_codes,
}
