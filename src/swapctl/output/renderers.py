"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from swapctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from swapctl.services.result import ServiceResult

    Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Prints the one value a script would want (the normalized amount, the
    formatted amount, the rate) or one symbol per line for listings.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("symbol", "")) for item in items)

    key = _QUIET_KEYS.get(result.op)
    if key is not None and key in result.data:
        return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="swap.ok")
    op = Text(f"  {result.op}", style="swap.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    elif isinstance(value, bool):
        value = str(value).lower()
    console.print(Text.assemble((f"  {key}: ", "swap.key"), (str(value), style)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    console.print(f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}")
    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "swap.error"), (f"  {result.op}", "swap.op"), f": {msg}")
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Amount renderers ──────────────────────────────────────────────────


def _render_normalize(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "value", d.get("value", ""), style="swap.amount")
    if verbose or d.get("changed"):
        _field(console, "raw", d.get("raw", ""))
    if d.get("truncated"):
        _field(console, "truncated", True)


def _render_format(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "display", d.get("display", ""), style="swap.amount")
    if verbose:
        _field(console, "value", d.get("value"))
        _field(console, "decimal_places", d.get("decimal_places"))


# ── Catalog renderers ─────────────────────────────────────────────────


def _render_coin_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Symbol", style="swap.symbol", no_wrap=True)
    table.add_column("Name")
    table.add_column("Price (USD)", style="swap.rate", justify="right")
    table.add_column("Balance", justify="right")
    if verbose:
        table.add_column("Icon", style="dim")

    for item in items:
        row = [
            str(item.get("symbol", "")),
            str(item.get("name", "")),
            f"{item.get('value_usd', 0):.6f}",
            f"{item.get('balance', 0):g}",
        ]
        if verbose:
            row.append(str(item.get("img", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} coins")


def _render_pair(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render rate and swap results as ``1 PAY = RATE RECEIVE``."""
    _status_line(console, result)
    d = result.data
    pay = str(d.get("pay", "")).upper()
    receive = str(d.get("receive", "")).upper()
    console.print(
        f"  1 [swap.symbol]{pay}[/swap.symbol] = "
        f"[swap.rate]{d.get('rate', '')}[/swap.rate] [swap.symbol]{receive}[/swap.symbol]"
    )


def _render_quote(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    pay = str(d.get("pay", "")).upper()
    receive = str(d.get("receive", "")).upper()
    _field(console, "you pay", f"{d.get('amount') or '0.00'} {pay}", style="swap.amount")
    _field(console, "you receive", f"{d.get('received', '0.00')} {receive}", style="swap.amount")
    _field(console, "rate", f"1 {pay} = {d.get('rate', '')} {receive}", style="swap.rate")
    if "usd_value" in d:
        _field(console, "usd value", f"${d['usd_value']}")
    if verbose:
        _field(console, "balance", d.get("balance"))
        _field(console, "decimal_places", d.get("decimal_places"))
    if d.get("transfer_disabled"):
        console.print(Text("  transfer blocked", style="swap.warning"))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch tables ───────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "normalize_amount": _render_normalize,
    "format_amount": _render_format,
    "list_coins": _render_coin_table,
    "rate": _render_pair,
    "swap": _render_pair,
    "quote": _render_quote,
}

_QUIET_KEYS: dict[str, str] = {
    "normalize_amount": "value",
    "format_amount": "display",
    "quote": "received",
    "rate": "rate",
}
