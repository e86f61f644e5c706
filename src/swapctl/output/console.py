"""Rich Console factory and theme for swapctl output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract.  Rich drops color codes by itself when the output is
not a terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SWAP_THEME = Theme(
    {
        "swap.ok": "bold green",
        "swap.error": "bold red",
        "swap.warning": "bold yellow",
        "swap.op": "bold cyan",
        "swap.key": "dim",
        "swap.symbol": "bold blue",
        "swap.amount": "bold",
        "swap.rate": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SWAP_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
