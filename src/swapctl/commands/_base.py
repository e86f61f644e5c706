"""Click command classes that carry usage examples.

Commands and groups take ``examples=[...]``: complete ``swapctl``
invocations.  ``--examples`` prints them one per line under a header and
exits before the command body runs, so no price data is ever loaded.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click


def format_examples(command_path: str, examples: Sequence[str]) -> str:
    """Render the ``--examples`` text for *command_path*."""
    lines = [f"Examples for '{command_path}':", ""]
    lines.extend(f"  {example}" for example in examples)
    return "\n".join(lines)


def _examples_option(examples: Sequence[str]) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(format_examples(ctx.command_path, examples))
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Print example invocations and exit.",
    )


class ExamplesMixin:
    """Adds the ``examples`` keyword to a click command class."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(_examples_option(self.examples))


class SwapCommand(ExamplesMixin, click.Command):
    pass


class SwapGroup(ExamplesMixin, click.Group):
    """Group whose subcommands are SwapCommands unless told otherwise."""

    command_class = SwapCommand
