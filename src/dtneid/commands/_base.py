"""Click base classes for dtneid commands.

EidCommand and EidGroup accept ``examples``: pairs of (command line, note).
Passing ``--examples`` prints them as an aligned, commented listing and
exits, so ``--help`` stays short while sample endpoints and encodings stay
one flag away.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click

Example = tuple[str, str]


def format_examples(examples: Sequence[Example]) -> str:
    """Lay out example command lines with their notes in one column.

    Examples:
        >>> print(format_examples([("dtneid parse dtn:none", "the null endpoint")]))
          dtneid parse dtn:none  # the null endpoint
    """
    width = max(len(line) for line, _ in examples)
    rows = []
    for line, note in examples:
        rows.append(f"  {line.ljust(width)}  # {note}" if note else f"  {line}")
    return "\n".join(rows)


def _add_examples_option(cmd: click.Command, examples: Sequence[Example]) -> None:
    text = format_examples(examples)

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(text)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show sample endpoint invocations.",
        )
    )


class EidCommand(click.Command):
    """Click Command with an ``--examples`` listing."""

    def __init__(self, *args: Any, examples: Sequence[Example] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            _add_examples_option(self, self.examples)


class EidGroup(click.Group):
    """Click Group whose subcommands default to :class:`EidCommand`."""

    command_class = EidCommand

    def __init__(self, *args: Any, examples: Sequence[Example] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            _add_examples_option(self, self.examples)
