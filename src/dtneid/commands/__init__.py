"""Subcommand modules for dtneid.

Provides register_commands() which imports command modules lazily so
``dtneid --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from dtneid.commands.decode import decode
    from dtneid.commands.encode import encode
    from dtneid.commands.parse import parse
    from dtneid.commands.roundtrip import roundtrip

    cli.add_command(parse)
    cli.add_command(encode)
    cli.add_command(decode)
    cli.add_command(roundtrip)
