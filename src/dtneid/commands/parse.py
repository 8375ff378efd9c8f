"""Command: validate an endpoint URI and show its structure."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dtneid.commands._base import EidCommand

if TYPE_CHECKING:
    from dtneid.commands._context import AppContext


@click.command(
    cls=EidCommand,
    examples=[
        ("dtneid parse dtn://node/inbox", "dtn name, kept verbatim"),
        ("dtneid parse dtn:none", "the null endpoint"),
        ("dtneid --json parse ipn:23.42", "node 23, service 42"),
    ],
)
@click.argument("uri")
@click.pass_obj
def parse(app: AppContext, uri: str) -> None:
    """Parse URI (<scheme>:<ssp>) into its scheme and payload."""
    app.emit(app.service.parse(uri))
