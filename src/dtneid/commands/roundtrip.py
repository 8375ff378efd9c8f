"""Command: check that an endpoint survives text -> CBOR -> text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dtneid.commands._base import EidCommand

if TYPE_CHECKING:
    from dtneid.commands._context import AppContext


@click.command(
    cls=EidCommand,
    examples=[
        ("dtneid roundtrip dtn://node/inbox", ""),
        ("dtneid roundtrip ipn:01.02", "decodes to the canonical ipn:1.2"),
    ],
)
@click.argument("uri")
@click.pass_obj
def roundtrip(app: AppContext, uri: str) -> None:
    """Encode and decode URI, reporting whether the value is unchanged."""
    app.emit(app.service.roundtrip(uri))
