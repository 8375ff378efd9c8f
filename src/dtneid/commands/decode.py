"""Command: decode CBOR bytes into an endpoint URI."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dtneid.commands._base import EidCommand

if TYPE_CHECKING:
    from dtneid.commands._context import AppContext


@click.command(
    cls=EidCommand,
    examples=[
        ("dtneid decode 820100", "dtn:none"),
        ("dtneid -q decode 8202820102", "ipn:1.2"),
        ("dtneid --json decode 82036474657374", "unknown scheme 3, with a warning"),
    ],
)
@click.argument("data")
@click.pass_obj
def decode(app: AppContext, data: str) -> None:
    """Decode DATA (hex or base64 CBOR) into an endpoint."""
    app.emit(app.service.decode(data))
