"""Command: encode an endpoint URI as CBOR."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dtneid.commands._base import EidCommand

if TYPE_CHECKING:
    from dtneid.commands._context import AppContext


@click.command(
    cls=EidCommand,
    examples=[
        ("dtneid encode dtn:none", "820100"),
        ("dtneid -q encode ipn:1.2", "hex only"),
        ("DTNEID_CODEC__BINARY_FORMAT=base64 dtneid encode dtn://node/", "base64 output"),
    ],
)
@click.argument("uri")
@click.pass_obj
def encode(app: AppContext, uri: str) -> None:
    """Encode URI as a CBOR [scheme, ssp] array (hex or base64)."""
    app.emit(app.service.encode(uri))
