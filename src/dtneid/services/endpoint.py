"""EndpointService — parse, encode, decode, and round-trip endpoints.

Wraps the domain and codec layers for interfaces (CLI, JSON consumers).
Rejected input never raises here: every EndpointError becomes a failed
ServiceResult whose error code is the exception's ``code``.
"""

from __future__ import annotations

import base64
import logging
from typing import Any

from dtneid.codec.cbor import decode_endpoint, encode_endpoint
from dtneid.config.models import BinaryFormat, CodecConfig
from dtneid.domain.eid import EndpointID, PairSSP
from dtneid.domain.errors import EndpointError
from dtneid.domain.parser import parse_uri
from dtneid.domain.render import render_endpoint, render_ssp
from dtneid.services.result import Operation, ServiceResult

logger = logging.getLogger(__name__)

INVALID_BINARY_TEXT = "INVALID_BINARY_TEXT"


def describe_endpoint(eid: EndpointID) -> dict[str, Any]:
    """Flatten an EndpointID into JSON-friendly result data."""
    data: dict[str, Any] = {
        "uri": render_endpoint(eid),
        "scheme": eid.scheme_name,
        "scheme_code": eid.scheme_code,
        "kind": str(eid.ssp.kind),
        "ssp": render_ssp(eid.scheme_code, eid.ssp),
    }
    if isinstance(eid.ssp, PairSSP):
        data["node"] = eid.ssp.node
        data["service"] = eid.ssp.service
    return data


def _failure(op: Operation, exc: EndpointError, **detail: Any) -> ServiceResult:
    logger.debug("%s rejected %r: %s", op, detail, exc)
    return ServiceResult.failure(op, exc.code, str(exc), **detail)


class EndpointService:
    """Endpoint operations parameterized by the ``[codec]`` config section."""

    def __init__(self, codec: CodecConfig | None = None) -> None:
        self._codec = codec or CodecConfig()

    # --- binary text helpers ---

    def to_text(self, data: bytes) -> str:
        if self._codec.binary_format == BinaryFormat.BASE64:
            return base64.b64encode(data).decode("ascii")
        return data.hex()

    def from_text(self, text: str) -> bytes:
        """Decode hex or base64 text. Raises ValueError on malformed input."""
        if self._codec.binary_format == BinaryFormat.BASE64:
            return base64.b64decode(text, validate=True)
        return bytes.fromhex(text)

    # --- operations ---

    def parse(self, uri: str) -> ServiceResult:
        """Parse and validate ``<scheme>:<ssp>`` text."""
        try:
            eid = parse_uri(uri)
        except EndpointError as exc:
            return _failure("parse", exc, input=uri)
        return ServiceResult(ok=True, op="parse", data=describe_endpoint(eid))

    def encode(self, uri: str) -> ServiceResult:
        """Parse *uri* and encode it as CBOR in the configured text format."""
        try:
            eid = parse_uri(uri)
            raw = encode_endpoint(eid, canonical=self._codec.canonical)
        except EndpointError as exc:
            return _failure("encode", exc, input=uri)
        return ServiceResult(
            ok=True,
            op="encode",
            data={
                "uri": render_endpoint(eid),
                "format": str(self._codec.binary_format),
                "data": self.to_text(raw),
                "length": len(raw),
            },
        )

    def decode(self, text: str) -> ServiceResult:
        """Decode CBOR given as hex or base64 text into an endpoint."""
        try:
            raw = self.from_text(text.strip())
        except ValueError as exc:
            logger.debug("decode rejected binary text %r: %s", text, exc)
            return ServiceResult.failure(
                "decode",
                INVALID_BINARY_TEXT,
                f"Input is not valid {self._codec.binary_format}: {exc}",
                input=text,
            )
        try:
            eid = decode_endpoint(raw)
        except EndpointError as exc:
            return _failure("decode", exc, input=text)

        warnings: list[str] = []
        if eid.scheme_name.startswith("unknown_"):
            warnings.append(f"Unrecognized scheme code {eid.scheme_code}")
        return ServiceResult(ok=True, op="decode", data=describe_endpoint(eid), warnings=warnings)

    def roundtrip(self, uri: str) -> ServiceResult:
        """Check that text -> CBOR -> text reproduces the canonical URI."""
        try:
            eid = parse_uri(uri)
            raw = encode_endpoint(eid, canonical=self._codec.canonical)
            back = decode_endpoint(raw)
        except EndpointError as exc:
            return _failure("roundtrip", exc, input=uri)
        return ServiceResult(
            ok=True,
            op="roundtrip",
            data={
                "uri": render_endpoint(eid),
                "data": self.to_text(raw),
                "decoded": render_endpoint(back),
                "identical": back == eid,
            },
        )
