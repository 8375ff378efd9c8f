"""CBOR bytes for endpoint identifiers, via cbor2.

cbor2 is the generic codec: it knows nothing about endpoints. These helpers
hand it the wire item from :mod:`dtneid.codec.wire` and normalize what it
decodes. A byte string holds exactly one endpoint item.
"""

from __future__ import annotations

from io import BytesIO

import cbor2

from dtneid.codec.wire import endpoint_from_wire, endpoint_to_wire
from dtneid.domain.eid import EndpointID
from dtneid.domain.errors import MalformedWireShapeError, UnencodableEndpointError


def encode_endpoint(eid: EndpointID, *, canonical: bool = True) -> bytes:
    """Serialize *eid* as a 2-element CBOR array.

    Raises:
        UnencodableEndpointError: the payload has no CBOR form (a name with
            lone surrogates, an opaque value cbor2 cannot serialize).

    Examples:
        >>> from dtneid.domain.eid import dtn_none
        >>> encode_endpoint(dtn_none()).hex()
        '820100'
    """
    try:
        return cbor2.dumps(endpoint_to_wire(eid), canonical=canonical)
    except (UnicodeEncodeError, cbor2.CBOREncodeError) as exc:
        msg = f"Cannot encode endpoint as CBOR: {exc}"
        raise UnencodableEndpointError(msg) from exc


def decode_endpoint(data: bytes) -> EndpointID:
    """Deserialize a CBOR-encoded endpoint.

    Raises:
        MalformedWireShapeError: *data* is not valid CBOR, is not shaped
            like an endpoint, or has bytes left over after the item.
    """
    fp = BytesIO(data)
    try:
        item = cbor2.CBORDecoder(fp).decode()
    except cbor2.CBORDecodeError as exc:
        msg = f"Invalid CBOR endpoint data: {exc}"
        raise MalformedWireShapeError(msg) from exc
    if fp.tell() != len(data):
        msg = f"Unexpected {len(data) - fp.tell()} trailing byte(s) after CBOR endpoint"
        raise MalformedWireShapeError(msg)
    return endpoint_from_wire(item)
