"""Wire form of an endpoint: the 2-element item exchanged with a CBOR codec.

Encoding direction builds ``[scheme_code, ssp]`` from native Python values.
Decoding direction takes whatever the generic decoder produced and re-types
the payload into the SSP variants the domain layer matches on:

- unsigned integer -> ``IntegerSSP``
- 2-element sequence of unsigned integers -> ``PairSSP``
- text -> ``NameSSP``
- anything else -> ``OpaqueSSP`` (passed through)

The normalizer checks shape only. It does not apply the parser's grammar
(an ``ipn`` pair of zeros or a ``dtn`` integer other than 0 is kept as-is).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from dtneid.domain.eid import SSP, EndpointID, IntegerSSP, NameSSP, OpaqueSSP, PairSSP
from dtneid.domain.errors import MalformedWireShapeError
from dtneid.domain.schemes import UINT64_MAX

logger = logging.getLogger(__name__)

WIRE_ITEM_LENGTH = 2


def _is_uint(value: Any) -> bool:
    # bool is an int subclass but a distinct CBOR simple value.
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= UINT64_MAX


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)


def _normalize_ssp(payload: Any) -> SSP:
    if isinstance(payload, bool):
        return OpaqueSSP(payload)
    if isinstance(payload, int):
        if not _is_uint(payload):
            msg = f"SSP integer {payload} is not an unsigned 64-bit value"
            raise MalformedWireShapeError(msg)
        return IntegerSSP(payload)
    if isinstance(payload, str):
        return NameSSP(payload)
    if _is_sequence(payload):
        if len(payload) != WIRE_ITEM_LENGTH or not all(_is_uint(v) for v in payload):
            msg = f"SSP sequence must hold two unsigned 64-bit integers, got {list(payload)!r}"
            raise MalformedWireShapeError(msg)
        return PairSSP(payload[0], payload[1])
    logger.debug("Passing through opaque SSP of type %s", type(payload).__name__)
    return OpaqueSSP(payload)


def normalize_endpoint(scheme_code: Any, payload: Any) -> EndpointID:
    """Build an EndpointID from decoded scheme code and payload.

    Raises:
        MalformedWireShapeError: The scheme code is not an unsigned integer,
            or the payload is a malformed integer or sequence.
    """
    if not _is_uint(scheme_code):
        msg = f"Scheme code must be an unsigned integer, got {scheme_code!r}"
        raise MalformedWireShapeError(msg)
    return EndpointID(scheme_code=scheme_code, ssp=_normalize_ssp(payload))


def endpoint_from_wire(item: Any) -> EndpointID:
    """Build an EndpointID from a whole decoded ``[scheme_code, ssp]`` item."""
    if not _is_sequence(item) or len(item) != WIRE_ITEM_LENGTH:
        msg = f"Endpoint must be a {WIRE_ITEM_LENGTH}-element array, got {item!r}"
        raise MalformedWireShapeError(msg)
    return normalize_endpoint(item[0], item[1])


def endpoint_to_wire(eid: EndpointID) -> list[Any]:
    """Return the native ``[scheme_code, ssp]`` item for a CBOR encoder."""
    match eid.ssp:
        case IntegerSSP(value=value):
            payload: Any = value
        case NameSSP(value=value):
            payload = value
        case PairSSP(node=node, service=service):
            payload = [node, service]
        case OpaqueSSP(value=value):
            payload = value
        case other:
            payload = other
    return [int(eid.scheme_code), payload]
