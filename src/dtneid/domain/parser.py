"""Text parser — scheme name plus SSP text to a validated EndpointID.

Grammar per scheme:
- dtn: ``none`` or any other text, taken verbatim as a node name.
- ipn: ``<node>.<service>``, ASCII digits, each in [1, 2^64-1] (RFC 6260).

Every failure raises a subclass of :class:`~dtneid.domain.errors.EndpointError`;
no partially built value is ever returned.
"""

from __future__ import annotations

import re

from dtneid.domain.eid import DTN_NONE, EndpointID, NameSSP, PairSSP
from dtneid.domain.errors import (
    MalformedIPNError,
    MalformedURIError,
    NumericOverflowError,
    OutOfRangeError,
    UnknownSchemeError,
)
from dtneid.domain.schemes import DTN_NONE_SSP, SCHEMES_BY_NAME, UINT64_MAX, SchemeCode

IPN_PATTERN: re.Pattern[str] = re.compile(r"([0-9]+)\.([0-9]+)")

URI_SEPARATOR = ":"

# Decimal digits in UINT64_MAX; longer runs overflow without converting.
_UINT64_DIGITS = len(str(UINT64_MAX))


def _parse_dtn(ssp: str) -> EndpointID:
    if ssp == DTN_NONE_SSP:
        return DTN_NONE
    return EndpointID(scheme_code=int(SchemeCode.DTN), ssp=NameSSP(ssp))


def _parse_uint64(digits: str, label: str) -> int:
    significant = digits.lstrip("0") or "0"
    value = int(significant) if len(significant) <= _UINT64_DIGITS else None
    if value is None or value > UINT64_MAX:
        shown = digits if len(digits) <= 40 else f"{digits[:20]}... ({len(digits)} digits)"
        msg = f"IPN {label} number {shown} exceeds the unsigned 64-bit range"
        raise NumericOverflowError(msg)
    return value


def _parse_ipn(ssp: str) -> EndpointID:
    match = IPN_PATTERN.fullmatch(ssp)
    if match is None:
        msg = f"IPN SSP {ssp!r} does not match <node>.<service>"
        raise MalformedIPNError(msg)

    node = _parse_uint64(match.group(1), "node")
    service = _parse_uint64(match.group(2), "service")
    if node < 1 or service < 1:
        msg = f"IPN node and service numbers must be >= 1, got {node}.{service}"
        raise OutOfRangeError(msg)

    return EndpointID(scheme_code=int(SchemeCode.IPN), ssp=PairSSP(node, service))


def parse_endpoint(scheme: str, ssp: str) -> EndpointID:
    """Build a validated EndpointID from a scheme name and SSP text.

    Examples:
        >>> str(parse_endpoint("ipn", "23.42"))
        'ipn:23.42'
        >>> parse_endpoint("dtn", "none").is_none
        True
    """
    code = SCHEMES_BY_NAME.get(scheme)
    if code is SchemeCode.DTN:
        return _parse_dtn(ssp)
    if code is SchemeCode.IPN:
        return _parse_ipn(ssp)
    msg = f"Unknown endpoint scheme: {scheme!r}"
    raise UnknownSchemeError(msg)


def parse_uri(uri: str) -> EndpointID:
    """Split ``<scheme>:<ssp>`` on the first colon and parse it."""
    scheme, sep, ssp = uri.partition(URI_SEPARATOR)
    if not sep:
        msg = f"Endpoint URI {uri!r} has no scheme prefix"
        raise MalformedURIError(msg)
    return parse_endpoint(scheme, ssp)


def coerce_endpoint(value: EndpointID | str) -> EndpointID:
    """Accept an EndpointID as-is or parse its URI text.

    Raises:
        TypeError: *value* is neither an EndpointID nor a string.
    """
    if isinstance(value, EndpointID):
        return value
    if isinstance(value, str):
        return parse_uri(value)
    msg = f"Cannot build an endpoint from {type(value).__name__}"
    raise TypeError(msg)
