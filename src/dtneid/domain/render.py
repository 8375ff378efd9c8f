"""Text renderer — EndpointID to canonical ``<scheme>:<ssp>`` text.

INVARIANT: render_endpoint never raises. Unknown scheme codes and payload
shapes produce diagnostic text instead, so decoded data from unknown
schemes can always be logged and displayed.
"""

from __future__ import annotations

from typing import Any

from dtneid.domain.eid import EndpointID, IntegerSSP, NameSSP, OpaqueSSP, PairSSP
from dtneid.domain.schemes import DTN_NONE_SSP, DTN_NONE_VALUE, SchemeCode, scheme_name


def _diagnostic(value: Any) -> str:
    return f"unknown {type(value).__name__}: {value!r}"


def render_ssp(scheme_code: int, ssp: object) -> str:
    """Render a scheme-specific part as it appears after the colon."""
    match ssp:
        case IntegerSSP(value=value):
            if scheme_code == SchemeCode.DTN and value == DTN_NONE_VALUE:
                return DTN_NONE_SSP
            return str(value)
        case NameSSP(value=value):
            return value
        case PairSSP(node=node, service=service):
            if scheme_code == SchemeCode.IPN:
                return f"{node}.{service}"
            return f"[{node} {service}]"
        case OpaqueSSP(value=value):
            return _diagnostic(value)
        case _:
            return _diagnostic(ssp)


def render_endpoint(eid: EndpointID) -> str:
    """Render *eid* as ``<scheme>:<ssp>``.

    Examples:
        >>> from dtneid.domain.eid import dtn_none
        >>> render_endpoint(dtn_none())
        'dtn:none'
    """
    return f"{scheme_name(eid.scheme_code)}:{render_ssp(eid.scheme_code, eid.ssp)}"
