"""dtneid — Endpoint Identifiers for delay-tolerant networking."""

from __future__ import annotations

from dtneid.domain.eid import DTN_NONE, EndpointID, dtn_none
from dtneid.domain.parser import coerce_endpoint, parse_endpoint, parse_uri
from dtneid.domain.render import render_endpoint

__version__ = "0.1.0"

__all__ = [
    "DTN_NONE",
    "EndpointID",
    "__version__",
    "coerce_endpoint",
    "dtn_none",
    "parse_endpoint",
    "parse_uri",
    "render_endpoint",
]
