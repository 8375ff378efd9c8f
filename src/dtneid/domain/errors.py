"""Endpoint identifier error taxonomy.

Every error carries a stable ``code`` string. The service layer copies it
into ``ServiceError.code`` so CLI and JSON consumers can branch on it.
"""

from __future__ import annotations

__all__ = [
    "EndpointError",
    "MalformedIPNError",
    "MalformedURIError",
    "MalformedWireShapeError",
    "NumericOverflowError",
    "OutOfRangeError",
    "UnencodableEndpointError",
    "UnknownSchemeError",
]


class EndpointError(ValueError):
    """Base class for rejected endpoint input."""

    code = "ENDPOINT_ERROR"


class UnknownSchemeError(EndpointError):
    """Scheme name is neither ``dtn`` nor ``ipn``."""

    code = "UNKNOWN_SCHEME"


class MalformedIPNError(EndpointError):
    """IPN scheme-specific part is not ``<digits>.<digits>``."""

    code = "MALFORMED_IPN"


class NumericOverflowError(EndpointError):
    """An IPN digit run does not fit an unsigned 64-bit integer."""

    code = "NUMERIC_OVERFLOW"


class OutOfRangeError(EndpointError):
    """An IPN node or service number is 0."""

    code = "OUT_OF_RANGE"


class MalformedURIError(EndpointError):
    """Endpoint URI has no ``<scheme>:`` prefix."""

    code = "MALFORMED_URI"


class MalformedWireShapeError(EndpointError):
    """Decoded binary item does not have the shape of an endpoint."""

    code = "MALFORMED_WIRE_SHAPE"


class UnencodableEndpointError(EndpointError):
    """Endpoint payload cannot be serialized, e.g. a name that is not valid UTF-8."""

    code = "UNENCODABLE_ENDPOINT"
