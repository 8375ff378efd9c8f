"""Endpoint identifier value and its scheme-specific payload variants.

An endpoint identifier (EID) is a scheme code plus a scheme-specific part
(SSP). The SSP is a closed tagged variant:

- ``IntegerSSP``: unsigned integer; ``dtn:none`` is ``IntegerSSP(0)``.
- ``NameSSP``: a DTN node name such as ``//node/service``.
- ``PairSSP``: an IPN ``(node, service)`` pair of unsigned 64-bit integers.
- ``OpaqueSSP``: any other decoded shape, carried without guarantees.

INVARIANT: Values built by the parser or :func:`dtn_none` use a known
scheme, carry ``0`` when a DTN payload is an integer, and carry a pair with
both components >= 1 under IPN. The normalizer may build other values from
decoded data of unknown schemes; they are preserved, never rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar

from dtneid.domain.schemes import DTN_NONE_VALUE, SchemeCode, scheme_name


class PayloadKind(StrEnum):
    """Tag naming the shape of a scheme-specific part."""

    INTEGER = "integer"
    NAME = "name"
    PAIR = "pair"
    OPAQUE = "opaque"


@dataclass(frozen=True, slots=True)
class IntegerSSP:
    value: int

    kind: ClassVar[PayloadKind] = PayloadKind.INTEGER


@dataclass(frozen=True, slots=True)
class NameSSP:
    value: str

    kind: ClassVar[PayloadKind] = PayloadKind.NAME


@dataclass(frozen=True, slots=True)
class PairSSP:
    node: int
    service: int

    kind: ClassVar[PayloadKind] = PayloadKind.PAIR


@dataclass(frozen=True, slots=True)
class OpaqueSSP:
    value: Any

    kind: ClassVar[PayloadKind] = PayloadKind.OPAQUE


SSP = IntegerSSP | NameSSP | PairSSP | OpaqueSSP


@dataclass(frozen=True, slots=True)
class EndpointID:
    """Immutable endpoint identifier.

    Equality is structural: scheme code and payload, component-wise for
    pairs. ``str(eid)`` gives the canonical ``<scheme>:<ssp>`` text.

    Attributes:
        scheme_code: Wire scheme tag (1 = dtn, 2 = ipn, others opaque).
        ssp: Scheme-specific part.
    """

    scheme_code: int
    ssp: SSP

    @classmethod
    def parse(cls, scheme: str, ssp: str) -> EndpointID:
        """Build a validated EID from a scheme name and SSP text."""
        from dtneid.domain.parser import parse_endpoint

        return parse_endpoint(scheme, ssp)

    @classmethod
    def from_uri(cls, uri: str) -> EndpointID:
        """Build a validated EID from ``<scheme>:<ssp>`` text."""
        from dtneid.domain.parser import parse_uri

        return parse_uri(uri)

    @property
    def scheme_name(self) -> str:
        return scheme_name(self.scheme_code)

    @property
    def is_none(self) -> bool:
        """True for the ``dtn:none`` endpoint."""
        return self == DTN_NONE

    @property
    def node_number(self) -> int | None:
        """IPN node number, or None for non-IPN endpoints."""
        if self.scheme_code == SchemeCode.IPN and isinstance(self.ssp, PairSSP):
            return self.ssp.node
        return None

    @property
    def service_number(self) -> int | None:
        """IPN service number, or None for non-IPN endpoints."""
        if self.scheme_code == SchemeCode.IPN and isinstance(self.ssp, PairSSP):
            return self.ssp.service
        return None

    def __str__(self) -> str:
        from dtneid.domain.render import render_endpoint

        return render_endpoint(self)


DTN_NONE = EndpointID(scheme_code=int(SchemeCode.DTN), ssp=IntegerSSP(DTN_NONE_VALUE))


def dtn_none() -> EndpointID:
    """Return the ``dtn:none`` endpoint (no specific endpoint)."""
    return DTN_NONE
