"""Tests for the wire item builder and binary-form normalizer."""

import pytest

from dtneid.codec.wire import endpoint_from_wire, endpoint_to_wire, normalize_endpoint
from dtneid.domain.eid import EndpointID, IntegerSSP, NameSSP, OpaqueSSP, PairSSP, dtn_none
from dtneid.domain.errors import MalformedWireShapeError
from dtneid.domain.parser import parse_endpoint
from dtneid.domain.schemes import UINT64_MAX


class TestEndpointToWire:
    def test_none(self) -> None:
        assert endpoint_to_wire(dtn_none()) == [1, 0]

    def test_name(self) -> None:
        assert endpoint_to_wire(parse_endpoint("dtn", "//a/")) == [1, "//a/"]

    def test_pair(self) -> None:
        assert endpoint_to_wire(parse_endpoint("ipn", "3.4")) == [2, [3, 4]]

    def test_opaque(self) -> None:
        assert endpoint_to_wire(EndpointID(9, OpaqueSSP(b"\x00"))) == [9, b"\x00"]

    def test_scheme_code_is_plain_int(self) -> None:
        item = endpoint_to_wire(dtn_none())
        assert type(item[0]) is int


class TestNormalizeEndpoint:
    def test_integer_becomes_integer_ssp(self) -> None:
        assert normalize_endpoint(1, 0) == dtn_none()

    def test_sequence_becomes_pair(self) -> None:
        assert normalize_endpoint(2, [3, 4]) == EndpointID(2, PairSSP(3, 4))

    def test_tuple_sequence_accepted(self) -> None:
        assert normalize_endpoint(2, (3, 4)).ssp == PairSSP(3, 4)

    def test_string_passes_through(self) -> None:
        assert normalize_endpoint(1, "//a/") == EndpointID(1, NameSSP("//a/"))

    def test_unknown_scheme_preserved(self) -> None:
        eid = normalize_endpoint(42, "x")
        assert eid.scheme_code == 42
        assert str(eid) == "unknown_42:x"

    @pytest.mark.parametrize("payload", [b"\x01", 1.5, {"a": 1}, None, True])
    def test_other_shapes_are_opaque(self, payload: object) -> None:
        assert normalize_endpoint(1, payload).ssp == OpaqueSSP(payload)

    def test_no_grammar_validation(self) -> None:
        # Shape is right, values break the parser's rules; kept as decoded.
        assert normalize_endpoint(2, [0, 0]).ssp == PairSSP(0, 0)
        assert normalize_endpoint(1, 7).ssp == IntegerSSP(7)

    @pytest.mark.parametrize("scheme_code", [-1, "1", 1.0, None, True, UINT64_MAX + 1])
    def test_bad_scheme_code(self, scheme_code: object) -> None:
        with pytest.raises(MalformedWireShapeError):
            normalize_endpoint(scheme_code, 0)

    @pytest.mark.parametrize(
        "payload",
        [
            [],
            [1],
            [1, 2, 3],
            ["1", "2"],
            [1, -2],
            [1, UINT64_MAX + 1],
            [True, 1],
            [[1], 2],
        ],
    )
    def test_bad_sequence(self, payload: object) -> None:
        with pytest.raises(MalformedWireShapeError):
            normalize_endpoint(2, payload)

    @pytest.mark.parametrize("payload", [-1, UINT64_MAX + 1])
    def test_bad_integer(self, payload: int) -> None:
        with pytest.raises(MalformedWireShapeError):
            normalize_endpoint(1, payload)


class TestEndpointFromWire:
    @pytest.mark.parametrize(
        "scheme,ssp",
        [("dtn", "none"), ("dtn", "//foo/bar/"), ("ipn", "1.1"), ("ipn", f"{UINT64_MAX}.2")],
    )
    def test_native_roundtrip(self, scheme: str, ssp: str) -> None:
        eid = parse_endpoint(scheme, ssp)
        assert endpoint_from_wire(endpoint_to_wire(eid)) == eid

    @pytest.mark.parametrize("item", [None, 1, "dtn:none", [1], [1, 0, 0], {1: 0}])
    def test_not_a_pair(self, item: object) -> None:
        with pytest.raises(MalformedWireShapeError):
            endpoint_from_wire(item)
