"""Tests for CBOR encoding and decoding of endpoints."""

import cbor2
import pytest

from dtneid.codec.cbor import decode_endpoint, encode_endpoint
from dtneid.domain.eid import EndpointID, NameSSP, OpaqueSSP, dtn_none
from dtneid.domain.errors import MalformedWireShapeError, UnencodableEndpointError
from dtneid.domain.parser import parse_endpoint
from dtneid.domain.render import render_endpoint


class TestEncodeEndpoint:
    def test_dtn_none_bytes(self) -> None:
        assert encode_endpoint(dtn_none()) == bytes.fromhex("820100")

    def test_ipn_bytes(self) -> None:
        assert encode_endpoint(parse_endpoint("ipn", "1.2")) == bytes.fromhex("8202820102")

    def test_dtn_name_bytes(self) -> None:
        assert encode_endpoint(parse_endpoint("dtn", "test")) == bytes.fromhex("82016474657374")

    def test_large_ipn_uses_wide_integers(self) -> None:
        raw = encode_endpoint(parse_endpoint("ipn", "18446744073709551615.1"))
        assert raw == bytes.fromhex("8202821bffffffffffffffff01")

    def test_surrogate_name_is_unencodable(self) -> None:
        eid = parse_endpoint("dtn", "//node/\udcff")
        with pytest.raises(UnencodableEndpointError) as exc_info:
            encode_endpoint(eid)
        assert exc_info.value.code == "UNENCODABLE_ENDPOINT"
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)

    def test_unserializable_opaque_payload(self) -> None:
        with pytest.raises(UnencodableEndpointError):
            encode_endpoint(EndpointID(9, OpaqueSSP(object())))


class TestDecodeEndpoint:
    @pytest.mark.parametrize(
        "scheme,ssp",
        [
            ("dtn", "none"),
            ("dtn", "//foo/bar/"),
            ("dtn", "ünïcode"),
            ("ipn", "1.1"),
            ("ipn", "23.42"),
            ("ipn", "18446744073709551615.18446744073709551615"),
        ],
    )
    def test_binary_roundtrip(self, scheme: str, ssp: str) -> None:
        eid = parse_endpoint(scheme, ssp)
        back = decode_endpoint(encode_endpoint(eid))
        assert back == eid
        assert render_endpoint(back) == render_endpoint(eid)

    def test_unknown_scheme_decoded(self) -> None:
        eid = decode_endpoint(cbor2.dumps([7, "x"]))
        assert eid == EndpointID(7, NameSSP("x"))
        assert render_endpoint(eid) == "unknown_7:x"

    def test_indefinite_array(self) -> None:
        # 0x9f ... 0xff: indefinite-length array [1, 0]
        assert decode_endpoint(bytes.fromhex("9f0100ff")) == dtn_none()

    @pytest.mark.parametrize("hex_data", ["", "82", "ff", "8201"])
    def test_invalid_cbor(self, hex_data: str) -> None:
        with pytest.raises(MalformedWireShapeError):
            decode_endpoint(bytes.fromhex(hex_data))

    def test_wrong_shape(self) -> None:
        with pytest.raises(MalformedWireShapeError):
            decode_endpoint(cbor2.dumps({"scheme": 1}))

    def test_negative_scheme_code(self) -> None:
        with pytest.raises(MalformedWireShapeError):
            decode_endpoint(cbor2.dumps([-1, 0]))

    @pytest.mark.parametrize("hex_data", ["820100ff00", "82010000", "8202820102820100"])
    def test_trailing_bytes_rejected(self, hex_data: str) -> None:
        with pytest.raises(MalformedWireShapeError, match="trailing"):
            decode_endpoint(bytes.fromhex(hex_data))
