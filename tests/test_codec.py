import base64

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cgl.codec import base64_decode, base64_encode


@given(st.binary(max_size=200))
def test_encode_matches_standard_base64(data):
    assert base64_encode(data) == base64.b64encode(data).decode("ascii")


@given(st.binary(max_size=200))
def test_round_trip(data):
    assert base64_decode(base64_encode(data)) == data


def test_encode_known_value():
    assert base64_encode(b"Man") == "TWFu"


def test_encode_padding():
    assert base64_encode(b"M").endswith("==")
    assert base64_encode(b"Ma").endswith("=")
    assert not base64_encode(b"Man").endswith("=")


def test_empty():
    assert base64_encode(b"") == ""
    assert base64_decode("") == b""


def test_decode_unpadded_matches_padded():
    assert base64_decode("TW") == base64.b64decode("TW==")
    assert base64_decode("TWE") == base64.b64decode("TWE=")


def test_decode_stops_at_invalid_character():
    assert base64_decode("TW-Fu") == base64_decode("TW")
    assert base64_decode("TWFu!xyz") == base64_decode("TWFu")


def test_decode_stops_at_non_ascii_character():
    assert base64_decode("TWFu\u00e9TWFu") == base64_decode("TWFu")


def test_decode_stops_at_padding():
    assert base64_decode("TQ==TWFu") == base64_decode("TQ")


def test_single_trailing_character_yields_nothing():
    assert base64_decode("TWFuT") == base64_decode("TWFu")
    assert base64_decode("T") == b""


def test_decode_accepts_bytes():
    encoded = base64_encode(b"glyph data")
    assert base64_decode(encoded.encode("ascii")) == b"glyph data"


@pytest.mark.parametrize("data", [b"\x00", b"\xff\xfe", bytes(range(256))])
def test_round_trip_binary(data):
    assert base64_decode(base64_encode(data)) == data