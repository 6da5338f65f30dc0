import pytest

from compactjwt.errors import SerializationError
from compactjwt.utils.encoding import b64url_decode, b64url_encode, marshal, unmarshal


def test_b64url_has_no_padding_and_url_alphabet() -> None:
    assert b64url_encode(b"\xfb\xff") == b"-_8"
    assert b64url_decode(b"-_8") == b"\xfb\xff"
    assert b64url_decode("") == b""


@pytest.mark.parametrize("segment", [b"-_8=", b"+/8", b"abcde", b"a b", "é"])
def test_b64url_decode_is_strict(segment) -> None:
    with pytest.raises(ValueError):
        b64url_decode(segment)


def test_marshal_is_compact() -> None:
    assert marshal({"a": [1, 2], "b": "x"}) == b'{"a":[1,2],"b":"x"}'
    assert marshal(b"raw") == b"raw"


def test_marshal_and_unmarshal_errors() -> None:
    with pytest.raises(SerializationError):
        marshal({"when": object()})
    with pytest.raises(SerializationError):
        unmarshal(b"{not json")
