import pytest

from mdbkit.rc4 import RC4, rc4


def test_known_vector():
    assert rc4(b"Key", b"Plaintext") == bytes.fromhex("BBF316E8D940AF0AD3")


@pytest.mark.parametrize(
    "key,data",
    [
        (b"\x01\x02\x03\x04", b"page contents" * 20),
        (b"k", b""),
        (bytes(range(256)) * 2, bytes(range(256))),
    ],
)
def test_round_trip(key, data):
    encrypted = rc4(key, data)
    assert len(encrypted) == len(data)
    assert rc4(key, encrypted) == data


def test_stream_continues_across_calls():
    key = b"\x10\x20\x30\x40"
    data = bytes(range(200))
    cipher = RC4(key)
    pieces = cipher.process(data[:73]) + cipher.process(data[73:])
    assert pieces == rc4(key, data)


def test_different_keys_give_different_output():
    data = bytes(64)
    assert rc4(b"\x00\x00\x00\x01", data) != rc4(b"\x00\x00\x00\x02", data)


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        RC4(b"")


def test_accepts_bytearray_input():
    data = bytearray(b"abcdef")
    assert rc4(b"Key", data) == rc4(b"Key", bytes(data))