from radiokit.cipher.dm1701 import DM1701, DM1701_LENGTH
from radiokit.util import apply_xor


def test_xor_with_zeros_yields_key():
    result = apply_xor(bytes(DM1701_LENGTH), DM1701)
    assert result == DM1701
    assert len(result) == DM1701_LENGTH


def test_xor_round_trip():
    data = bytes(range(256)) * 5 + b"segment"
    encrypted = apply_xor(data, DM1701)
    assert encrypted != data
    assert apply_xor(encrypted, DM1701) == data


def test_first_bytes():
    assert apply_xor(bytes(8), DM1701) == bytes.fromhex("3a0474ad90aeb378")


def test_last_bytes_via_offset():
    assert apply_xor(bytes(4), DM1701, DM1701_LENGTH - 4) == bytes.fromhex("8ceddfb7")


def test_keystream_repeats_after_key_length():
    stream = apply_xor(bytes(DM1701_LENGTH * 2), DM1701)
    assert stream[:DM1701_LENGTH] == stream[DM1701_LENGTH:]


def test_offset_matches_slice():
    offset = 300
    assert apply_xor(bytes(64), DM1701, offset) == DM1701[offset:offset + 64]