from datetime import datetime

import pytest

from radiokit.util import (
    GIB,
    MIB,
    apply_xor,
    bcd_decode,
    bcd_encode,
    bsd_checksum,
    cs_checksum,
    fletcher16,
    format_bytes,
    hex_dump,
    internet_checksum,
    make_bcd_timestamp,
    parse_bcd_timestamp,
)


def test_format_bytes_kib():
    assert format_bytes(2048) == "2.00 kiB"


def test_format_bytes_small_is_plain():
    assert format_bytes(100) == f"{100} B"


def test_format_bytes_gib_precision():
    assert format_bytes(GIB, precision=3) == "1.000 GiB"


def test_format_bytes_has_no_mib_step():
    assert format_bytes(5 * MIB).endswith(" kiB")


@pytest.mark.parametrize("value", range(100))
def test_bcd_round_trip(value):
    assert bcd_decode(bcd_encode(value)) == value


@pytest.mark.parametrize("value", [10, 23, 59, 99])
def test_bcd_encode_reads_as_decimal_in_hex(value):
    assert f"{bcd_encode(value):x}" == str(value)


def test_bcd_timestamp_round_trip():
    moment = datetime(2021, 7, 14, 13, 45, 9)
    encoded = make_bcd_timestamp(moment)
    assert len(encoded) == 7
    assert parse_bcd_timestamp(encoded) == moment


def test_bcd_timestamp_digits_readable_in_hex():
    moment = datetime(2020, 12, 31, 23, 59, 58)
    assert make_bcd_timestamp(moment).hex() == "20201231235958"


def test_parse_bcd_timestamp_too_short():
    with pytest.raises(ValueError):
        parse_bcd_timestamp(b"\x20\x20")


def test_apply_xor_is_involution():
    data = bytes(range(50))
    key = b"\x13\x37\xaa"
    assert apply_xor(apply_xor(data, key), key) == data


def test_apply_xor_offset_rotates_key():
    data = bytes(range(20))
    key = b"\x01\x02\x03\x04\x05"
    assert apply_xor(data, key, 2) == apply_xor(data, key[2:] + key[:2])


def test_apply_xor_empty_key():
    with pytest.raises(ValueError):
        apply_xor(b"abc", b"")


def test_bsd_checksum_single_byte_and_range():
    assert bsd_checksum(bytes([200])) == 200
    assert 0 <= bsd_checksum(bytes(range(256)) * 10) <= 0xFFFF


def test_fletcher16_zeros_and_single_byte():
    assert fletcher16(bytes(10000)) == 0
    value = fletcher16(bytes([7]))
    assert value >> 8 == value & 0xFF == 7


def test_internet_checksum_only_first_half_counts():
    assert internet_checksum(b"\x01\x02\xff\xff") == internet_checksum(b"\x01\x02\x00\x00")
    assert internet_checksum(b"") == 0xFFFF


def test_cs_checksum_order_independent():
    data = bytes(range(1, 200))
    assert cs_checksum(data) == cs_checksum(data[::-1])
    assert cs_checksum(bytes(64)) == 0


def test_hex_dump_layout():
    dump = hex_dump(bytes(range(0x40, 0x60)))
    lines = dump.split("\n")
    assert len(lines) == 2
    assert lines[0].startswith("40 41 42 43   44")
    assert lines[0].endswith("@ABCDEFGHIJKLMNO")


def test_hex_dump_non_printable():
    dump = hex_dump(b"\x00A")
    assert dump.startswith("00 41 ")
    assert dump.endswith(".A")