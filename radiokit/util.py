"""Byte formatting, BCD timestamps, XOR ciphers and firmware checksums."""

from __future__ import annotations

from datetime import datetime

KIB = 1 << 10
MIB = 1 << 20
GIB = 1 << 30
TIB = 1 << 40
PIB = 1 << 50
EIB = 1 << 60

_HEX_ROW = 16
_HEX_WORD = 4
_FLETCHER_BLOCK = 5802


def format_bytes(num_bytes: int, precision: int = 2) -> str:
    """Render a byte count with a binary unit suffix.

    There is deliberately no MiB step: sizes between 1 MiB and 1 GiB are
    reported in kiB.
    """
    for limit, unit in ((EIB, "EiB"), (PIB, "PiB"), (TIB, "TiB"), (GIB, "GiB"), (KIB, "kiB")):
        if num_bytes >= limit:
            return f"{num_bytes / limit:.{precision}f} {unit}"
    return f"{num_bytes} B"


def _printable(byte: int) -> str:
    return chr(byte) if 32 <= byte <= 127 else "."


def hex_dump(data: bytes) -> str:
    """Return a hex dump of ``data``: 16 bytes per line, grouped by 4, with ASCII."""
    data = bytes(data)
    lines = []
    for row_start in range(0, len(data), _HEX_ROW):
        row = data[row_start:row_start + _HEX_ROW]
        last_row = row_start + _HEX_ROW >= len(data)
        pieces = []
        for pos, byte in enumerate(row, 1):
            pieces.append(f"{byte:02x} ")
            if pos % _HEX_WORD == 0 and not (pos == _HEX_ROW and not last_row):
                pieces.append("  ")
        ascii_part = "".join(_printable(b) for b in row)
        if last_row and len(row) == _HEX_ROW:
            pieces.append(ascii_part)
        else:
            pieces.append(" " + ascii_part)
        lines.append("".join(pieces))
    return "\n".join(lines)


def bcd_decode(value: int) -> int:
    """Decode one packed BCD byte."""
    return (value & 0x0F) + (value >> 4) * 10


def bcd_encode(value: int) -> int:
    """Encode a value below 100 as one packed BCD byte."""
    return (value // 10) * 16 + value % 10


def parse_bcd_timestamp(data: bytes) -> datetime:
    """Parse a 7-byte BCD timestamp (century, year, month, day, h, m, s) as local time."""
    if len(data) < 7:
        raise ValueError("BCD timestamp needs 7 bytes")
    century, year, month, day, hour, minute, second = (bcd_decode(b) for b in data[:7])
    return datetime(century * 100 + year, month, day, hour, minute, second)


def make_bcd_timestamp(moment: datetime) -> bytes:
    """Encode a datetime as a 7-byte BCD timestamp."""
    return bytes(
        bcd_encode(v)
        for v in (
            moment.year // 100,
            moment.year % 100,
            moment.month,
            moment.day,
            moment.hour,
            moment.minute,
            moment.second,
        )
    )


def apply_xor(data: bytes, key: bytes, offset: int = 0) -> bytes:
    """XOR ``data`` with a repeating ``key``, starting ``offset`` bytes into the key."""
    if not key:
        raise ValueError("XOR key must not be empty")
    key_len = len(key)
    return bytes(b ^ key[(offset + i) % key_len] for i, b in enumerate(data))


def bsd_checksum(data: bytes) -> int:
    """16-bit BSD rotating checksum."""
    checksum = 0
    for byte in data:
        checksum = (checksum >> 1) + ((checksum & 1) << 15)
        checksum = (checksum + byte) & 0xFFFF
    return checksum


def fletcher16(data: bytes) -> int:
    """Fletcher-16 checksum, high byte c1, low byte c0."""
    c0 = c1 = 0
    for block_start in range(0, len(data), _FLETCHER_BLOCK):
        for byte in data[block_start:block_start + _FLETCHER_BLOCK]:
            c0 += byte
            c1 += c0
        c0 %= 255
        c1 %= 255
    return (c1 << 8) | c0


def internet_checksum(data: bytes) -> int:
    """Ones-complement sum over the first half (rounded up) of ``data``'s bytes."""
    total = sum(data[:(len(data) + 1) // 2])
    while total >> 16:
        total = (total & 0xFFFF) + (total >> 16)
    return ~total & 0xFFFF


def cs_checksum(data: bytes) -> int:
    """Connect Systems firmware checksum: byte-swapped 16-bit sum divided by 5."""
    quotient = (sum(data) & 0xFFFF) // 5
    return (((quotient & 0xFF) << 8) | (quotient >> 8)) & 0xFFFF