"""YModem file transfer over a byte stream, using 16-bit CRC packets."""

from __future__ import annotations

import time
from enum import Enum
from typing import BinaryIO, Optional, Union

FILE_NAME_MAX_LENGTH = 64
FILE_SIZE_LENGTH = 16

PACKET_SEQNO_INDEX = 1
PACKET_SEQNO_COMP_INDEX = 2
PACKET_HEADER = 3
PACKET_TRAILER = 2
PACKET_OVERHEAD = PACKET_HEADER + PACKET_TRAILER
PACKET_SIZE = 128
PACKET_1K_SIZE = 1024
PACKET_ERROR_MAX_NBR = 5

CANCEL_DELAY_S = 1.0
SEND_COOL_OFF_S = 1.0

SOH = 0x01
STX = 0x02
EOT = 0x04
ACK = 0x06
NAK = 0x15
CAN = 0x18
CRC = 0x43
ABT1 = 0x41
ABT2 = 0x61

_NO_DATA = -1


class YModemError(Exception):
    """A YModem transfer failed or was cancelled."""


class _Rx(Enum):
    BAD = "bad"
    ABORT = "abort"
    EOT = "eot"


def crc16(data: bytes) -> int:
    """CRC-16/CCITT as used by YModem (polynomial 0x1021, initial value 0)."""
    crc = 0
    for byte in data:
        x = ((crc >> 8) ^ byte) & 0xFFFF
        x ^= x >> 4
        crc = ((crc << 8) ^ (x << 12) ^ (x << 5) ^ x) & 0xFFFF
    return crc


def format_size(value: int) -> str:
    """Render an unsigned 32-bit value as decimal digits."""
    return str(value & 0xFFFFFFFF)


def parse_size(text: Union[str, bytes]) -> int:
    """Read a decimal number after optional leading spaces; stops at the first non-digit.

    The result wraps around at 32 bits.
    """
    if isinstance(text, bytes):
        text = text.decode("latin-1")
    result = 0
    for char in text.lstrip(" "):
        if not "0" <= char <= "9":
            break
        result = (result * 10 + ord(char) - ord("0")) & 0xFFFFFFFF
    return result


def _getc(stream: BinaryIO) -> int:
    byte = stream.read(1)
    return byte[0] if byte else _NO_DATA


def _put(stream: BinaryIO, *values: int) -> None:
    stream.write(bytes(values))


def _read_exact(stream: BinaryIO, length: int) -> bytes:
    chunks = bytearray()
    while len(chunks) < length:
        chunk = stream.read(length - len(chunks))
        if not chunk:
            break
        chunks += chunk
    return bytes(chunks)


def _cancel(stream: BinaryIO, message: str) -> None:
    _put(stream, CAN, CAN)
    time.sleep(CANCEL_DELAY_S)
    raise YModemError(message)


def _rx_packet(stream: BinaryIO, packets_received: int) -> Union[_Rx, bytes]:
    first = _getc(stream)
    if first == SOH:
        size = PACKET_SIZE
    elif first == STX:
        size = PACKET_1K_SIZE
    elif first == EOT:
        return _Rx.EOT
    elif first == CAN:
        return _Rx.ABORT if _getc(stream) == CAN else _Rx.BAD
    elif first in (_NO_DATA, CRC, ABT1, ABT2):
        # A stray 'C' may be the start condition; 'A'/'a' is a user abort.
        return _Rx.BAD
    else:
        # Most likely someone typing at the terminal: treat as an abort.
        return _Rx.ABORT

    rest = _read_exact(stream, size + PACKET_OVERHEAD - 1)
    if len(rest) < size + PACKET_OVERHEAD - 1:
        return _Rx.BAD
    packet = bytes([first]) + rest
    if packet[PACKET_SEQNO_INDEX] != packet[PACKET_SEQNO_COMP_INDEX] ^ 0xFF:
        return _Rx.BAD
    if crc16(packet[PACKET_HEADER:]):
        return _Rx.BAD
    return packet


def _parse_header(payload: bytes) -> tuple[str, int]:
    name_end = 0
    while name_end < FILE_NAME_MAX_LENGTH and payload[name_end] != 0:
        name_end += 1
    name = payload[:name_end].decode("utf-8", errors="replace")

    size_start = name_end + 1
    size_end = size_start
    while (
        size_end - size_start < FILE_SIZE_LENGTH
        and size_end < len(payload)
        and payload[size_end] not in (0, 0x20)
    ):
        size_end += 1
    return name, parse_size(payload[size_start:size_end])


def receive(stream: BinaryIO, max_size: int) -> tuple[str, bytes]:
    """Receive a file from a YModem sender; returns ``(filename, data)``.

    Raises YModemError when the sender aborts, the file does not fit in
    ``max_size`` bytes, or too many bad packets arrive in a row.
    """
    buffer = bytearray()
    filename = ""
    filesize = 0
    errors = 0

    _put(stream, CRC)
    session_done = False
    while not session_done:
        crc_nak = True
        file_done = False
        packets_received = 0
        position = 0
        while not file_done:
            result = _rx_packet(stream, packets_received)
            if result is _Rx.BAD:
                if packets_received > 0:
                    errors += 1
                    if errors >= PACKET_ERROR_MAX_NBR:
                        _cancel(stream, f"too many receive errors: {errors}")
                _put(stream, CRC)
                continue

            errors = 0
            if result is _Rx.ABORT:
                _put(stream, ACK)
                raise YModemError("transfer aborted by sender")
            if result is _Rx.EOT:
                _put(stream, ACK)
                file_done = True
                _put(stream, CRC)
                continue

            packet = result
            if packet[PACKET_SEQNO_INDEX] != packets_received & 0xFF:
                _put(stream, NAK)
                continue

            payload = packet[PACKET_HEADER:-PACKET_TRAILER]
            if packets_received == 0:
                if not any(payload[:4]):
                    # Empty filename packet ends the session.
                    _put(stream, ACK)
                    file_done = session_done = True
                    break
                filename, filesize = _parse_header(payload)
                if filesize > max_size:
                    _cancel(
                        stream,
                        f"receive buffer too small (0x{max_size:08x} vs 0x{filesize:08x})",
                    )
                _put(stream, ACK)
                _put(stream, CRC if crc_nak else NAK)
                crc_nak = False
            else:
                if position + len(payload) > max_size:
                    _cancel(stream, f"receive buffer overflow (exceeded 0x{max_size:08x})")
                buffer[position:position + len(payload)] = payload
                position += len(payload)
                _put(stream, ACK)
            packets_received += 1

    return filename, bytes(buffer[:filesize])


def _packet(payload: bytes, block: int) -> bytes:
    size = PACKET_SIZE if block == 0 else PACKET_1K_SIZE
    body = payload[:size].ljust(size, b"\x00")
    checksum = crc16(body)
    start = SOH if block == 0 else STX
    return (
        bytes([start, block & 0xFF, ~block & 0xFF])
        + body
        + bytes([(checksum >> 8) & 0xFF, checksum & 0xFF])
    )


def _header_packet(filename: Optional[Union[str, bytes]], filesize: int) -> bytes:
    if filename is None:
        return _packet(b"", 0)
    name = filename.encode("utf-8") if isinstance(filename, str) else bytes(filename)
    name = name.split(b"\x00", 1)[0][:PACKET_SIZE - FILE_SIZE_LENGTH - 2]
    return _packet(name + b"\x00" + format_size(filesize).encode("ascii"), 0)


def _send_data(stream: BinaryIO, data: bytes) -> None:
    block = 1
    offset = 0
    while offset < len(data):
        chunk = data[offset:offset + PACKET_1K_SIZE]
        stream.write(_packet(chunk, block))
        reply = _getc(stream)
        if reply == ACK:
            offset += len(chunk)
            block += 1
        elif reply in (_NO_DATA, CAN):
            return

    while True:
        _put(stream, EOT)
        reply = _getc(stream)
        if reply in (ACK, _NO_DATA):
            break

    if reply == ACK and _getc(stream) == CRC:
        while True:
            stream.write(_header_packet(None, 0))
            reply = _getc(stream)
            if reply in (ACK, _NO_DATA):
                break


def send(stream: BinaryIO, data: bytes, filename: Optional[Union[str, bytes]]) -> int:
    """Send ``data`` as ``filename`` to a YModem receiver; returns the bytes sent.

    Raises YModemError when the receiver does not accept the filename packet.
    """
    data = bytes(data)
    time.sleep(SEND_COOL_OFF_S)
    flush = getattr(stream, "reset_input_buffer", None)
    if flush is not None:
        flush()
    _getc(stream)

    crc_nak = True
    while True:
        stream.write(_header_packet(filename, len(data)))
        reply = _getc(stream)
        if reply == ACK:
            if _getc(stream) == CRC:
                _send_data(stream, data)
                return len(data)
        elif reply == CRC and crc_nak:
            crc_nak = False
        elif reply != NAK or crc_nak:
            _cancel(stream, "transmit error")