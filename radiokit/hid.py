"""USB HID transfers and the TYT HID command vocabulary."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

DEFAULT_TIMEOUT_MS = 5000


class HIDError(RuntimeError):
    """A HID transfer failed."""


class UsbTransport(Protocol):
    """An opened USB device able to perform interrupt and bulk transfers."""

    def read_interrupt(self, endpoint: int, length: int, timeout: int) -> bytes: ...

    def write_interrupt(self, endpoint: int, data: bytes, timeout: int) -> int: ...

    def read_bulk(self, endpoint: int, length: int, timeout: int) -> bytes: ...

    def write_bulk(self, endpoint: int, data: bytes, timeout: int) -> int: ...


class HID:
    """Thin HID transfer layer over an opened USB device."""

    def __init__(self, device: UsbTransport, timeout: int = DEFAULT_TIMEOUT_MS) -> None:
        self.device = device
        self.timeout = timeout

    @staticmethod
    def _pad(data: bytes, length: int) -> bytes:
        # Short reads come back as a zero-filled buffer of the requested size.
        return bytes(data[:length]).ljust(length, b"\x00")

    def interrupt_read(self, endpoint: int, length: int) -> bytes:
        """Read up to ``length`` bytes; the result is always ``length`` long."""
        try:
            data = self.device.read_interrupt(endpoint, length, self.timeout)
        except OSError as exc:
            raise HIDError(str(exc)) from exc
        return self._pad(data, length)

    def interrupt_write(self, endpoint: int, data: bytes) -> None:
        """Write ``data`` in full or raise HIDError."""
        try:
            written = self.device.write_interrupt(endpoint, bytes(data), self.timeout)
        except OSError as exc:
            raise HIDError(str(exc)) from exc
        if written != len(data):
            raise HIDError("Invalid write len!")

    def bulk_read(self, endpoint: int, length: int) -> bytes:
        """Read up to ``length`` bytes; the result is always ``length`` long."""
        try:
            data = self.device.read_bulk(endpoint, length, self.timeout)
        except OSError as exc:
            raise HIDError(str(exc)) from exc
        return self._pad(data, length)

    def bulk_write(self, endpoint: int, data: bytes) -> None:
        """Write ``data`` in full or raise HIDError."""
        try:
            written = self.device.write_bulk(endpoint, bytes(data), self.timeout)
        except OSError as exc:
            raise HIDError(str(exc)) from exc
        if written != len(data):
            raise HIDError("Invalid write len!")


class CommandType(IntEnum):
    """Direction of a TYT HID command."""

    HOST_TO_DEVICE = 0x01
    DEVICE_TO_HOST = 0x03


@dataclass(frozen=True)
class Command:
    """A TYT HID command frame."""

    type: CommandType
    length: int
    data: bytes


class TYTCommands:
    """Raw TYT HID command payloads."""

    A = b"A"
    UPDATE = b"#UPDATE?"
    DOWNLOAD = b"DOWNLOAD"
    FLASH_PROGRAM = b"F-PROG"
    FLASH_ERASE = b"F-ERASE"
    ERASE_ROM = b"ERASEROM"
    FLASH_VERSION = b"F-VER"
    FLASH_COMPANY = b"F-CO"
    FLASH_SERIAL_NUMBER = b"F-SN"
    FLASH_TIME = b"F-TIME"
    FLASH_MOD = b"F-MOD"
    PROGRAM = b"PROGRAM"
    END = b"END"


OK = Command(CommandType.HOST_TO_DEVICE, 1, TYTCommands.A)
"""OK response sent to the device."""

OK_RESPONSE = Command(CommandType.DEVICE_TO_HOST, 1, TYTCommands.A)
"""OK response received from the device."""

TYT_HID_VID = 0x15A2
TYT_HID_PID = 0x0073
TYT_HID_EP_IN = 0x80 | 0x01
TYT_HID_EP_OUT = 0x00 | 0x02