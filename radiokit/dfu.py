"""USB Device Firmware Upgrade (DFU) requests, states and status reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol, Union

DEFAULT_TIMEOUT_MS = 5000

REQUEST_TYPE_OUT = 0x21
REQUEST_TYPE_IN = 0xA1

STATUS_REPORT_SIZE = 6

CMD_SET_ADDRESS = 0x21
CMD_ERASE = 0x41

UNKNOWN_LABEL = "**UKNOWN**"


class DFUError(Exception):
    """A DFU request failed or the device answered unexpectedly."""


class DFURequest(IntEnum):
    """DFU class-specific request codes."""

    DETACH = 0x00
    DNLOAD = 0x01
    UPLOAD = 0x02
    GETSTATUS = 0x03
    CLRSTATUS = 0x04
    GETSTATE = 0x05
    ABORT = 0x06


class DFUState(IntEnum):
    """States a DFU device reports."""

    IDLE = 0x00
    DETACH = 0x01
    DFU_IDLE = 0x02
    DFU_DOWNLOAD_SYNC = 0x03
    DFU_DOWNLOAD_BUSY = 0x04
    DFU_DOWNLOAD_IDLE = 0x05
    DFU_MANIFEST_SYNC = 0x06
    DFU_MANIFEST = 0x07
    DFU_MANIFEST_WAIT_RESET = 0x08
    DFU_UPLOAD_IDLE = 0x09
    DFU_ERROR = 0x0A
    DFU_UPLOAD_SYNC = 0x91
    DFU_UPLOAD_BUSY = 0x92

    @property
    def label(self) -> str:
        return self.name


class DFUStatus(IntEnum):
    """Status codes a DFU device reports."""

    OK = 0x00
    ERR_TARGET = 0x01
    ERR_FILE = 0x02
    ERR_WRITE = 0x03
    ERR_ERASE = 0x04
    ERR_CHECK_ERASE = 0x05
    ERR_PROG = 0x06
    ERR_VERIFY = 0x07
    ERR_ADDRESS = 0x08
    ERR_NOTDONE = 0x09
    ERR_FIRMWARE = 0x0A
    ERR_VENDOR = 0x0B
    ERR_USBR = 0x0C
    ERR_POR = 0x0D
    ERR_UNKNOWN = 0x0E
    ERR_STALLEDPKT = 0x0F

    @property
    def label(self) -> str:
        """Name as used by the DFU specification, e.g. ``errTARGET``."""
        return "OK" if self is DFUStatus.OK else "err" + self.name[4:]


class TYTCommand(IntEnum):
    """TYT custom commands, sent after the custom command prefix."""

    PROGRAMMING_MODE = 0x01
    SET_RTC = 0x02
    REBOOT = 0x05
    FIRMWARE_UPGRADE = 0x31


class TYTRegister(IntEnum):
    """TYT radio registers readable over DFU."""

    RADIO_INFO = 0x01
    R_02 = 0x02
    R_03 = 0x03
    R_04 = 0x04
    R_07 = 0x07
    RTC = 0x08


TYT_DFU_VID = 0x0483
TYT_DFU_PID = 0xDF11
TYT_CUSTOM_COMMAND = 0x91
TYT_REGISTER_COMMAND = 0xA2
TYT_REGISTER_SIZE = 1024


def _to_enum(enum_cls, value: int):
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _label(value: Union[IntEnum, int]) -> str:
    return getattr(value, "label", UNKNOWN_LABEL)


@dataclass(frozen=True)
class DFUStatusReport:
    """Answer to a GETSTATUS request.

    ``status`` and ``state`` are plain ints when the device reports a code
    outside the known enumerations.
    """

    status: Union[DFUStatus, int]
    timeout: int
    state: Union[DFUState, int]
    discarded: int

    @staticmethod
    def parse(data: bytes) -> "DFUStatusReport":
        """Decode the 6-byte GETSTATUS payload."""
        if len(data) < STATUS_REPORT_SIZE:
            raise ValueError(f"status report needs {STATUS_REPORT_SIZE} bytes, got {len(data)}")
        return DFUStatusReport(
            status=_to_enum(DFUStatus, data[0]),
            timeout=int.from_bytes(bytes(data[1:4]), "big"),
            state=_to_enum(DFUState, data[4]),
            discarded=data[5],
        )

    @staticmethod
    def empty() -> "DFUStatusReport":
        """A placeholder report meaning nothing is known."""
        return DFUStatusReport(DFUStatus.ERR_UNKNOWN, 0, DFUState.DFU_ERROR, 0)

    def __str__(self) -> str:
        return (
            f"Status: {_label(self.status)}, "
            f"Timeout: 0x{self.timeout:02x}, "
            f"State: {_label(self.state)}, "
            f"Discarded: 0x{self.discarded:02x}"
        )


class ControlTransport(Protocol):
    """An opened USB device able to perform control transfers.

    For IN requests ``data_or_length`` is the number of bytes to read and the
    bytes read are returned; for OUT requests it is the payload and the number
    of bytes written is returned. Failures raise OSError.
    """

    def control_transfer(
        self,
        request_type: int,
        request: int,
        value: int,
        index: int,
        data_or_length: Union[bytes, int],
        timeout: int,
    ) -> Union[bytes, int]: ...


class DFU:
    """DFU requests against an opened USB device."""

    def __init__(self, device: ControlTransport | None, timeout: int = DEFAULT_TIMEOUT_MS) -> None:
        self.device = device
        self.timeout = timeout

    def _check_device(self) -> ControlTransport:
        if self.device is None:
            raise RuntimeError("Device is not opened")
        return self.device

    def _transfer(self, request_type: int, request: DFURequest, value: int,
                  data_or_length: Union[bytes, int]) -> Union[bytes, int]:
        device = self._check_device()
        try:
            return device.control_transfer(
                request_type, int(request), value, 0, data_or_length, self.timeout
            )
        except OSError as exc:
            raise DFUError(str(exc)) from exc

    def _command(self, command: int, addr: int) -> None:
        self.download(bytes([command]) + (addr & 0xFFFFFFFF).to_bytes(4, "little"))

    def set_address(self, addr: int) -> None:
        """Set the address pointer for following transfers."""
        self._command(CMD_SET_ADDRESS, addr)

    def erase(self, addr: int) -> None:
        """Erase the flash page or sector at ``addr``."""
        self._command(CMD_ERASE, addr)

    def download(self, data: bytes, w_value: int = 0) -> None:
        """Send ``data`` to the device and wait for it to execute."""
        self._init_download()
        self._transfer(REQUEST_TYPE_OUT, DFURequest.DNLOAD, w_value, bytes(data))

        # GETSTATUS triggers execution of the downloaded command.
        if self.get_status().state != DFUState.DFU_DOWNLOAD_BUSY:
            raise DFUError("Command execution failed")
        if self.get_status().state != DFUState.DFU_DOWNLOAD_IDLE:
            raise DFUError("Command execution failed")

    def upload(self, size: int, w_value: int = 0) -> bytes:
        """Read up to ``size`` bytes from the device."""
        self._init_upload()
        data = self._transfer(REQUEST_TYPE_IN, DFURequest.UPLOAD, w_value, size)
        return bytes(data)[:size]

    def get_state(self) -> Union[DFUState, int]:
        """Ask the device for its current state."""
        data = bytes(self._transfer(REQUEST_TYPE_IN, DFURequest.GETSTATE, 0, 1))
        if not data:
            raise DFUError("Empty state response")
        return _to_enum(DFUState, data[0])

    def get_status(self) -> DFUStatusReport:
        """Ask the device for a full status report."""
        data = self._transfer(REQUEST_TYPE_IN, DFURequest.GETSTATUS, 0, STATUS_REPORT_SIZE)
        return DFUStatusReport.parse(bytes(data))

    def abort(self) -> None:
        """Return the device to the DFU idle state."""
        self._transfer(REQUEST_TYPE_OUT, DFURequest.ABORT, 0, b"")

    def detach(self) -> None:
        """Ask the device to leave DFU mode."""
        self._transfer(REQUEST_TYPE_OUT, DFURequest.DETACH, 0, b"")

    def _wait_for(self, *ready: DFUState) -> None:
        self._check_device()
        while self.get_state() not in ready:
            self.abort()

    def _init_download(self) -> None:
        self._wait_for(DFUState.DFU_DOWNLOAD_IDLE, DFUState.DFU_IDLE)

    def _init_upload(self) -> None:
        self._wait_for(DFUState.DFU_UPLOAD_IDLE, DFUState.DFU_IDLE)