from collections import deque

import pytest

from radiokit.dfu import (
    DFU,
    DFUError,
    DFURequest,
    DFUState,
    DFUStatus,
    DFUStatusReport,
    REQUEST_TYPE_IN,
    REQUEST_TYPE_OUT,
)


def status_bytes(state, status=DFUStatus.OK, timeout=(0, 0, 0), discarded=0):
    return bytes([status, *timeout, state, discarded])


class FakeDevice:
    def __init__(self):
        self.responses = {}
        self.calls = []
        self.fail_with = None

    def queue(self, request, *payloads):
        self.responses.setdefault(int(request), deque()).extend(payloads)

    def control_transfer(self, request_type, request, value, index, data_or_length, timeout):
        self.calls.append((request_type, request, value, data_or_length))
        if self.fail_with is not None:
            raise OSError(self.fail_with)
        if request_type == REQUEST_TYPE_IN:
            return self.responses[request].popleft()
        return len(data_or_length)

    def requests(self):
        return [c[1] for c in self.calls]

    def out_payloads(self, request):
        return [c[3] for c in self.calls if c[0] == REQUEST_TYPE_OUT and c[1] == request]


def ready_for_download(device):
    device.queue(DFURequest.GETSTATE, bytes([DFUState.DFU_IDLE]))
    device.queue(
        DFURequest.GETSTATUS,
        status_bytes(DFUState.DFU_DOWNLOAD_BUSY),
        status_bytes(DFUState.DFU_DOWNLOAD_IDLE),
    )


def test_parse_status_report():
    report = DFUStatusReport.parse(bytes([0x00, 0x00, 0x00, 0x20, 0x05, 0x00]))
    assert report.status is DFUStatus.OK
    assert report.timeout == 0x20
    assert report.state is DFUState.DFU_DOWNLOAD_IDLE
    assert report.discarded == 0
    assert str(report) == "Status: OK, Timeout: 0x20, State: DFU_DOWNLOAD_IDLE, Discarded: 0x00"


def test_parse_timeout_is_big_endian_across_three_bytes():
    report = DFUStatusReport.parse(bytes([0x00, 0x01, 0x00, 0x00, 0x02, 0x00]))
    assert report.timeout == 0x010000


def test_empty_report():
    report = DFUStatusReport.empty()
    assert report.status is DFUStatus.ERR_UNKNOWN
    assert report.state is DFUState.DFU_ERROR
    assert report.timeout == 0
    assert "errUNKNOWN" in str(report)


def test_unknown_codes_render_as_unknown():
    report = DFUStatusReport.parse(bytes([0x7F, 0, 0, 0, 0x55, 0]))
    assert report.status == 0x7F
    assert str(report).startswith("Status: **UKNOWN**")
    assert "State: **UKNOWN**" in str(report)


@pytest.mark.parametrize(
    "status, label",
    [
        (DFUStatus.ERR_TARGET, "errTARGET"),
        (DFUStatus.ERR_CHECK_ERASE, "errCHECK_ERASE"),
        (DFUStatus.OK, "OK"),
    ],
)
def test_status_labels(status, label):
    report = DFUStatusReport.parse(status_bytes(DFUState.DFU_IDLE, status))
    assert report.status.label == label
    assert str(report).startswith(f"Status: {label}, ")


def test_parse_short_report_raises():
    with pytest.raises(ValueError):
        DFUStatusReport.parse(b"\x00\x00")


def test_set_address_wire_bytes():
    device = FakeDevice()
    ready_for_download(device)
    DFU(device).set_address(0x08000000)
    assert device.out_payloads(DFURequest.DNLOAD) == [bytes([0x21, 0x00, 0x00, 0x00, 0x08])]


def test_erase_wire_bytes():
    device = FakeDevice()
    ready_for_download(device)
    DFU(device).erase(0x12345678)
    assert device.out_payloads(DFURequest.DNLOAD) == [bytes([0x41, 0x78, 0x56, 0x34, 0x12])]


def test_download_request_sequence():
    device = FakeDevice()
    ready_for_download(device)
    DFU(device).download(b"\x01\x02", 2)
    assert device.requests() == [
        DFURequest.GETSTATE,
        DFURequest.DNLOAD,
        DFURequest.GETSTATUS,
        DFURequest.GETSTATUS,
    ]
    dnload = [c for c in device.calls if c[1] == DFURequest.DNLOAD][0]
    assert dnload[2] == 2


def test_download_aborts_until_idle():
    device = FakeDevice()
    device.queue(
        DFURequest.GETSTATE,
        bytes([DFUState.DFU_ERROR]),
        bytes([DFUState.DFU_UPLOAD_IDLE]),
        bytes([DFUState.DFU_DOWNLOAD_IDLE]),
    )
    device.queue(
        DFURequest.GETSTATUS,
        status_bytes(DFUState.DFU_DOWNLOAD_BUSY),
        status_bytes(DFUState.DFU_DOWNLOAD_IDLE),
    )
    DFU(device).download(b"x")
    assert device.requests().count(DFURequest.ABORT) == 2


def test_download_fails_when_not_busy():
    device = FakeDevice()
    device.queue(DFURequest.GETSTATE, bytes([DFUState.DFU_IDLE]))
    device.queue(DFURequest.GETSTATUS, status_bytes(DFUState.DFU_ERROR))
    with pytest.raises(DFUError, match="Command execution failed"):
        DFU(device).download(b"x")


def test_download_fails_when_not_idle_afterwards():
    device = FakeDevice()
    device.queue(DFURequest.GETSTATE, bytes([DFUState.DFU_IDLE]))
    device.queue(
        DFURequest.GETSTATUS,
        status_bytes(DFUState.DFU_DOWNLOAD_BUSY),
        status_bytes(DFUState.DFU_ERROR),
    )
    with pytest.raises(DFUError):
        DFU(device).download(b"x")


def test_upload_returns_data_read():
    device = FakeDevice()
    device.queue(DFURequest.GETSTATE, bytes([DFUState.DFU_UPLOAD_IDLE]))
    device.queue(DFURequest.UPLOAD, b"\xaa\xbb\xcc")
    assert DFU(device).upload(16, 2) == b"\xaa\xbb\xcc"
    upload = [c for c in device.calls if c[1] == DFURequest.UPLOAD][0]
    assert upload[2] == 2
    assert upload[3] == 16


def test_upload_aborts_from_download_idle():
    device = FakeDevice()
    device.queue(
        DFURequest.GETSTATE,
        bytes([DFUState.DFU_DOWNLOAD_IDLE]),
        bytes([DFUState.DFU_IDLE]),
    )
    device.queue(DFURequest.UPLOAD, b"\x01")
    assert DFU(device).upload(1) == b"\x01"
    assert device.requests().count(DFURequest.ABORT) == 1


def test_get_state_and_status():
    device = FakeDevice()
    device.queue(DFURequest.GETSTATE, bytes([DFUState.DFU_MANIFEST]))
    device.queue(DFURequest.GETSTATUS, status_bytes(DFUState.DFU_IDLE, DFUStatus.ERR_VERIFY))
    dfu = DFU(device)
    assert dfu.get_state() is DFUState.DFU_MANIFEST
    report = dfu.get_status()
    assert report.status is DFUStatus.ERR_VERIFY
    assert report.state is DFUState.DFU_IDLE


def test_abort_and_detach_send_empty_out_requests():
    device = FakeDevice()
    dfu = DFU(device)
    dfu.abort()
    dfu.detach()
    assert device.calls == [
        (REQUEST_TYPE_OUT, DFURequest.ABORT, 0, b""),
        (REQUEST_TYPE_OUT, DFURequest.DETACH, 0, b""),
    ]


def test_transfer_error_becomes_dfu_error():
    device = FakeDevice()
    device.fail_with = "LIBUSB_ERROR_PIPE"
    with pytest.raises(DFUError, match="LIBUSB_ERROR_PIPE"):
        DFU(device).detach()


def test_unopened_device_raises():
    with pytest.raises(RuntimeError, match="Device is not opened"):
        DFU(None).get_state()