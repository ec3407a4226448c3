import pytest

from radiokit.hid import (
    HID,
    OK,
    OK_RESPONSE,
    Command,
    CommandType,
    HIDError,
    TYTCommands,
)


class FakeDevice:
    def __init__(self, reply=b"", short_write=False, fail=False):
        self.reply = reply
        self.short_write = short_write
        self.fail = fail
        self.calls = []

    def _check(self):
        if self.fail:
            raise OSError("LIBUSB_ERROR_PIPE")

    def _write(self, kind, endpoint, data, timeout):
        self._check()
        self.calls.append((kind, endpoint, data, timeout))
        return len(data) - 1 if self.short_write else len(data)

    def _read(self, kind, endpoint, length, timeout):
        self._check()
        self.calls.append((kind, endpoint, length, timeout))
        return self.reply[:length]

    def read_interrupt(self, endpoint, length, timeout):
        return self._read("int", endpoint, length, timeout)

    def write_interrupt(self, endpoint, data, timeout):
        return self._write("int", endpoint, data, timeout)

    def read_bulk(self, endpoint, length, timeout):
        return self._read("bulk", endpoint, length, timeout)

    def write_bulk(self, endpoint, data, timeout):
        return self._write("bulk", endpoint, data, timeout)


def test_interrupt_read_pads_short_reply():
    hid = HID(FakeDevice(reply=b"\x03\x00\x01A"))
    data = hid.interrupt_read(0x81, 64)
    assert len(data) == 64
    assert data.startswith(b"\x03\x00\x01A")
    assert data[4:] == bytes(60)


def test_bulk_read_uses_default_timeout():
    device = FakeDevice(reply=b"xyz")
    data = HID(device).bulk_read(0x81, 3)
    assert data == b"xyz"
    assert device.calls == [("bulk", 0x81, 3, 5000)]


def test_writes_pass_data_through():
    device = FakeDevice()
    hid = HID(device, timeout=100)
    hid.interrupt_write(0x02, b"abc")
    hid.bulk_write(0x02, b"de")
    assert device.calls == [("int", 0x02, b"abc", 100), ("bulk", 0x02, b"de", 100)]


def test_short_interrupt_write_raises():
    device = FakeDevice(short_write=True)
    hid = HID(device)
    with pytest.raises(HIDError, match="Invalid write len!") as info:
        hid.interrupt_write(0x02, b"abcd")
    assert str(info.value) == "Invalid write len!"
    assert device.calls == [("int", 0x02, b"abcd", 5000)]


def test_short_bulk_write_raises():
    device = FakeDevice(short_write=True)
    hid = HID(device)
    with pytest.raises(HIDError, match="Invalid write len!") as info:
        hid.bulk_write(0x02, b"abcd")
    assert str(info.value) == "Invalid write len!"
    assert device.calls == [("bulk", 0x02, b"abcd", 5000)]


def test_transport_error_becomes_hid_error():
    hid = HID(FakeDevice(fail=True))
    with pytest.raises(HIDError, match="LIBUSB_ERROR_PIPE"):
        hid.interrupt_read(0x81, 8)


def test_command_equality():
    assert OK == Command(CommandType.HOST_TO_DEVICE, 1, b"A")
    assert OK != OK_RESPONSE
    assert OK_RESPONSE.type == CommandType.DEVICE_TO_HOST


def test_command_payloads():
    update = Command(CommandType.HOST_TO_DEVICE, 8, TYTCommands.UPDATE)
    assert update == Command(CommandType.HOST_TO_DEVICE, 8, b"#UPDATE?")
    erase = Command(CommandType.HOST_TO_DEVICE, 7, TYTCommands.FLASH_ERASE)
    assert erase == Command(CommandType.HOST_TO_DEVICE, 7, b"F-ERASE")
    assert erase != update