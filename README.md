# radiokit

Building blocks for working with amateur radio firmware images and the
protocols used to load them onto a radio. It has no dependencies beyond the
standard library.

## Modules

- `radiokit.util`: `format_bytes` (binary unit suffixes, e.g. `2.00 kiB`),
  `hex_dump`, packed BCD helpers (`bcd_decode`, `bcd_encode`,
  `parse_bcd_timestamp`, `make_bcd_timestamp`), `apply_xor` for repeating-key
  XOR with an optional key offset, and the checksums found in radio firmware:
  `bsd_checksum`, `fletcher16`, `internet_checksum` and `cs_checksum`.
- `radiokit.flash`: `FlashSector`, `get_sector`, `make_simple_layout` and
  `aligned_contiguous_memory_op`, which splits an address range into
  sector-aligned pieces and calls a function for each. Ready-made maps:
  `STM32F40X`, `W25Q128JV` and `M25P16`.
- `radiokit.dfu`: USB DFU requests (`DFU.set_address`, `erase`, `download`,
  `upload`, `get_state`, `get_status`, `abort`, `detach`), the `DFURequest`,
  `DFUState` and `DFUStatus` enumerations, `DFUStatusReport.parse` for the
  6-byte status reply, and the TYT `TYTCommand` / `TYTRegister` codes.
  Failures raise `DFUError`.
- `radiokit.hid`: `HID` with `interrupt_read`, `interrupt_write`,
  `bulk_read` and `bulk_write`, plus the TYT HID vocabulary
  (`CommandType`, `Command`, `TYTCommands`, `OK`, `OK_RESPONSE`).
  Failures raise `HIDError`.
- `radiokit.ymodem`: `send` and `receive` over any binary stream with
  `read`/`write`, the protocol's `crc16`, and `format_size` / `parse_size`
  for the size field of the header packet. Failures raise `YModemError`.
- `radiokit.cipher`: XOR keys for several firmware formats:
  `cs800.CS800_0`, `cs800.CS800_1`, `dr5xx0.DR5XX0`, `dm1701.DM1701`,
  `md380.MD380`, `md9600.MD9600` and `uv3x0.UV3X0`.

## Installation

```
pip install .
```

## Example

```python
from radiokit.cipher.md380 import MD380
from radiokit.util import apply_xor, format_bytes
from radiokit.flash import STM32F40X, get_sector

image = bytes(4096)
encrypted = apply_xor(image, MD380)
assert apply_xor(encrypted, MD380) == image

print(format_bytes(2048, 2))             # 2.00 kiB
print(get_sector(STM32F40X, 0x08004100))  # FlashSector[Index=1, ...]
```

Sending a file over a serial line with YModem (any object with `read` and
`write` works; a `reset_input_buffer` method is called if present):

```python
from radiokit import ymodem

with open("/dev/ttyUSB0", "r+b", buffering=0) as port:
    ymodem.send(port, b"firmware bytes", "fw.bin")
```

## What it does not do

- It does not open USB devices itself. `DFU` and `HID` take an object that
  performs the control, interrupt and bulk transfers; you supply it, for
  example as a thin wrapper around a USB library.
- It does not read or write firmware container files or codeplug files; it
  provides the keys, checksums and helpers such formats are built from.
- There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```