"""Firmware ciphers, checksums, flash maps, DFU/HID helpers and YModem transfer for amateur radios."""

__version__ = "0.1.0"