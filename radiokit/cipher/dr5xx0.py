"""XOR key for Connect Systems DR5XX0 firmware images."""

from __future__ import annotations

DR5XX0_LENGTH = 0x100

DR5XX0 = bytes.fromhex(
    """
    3F 41 42 44 45 47 48 4A 4B 4D 4E 50 51 53 54 56
    57 59 5A 5C 5D 5E 60 61 62 64 65 66 67 68 6A 6B
    6C 6D 6E 6F 70 71 72 73 74 75 75 76 77 78 78 79
    7A 7A 7B 7B 7C 7C 7D 7D 7D 7E 7E 7E 7E 7E 7E 7E
    7F 7E 7E 7E 7E 7E 7E 7E 7D 7D 7D 7C 7C 7B 7B 7A
    7A 79 78 78 77 76 75 75 74 73 72 71 70 6F 6E 6D
    6C 6B 6A 68 67 66 65 64 62 61 60 5E 5D 5C 5A 59
    57 56 54 53 51 50 4E 4D 4B 4A 48 47 45 44 42 41
    3F 3D 3C 3A 39 37 36 34 33 31 30 2E 2D 2B 2A 28
    27 25 24 22 21 20 1E 1D 1C 1A 19 18 17 16 14 13
    12 11 10 0F 0E 0D 0C 0B 0A 09 09 08 07 06 06 05
    04 04 03 03 02 02 01 01 01 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 01 01 02 02 03 03 04
    04 05 06 06 07 08 09 09 0A 0B 0C 0D 0E 0F 10 11
    12 13 14 16 17 18 19 1A 1C 1D 1E 20 21 22 24 25
    27 28 2A 2B 2D 2E 30 31 33 34 36 37 39 3A 3C 3D
    """
)
"""DR5XX0 key: one period of a sampled sine wave."""