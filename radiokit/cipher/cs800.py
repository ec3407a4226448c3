"""XOR keys for Connect Systems CS800 firmware images."""

from __future__ import annotations

CS800_LENGTH = 0x100

CS800_0 = bytes.fromhex(
    """
    60 5e 5d 5c 5a 59 36 34 33 31 30 2e 2d 2b 2a 28
    6c 6d 6e 6f 70 71 72 73 74 75 75 76 77 78 78 79
    07 08 09 09 0a 0b 7a 04 05 06 06 7a 7b 7b 7c 7c
    03 02 02 01 01 01 00 00 00 00 3f 41 42 44 45 47
    0a 09 09 12 11 10 0f 0e 0d 0c 0b 08 07 06 06 05
    00 00 00 00 00 00 00 00 00 01 01 02 02 03 03 04
    7f 7e 7e 7e 7e 7e 7e 7e 7d 7d 7d 7c 7c 7b 7b 7a
    7a 78 77 76 72 19 18 17 16 14 13 71 70 6f 6e 6d
    57 56 54 53 51 50 4e 4d 4b 4a 48 47 45 44 42 41
    57 59 5a 5c 5d 5e 60 61 62 64 65 66 67 68 6a 6b
    0c 0d 0e 0f 10 11 7d 7d 7d 7e 7e 7e 7e 7e 7e 7e
    1a 1c 1d 1e 20 21 22 24 25 12 13 14 16 17 18 19
    27 25 24 22 75 75 79 78 74 73 21 20 1e 1d 1c 1a
    04 04 03 00 00 00 48 4a 4b 4d 4e 50 51 53 54 56
    27 28 2a 3a 3c 3d 2b 2d 2e 34 36 37 39 30 31 33
    3f 6c 6b 6a 68 67 3d 3c 3a 39 37 66 65 64 62 61
    """
)
"""CS800 key for key id 0x00; also used for the firmware checksum bytes."""

CS800_1 = bytes.fromhex(
    """
    00 00 00 00 00 00 00 00 00 01 01 02 02 03 03 04
    04 05 06 06 07 08 09 09 0a 0b 0c 0d 0e 0f 10 11
    12 13 2e 16 17 18 19 1a 1c 1d 1e 20 21 22 24 25
    57 59 5a 5c 5d 5e 60 61 62 64 65 66 67 68 6a 6b
    6c 6d 6e 6f 70 71 72 73 74 75 75 76 77 78 78 79
    2d 33 42 44 45 47 48 4a 4b 4d 4e 37 51 37 54 56
    7a 7a 7b 7b 2b 7c 7d 7d 7d 30 7e 30 7e 30 7e 7e
    7f 7e 28 7e 7e 1d 2b 7e 7d 7d 7d 7c 7c 7b 7b 7a
    2b 3c 78 3c 77 76 3c 75 30 73 3a 71 70 3a 6e 6d
    6c 6b 6a 68 67 66 65 64 62 61 60 5e 5d 5c 5a 59
    57 56 54 53 51 50 4e 4d 4b 4a 48 47 45 44 42 41
    3f 3d 3c 3a 39 37 36 34 33 31 30 2e 2d 2b 2a 28
    27 25 24 22 21 20 1e 1d 1c 1a 19 18 17 16 14 13
    12 3c 10 0f 0e 0d 0c 0b 0a 09 09 08 07 06 3a 05
    04 04 03 03 02 02 01 01 01 00 00 00 00 00 00 00
    27 28 2a 2b 2d 2e 30 31 33 34 36 37 39 3a 3c 3d
    """
)
"""CS800 key for key id 0x01."""