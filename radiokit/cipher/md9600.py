"""XOR key for TYT MD-9600 firmware images."""

from __future__ import annotations

MD9600_LENGTH = 1024

MD9600 = bytes.fromhex(
    """
    a2 fa bb 4b 90 8f 17 20 96 36 43 84 f7 ac 4e 55
    ea e5 b4 36 55 b9 39 e2 d8 da 18 c0 0d 09 5d b8
    0e 89 90 46 38 d4 93 cc 2f 8e cd 2d 22 b7 89 97
    51 24 98 a0 cc 30 3e 95 7d af 4c 0e 68 23 89 c6
    32 33 56 aa e0 58 92 30 e2 da bc ea 50 fb 57 5b
    73 71 93 09 87 1a 29 d3 bf ec 87 85 8a 2b 2d aa
    15 de 57 a2 11 83 dc f4 b6 02 56 e5 08 e0 83 49
    59 b5 eb 99 0f e0 c3 46 a7 79 12 4d fa 87 12 0c
    bf 73 d9 53 52 bd 38 bf b4 ee e4 43 d2 ce d3 08
    0a d6 e9 77 eb e8 d4 94 3c 3e 35 8d 40 a1 00 92
    39 db 25 e8 2b 6e 70 39 e2 86 ad 2f 36 2d 11 41
    8e be d5 cc a3 9c 24 65 87 23 37 6e e5 df bf e7
    8a fc 83 87 24 fe 4a 0b 4a b3 fb cf bd 65 03 9b
    ee 53 f7 bf c0 63 7a 62 8e 11 62 17 70 ab 16 b1
    ba c0 3a 59 c6 d6 8f dd f4 5b 14 4b ee de 72 bf
    31 7f 96 79 c9 a4 a0 32 5b ee fc b0 69 6c ce 99
    d2 0e 94 85 98 5c 07 56 e6 67 41 cc 52 00 25 54
    5f 29 fc 21 46 c9 5c 7e f6 a4 4e 63 59 89 af 46
    d9 cd d7 33 23 f9 79 1f 2a c0 ca 7a 6f 34 e6 03
    81 39 6f e0 bf 39 77 ee 65 19 a0 56 c7 6c 81 61
    d7 e7 4c 8d ed 15 ae e0 c8 4c f7 7c d0 e0 7b 74
    9d 96 38 de bd 5c b9 29 b2 37 3a b1 3b 7c 0c 91
    d5 43 3b b8 80 19 6f 40 c6 f5 10 fb fa 6e ad 4e
    be 2a 9f 42 c7 9a e9 d8 e5 e4 63 9d 3d 21 18 7f
    d9 c9 ec df 64 6b 82 e7 2e a2 5c 1e 77 44 44 39
    e9 dc eb 35 66 5b d1 a2 04 0a 64 42 56 c3 6c d2
    ee 61 a6 28 1f 75 af 7e 08 3b 24 0e cd cc 08 df
    28 94 66 de 21 07 37 30 19 90 85 c7 0d ca d1 33
    19 f3 b3 bb 3b 9e c0 ad 5a a7 b0 f2 87 6c c1 e5
    82 3a 56 66 80 06 e4 29 2b 5e 0e 54 eb 9f 0f 4a
    64 67 59 c1 40 4d 7b 1b 2e d0 48 f3 2a 8e 36 f6
    00 b7 04 f4 0b c0 a0 36 43 5c 47 13 77 a8 ee be
    d6 a5 e1 62 b4 ec aa 71 8b 9d 34 39 40 99 30 b8
    a8 f1 b8 b1 4b 9e 32 ff 68 72 78 2a 39 4e 36 38
    77 96 93 c5 21 e2 13 56 7a f6 bb eb 51 f5 77 d3
    84 d1 ba c4 c7 06 64 2b a2 88 e8 c1 b9 f9 ae 5f
    50 20 b6 13 0e 97 7f 73 01 c3 27 31 e3 09 d3 f0
    9c 3f 51 56 07 61 fc 63 f9 86 e0 01 80 12 1f dc
    68 2c 94 73 04 73 b5 70 2b ec be 34 80 3f 0c b7
    f6 24 c6 8f 94 18 c3 4e 76 54 a8 11 15 ff 51 56
    c8 a3 73 0e 8a de 7f f4 fd 5a c9 1c af fe e9 cf
    9c 66 61 96 f5 91 81 95 20 da 88 1a 00 2a 0c 76
    76 6b 9c 0c 28 40 a3 a7 81 f3 8f 11 f9 af 33 e1
    96 ef 6a 94 b2 36 fe df 00 01 c8 44 ca f9 18 e4
    7c 6e 57 94 66 01 ea 32 be a0 5a 3a e4 b8 b2 94
    ea a5 29 b0 54 6e 01 d5 1c af af b6 fa d6 3c 47
    e2 92 eb ce cd 89 1c 3d bc 4a 70 bf fa 82 2e 91
    a2 72 e6 13 62 a0 54 1f 7e cd 86 99 18 28 41 47
    ae c1 a2 e3 e4 40 01 6f 84 d7 1a c9 c3 75 6f 7f
    c6 3d e8 e4 64 36 bd 64 2e 44 95 14 ac 57 f0 8d
    ea e2 c2 fb 33 8f 60 71 1d 31 a0 80 c6 f9 3c 07
    5c ee 78 4c e3 97 05 4c 32 fa 24 50 3f cb 0f c1
    9d dd 94 3d 43 dc 03 ea 8f 3e 4a 0b 8b 77 5f d1
    6e 6c de 73 66 2b f4 81 94 d9 7b 75 58 eb 66 8b
    d0 9a 60 d2 9b 90 b0 83 e3 e8 60 92 9a 55 9e 84
    03 a1 62 80 75 5a 51 a8 5c c8 e2 aa 80 21 bf 91
    8a 00 6e e2 c4 14 30 e4 20 15 29 3f 7c fd c2 c8
    24 74 4c 9c 98 8c e6 6c 90 ae a0 17 3e d5 e0 7e
    d3 f9 05 94 44 cf 4b b4 4e af ee 38 b8 d5 93 47
    d8 cd e3 ee 58 29 79 72 3a 75 fe e5 1a 6d 92 f8
    b3 6d 6e 10 a5 28 c8 9c 76 9d f7 a5 d6 47 d8 a6
    27 94 70 9f 3c 99 d3 65 61 04 44 3c 9c 52 9d a7
    33 42 f2 7f 6e 89 71 43 9e c7 8c af 5e ba 5b 90
    19 b1 3b d6 cd 44 bc eb 0e 43 ba 43 4d ec c9 35
    """
)
"""MD-9600 firmware XOR key."""