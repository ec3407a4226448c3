"""XOR key for TYT MD-380 firmware images."""

from __future__ import annotations

MD380_LENGTH = 1024

MD380 = bytes.fromhex(
    """
    2e df 40 b5 bd da 91 35 21 42 e3 e2 6d a9 0b 90
    31 30 3a fa 4f 05 74 64 0a 29 44 7e 60 77 ad 8c
    9a e2 63 c4 21 fe 3c f7 93 c2 e1 74 16 8c c9 2a
    ed 65 68 0c 49 86 a3 ba 61 1c 88 5d c4 49 3c d2
    ee 6b 34 0c 1a a0 a8 b3 58 8a 45 11 df 4f 23 2f
    a4 e4 f6 3b 2c 8c 88 2d 9e 9b 67 ab 1c 80 da 29
    53 02 1a 54 51 ca bf b1 97 22 79 81 70 fc 00 e9
    81 36 4e 4f a0 1c 0b 07 ea 2f 49 2f 0f 25 71 d7
    f1 30 7d 66 6e 83 68 38 79 13 e3 8c 70 9a 4a 9e
    a9 e2 d6 10 4f 40 14 8e 6c 5e 96 b2 46 3e e8 25
    ef 7c c5 08 18 d4 8b 92 26 e3 ed fa 88 32 e8 97
    47 70 f8 46 de ff 8b 0c 4d b3 b6 fc 69 d6 27 5b
    76 6f 5b 03 f7 c3 11 05 c5 1d fe 92 5f cb c2 1c
    81 69 1b b8 f8 62 58 c7 b4 b3 11 d5 1f f2 16 c1
    ad 8f a5 1e b4 5b e0 da 7f 46 7d 1d 9e 6d c0 74
    7f 54 a6 2f 43 6f 64 08 ca e8 0f 05 10 9c 9d 9f
    bd 67 0c 23 f7 a1 e1 59 7b e8 d4 64 ec 20 ca e9
    6a b9 03 73 67 30 95 16 b6 d9 19 53 e5 db a4 3c
    cd 7c f9 d8 67 9f fc c9 e2 8a 6a 2c f2 ed c8 c1
    6a 20 99 4c 0d ad d4 3b a1 0e 95 88 46 b8 13 e1
    06 58 d2 07 ad 5c 1a 74 db b5 a7 40 57 db a2 45
    a6 12 d0 82 dd ed 0a bd b3 10 ed 6c da 39 d2 d6
    90 82 00 76 71 e0 21 a0 8f f0 f3 67 c4 f3 40 bd
    47 16 10 dc 7e f8 1d e5 13 66 87 c7 4a 69 c9 63
    92 82 ec ee 5a 34 fb 96 25 c3 b6 68 e1 3c 8a 71
    74 b5 c1 23 99 d6 f7 fb ea 98 cd 61 3d 4d e1 d0
    34 e1 fd 36 10 5f 8e 9e c6 b6 58 0c 55 be 69 a8
    56 76 4b 1f d5 90 7e 47 5f 2f 25 02 5c ef 00 64
    a0 26 9a 18 3c 69 c4 ff 9a 52 41 1b c9 81 c3 ac
    15 e1 17 98 db 2c 9c 10 9b b2 f9 71 4f 56 0f 68
    fb d9 2d 5a 86 5b 83 03 c8 1e da 5d e4 8e 82 c3
    d8 7e 8b 56 52 b5 38 a0 c6 a9 b0 77 bd 8a f7 24
    70 82 1d c5 95 3c b5 f0 79 a3 89 99 4f ec 8c 36
    c7 d6 10 20 e3 30 39 3d 07 9c b2 dc 4f 94 9e e0
    24 aa d2 21 12 14 41 0f d4 67 b7 99 b1 a3 cb 4d
    0c 70 0f c0 36 a7 89 30 86 14 67 68 ac 7b ee e4
    42 d8 b4 36 a4 eb 0f a8 02 f4 cd 23 b3 bc 25 4f
    cc d4 ee fc f2 21 0f c1 6c 99 37 e2 7c 47 ce 77
    f0 95 2b cb f4 ca 07 03 2a d2 31 00 fd 3e 84 86
    32 8b 17 9d bf a7 b3 37 e1 b1 8a 14 69 00 25 e3
    56 68 9f aa a9 b8 11 67 75 87 4d f8 36 31 cf 38
    63 1c f0 6b 47 40 5d dc 0c e6 c8 c4 19 af dd 6e
    9e d9 78 99 6c be 15 1e 0b 9d 88 d2 06 9d ee ae
    8a 0f e3 2d 2f f4 f5 f6 16 bf 59 bb 34 5c dd 61
    ed 70 1e 61 e5 e3 fb 6e 13 9c 49 58 17 8b c8 30
    cd ed 56 ad 22 cb 63 ce 26 c4 a5 c1 63 0d 0d 04
    6e b6 f9 ca bb 2f ab a0 b5 0a fa 50 0e 02 47 05
    54 3d b3 b1 c6 ce 8f ac 65 7e 15 9e 4e cc 55 9e
    46 32 71 9b 97 aa 0d fb 1b 71 02 83 96 0b 52 77
    48 87 61 02 c3 04 62 d7 fb 74 0f 19 9c a0 9d 79
    a0 6d ef 9e 20 5d 0a c9 6a 58 c9 b9 55 ad d1 cc
    d1 54 c8 68 c2 76 c2 99 0f 2e fc fb f5 92 cd db
    a2 ed d9 99 ff 4f 88 50 cd 48 b7 b9 f3 f0 ad 4d
    16 2a 50 aa 6b 2a 98 38 c9 35 45 0c 03 a8 cd 0d
    74 3c 99 55 db 88 70 da 6a c8 34 4d 19 dc cc 42
    40 94 61 92 65 2a cd fd 52 10 50 14 6b ec 85 57
    3f e2 95 9a 5d 11 ab ad 69 60 a8 3b 6f 7a 17 f3
    76 17 63 e6 59 7e 47 30 d2 47 87 db d8 66 de 00
    2b 65 37 2f 2d f1 20 11 f3 98 7b 4c 9c d1 76 a7
    e1 3d be 6f ee 2c f0 19 70 63 51 28 f0 1d be 52
    5f 4f e6 de f2 30 b6 50 30 f9 15 48 49 e9 d2 a8
    a9 8d da f5 cd 3e af 00 55 eb 15 c5 5b 19 0f 93
    04 27 09 6d 54 d7 57 b1 47 0a de f7 1d cb 11 3c
    f5 8f 20 40 9d bb 6b 2c a9 67 3d 78 c2 62 b7 0c
    """
)
"""MD-380 firmware XOR key."""