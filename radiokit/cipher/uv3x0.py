"""XOR key for UV3x0 series firmware images."""

from __future__ import annotations

UV3X0_LENGTH = 1024

UV3X0 = bytes.fromhex(
    """
    00 aa 89 89 1f 4b ec cf 42 45 14 54 00 65 eb 66
    41 7d 4c 88 49 5a 21 0d f2 f5 c8 e6 38 ed bc b9
    fb 35 71 33 01 0a 7f 9e 3b 29 03 b6 49 3e 42 b8
    3f 9f 90 bd aa 3a 71 46 ce cd fd 18 32 55 89 4a
    5f c8 83 9c e4 06 9e 0a 9d 0d 2f a1 35 6d d7 92
    ea fd 63 85 90 cb f0 2f d9 59 53 27 d3 06 b8 f5
    b2 ca 88 6c d0 26 91 3b f2 5b 61 be cd db f2 1a
    c9 fd 8d 88 04 f4 e8 f1 9a 02 92 bc 24 e9 90 e4
    7e a3 49 4d ce 52 9f 58 c1 7a 5f b5 18 6e db 78
    64 08 d5 6f 0d 9d 9f b3 99 30 81 7e 2b e6 5b 3c
    4a ba 8b e5 e4 72 11 89 93 d2 f1 2d 1e 0f d9 d5
    43 87 04 e2 b4 ae 5e 9e 5f 4c e9 16 f2 e6 5f 28
    9f 79 19 dc 1d 6f 2f f8 ef cb e1 ce e8 a7 36 59
    ef e0 e2 88 00 10 6d da 73 bc 92 2b 81 cf e6 ce
    04 47 ba db 7e 2f 41 ca 5d cd f6 41 7d 1c 38 2b
    ef 7d 37 0a f9 a9 14 8e 5d ea 44 66 de 8b 36 56
    01 8c 35 8a 11 9b 8f 2a 65 40 f7 2e e6 58 28 74
    cb c4 cb 0f a7 62 9b e3 a6 3c c7 6f 13 00 97 e9
    1e b1 53 90 dd 9b 61 3e 90 8c ad 3c 29 41 4e 5b
    0c 1f 66 40 13 24 49 00 d5 1c e2 ed 28 18 53 af
    e4 1c dc 96 ea 18 fe 2e 65 19 e0 14 50 c1 f1 09
    39 f5 cf 45 44 d5 68 0d 72 f1 5f 88 23 b9 b1 cf
    da 36 98 43 41 f8 af 23 6d 50 57 5e 62 bf 5a a5
    da ad cf c5 42 5e 3e 34 06 23 04 e9 0e cd f8 71
    89 67 4e 40 e9 25 bc 45 2e 97 dc c1 68 22 d2 58
    77 b1 2e 69 16 a8 14 9b 18 1a 9a b8 f0 3b 71 bf
    77 18 c8 34 ea 85 6d bb 32 57 35 e5 69 d4 9f 4a
    99 68 b4 d8 c7 9a 31 6a 30 3d e8 9c d2 eb 64 de
    2e af cc c8 4d 02 09 ae 01 f9 2b 73 6d bc 09 a2
    c7 3a 28 ba 5d 1b df ca d6 f6 b8 3e bb c5 18 f9
    36 96 23 a4 19 83 da 45 21 e3 86 13 7d c2 5a 89
    8a 8f 54 b9 e1 15 64 e3 93 ad d0 46 b3 b1 d7 36
    15 33 95 6f 56 ef 26 a9 1c 7f 0e 6c 9f ce d8 26
    69 cf fe 7b 5a 6f 09 dc ee c8 f9 5b c3 97 e7 bd
    55 f0 e9 d1 0c 30 36 01 7a 34 8b 27 dd c8 cd a2
    ec 62 ef a8 d0 11 16 dd 70 b0 fb 25 f1 5f 91 b7
    7d 34 e9 74 44 2d 52 76 c1 69 c4 eb 3f 98 7f 24
    9b b1 ef e9 4b e3 d3 10 9f cd 9e 4e 47 f1 1d 4c
    16 66 5b fd 06 ce c2 30 7b 88 82 61 cc 27 37 d5
    ff 22 c6 e6 d4 cc 87 9b 06 87 aa 7b cd 35 d3 a3
    a7 f0 08 17 58 fb cd 56 2f f8 8d 31 8c 5b 3c dc
    9f 1e 3b 46 72 b7 7c a6 2a 47 e6 56 8a 14 fb e5
    b8 39 b8 68 44 9c bc 10 66 21 ad 02 87 1d d8 62
    03 0e 17 b1 2e 89 f8 5a 95 73 1b 87 86 74 dc 39
    d2 a9 32 98 d1 99 d7 88 a7 6b aa 7c c6 56 51 8f
    b4 58 22 d1 0f 2b 44 de ce 75 11 b6 c9 3f bf c8
    7c a8 40 50 07 da 66 e3 7a 3e 4b 48 50 ec f0 8a
    39 66 24 4b 1d 85 a8 5b 5d b3 90 8a 5c 5b ec ba
    3e 9e a8 38 ef 48 b1 4c 67 02 59 0e 2d c9 fd 7c
    1a 9e e5 ca 60 7f 6b f9 cb 97 60 ab 46 b2 ab 36
    a0 f3 33 f7 90 c9 00 e9 f7 1f 9d 75 66 d3 c0 8c
    e0 6a 2c f4 e1 02 d7 df 9e 87 48 c2 8f 2a 44 64
    2b 0f a9 36 f3 46 9a e2 b1 fd dc 26 02 f4 80 e3
    12 31 c3 71 a7 f4 32 36 61 ed 12 77 40 ad fe 6d
    66 5b d2 9c 1e a8 c8 60 1e 04 e1 c9 09 13 87 a8
    38 5a 70 ea ba 3f c5 25 99 30 84 71 5f 22 23 79
    d9 3d 76 d2 1b d5 d2 8b c4 9d 73 05 84 17 1b 04
    db 4f fc 07 23 c9 d8 d5 d0 b8 67 59 f7 70 f9 af
    0d 1e 5c 7f f2 b7 00 8a 2d 2e 59 82 7a ea 85 1f
    82 77 2f 6f e9 7c b3 6e 8d ed 82 d6 0d 81 c9 38
    89 67 4d 4c a9 35 99 86 e1 21 5c e9 f3 73 0d 20
    b5 3a d0 cb 14 3e 9d 17 59 37 9f 91 ab 3c da 3c
    d5 7e 11 e0 4a 36 e7 a6 66 dc 44 e2 f7 9a fa 30
    fc 00 a9 c2 ad f9 e0 f8 bb fe 84 31 d8 89 76 e2
    """
)
"""UV3x0 firmware XOR key."""