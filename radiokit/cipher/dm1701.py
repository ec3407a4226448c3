"""XOR key for Baofeng DM-1701 firmware images."""

from __future__ import annotations

DM1701_LENGTH = 1024

DM1701 = bytes.fromhex(
    """
    3a 04 74 ad 90 ae b3 78 de fa 73 8d dc 8c 53 67
    27 61 f3 6f 95 c8 f1 1f c5 ad 17 68 fb 1d d2 51
    2b 07 e6 e2 54 40 61 40 10 ca cd 19 68 56 aa 42
    ec 07 1c 9f 04 79 e0 44 81 02 84 d9 77 38 d8 43
    4f b3 a0 81 18 14 8b d3 1e 45 69 22 be 03 98 9c
    78 9a bf 9f 46 f0 bf d8 2c c5 e7 ac 11 39 68 d6
    cd 8f 08 52 83 30 1a 7a 31 f3 ad 70 85 9b 04 bb
    f3 a2 46 35 04 35 77 24 f1 7f a7 a7 70 2a 69 54
    ce 23 87 1f 3e 9e f4 7d 71 5b 02 ca 66 27 d5 e8
    84 a5 18 2a e6 4e ee 70 f6 b7 2c 93 3d 12 c5 03
    79 f8 86 ae f0 66 03 24 05 05 d1 f9 09 ae f5 6b
    53 2d 9d 45 93 45 0e 04 63 f5 de 37 1f fa 63 2c
    f7 95 6b c8 42 8e 2d b7 15 79 80 c6 15 38 4b 8c
    89 c1 3d 50 b4 22 be 27 61 c2 25 5d bf e9 2b 16
    6f 82 9f 35 dc 20 5c 7d cb 40 79 f6 33 ce bf 93
    4e ea 60 11 f0 eb e5 22 18 a4 69 cb c4 e7 05 0b
    0a 48 8b bd 65 23 77 bf 4d e1 22 54 0a 76 39 c7
    c9 2e 6e 52 f0 aa 6d 3d af 25 12 4a d7 fd d9 51
    f0 6e 96 28 86 a0 66 c5 c3 e4 e5 a7 43 3a a1 72
    23 18 cf d9 5b 66 3d c0 4e cd 88 a2 a0 31 8f 31
    48 7c 27 3d e6 9e 11 d7 56 d2 29 b6 85 22 df da
    83 2d eb 6e da 28 3d f3 1f 23 33 9b c6 8d 0f f3
    3a fb a8 c5 2e 25 60 3d 2d 31 55 4a 79 35 dc 47
    12 f7 2b db 15 f7 55 1e 47 af 7c fd f2 19 41 df
    f0 72 80 89 05 3e 3b 3e 72 8c d3 2b c6 7b 7e 03
    f8 fd f5 e7 b3 db 6d 88 f1 f9 c9 8f cb dc 0e 3d
    8f 69 17 4e 14 ef 8a 24 4a 68 0a 21 15 fc ae 55
    5c c7 b2 59 5d dc 6d 7a 43 8a 83 1a fa de 5c 54
    42 68 d5 df 02 42 35 35 df 4f 62 f4 0e c1 55 84
    66 de cb fa ba 03 3d 3c 65 e9 13 66 26 27 15 6d
    2f f8 22 03 78 3f 24 ba 59 c8 43 6b 58 d1 59 d9
    40 c9 a6 92 73 57 c6 16 80 9e df 3b f8 c0 1f d0
    7e a0 66 81 1e ed 3f fa e0 5c 15 50 9c 34 a4 9c
    0f 10 ad e9 2f e0 ee 50 bc 32 51 61 18 b0 64 c5
    58 e9 09 22 9b 54 6f 3f 9a 91 40 69 81 f3 1c 15
    fe 3c 47 c6 97 a7 9e 31 40 2c d0 9f 2d ff ca 94
    e5 5a 73 ae 98 7c 9a cf b2 f2 2c 7f b0 15 ab 8b
    32 d4 db f2 52 b3 bf 02 35 14 c3 bf df b5 3b 84
    4c 7b 0c ed bc 6e a9 f3 4e 04 42 59 d0 a2 38 48
    d6 60 d3 36 09 0d 37 0c c2 73 94 87 d8 db 9e de
    b6 d4 3d a6 b0 31 85 f3 97 51 e8 c1 8a a3 aa 92
    10 68 96 58 64 bb f0 94 10 cf aa c0 bd 79 da eb
    4a ee 6c a3 1b cd 14 17 b4 60 87 7d 86 1f eb b2
    08 75 8c 20 0a c7 d0 e5 47 b3 6d 32 39 95 d9 f0
    31 50 03 aa a6 4b 40 a7 cd b9 88 56 6b 1e e2 f0
    e8 0e 1d 58 a4 38 c1 46 8e a4 45 a4 f2 39 82 38
    92 82 68 84 f9 b2 f0 ea 0c e5 51 14 e2 a8 77 93
    d5 bc b1 c6 d9 17 aa fe 0d 2c 9a df 90 6c bd 0a
    96 0d 05 f9 bb 0a 0c 29 97 6b 4c 7f 92 c6 92 e5
    f9 06 b0 34 52 6b 72 56 ed d2 d4 ac bc 37 72 ad
    64 78 40 d0 94 5b 7b ac 96 d3 e0 5e 24 7f 1b 2c
    7c 74 82 68 b7 3c 03 96 56 1e 5b d1 1e a0 89 6a
    26 4b 83 d3 2e ae 27 bb 32 a6 74 7b 3f dc fa b1
    86 8e 8f 2a af 93 44 06 6f 99 98 16 5d b2 eb 89
    01 0f 35 c8 2e 0a f7 9e 92 6a 72 9c 8c e3 18 bc
    3d dd 40 44 e2 77 1d ed 61 ca f1 45 21 72 7e 52
    1f 4b bd 78 3f 78 d3 9c e0 aa 41 8a b2 9e 5b 94
    cc e8 fb 7c f9 f0 76 95 53 3a cf 24 14 ea 2b 0c
    a8 87 85 ab 07 ff a3 ff 41 eb 49 0d 5a 15 ac 83
    59 37 29 9c 9c 06 37 44 6e 6f 9b 7d dc 21 db 01
    c4 4b f4 28 2e a7 4f 0d df b7 f2 ec 2c 4f f4 cf
    0d 53 33 6a 72 c2 49 43 da f3 bb 16 21 1f 74 77
    99 20 72 b9 5d 78 c0 0f e2 95 a4 f1 cf 54 19 c1
    0f c3 7f af 24 2b 92 da be 4e 99 b7 8c ed df b7
    """
)
"""DM-1701 firmware XOR key."""