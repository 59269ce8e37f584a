"""The game's full-screen pictures and the names of its sprite graphics."""

from __future__ import annotations

from dataclasses import dataclass

from zxinterceptor.screen import FullscreenImage

TILES_BASE = 128


@dataclass(frozen=True)
class SpriteGraphic:
    """A named set of masked sprite columns used by a game object."""

    name: str


BUBBLE = SpriteGraphic("bubble")
MINE = SpriteGraphic("mine")
BULLET = SpriteGraphic("bullet")
INTERCEPTOR = SpriteGraphic("interceptor")
ENEMY = SpriteGraphic("enemy")


def _hex(text: str) -> bytes:
    return bytes.fromhex(" ".join(text.split()))


_GAME_OVER_PTILES = _hex("""
14 00 0e 20 80 0f 0d 0e 20 80 0f 0d 0e 20 80 0f
0d 0e 20 80 0f 0d 0e 20 80 0f 0d 0e 20 80 0f 0d
0e 06 80 0f 14 41 81 82 82 83 84 85 82 82 82 82
86 87 82 82 88 82 82 82 82 89 14 00 0e 06 80 0f
0d 0e 06 80 0f 14 41 8a 14 4f 8b 14 79 8c 14 4f
8d 14 79 8e 14 4f 8f 14 79 90 91 14 4f 92 14 79
93 14 48 94 14 41 95 14 79 96 97 98 99 9a 9b 9c
14 48 95 14 00 0e 06 80 0f 0d 0e 06 80 0f 14 41
9d 14 4f 9e 9f a0 a1 a2 a3 a4 14 79 a5 a6 14 48
94 14 41 a7 14 79 a8 a9 aa ab ac 14 4f ad ae 14
48 af 14 00 0e 06 80 0f 0d 0e 07 80 0f 14 48 b0
b1 b1 b1 b1 b2 b3 b1 b4 b5 14 41 9d 14 48 b1 b6
b0 b7 b1 b1 b1 b8 14 00 0e 06 80 0f 0d 0e 20 80
0f 0d 0e 20 80 0f 0d 0e 20 80 0f 0d 0e 20 80 0f
0d 0e 20 80 0f 0d 0e 20 80 0f 0d 0e 20 80 0f 0d
0e 20 80 0f 0d 0e 20 80 0f 0d 0e 20 80 0f 0d 0e
20 80 0f 0d 0e 20 80 0f 0d 0e 20 80 0f 0d 0e 20
80 0f 0d 00
""")

_GAME_OVER_TILES = _hex("""
00 00 00 00 00 00 00 00
00 00 00 00 01 03 03 03
00 00 00 00 ff ff ff ff
00 00 00 00 07 8f 8f 8f
00 00 00 00 f8 fc fc fc
00 00 00 00 7f ff ff ff
00 00 00 00 00 80 80 80
00 00 00 00 01 03 07 0f
00 00 00 00 e7 ff ff ff
00 00 00 00 80 c0 e0 f0
03 03 03 03 03 03 03 03
7f 7f 7c 7c 7c 7c 7c 7e
03 03 07 ff ff ff 81 01
01 01 03 07 0f 0f 0f 0f
1f 1f 0f 07 07 87 83 c3
1f 1f 1e 1e 1e 1e 1e 1e
00 00 f0 f0 f0 e0 e0 e0
00 00 f0 f8 f8 f8 f8 f8
3f 3f 3e 3e 3e be bf bf
01 03 e7 ff ff ff 43 01
7f 7f 7f 7f 7f 7f 7f 7f
0f 0f 0f 0f 0f 0f 0f 0f
00 00 0f 1f 1f 1f 1f 1f
0c 06 06 07 07 07 07 07
3e 3c 1c 1c 18 18 08 00
18 38 38 38 38 78 78 78
00 00 70 7f 7f 7f 60 00
60 e0 e0 e0 e0 e0 e0 e0
00 00 f0 f0 f0 f0 a0 80
03 03 01 00 00 00 00 00
3c 1c 1c 1c 1c 1f 1f 1f
7e 3e 3e 3e 3e fe fe fe
1e 1e 3c 3c 3c 3c 78 78
1e 1e 1e 1e 1e ff ff ff
1e 1e 1e 1e 1e 1e 1e 1c
1f 1f 0f 0f 0f 0f 0f 0f
07 07 07 07 07 07 07 07
00 01 01 43 c3 c0 40 e0
01 ff ff ff ff 03 03 03
0f 0f 0f 0f 0f 07 07 03
0f 0f 0f 0f 1f 00 80 80
07 07 07 0f 0f 0f 0f 0f
00 80 81 81 81 c1 c1 e1
78 f0 f0 f8 f8 f8 f8 f8
00 7f 7f 7f 7f 00 00 00
1f 1f 1f 1f 1f 1f 1f 1e
7c 78 38 38 1c 1e 1e 0e
1f 3f 7f 3f 3f 3f 3f 3f
00 00 80 ff ff ff ff ff
00 00 00 ff ff ff ff ff
00 00 e0 ff ff ff ff ff
00 00 20 ff ff ff ff ff
00 00 01 ff ff ff ff ff
7f ff ff ff ff ff ff ff
00 03 07 ff ff ff ff ff
00 00 60 ff ff ff ff ff
3f 3f 7f ff ff ff ff ff
""")

_IN_GAME_BACKGROUND_PTILES = _hex("""
14 00 0e 12 80 0f 14 41 81 14 00 0e 0c 80 0f 14
41 82 0d 14 00 0e 0e 80 0f 14 41 83 14 00 80 80
14 41 84 85 86 14 47 87 14 41 88 89 14 00 0e 09
80 0f 0d 0e 10 80 0f 14 41 8a 8b 8c 14 4f 8d 8e
14 47 8f 14 00 0e 0a 80 0f 0d 0e 10 80 0f 14 41
90 91 14 4f 92 14 79 93 14 4f 94 14 78 95 14 41
96 14 00 0e 07 80 0f 14 41 97 14 00 80 0d 0e 0a
80 0f 14 41 98 14 00 0e 06 80 0f 14 41 99 9a 9b
14 4f 9c 14 48 9d 14 00 0e 0a 80 0f 0d 0e 11 80
0f 14 41 9e 9f a0 14 78 a1 14 47 a2 14 00 0e 0a
80 0f 0d 80 80 80 14 41 90 14 00 0e 0e 80 0f 14
41 a3 a4 14 00 0e 0c 80 0f 0d 80 80 80 14 41 a5
14 00 0e 07 80 0f 14 41 a6 14 00 0e 14 80 0f 0d
0e 06 80 0f 14 41 a6 14 00 0e 16 80 0f 14 41 a7
14 00 80 80 0d 0e 0a 80 0f 14 41 a8 14 00 0e 0c
80 0f 14 41 a9 14 00 0e 08 80 0f 0d 0e 19 80 0f
14 41 aa ab 14 00 80 80 80 80 80 0d 0e 10 80 0f
14 41 ac 14 00 80 14 41 ac 14 00 0e 06 80 0f 14
41 ad ae 14 00 80 80 80 80 80 0d 0e 20 80 0f 0d
0e 1d 80 0f 14 41 af 14 00 80 80 0d 0e 16 80 0f
14 41 b0 14 00 80 80 80 14 41 b1 14 00 80 80 80
80 80 0d 0e 20 80 0f 0d 0e 20 80 0f 0d 0e 0d 80
0f 14 41 b2 b3 14 00 0e 09 80 0f 14 47 b4 14 00
0e 07 80 0f 0d 0e 0b 80 0f 14 41 b5 14 00 0e 0b
80 0f 14 41 a8 97 14 00 0e 07 80 0f 0d 80 14 41
ab 14 00 0e 14 80 0f 14 41 b6 14 00 80 80 80 80
80 14 41 b7 14 00 80 80 80 0d 80 14 41 ae 14 00
0e 0c 80 0f 14 41 b8 14 00 0e 0e 80 0f 14 41 b9
14 00 80 80 0d 0e 0e 80 0f 14 41 a5 14 00 0e 11
80 0f 0d 0e 20 80 0f 0d 0e 20 80 0f 0d 00
""")

_IN_GAME_BACKGROUND_TILES = _hex("""
00 00 00 00 00 00 00 00
00 00 00 00 00 00 00 10
06 00 00 00 00 02 00 00
00 00 04 04 00 00 00 00
00 06 06 00 02 08 08 00
10 00 00 00 00 10 87 04
00 00 00 00 00 ff ff ff
00 00 00 00 00 00 b0 8c
00 00 00 60 00 00 08 00
00 00 00 00 40 00 60 00
00 00 00 00 c0 c0 00 00
00 00 00 01 03 03 07 07
00 20 a7 df df ff ff ff
02 00 19 8d bf df 5f af
5e bf ef bf ff fd fd fc
00 80 c0 c0 e0 f0 f0 e8
00 00 00 00 00 00 00 08
0f 0f 0d 0d 0b 08 08 04
3b 07 07 07 00 00 00 00
60 80 50 21 66 ff fe fd
7e f7 70 f5 10 2c 2c d6
17 07 6f cf c7 87 17 17
00 00 00 40 00 60 00 00
00 00 00 00 80 00 00 00
00 00 00 00 00 00 30 30
02 00 0b 04 16 00 02 00
7f 17 a0 e4 0c 73 87 36
1f 1f 9f ff 7f 9f fe 3c
27 1b 00 01 00 10 80 1e
07 07 07 07 0e 0d 07 1f
01 00 00 00 00 01 00 00
12 03 2e 15 0f 01 00 00
11 34 86 cf 9f fc fe 00
03 40 61 f9 f7 ff ff ff
40 80 00 00 00 00 00 00
40 00 00 00 00 00 00 00
00 18 18 00 00 06 00 00
08 00 00 00 00 00 00 00
00 00 00 0c 08 00 00 00
00 20 20 00 00 00 00 00
00 00 00 00 00 01 00 00
06 00 00 00 00 00 00 00
00 00 00 00 00 00 00 06
00 00 00 00 00 00 00 02
00 00 00 20 30 00 00 00
06 60 20 00 00 00 00 00
02 00 00 00 00 00 00 00
00 00 00 00 00 02 02 00
00 00 00 08 08 00 00 00
00 00 00 01 01 00 00 00
00 00 00 00 20 20 00 00
00 00 00 00 00 18 18 00
00 00 00 00 00 00 00 60
00 00 00 00 00 00 10 10
00 00 00 00 40 60 00 00
00 00 00 00 03 03 00 00
00 00 00 00 00 06 06 00
00 00 c0 c0 00 00 00 00
""")

_INTERCEPTOR_LOGO_PTILES = _hex("""
14 00 0e 20 80 0f 0d 0e 20 80 0f 0d 0e 20 80 0f
0d 0e 20 80 0f 0d 80 80 14 47 81 14 4f 82 14 79
83 14 78 84 85 86 14 79 87 14 78 88 14 4f 89 14
78 8a 14 47 8b 14 78 8c 14 79 8d 8e 8f 14 78 90
91 14 47 92 14 78 93 14 00 80 14 47 94 14 78 95
14 79 96 97 98 14 78 99 14 4f 9a 14 78 9b 14 00
80 80 0d 80 80 14 47 81 9c 9d 9e 9e 14 78 9f 14
4f a0 14 78 a1 14 47 a2 a3 14 78 a4 14 79 a5 14
78 a6 a7 14 47 a8 a9 aa ab 14 78 ac 14 00 80 14
47 ad 14 78 ae af b0 14 79 b1 14 78 b2 b3 14 47
b4 14 48 b5 14 00 80 0d 80 80 14 41 b6 14 48 b7
14 41 b8 14 47 b9 14 48 ba bb bc 14 41 bd 14 47
be 14 48 bf bb c0 a7 14 00 80 14 47 c1 14 41 c2
14 48 c3 14 41 c4 c5 14 00 80 14 41 c6 14 48 bb
c7 bb c8 bb 14 78 c9 14 48 c3 14 00 80 80 0d 80
80 80 80 80 14 41 ca 14 00 0e 0a 80 0f 14 41 cb
14 00 0e 0f 80 0f 0d 0e 20 80 0f 0d 0e 20 80 0f
0d 0e 20 80 0f 0d 0e 20 80 0f 0d 0e 20 80 0f 0d
0e 20 80 0f 0d 0e 20 80 0f 0d 0e 20 80 0f 0d 0e
20 80 0f 0d 0e 20 80 0f 0d 0e 20 80 0f 0d 0e 20
80 0f 0d 0e 20 80 0f 0d 0e 20 80 0f 0d 0e 20 80
0f 0d 0e 20 80 0f 0d 00
""")

_INTERCEPTOR_LOGO_TILES = _hex("""
00 00 00 00 00 00 00 00
1e 1e 1e 1e 1e 1e 1e 1e
7f 7f 7f 78 78 78 78 78
03 02 02 c3 c3 c3 c3 c3
00 00 00 f0 f0 f0 f0 f0
18 10 10 f0 f0 f0 f0 f0
00 00 00 7f 7f 7f 7f 00
60 60 e0 e1 e1 e1 e1 e1
01 00 00 f0 f0 f0 f0 00
1f 3f 3f 3c 3c 3c 3c 3c
03 03 03 ff ff ff ff ff
7f ff ff f8 f8 f8 f8 ff
06 06 0e fe fe fe fe 0e
00 00 00 1f 1f 1f 1f 00
1c 0c 0c 0f 0f 0f 0f 0f
00 00 00 c1 c3 c3 c3 c3
70 60 40 c1 c1 c1 c1 c1
01 00 00 e0 e0 e0 e0 e0
7f 7f 7f 7c 78 78 7c 7d
07 03 01 c1 c1 c1 c1 01
03 03 03 00 00 00 00 03
00 00 00 fe fe fe 00 00
3c 18 18 18 18 18 18 18
00 00 00 7c 7c 7c 7c 7c
70 30 30 3f 3f 3f 3c 30
01 00 00 f0 f0 f0 00 00
0f 1f 9f 9e be be be be
01 00 00 e0 f0 f0 f0 e0
78 78 78 78 78 78 78 78
3c 3c 3c 3c 3c 3c 3c 3c
0f 0f 0f 0f 0f 0f 0f 0f
00 00 00 7f 7f ff 00 00
1e 1e 1e 1e 1e 1e 9e 9e
00 01 87 87 83 c3 e3 e1
7c 7c 7c 7c 7c 7c 3f 3f
00 00 00 00 00 00 fe fc
00 00 00 07 07 07 00 80
0e 0e 0e fe fe fe 06 06
00 00 1f 1f 1f 1f 1f 1f
0f 1f ff ff ff ff ff ff
3c 3c 3e 3e 3e 3e 3e 3c
3e 3e 3e 3e 3e 3e 3f 1f
1f 1f 1f 1f 1f 1f ff ff
7d 7d 7d 7d 7c 7c 7c 78
03 07 1f 0f 0f 07 87 c7
03 03 03 03 03 03 03 03
00 00 3f 3f 3f 3f 00 00
18 18 f8 f8 f8 f8 18 18
7c 7c 7c 7c 7c 7c 00 00
30 30 30 30 30 30 30 30
00 00 ff ff ff ff c0 00
41 41 c1 c1 e3 e3 e0 60
1f 1f 1f 0f 0f 0f ff ff
7f 7f 7f ff ff ff ff ff
1f 1f 00 00 00 00 00 00
03 87 ff ff ff ff ff ff
7c 3c 00 00 00 00 00 00
0f 0f 0f 0f 0f 0f 0f 0c
70 70 7f 7f 7f 7f 7f ff
00 00 ff ff ff ff ff ff
41 e1 ff ff ff ff ff ff
1f 0f 00 00 00 00 00 00
3f 00 00 00 00 00 00 00
03 03 ff ff ff ff ff ff
04 0e ff ff ff ff ff ff
3c 3c 3c 3c 3c 3c 3c 30
3f 0f 00 00 00 00 00 00
00 01 ff ff ff ff ff ff
7c 7c 00 00 00 00 00 00
3c 3c 00 00 00 00 00 00
03 01 00 00 00 00 00 00
08 1c ff ff ff ff ff ff
30 78 ff ff ff ff ff ff
60 ff ff ff ff ff ff ff
08 00 00 00 00 00 00 00
20 00 00 00 00 00 00 00
""")

GAME_OVER_IMAGE = FullscreenImage(TILES_BASE, 57, _GAME_OVER_TILES, _GAME_OVER_PTILES)
IN_GAME_BACKGROUND = FullscreenImage(
    TILES_BASE, 58, _IN_GAME_BACKGROUND_TILES, _IN_GAME_BACKGROUND_PTILES
)
INTERCEPTOR_LOGO = FullscreenImage(
    TILES_BASE, 76, _INTERCEPTOR_LOGO_TILES, _INTERCEPTOR_LOGO_PTILES
)


def named_images() -> dict[str, FullscreenImage]:
    """Return the game's pictures keyed by the screen that shows them."""
    return {
        "title": INTERCEPTOR_LOGO,
        "in_game": IN_GAME_BACKGROUND,
        "game_over": GAME_OVER_IMAGE,
    }