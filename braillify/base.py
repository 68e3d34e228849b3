from __future__ import annotations

from typing import Final

BRAILLE_COLS: Final[int] = 2
BRAILLE_ROWS: Final[int] = 4
BRAILLE_DOTS: Final[int] = BRAILLE_COLS * BRAILLE_ROWS

BRAILLE_RANGE_START: Final[int] = 0x2800
BRAILLE_RANGE_END: Final[int] = 0x28FF

# Unicode braille numbers its dots column-first, with the bottom row added later:
#  0x01 0x08
#  0x02 0x10
#  0x04 0x20
#  0x40 0x80
#
# Dot vectors are row-major instead:
#  0 1
#  2 3
#  4 5
#  6 7
#
# so dot vector index i contributes BIT_POSITIONS[i] to the code point offset.
BIT_POSITIONS: Final[tuple[int, ...]] = (0x01, 0x08, 0x02, 0x10, 0x04, 0x20, 0x40, 0x80)

# (weight, dot index) pairs, heaviest first, for peeling bits off a code point.
BIT_POSITIONS_DESCENDING: Final[tuple[tuple[int, int], ...]] = tuple(
    sorted(((weight, i) for i, weight in enumerate(BIT_POSITIONS)), reverse=True)
)


class BraillifyError(ValueError):
    pass


class BitmapShapeError(BraillifyError):
    pass


class DotVectorError(BraillifyError):
    pass


class GlyphRangeError(BraillifyError):
    pass
