from __future__ import annotations

from typing import Sequence

from braillify.base import (
    BIT_POSITIONS,
    BIT_POSITIONS_DESCENDING,
    BRAILLE_DOTS,
    BRAILLE_RANGE_END,
    BRAILLE_RANGE_START,
    DotVectorError,
    GlyphRangeError,
)


def encode(dots: Sequence[int]) -> str:
    """Return the braille character whose dots are set according to a dot vector.

    Args:
        dots: 8 binary values in row-major order, i.e. (row 0, col 0), (row 0, col 1),
            (row 1, col 0) and so on down to (row 3, col 1).

    Returns:
        A single character in the range U+2800 to U+28FF.

    Examples:
        >>> encode((1, 0, 0, 0, 0, 0, 0, 0))
        '⠁'

        >>> encode((0, 0, 0, 0, 0, 0, 1, 1))
        '⣀'
    """
    if len(dots) != BRAILLE_DOTS:
        raise DotVectorError(f"Dot vector must have {BRAILLE_DOTS} values, got {len(dots)}")

    offset = 0
    for i, dot in enumerate(dots):
        if not isinstance(dot, int) or dot not in (0, 1):
            raise DotVectorError(f"Dot vector values must be 0 or 1, got {dot!r} at index {i}")
        offset += dot * BIT_POSITIONS[i]

    return chr(BRAILLE_RANGE_START + offset)


def decode(glyph: str) -> tuple[int, ...]:
    """Return the dot vector of a braille character. This is the inverse of `encode`.

    Examples:
        >>> decode("⣀")
        (0, 0, 0, 0, 0, 0, 1, 1)
    """
    if len(glyph) != 1 or not BRAILLE_RANGE_START <= ord(glyph) <= BRAILLE_RANGE_END:
        raise GlyphRangeError(f"Not a braille pattern character: {glyph!r}")

    residual = ord(glyph) - BRAILLE_RANGE_START
    dots = [0] * BRAILLE_DOTS
    for weight, i in BIT_POSITIONS_DESCENDING:
        if residual >= weight:
            residual -= weight
            dots[i] = 1

    return tuple(dots)


__all__ = ("encode", "decode")
