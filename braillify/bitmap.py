from __future__ import annotations

from typing import List, Sequence

from bitarray import bitarray

from braillify.base import BRAILLE_COLS, BRAILLE_ROWS, BitmapShapeError
from braillify.codec import decode, encode

Bitmap = Sequence[Sequence[int]]


def validate(bitmap: Bitmap) -> None:
    """Raise BitmapShapeError unless all rows have the same width and hold only 0s and 1s."""
    if not bitmap:
        return

    width = len(bitmap[0])
    for y, row in enumerate(bitmap):
        if len(row) != width:
            raise BitmapShapeError(
                f"Bitmap rows must have equal width: row 0 has {width} cells, "
                f"row {y} has {len(row)}"
            )
        for x, cell in enumerate(row):
            if not isinstance(cell, int) or cell not in (0, 1):
                raise BitmapShapeError(f"Bitmap cells must be 0 or 1, got {cell!r} at ({x}, {y})")


def pad(bitmap: Bitmap) -> List[Sequence[int]]:
    """Return the bitmap with blank rows appended so its height is a multiple of 4.

    The width is left alone; odd widths are dealt with by `convert`, which drops the
    last column. The caller's bitmap is never modified.
    """
    padded = list(bitmap)
    if not padded or len(padded) % BRAILLE_ROWS == 0:
        return padded

    width = len(padded[0])
    missing = BRAILLE_ROWS - len(padded) % BRAILLE_ROWS
    padded.extend([0] * width for _ in range(missing))
    return padded


def extract(bitmap: Bitmap, row0: int, col0: int) -> tuple[int, ...]:
    """Return the dot vector of the 4x2 block whose top left cell is (row0, col0)."""
    if row0 < 0 or col0 < 0:
        raise IndexError(f"Block origin ({row0}, {col0}) is negative")
    if row0 + BRAILLE_ROWS > len(bitmap) or col0 + BRAILLE_COLS > len(bitmap[row0]):
        raise IndexError(f"Block at ({row0}, {col0}) does not fit in the bitmap")

    return tuple(
        bitmap[row0 + i][col0 + j] for i in range(BRAILLE_ROWS) for j in range(BRAILLE_COLS)
    )


def convert(bitmap: Bitmap) -> List[List[str]]:
    """Convert a bitmap into rows of braille characters.

    Each character covers 4 rows and 2 columns of the bitmap. The bitmap is padded with
    blank rows at the bottom if needed; a trailing odd column doesn't fill a character,
    and is dropped.
    """
    validate(bitmap)
    padded = pad(bitmap)
    if not padded:
        return []

    width_chars = len(padded[0]) // BRAILLE_COLS
    height_chars = len(padded) // BRAILLE_ROWS
    return [
        [
            encode(extract(padded, y * BRAILLE_ROWS, x * BRAILLE_COLS))
            for x in range(width_chars)
        ]
        for y in range(height_chars)
    ]


def render(bitmap: Bitmap) -> str:
    """Return the bitmap as braille text, one line per 4 rows of the bitmap.

    Examples:
        >>> render([[1, 0], [1, 0], [1, 0], [1, 1]])
        '⣇'
    """
    return "\n".join("".join(line) for line in convert(bitmap))


def unrender(text: str) -> List[List[int]]:
    """Return the bitmap drawn by braille text, as produced by `render`.

    The result is always 4 rows per line of text and 2 columns per character, so blank
    rows added as padding come back as blank rows.
    """
    lines = text.splitlines()
    if not lines:
        return []

    width_chars = len(lines[0])
    rows: List[List[int]] = []
    for y, line in enumerate(lines):
        if len(line) != width_chars:
            raise BitmapShapeError(
                f"Braille lines must have equal length: line 0 has {width_chars} "
                f"characters, line {y} has {len(line)}"
            )

        line_rows = [bitarray() for _ in range(BRAILLE_ROWS)]
        for ch in line:
            dots = decode(ch)
            for i, row in enumerate(line_rows):
                row.extend(dots[i * BRAILLE_COLS : (i + 1) * BRAILLE_COLS])
        rows.extend(row.tolist() for row in line_rows)

    return rows


def invert(bitmap: Bitmap) -> List[List[int]]:
    """Return a new bitmap with every cell flipped."""
    validate(bitmap)
    return [[1 - cell for cell in row] for row in bitmap]


def parse_bitmap(text: str, ink: str = "1#") -> List[List[int]]:
    """Read a bitmap drawn as text, one row per line.

    Characters found in `ink` are set, anything else is blank. Trailing blank lines are
    ignored; other than that, every line must have the same length.

    Examples:
        >>> parse_bitmap("#.\\n.#")
        [[1, 0], [0, 1]]
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    bitmap = [[1 if ch in ink else 0 for ch in line] for line in lines]
    validate(bitmap)
    return bitmap


__all__ = (
    "Bitmap",
    "validate",
    "pad",
    "extract",
    "convert",
    "render",
    "unrender",
    "invert",
    "parse_bitmap",
)
