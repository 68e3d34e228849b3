from __future__ import annotations

from typing import List

from braillify.bitmap import render


def rasterize(text: str, column_width: int) -> List[List[int]]:
    """Return a bitmap with a set cell for every character of text that isn't a space.

    Each line of text becomes one row of exactly `column_width` cells: longer lines are
    cut, shorter ones are filled with blank cells. Lines are split on "\\n" (a "\\r" ending
    a line is dropped, so CRLF text works too), and a trailing newline adds a last, blank
    row. Tabs and other whitespace count as ink; turn
    them into spaces beforehand if that's not wanted.

    Args:
        text: The text to rasterize.
        column_width: The width of the bitmap, in cells. Must be at least 1.

    Returns:
        A bitmap with one row per line of text.

    Examples:
        >>> rasterize("  x \\n    ", 5)
        [[0, 0, 1, 0, 0], [0, 0, 0, 0, 0]]
    """
    if column_width < 1:
        raise ValueError(f"column_width must be at least 1, got {column_width}")

    rows = []
    for line in text.split("\n"):
        line = line.removesuffix("\r")[:column_width]
        row = [0 if ch == " " else 1 for ch in line]
        row.extend([0] * (column_width - len(row)))
        rows.append(row)

    return rows


def render_text(text: str, column_width: int) -> str:
    """Return a braille rendering of the shape of a block of text.

    Every 4 lines of text and 2 columns become one braille character, so the result is a
    small thumbnail of where the text has ink.
    """
    return render(rasterize(text, column_width))


__all__ = ("rasterize", "render_text")
