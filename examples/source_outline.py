from __future__ import annotations

import sys
from pathlib import Path

from braillify import render, render_text

SMILEY = [
    [0, 0, 1, 1, 1, 1, 0, 0],
    [0, 1, 0, 0, 0, 0, 1, 0],
    [1, 0, 1, 0, 0, 1, 0, 1],
    [1, 0, 0, 0, 0, 0, 0, 1],
    [1, 0, 1, 0, 0, 1, 0, 1],
    [1, 0, 0, 1, 1, 0, 0, 1],
    [0, 1, 0, 0, 0, 0, 1, 0],
    [0, 0, 1, 1, 1, 1, 0, 0],
]

if __name__ == "__main__":
    print(render(SMILEY))
    print()

    # Outline of a source file (this one by default) at 80 columns
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__)
    print(render_text(path.read_text().expandtabs(), 80))
