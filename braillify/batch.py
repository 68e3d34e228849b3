from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, List

from braillify.bitmap import Bitmap, render


def render_all(bitmaps: Iterable[Bitmap], max_workers: int | None = None) -> List[str]:
    """Render several bitmaps in parallel, returning the results in input order.

    Rendering holds no shared state, so bitmaps are simply farmed out to a process pool.
    Errors raised while rendering any of the bitmaps propagate to the caller.
    """
    bitmaps = [list(bitmap) for bitmap in bitmaps]
    if not bitmaps:
        return []

    with ProcessPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(render, bitmaps))


__all__ = ("render_all",)
