from braillify.base import (
    BIT_POSITIONS,
    BRAILLE_COLS,
    BRAILLE_RANGE_END,
    BRAILLE_RANGE_START,
    BRAILLE_ROWS,
    BitmapShapeError,
    BraillifyError,
    DotVectorError,
    GlyphRangeError,
)
from braillify.batch import render_all
from braillify.bitmap import (
    convert,
    extract,
    invert,
    pad,
    parse_bitmap,
    render,
    unrender,
    validate,
)
from braillify.codec import decode, encode
from braillify.text import rasterize, render_text
