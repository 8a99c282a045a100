from __future__ import annotations

import numpy as np

from primraster.canvas import Canvas
from primraster.colors import Color
from primraster.compositor import blend_patch
from primraster.primitives import Text
from primraster.raster.glyphs import GlyphBitmap, GlyphSource


def draw_text(canvas: Canvas, text: Text, glyphs: GlyphSource) -> int:
    """Composite ``text`` glyph by glyph and return the number of clipped pixels.

    A border of width ``b`` is painted first at offsets ``(+-i, 0)`` and
    ``(0, +-i)`` for ``i`` in ``range(b)``; the fill is painted last, unshifted.
    """
    bitmaps = glyphs.glyphs(text.content)
    if not bitmaps:
        return 0
    clipped = 0
    if text.border is not None:
        border_color, border_width = text.border
        for i in range(border_width):
            for ox, oy in ((i, 0), (-i, 0), (0, i), (0, -i)):
                clipped += _draw_bitmaps(canvas, bitmaps, text.x + ox, text.y + oy, border_color)
    clipped += _draw_bitmaps(canvas, bitmaps, text.x, text.y, text.color)
    return clipped


def _draw_bitmaps(canvas: Canvas, bitmaps: list[GlyphBitmap], x: int, y: int, color: Color) -> int:
    clipped = 0
    for glyph in bitmaps:
        clipped += _blend_coverage(canvas, x + glyph.left, y + glyph.top, glyph.coverage, color)
    return clipped


def _blend_coverage(canvas: Canvas, x: int, y: int, coverage: np.ndarray, color: Color) -> int:
    h, w = coverage.shape
    if h <= 0 or w <= 0:
        return 0
    total = int(np.count_nonzero(coverage > 0))

    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(canvas.width, x + w)
    y1 = min(canvas.height, y + h)
    if x1 <= x0 or y1 <= y0:
        return total

    cov = coverage[y0 - y : y1 - y, x0 - x : x1 - x]
    blend_patch(canvas.pixels[y0:y1, x0:x1], color, cov)
    return total - int(np.count_nonzero(cov > 0))
