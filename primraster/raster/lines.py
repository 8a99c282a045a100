from __future__ import annotations

import math

from primraster.canvas import Canvas
from primraster.colors import Color
from primraster.compositor import blend_pixel
from primraster.primitives import Line


def fpart(x: float) -> float:
    if x < 0:
        return x - (math.floor(x) + 1)
    return x - math.floor(x)


def rfpart(x: float) -> float:
    return 1.0 - fpart(x)


class _ClippedPlotter:
    """Blends single pixels, dropping the ones that fall off the canvas."""

    def __init__(self, canvas: Canvas, color: Color, *, transpose: bool = False) -> None:
        self.canvas = canvas
        self.color = color
        self.transpose = transpose
        self.clipped = 0

    def __call__(self, x: int, y: int, coverage: float = 1.0) -> None:
        if coverage <= 0.0:
            return
        if self.transpose:
            x, y = y, x
        if not self.canvas.contains(x, y):
            self.clipped += 1
            return
        blend_pixel(self.canvas, x, y, self.color, min(coverage, 1.0))


def draw_line(canvas: Canvas, line: Line, *, antialias: bool = True) -> int:
    """Draw ``line`` and return how many pixels were clipped."""
    if antialias:
        return draw_line_wu(canvas, line)
    return draw_line_scan(canvas, line)


def draw_line_wu(canvas: Canvas, line: Line) -> int:
    """Xiaolin Wu's anti-aliased line; both endpoint pixels are included."""
    x0, y0, x1, y1 = float(line.x1), float(line.y1), float(line.x2), float(line.y2)
    steep = abs(y1 - y0) > abs(x1 - x0)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    dy = y1 - y0
    gradient = 1.0 if dx == 0.0 else dy / dx
    plot = _ClippedPlotter(canvas, line.color, transpose=steep)

    xend = math.floor(x0 + 0.5)
    yend = y0 + gradient * (xend - x0)
    xgap = 1.0 - abs(x0 - xend)
    xpxl1 = xend
    ypxl1 = math.floor(yend)
    plot(xpxl1, ypxl1, rfpart(yend) * xgap)
    plot(xpxl1, ypxl1 + 1, fpart(yend) * xgap)
    intery = yend + gradient

    xend = math.floor(x1 + 0.5)
    if xend == xpxl1:
        return plot.clipped
    yend = y1 + gradient * (xend - x1)
    xgap = 1.0 - abs(x1 - xend)
    xpxl2 = xend
    ypxl2 = math.floor(yend)
    plot(xpxl2, ypxl2, rfpart(yend) * xgap)
    plot(xpxl2, ypxl2 + 1, fpart(yend) * xgap)

    for x in range(xpxl1 + 1, xpxl2):
        y = math.floor(intery)
        plot(x, y, rfpart(intery))
        plot(x, y + 1, fpart(intery))
        intery += gradient
    return plot.clipped


def draw_line_scan(canvas: Canvas, line: Line) -> int:
    """Aliased slope-scan line.

    Walks x over ``[min(x1, x2), max(x1, x2))`` and fills the column span
    between ``y(x)`` and ``y(x + 3)``. Vertical lines walk y instead.
    """
    plot = _ClippedPlotter(canvas, line.color)
    dx = float(line.x2) - float(line.x1)
    dy = float(line.y2) - float(line.y1)

    if dx != 0.0:
        k = dy / dx
        c = line.y1 - k * line.x1
        lo, hi = min(line.x1, line.x2), max(line.x1, line.x2)
        if k == 0.0:
            for x in range(lo, hi):
                plot(x, line.y1)
            return plot.clipped
        for x in range(lo, hi):
            by1 = _saturate(k * x + c)
            by2 = _saturate(k * (x + 3) + c)
            for y in range(min(by1, by2), max(by1, by2)):
                plot(x, y)
        return plot.clipped

    for y in range(min(line.y1, line.y2), max(line.y1, line.y2)):
        plot(line.x1, y)
    return plot.clipped


def _saturate(value: float) -> int:
    return int(max(0.0, value))
