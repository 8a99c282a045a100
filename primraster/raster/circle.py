from __future__ import annotations

import numpy as np

from primraster.canvas import Canvas
from primraster.compositor import blend_patch
from primraster.errors import OutOfCanvasError
from primraster.primitives import Circle


SUPERSAMPLE = 4


def draw_circle(canvas: Canvas, circle: Circle, *, antialias: bool = True) -> None:
    cx, cy, r = circle.cx, circle.cy, circle.radius
    x0, y0, x1, y1 = cx - r, cy - r, cx + r, cy + r
    if not canvas.contains_box(x0, y0, x1, y1):
        raise OutOfCanvasError(
            f"circle box [{x0}, {x1}] x [{y0}, {y1}] exceeds {canvas.width}x{canvas.height} canvas"
        )
    if r == 0:
        return
    if antialias:
        coverage = circle_coverage(r, samples=SUPERSAMPLE)
    else:
        coverage = circle_mask(r)
    blend_patch(canvas.pixels[y0 : y1 + 1, x0 : x1 + 1], circle.color, coverage)


def circle_coverage(radius: int, samples: int = SUPERSAMPLE) -> np.ndarray:
    """Fraction of ``samples x samples`` sub-pixel points within ``radius``.

    Returns a ``(2r+1, 2r+1)`` array indexed from the top-left of the bounding
    box. The center is the middle of the center pixel.
    """
    if samples <= 0:
        raise ValueError("samples must be > 0")
    size = 2 * radius + 1
    offsets = (np.arange(samples, dtype=np.float64) + 0.5) / samples
    # sample positions relative to the center point (radius + 0.5)
    coords = (np.arange(size, dtype=np.float64)[:, None] + offsets[None, :] - (radius + 0.5)).reshape(-1)
    inside = (coords[:, None] ** 2 + coords[None, :] ** 2) <= float(radius * radius)
    counts = inside.reshape(size, samples, size, samples).sum(axis=(1, 3))
    return counts.astype(np.float64) / float(samples * samples)


def circle_mask(radius: int) -> np.ndarray:
    d = np.arange(-radius, radius + 1, dtype=np.int64)
    return ((d[:, None] ** 2 + d[None, :] ** 2) < radius * radius).astype(np.float64)
