from __future__ import annotations

import numpy as np

from primraster.colors import Color, validate_color
from primraster.errors import OutOfCanvasError


def new_pixels(width: int, height: int, color: Color = (0, 0, 0, 255)) -> np.ndarray:
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, :, 0] = color[0]
    pixels[:, :, 1] = color[1]
    pixels[:, :, 2] = color[2]
    pixels[:, :, 3] = color[3]
    return pixels


class Canvas:
    """RGBA8 pixel grid indexed as ``pixels[y, x]``.

    Reads and writes through :meth:`get` and :meth:`set` are bounds-checked.
    Rasterizers check their footprint once and then work on ``pixels`` slices.
    """

    def __init__(self, width: int, height: int, background: Color = (0, 0, 0, 255)) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = width
        self.height = height
        self.background = validate_color(background, "background")
        self.pixels = new_pixels(width, height, self.background)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.width, self.height)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def contains_box(self, x0: int, y0: int, x1: int, y1: int) -> bool:
        """Inclusive box test: every pixel in ``[x0, x1] x [y0, y1]`` is on the canvas."""
        return self.contains(x0, y0) and self.contains(x1, y1)

    def get(self, x: int, y: int) -> Color:
        self._check(x, y)
        r, g, b, a = (int(v) for v in self.pixels[y, x])
        return (r, g, b, a)

    def set(self, x: int, y: int, color: Color) -> None:
        self._check(x, y)
        self.pixels[y, x] = color

    def apply_border(self, border_color: Color | None) -> None:
        if border_color is None:
            return
        color = validate_color(border_color, "border")
        self.pixels[0, :] = color
        self.pixels[self.height - 1, :] = color
        self.pixels[:, 0] = color
        self.pixels[:, self.width - 1] = color

    def export(self) -> np.ndarray:
        out = self.pixels.copy()
        out.flags.writeable = False
        return out

    def _check(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise OutOfCanvasError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
