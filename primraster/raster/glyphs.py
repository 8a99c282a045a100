from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Protocol

import numpy as np
from PIL import Image, ImageDraw, ImageFont


PillowFont = ImageFont.FreeTypeFont | ImageFont.ImageFont


@dataclass(frozen=True)
class GlyphBitmap:
    """Coverage in [0, 1] for one glyph.

    ``left``/``top`` place the bitmap relative to the text origin, which is the
    top-left of the line box (baseline at the font ascent).
    """

    left: int
    top: int
    coverage: np.ndarray

    @property
    def width(self) -> int:
        return int(self.coverage.shape[1])

    @property
    def height(self) -> int:
        return int(self.coverage.shape[0])


class GlyphSource(Protocol):
    def glyphs(self, text: str) -> list[GlyphBitmap]:
        ...


GlyphFactory = Callable[[int], GlyphSource]


class PillowGlyphSource:
    """Per-glyph coverage masks rasterized by Pillow."""

    def __init__(self, font: PillowFont) -> None:
        self.font = font

    def glyphs(self, text: str) -> list[GlyphBitmap]:
        out: list[GlyphBitmap] = []
        for index, char in enumerate(text):
            left, top, right, bottom = self.font.getbbox(char)
            if right <= left or bottom <= top:
                continue
            pen_x = int(round(self.font.getlength(text[:index]))) if index else 0
            out.append(GlyphBitmap(left=pen_x + int(left), top=int(top), coverage=_render_glyph(char, self.font)))
        return out


def load_font(font_path: str, size: int) -> ImageFont.FreeTypeFont:
    if size <= 0:
        raise ValueError("font size must be > 0")
    return _load_truetype(str(font_path), int(size))


def pillow_glyph_factory(font_path: str) -> GlyphFactory:
    def factory(size: int) -> GlyphSource:
        return PillowGlyphSource(load_font(font_path, size))

    return factory


@lru_cache(maxsize=64)
def _load_truetype(font_path: str, size: int) -> ImageFont.FreeTypeFont:
    return ImageFont.truetype(font_path, size=size)


@lru_cache(maxsize=1024)
def _render_glyph(char: str, font: PillowFont) -> np.ndarray:
    left, top, right, bottom = font.getbbox(char)
    width = max(1, int(right - left))
    height = max(1, int(bottom - top))
    image = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(image)
    draw.text((-left, -top), char, fill=255, font=font)
    coverage = np.asarray(image, dtype=np.float32) / 255.0
    coverage.flags.writeable = False
    return coverage
