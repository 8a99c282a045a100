from .circle import SUPERSAMPLE, circle_coverage, circle_mask, draw_circle
from .glyphs import GlyphBitmap, GlyphFactory, GlyphSource, PillowGlyphSource, load_font, pillow_glyph_factory
from .lines import draw_line, draw_line_scan, draw_line_wu, fpart, rfpart
from .rect import draw_rectangle
from .text import draw_text

__all__ = [
    "GlyphBitmap",
    "GlyphFactory",
    "GlyphSource",
    "PillowGlyphSource",
    "SUPERSAMPLE",
    "circle_coverage",
    "circle_mask",
    "draw_circle",
    "draw_line",
    "draw_line_scan",
    "draw_line_wu",
    "draw_rectangle",
    "draw_text",
    "fpart",
    "load_font",
    "pillow_glyph_factory",
    "rfpart",
]
