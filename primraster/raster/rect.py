from __future__ import annotations

from primraster.canvas import Canvas
from primraster.compositor import blend_patch
from primraster.errors import OutOfCanvasError
from primraster.primitives import Rectangle


def draw_rectangle(canvas: Canvas, rect: Rectangle) -> None:
    x1 = rect.x + rect.width
    y1 = rect.y + rect.height
    if x1 > canvas.width or y1 > canvas.height:
        raise OutOfCanvasError(
            f"rectangle [{rect.x}, {x1}) x [{rect.y}, {y1}) exceeds {canvas.width}x{canvas.height} canvas"
        )
    if rect.width == 0 or rect.height == 0:
        return
    blend_patch(canvas.pixels[rect.y : y1, rect.x : x1], rect.color)
