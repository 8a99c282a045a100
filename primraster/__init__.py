from primraster.canvas import Canvas
from primraster.colors import BLACK, GREEN, PURPLE, RED, TRANSPARENT, WHITE, Color, coerce_color
from primraster.compositor import blend, blend_patch, blend_pixel
from primraster.config import RenderConfig, load_scene_file
from primraster.errors import (
    NoComponentProvidedError,
    NoConfigProvidedError,
    NoFontProvidedError,
    OutOfCanvasError,
    RenderError,
)
from primraster.export import save_png, to_image, to_tensor
from primraster.primitives import Circle, Line, Primitive, Rectangle, Text
from primraster.render import Image, rasterize, render, render_to_file
from primraster.scene import Scene

__all__ = [
    "BLACK",
    "Canvas",
    "Circle",
    "Color",
    "GREEN",
    "Image",
    "Line",
    "NoComponentProvidedError",
    "NoConfigProvidedError",
    "NoFontProvidedError",
    "OutOfCanvasError",
    "PURPLE",
    "Primitive",
    "RED",
    "Rectangle",
    "RenderConfig",
    "RenderError",
    "Scene",
    "TRANSPARENT",
    "Text",
    "WHITE",
    "blend",
    "blend_patch",
    "blend_pixel",
    "coerce_color",
    "load_scene_file",
    "rasterize",
    "render",
    "render_to_file",
    "save_png",
    "to_image",
    "to_tensor",
]
