from __future__ import annotations

from collections.abc import Iterable
import logging
from pathlib import Path

from primraster.canvas import Canvas
from primraster.config import RenderConfig
from primraster.errors import NoComponentProvidedError, NoConfigProvidedError, NoFontProvidedError
from primraster.export import save_png
from primraster.primitives import Circle, Line, Primitive, Rectangle, Text
from primraster.raster import GlyphFactory, draw_circle, draw_line, draw_rectangle, draw_text, pillow_glyph_factory
from primraster.scene import Scene


LOGGER = logging.getLogger(__name__)


def rasterize(
    canvas: Canvas,
    primitive: Primitive,
    *,
    antialias: bool = True,
    glyph_factory: GlyphFactory | None = None,
) -> None:
    match primitive:
        case Circle():
            draw_circle(canvas, primitive, antialias=antialias)
        case Rectangle():
            draw_rectangle(canvas, primitive)
        case Line():
            clipped = draw_line(canvas, primitive, antialias=antialias)
            if clipped:
                LOGGER.debug("line clipped at canvas edge; pixels=%d", clipped)
        case Text():
            if glyph_factory is None:
                raise NoFontProvidedError("text component requires a font; set font_path in the render config")
            clipped = draw_text(canvas, primitive, glyph_factory(primitive.size))
            if clipped:
                LOGGER.debug("text clipped at canvas edge; pixels=%d", clipped)
        case _:
            raise TypeError(f"unsupported primitive: {type(primitive).__name__}")


def render(
    scene: Scene | Iterable[Primitive],
    config: RenderConfig | None,
    *,
    glyph_factory: GlyphFactory | None = None,
) -> Canvas:
    """Draw every primitive of ``scene`` in order onto a fresh canvas.

    ``glyph_factory`` maps a font size to a glyph source; when omitted it is
    built from ``config.font_path``.
    """
    if config is None:
        raise NoConfigProvidedError("render requires a canvas configuration")
    if not isinstance(scene, Scene):
        scene = Scene(scene)
    if len(scene) == 0:
        raise NoComponentProvidedError("render requires at least one component")
    if glyph_factory is None and config.font_path is not None:
        glyph_factory = pillow_glyph_factory(str(config.font_path))

    canvas = Canvas(config.width, config.height, config.color)
    canvas.apply_border(config.border)
    for index, primitive in enumerate(scene):
        LOGGER.debug("drawing component %d: %s", index, type(primitive).__name__)
        rasterize(canvas, primitive, antialias=config.antialias, glyph_factory=glyph_factory)
    return canvas


def render_to_file(
    scene: Scene | Iterable[Primitive],
    config: RenderConfig | None,
    *,
    glyph_factory: GlyphFactory | None = None,
) -> Path:
    canvas = render(scene, config, glyph_factory=glyph_factory)
    assert config is not None
    out = save_png(canvas.export(), config.path)
    LOGGER.debug("wrote %dx%d canvas to %s", canvas.width, canvas.height, out)
    return out


class Image:
    """Chainable builder: ``Image().config(cfg).add_components([...]).draw()``."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config
        self._scene = Scene()

    def config(self, config: RenderConfig) -> "Image":
        self._config = config
        return self

    def init(self) -> "Image":
        if self._config is None:
            raise NoConfigProvidedError("image requires a canvas configuration")
        return self

    def add_component(self, primitive: Primitive) -> "Image":
        self._scene.add(primitive)
        return self

    def add_components(self, primitives: Iterable[Primitive]) -> "Image":
        self._scene.extend(primitives)
        return self

    @property
    def scene(self) -> Scene:
        return self._scene

    def render(self, *, glyph_factory: GlyphFactory | None = None) -> Canvas:
        return render(self._scene, self._config, glyph_factory=glyph_factory)

    def draw(self, *, glyph_factory: GlyphFactory | None = None) -> Path:
        return render_to_file(self._scene, self._config, glyph_factory=glyph_factory)
