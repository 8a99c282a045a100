from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

import numpy as np
from PIL import Image as PILImage

from primraster import (
    Canvas,
    Circle,
    Image,
    Line,
    NoComponentProvidedError,
    NoConfigProvidedError,
    NoFontProvidedError,
    OutOfCanvasError,
    Rectangle,
    RenderConfig,
    Scene,
    Text,
    rasterize,
    render,
    render_to_file,
)
from primraster.raster.glyphs import GlyphBitmap

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


class _DotGlyphs:
    def glyphs(self, text: str) -> list[GlyphBitmap]:
        return [GlyphBitmap(left=i * 2, top=0, coverage=np.ones((1, 1), dtype=np.float32)) for i, _ in enumerate(text)]


class RenderPipelineTests(unittest.TestCase):
    def test_missing_config_rejected(self) -> None:
        with self.assertRaises(NoConfigProvidedError):
            render(Scene([Rectangle(0, 0, 1, 1, BLACK)]), None)

    def test_empty_scene_rejected(self) -> None:
        with self.assertRaises(NoComponentProvidedError):
            render(Scene(), RenderConfig(4, 4))

    def test_text_without_font_rejected(self) -> None:
        with self.assertRaises(NoFontProvidedError):
            render(Scene([Text(0, 0, 10, "hi", BLACK)]), RenderConfig(10, 10))

    def test_background_and_border_applied_before_components(self) -> None:
        config = RenderConfig(8, 6, color=WHITE, border=BLACK)
        canvas = render([Rectangle(2, 2, 2, 2, (255, 0, 0, 255))], config)
        self.assertEqual(canvas.get(0, 0), BLACK)
        self.assertEqual(canvas.get(7, 5), BLACK)
        self.assertEqual(canvas.get(1, 1), WHITE)
        self.assertEqual(canvas.get(2, 2), (255, 0, 0, 255))

    def test_later_components_paint_on_top(self) -> None:
        a = Rectangle(0, 0, 4, 4, (255, 0, 0, 128))
        b = Rectangle(0, 0, 4, 4, (0, 0, 255, 128))
        config = RenderConfig(4, 4, color=WHITE)
        ab = render(Scene().add(a).add(b), config)
        ba = render(Scene().add(b).add(a), config)
        self.assertNotEqual(ab.get(1, 1), ba.get(1, 1))
        self.assertGreater(ab.get(1, 1)[2], ab.get(1, 1)[0])

    def test_out_of_canvas_component_fails_render(self) -> None:
        with self.assertRaises(OutOfCanvasError):
            render([Circle(2, 2, 5, BLACK)], RenderConfig(20, 20))

    def test_lines_clip_instead_of_failing(self) -> None:
        canvas = render([Line(0, 0, 50, 0, BLACK)], RenderConfig(10, 10, color=WHITE))
        self.assertEqual(canvas.get(9, 0), BLACK)

    def test_antialias_flag_selects_aliased_circle(self) -> None:
        config = RenderConfig(30, 30, color=WHITE, antialias=False)
        canvas = render([Circle(15, 15, 9, (255, 0, 0, 255))], config)
        self.assertEqual(set(np.unique(canvas.pixels[:, :, 1]).tolist()), {0, 255})

    def test_injected_glyph_factory_receives_text_size(self) -> None:
        sizes: list[int] = []

        def factory(size: int) -> _DotGlyphs:
            sizes.append(size)
            return _DotGlyphs()

        canvas = render([Text(1, 1, 14, "abc", BLACK)], RenderConfig(10, 4, color=WHITE), glyph_factory=factory)
        self.assertEqual(sizes, [14])
        self.assertEqual([canvas.get(x, 1) for x in (1, 3, 5)], [BLACK, BLACK, BLACK])
        self.assertEqual(canvas.get(2, 1), WHITE)

    def test_rasterize_rejects_unknown_primitive(self) -> None:
        with self.assertRaises(TypeError):
            rasterize(Canvas(2, 2), object())  # type: ignore[arg-type]

    def test_scene_rejects_non_primitive(self) -> None:
        with self.assertRaises(TypeError):
            Scene().add("circle")  # type: ignore[arg-type]

    def test_scene_preserves_insertion_order(self) -> None:
        items = [Line(0, 0, 1, 1, BLACK), Circle(5, 5, 1, BLACK), Rectangle(0, 0, 1, 1, BLACK)]
        scene = Scene(items[:1]).extend(items[1:])
        self.assertEqual(list(scene), items)
        self.assertEqual(len(scene), 3)


class RenderToFileTests(unittest.TestCase):
    def test_png_round_trip_matches_canvas(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            config = RenderConfig(12, 9, color=(255, 255, 255, 0), path=Path(td) / "out" / "scene.png")
            scene = Scene([Circle(5, 4, 3, (255, 0, 0, 200)), Line(0, 8, 11, 0, (0, 128, 0, 255))])
            out = render_to_file(scene, config)
            self.assertEqual(out, config.path)
            with PILImage.open(out) as im:
                self.assertEqual(im.mode, "RGBA")
                self.assertEqual(im.size, (12, 9))
                decoded = np.asarray(im)
            expected = render(scene, config).export()
            self.assertTrue(np.array_equal(decoded, expected))

    def test_image_builder_renders_and_saves(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "builder.png"
            out = (
                Image()
                .config(RenderConfig(20, 20, color=WHITE, border=BLACK, path=path))
                .init()
                .add_component(Circle(10, 10, 5, (255, 0, 0, 255)))
                .add_components([Rectangle(2, 2, 3, 3, BLACK)])
                .draw()
            )
            self.assertTrue(out.exists())

    def test_image_builder_requires_config(self) -> None:
        with self.assertRaises(NoConfigProvidedError):
            Image().init()
        with self.assertRaises(NoConfigProvidedError):
            Image().add_component(Circle(1, 1, 1, BLACK)).render()


if __name__ == "__main__":
    unittest.main()
