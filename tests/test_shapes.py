from __future__ import annotations

import math
import unittest

import numpy as np

from primraster.canvas import Canvas
from primraster.errors import OutOfCanvasError
from primraster.primitives import Circle, Rectangle
from primraster.raster.circle import SUPERSAMPLE, circle_coverage, circle_mask, draw_circle
from primraster.raster.rect import draw_rectangle

WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)


class RectangleRasterTests(unittest.TestCase):
    def test_fills_half_open_region(self) -> None:
        canvas = Canvas(10, 8, WHITE)
        draw_rectangle(canvas, Rectangle(2, 3, 4, 2, RED))
        red = np.all(canvas.pixels == np.asarray(RED, dtype=np.uint8), axis=2)
        self.assertEqual(int(red.sum()), 8)
        self.assertTrue(bool(red[3:5, 2:6].all()))
        self.assertEqual(canvas.get(6, 3), WHITE)
        self.assertEqual(canvas.get(2, 5), WHITE)

    def test_overflow_rejected_without_partial_draw(self) -> None:
        width = 20
        canvas = Canvas(width, 10, WHITE)
        before = canvas.export()
        with self.assertRaises(OutOfCanvasError):
            draw_rectangle(canvas, Rectangle(width - 5, 0, 10, 2, RED))
        self.assertTrue(np.array_equal(before, canvas.pixels))

    def test_x_checked_against_width_and_y_against_height(self) -> None:
        canvas = Canvas(20, 10, WHITE)
        draw_rectangle(canvas, Rectangle(0, 0, 15, 10, RED))
        self.assertEqual(canvas.get(14, 9), RED)
        draw_rectangle(canvas, Rectangle(15, 0, 5, 10, RED))
        with self.assertRaises(OutOfCanvasError):
            draw_rectangle(canvas, Rectangle(0, 5, 5, 6, RED))

    def test_empty_rectangle_draws_nothing(self) -> None:
        canvas = Canvas(5, 5, WHITE)
        draw_rectangle(canvas, Rectangle(1, 1, 0, 3, RED))
        self.assertTrue(np.all(canvas.pixels == 255))

    def test_translucent_fill_composites(self) -> None:
        canvas = Canvas(4, 4, WHITE)
        draw_rectangle(canvas, Rectangle(0, 0, 4, 4, (0, 0, 0, 128)))
        self.assertEqual(canvas.get(2, 2), (127, 127, 127, 255))


class CircleRasterTests(unittest.TestCase):
    def test_antialiased_interior_full_and_exterior_untouched(self) -> None:
        canvas = Canvas(41, 41, WHITE)
        r = 10
        draw_circle(canvas, Circle(20, 20, r, RED))
        for y in range(41):
            for x in range(41):
                d = math.hypot(x - 20, y - 20)
                if d < r - 1:
                    self.assertEqual(canvas.get(x, y), RED, (x, y))
                elif d > r + 1:
                    self.assertEqual(canvas.get(x, y), WHITE, (x, y))

    def test_antialiased_edge_has_partial_coverage(self) -> None:
        canvas = Canvas(41, 41, WHITE)
        draw_circle(canvas, Circle(20, 20, 10, RED))
        green = canvas.pixels[:, :, 1]
        self.assertTrue(bool(np.any((green > 0) & (green < 255))))

    def test_coverage_grid_is_symmetric_and_bounded(self) -> None:
        cov = circle_coverage(6)
        self.assertEqual(cov.shape, (13, 13))
        self.assertEqual(float(cov[6, 6]), 1.0)
        self.assertEqual(float(cov[0, 0]), 0.0)
        self.assertTrue(np.allclose(cov, cov.T))
        self.assertTrue(np.allclose(cov, cov[::-1, :]))
        steps = cov * SUPERSAMPLE * SUPERSAMPLE
        self.assertTrue(np.allclose(steps, np.round(steps)))

    def test_aliased_mask_uses_strict_integer_distance(self) -> None:
        mask = circle_mask(3)
        self.assertEqual(float(mask[3, 3]), 1.0)
        self.assertEqual(float(mask[3, 0]), 0.0)
        self.assertEqual(float(mask[1, 1]), 1.0)

    def test_aliased_circle_has_no_partial_pixels(self) -> None:
        canvas = Canvas(30, 30, WHITE)
        draw_circle(canvas, Circle(15, 15, 9, RED), antialias=False)
        values = set(np.unique(canvas.pixels[:, :, 1]).tolist())
        self.assertEqual(values, {0, 255})
        self.assertEqual(canvas.get(15, 15), RED)
        self.assertEqual(canvas.get(24, 15), WHITE)

    def test_bounding_box_outside_canvas_rejected(self) -> None:
        canvas = Canvas(50, 50, WHITE)
        before = canvas.export()
        with self.assertRaises(OutOfCanvasError):
            draw_circle(canvas, Circle(5, 5, 10, RED))
        with self.assertRaises(OutOfCanvasError):
            draw_circle(canvas, Circle(45, 20, 5, RED))
        with self.assertRaises(OutOfCanvasError):
            draw_circle(canvas, Circle(20, 48, 5, RED), antialias=False)
        self.assertTrue(np.array_equal(before, canvas.pixels))
        draw_circle(canvas, Circle(44, 20, 5, RED))
        self.assertEqual(canvas.get(44, 20), RED)

    def test_zero_radius_draws_nothing(self) -> None:
        canvas = Canvas(5, 5, WHITE)
        draw_circle(canvas, Circle(2, 2, 0, RED))
        self.assertTrue(np.all(canvas.pixels == 255))


if __name__ == "__main__":
    unittest.main()
