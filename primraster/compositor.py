from __future__ import annotations

import numpy as np

from primraster.canvas import Canvas
from primraster.colors import Color, validate_color
from primraster.errors import OutOfCanvasError


def blend(dst: Color, src: Color) -> Color:
    """Porter-Duff source-over of ``src`` onto ``dst`` (straight alpha, RGBA8).

    ``out.a = sa + da * (1 - sa)`` and
    ``out.rgb = (src.rgb * sa + dst.rgb * da * (1 - sa)) / out.a``.
    Over an opaque destination this is ``src * sa + dst * (1 - sa)``.
    """
    patch = np.asarray(validate_color(dst, "dst"), dtype=np.uint8).reshape(1, 1, 4).copy()
    blend_patch(patch, validate_color(src, "src"))
    r, g, b, a = (int(v) for v in patch[0, 0])
    return (r, g, b, a)


def blend_patch(patch: np.ndarray, color: Color, coverage: np.ndarray | float = 1.0) -> None:
    """Composite ``color`` over an ``(h, w, 4)`` uint8 view in place.

    ``coverage`` scales the source alpha per pixel and is clipped to [0, 1].
    Pixels whose effective alpha is 0 are not written.
    """
    h, w, _ = patch.shape
    if h <= 0 or w <= 0:
        return
    cov = np.clip(np.broadcast_to(np.asarray(coverage, dtype=np.float64), (h, w)), 0.0, 1.0)

    if color[3] >= 255 and bool(np.all(cov >= 1.0)):
        patch[:, :] = color
        return

    src_alpha = (color[3] / 255.0) * cov
    touched = src_alpha > 0.0
    if not np.any(touched):
        return

    dst_rgb = patch[:, :, :3].astype(np.float64)
    dst_alpha = patch[:, :, 3].astype(np.float64) / 255.0
    src_rgb = np.asarray(color[:3], dtype=np.float64).reshape(1, 1, 3)

    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
    out_rgb_num = src_rgb * src_alpha[:, :, None] + dst_rgb * dst_alpha[:, :, None] * (1.0 - src_alpha[:, :, None])
    safe_alpha = np.where(out_alpha > 1e-12, out_alpha, 1.0)
    out_rgb = np.clip(np.rint(out_rgb_num / safe_alpha[:, :, None]), 0, 255).astype(np.uint8)
    out_a = np.clip(np.rint(out_alpha * 255.0), 0, 255).astype(np.uint8)

    patch[:, :, :3] = np.where(touched[:, :, None], out_rgb, patch[:, :, :3])
    patch[:, :, 3] = np.where(touched, out_a, patch[:, :, 3])


def blend_pixel(canvas: Canvas, x: int, y: int, color: Color, coverage: float = 1.0) -> None:
    if not canvas.contains(x, y):
        raise OutOfCanvasError(f"pixel ({x}, {y}) outside {canvas.width}x{canvas.height} canvas")
    blend_patch(canvas.pixels[y : y + 1, x : x + 1], color, coverage)
