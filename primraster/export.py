from __future__ import annotations

from pathlib import Path

import numpy as np
import torch
from PIL import Image


def _check_rgba(pixels: np.ndarray) -> None:
    if pixels.dtype != np.uint8:
        raise ValueError("pixels must be uint8")
    if pixels.ndim != 3 or pixels.shape[2] != 4:
        raise ValueError("pixels must have shape (H, W, 4)")


def to_image(pixels: np.ndarray) -> Image.Image:
    _check_rgba(pixels)
    return Image.fromarray(np.ascontiguousarray(pixels))


def save_png(pixels: np.ndarray, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    to_image(pixels).save(out, format="PNG")
    return out


def to_tensor(pixels: np.ndarray) -> torch.Tensor:
    """Copy an ``(H, W, 4)`` RGBA8 buffer into a ``torch.uint8`` tensor."""
    _check_rgba(pixels)
    return torch.from_numpy(np.array(pixels, dtype=np.uint8, copy=True))
