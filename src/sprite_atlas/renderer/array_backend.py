"""Render backend working on RGBA numpy arrays."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from sprite_atlas.types import Rect, Size

from .backend import Color, RenderBackend


class ArrayBackend(RenderBackend):
    """Backend where every image is a ``(h, w, 4)`` uint8 array.

    Sub-images are slices of their source array, so cutting many frames out
    of a spritesheet doesn't copy pixel data.
    """

    def load_image(self, path: Path) -> np.ndarray:
        with Image.open(path) as img:
            return np.array(img.convert("RGBA"), dtype=np.uint8)

    def image_size(self, image: np.ndarray) -> Size:
        return Size(w=image.shape[1], h=image.shape[0])

    def sub_image(self, image: np.ndarray, rect: Rect) -> np.ndarray:
        x, y, w, h = rect.xywh()
        return image[y : y + h, x : x + w]

    def new_canvas(self, width: int, height: int, color: Color = (0, 0, 0, 0)) -> np.ndarray:
        canvas = np.empty((height, width, 4), dtype=np.uint8)
        canvas[:, :] = color
        return canvas

    def draw(
        self,
        target: np.ndarray,
        image: np.ndarray,
        x: float,
        y: float,
        flip_h: bool = False,
        flip_v: bool = False,
    ) -> None:
        src = image
        if flip_h:
            src = src[:, ::-1]
        if flip_v:
            src = src[::-1, :]

        x0, y0 = int(round(x)), int(round(y))
        h, w = src.shape[:2]
        th, tw = target.shape[:2]

        # Clip to the target
        left, top = max(x0, 0), max(y0, 0)
        right, bottom = min(x0 + w, tw), min(y0 + h, th)
        if left >= right or top >= bottom:
            return
        src = src[top - y0 : bottom - y0, left - x0 : right - x0].astype(np.float32) / 255.0
        dst = target[top:bottom, left:right].astype(np.float32) / 255.0

        a_src = src[..., 3:4]
        a_dst = dst[..., 3:4]
        a_out = a_src + a_dst * (1.0 - a_src)
        rgb = src[..., :3] * a_src + dst[..., :3] * a_dst * (1.0 - a_src)
        rgb = np.divide(rgb, a_out, out=np.zeros_like(rgb), where=a_out > 0)

        out = np.concatenate([rgb, a_out], axis=-1)
        target[top:bottom, left:right] = np.clip(np.rint(out * 255.0), 0, 255).astype(np.uint8)

    def to_pil(self, canvas: np.ndarray, scale: int = 1) -> Image.Image:
        """Convert a canvas to a Pillow image, scaled up by an integer factor.

        Args:
            canvas: Canvas array.
            scale: Nearest-neighbour upscaling factor.

        Returns:
            An RGBA Pillow image.
        """
        if scale > 1:
            canvas = np.repeat(np.repeat(canvas, scale, axis=0), scale, axis=1)
        return Image.fromarray(canvas, "RGBA")
