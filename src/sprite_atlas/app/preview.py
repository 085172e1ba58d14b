"""Render every animation of a manifest side by side."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image

from sprite_atlas.config import AtlasConfig
from sprite_atlas.engine import AnimatedSprite, AssetRegistry, load
from sprite_atlas.renderer import ArrayBackend
from sprite_atlas.types import Size

logger = logging.getLogger(__name__)

SAVE_FORMATS = {".gif": "GIF", ".png": "PNG"}


class PreviewRenderer:
    """Plays animations on a grid and collects the rendered frames."""

    def __init__(
        self,
        registry: AssetRegistry,
        backend: ArrayBackend,
        config: Optional[AtlasConfig] = None,
    ):
        """Initialize the preview renderer.

        Args:
            registry: Registry loaded with an ArrayBackend.
            backend: The backend that cut the registry's frames.
            config: Preview settings.
        """
        self.registry = registry
        self.backend = backend
        self.config = config or AtlasConfig()

    @classmethod
    def from_manifest(cls, path: Path | str, config: Optional[AtlasConfig] = None) -> "PreviewRenderer":
        """Load a manifest and create a preview renderer for it."""
        config = config or AtlasConfig()
        backend = ArrayBackend()
        registry = load(path, backend=backend, config=config)
        return cls(registry, backend, config)

    def create_sprites(self, names: Optional[list[str]] = None) -> list[AnimatedSprite]:
        """Create one sprite per animation.

        Args:
            names: Animation names, defaults to every registered animation.

        Raises:
            AssetLookupError: If a name isn't registered.
        """
        if names is None:
            names = self.config.animations or self.registry.animation_keys()
        return [self.registry.new_sprite(name) for name in names]

    def cell_size(self, sprites: list[AnimatedSprite]) -> Size:
        """Size of a grid cell: the largest frame plus padding."""
        w = h = 0
        for sprite in sprites:
            for frame in sprite.animation.frames:
                w = max(w, frame.region.rect.w)
                h = max(h, frame.region.rect.h)
        pad = self.config.padding
        return Size(w=w + pad, h=h + pad)

    def render_frame(self, sprites: list[AnimatedSprite], cell: Size) -> np.ndarray:
        """Draw the current frame of every sprite on a new canvas."""
        per_row = min(self.config.per_row, max(len(sprites), 1))
        rows = max(math.ceil(len(sprites) / per_row), 1)
        pad = self.config.padding
        canvas = self.backend.new_canvas(
            per_row * cell.w + pad, rows * cell.h + pad, self.config.background
        )
        for i, sprite in enumerate(sprites):
            row, col = divmod(i, per_row)
            sprite.draw_at(self.backend, canvas, pad + col * cell.w, pad + row * cell.h)
        return canvas

    def render(self, names: Optional[list[str]] = None) -> list[Image.Image]:
        """Play the animations for the configured duration.

        Returns:
            One image per simulated tick.
        """
        sprites = self.create_sprites(names)
        cell = self.cell_size(sprites)
        dt = 1.0 / self.config.tick_rate
        ticks = max(round(self.config.duration * self.config.tick_rate), 1)

        images = []
        for _ in range(ticks):
            canvas = self.render_frame(sprites, cell)
            images.append(self.backend.to_pil(canvas, self.config.scale))
            for sprite in sprites:
                sprite.advance(dt)
        logger.info("Rendered %d frames of %d animations", len(images), len(sprites))
        return images

    def save(self, images: list[Image.Image], output: Path | str) -> Path:
        """Write rendered frames as an animated GIF or PNG.

        Raises:
            ValueError: If the output format isn't supported or no frames
                were rendered.
        """
        output = Path(output)
        fmt = SAVE_FORMATS.get(output.suffix.lower())
        if fmt is None:
            raise ValueError(
                f"Unsupported output format: {output.suffix}. "
                f"Available: {', '.join(SAVE_FORMATS)}"
            )
        if not images:
            raise ValueError("no frames to save")

        output.parent.mkdir(parents=True, exist_ok=True)
        images[0].save(
            output,
            format=fmt,
            save_all=True,
            append_images=images[1:],
            duration=max(round(1000 / self.config.tick_rate), 1),
            loop=0,
        )
        logger.info("Saved preview to %s", output)
        return output
