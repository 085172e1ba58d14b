"""Interface between compiled sprite data and a drawing library."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sprite_atlas.types import Rect, Size

Color = tuple[int, int, int, int]


class RenderBackend:
    """Loads images, cuts sub-images and draws them.

    Image, sub-image and canvas handles are opaque to the rest of the
    package; only the backend that produced them knows how to use them.
    """

    def load_image(self, path: Path) -> Any:
        """Load a source image.

        Raises:
            OSError: If the image can't be opened or decoded.
        """
        raise NotImplementedError

    def image_size(self, image: Any) -> Size:
        """Get the size of an image or sub-image handle."""
        raise NotImplementedError

    def sub_image(self, image: Any, rect: Rect) -> Any:
        """Get a handle on a rectangular region of an image."""
        raise NotImplementedError

    def new_canvas(self, width: int, height: int, color: Color = (0, 0, 0, 0)) -> Any:
        """Create a drawing target filled with a colour."""
        raise NotImplementedError

    def draw(
        self,
        target: Any,
        image: Any,
        x: float,
        y: float,
        flip_h: bool = False,
        flip_v: bool = False,
    ) -> None:
        """Draw an image with its top-left corner at (x, y) on a target."""
        raise NotImplementedError
