"""Headless render backend for validation and testing."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from PIL import Image

from sprite_atlas.types import Rect, Size

from .backend import Color, RenderBackend


@dataclass(frozen=True)
class ImageStub:
    """A source image known only by its path and size."""

    path: Path
    size: Size


@dataclass(frozen=True)
class SubImage:
    """A region of an ImageStub."""

    source: ImageStub
    rect: Rect


@dataclass(frozen=True)
class DrawCall:
    """A recorded draw operation."""

    image: SubImage
    x: float
    y: float
    flip_h: bool
    flip_v: bool


@dataclass
class Canvas:
    """A drawing target that records what was drawn on it."""

    width: int
    height: int
    color: Color
    calls: list[DrawCall] = field(default_factory=list)


class HeadlessBackend(RenderBackend):
    """Backend that never decodes pixels.

    Image sizes come from the file header, or from ``image_size`` when given,
    in which case files aren't touched at all.
    """

    def __init__(self, image_size: Optional[Size] = None):
        """Initialize the headless backend.

        Args:
            image_size: Size reported for every image instead of reading files.
        """
        self._fixed_size = image_size
        self.loaded: list[Path] = []

    def load_image(self, path: Path) -> ImageStub:
        path = Path(path)
        if self._fixed_size is not None:
            size = self._fixed_size
        else:
            with Image.open(path) as img:
                w, h = img.size
            size = Size(w=w, h=h)
        self.loaded.append(path)
        return ImageStub(path=path, size=size)

    def image_size(self, image: ImageStub | SubImage) -> Size:
        if isinstance(image, SubImage):
            return Size(w=image.rect.w, h=image.rect.h)
        return image.size

    def sub_image(self, image: ImageStub, rect: Rect) -> SubImage:
        return SubImage(source=image, rect=rect)

    def new_canvas(self, width: int, height: int, color: Color = (0, 0, 0, 0)) -> Canvas:
        return Canvas(width=width, height=height, color=color)

    def draw(
        self,
        target: Canvas,
        image: SubImage,
        x: float,
        y: float,
        flip_h: bool = False,
        flip_v: bool = False,
    ) -> None:
        target.calls.append(DrawCall(image=image, x=x, y=y, flip_h=flip_h, flip_v=flip_v))
