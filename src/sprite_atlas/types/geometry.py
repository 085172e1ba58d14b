"""Geometry value types used by spritesheet manifests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Size:
    """Width and height of an image."""

    w: int
    h: int

    def __str__(self) -> str:
        return f"{self.w}x{self.h}"


@dataclass(frozen=True)
class Rect:
    """A rectangular region of interest within an image."""

    x: int
    y: int
    w: int
    h: int

    def xywh(self) -> tuple[int, int, int, int]:
        """Unpack the rectangle into its x, y, w, h components."""
        return self.x, self.y, self.w, self.h

    def contains_within(self, size: Size) -> bool:
        """Check whether the rectangle lies inside an image of given size.

        Args:
            size: The owning image's size.

        Returns:
            True if the region fits entirely within the image.
        """
        return (
            self.x >= 0
            and self.y >= 0
            and self.x + self.w <= size.w
            and self.y + self.h <= size.h
        )


@dataclass(frozen=True)
class Pivot:
    """Normalized anchor point within a frame."""

    x: float = 0.0
    y: float = 0.0

    def is_valid(self) -> bool:
        """Check both components lie in [0, 1]."""
        return 0.0 <= self.x <= 1.0 and 0.0 <= self.y <= 1.0

    def __str__(self) -> str:
        return f"({self.x:f}, {self.y:f})"
