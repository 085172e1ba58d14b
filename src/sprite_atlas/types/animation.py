"""Resolved frame and animation records held by the registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .geometry import Pivot, Rect


@dataclass(frozen=True)
class FrameRegion:
    """A named sub-image of a loaded spritesheet image.

    ``image`` is the opaque sub-image handle returned by the render backend.
    Regions are shared by every compiled frame that references them.
    """

    key: str
    image: Any
    rect: Rect
    pivot: Pivot = Pivot()


@dataclass(frozen=True)
class CompiledFrame:
    """A frame region with its flip transforms."""

    region: FrameRegion
    flip_h: bool = False
    flip_v: bool = False


@dataclass(frozen=True)
class CompiledAnimation:
    """An ordered, resolved frame sequence plus its playback rate."""

    name: str
    fps: int
    frames: tuple[CompiledFrame, ...]

    def __post_init__(self):
        if not self.frames:
            raise ValueError(f"animation '{self.name}' has no frames")
        if self.fps < 0:
            raise ValueError(f"animation '{self.name}' has a negative fps")
        if self.fps == 0 and len(self.frames) > 1:
            raise ValueError(f"animation '{self.name}' has several frames but a null fps")

    @property
    def frame_count(self) -> int:
        """Number of frames in the sequence."""
        return len(self.frames)

    @property
    def is_static(self) -> bool:
        """Whether the animation is a single still pose."""
        return self.fps == 0
