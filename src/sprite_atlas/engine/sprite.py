"""Time-driven sprites playing compiled animations."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any, Union

from sprite_atlas.types import CompiledAnimation, CompiledFrame

if TYPE_CHECKING:
    from sprite_atlas.renderer import RenderBackend

NS_PER_SECOND = 1_000_000_000

Duration = Union[float, int, timedelta]


def to_nanoseconds(dt: Duration) -> int:
    """Convert seconds or a timedelta to whole nanoseconds.

    Raises:
        ValueError: If the duration is negative.
    """
    if isinstance(dt, timedelta):
        ns = ((dt.days * 86400 + dt.seconds) * 1_000_000 + dt.microseconds) * 1000
    else:
        ns = round(dt * NS_PER_SECOND)
    if ns < 0:
        raise ValueError(f"elapsed time can't be negative: {dt}")
    return ns


class AnimatedSprite:
    """A drawable sprite that gets updated with time.

    Many sprites can play the same CompiledAnimation; each keeps its own
    clock and frame index and never modifies the animation.
    """

    def __init__(self, animation: CompiledAnimation):
        """Initialize the sprite at the start of its animation.

        Args:
            animation: The compiled animation to play.
        """
        self._animation = animation
        self._elapsed_ns = 0
        self._frame_index = 0

    @property
    def animation(self) -> CompiledAnimation:
        return self._animation

    @property
    def frame_index(self) -> int:
        return self._frame_index

    @property
    def elapsed(self) -> float:
        """Accumulated playing time in seconds."""
        return self._elapsed_ns / NS_PER_SECOND

    def advance(self, dt: Duration) -> None:
        """Advance the sprite's clock and compute the new frame index.

        The index only depends on the total elapsed time:
        ``floor(elapsed * fps) mod frame_count``. Static animations
        (``fps == 0``) stay on their only frame.

        Args:
            dt: Elapsed time, in seconds or as a timedelta.
        """
        self._elapsed_ns += to_nanoseconds(dt)
        fps = self._animation.fps
        if fps > 0:
            # Integer arithmetic keeps frame boundaries exact
            ticks = self._elapsed_ns * fps // NS_PER_SECOND
            self._frame_index = ticks % self._animation.frame_count

    def current_frame(self) -> CompiledFrame:
        """Get the frame to display now."""
        return self._animation.frames[self._frame_index]

    def reset(self) -> None:
        """Rewind the sprite to the start of its animation."""
        self._elapsed_ns = 0
        self._frame_index = 0

    def draw_at(self, backend: RenderBackend, target: Any, x: float, y: float) -> None:
        """Draw the current frame at given coordinates on a target.

        Args:
            backend: Backend that produced the frame's sub-image.
            target: Drawing target created by the same backend.
            x: Left coordinate.
            y: Top coordinate.
        """
        frame = self.current_frame()
        backend.draw(target, frame.region.image, x, y, frame.flip_h, frame.flip_v)

    def __repr__(self) -> str:
        return (
            f"AnimatedSprite({self._animation.name!r}, frame={self._frame_index}, "
            f"elapsed={self.elapsed:.3f}s)"
        )
