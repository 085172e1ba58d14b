"""Configuration for loading and previewing sprite assets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

BACKENDS = ("array", "headless")


@dataclass
class AtlasConfig:
    """Settings shared by the loader, the preview renderer and the CLI."""

    # Loading
    backend: str = "array"  # "array" decodes pixels, "headless" only reads sizes
    verify_image_size: bool = False  # decoded image must match meta.size
    log_level: str = "INFO"

    # Preview
    tick_rate: int = 30  # simulated ticks per second
    duration: float = 2.0  # seconds
    per_row: int = 8
    scale: int = 4
    padding: int = 8
    background: tuple[int, int, int, int] = field(
        default_factory=lambda: (0x31, 0x8B, 0x6A, 0xFF)
    )
    animations: Optional[list[str]] = None  # None = every registered animation

    def __post_init__(self):
        if self.backend not in BACKENDS:
            raise ValueError(
                f"Unknown backend: {self.backend}. Available: {', '.join(BACKENDS)}"
            )
        if self.tick_rate <= 0:
            raise ValueError("tick_rate must be positive")
        if self.per_row <= 0:
            raise ValueError("per_row must be positive")
        if self.scale <= 0:
            raise ValueError("scale must be positive")

    def create_backend(self):
        """Create the render backend named by ``backend``."""
        from sprite_atlas.renderer import ArrayBackend, HeadlessBackend

        if self.backend == "headless":
            return HeadlessBackend()
        return ArrayBackend()
