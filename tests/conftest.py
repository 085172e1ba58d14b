"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest
from PIL import Image

from sprite_atlas.engine import AssetRegistry
from sprite_atlas.types import CompiledAnimation, CompiledFrame, FrameRegion, Rect

# One colour per 16x16 walk frame
WALK_COLORS = [
    (255, 0, 0, 255),
    (0, 255, 0, 255),
    (0, 0, 255, 255),
    (255, 255, 255, 255),
]


def _write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def _sheet_frame(name: str, x: int, y: int = 0, w: int = 16, h: int = 16, pivot=(0.5, 1.0)) -> dict:
    return {
        "filename": name,
        "frame": {"x": x, "y": y, "w": w, "h": h},
        "pivot": {"x": pivot[0], "y": pivot[1]},
    }


@pytest.fixture
def write_json() -> Callable[[Path, Any], Path]:
    """Write a JSON document, creating parent folders."""
    return _write_json


@pytest.fixture
def sheet_frame() -> Callable[..., dict]:
    """Build a spritesheet frame entry."""
    return _sheet_frame


@pytest.fixture
def make_sheet(tmp_path) -> Callable[..., Path]:
    """Write a spritesheet manifest and its PNG image.

    Frames are 16x16 cells laid out left to right, each filled with a
    colour from WALK_COLORS.
    """

    def make(
        rel: str = "hero/sheet.json",
        names: tuple[str, ...] = ("walk_0", "walk_1", "walk_2", "walk_3"),
        size: tuple[int, int] = (64, 16),
        image: str = "sheet.png",
        write_image: bool = True,
    ) -> Path:
        path = tmp_path / rel
        if write_image:
            img = Image.new("RGBA", size, (0, 0, 0, 0))
            for i in range(min(len(names), size[0] // 16)):
                color = WALK_COLORS[i % len(WALK_COLORS)]
                img.paste(color, (i * 16, 0, i * 16 + 16, 16))
            path.parent.mkdir(parents=True, exist_ok=True)
            img.save(path.parent / image)
        return _write_json(
            path,
            {
                "frames": [_sheet_frame(n, i * 16) for i, n in enumerate(names)],
                "meta": {"image": image, "size": {"w": size[0], "h": size[1]}},
            },
        )

    return make


@pytest.fixture
def make_anims(tmp_path) -> Callable[..., Path]:
    """Write an animation manifest from (name, fps, keys) tuples."""

    def make(rel: str = "hero/anims.json", animations=None, spritesheet: str = "sheet.json") -> Path:
        if animations is None:
            animations = [("walk", 8, ["walk_0", "walk_1", "walk_2", "walk_3"])]
        return _write_json(
            tmp_path / rel,
            {
                "spritesheet": spritesheet,
                "animations": [
                    {"name": name, "fps": fps, "frames": [{"key": k} for k in keys]}
                    for name, fps, keys in animations
                ],
            },
        )

    return make


@pytest.fixture
def make_manifest(tmp_path) -> Callable[..., Path]:
    """Write a top-level manifest from (name, spritesheet, animations) tuples."""

    def make(collections, rel: str = "manifest.json") -> Path:
        return _write_json(
            tmp_path / rel,
            {
                "collections": [
                    {"name": name, "spritesheet": sheet, "animations": list(anims)}
                    for name, sheet, anims in collections
                ]
            },
        )

    return make


@pytest.fixture
def walk_manifest(make_sheet, make_anims, make_manifest) -> Path:
    """A manifest with one 'hero' collection holding a 4-frame 'walk' animation."""
    make_sheet()
    make_anims()
    return make_manifest([("hero", "hero/sheet.json", ["hero/anims.json"])])


@pytest.fixture
def registry() -> AssetRegistry:
    """A fresh, empty registry."""
    return AssetRegistry()


@pytest.fixture
def make_animation() -> Callable[..., CompiledAnimation]:
    """Build a compiled animation over placeholder regions."""

    def make(fps: int = 10, count: int = 4, name: str = "anim") -> CompiledAnimation:
        frames = tuple(
            CompiledFrame(
                region=FrameRegion(key=f"{name}_{i}", image=None, rect=Rect(i * 16, 0, 16, 16)),
                flip_h=i % 2 == 1,
            )
            for i in range(count)
        )
        return CompiledAnimation(name=name, fps=fps, frames=frames)

    return make
