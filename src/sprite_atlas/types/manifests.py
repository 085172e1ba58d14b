"""Descriptors decoded from the JSON asset manifests.

Three manifest kinds exist:

- the top-level manifest, listing asset collections;
- spritesheet manifests, naming regions of a packed image;
- animation manifests, describing frame sequences built from those regions.

The ``from_dict`` constructors only check JSON types. Missing scalar fields
decode to zero values so the loaders' validation rules report them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from .errors import ManifestParseError
from .geometry import Pivot, Rect, Size

_MISSING = object()


def _get(data: Any, key: str, kind: type, where: str, default: Any = _MISSING) -> Any:
    """Read ``data[key]`` and check its JSON type.

    Args:
        data: Decoded JSON object.
        key: Field name.
        kind: Expected Python type (int, float, str, bool, list or dict).
        where: Human-readable location used in error messages.
        default: Value used when the field is absent or null.

    Returns:
        The field value.

    Raises:
        ManifestParseError: If the field has the wrong type or is required
            and missing.
    """
    if not isinstance(data, dict):
        raise ManifestParseError(f"{where}: expected an object, got {type(data).__name__}")
    value = data.get(key)
    if value is None:
        if default is _MISSING:
            raise ManifestParseError(f"{where}: missing field '{key}'")
        return default

    if kind is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        value = float(value) if ok else value
    elif kind is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    else:
        ok = isinstance(value, kind)
    if not ok:
        raise ManifestParseError(
            f"{where}: field '{key}' should be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _rect(data: Any, where: str) -> Rect:
    return Rect(
        x=_get(data, "x", int, where, 0),
        y=_get(data, "y", int, where, 0),
        w=_get(data, "w", int, where, 0),
        h=_get(data, "h", int, where, 0),
    )


def _size(data: Any, where: str) -> Size:
    return Size(w=_get(data, "w", int, where, 0), h=_get(data, "h", int, where, 0))


def _pivot(data: Any, where: str) -> Pivot:
    return Pivot(x=_get(data, "x", float, where, 0.0), y=_get(data, "y", float, where, 0.0))


# Top-level manifest


@dataclass
class AssetCollection:
    """Related spritesheet and animation files."""

    name: str
    spritesheet: str
    animations: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, index: int) -> "AssetCollection":
        where = f"collection #{index}"
        animations = _get(data, "animations", list, where, [])
        for j, anim in enumerate(animations):
            if not isinstance(anim, str):
                raise ManifestParseError(f"{where}: animation path #{j} should be str")
        return cls(
            name=_get(data, "name", str, where, ""),
            spritesheet=_get(data, "spritesheet", str, where, ""),
            animations=list(animations),
        )


@dataclass
class Manifest:
    """The whole set of graphic assets, as a list of collections."""

    collections: list[AssetCollection] = field(default_factory=list)
    path: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Manifest":
        raw = _get(data, "collections", list, "manifest", [])
        return cls(collections=[AssetCollection.from_dict(c, i) for i, c in enumerate(raw)])


# Spritesheet manifest


@dataclass
class SheetFrame:
    """A single sprite packed in a spritesheet."""

    name: str
    roi: Rect
    pivot: Pivot = field(default_factory=Pivot)

    @classmethod
    def from_dict(cls, data: Any, index: int) -> "SheetFrame":
        where = f"frame #{index}"
        return cls(
            name=_get(data, "filename", str, where, ""),
            roi=_rect(_get(data, "frame", dict, where, {}), where),
            pivot=_pivot(_get(data, "pivot", dict, where, {}), where),
        )


@dataclass
class SheetMeta:
    """Information about the image a spritesheet is tied to."""

    image: str
    size: Size

    @classmethod
    def from_dict(cls, data: Any) -> "SheetMeta":
        return cls(
            image=_get(data, "image", str, "meta", ""),
            size=_size(_get(data, "size", dict, "meta", {}), "meta.size"),
        )


@dataclass
class SpriteSheetManifest:
    """An image packing multiple sprites, with its frame regions."""

    frames: list[SheetFrame]
    meta: SheetMeta
    path: Optional[Path] = None

    @property
    def name(self) -> str:
        """Base name of the spritesheet file."""
        return self.path.name if self.path is not None else ""

    @property
    def image_path(self) -> Path:
        """Source image path, relative to the spritesheet's folder."""
        if self.path is None:
            return Path(self.meta.image)
        return self.path.parent / self.meta.image

    @classmethod
    def from_dict(cls, data: Any) -> "SpriteSheetManifest":
        raw = _get(data, "frames", list, "spritesheet", [])
        return cls(
            frames=[SheetFrame.from_dict(f, i) for i, f in enumerate(raw)],
            meta=SheetMeta.from_dict(_get(data, "meta", dict, "spritesheet", {})),
        )


# Animation manifest


@dataclass
class FrameSpec:
    """A reference to a registered frame, with flip flags."""

    key: str
    flip_h: bool = False
    flip_v: bool = False

    @classmethod
    def from_dict(cls, data: Any, where: str) -> "FrameSpec":
        return cls(
            key=_get(data, "key", str, where, ""),
            flip_h=_get(data, "flipH", bool, where, False),
            flip_v=_get(data, "flipV", bool, where, False),
        )


@dataclass
class AnimationDesc:
    """Name, speed and frames of one animation."""

    name: str
    fps: int
    frames: list[FrameSpec] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, index: int) -> "AnimationDesc":
        where = f"anim #{index}"
        raw = _get(data, "frames", list, where, [])
        return cls(
            name=_get(data, "name", str, where, ""),
            fps=_get(data, "fps", int, where, 0),
            frames=[FrameSpec.from_dict(f, f"frame #{j} from {where}") for j, f in enumerate(raw)],
        )


@dataclass
class AnimationManifest:
    """All animations described by one file."""

    spritesheet: str
    animations: list[AnimationDesc] = field(default_factory=list)
    path: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Any) -> "AnimationManifest":
        raw = _get(data, "animations", list, "animation manifest", [])
        return cls(
            spritesheet=_get(data, "spritesheet", str, "animation manifest", ""),
            animations=[AnimationDesc.from_dict(a, i) for i, a in enumerate(raw)],
        )
