"""Type definitions for sprite atlas."""

from .geometry import Pivot, Rect, Size
from .manifests import (
    AnimationDesc,
    AnimationManifest,
    AssetCollection,
    FrameSpec,
    Manifest,
    SheetFrame,
    SheetMeta,
    SpriteSheetManifest,
)
from .animation import CompiledAnimation, CompiledFrame, FrameRegion
from .errors import (
    AssetLookupError,
    AtlasError,
    DuplicateKeyError,
    ManifestParseError,
    ManifestValidationError,
    UnresolvedReferenceError,
)

__all__ = [
    # Geometry
    "Pivot",
    "Rect",
    "Size",
    # Manifests
    "AnimationDesc",
    "AnimationManifest",
    "AssetCollection",
    "FrameSpec",
    "Manifest",
    "SheetFrame",
    "SheetMeta",
    "SpriteSheetManifest",
    # Compiled assets
    "CompiledAnimation",
    "CompiledFrame",
    "FrameRegion",
    # Errors
    "AssetLookupError",
    "AtlasError",
    "DuplicateKeyError",
    "ManifestParseError",
    "ManifestValidationError",
    "UnresolvedReferenceError",
]
