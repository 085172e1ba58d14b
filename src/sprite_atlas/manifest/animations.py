"""Animation manifest loading and validation."""

from __future__ import annotations

from pathlib import Path

from sprite_atlas.types import AnimationManifest, ManifestValidationError

from ._json import located, read_json


def check_animations(manifest: AnimationManifest) -> None:
    """Check every animation is named, non-empty and has a coherent rate.

    Frame keys are only checked for presence here. They are resolved against
    the registry when the animation is compiled.

    Raises:
        ManifestValidationError: On the first violation.
    """
    seen: set[str] = set()
    for i, anim in enumerate(manifest.animations):
        if not anim.name:
            raise ManifestValidationError("doesn't have a name", "anim", i)
        if anim.name in seen:
            raise ManifestValidationError("is declared twice in this file", "anim", i, anim.name)
        seen.add(anim.name)
        if not anim.frames:
            raise ManifestValidationError("has no frames", "anim", i, anim.name)
        if anim.fps < 0:
            raise ManifestValidationError(f"has a negative FPS ({anim.fps})", "anim", i, anim.name)
        if anim.fps == 0 and len(anim.frames) > 1:
            raise ManifestValidationError(
                f"has {len(anim.frames)} frames but a null FPS", "anim", i, anim.name
            )
        for j, frame in enumerate(anim.frames):
            if not frame.key:
                raise ManifestValidationError(
                    f"from anim #{i} ({anim.name}) has no key", "frame", j
                )


def load_animations(path: Path | str) -> AnimationManifest:
    """Load a JSON file that describes animations.

    Args:
        path: Path to the animation manifest.

    Returns:
        The validated AnimationManifest.

    Raises:
        ManifestParseError: If the file is malformed.
        ManifestValidationError: If an animation is inconsistent.
    """
    path = Path(path)
    with located(path):
        manifest = AnimationManifest.from_dict(read_json(path))
        manifest.path = path
        check_animations(manifest)
    return manifest
