"""Spritesheet manifest loading and validation."""

from __future__ import annotations

from pathlib import Path

from sprite_atlas.types import ManifestValidationError, SpriteSheetManifest

from ._json import located, read_json


def check_spritesheet(sheet: SpriteSheetManifest) -> None:
    """Check a spritesheet's image and frame geometry.

    Rules are checked in order and the first violation wins: the image is
    named and has a positive size, then for each frame: a non-empty name
    unique within the sheet, a region inside the image, a valid pivot.

    Raises:
        ManifestValidationError: On the first violation.
    """
    meta = sheet.meta
    if not meta.image:
        raise ManifestValidationError(
            "isn't associated to an image file", "spritesheet", name=sheet.name
        )
    if meta.size.w <= 0 or meta.size.h <= 0:
        raise ManifestValidationError(
            f"has an invalid image size: {meta.size}", "spritesheet", name=sheet.name
        )

    seen: set[str] = set()
    for i, f in enumerate(sheet.frames):
        if not f.name:
            raise ManifestValidationError("doesn't have a name", "frame", i)
        if f.name in seen:
            raise ManifestValidationError("is declared twice in this sheet", "frame", i, f.name)
        seen.add(f.name)
        if not f.roi.contains_within(meta.size):
            raise ManifestValidationError("is out of image boundaries", "frame", i, f.name)
        if not f.pivot.is_valid():
            raise ManifestValidationError(
                f"has an invalid pivot point: {f.pivot}", "frame", i, f.name
            )


def load_spritesheet(path: Path | str) -> SpriteSheetManifest:
    """Load a JSON spritesheet file.

    Args:
        path: Path to the spritesheet manifest.

    Returns:
        The validated manifest. Its ``path`` is absolute so that
        ``image_path`` resolves next to the manifest.

    Raises:
        ManifestParseError: If the file is malformed.
        ManifestValidationError: If a frame breaks a geometry rule.
    """
    path = Path(path).absolute()
    with located(path):
        sheet = SpriteSheetManifest.from_dict(read_json(path))
        sheet.path = path
        check_spritesheet(sheet)
    return sheet
