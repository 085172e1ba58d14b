"""Top-level asset manifest loading."""

from __future__ import annotations

import logging
from pathlib import Path

from sprite_atlas.types import Manifest, ManifestValidationError

from ._json import located, read_json

logger = logging.getLogger(__name__)


def check_manifest(manifest: Manifest) -> None:
    """Check every collection is named and has a spritesheet and animations.

    Raises:
        ManifestValidationError: On the first invalid collection.
    """
    for i, c in enumerate(manifest.collections):
        if not c.name:
            raise ManifestValidationError("doesn't have a name", "collection", i)
        if not c.spritesheet:
            raise ManifestValidationError(
                "doesn't have an associated spritesheet", "collection", i, c.name
            )
        if not c.animations:
            raise ManifestValidationError(
                "doesn't have any associated animations", "collection", i, c.name
            )


def load_manifest(path: Path | str) -> Manifest:
    """Load and check a top-level manifest file.

    Args:
        path: Path to the manifest JSON file.

    Returns:
        The checked Manifest, with ``path`` set.

    Raises:
        ManifestParseError: If the file is malformed.
        ManifestValidationError: If a collection is incomplete.
    """
    path = Path(path)
    with located(path):
        manifest = Manifest.from_dict(read_json(path))
        manifest.path = path
        check_manifest(manifest)
    logger.debug("Manifest %s lists %d collections", path, len(manifest.collections))
    return manifest
