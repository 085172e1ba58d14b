"""JSON file reading shared by the manifest loaders."""

from __future__ import annotations

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from sprite_atlas.types import AtlasError, ManifestParseError


def read_json(path: Path) -> Any:
    """Read and decode a JSON file.

    Raises:
        ManifestParseError: If the file can't be read or decoded.
    """
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as err:
        raise ManifestParseError(f"can't read manifest: {err.strerror}", path=path) from err
    except json.JSONDecodeError as err:
        raise ManifestParseError(f"invalid JSON: {err}", path=path) from err
    except UnicodeDecodeError as err:
        raise ManifestParseError(f"invalid encoding: {err.reason}", path=path) from err


@contextmanager
def located(path: Path) -> Iterator[None]:
    """Attach ``path`` to any atlas error raised inside the block."""
    try:
        yield
    except AtlasError as err:
        if err.path is None:
            err.path = path
        raise
