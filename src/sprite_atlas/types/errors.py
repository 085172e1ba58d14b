"""Errors raised while loading and querying sprite assets."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class AtlasError(Exception):
    """Base class for all sprite atlas errors.

    ``path`` and ``collection`` locate the offending manifest entry and are
    appended to the message. The loader fills in ``collection`` as errors
    propagate out of a collection.
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path | str] = None,
        collection: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None
        self.collection = collection

    def __str__(self) -> str:
        context = []
        if self.collection:
            context.append(f"collection '{self.collection}'")
        if self.path is not None:
            context.append(str(self.path))
        if not context:
            return self.message
        return f"{self.message} [{', '.join(context)}]"


class ManifestParseError(AtlasError):
    """A manifest file can't be read or isn't well-formed."""


class ManifestValidationError(AtlasError):
    """A manifest parsed fine but violates a loading rule."""

    def __init__(
        self,
        reason: str,
        entity: str = "",
        index: Optional[int] = None,
        name: str = "",
        path: Optional[Path | str] = None,
    ):
        self.reason = reason
        self.entity = entity
        self.index = index
        self.name = name
        subject = entity
        if index is not None:
            subject = f"{entity} #{index}"
        if name:
            subject = f"{subject} ({name})"
        message = f"{subject} {reason}" if subject else reason
        super().__init__(message, path=path)


class DuplicateKeyError(AtlasError):
    """A frame or animation key is already registered."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} '{key}' already exists")


class UnresolvedReferenceError(AtlasError):
    """An animation frame references a frame key that isn't registered."""

    def __init__(self, key: str, animation: str, index: int, path=None):
        self.key = key
        self.animation = animation
        self.index = index
        super().__init__(
            f"frame #{index} of animation '{animation}' references unknown frame '{key}'",
            path=path,
        )


class AssetLookupError(AtlasError, LookupError):
    """A frame or animation was requested by a name that isn't registered."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"unknown {kind} '{key}'")
