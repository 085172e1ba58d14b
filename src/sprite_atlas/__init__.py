"""Sprite atlas: declarative animation manifests resolved into playable sprites."""

from __future__ import annotations

__version__ = "0.1.0"
