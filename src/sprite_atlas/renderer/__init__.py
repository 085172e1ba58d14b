"""Render backends for sprite atlas."""

from __future__ import annotations

from .backend import RenderBackend
from .array_backend import ArrayBackend
from .headless import Canvas, DrawCall, HeadlessBackend, ImageStub, SubImage

__all__ = [
    "RenderBackend",
    "ArrayBackend",
    "HeadlessBackend",
    "Canvas",
    "DrawCall",
    "ImageStub",
    "SubImage",
]
