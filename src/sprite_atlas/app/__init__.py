"""Command line tools and animation preview."""

from __future__ import annotations

from .logs import configure_logging
from .preview import PreviewRenderer
from .cli import main

__all__ = [
    "configure_logging",
    "PreviewRenderer",
    "main",
]
