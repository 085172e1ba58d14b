"""Loading of asset collections into a registry."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image

from sprite_atlas.config import AtlasConfig
from sprite_atlas.manifest import load_animations, load_manifest, load_spritesheet
from sprite_atlas.manifest._json import located
from sprite_atlas.renderer import RenderBackend
from sprite_atlas.types import (
    AnimationDesc,
    AssetLookupError,
    AtlasError,
    CompiledAnimation,
    CompiledFrame,
    DuplicateKeyError,
    FrameRegion,
    ManifestParseError,
    ManifestValidationError,
    UnresolvedReferenceError,
)

from .registry import AssetRegistry

logger = logging.getLogger(__name__)


class AssetLoader:
    """Drives the manifest loaders and fills a registry.

    Loading stops at the first error. Entries registered before the error
    stay in the registry.
    """

    def __init__(
        self,
        registry: AssetRegistry,
        backend: Optional[RenderBackend] = None,
        config: Optional[AtlasConfig] = None,
    ):
        """Initialize the loader.

        Args:
            registry: Registry receiving frames and animations.
            backend: Backend used to load images and cut frames.
                Defaults to the one named by the config.
            config: Loading settings.
        """
        self.config = config or AtlasConfig()
        self.registry = registry
        self.backend = backend or self.config.create_backend()

    def load(self, path: Path | str) -> None:
        """Load every collection listed by a top-level manifest.

        Spritesheet and animation paths are relative to the manifest's
        folder. A collection's frames are registered before its animations
        are compiled; animations may use frames from collections loaded
        earlier.

        Raises:
            AtlasError: The first loading error, tagged with its collection.
        """
        manifest = load_manifest(path)
        base_dir = Path(path).parent
        for c in manifest.collections:
            logger.info("Loading collection '%s'", c.name)
            try:
                self.load_sprites(base_dir / c.spritesheet)
                for a in c.animations:
                    self.load_animations(base_dir / a)
            except AtlasError as err:
                if err.collection is None:
                    err.collection = c.name
                raise

    def load_sprites(self, path: Path) -> int:
        """Load a spritesheet and register its frames.

        Returns:
            Number of registered frames.
        """
        logger.info("Loading sprites from %s", path)
        sheet = load_spritesheet(path)
        logger.info("Loading spritesheet '%s' (%d frames)", sheet.meta.image, len(sheet.frames))

        image_path = sheet.image_path
        try:
            image = self.backend.load_image(image_path)
        except (OSError, Image.DecompressionBombError) as err:
            raise ManifestParseError(f"can't load image: {err}", path=image_path) from err

        with located(sheet.path):
            if self.config.verify_image_size:
                actual = self.backend.image_size(image)
                if actual != sheet.meta.size:
                    raise ManifestValidationError(
                        f"declares a {sheet.meta.size} image but {sheet.meta.image} is {actual}",
                        "spritesheet",
                        name=sheet.name,
                    )
            for frame in sheet.frames:
                region = FrameRegion(
                    key=frame.name,
                    image=self.backend.sub_image(image, frame.roi),
                    rect=frame.roi,
                    pivot=frame.pivot,
                )
                self.registry.register_frame(frame.name, region)
        return len(sheet.frames)

    def load_animations(self, path: Path) -> int:
        """Load an animation file, compile and register its animations.

        Returns:
            Number of registered animations.
        """
        logger.info("Loading animations from %s", path)
        manifest = load_animations(path)
        with located(path):
            for desc in manifest.animations:
                if self.registry.has_animation(desc.name):
                    raise DuplicateKeyError("animation", desc.name)
                self.registry.register_animation(desc.name, self.compile(desc))
        return len(manifest.animations)

    def compile(self, desc: AnimationDesc) -> CompiledAnimation:
        """Resolve an animation's frame keys against the registry.

        Raises:
            UnresolvedReferenceError: If a frame key isn't registered.
        """
        frames = []
        for i, spec in enumerate(desc.frames):
            try:
                region = self.registry.lookup_frame(spec.key)
            except AssetLookupError as err:
                raise UnresolvedReferenceError(spec.key, desc.name, i) from err
            frames.append(CompiledFrame(region=region, flip_h=spec.flip_h, flip_v=spec.flip_v))
        return CompiledAnimation(name=desc.name, fps=desc.fps, frames=tuple(frames))


def load(
    path: Path | str,
    registry: Optional[AssetRegistry] = None,
    backend: Optional[RenderBackend] = None,
    config: Optional[AtlasConfig] = None,
) -> AssetRegistry:
    """Load graphics assets from a manifest file.

    Args:
        path: Top-level manifest path.
        registry: Registry to fill. A new one is created if omitted.
        backend: Render backend used for images.
        config: Loading settings.

    Returns:
        The filled registry.
    """
    registry = registry if registry is not None else AssetRegistry()
    AssetLoader(registry, backend, config).load(path)
    return registry
