"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from sprite_atlas.config import AtlasConfig
from sprite_atlas.engine import load
from sprite_atlas.types import AtlasError

from .logs import configure_logging
from .preview import PreviewRenderer

logger = logging.getLogger(__name__)


def _color(value: str) -> tuple[int, int, int, int]:
    """Parse an ``RRGGBB`` or ``RRGGBBAA`` hex colour."""
    value = value.lstrip("#")
    if len(value) not in (6, 8):
        raise argparse.ArgumentTypeError(f"invalid colour: {value}")
    try:
        parts = [int(value[i : i + 2], 16) for i in range(0, len(value), 2)]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid colour: {value}") from None
    if len(parts) == 3:
        parts.append(0xFF)
    return tuple(parts)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sprite-atlas",
        description="Load sprite animation manifests and preview them.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--verify-size",
        action="store_true",
        help="Check images match the size declared by their spritesheet",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Validate a manifest and list its assets")
    check.add_argument("manifest", help="Top-level manifest file")
    check.set_defaults(func=run_check)

    preview = sub.add_parser("preview", help="Render animations to a GIF or PNG")
    preview.add_argument("manifest", help="Top-level manifest file")
    preview.add_argument("-o", "--output", default="preview.gif", help="Output file")
    preview.add_argument("-a", "--animation", action="append", dest="animations",
                         help="Animation to render (repeatable, default: all)")
    preview.add_argument("--duration", type=float, default=2.0, help="Seconds to render")
    preview.add_argument("--tick-rate", type=int, default=30, help="Ticks per second")
    preview.add_argument("--per-row", type=int, default=8, help="Animations per row")
    preview.add_argument("--scale", type=int, default=4, help="Upscaling factor")
    preview.add_argument("--background", type=_color, default=(0x31, 0x8B, 0x6A, 0xFF),
                         help="Background colour as RRGGBB[AA]")
    preview.set_defaults(func=run_preview)
    return parser


def make_config(args: argparse.Namespace) -> AtlasConfig:
    """Build an AtlasConfig from parsed arguments."""
    if args.command == "check":
        return AtlasConfig(
            backend="headless",
            log_level=args.log_level,
            verify_image_size=args.verify_size,
        )
    return AtlasConfig(
        log_level=args.log_level,
        verify_image_size=args.verify_size,
        duration=args.duration,
        tick_rate=args.tick_rate,
        per_row=args.per_row,
        scale=args.scale,
        background=args.background,
        animations=args.animations,
    )


def run_check(args: argparse.Namespace, config: AtlasConfig) -> int:
    registry = load(args.manifest, config=config)
    print(f"{registry.frame_count} frames, {registry.animation_count} animations")
    for key in registry.animation_keys():
        anim = registry.lookup_animation(key)
        print(f"  {key}: {anim.frame_count} frames @ {anim.fps} fps")
    return 0


def run_preview(args: argparse.Namespace, config: AtlasConfig) -> int:
    renderer = PreviewRenderer.from_manifest(args.manifest, config)
    output = renderer.save(renderer.render(), args.output)
    print(f"Saved preview to {output}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command line tool.

    Returns:
        Process exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = make_config(args)
    except ValueError as err:
        parser.error(str(err))
    configure_logging(config.log_level)

    try:
        return args.func(args, config)
    except AtlasError as err:
        # Assets are required at startup, so loading errors are fatal
        logger.error("Loading failed: %s", err)
        return 1
    except ValueError as err:
        logger.error("%s", err)
        return 1


if __name__ == "__main__":
    sys.exit(main())
