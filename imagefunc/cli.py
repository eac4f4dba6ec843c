"""
imagefunc/cli.py
Command-line interface for imagefunc

Usage:
    python -m imagefunc list-presets
    python -m imagefunc render --preset polar_checker --width 800 --height 600
    python -m imagefunc render --preset rings --tint "#ffc125" --tint-amount 0.5
    python -m imagefunc gallery --output renders/gallery --size 256
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .color import parse_color
from .config import RENDER_CONFIG
from .logger import LogLevel, configure_logging


def cmd_list_presets(args: argparse.Namespace) -> int:
    """List gallery presets."""
    from .gallery import list_presets

    print("Available presets:")
    for name in list_presets():
        print(f"  - {name}")
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    """Render a single preset to an image file."""
    from .gallery import build_preset
    from .images import constant, lerp
    from .render import save_image

    try:
        image = build_preset(args.preset)
    except KeyError as e:
        print(f"ERROR: {e.args[0]}")
        return 1

    if args.tint is not None:
        image = lerp(constant(args.tint_amount), constant(args.tint), image)

    if args.output:
        output_path = Path(args.output)
    else:
        output_path = RENDER_CONFIG.output_dir / f"{args.preset}.{RENDER_CONFIG.image_format}"

    try:
        save_image(image, output_path, args.width, args.height)
    except (ValueError, OSError) as e:
        print(f"ERROR: {e}")
        return 1

    print(f"Rendered: {output_path}")
    print(f"  preset: {args.preset}")
    print(f"  size:   {args.width}x{args.height}")
    if args.tint is not None:
        print(f"  tint:   {args.tint.rgb} x {args.tint_amount:.2f}")
    return 0


def cmd_gallery(args: argparse.Namespace) -> int:
    """Render every preset into a directory."""
    from .gallery import render_gallery

    output_dir = Path(args.output) if args.output else RENDER_CONFIG.output_dir / "gallery"

    try:
        written = render_gallery(output_dir, size=args.size)
    except (ValueError, OSError) as e:
        print(f"ERROR: {e}")
        return 1

    for path in written:
        print(path)
    print(f"\nDone. Output: {output_dir}")
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="imagefunc",
        description="Render procedural images built from point functions",
    )
    parser.add_argument(
        "--version", action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", type=str, help="Also write a debug log here")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # list-presets command
    list_parser = subparsers.add_parser("list-presets", help="List gallery presets")
    list_parser.set_defaults(func=cmd_list_presets)

    # render command
    render_parser = subparsers.add_parser("render", help="Render one preset")
    render_parser.add_argument("--preset", "-p", type=str, required=True, help="Preset name")
    render_parser.add_argument("--width", type=int, default=RENDER_CONFIG.width,
                               help=f"Width in pixels (default: {RENDER_CONFIG.width})")
    render_parser.add_argument("--height", type=int, default=RENDER_CONFIG.height,
                               help=f"Height in pixels (default: {RENDER_CONFIG.height})")
    render_parser.add_argument("--output", "-o", type=str, help="Output file")
    render_parser.add_argument("--tint", type=parse_color,
                               help="Wash the preset toward a colour (name or #rrggbb)")
    render_parser.add_argument("--tint-amount", type=float, default=0.3,
                               help="Tint strength 0-1 (default: 0.3)")
    render_parser.set_defaults(func=cmd_render)

    # gallery command
    gallery_parser = subparsers.add_parser("gallery", help="Render all presets")
    gallery_parser.add_argument("--output", "-o", type=str, help="Output directory")
    gallery_parser.add_argument("--size", "-s", type=int, default=RENDER_CONFIG.width,
                                help=f"Square size in pixels (default: {RENDER_CONFIG.width})")
    gallery_parser.set_defaults(func=cmd_gallery)

    args = parser.parse_args(argv)

    configure_logging(LogLevel.DEBUG if args.verbose else LogLevel.WARNING, args.log_file)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
