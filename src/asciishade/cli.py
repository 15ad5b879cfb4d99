import argparse
import logging
import sys
from pathlib import Path

from PIL import UnidentifiedImageError

from asciishade.config import DEFAULT_CHARSET, DEFAULT_RESOLUTION, GLYPH_RESOLUTION
from asciishade.errors import ShellError
from asciishade.glyph_atlas import GlyphRasterizer, find_monospace_font
from asciishade.image import RasterImage
from asciishade.shell import Shell


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Interactively render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument("-f", "--font", default=None, help="TrueType font for glyph masks (default: system monospace)")
    parser.add_argument(
        "-g",
        "--glyph-resolution",
        type=int,
        default=GLYPH_RESOLUTION,
        help=f"Glyph mask size in pixels (default: {GLYPH_RESOLUTION})",
    )
    parser.add_argument(
        "-r", "--resolution", type=int, default=DEFAULT_RESOLUTION, help="Initial number of columns (default: 2)"
    )
    parser.add_argument(
        "-c", "--charset", default=DEFAULT_CHARSET, help=f"Initial characters (default: {DEFAULT_CHARSET})"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)
    try:
        image = RasterImage.open(image_path)
    except (UnidentifiedImageError, OSError) as e:
        print(f"Could not read image {image_path}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        glyphs = GlyphRasterizer(args.font or find_monospace_font(), resolution=args.glyph_resolution)
    except OSError as e:
        print(f"Could not load font {args.font}: {e}", file=sys.stderr)
        sys.exit(1)
    try:
        shell = Shell(image, glyphs=glyphs, charset=args.charset, resolution=args.resolution)
    except ShellError as e:
        print(e.message, file=sys.stderr)
        sys.exit(1)
    shell.run()


if __name__ == "__main__":
    main()
