"""Command line interface for printing an image as glyphs."""

from __future__ import annotations

import argparse
import logging
import sys

from . import render
from .image_source import ImageLoadError
from .partition import StepTooSmallError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chunkart",
        description="Render a JPEG or PNG image as ASCII art and print it to the terminal.",
    )
    parser.add_argument("-f", "--file", help="Path to the source image file.")
    parser.add_argument("-w", "--width", type=int, help="Number of glyph columns in the output.")
    parser.add_argument(
        "-i",
        "--invert",
        action="store_true",
        help="Invert the glyph ramp for light text on a dark background.",
    )
    parser.add_argument(
        "-c",
        "--color",
        action="store_true",
        help="Colour each glyph with the chunk's average colour (24-bit ANSI).",
    )
    parser.add_argument(
        "--char-aspect",
        type=float,
        default=render.DEFAULT_CHAR_ASPECT,
        help=(
            "Height/width ratio of a terminal character cell "
            f"(default: {render.DEFAULT_CHAR_ASPECT:.1f})."
        ),
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.file:
        parser.error("a filename must be given (use --file or -f)")
    if args.width is None or args.width <= 0:
        parser.error("width must be > 0 (use --width or -w)")
    if args.char_aspect <= 0:
        parser.error("--char-aspect must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    options = render.RenderOptions(
        width=args.width,
        invert=args.invert,
        color=args.color,
        char_aspect=args.char_aspect,
    )
    try:
        text = render.convert_image(args.file, options)
    except ImageLoadError as exc:
        logger.debug("Failed to load %s", args.file, exc_info=True)
        print(f"{parser.prog}: {exc}", file=sys.stderr)
        return 1
    except StepTooSmallError as exc:
        print(exc)
        return 0

    print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
