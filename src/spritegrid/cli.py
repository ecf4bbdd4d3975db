"""
Command-Line Interface for spritegrid

Usage:
    spritegrid drawing.txt --stats
    spritegrid drawing.txt -m rgb -o drawing.png
    spritegrid sprite.png --board 64 64 --offset 8 8 -o board.png

"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional
import time

import numpy as np
from PIL import Image

from .color import Color
from .ingestion import ImageRaster
from .resources import load_text_sprite, write_file
from .sprite import Sprite

TEXT_SUFFIXES = (".txt", ".text")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="spritegrid",
        description="Build sprites from text drawings or images, census their colors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  spritegrid heart.txt --stats
      Load a binary text drawing and print its colors

  spritegrid flag.txt -m rgb -W 16 -H 8 -o flag.png
      Load an RGB text drawing into a 16x8 sprite and save it as PNG

  spritegrid sprite.png --board 64 64 --offset 8 8 -o board.png
      Composite an image sprite onto a transparent 64x64 board

Text Modes:
  binary - space/tab is black, anything else white (default)
  rgb    - 'r', 'g', 'b' are red, green, blue; space/tab black; else white
        """
    )

    parser.add_argument(
        "input",
        help="Text drawing (.txt) or image file"
    )

    parser.add_argument(
        "-o", "--output",
        help="Save the result as a PNG image"
    )

    parser.add_argument(
        "-W", "--width",
        type=int,
        help="Sprite width (default: from the input)"
    )

    parser.add_argument(
        "-H", "--height",
        type=int,
        help="Sprite height (default: from the input)"
    )

    parser.add_argument(
        "-m", "--mode",
        choices=["binary", "rgb"],
        default="binary",
        help="Text drawing mode (default: binary)"
    )

    parser.add_argument(
        "--board",
        nargs=2,
        type=int,
        metavar=("WIDTH", "HEIGHT"),
        help="Composite the sprite onto a transparent board of this size"
    )

    parser.add_argument(
        "--offset",
        nargs=2,
        type=int,
        default=[0, 0],
        metavar=("X", "Y"),
        help="Board position of the sprite (default: 0 0)"
    )

    parser.add_argument(
        "--report",
        help="Write the color census to this text file"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print the color census"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0"
    )

    return parser


def load_sprite(args) -> Sprite:
    """Build a sprite from the input file according to the arguments."""
    input_path = Path(args.input)

    if input_path.suffix.lower() in TEXT_SUFFIXES:
        mode = 1 if args.mode == "rgb" else 0
        return load_text_sprite(input_path, args.width, args.height, mode)

    raster = ImageRaster.load(input_path)
    width = args.width if args.width is not None else raster.size[0]
    height = args.height if args.height is not None else raster.size[1]
    sprite = Sprite(width, height)
    sprite.generate_from_image(raster)
    return sprite


def format_census(colors: Dict[Color, int]) -> str:
    """Render a color census, most frequent color first."""
    lines = []
    for color, count in sorted(colors.items(), key=lambda item: (-item[1], item[0])):
        lines.append(
            f"#{color.r:02x}{color.g:02x}{color.b:02x}{color.a:02x}  {count}"
        )
    return "\n".join(lines) + "\n"


def process(args) -> int:
    """Process a single input file."""
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    start_time = time.time()

    try:
        if args.verbose:
            print(f"Loading: {input_path}")

        sprite = load_sprite(args)

        if args.verbose:
            print(f"Sprite size: {sprite.width}x{sprite.height}, "
                  f"{sprite.populated_count} pixels")

        colors = sprite.get_colors()

        if args.stats or args.verbose:
            print("\nColors:")
            print(format_census(colors), end="")

        if args.report:
            write_file(args.report, format_census(colors))
            if args.verbose:
                print(f"Report written: {args.report}")

        if args.output:
            output_path = Path(args.output).with_suffix(".png")
            if args.board:
                board_w, board_h = args.board
                board = np.zeros((board_h, board_w, 4), dtype=np.uint8)
                sprite.draw_on_board(args.offset[0], args.offset[1], board)
                image = Image.fromarray(board)
            else:
                image = sprite.to_image()
            image.save(output_path)
            if args.verbose:
                print(f"Exported: {output_path}")

        elapsed = time.time() - start_time
        if args.verbose:
            print(f"\nCompleted in {elapsed:.2f}s")

        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    return process(args)


if __name__ == "__main__":
    sys.exit(main())
