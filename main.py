"""
Color the rooms of a wall/open grid in the terminal.

Usage:
    python main.py                      # reference grid
    python main.py plan.txt --legend    # grid drawn as text
    python main.py plan.json --palette arc --debug
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from constants import DEFAULT_OPEN_CHAR, DEFAULT_PALETTE, DEFAULT_WALL_CHAR, PALETTES
from localtypes import Palette
from rooms import label, labeled_grid_to_symbols, render, render_rows, summarize
from utils.display import display_regions, print_lines_rich, write_lines
from utils.grid import InvalidInputError
from utils.loader import load_grid
from utils.tui import supports_true_color

logger = logging.getLogger(__name__)


def select_palette(name: str) -> Palette:
    """Palette by name, 'auto' picks 24-bit colors when the terminal has them."""
    if name == "auto":
        name = "arc" if supports_true_color() else "ansi"
        logger.debug(f"Auto palette resolved to {name}")
    return PALETTES[name]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Color the rooms of a grid")
    parser.add_argument(
        "grid",
        nargs="?",
        default=None,
        help="Grid file (.json list of rows, or text); defaults to the reference grid",
    )
    parser.add_argument(
        "--palette",
        choices=[*PALETTES, "auto"],
        default=DEFAULT_PALETTE,
        help="Background colors to cycle through",
    )
    parser.add_argument(
        "--mode",
        choices=["rooms", "rows"],
        default="rooms",
        help="One color per room, or one color per row",
    )
    parser.add_argument("--wall-char", default=DEFAULT_WALL_CHAR, help="Wall character")
    parser.add_argument("--open-char", default=DEFAULT_OPEN_CHAR, help="Open character")
    parser.add_argument("--legend", action="store_true", help="Print a table of the rooms")
    parser.add_argument(
        "--symbols", action="store_true", help="Print the rooms as letters before the colors"
    )
    parser.add_argument("--rich", action="store_true", help="Print through a rich console")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.mode == "rows" and (args.symbols or args.legend):
        parser.error("--symbols and --legend need rooms, not available with --mode rows")

    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s | %(message)s",
    )
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    palette = select_palette(args.palette)

    try:
        grid = load_grid(args.grid, args.wall_char, args.open_char)
        if args.mode == "rows":
            labeled = None
            lines = render_rows(grid, palette)
        else:
            labeled = label(grid)
            lines = render(labeled, palette)
    except (InvalidInputError, OSError) as error:
        logger.error(f"{error}")
        return 1

    if labeled is not None and args.symbols:
        write_lines(labeled_grid_to_symbols(labeled))

    if args.rich:
        print_lines_rich(lines)
    else:
        write_lines(lines)

    if labeled is not None:
        summaries = summarize(labeled, palette)
        logger.info(f"{len(summaries)} rooms found")
        if args.legend:
            display_regions(summaries, palette)

    return 0


if __name__ == "__main__":
    sys.exit(main())
