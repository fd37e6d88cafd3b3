import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from localtypes import LabeledGrid, Palette
from rooms import RegionSummary, render
from utils.tui import colorize


def write_lines(lines: Iterable[str], stream: TextIO | None = None) -> None:
    """Write rendered lines to a text stream, one per grid row, in order."""
    stream = sys.stdout if stream is None else stream
    for line in lines:
        stream.write(line + "\n")
    stream.flush()


def print_lines_rich(lines: Sequence[str], console: Console | None = None) -> None:
    """
    Print rendered lines through a rich console.

    The ANSI sequences are parsed back into styles, so rich can downgrade
    them for limited terminals or drop them when output is not a terminal.
    """
    console = Console(highlight=False) if console is None else console
    for line in lines:
        console.print(Text.from_ansi(line), soft_wrap=True)


def display_labeled_grid(
    labeled: LabeledGrid, palette: Palette, stream: TextIO | None = None
) -> None:
    write_lines(render(labeled, palette), stream)


def regions_to_table(summaries: Sequence[RegionSummary], palette: Palette) -> Table:
    """Legend of the rooms: letter, color swatch, area and bounding box."""
    table = Table(title=f"{len(summaries)} rooms")
    table.add_column("Room", justify="center")
    table.add_column("Color", justify="center")
    table.add_column("Area", justify="right")
    table.add_column("Box (col, row)")

    for summary in summaries:
        (col_min, row_min), (col_max, row_max) = summary.box
        table.add_row(
            summary.symbol,
            Text.from_ansi(colorize("   ", palette[summary.palette_index])),
            str(summary.area),
            f"({col_min}, {row_min}) - ({col_max}, {row_max})",
        )
    return table


def display_regions(
    summaries: Sequence[RegionSummary], palette: Palette, console: Console | None = None
) -> None:
    console = Console() if console is None else console
    console.print(regions_to_table(summaries, palette))
