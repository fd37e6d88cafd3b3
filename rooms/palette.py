"""
Palette rendering of labeled room grids.

Each room gets one background color, walls stay uncolored. Colors are
handed out in the order rooms are first met while scanning the labeled grid
row-major, cycling through the palette once rooms outnumber colors: the
k-th room met gets palette[k mod len(palette)], whatever its identity.
"""

import logging
from collections.abc import Iterator

from constants import OPEN_GLYPH, WALL_GLYPH
from localtypes import WALL_MARKER, Cell, CellGrid, LabeledGrid, Palette, RegionId
from utils.grid import GridOperations, InvalidInputError, check_rectangular
from utils.tui import colorize

logger = logging.getLogger(__name__)


def check_palette(palette: Palette) -> None:
    if not palette:
        raise InvalidInputError("The palette needs at least one color")


class ColorAssignment:
    """
    Memoized mapping from room identity to palette entry.

    A room is assigned the next palette index the first time it is looked up.
    Lives for the duration of a single render.
    """

    def __init__(self, palette: Palette) -> None:
        check_palette(palette)
        self._palette = palette
        self._index_of: dict[RegionId, int] = {}

    def index_of(self, region_id: RegionId) -> int:
        index = self._index_of.get(region_id)
        if index is None:
            index = len(self._index_of) % len(self._palette)
            self._index_of[region_id] = index
            logger.debug(f"Room {region_id} assigned color n°{index}")
        return index

    def color_of(self, region_id: RegionId) -> str:
        return self._palette[self.index_of(region_id)]

    def items(self) -> Iterator[tuple[RegionId, int]]:
        """Assigned (room, palette index) pairs, in assignment order."""
        return iter(self._index_of.items())

    def __len__(self) -> int:
        return len(self._index_of)

    def __contains__(self, region_id: object) -> bool:
        return region_id in self._index_of


def render(labeled: LabeledGrid, palette: Palette) -> list[str]:
    """
    Render a labeled grid as terminal lines, one per grid row.

    Walls become a bare wall glyph, open cells a space wrapped in the color
    of their room and a reset sequence.
    """
    check_palette(palette)
    check_rectangular(labeled)
    assignment = ColorAssignment(palette)

    lines = []
    for ids in labeled:
        line = "".join(
            WALL_GLYPH
            if region_id == WALL_MARKER
            else colorize(OPEN_GLYPH, assignment.color_of(region_id))
            for region_id in ids
        )
        lines.append(line)

    logger.debug(f"Rendered {len(lines)} lines with {len(assignment)} room colors")
    return lines


def render_rows(grid: CellGrid, palette: Palette) -> list[str]:
    """
    Render a grid with one color per row instead of one per room.

    Open cells of row i are painted with palette[i mod len(palette)]. Rooms
    are not computed, so a room spanning several rows shows several colors.
    """
    check_palette(palette)
    GridOperations.validate(grid)

    lines = []
    for row, cells in enumerate(grid):
        color = palette[row % len(palette)]
        lines.append(
            "".join(
                WALL_GLYPH if cell is Cell.WALL else colorize(OPEN_GLYPH, color)
                for cell in cells
            )
        )
    return lines
