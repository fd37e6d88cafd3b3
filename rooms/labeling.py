"""
Room extraction from wall/open grids.

Partitions the open cells of a grid into rooms: maximal sets of open cells
connected through up, down, left and right steps. Diagonal neighbors are
not adjacent.

Rooms are numbered in discovery order. The grid is scanned row-major
(row ascending, then column ascending) and the first open cell not yet
claimed by a room starts the next one, so the numbering is reproducible
and only depends on the layout of the grid.
"""

import logging
import string

from decomposition import extract_connected_components, tower_neighbors
from localtypes import (
    WALL_MARKER,
    Cell,
    CellGrid,
    Coord,
    LabeledGrid,
    Region,
    RegionId,
)
from utils.grid import GridOperations, check_rectangular, grid_to_open_coords

logger = logging.getLogger(__name__)

ROOM_SYMBOLS = string.ascii_uppercase


def grid_to_regions(grid: CellGrid) -> tuple[Region, ...]:
    """
    Partition the open cells of a grid into 4-connected rooms.

    Returns:
        The rooms in discovery order: the i-th room has RegionId i.
    """
    proportions = GridOperations.validate(grid)
    open_coords = grid_to_open_coords(grid)
    regions = extract_connected_components(open_coords, tower_neighbors(proportions))

    logger.debug(
        f"Found {len(regions)} rooms among {len(open_coords)} open cells "
        f"of a {proportions.width}x{proportions.height} grid"
    )
    return regions


def label(grid: CellGrid) -> LabeledGrid:
    """
    Label every open cell of a grid with the identity of its room.

    Walls keep WALL_MARKER. The input grid is left untouched.

    Example:
        >>> grid = lines_to_grid(["# #", "###", "  #"])
        >>> label(grid)
        [[-1, 0, -1], [-1, -1, -1], [1, 1, -1]]
    """
    regions = grid_to_regions(grid)
    width, height = GridOperations.proportions(grid)

    labeled: LabeledGrid = [[WALL_MARKER] * width for _ in range(height)]
    for region_id, region in enumerate(regions):
        logger.debug(f"Room {region_symbol(region_id)} ({region_id}): {len(region)} cells")
        for col, row in region:
            labeled[row][col] = region_id

    return labeled


def labeled_grid_to_regions(labeled: LabeledGrid) -> tuple[Region, ...]:
    """Recover the rooms of a labeled grid, indexed by RegionId."""
    check_rectangular(labeled)
    coords_by_id: dict[RegionId, set[Coord]] = {}
    for row, ids in enumerate(labeled):
        for col, region_id in enumerate(ids):
            if region_id != WALL_MARKER:
                coords_by_id.setdefault(region_id, set()).add(Coord(col, row))

    return tuple(frozenset(coords_by_id[i]) for i in sorted(coords_by_id))


def count_regions(labeled: LabeledGrid) -> int:
    return len({region_id for ids in labeled for region_id in ids if region_id != WALL_MARKER})


def region_symbol(region_id: RegionId) -> str:
    """Single letter naming a room: A to Z, then back to A."""
    return ROOM_SYMBOLS[region_id % len(ROOM_SYMBOLS)]


def labeled_grid_to_symbols(labeled: LabeledGrid) -> list[str]:
    """
    Text view of a labeled grid: walls as '#', open cells as their room letter.
    """
    return [
        "".join(
            Cell.WALL.value if region_id == WALL_MARKER else region_symbol(region_id)
            for region_id in ids
        )
        for ids in labeled
    ]
