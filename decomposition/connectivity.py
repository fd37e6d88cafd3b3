"""
Connectivity definitions for decomposition.

A connectivity defines which cells are "neighbors" of each other,
enabling connected component extraction. Rooms only use the four
orthogonal directions:
- TOWER: left, up, right, down -> 4-connectivity
"""

from collections.abc import Sequence
from typing import Callable, Final, Literal

from localtypes import Coord, Proportions

Tower = Literal[0, 1, 2, 3]

TOWER: Final[list[Tower]] = [0, 1, 2, 3]

DIRECTIONS_FREEMAN: Final[dict[Tower, Coord]] = {
    0: Coord(-1, 0),  # left
    1: Coord(0, -1),  # up
    2: Coord(1, 0),  # right
    3: Coord(0, 1),  # down
}

# A neighbor function takes a coordinate and returns its neighbors
CoordNeighborFunc = Callable[[Coord], tuple[Coord, ...]]


def in_bounds(coord: Coord, proportions: Proportions) -> bool:
    col, row = coord
    width, height = proportions
    return 0 <= col < width and 0 <= row < height


def make_coord_neighbors(
    directions: Sequence[Tower], proportions: Proportions
) -> CoordNeighborFunc:
    """
    Create a neighbor function from a set of movement directions.

    The returned function computes which coordinates are reachable
    from a given coordinate by moving one step in any of the specified
    directions, without leaving a grid of the given proportions.

    Args:
        directions: Movement directions (keys of DIRECTIONS_FREEMAN).
        proportions: Width and height of the grid.

    Returns:
        A function coord -> neighbors within the grid.

    Example:
        >>> neighbors = make_coord_neighbors(TOWER, Proportions(2, 2))
        >>> neighbors(Coord(0, 0))
        (Coord(col=1, row=0), Coord(col=0, row=1))
    """
    deltas: tuple[Coord, ...] = tuple(DIRECTIONS_FREEMAN[d] for d in directions)

    def neighbors(coord: Coord) -> tuple[Coord, ...]:
        col, row = coord
        adjacent = (Coord(col + delta.col, row + delta.row) for delta in deltas)
        return tuple(c for c in adjacent if in_bounds(c, proportions))

    return neighbors


def tower_neighbors(proportions: Proportions) -> CoordNeighborFunc:
    """4-connectivity bounded to a grid of the given proportions."""
    return make_coord_neighbors(TOWER, proportions)
