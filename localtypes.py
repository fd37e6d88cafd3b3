"""
Type definitions for room grid processing.

This module contains all custom types used throughout the room colorizer,
organized by their primary use cases.

Coordinate Convention:
    All coordinates use (col, row) order, where:
    - col: x-axis, increases rightward (0 to width-1)
    - row: y-axis, increases downward (0 to height-1)
    Grids themselves are indexed as grid[row][col].
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import Final, NamedTuple


# Cell types
class Cell(StrEnum):
    """A grid cell. Values are the glyphs of the reference grid."""

    WALL = "#"
    OPEN = " "


# Grid representations
type CellGrid = list[list[Cell]]  # Functional: grid[row][col] -> cell

# Region identities
type RegionId = int

WALL_MARKER: Final[int] = -1
"""Label held by wall positions in a LabeledGrid. Never a valid RegionId."""

type LabeledGrid = list[list[int]]  # grid[row][col] -> RegionId | WALL_MARKER


# Coordinate systems
class Coord(NamedTuple):
    col: int
    row: int


type Region = frozenset[Coord]  # Maximal 4-connected set of open coordinates
type Box = tuple[Coord, Coord]  # (top_left, bottom_right) corners


class Proportions(NamedTuple):
    width: int
    height: int


# Display
type Palette = Sequence[str]  # Ordered color tokens, cycled over regions


__all__ = [
    # Cells and grids
    "Cell",
    "CellGrid",
    # Labels
    "RegionId",
    "WALL_MARKER",
    "LabeledGrid",
    # Coordinate types
    "Coord",
    "Region",
    "Box",
    "Proportions",
    # Display
    "Palette",
]
