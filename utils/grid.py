r"""
Grid Processing Library

Handles the different representations of a room grid and the conversions
between them. Supports functional (text rows, CellGrid) and set-centric
(coordinates) representations of grids.

Operations occurs on two main data format: CellGrid and coordinate lists
    1\ GridOperations
    2\ CoordsOperations
"""

from collections.abc import Sequence

from localtypes import (
    Cell,
    CellGrid,
    Coord,
    Proportions,
)


class InvalidInputError(ValueError):
    """Raised when a grid or a palette violates a precondition."""

    pass


# helpers
def matrix_to_proportions(matrix: Sequence[Sequence]) -> Proportions:
    height, width = len(matrix), len(matrix[0])
    return Proportions(width, height)


def check_rectangular(matrix: Sequence[Sequence]) -> Proportions:
    """
    Return the proportions of a matrix, failing on empty or ragged ones.

    Rows are never truncated or padded: a single row of the wrong length
    rejects the whole matrix.
    """
    if not matrix or not matrix[0]:
        raise InvalidInputError("A grid needs at least one row and one column")

    width = len(matrix[0])
    for row, cells in enumerate(matrix):
        if len(cells) != width:
            raise InvalidInputError(
                f"Row {row} has {len(cells)} cells, expected {width}"
            )
    return Proportions(width, len(matrix))


def check_cell_chars(wall_char: str, open_char: str) -> None:
    """Wall and open characters must be two distinct single characters."""
    for name, char in (("Wall", wall_char), ("Open", open_char)):
        if len(char) != 1:
            raise InvalidInputError(
                f"{name} character must be a single character, got {char!r}"
            )
    if wall_char == open_char:
        raise InvalidInputError(
            f"Wall and open characters must differ, both are {wall_char!r}"
        )


# Grid Base Operations
class GridOperations:
    """Basic grid operations and constructors"""

    # Constructors
    @staticmethod
    def from_lines(
        lines: Sequence[str],
        wall_char: str = Cell.WALL.value,
        open_char: str = Cell.OPEN.value,
    ) -> CellGrid:
        """
        Parse text rows into a grid, one character per cell.

        Any character other than wall_char and open_char is rejected.
        """
        check_cell_chars(wall_char, open_char)
        check_rectangular(lines)

        cells = {wall_char: Cell.WALL, open_char: Cell.OPEN}
        grid = []
        for row, line in enumerate(lines):
            try:
                grid.append([cells[char] for char in line])
            except KeyError as error:
                raise InvalidInputError(
                    f"Unknown cell character {error.args[0]!r} in row {row}"
                ) from error
        return grid

    # Operations
    @staticmethod
    def proportions(grid: CellGrid) -> Proportions:
        return matrix_to_proportions(grid)

    @staticmethod
    def validate(grid: CellGrid) -> Proportions:
        """Check the grid is rectangular and made of cells only."""
        proportions = check_rectangular(grid)
        for row, cells in enumerate(grid):
            for col, cell in enumerate(cells):
                if not isinstance(cell, Cell):
                    raise InvalidInputError(
                        f"Invalid cell {cell!r} at {Coord(col, row)}"
                    )
        return proportions

    @staticmethod
    def to_lines(grid: CellGrid) -> list[str]:
        return ["".join(cell.value for cell in cells) for cells in grid]


class CoordsOperations:
    """Basic coords operations and constructors"""

    # Constructors
    @staticmethod
    def from_grid(grid: CellGrid) -> list[Coord]:
        """Open coordinates in row-major order: row ascending, then column."""
        width, height = GridOperations.proportions(grid)
        return [
            Coord(col, row)
            for row in range(height)
            for col in range(width)
            if grid[row][col] is Cell.OPEN
        ]


# Constructors as Functors

## lines <> grid
lines_to_grid = GridOperations.from_lines
grid_to_lines = GridOperations.to_lines

## grid > coords
grid_to_open_coords = CoordsOperations.from_grid
