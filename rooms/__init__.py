"""
Room detection and colored rendering.

This package turns a wall/open grid into colored terminal lines:
1. Label the 4-connected rooms of open cells in row-major discovery order
2. Give each room a palette color, in the order rooms are met
3. Render walls as '#' and open cells as colored spaces

Main entry point: colorize_rooms()
"""

from localtypes import CellGrid, Palette

from .labeling import (
    count_regions,
    grid_to_regions,
    label,
    labeled_grid_to_regions,
    labeled_grid_to_symbols,
    region_symbol,
)
from .palette import (
    ColorAssignment,
    check_palette,
    render,
    render_rows,
)
from .summary import (
    RegionSummary,
    labeled_grid_to_array,
    summarize,
)


def colorize_rooms(grid: CellGrid, palette: Palette) -> list[str]:
    """
    Label the rooms of a grid and render them, one line per grid row.

    Pipeline:
    1. label: CellGrid -> LabeledGrid
    2. render: LabeledGrid -> colored lines
    """
    check_palette(palette)
    return render(label(grid), palette)


__all__ = [
    # Labeling
    "count_regions",
    "grid_to_regions",
    "label",
    "labeled_grid_to_regions",
    "labeled_grid_to_symbols",
    "region_symbol",
    # Rendering
    "ColorAssignment",
    "check_palette",
    "render",
    "render_rows",
    # Summary
    "RegionSummary",
    "labeled_grid_to_array",
    "summarize",
    # Pipeline
    "colorize_rooms",
]
