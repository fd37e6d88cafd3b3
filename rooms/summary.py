"""
Per-room statistics of a labeled grid.
"""

from dataclasses import dataclass

import numpy as np

from localtypes import WALL_MARKER, Box, Coord, LabeledGrid, Palette, RegionId
from utils.grid import check_rectangular

from .labeling import region_symbol
from .palette import ColorAssignment


@dataclass(frozen=True)
class RegionSummary:
    """Size, extent and color slot of one room."""

    region_id: RegionId
    symbol: str
    area: int
    box: Box
    palette_index: int


def labeled_grid_to_array(labeled: LabeledGrid) -> np.ndarray:
    """Labeled grid as a (height, width) integer array, walls at WALL_MARKER."""
    check_rectangular(labeled)
    return np.array(labeled, dtype=np.int64)


def summarize(labeled: LabeledGrid, palette: Palette) -> tuple[RegionSummary, ...]:
    """
    Summarize every room of a labeled grid, in the order render meets them.

    Palette indices come from the same row-major scan as render, so the
    legend matches the drawn colors whatever the room identities are.
    """
    assignment = ColorAssignment(palette)
    labels = labeled_grid_to_array(labeled)

    # Row-major scan, like render
    for region_id in labels[labels != WALL_MARKER]:
        assignment.index_of(int(region_id))

    ids, areas = np.unique(labels, return_counts=True)
    area_of = dict(zip(ids.tolist(), areas.tolist()))

    summaries = []
    for region_id, palette_index in assignment.items():
        rows, cols = np.nonzero(labels == region_id)
        box = (
            Coord(int(cols.min()), int(rows.min())),
            Coord(int(cols.max()), int(rows.max())),
        )
        summaries.append(
            RegionSummary(
                region_id=region_id,
                symbol=region_symbol(region_id),
                area=area_of[region_id],
                box=box,
                palette_index=palette_index,
            )
        )
    return tuple(summaries)
