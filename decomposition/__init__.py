"""
General decomposition primitives.

This package provides domain-agnostic primitives for decomposing grids:

**Connectivity** (connectivity.py)
    Defines adjacency relations.
    - tower_neighbors: 4-connectivity (orthogonal only)

**Objects** (objects.py)
    Connected component extraction parameterized by connectivity.
    - extract_connected_components(elements, neighbors) -> components

The room-specific instantiation (walls, open cells, labels) lives in rooms/.
"""

from .connectivity import (
    DIRECTIONS_FREEMAN,
    TOWER,
    CoordNeighborFunc,
    in_bounds,
    make_coord_neighbors,
    tower_neighbors,
)
from .objects import (
    extract_connected_components,
)

__all__ = [
    # Connectivity
    "CoordNeighborFunc",
    "DIRECTIONS_FREEMAN",
    "TOWER",
    "in_bounds",
    "make_coord_neighbors",
    "tower_neighbors",
    # Objects
    "extract_connected_components",
]
