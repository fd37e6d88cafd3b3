"""
Generic object extraction via connected components.

Objects are connected sets of elements. What constitutes "connected"
is determined by the neighbor function (connectivity).

This module provides object extraction that can work with any element
type and connectivity definition, as long as the elements come in a
fixed scan order.
"""

from collections.abc import Iterable, Sequence
from typing import Callable, TypeVar

from utils.graph import nodes_to_connected_components

E = TypeVar("E")  # Element type


def extract_connected_components(
    elements: Sequence[E],
    neighbors: Callable[[E], Iterable[E]],
) -> tuple[frozenset[E], ...]:
    """
    Extract connected components from elements using given connectivity.

    The specific notion of "connected" is defined by the neighbors function,
    restricted here to the given elements.

    Args:
        elements: Elements to partition, in scan order.
        neighbors: Function returning the neighbors of an element.

    Returns:
        Tuple of connected components (each a frozenset of elements),
        ordered by the position of their first element in the scan.
    """
    if not elements:
        return ()

    universe = frozenset(elements)

    def node_to_neighbours(node: E) -> Iterable[E]:
        return (neighbor for neighbor in neighbors(node) if neighbor in universe)

    return nodes_to_connected_components(elements, node_to_neighbours)
