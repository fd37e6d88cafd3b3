"""
Functions related to graphs
"""

from collections.abc import Iterable
from typing import Callable, TypeVar

T = TypeVar("T")


def flood_fill(start: T, node_to_neighbours: Callable[[T], Iterable[T]], seen: set[T]) -> list[T]:
    """
    Collect every node reachable from start, marking them in seen.

    Depth-first traversal driven by an explicit stack, so the component size
    is bounded by memory rather than by the interpreter's recursion limit.

    Args:
        start: Node the traversal starts from. Must not be in seen.
        node_to_neighbours: Function returning the nodes adjacent to a given node.
        seen: Nodes already claimed by a component. Updated in place.

    Returns:
        list[T]: nodes of the component, in visiting order
    """
    component = []
    stack = [start]
    seen.add(start)

    while stack:
        current = stack.pop()
        component.append(current)

        for neighbour in node_to_neighbours(current):
            # Each node is pushed at most once
            if neighbour not in seen:
                seen.add(neighbour)
                stack.append(neighbour)

    return component


def nodes_to_connected_components(
    nodes: Iterable[T], node_to_neighbours: Callable[[T], Iterable[T]]
) -> tuple[frozenset[T], ...]:
    """
    Extract connected components from an undirected graph structure.

    Components are returned in discovery order: a component comes before
    another if its first node in the iteration order of nodes does.

    Args:
        nodes: nodes of the graph, in the order they should be scanned.
        node_to_neighbours: Function returning the nodes a given node points to.

    Returns:
        tuple[frozenset[T], ...]: connected components of the graph
    """

    seen: set[T] = set()
    components = []

    # Guarantees all the nodes are at least visited once
    for node in nodes:
        # Avoid visiting an already seen component
        if node in seen:
            continue

        components.append(frozenset(flood_fill(node, node_to_neighbours, seen)))
    return tuple(components)
