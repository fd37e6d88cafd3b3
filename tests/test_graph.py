"""Tests for utils/graph.py"""

from utils.graph import flood_fill, nodes_to_connected_components


def path_graph(edges: dict[int, set[int]]):
    def neighbours(node: int) -> set[int]:
        return edges.get(node, set())

    return neighbours


class TestFloodFill:
    def test_collects_reachable_nodes(self):
        graph = path_graph({1: {2}, 2: {1, 3}, 3: {2}, 4: set()})
        seen: set[int] = set()
        assert set(flood_fill(1, graph, seen)) == {1, 2, 3}
        assert seen == {1, 2, 3}

    def test_each_node_visited_once(self):
        graph = path_graph({0: {1, 2}, 1: {0, 2}, 2: {0, 1}})
        component = flood_fill(0, graph, set())
        assert sorted(component) == [0, 1, 2]

    def test_long_chain(self):
        """A chain longer than the recursion limit."""
        size = 50_000

        def chain(node: int) -> list[int]:
            return [n for n in (node - 1, node + 1) if 0 <= n < size]

        assert len(flood_fill(0, chain, set())) == size


class TestNodesToConnectedComponents:
    def test_discovery_order(self):
        graph = path_graph({3: {4}, 4: {3}, 1: {2}, 2: {1}})
        components = nodes_to_connected_components([4, 1, 2, 3, 5], graph)
        assert components == (
            frozenset({3, 4}),
            frozenset({1, 2}),
            frozenset({5}),
        )

    def test_empty(self):
        assert nodes_to_connected_components([], path_graph({})) == ()
