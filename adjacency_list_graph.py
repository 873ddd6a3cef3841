"""
Concrete directed, weighted graph implementation for pathsearch.

Implements the Graph interface using a list-of-lists adjacency representation.
"""

from typing import Iterable, List, Sequence, Tuple

from errors import OutOfRangeError
from graph import Edge, Graph


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by adj[u] = [(v, weight), ...].
    """

    def __init__(self, node_count: int) -> None:
        if node_count < 0:
            raise ValueError("node_count must be non-negative")
        self._adj: List[List[Edge]] = [[] for _ in range(node_count)]

    @classmethod
    def from_edges(
        cls,
        node_count: int,
        edges: Iterable[Tuple[int, int, float]],
        undirected: bool = False,
    ) -> "AdjacencyListGraph":
        graph = cls(node_count)
        for src, dst, weight in edges:
            if undirected:
                graph.add_undirected_edge(src, dst, weight)
            else:
                graph.add_edge(src, dst, weight)
        return graph

    @classmethod
    def from_adjacency(cls, adjacency: Sequence[Sequence[Edge]]) -> "AdjacencyListGraph":
        """Build from adjacency[u] = [(v, w), ...]; node count is len(adjacency)."""
        graph = cls(len(adjacency))
        for src, neighbours in enumerate(adjacency):
            for dst, weight in neighbours:
                graph.add_edge(src, dst, weight)
        return graph

    # --- Mutation API (build time only, not part of Graph interface) ---------

    def add_edge(self, src: int, dst: int, weight: float) -> None:
        """
        Append a directed edge src -> dst.

        Weights are not validated here; the search engines reject negative
        weights before relaxing anything.
        """
        self._check(src)
        self._check(dst)
        self._adj[src].append((dst, weight))

    def add_undirected_edge(self, a: int, b: int, weight: float) -> None:
        """Add a -> b and b -> a with the same weight."""
        self.add_edge(a, b, weight)
        self.add_edge(b, a, weight)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adj):
            raise OutOfRangeError(node, len(self._adj))

    # --- Graph interface -----------------------------------------------------

    def node_count(self) -> int:
        return len(self._adj)

    def outgoing(self, node: int) -> Sequence[Edge]:
        self._check(node)
        return list(self._adj[node])
