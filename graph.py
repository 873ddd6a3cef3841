"""
Directed, weighted graph abstraction for pathsearch.

Nodes are dense integer ids in [0, n).
Edges are directed: u -> v with a numeric weight.
"""

from abc import ABC, abstractmethod
import logging
from typing import Iterator, Sequence, Tuple

from errors import InvalidGraphError, OutOfRangeError

logger = logging.getLogger(__name__)

Edge = Tuple[int, float]


class Graph(ABC):
    """Directed, weighted graph over dense integer node ids."""

    @abstractmethod
    def node_count(self) -> int:
        """Number of nodes n; valid ids are 0..n-1."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, node: int) -> Sequence[Edge]:
        """
        Outgoing neighbours and edge weights for a given node, in insertion order.

        Returns: list[(neighbor, weight)]
        """
        raise NotImplementedError

    def nodes(self) -> range:
        return range(self.node_count())

    def edges(self) -> Iterator[Tuple[int, int, float]]:
        """Iterate every edge as (src, dst, weight)."""
        for u in self.nodes():
            for v, w in self.outgoing(u):
                yield u, v, w


def check_node(graph: Graph, node: int) -> None:
    """Raise OutOfRangeError unless 0 <= node < n."""
    n = graph.node_count()
    if not 0 <= node < n:
        raise OutOfRangeError(node, n)


def validate_non_negative(graph: Graph) -> None:
    """
    Reject graphs with any negative edge weight.

    The whole graph is scanned, not just the part reachable from a source:
    a negative edge anywhere makes the graph unusable for Dijkstra.
    """
    for u, v, w in graph.edges():
        if not w >= 0:
            logger.warning("rejecting graph: edge %d -> %d has weight %s", u, v, w)
            raise InvalidGraphError(u, v, w)
