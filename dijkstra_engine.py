"""
Heap-based DijkstraEngine implementation for pathsearch.

Uses MinPriorityQueue (heapq) to compute single-source shortest paths over any
Graph implementation that satisfies the Graph interface, and repeats that per
origin for all-pairs costs.
"""

from typing import List, Optional, Tuple
import logging
import math

from algorithms import DijkstraEngine
from distances import DistanceMatrix, DistanceTable, PredecessorTable, to_table
from graph import Graph, check_node, validate_non_negative
from priority_queue import MinPriorityQueue

logger = logging.getLogger(__name__)


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap with lazy deletion.

    Complexity:
        O(E log V) per source; all-pairs is n independent runs, O(n E log V).
    """

    def shortest_path_costs(self, graph: Graph, source: int) -> DistanceTable:
        """
        Compute only the cost table from source.
        """
        dist, _ = self._run(graph, source)
        return to_table(dist)

    def shortest_paths(self, graph: Graph, source: int) -> Tuple[DistanceTable, PredecessorTable]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        prev[v] is overwritten only on a strict improvement of dist[v], so the
        predecessors always form a tree rooted at the source. The source
        itself and unreachable nodes have no parent.
        """
        dist, prev = self._run(graph, source)
        return to_table(dist), prev

    def all_pairs_costs(self, graph: Graph) -> DistanceMatrix:
        """
        Run single-source Dijkstra once per origin; each run owns fresh state.
        """
        return [self.shortest_path_costs(graph, origin) for origin in graph.nodes()]

    def _run(self, graph: Graph, source: int) -> Tuple[List[float], PredecessorTable]:
        check_node(graph, source)
        validate_non_negative(graph)

        n = graph.node_count()
        dist: List[float] = [math.inf] * n
        prev: PredecessorTable = [None] * n
        visited: List[bool] = [False] * n

        dist[source] = 0
        pq: MinPriorityQueue[int] = MinPriorityQueue()
        pq.push(source, 0)

        while pq:
            u, _ = pq.pop()

            # Stale duplicate: u was already finalised at a lower cost.
            if visited[u]:
                continue
            visited[u] = True

            for v, w in graph.outgoing(u):
                alt = dist[u] + w
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u
                    pq.push(v, alt)

        logger.debug(
            "dijkstra from %d: %d of %d nodes reachable", source, sum(visited), n
        )
        return dist, prev


def reconstruct_node_path(prev: PredecessorTable, source: int, target: int) -> Optional[List[int]]:
    """
    Walk predecessors back from target to source.

    Returns the node sequence source..target, or None if target was not
    reached from source.
    """
    if target == source:
        return [source]
    if prev[target] is None:
        return None

    path = [target]
    node = target
    while node != source:
        parent = prev[node]
        if parent is None:
            return None
        path.append(parent)
        node = parent
    path.reverse()
    return path


_DEFAULT_ENGINE = SimpleDijkstraEngine()


def dijkstra(graph: Graph, start: int) -> DistanceTable:
    """Shortest distances from start to every node (None when unreachable)."""
    return _DEFAULT_ENGINE.shortest_path_costs(graph, start)


def dijkstra_all(graph: Graph) -> DistanceMatrix:
    """All-pairs shortest distances via repeated single-source Dijkstra."""
    return _DEFAULT_ENGINE.all_pairs_costs(graph)
