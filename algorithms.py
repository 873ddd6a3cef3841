"""
Algorithm interfaces for pathsearch.

Keeps the search engines separate from graph/grid construction and reporting.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Tuple

from distances import DistanceMatrix, DistanceTable, PredecessorTable
from graph import Graph
from grid import Cell, Grid

if TYPE_CHECKING:
    from astar_engine import SearchResult


class DijkstraEngine(ABC):
    """
    Interface for shortest-path computation over non-negative weighted graphs.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: int) -> DistanceTable:
        """
        Compute shortest-path costs from source to every node.

        Returns:
            List of length n; entry v is the cost source -> v, or None if v
            is unreachable.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(self, graph: Graph, source: int) -> Tuple[DistanceTable, PredecessorTable]:
        """
        Compute shortest-path costs plus the predecessor of each node.

        Returns:
            (dist, prev) where prev[v] is the node before v on a shortest
            path, or None for the source and unreachable nodes.
        """
        raise NotImplementedError

    @abstractmethod
    def all_pairs_costs(self, graph: Graph) -> DistanceMatrix:
        """
        Compute an n x n matrix where [i][j] is the cost i -> j (None if unreachable).
        """
        raise NotImplementedError


class GridSearchEngine(ABC):
    """
    Interface for point-to-point search over a walkability grid.
    """

    @abstractmethod
    def search(self, grid: Grid, start: Cell, goal: Cell) -> "SearchResult":
        """
        Find a shortest sequence of unit moves from start to goal.

        Returns:
            PathFound with the move string, or NoPathFound.
        """
        raise NotImplementedError
