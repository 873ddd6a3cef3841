"""
Exceptions raised by the search engines.

Absence of a path is never an error: Dijkstra reports unreachable nodes as
None in the distance table and A* returns NoPathFound.
"""


class OutOfRangeError(IndexError):
    """A node id lies outside the dense range [0, n)."""

    def __init__(self, node: int, node_count: int) -> None:
        super().__init__(f"Node {node} is out of range for a graph with {node_count} nodes.")
        self.node = node
        self.node_count = node_count


class InvalidGraphError(ValueError):
    """The graph contains a negative edge weight."""

    def __init__(self, src: int, dst: int, weight: float) -> None:
        super().__init__(
            f"Edge {src} -> {dst} has negative weight {weight}; Dijkstra requires non-negative weights."
        )
        self.src = src
        self.dst = dst
        self.weight = weight


class BrokenParentChainError(RuntimeError):
    """Path reconstruction hit a cell with no parent before reaching the start."""
