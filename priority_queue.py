"""
Min-priority queue shared by the Dijkstra and A* engines.

Built on heapq. There is no decrease-key: when a cheaper cost is found the
caller pushes a fresh entry and the old one stays in the heap. Callers must
discard stale entries on pop (Dijkstra via its visited table, A* via its
closed set).
"""

from typing import Generic, List, Tuple, TypeVar
import heapq
import itertools

T = TypeVar("T")


class MinPriorityQueue(Generic[T]):
    """
    Heap of (priority, sequence, item) entries.

    The sequence number breaks ties in insertion order and means items are
    never compared with each other.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, T]] = []
        self._counter = itertools.count()

    def push(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def pop(self) -> Tuple[T, float]:
        """Remove and return (item, priority) with the lowest priority."""
        if not self._heap:
            raise IndexError("pop from empty priority queue")
        priority, _, item = heapq.heappop(self._heap)
        return item, priority

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
