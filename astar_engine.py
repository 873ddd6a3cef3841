"""
A* search over a square walkability grid.

Moves are unit-cost steps up, down, left or right. The result is either the
move string from start to goal or NoPathFound; the two are distinct types.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Union
import logging
import math

from algorithms import GridSearchEngine
from errors import BrokenParentChainError
from grid import Cell, Grid
from heuristics import manhattan
from priority_queue import MinPriorityQueue

logger = logging.getLogger(__name__)

Heuristic = Callable[[Cell, Cell], float]


class Move(Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"


def move_between(parent: Cell, cell: Cell) -> Move:
    """
    The move that steps from parent to cell.

    Raises ValueError if the two cells are not 4-adjacent.
    """
    dr = cell[0] - parent[0]
    dc = cell[1] - parent[1]
    if (dr, dc) == (-1, 0):
        return Move.UP
    if (dr, dc) == (1, 0):
        return Move.DOWN
    if (dr, dc) == (0, -1):
        return Move.LEFT
    if (dr, dc) == (0, 1):
        return Move.RIGHT
    raise ValueError(f"Cells {parent} and {cell} are not adjacent")


@dataclass(frozen=True)
class PathFound:
    moves: str
    cells: List[Cell] = field(default_factory=list, compare=False)

    @property
    def cost(self) -> int:
        return len(self.moves)


@dataclass(frozen=True)
class NoPathFound:
    start: Cell
    goal: Cell


SearchResult = Union[PathFound, NoPathFound]


def reconstruct_moves(parents: List[Optional[Cell]], grid: Grid, start: Cell, goal: Cell) -> PathFound:
    """
    Walk the parent table back from goal to start and prepend each move.

    parents is indexed by linear cell id. Hitting a cell without a parent
    before reaching start means the table is corrupt.
    """
    moves: List[str] = []
    cells: List[Cell] = [goal]
    current = goal
    for _ in range(grid.size * grid.size):
        if current == start:
            break
        parent = parents[grid.to_id(current)]
        if parent is None:
            raise BrokenParentChainError(f"Cell {current} has no parent on the way back to {start}")
        moves.append(move_between(parent, current).value)
        cells.append(parent)
        current = parent
    else:
        raise BrokenParentChainError(f"Parent chain from {goal} does not reach {start}")

    moves.reverse()
    cells.reverse()
    return PathFound("".join(moves), cells)


class AStarEngine(GridSearchEngine):
    """
    Best-first search keyed by cost-so-far + heuristic.

    With a consistent heuristic the first time a cell is popped its cost is
    final, so later (stale) entries for it are skipped.
    """

    def __init__(self, heuristic: Heuristic = manhattan) -> None:
        self.heuristic = heuristic

    def search(self, grid: Grid, start: Cell, goal: Cell) -> SearchResult:
        start, goal = tuple(start), tuple(goal)
        # Invalid endpoints are the caller's problem; report them as unreachable.
        if not (grid.is_walkable(start) and grid.is_walkable(goal)):
            logger.debug("a* %s -> %s: endpoint blocked or out of bounds", start, goal)
            return NoPathFound(start, goal)

        n_cells = grid.size * grid.size
        cost_so_far: List[float] = [math.inf] * n_cells
        parents: List[Optional[Cell]] = [None] * n_cells
        closed: List[bool] = [False] * n_cells

        start_id = grid.to_id(start)
        goal_id = grid.to_id(goal)
        cost_so_far[start_id] = 0

        pq: MinPriorityQueue[int] = MinPriorityQueue()
        pq.push(start_id, self.heuristic(start, goal))
        expanded = 0

        while pq:
            current_id, _ = pq.pop()
            if current_id == goal_id:
                logger.debug("a* %s -> %s: goal reached after %d expansions", start, goal, expanded)
                return reconstruct_moves(parents, grid, start, goal)

            if closed[current_id]:
                continue
            closed[current_id] = True
            expanded += 1

            current = grid.from_id(current_id)
            for nxt in grid.neighbors(current):
                nxt_id = grid.to_id(nxt)
                new_cost = cost_so_far[current_id] + 1
                if new_cost < cost_so_far[nxt_id]:
                    cost_so_far[nxt_id] = new_cost
                    parents[nxt_id] = current
                    pq.push(nxt_id, new_cost + self.heuristic(nxt, goal))

        logger.debug("a* %s -> %s: no path after %d expansions", start, goal, expanded)
        return NoPathFound(start, goal)


def a_star(grid: Grid, start: Cell, goal: Cell) -> SearchResult:
    """Shortest 4-directional path from start to goal using the Manhattan heuristic."""
    return AStarEngine().search(grid, start, goal)
