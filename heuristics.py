"""
Distance estimates for grid search.
"""

from grid import Cell


def manhattan(a: Cell, b: Cell) -> int:
    """
    |dr| + |dc|.

    Admissible and consistent for 4-directional unit-cost moves.
    """
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
