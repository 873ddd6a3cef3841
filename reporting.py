"""
Plain-text rendering of search results.
"""

from typing import List

from astar_engine import PathFound, SearchResult
from distances import DistanceMatrix, format_distance

NO_PATH_MESSAGE = "No path found"


def format_all_pairs(matrix: DistanceMatrix) -> str:
    """
    One line per ordered pair i != j, with 1-based node labels.

    Unreachable pairs render as the infinity symbol.
    """
    lines: List[str] = ["Dijkstra:"]
    for i, row in enumerate(matrix):
        for j, d in enumerate(row):
            if i == j:
                continue
            lines.append(f"node {i + 1} to node {j + 1} : {format_distance(d)}")
    return "\n".join(lines)


def format_search_result(result: SearchResult) -> str:
    if isinstance(result, PathFound):
        return result.moves
    return NO_PATH_MESSAGE
