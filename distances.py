"""
Distance table types.

An unreachable node is None, never a large integer that could be mistaken
for a real distance.
"""

from typing import List, Optional
import math

Distance = Optional[float]
DistanceTable = List[Distance]
DistanceMatrix = List[DistanceTable]
PredecessorTable = List[Optional[int]]

INFINITY_SYMBOL = "∞"


def is_reachable(distance: Distance) -> bool:
    return distance is not None


def format_distance(distance: Distance) -> str:
    if distance is None:
        return INFINITY_SYMBOL
    if isinstance(distance, float) and distance.is_integer():
        return str(int(distance))
    return str(distance)


def to_table(dist: List[float]) -> DistanceTable:
    """Convert an internal math.inf-padded list to the public optional form."""
    return [None if math.isinf(d) else d for d in dist]
