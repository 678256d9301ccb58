"""
Purpose: A* inside a sub-region (1km hexes), uniform cost, circular boundary.
Dependencies: core/pathfinding/search.py, core/hex/utils.py.
"""

from core.config import LOCAL_REGION_RADIUS, MAX_LOCAL_ITERATIONS
from core.hex.utils import HexCoord, get_neighbors, hex_distance
from core.pathfinding.search import a_star_search


def is_in_local_bounds(hex, radius=LOCAL_REGION_RADIUS):
    q, r = hex
    return q * q + r * r + q * r <= radius * radius


def find_local_route(start, goal, radius=LOCAL_REGION_RADIUS, max_iterations=MAX_LOCAL_ITERATIONS):
    """Route between two sub-region hexes, or None if either lies outside the region."""
    start = HexCoord(*start)
    goal = HexCoord(*goal)
    if not is_in_local_bounds(start, radius) or not is_in_local_bounds(goal, radius):
        return None

    return a_star_search(
        start,
        goal,
        neighbors=get_neighbors,
        step_cost=lambda coord: 1 if is_in_local_bounds(coord, radius) else None,
        heuristic=lambda coord: hex_distance(coord, goal),
        max_iterations=max_iterations,
    )
