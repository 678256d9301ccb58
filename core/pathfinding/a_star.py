"""
Purpose: A* pathfinding over the sparse world map with terrain/feature costs.
Dependencies: core/pathfinding/search.py, core/pathfinding/costs.py, core/hex/utils.py.
Ext Hooks: Transport-specific cost tables (ships on ocean).
Client/Server: Shared logic; server validates routes requested by clients.
"""

import logging

from core.config import MAX_WORLD_ITERATIONS
from core.hex.utils import HexCoord, get_neighbors, hex_distance, hex_key
from core.pathfinding.costs import is_traversable, movement_cost
from core.pathfinding.search import a_star_search

logger = logging.getLogger(__name__)


def find_route(start, goal, tiles, max_iterations=MAX_WORLD_ITERATIONS):
    """
    Cheapest route from start to goal over `tiles` (hex_key -> HexTile).

    Returns a list of HexCoord (start and goal included) or None when either
    end is missing from the map, the goal is impassable, no route exists, or
    the iteration cap is reached.
    """
    start = HexCoord(*start)
    goal = HexCoord(*goal)

    start_tile = tiles.get(hex_key(*start))
    goal_tile = tiles.get(hex_key(*goal))
    if start_tile is None or goal_tile is None:
        logger.debug("Route %s -> %s: endpoint not on map", start, goal)
        return None
    if not is_traversable(goal_tile):
        logger.debug("Route %s -> %s: goal terrain %s is impassable",
                     start, goal, goal_tile.terrain.value)
        return None

    def step_cost(coord):
        tile = tiles.get(hex_key(*coord))
        if tile is None:
            return None
        return movement_cost(tile)

    # Every passable tile costs at least 1, so hop distance stays admissible
    return a_star_search(
        start,
        goal,
        neighbors=get_neighbors,
        step_cost=step_cost,
        heuristic=lambda coord: hex_distance(coord, goal),
        max_iterations=max_iterations,
    )


def is_destination_reachable(destination, tiles):
    """True if the destination exists on the map and can be entered."""
    tile = tiles.get(hex_key(*destination))
    return tile is not None and is_traversable(tile)
