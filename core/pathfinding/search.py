"""
Purpose: Generic A* core shared by the world and local-region pathfinders.
Dependencies: heapq, logging.
Ext Hooks: Plug in any neighbor/cost/heuristic triple (e.g., roads, rivers).

Nodes live in an arena (a flat list); each node points at its predecessor by
index, so the predecessor chain is a tree rooted at the start node.
"""

import heapq
import logging
from dataclasses import dataclass
from typing import Callable, Hashable, Iterable, List, Optional

logger = logging.getLogger(__name__)

INF = float('inf')
NO_PARENT = -1


@dataclass
class SearchNode:
    coordinates: Hashable
    g_cost: float   # cost from start
    h_cost: float   # heuristic estimate to goal
    f_cost: float   # g + h
    parent: int = NO_PARENT


def a_star_search(
    start,
    goal,
    neighbors: Callable[[Hashable], Iterable[Hashable]],
    step_cost: Callable[[Hashable], Optional[float]],
    heuristic: Callable[[Hashable], float],
    max_iterations: int,
) -> Optional[List]:
    """
    Best-first search from start to goal.

    step_cost(coord) is the cost of entering coord; None or INF means it
    cannot be entered. Returns the route (start..goal inclusive) or None when
    the goal is unreachable or more than max_iterations nodes would have to
    be finalized.
    """
    if max_iterations <= 0:
        raise ValueError(f"max_iterations must be positive, got {max_iterations}")

    h = heuristic(start)
    arena = [SearchNode(start, 0, h, h)]
    best = {start: 0}  # coord -> arena index of best known node
    closed = set()
    # (f, h, index): ties go to the node closer to the goal, then to the older node
    open_set = [(h, h, 0)]
    iterations = 0

    while open_set:
        _, _, index = heapq.heappop(open_set)
        node = arena[index]
        current = node.coordinates
        if current in closed or best[current] != index:
            continue  # stale heap entry

        if iterations >= max_iterations:
            logger.debug("Search %s -> %s hit iteration cap (%d)", start, goal, max_iterations)
            return None
        iterations += 1

        if current == goal:
            route = reconstruct_path(arena, index)
            logger.debug("Route %s -> %s: %d hexes, cost %.2f, %d iterations",
                         start, goal, len(route), node.g_cost, iterations)
            return route

        closed.add(current)

        for neighbor in neighbors(current):
            if neighbor in closed:
                continue
            cost = step_cost(neighbor)
            if cost is None or cost == INF:
                continue
            tentative_g_cost = node.g_cost + cost

            known = best.get(neighbor)
            if known is None or tentative_g_cost < arena[known].g_cost:
                h = heuristic(neighbor)
                arena.append(SearchNode(neighbor, tentative_g_cost, h, tentative_g_cost + h, index))
                best[neighbor] = len(arena) - 1
                heapq.heappush(open_set, (tentative_g_cost + h, h, len(arena) - 1))

    logger.debug("No route %s -> %s after %d iterations", start, goal, iterations)
    return None


def reconstruct_path(arena, index):
    """Follow parent indices back to the start and reverse."""
    path = []
    while index != NO_PARENT:
        node = arena[index]
        path.append(node.coordinates)
        index = node.parent
    path.reverse()
    return path
