"""
Purpose: Active traversal record: planned route, duration, ETA and progress.
Dependencies: core/pathfinding/*, core/travel/telemetry.py.
Ext Hooks: Encounters or events triggered on entering a hex.

The caller drives time: plan once, then call advance() on every tick.
"""

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Tuple

from core.config import WORLD_TRAVEL_SPEED
from core.hex.utils import HexCoord, hex_key
from core.pathfinding.a_star import find_route
from core.pathfinding.local import find_local_route
from core.travel.telemetry import (
    TravelProgress,
    estimate_arrival,
    local_travel_time,
    position_index,
    progress,
    total_duration,
)

logger = logging.getLogger(__name__)

WORLD = 'world'
LOCAL = 'local'


@dataclass(frozen=True)
class Traversal:
    level: str                 # WORLD (time in game days) or LOCAL (time in hours)
    origin: HexCoord
    destination: HexCoord
    route: Tuple[HexCoord, ...]
    total_time: float
    start_time: datetime
    estimated_arrival: datetime
    terrain: str               # terrain of the current hex
    elapsed: float = 0.0
    current_index: int = 0

    @property
    def unit(self):
        return 'days' if self.level == WORLD else 'hours'

    @property
    def current_position(self):
        return self.route[self.current_index]

    @property
    def arrived(self):
        return self.elapsed >= self.total_time

    def progress(self) -> TravelProgress:
        return progress(self.elapsed, self.total_time, self.current_index, len(self.route))


def plan_world_traversal(origin, destination, tiles, start_time, speed=WORLD_TRAVEL_SPEED) -> Optional[Traversal]:
    """Route across the world map and time it; None if no route exists."""
    route = find_route(origin, destination, tiles)
    if route is None:
        return None
    duration = total_duration(route, tiles, speed)
    origin_tile = tiles.get(hex_key(*route[0]))
    logger.info("World travel %s -> %s: %d hexes, %.2f days",
                route[0], route[-1], len(route), duration)
    return Traversal(
        level=WORLD,
        origin=route[0],
        destination=route[-1],
        route=tuple(route),
        total_time=duration,
        start_time=start_time,
        estimated_arrival=estimate_arrival(start_time, duration, 'days'),
        terrain=origin_tile.terrain.value if origin_tile else 'plains',
    )


def plan_local_traversal(origin, destination, start_time, biomes=None, features=None) -> Optional[Traversal]:
    """Route inside a sub-region and time it in hours; None if out of bounds."""
    route = find_local_route(origin, destination)
    if route is None:
        return None
    hours, _ = local_travel_time(route, biomes, features)
    biomes = biomes or {}
    logger.info("Local travel %s -> %s: %d hexes, %.2f hours",
                route[0], route[-1], len(route), hours)
    return Traversal(
        level=LOCAL,
        origin=route[0],
        destination=route[-1],
        route=tuple(route),
        total_time=hours,
        start_time=start_time,
        estimated_arrival=estimate_arrival(start_time, hours, 'hours'),
        terrain=biomes.get(hex_key(*route[0]), 'plains'),
    )


def advance(traversal, delta, tiles=None, biomes=None) -> Traversal:
    """
    Return a copy of `traversal` moved forward by `delta` time units.

    tiles (world) or biomes (local) are used to refresh the current terrain;
    without them the previous terrain is kept. Once elapsed reaches the total
    the traveller sits on the destination.
    """
    if delta < 0:
        raise ValueError(f"Cannot advance by a negative amount ({delta})")
    elapsed = min(traversal.elapsed + delta, traversal.total_time)
    index = position_index(elapsed, traversal.total_time, len(traversal.route))
    if index == traversal.current_index and elapsed < traversal.total_time:
        return replace(traversal, elapsed=elapsed)

    key = hex_key(*traversal.route[index])
    terrain = traversal.terrain
    if tiles is not None and key in tiles:
        terrain = tiles[key].terrain.value
    elif biomes is not None:
        terrain = biomes.get(key, 'plains')
    return replace(traversal, elapsed=elapsed, current_index=index, terrain=terrain)
