"""
Purpose: Travel time, route composition and progress/ETA figures for a route.
Dependencies: core/pathfinding/costs.py, core/hex/utils.py, core/config.py.
Ext Hooks: Weather or season multipliers on duration.

All functions are pure; callers own the clock and pass elapsed time in.
"""

import math
from collections import Counter
from dataclasses import dataclass
from datetime import timedelta

from core.config import FEATURE_COSTS, HOURS_PER_DAY, LOCAL_SPEED_KM_PER_DAY, LOCAL_TERRAIN_COSTS
from core.hex.utils import hex_key
from core.pathfinding.costs import movement_cost


def _check_speed(speed):
    if not (isinstance(speed, (int, float)) and math.isfinite(speed) and speed > 0):
        raise ValueError(f"Speed must be a positive finite number, got {speed!r}")


def route_cost(route, tiles):
    """Sum of entry costs along the route; the start tile is not charged."""
    total = 0.0
    for coord in route[1:]:
        tile = tiles.get(hex_key(*coord))
        if tile is None:
            continue
        total += movement_cost(tile)
    return total


def total_duration(route, tiles, speed):
    """Travel time along `route` at `speed` hexes per time unit."""
    _check_speed(speed)
    return route_cost(route, tiles) / speed


def terrain_summary(route, tiles):
    """Terrain -> number of route hexes on it, start included."""
    counts = Counter()
    for coord in route:
        tile = tiles.get(hex_key(*coord))
        if tile is None:
            continue
        counts[tile.terrain.value] += 1
    return dict(counts)


def local_travel_time(route, biomes=None, features=None):
    """
    Travel time in hours across sub-region hexes.

    biomes maps hex_key -> biome name (missing means plains), features maps
    hex_key -> list of feature tags. Returns (total_hours, per_hex_costs),
    where per_hex_costs skips the start hex.
    """
    biomes = biomes or {}
    features = features or {}

    hex_costs = []
    for coord in route[1:]:
        key = hex_key(*coord)
        cost = LOCAL_TERRAIN_COSTS.get(biomes.get(key, 'plains'), 1.0)
        for feature in features.get(key, ()):
            cost *= FEATURE_COSTS.get(feature, 1.0)
        hex_costs.append(cost)

    # 1km hex at LOCAL_SPEED_KM_PER_DAY
    hours_per_hex = HOURS_PER_DAY / LOCAL_SPEED_KM_PER_DAY
    return sum(hex_costs) * hours_per_hex, hex_costs


@dataclass(frozen=True)
class TravelProgress:
    percent: float
    remaining_hexes: int
    total_hexes: int
    remaining_time: float


def progress(elapsed, total, current_index, route_length):
    if not (math.isfinite(elapsed) and math.isfinite(total)):
        raise ValueError(f"Elapsed and total time must be finite, got {elapsed}, {total}")
    if total > 0:
        percent = min(max(elapsed / total * 100, 0.0), 100.0)
    else:
        percent = 100.0
    return TravelProgress(
        percent=percent,
        remaining_hexes=max(route_length - current_index - 1, 0),
        total_hexes=max(route_length - 1, 0),
        remaining_time=max(total - elapsed, 0.0),
    )


def position_index(elapsed, total, route_length):
    """Index of the route hex the traveller is on after `elapsed`."""
    if route_length <= 0:
        raise ValueError("Route is empty")
    if total <= 0 or elapsed >= total:
        return route_length - 1
    index = math.floor(max(elapsed, 0) / total * (route_length - 1))
    return min(index, route_length - 1)


def estimate_arrival(start_time, duration, unit='days'):
    if unit == 'days':
        return start_time + timedelta(days=duration)
    if unit == 'hours':
        return start_time + timedelta(hours=duration)
    raise ValueError(f"Unknown time unit {unit!r}")


def _round(value):
    return math.floor(value + 0.5)


def format_remaining_days(days):
    """'5h', '2d' or '2d 6h' for a duration in game days."""
    # Round to whole hours first so 23.9h reads as '1d', not '24h'
    total_hours = _round(days * 24)
    if total_hours < 24:
        return f"{total_hours}h"
    whole_days, hours = divmod(total_hours, 24)
    return f"{whole_days}d {hours}h" if hours > 0 else f"{whole_days}d"


def format_remaining_hours(hours):
    """'40m', '5h' or '1d 3h' for a duration in hours."""
    if _round(hours * 60) < 60:
        return f"{_round(hours * 60)}m"
    whole_hours = _round(hours)
    if whole_hours < 24:
        return f"{whole_hours}h"
    days, rest = divmod(whole_hours, 24)
    return f"{days}d {rest}h"
