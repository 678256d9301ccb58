"""
Purpose: Movement cost of entering a tile (terrain base x feature multipliers).
Dependencies: core/config.py.
Ext Hooks: Encumbrance, season or road modifiers.
"""

from core.config import FEATURE_COSTS, TERRAIN_COSTS

IMPASSABLE = float('inf')


def movement_cost(tile):
    """Cost of entering `tile`, or IMPASSABLE."""
    terrain = getattr(tile.terrain, 'value', tile.terrain)
    cost = TERRAIN_COSTS.get(terrain, IMPASSABLE)
    # Features never make an impassable tile passable
    if cost == IMPASSABLE:
        return IMPASSABLE

    for feature in tile.features:
        cost *= FEATURE_COSTS.get(feature, 1.0)
    return cost


def is_traversable(tile):
    return movement_cost(tile) != IMPASSABLE
