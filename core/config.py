"""
Purpose: Read-only tables and caps for movement costs, searches and travel.
Dependencies: None.
Ext Hooks: Add terrain types, transport speeds, env overrides.
"""

import os
from types import MappingProxyType

INF = float('inf')

# Base cost of entering a tile, by terrain
TERRAIN_COSTS = MappingProxyType({
    'ocean': INF,
    'coast': INF,
    'ice': INF,             # needs special equipment
    'plains': 1.0,
    'meadow': 1.2,
    'hills': 1.5,
    'mountain_range': 3.0,  # cordillera
    'tundra': 2.5,
    'desert': 1.5,
})

# Multipliers applied on top of terrain, compounding per feature
FEATURE_COSTS = MappingProxyType({
    'forest': 2.0,
    'jungle': 2.0,
    'boreal_forest': 2.0,
    'none': 1.0,
})

# Sub-region (1km hex) travel uses its own, milder terrain table
LOCAL_TERRAIN_COSTS = MappingProxyType({
    'mountain_range': 3.0,
    'hills': 1.5,
    'plains': 1.0,
    'meadow': 1.0,
    'desert': 1.2,
    'tundra': 1.3,
    'coast': 1.0,
    'forest': 1.0,
    'jungle': 1.0,
})

MAX_WORLD_ITERATIONS = 10000
MAX_LOCAL_ITERATIONS = 5000
LOCAL_REGION_RADIUS = 58

WORLD_TRAVEL_SPEED = 0.5  # world hexes per game day, on foot
LOCAL_SPEED_KM_PER_DAY = 50
HOURS_PER_DAY = 24
GAME_SPEED_MULTIPLIER = 4  # game days per real day

HEX_SIZE = 50
SERVER_URL = os.environ.get('HEXNAV_SERVER_URL', 'http://localhost:5000')
LOG_LEVEL = os.environ.get('HEXNAV_LOG_LEVEL', 'INFO')
