"""
Purpose: World hex grid: tile storage by key, projection, wrapped lookups.
Dependencies: core/map/tile.py, core/hex/utils.py, random.
Ext Hooks: Load maps produced by the world generator.
"""

import random

from core.config import HEX_SIZE
from core.hex.utils import (
    HexCoord,
    axial_to_pixel,
    hex_key,
    parse_hex_key,
    pixel_to_axial,
    wrap_horizontal,
)
from core.map.tile import HexTile, Terrain


class HexGrid:
    """Cylindrical world map: wraps east-west, bounded north-south."""

    def __init__(self, width=10, height=10, hex_size=HEX_SIZE, tiles=None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.hex_size = hex_size
        self.tiles = dict(tiles or {})  # hex_key: HexTile
        self.flat_top = True

    def q_range(self):
        return range(-(self.width // 2), self.width - self.width // 2)

    def r_range(self):
        return range(-(self.height // 2), self.height - self.height // 2)

    def fill(self, terrain=Terrain.PLAINS, features=()):
        """Cover the whole grid with one terrain."""
        for q in self.q_range():
            for r in self.r_range():
                self.set_tile(HexTile(HexCoord(q, r), terrain, tuple(features)))
        return self

    @classmethod
    def random(cls, width, height, seed=None, weights=None, hex_size=HEX_SIZE):
        """Grid with terrain drawn from `weights` (terrain -> relative weight)."""
        rng = random.Random(seed)
        weights = weights or {Terrain.PLAINS: 8, Terrain.HILLS: 1, Terrain.OCEAN: 1}
        terrains = list(weights)
        grid = cls(width, height, hex_size)
        for q in grid.q_range():
            for r in grid.r_range():
                terrain = rng.choices(terrains, weights=[weights[t] for t in terrains])[0]
                grid.set_tile(HexTile(HexCoord(q, r), terrain))
        return grid

    def set_tile(self, tile):
        self.tiles[hex_key(*tile.coordinates)] = tile

    def get_tile(self, q, r):
        return self.tiles.get(hex_key(q, r))

    def tile_at(self, q, r):
        """Tile lookup with east-west wraparound."""
        return self.get_tile(wrap_horizontal(q, self.width), r)

    def hex_to_pixel(self, q, r):
        return axial_to_pixel(q, r, self.hex_size)

    def pixel_to_hex(self, x, y):
        return pixel_to_axial(x, y, self.hex_size)

    def get_grid_state(self):
        return {key: tile.to_dict() for key, tile in self.tiles.items()}

    @classmethod
    def from_grid_state(cls, state, width=None, height=None, hex_size=HEX_SIZE):
        tiles = {}
        for key, info in state.items():
            coord = parse_hex_key(key)
            tiles[hex_key(*coord)] = HexTile.from_dict(info, coordinates=coord)
        if width is None or height is None:
            qs = [tile.coordinates.q for tile in tiles.values()] or [0]
            rs = [tile.coordinates.r for tile in tiles.values()] or [0]
            width = width or max(qs) - min(qs) + 1
            height = height or max(rs) - min(rs) + 1
        return cls(width, height, hex_size, tiles)
