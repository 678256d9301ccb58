"""
Purpose: World hex tiles: terrain classification plus feature overlays.
Dependencies: core/hex/utils.py, core/pathfinding/costs.py.
Ext Hooks: Resources, elevation, climate fields from the world generator.
Client/Server: Shared; to_dict/from_dict is the JSON shape on the wire.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from core.hex.utils import HexCoord
from core.pathfinding.costs import IMPASSABLE, movement_cost


class Terrain(str, Enum):
    OCEAN = 'ocean'
    COAST = 'coast'
    ICE = 'ice'
    PLAINS = 'plains'
    MEADOW = 'meadow'
    HILLS = 'hills'
    MOUNTAIN_RANGE = 'mountain_range'
    TUNDRA = 'tundra'
    DESERT = 'desert'


@dataclass(frozen=True)
class HexTile:
    coordinates: HexCoord
    terrain: Terrain = Terrain.PLAINS
    features: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept plain tuples/strings from callers, store canonical types
        object.__setattr__(self, 'coordinates', HexCoord(*self.coordinates))
        object.__setattr__(self, 'terrain', Terrain(self.terrain))
        object.__setattr__(self, 'features', tuple(self.features))

    @property
    def cost(self):
        return movement_cost(self)

    @property
    def blocked(self):
        return self.cost == IMPASSABLE

    def to_dict(self):
        return {
            'q': self.coordinates.q,
            'r': self.coordinates.r,
            'terrain': self.terrain.value,
            'features': list(self.features),
            'cost': self.cost if not self.blocked else None,
            'blocked': self.blocked,
        }

    @classmethod
    def from_dict(cls, data, coordinates=None):
        """Build a tile from its JSON form; raises ValueError on unknown terrain."""
        if coordinates is None:
            coordinates = HexCoord(int(data['q']), int(data['r']))
        return cls(
            coordinates=coordinates,
            terrain=Terrain(data.get('terrain', Terrain.PLAINS.value)),
            features=tuple(data.get('features') or ()),
        )
