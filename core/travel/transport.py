"""
Purpose: Straight-line travel estimates between world hexes per transport.
Dependencies: core/hex/utils.py, core/config.py.
Ext Hooks: Transport ownership, cargo weight limits.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

from core.config import GAME_SPEED_MULTIPLIER
from core.hex.utils import HexCoord, hex_distance


@dataclass(frozen=True)
class TransportItem:
    id: str
    name: str
    type: str
    speed: float            # hexes per game day
    weight_capacity: float  # in jax


@dataclass(frozen=True)
class TravelCalculation:
    origin: HexCoord
    destination: HexCoord
    distance: int
    transport: TransportItem
    travel_time: float      # game days
    arrival: datetime


TRANSPORT_OPTIONS = (
    TransportItem('foot', 'On Foot', 'horse', 0.5, 0.5),
    TransportItem('horse-1', 'Horse', 'horse', 1.0, 2),
    TransportItem('cart-1', 'Cart', 'cart', 0.75, 5),
    TransportItem('camel-1', 'Camel', 'camel', 0.8, 3),
    TransportItem('ship-basic', 'Basic Ship', 'ship', 1.0, 10),
    TransportItem('ship-advanced', 'Advanced Ship', 'ship', 2.0, 20),
)


def get_transport(transport_id):
    for transport in TRANSPORT_OPTIONS:
        if transport.id == transport_id:
            return transport
    raise KeyError(f"Unknown transport {transport_id!r}")


def calculate_travel(origin, destination, transport, now):
    """Distance, game days and real-world arrival for a direct trip."""
    if not (math.isfinite(transport.speed) and transport.speed > 0):
        raise ValueError(f"Transport speed must be positive, got {transport.speed}")
    origin = HexCoord(*origin)
    destination = HexCoord(*destination)
    distance = hex_distance(origin, destination)
    game_days = distance / transport.speed
    # Game time runs GAME_SPEED_MULTIPLIER times faster than real time
    real_days = game_days / GAME_SPEED_MULTIPLIER
    return TravelCalculation(
        origin=origin,
        destination=destination,
        distance=distance,
        transport=transport,
        travel_time=game_days,
        arrival=now + timedelta(days=real_days),
    )
