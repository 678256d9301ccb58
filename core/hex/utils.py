"""
Purpose: Axial hex math (neighbors, distance, rounding, projection, wrap, keys).
Dependencies: math.
Ext Hooks: Pointy-top layout, vertical wrap for other world shapes.
"""

import math
from typing import List, NamedTuple, Tuple


class HexCoord(NamedTuple):
    """Axial coordinate. x/y mirror q/r for callers that prefer display naming."""
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    @property
    def x(self) -> int:
        return self.q

    @property
    def y(self) -> int:
        return self.r


# Axial coordinates: neighbors in 6 directions
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1),
)

SQRT3 = math.sqrt(3)


def get_neighbors(hex) -> List[HexCoord]:
    q, r = hex
    return [HexCoord(q + dq, r + dr) for dq, dr in DIRECTIONS]


def hex_distance(a, b):
    """Minimum number of neighbor hops between two hexes."""
    dq = a[0] - b[0]
    dr = a[1] - b[1]
    return (abs(dq) + abs(dq + dr) + abs(dr)) // 2


def axial_to_cube(q, r):
    return q, r, -q - r


def _round_half_up(value):
    return math.floor(value + 0.5)


def axial_round(q, r) -> HexCoord:
    """Round fractional axial coordinates to the nearest hex."""
    if not (math.isfinite(q) and math.isfinite(r)):
        raise ValueError(f"Cannot round non-finite coordinates ({q}, {r})")
    q, r, s = axial_to_cube(q, r)

    rq = _round_half_up(q)
    rr = _round_half_up(r)
    rs = _round_half_up(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    # Rebuild the axis with the largest error so q + r + s == 0 again
    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs

    return HexCoord(int(rq), int(rr))


def axial_to_pixel(q, r, size):
    """Center of a flat-top hex in pixels."""
    if size <= 0:
        raise ValueError(f"Hex size must be positive, got {size}")
    x = size * (3 / 2 * q)
    y = size * (SQRT3 / 2 * q + SQRT3 * r)
    return x, y


def pixel_to_axial(x, y, size) -> HexCoord:
    """Hex containing a pixel position (flat-top layout)."""
    if size <= 0:
        raise ValueError(f"Hex size must be positive, got {size}")
    q = (2 / 3 * x) / size
    r = (-1 / 3 * x + SQRT3 / 3 * y) / size
    return axial_round(q, r)


def wrap_horizontal(q, map_width):
    """Wrap q into [-width/2, width/2); the world is cylindrical east-west."""
    if map_width <= 0:
        raise ValueError(f"Map width must be positive, got {map_width}")
    wrapped = q % map_width
    if wrapped >= map_width / 2:
        wrapped -= map_width
    return wrapped


def is_in_bounds(q, r, width, height):
    # Bounds are checked in offset space (odd-q columns)
    col = q
    row = r + q // 2
    return -width / 2 <= col < width / 2 and -height / 2 <= row < height / 2


def hex_key(q, r) -> str:
    return f"{q},{r}"


def parse_hex_key(key: str) -> HexCoord:
    # Also accepts the "(q, r)" form produced by str() on a tuple
    q, r = key.strip("()").replace(" ", "").split(",")
    return HexCoord(int(q), int(r))
