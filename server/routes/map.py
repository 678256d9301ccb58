"""
Purpose: JSON endpoints for world/local routes and travel progress.
Dependencies: core/pathfinding/*, core/travel/telemetry.py, core/hex/grid.py, flask.
Ext Hooks: Per-player transport lookups.
Server Only: Rules enforcement; clients never compute authoritative routes.
"""

import logging
import math

from flask import Blueprint, jsonify, request

from core.config import WORLD_TRAVEL_SPEED
from core.hex.grid import HexGrid
from core.hex.utils import HexCoord
from core.pathfinding.a_star import find_route
from core.pathfinding.local import find_local_route
from core.travel.telemetry import (
    format_remaining_days,
    format_remaining_hours,
    local_travel_time,
    progress,
    route_cost,
    terrain_summary,
    total_duration,
)

logger = logging.getLogger(__name__)

bp = Blueprint('map', __name__)


def _coord(value):
    q, r = value
    if not all(isinstance(v, (int, float)) and math.isfinite(v) for v in (q, r)):
        raise ValueError(f"Invalid coordinate {value!r}")
    if q != int(q) or r != int(r):
        raise ValueError(f"Coordinates must be integers, got {value!r}")
    return HexCoord(int(q), int(r))


def _bad_request(error):
    logger.warning("Rejected request: %s", error)
    return jsonify({"error": str(error)}), 400


@bp.route("/api/route", methods=["POST"])
def handle_route():
    data = request.get_json(silent=True)
    if not data or 'start' not in data or 'goal' not in data or 'grid' not in data:
        return jsonify({"error": "Invalid data"}), 400

    try:
        start = _coord(data['start'])
        goal = _coord(data['goal'])
        tiles = HexGrid.from_grid_state(data['grid']).tiles
        speed = float(data.get('speed', WORLD_TRAVEL_SPEED))
        if not (math.isfinite(speed) and speed > 0):
            raise ValueError(f"Speed must be positive, got {speed}")
        route = find_route(start, goal, tiles)
        duration = total_duration(route, tiles, speed) if route else None
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        return _bad_request(e)

    if not route:
        return jsonify({"error": "No valid path", "route": []}), 200

    return jsonify({
        "route": [list(coord) for coord in route],
        "cost": route_cost(route, tiles),
        "duration": duration,
        "terrain_summary": terrain_summary(route, tiles),
    })


@bp.route("/api/local_route", methods=["POST"])
def handle_local_route():
    data = request.get_json(silent=True)
    if not data or 'start' not in data or 'goal' not in data:
        return jsonify({"error": "Invalid data"}), 400

    biomes = data.get('biomes')
    features = data.get('features')
    for name, value in (('biomes', biomes), ('features', features)):
        if value is not None and not isinstance(value, dict):
            return _bad_request(f"{name} must be an object keyed by hex")
    try:
        route = find_local_route(_coord(data['start']), _coord(data['goal']))
        if route:
            hours, hex_costs = local_travel_time(route, biomes, features)
    except (ValueError, TypeError) as e:
        return _bad_request(e)

    if not route:
        return jsonify({"error": "No valid path", "route": []}), 200

    return jsonify({
        "route": [list(coord) for coord in route],
        "hours": hours,
        "hex_costs": hex_costs,
    })


@bp.route("/api/progress", methods=["POST"])
def handle_progress():
    data = request.get_json(silent=True)
    required = ('elapsed', 'total', 'current_index', 'route_length')
    if not data or any(name not in data for name in required):
        return jsonify({"error": "Invalid data"}), 400

    unit = data.get('unit', 'days')
    if unit not in ('days', 'hours'):
        return _bad_request(f"Unknown time unit {unit!r}")
    formatter = format_remaining_days if unit == 'days' else format_remaining_hours
    try:
        figures = progress(float(data['elapsed']), float(data['total']),
                           int(data['current_index']), int(data['route_length']))
        label = formatter(figures.remaining_time)
    except (ValueError, TypeError, OverflowError) as e:
        return _bad_request(e)

    return jsonify({
        "percent": figures.percent,
        "remaining_hexes": figures.remaining_hexes,
        "total_hexes": figures.total_hexes,
        "remaining_time": figures.remaining_time,
        "remaining_label": label,
    })


@bp.route("/api/health", methods=["GET"])
def handle_health():
    return jsonify({"status": "ok"})
