"""
Purpose: HTTP client for the navigation server, with retry/back-off.
Dependencies: requests, time, core/hex/utils.py.
Ext Hooks: Add authentication.
Client Only: HTTP client with resilience.
"""

import logging
import time
from typing import Any, Dict, List, Optional

import requests

from core.hex.grid import HexGrid
from core.hex.utils import HexCoord

logger = logging.getLogger(__name__)


class NetworkClient:
    def __init__(self, base_url: str, max_retries: int = 3, retry_delay: float = 1.0, backoff_factor: float = 2.0):
        self.base_url = base_url.rstrip('/')
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.backoff_factor = backoff_factor

    def post_with_retry(self, endpoint: str, data: Dict[str, Any], timeout: float = 5.0) -> Optional[Dict[str, Any]]:
        """Post with exponential backoff retry."""
        url = f"{self.base_url}{endpoint}"
        delay = self.retry_delay
        for attempt in range(self.max_retries):
            try:
                response = requests.post(url, json=data, timeout=timeout)
                if response.status_code == 200:
                    return response.json()
                logger.warning("Server error %s on attempt %d", response.status_code, attempt + 1)
            except requests.exceptions.RequestException as e:
                logger.warning("Network error on attempt %d: %s", attempt + 1, e)

            if attempt < self.max_retries - 1:
                logger.info("Retrying in %s seconds...", delay)
                time.sleep(delay)
                delay *= self.backoff_factor
        return None

    def request_route(self, start, goal, grid: HexGrid, speed: Optional[float] = None) -> Optional[List[HexCoord]]:
        """World route computed by the server, or None."""
        data = {"start": list(start), "goal": list(goal), "grid": grid.get_grid_state()}
        if speed is not None:
            data["speed"] = speed
        return self._route_from(self.post_with_retry("/api/route", data))

    def request_local_route(self, start, goal) -> Optional[List[HexCoord]]:
        data = {"start": list(start), "goal": list(goal)}
        return self._route_from(self.post_with_retry("/api/local_route", data))

    @staticmethod
    def _route_from(result):
        if not result or not result.get("route"):
            return None
        return [HexCoord(q, r) for q, r in result["route"]]
