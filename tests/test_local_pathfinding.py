import random
import unittest

from core.config import LOCAL_REGION_RADIUS
from core.hex.utils import hex_distance
from core.pathfinding.local import find_local_route, is_in_local_bounds


class TestLocalPathfinding(unittest.TestCase):
    def test_bounds(self):
        self.assertEqual(LOCAL_REGION_RADIUS, 58)
        self.assertTrue(is_in_local_bounds((0, 0)))
        self.assertTrue(is_in_local_bounds((58, 0)))
        self.assertTrue(is_in_local_bounds((0, -58)))
        self.assertFalse(is_in_local_bounds((59, 0)))
        # q^2 + r^2 + qr = 4800 > 58^2
        self.assertFalse(is_in_local_bounds((40, 40)))
        self.assertTrue(is_in_local_bounds((40, -40)))
        self.assertTrue(is_in_local_bounds((3, 3), radius=6))
        self.assertFalse(is_in_local_bounds((4, 4), radius=6))

    def test_simple_route(self):
        route = find_local_route((0, 0), (3, 0))
        self.assertEqual(route, [(0, 0), (1, 0), (2, 0), (3, 0)])

    def test_goal_outside_region(self):
        self.assertIsNone(find_local_route((0, 0), (40, 40)))
        self.assertIsNone(find_local_route((0, 0), (59, 0)))

    def test_start_outside_region(self):
        self.assertIsNone(find_local_route((0, 60), (0, 0)))

    def test_route_to_region_edge(self):
        route = find_local_route((0, 0), (58, 0))
        self.assertEqual(len(route), 59)
        self.assertEqual(route[-1], (58, 0))

    def test_route_stays_inside_region(self):
        # Every hex on the route lies inside a tiny region
        route = find_local_route((2, 0), (-2, 0), radius=2)
        self.assertIsNotNone(route)
        for coord in route:
            self.assertTrue(is_in_local_bounds(coord, radius=2))

    def test_iteration_cap(self):
        self.assertIsNone(find_local_route((0, 0), (50, 0), max_iterations=10))

    def test_random_goals_inside_region(self):
        rng = random.Random(99)
        checked = 0
        while checked < 40:
            goal = (rng.randint(-50, 50), rng.randint(-50, 50))
            q, r = goal
            if q * q + r * r + q * r > 50 * 50:
                continue
            checked += 1
            route = find_local_route((0, 0), goal)
            self.assertIsNotNone(route)
            self.assertEqual(route[0], (0, 0))
            self.assertEqual(route[-1], goal)
            # Uniform cost: the route is as short as the hex distance allows
            self.assertEqual(len(route), hex_distance((0, 0), goal) + 1)
            for a, b in zip(route, route[1:]):
                self.assertEqual(hex_distance(a, b), 1)


if __name__ == '__main__':
    unittest.main()
