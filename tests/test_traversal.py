import unittest
from datetime import datetime, timedelta

from core.hex.grid import HexGrid
from core.hex.utils import hex_key
from core.map.tile import HexTile, Terrain
from core.travel.traversal import LOCAL, WORLD, advance, plan_local_traversal, plan_world_traversal


class TestWorldTraversal(unittest.TestCase):
    def setUp(self):
        self.grid = HexGrid(5, 5).fill(Terrain.PLAINS)
        self.tiles = self.grid.tiles
        self.start = datetime(2026, 1, 10, 0, 5)

    def test_plan(self):
        travel = plan_world_traversal((0, 0), (2, 0), self.tiles, self.start, speed=0.5)
        self.assertEqual(travel.level, WORLD)
        self.assertEqual(travel.unit, 'days')
        self.assertEqual(travel.route, ((0, 0), (1, 0), (2, 0)))
        self.assertEqual(travel.total_time, 4)
        self.assertEqual(travel.estimated_arrival, self.start + timedelta(days=4))
        self.assertEqual(travel.terrain, 'plains')
        self.assertEqual(travel.current_position, (0, 0))
        self.assertFalse(travel.arrived)

    def test_plan_unreachable(self):
        self.grid.set_tile(HexTile((2, 0), Terrain.OCEAN))
        self.assertIsNone(plan_world_traversal((0, 0), (2, 0), self.tiles, self.start))

    def test_plan_rejects_bad_speed(self):
        with self.assertRaises(ValueError):
            plan_world_traversal((0, 0), (2, 0), self.tiles, self.start, speed=0)

    def test_advance(self):
        travel = plan_world_traversal((0, 0), (2, 0), self.tiles, self.start, speed=0.5)
        travel = advance(travel, 1, self.tiles)
        self.assertEqual(travel.elapsed, 1)
        self.assertEqual(travel.current_index, 0)
        travel = advance(travel, 2, self.tiles)
        self.assertEqual(travel.current_index, 1)
        self.assertEqual(travel.progress().percent, 75)
        self.assertEqual(travel.progress().remaining_hexes, 1)
        travel = advance(travel, 10, self.tiles)
        self.assertTrue(travel.arrived)
        self.assertEqual(travel.elapsed, 4)
        self.assertEqual(travel.current_position, (2, 0))

    def test_advance_updates_terrain(self):
        # Hills on the direct line: 1.5 + 1 = 2.5 is still cheaper than the detour (3)
        self.grid.set_tile(HexTile((1, 0), Terrain.HILLS))
        travel = plan_world_traversal((0, 0), (2, 0), self.tiles, self.start, speed=0.5)
        self.assertEqual(travel.total_time, 5)
        travel = advance(travel, 3, self.tiles)
        self.assertEqual(travel.current_index, 1)
        self.assertEqual(travel.terrain, 'hills')
        # Without a map the last known terrain is kept
        self.assertEqual(advance(travel, 2).terrain, 'hills')

    def test_advance_is_pure(self):
        travel = plan_world_traversal((0, 0), (2, 0), self.tiles, self.start, speed=0.5)
        advance(travel, 3, self.tiles)
        self.assertEqual(travel.elapsed, 0)
        self.assertEqual(travel.current_index, 0)

    def test_advance_rejects_negative(self):
        travel = plan_world_traversal((0, 0), (2, 0), self.tiles, self.start)
        with self.assertRaises(ValueError):
            advance(travel, -1)


class TestLocalTraversal(unittest.TestCase):
    def setUp(self):
        self.start = datetime(2026, 1, 10, 12, 0)

    def test_plan(self):
        biomes = {hex_key(0, 0): 'meadow', hex_key(2, 0): 'hills'}
        travel = plan_local_traversal((0, 0), (3, 0), self.start, biomes=biomes)
        self.assertEqual(travel.level, LOCAL)
        self.assertEqual(travel.unit, 'hours')
        self.assertEqual(len(travel.route), 4)
        # plains, hills, plains: (1 + 1.5 + 1) * 0.48h
        self.assertAlmostEqual(travel.total_time, 1.68)
        self.assertEqual(travel.terrain, 'meadow')
        self.assertEqual(travel.estimated_arrival, self.start + timedelta(hours=travel.total_time))

    def test_plan_out_of_bounds(self):
        self.assertIsNone(plan_local_traversal((0, 0), (70, 0), self.start))

    def test_advance_with_biomes(self):
        biomes = {hex_key(2, 0): 'hills'}
        travel = plan_local_traversal((0, 0), (3, 0), self.start, biomes=biomes)
        travel = advance(travel, travel.total_time * 0.7, biomes=biomes)
        self.assertEqual(travel.current_index, 2)
        self.assertEqual(travel.terrain, 'hills')


if __name__ == '__main__':
    unittest.main()
