import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from asciimaze.algo.eller import EllerGenerator
from asciimaze.core.grid import Grid
from asciimaze.core.complexity import MazeStats

class TestComplexity(unittest.TestCase):
    def test_generated_maze_stats(self):
        grid = EllerGenerator(20, 20, seed=42).run_all()
        stats = MazeStats.calculate_stats(grid)
        self.assertEqual(stats["cells"], 400)
        self.assertEqual(stats["passages"], 399)
        self.assertTrue(stats["perfect"])
        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["junctions"], 400)

    def test_braid_is_not_perfect(self):
        grid = Grid(2, 2)
        grid.carve_path(0, 0, Grid.RIGHT)
        grid.carve_path(1, 0, Grid.DOWN)
        grid.carve_path(1, 1, Grid.LEFT)
        self.assertTrue(MazeStats.is_perfect(grid))

        grid.carve_path(0, 1, Grid.UP)
        self.assertEqual(MazeStats.edge_count(grid), 4)
        self.assertTrue(MazeStats.is_connected(grid))
        self.assertFalse(MazeStats.is_perfect(grid))

    def test_disconnected(self):
        grid = Grid(3, 1)
        grid.carve_path(0, 0, Grid.RIGHT)
        self.assertFalse(MazeStats.is_connected(grid))
        stats = MazeStats.calculate_stats(grid)
        self.assertEqual(stats["dead_ends"], 2)
        self.assertFalse(stats["perfect"])

    def test_transient_flags_ignored(self):
        grid = Grid(2, 1)
        grid.carve_path(0, 0, Grid.RIGHT)
        grid.set_visited(0, 0)
        grid.set_path(1, 0)
        self.assertEqual(MazeStats.edge_count(grid), 1)

    def test_empty_grid(self):
        stats = MazeStats.calculate_stats(Grid(0, 0))
        self.assertEqual(stats["cells"], 0)
        self.assertTrue(stats["perfect"])

if __name__ == '__main__':
    unittest.main()
