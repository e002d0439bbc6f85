import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from asciimaze.core.grid import Grid
from asciimaze.algo.eller import EllerGenerator
from asciimaze.algo.solvers import PathFinder
from asciimaze.io.ruled import RuledParser, RuledRenderer

MAZE_3X3 = [
    "      _________",
    "     |        |",
    "     |___  ___|",
    "     |        |",
    "     |   ___  |",
    "     |  |     |",
    "     |__|_____|",
]

def solve_lines(lines):
    maze = RuledParser().parse(lines)
    solver = PathFinder(maze.grid)
    found = solver.solve(maze.start, maze.destination)
    if found:
        maze.mark_path(solver.path)
    return found, solver, maze

class TestPathFinder(unittest.TestCase):
    def create_simple_maze(self):
        # 4x3, corridor from bottom left to top right with a dead end at (0,0)
        grid = Grid(4, 3)
        grid.carve_path(0, 2, Grid.UP)    # to 0,1
        grid.carve_path(0, 1, Grid.RIGHT) # to 1,1
        grid.carve_path(1, 1, Grid.UP)    # to 1,0
        grid.carve_path(1, 0, Grid.LEFT)  # dead end 0,0
        grid.carve_path(1, 0, Grid.RIGHT) # to 2,0
        grid.carve_path(2, 0, Grid.RIGHT) # to 3,0
        return grid

    def test_path(self):
        grid = self.create_simple_maze()
        solver = PathFinder(grid)
        self.assertTrue(solver.solve((0, 2), (3, 0)))
        self.assertEqual(solver.path, [(0, 2), (0, 1), (1, 1), (1, 0), (2, 0), (3, 0)])
        for x, y in solver.path:
            self.assertTrue(grid.is_path(x, y))
        # The dead end was explored but is not on the path
        self.assertTrue(grid.is_visited(0, 0))
        self.assertFalse(grid.is_path(0, 0))

    def test_no_path(self):
        grid = Grid(5, 5) # All walls
        solver = PathFinder(grid)
        self.assertFalse(solver.solve((0, 4), (4, 0)))
        self.assertEqual(solver.path, [])
        self.assertEqual(solver.visited_count, 1)

    def test_start_is_end(self):
        grid = Grid(1, 1)
        solver = PathFinder(grid)
        self.assertTrue(solver.solve((0, 0), (0, 0)))
        self.assertEqual(solver.path, [(0, 0)])

    def test_out_of_bounds_endpoints(self):
        solver = PathFinder(Grid(0, 0))
        self.assertFalse(solver.solve((0, -1), (-1, 0)))

    def test_hand_built_text(self):
        found, solver, maze = solve_lines(MAZE_3X3)
        self.assertTrue(found)
        self.assertEqual(solver.path, [(0, 2), (0, 1), (1, 1), (1, 0), (2, 0)])
        self.assertEqual(maze.lines, [
            "      _________",
            "     |   XX XX|",
            "     |___  ___|",
            "     |XX XX   |",
            "     |   ___  |",
            "     |XX|     |",
            "     |__|_____|",
        ])

    def test_stray_cycle_terminates(self):
        lines = list(MAZE_3X3)
        # Open (0,0) down to (0,1): closes a loop through (1,0) and (1,1)
        lines[2] = "     |  _  ___|"
        found, solver, maze = solve_lines(lines)
        self.assertTrue(found)
        self.assertEqual(solver.path, [(0, 2), (0, 1), (0, 0), (1, 0), (2, 0)])
        # Every cell is entered at most once
        self.assertLessEqual(solver.visited_count, 9)
        self.assertEqual(maze.lines[1], "     |XX XX XX|")
        self.assertEqual(maze.lines[3], "     |XX      |")
        self.assertEqual(maze.lines[5], "     |XX|     |")

    def test_unsolvable_text(self):
        lines = list(MAZE_3X3)
        # Wall off the destination
        lines[1] = "     |     |  |"
        found, solver, maze = solve_lines(lines)
        self.assertFalse(found)
        self.assertEqual(maze.lines, lines)
        self.assertFalse(any(maze.grid.is_path(x, y) for y in range(3) for x in range(3)))

    def test_generated_mazes_are_solvable(self):
        for w, h, seed in [(1, 1, 0), (1, 8, 1), (8, 1, 2), (30, 30, 3), (60, 5, 4)]:
            lines = []
            renderer = RuledRenderer()
            for state in EllerGenerator(w, h, seed=seed).run():
                lines.extend(renderer.render_state(state))
            found, solver, maze = solve_lines(lines)
            self.assertTrue(found, f"{w}x{h} seed {seed}")
            self.assertEqual(solver.path[0], (0, h - 1))
            self.assertEqual(solver.path[-1], (w - 1, 0))
            # Consecutive path cells are joined by a passage
            for (x1, y1), (x2, y2) in zip(solver.path, solver.path[1:]):
                self.assertIn((x2, y2), [(nx, ny) for nx, ny, _ in maze.grid.get_open_neighbors(x1, y1)])

    def test_deep_maze_does_not_recurse(self):
        # A single column corridor is as deep as it is tall
        grid = EllerGenerator(1, 5000, seed=1).run_all()
        solver = PathFinder(grid)
        self.assertTrue(solver.solve((0, 4999), (0, 0)))
        self.assertEqual(len(solver.path), 5000)

if __name__ == '__main__':
    unittest.main()
