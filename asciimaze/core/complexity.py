from collections import deque
import numpy as np
from asciimaze.core.grid import Grid

# Number of open passages for every 4-bit passage mask
_POPCOUNT = np.array([bin(mask).count("1") for mask in range(16)], dtype=np.uint8)

class MazeStats:
    @staticmethod
    def passage_counts(grid: Grid) -> np.ndarray:
        """(height, width) array with the number of open sides of each cell."""
        if grid.width == 0 or grid.height == 0:
            return np.zeros((grid.height, grid.width), dtype=np.uint8)
        cells = np.array([np.frombuffer(row.tobytes(), dtype=np.uint8) for row in grid.rows])
        return _POPCOUNT[cells & Grid.PASSAGES]

    @staticmethod
    def edge_count(grid: Grid) -> int:
        # Every passage is stored on both of its cells
        return int(MazeStats.passage_counts(grid).sum()) // 2

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        total = grid.width * grid.height
        if total == 0:
            return True
        seen = {(0, 0)}
        queue = deque([(0, 0)])
        while queue:
            x, y = queue.popleft()
            for nx, ny, _ in grid.get_open_neighbors(x, y):
                if (nx, ny) not in seen:
                    seen.add((nx, ny))
                    queue.append((nx, ny))
        return len(seen) == total

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """A tree: connected and exactly cells - 1 passages."""
        total = grid.width * grid.height
        return MazeStats.edge_count(grid) == max(total - 1, 0) and MazeStats.is_connected(grid)

    @staticmethod
    def calculate_stats(grid: Grid):
        counts = MazeStats.passage_counts(grid)
        dead_ends = int(np.count_nonzero(counts == 1))
        corridors = int(np.count_nonzero(counts == 2))
        junctions = int(np.count_nonzero(counts >= 3))

        total = grid.width * grid.height
        return {
            "cells": total,
            "passages": int(counts.sum()) // 2,
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
            "perfect": MazeStats.is_perfect(grid),
        }
