import logging
from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple
from asciimaze.core.grid import Grid

logger = logging.getLogger(__name__)

class Solver(ABC):
    def __init__(self, grid: Grid):
        self.grid = grid
        self.path: List[Tuple[int, int]] = []
        self.found = False
        # Uses Grid.VISITED bits instead of a set
        self.visited_count = 0

    @abstractmethod
    def run(self, start: Tuple[int, int], end: Tuple[int, int]) -> Iterator[str]:
        pass

    def solve(self, start: Tuple[int, int], end: Tuple[int, int]) -> bool:
        for _ in self.run(start, end):
            pass
        return self.found

class PathFinder(Solver):
    """
    Recursive backtracker, run on an explicit stack so large mazes cannot
    hit the interpreter's recursion limit.

    Every cell entered gets the VISITED bit whether or not it leads anywhere,
    so each cell is expanded at most once even when the maze has loops.
    Neighbours are tried LEFT, UP, DOWN, RIGHT, never straight back the way
    the search came in.
    """

    # (direction, reverse of direction)
    ORDER = (
        (Grid.LEFT, Grid.RIGHT),
        (Grid.UP, Grid.DOWN),
        (Grid.DOWN, Grid.UP),
        (Grid.RIGHT, Grid.LEFT),
    )

    def _enter(self, x: int, y: int) -> bool:
        if self.grid.is_visited(x, y):
            return False
        self.grid.set_visited(x, y)
        self.visited_count += 1
        return True

    def run(self, start: Tuple[int, int], end: Tuple[int, int]) -> Iterator[str]:
        self.path = []
        self.found = False
        grid = self.grid

        if not (grid.in_bounds(*start) and grid.in_bounds(*end)):
            logger.debug(f"Start {start} or end {end} outside {grid.width}x{grid.height} grid")
            yield "No path"
            return

        if not self._enter(*start):
            yield "No path"
            return

        if start == end:
            self._finish([start])
            yield "Solved"
            return

        # Frame: [x, y, direction we arrived by, index of next option in ORDER]
        stack = [[start[0], start[1], Grid.EMPTY, 0]]

        count = 0
        while stack:
            frame = stack[-1]
            x, y, came_from, option = frame
            if option == len(self.ORDER):
                # Dead end, backtrack
                stack.pop()
                continue
            frame[3] = option + 1

            direction, reverse = self.ORDER[option]
            if came_from == reverse or not grid.has_passage(x, y, direction):
                continue

            nx = x + Grid.DX[direction]
            ny = y + Grid.DY[direction]
            if not self._enter(nx, ny):
                continue

            if (nx, ny) == end:
                # Destination: don't bother checking its children
                self._finish([(f[0], f[1]) for f in stack] + [(nx, ny)])
                break

            stack.append([nx, ny, direction, 0])

            count += 1
            if count % 100 == 0:
                yield f"Stack: {len(stack)}"

        if self.found:
            logger.debug(f"Path of {len(self.path)} cells, {self.visited_count} cells visited")
            yield "Solved"
        else:
            logger.debug(f"No path after visiting {self.visited_count} cells")
            yield "No path"

    def _finish(self, path: List[Tuple[int, int]]):
        self.path = path
        self.found = True
        for x, y in path:
            self.grid.set_path(x, y)
