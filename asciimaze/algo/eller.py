"""
Eller's algorithm.

The maze is built one row at a time and only the current row, the row
above it (for the ruled renderer) and one set label per column are kept,
so memory is O(width) regardless of height.

Each row goes through:
    1. reset: cells continuing a DOWN passage become UP and keep their set,
       every other cell is cleared and gets a fresh set.
    2. random horizontal passages between cells of different sets
       (carving inside a set would close a loop), then random DOWN passages.
    3. every set that has no DOWN passage gets one, or it would be cut
       off from the rest of the maze.
    4. on the last row, every pair of neighbouring cells still in different
       sets is joined.
"""
import logging
import random
from array import array
from typing import Iterator
from asciimaze.core.grid import Grid
from asciimaze.core.row_sets import RowSetManager
from asciimaze.algo.base import Generator, RowState

logger = logging.getLogger(__name__)

class RowCarver:
    def __init__(self, sets: RowSetManager, rng: random.Random):
        self.sets = sets
        self.rng = rng

    def coin(self) -> bool:
        return self.rng.randrange(2) == 1

    def carve(self, row: array, is_last: bool):
        self.carve_horizontal(row)
        if is_last:
            self.close_final_row(row)
        else:
            self.carve_vertical(row)
            self.force_down(row)

    def carve_horizontal(self, row: array):
        sets = self.sets
        for x in range(1, sets.width):
            # Same set: the flip is ignored, joining would make a braid
            if self.coin() and not sets.same_set(x - 1, x):
                row[x] |= Grid.LEFT
                row[x - 1] |= Grid.RIGHT
                sets.union(sets.label(x), sets.label(x - 1))

    def carve_vertical(self, row: array):
        for x in range(self.sets.width):
            if self.coin():
                row[x] |= Grid.DOWN

    def force_down(self, row: array):
        sets = self.sets
        width = sets.width
        for x in range(width):
            if row[x] & Grid.DOWN:
                continue
            label = sets.label(x)
            if not any(sets.label(i) == label and row[i] & Grid.DOWN for i in range(width)):
                row[x] |= Grid.DOWN

    def close_final_row(self, row: array):
        sets = self.sets
        for x in range(sets.width - 1):
            if sets.same_set(x, x + 1):
                continue
            row[x] |= Grid.RIGHT
            row[x + 1] |= Grid.LEFT
            sets.union(sets.label(x + 1), sets.label(x))

class EllerGenerator(Generator):
    """Generator session owning the row buffers, the set labels and the rng."""

    def __init__(self, width: int, height: int, seed: int = None):
        super().__init__(width, height, seed)
        self.rng = random.Random(seed)
        self.sets = RowSetManager(width)
        self.carver = RowCarver(self.sets, self.rng)
        self.row = array('B', [Grid.EMPTY] * width)
        self.previous_row = array('B', [Grid.EMPTY] * width)

    def make_row(self, index: int) -> RowState:
        is_last = index == self.height - 1
        self.previous_row[:] = self.row
        self.sets.reset(self.row)
        self.carver.carve(self.row, is_last)
        self.step_count += 1
        return RowState(
            index=index,
            cells=array('B', self.row),
            previous=array('B', self.previous_row),
            labels=self.sets.snapshot(),
            is_first=index == 0,
            is_last=is_last,
        )

    def run(self) -> Iterator[RowState]:
        logger.debug(f"Eller generation {self.width}x{self.height} (seed={self.seed})")
        for index in range(self.height):
            yield self.make_row(index)
            if self.step_count % 1000 == 0:
                logger.debug(f"Generated {self.step_count} rows")
