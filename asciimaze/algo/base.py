from abc import ABC, abstractmethod
from array import array
from dataclasses import dataclass
from typing import Iterator, Optional
from asciimaze.core.grid import Grid

@dataclass
class RowState:
    """One finished maze row, plus what the renderers need to draw it."""
    index: int
    cells: array
    previous: array
    labels: Optional[array] = None
    is_first: bool = False
    is_last: bool = False

class Generator(ABC):
    def __init__(self, width: int, height: int, seed: int = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Maze width and height must be greater than 0 (got {width}x{height})")
        self.width = width
        self.height = height
        self.seed = seed
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[RowState]:
        """
        Yields each maze row as soon as it is final.
        Rows are yielded top to bottom and never touched again.
        """
        pass

    def run_all(self) -> Grid:
        """Helper to run the generator to completion and keep every row."""
        return Grid.from_rows(self.width, (state.cells for state in self.run()))
