"""
Block maze format, two characters per cell with shared columns.

    XXXXXXXXXXXXXXXXX
    X               X
    X XXX XXX XXXXX X
    X   X X X X     X
    XXX X X X X XXX X
    X   X   X X   X X
    XXXXXXXXXXXXXXXXX

Much easier to emit than the ruled format and smaller for big mazes.
"""
from typing import List, Sequence
from asciimaze.core.grid import Grid
from asciimaze.algo.base import RowState

class BlockRenderer:
    def render_row(self, cells: Sequence[int], is_last: bool) -> List[str]:
        top = "".join("X " if cell & Grid.UP else "XX" for cell in cells) + "X"
        middle = "".join("  " if cell & Grid.LEFT else "X " for cell in cells) + "X"
        lines = [top, middle]
        if is_last:
            lines.append("XX" * len(cells) + "X")
        return lines

    def render_state(self, state: RowState) -> List[str]:
        return self.render_row(state.cells, state.is_last)

    def render_grid(self, grid: Grid) -> List[str]:
        lines: List[str] = []
        for y, row in enumerate(grid.rows):
            lines.extend(self.render_row(row, y == grid.height - 1))
        return lines
