"""
Ruled ("ASCII") maze format.

     ________________________
    |                       |
    |  ___    __    ______  |
    |     |  |  |  |        |
    |___  |  |  |  |  ___   |
    |     |     |  |     |  |
    |_____|_____|__|_____|__|

Every maze row is two text lines (a wall line and a passage line) and the
maze is closed by one more wall line. Each cell is three characters wide:
two interior characters and the boundary to its right. The whole maze is
shifted right by MARGIN spaces so labels such as "Start" fit in front.
"""
import logging
from array import array
from typing import Iterable, List, Optional, Sequence, TextIO
from asciimaze.core.grid import Grid
from asciimaze.core.maze import MARGIN, Maze
from asciimaze.algo.base import RowState

logger = logging.getLogger(__name__)

WALL = '_'
BOUNDARY = '|'

class RuledRenderer:
    DEBUG_MODES = (None, "sets", "rows")

    def __init__(self, debug: Optional[str] = None):
        if debug not in self.DEBUG_MODES:
            raise ValueError(f"Unknown debug mode {debug!r}")
        self.debug = debug

    def render_row(self, cells: Sequence[int], previous: Sequence[int],
                   is_first: bool, is_last: bool,
                   labels: Optional[Sequence[int]] = None) -> List[str]:
        pad = " " * MARGIN

        # Top line, the corner char depends on the cell above
        top = [pad, " " if is_first else BOUNDARY]
        for cell, above in zip(cells, previous):
            top.append("  " if cell & Grid.UP else "__")
            if above & Grid.RIGHT and not cell & Grid.RIGHT:
                top.append(" ")
            elif not is_first and not above & Grid.RIGHT:
                top.append(BOUNDARY)
            else:
                top.append(WALL)

        # Middle line
        middle = [pad, BOUNDARY]
        for x, cell in enumerate(cells):
            if self.debug == "sets" and labels is not None:
                middle.append(f"{labels[x]:2d}")
            elif self.debug == "rows":
                middle.append(f"{cell & Grid.PASSAGES:2d}")
            else:
                middle.append("  ")
            middle.append(" " if cell & Grid.RIGHT else BOUNDARY)

        lines = ["".join(top), "".join(middle)]
        if is_last:
            bottom = [pad]
            for cell in cells:
                bottom.append(WALL if cell & Grid.LEFT else BOUNDARY)
                bottom.append("__")
            bottom.append(BOUNDARY)
            lines.append("".join(bottom))
        return lines

    def render_state(self, state: RowState) -> List[str]:
        return self.render_row(state.cells, state.previous,
                               state.is_first, state.is_last, state.labels)

    def render_grid(self, grid: Grid) -> List[str]:
        lines: List[str] = []
        previous = array('B', [Grid.EMPTY] * grid.width)
        for y, row in enumerate(grid.rows):
            lines.extend(self.render_row(row, previous, y == 0, y == grid.height - 1))
            previous = row
        return lines

def _char(line: Optional[str], index: int) -> Optional[str]:
    # Anything past the end of a short line counts as missing
    if line is None or index < 0 or index >= len(line):
        return None
    return line[index]

class RuledParser:
    """Turns ruled maze text back into a Grid of passage bits."""

    @staticmethod
    def convert_row(above: Optional[array], b: str, c: Optional[str], width: int) -> array:
        """
        Converts three lines of text into one row.

             _______________________  <- line a (already parsed as `above`)
            |     |        |        | <- line b
            |__   |_____   |  ______| <- line c
        """
        row = array('B', [Grid.EMPTY] * width)
        for i in range(width):
            # No need to parse line a, the row above already knows
            if above is not None and above[i] & Grid.DOWN:
                row[i] = Grid.UP

            below = _char(c, i * 3 + MARGIN + 1)
            if below is not None and below != WALL:
                row[i] |= Grid.DOWN

            # Left/right parsed once and applied to both cells
            if i > 0:
                side = _char(b, i * 3 + MARGIN)
                if side is not None and side != BOUNDARY:
                    row[i] |= Grid.LEFT
                    row[i - 1] |= Grid.RIGHT
        return row

    def parse(self, lines: Iterable[str]) -> Maze:
        lines = list(lines)
        width = 0
        if len(lines) > 1:
            width = max(0, (len(lines[1]) - MARGIN) // 3)

        rows: List[array] = []
        above = None
        for b_index in range(1, len(lines), 2):
            c = lines[b_index + 1] if b_index + 1 < len(lines) else None
            above = self.convert_row(above, lines[b_index], c, width)
            rows.append(above)

        # Nothing below the last row
        if rows:
            last = rows[-1]
            for i in range(width):
                last[i] &= ~Grid.DOWN

        grid = Grid.from_rows(width, rows)
        logger.debug(f"Parsed {grid.width}x{grid.height} maze from {len(lines)} lines")
        return Maze(grid=grid, lines=lines)

def read_maze(stream: TextIO) -> Maze:
    return RuledParser().parse(line.rstrip("\r\n") for line in stream)

def write_lines(lines: Iterable[str], stream: TextIO):
    for line in lines:
        stream.write(line + "\n")
