from dataclasses import dataclass, field
from typing import Iterable, List, Tuple
from asciimaze.core.grid import Grid

# Whitespace before the first maze column of the ruled format
MARGIN = 5
# Char used to fill in the solution path
PATH_MARKER = 'X'

@dataclass
class Maze:
    """A parsed ruled maze: the passage grid plus the text it came from."""
    grid: Grid
    lines: List[str] = field(default_factory=list)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def start(self) -> Tuple[int, int]:
        # "Start" sits at the bottom left
        return (0, self.grid.height - 1)

    @property
    def destination(self) -> Tuple[int, int]:
        # "END" sits at the top right
        return (self.grid.width - 1, 0)

    def mark_cell(self, x: int, y: int, marker: str = PATH_MARKER):
        line_no = y * 2 + 1
        col = x * 3 + MARGIN + 1
        while len(self.lines) <= line_no:
            self.lines.append("")
        line = self.lines[line_no].ljust(col + 2)
        self.lines[line_no] = line[:col] + marker * 2 + line[col + 2:]

    def mark_path(self, path: Iterable[Tuple[int, int]], marker: str = PATH_MARKER):
        for x, y in path:
            self.mark_cell(x, y, marker)

    def text(self) -> str:
        return "".join(line + "\n" for line in self.lines)
