from array import array
from typing import Iterable, Iterator, List, Tuple

class Grid:
    # Passage bits: a set bit means there is NO wall toward that neighbour
    EMPTY = 0
    UP    = 0b00000001
    DOWN  = 0b00000010
    LEFT  = 0b00000100
    RIGHT = 0b00001000

    # Flags
    PATH    = 0b00010000
    VISITED = 0b00100000

    PASSAGES = UP | DOWN | LEFT | RIGHT
    TRANSIENT = PATH | VISITED

    # Direction Helpers
    DX = {UP: 0, DOWN: 0, LEFT: -1, RIGHT: 1}
    DY = {UP: -1, DOWN: 1, LEFT: 0, RIGHT: 0}
    OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

    __slots__ = ('width', 'height', 'rows')

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"Invalid grid size {width}x{height}")
        self.width = width
        self.height = height
        # One 'B' (unsigned char) array per row, fully walled
        self.rows: List[array] = [array('B', [self.EMPTY] * width) for _ in range(height)]

    @classmethod
    def from_rows(cls, width: int, rows: Iterable[Iterable[int]]) -> "Grid":
        grid = cls(width, 0)
        for row in rows:
            cells = array('B', row)
            if len(cells) != width:
                raise ValueError(f"Row has {len(cells)} cells, expected {width}")
            grid.rows.append(cells)
        grid.height = len(grid.rows)
        return grid

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if self.in_bounds(x, y):
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get(self, x: int, y: int) -> int:
        self.get_index(x, y)
        return self.rows[y][x]

    def carve_path(self, x1: int, y1: int, dir_bit: int):
        """
        Opens the passage between (x1, y1) and its neighbour in 'dir_bit'.
        Also sets the OPPOSITE bit on the neighbour.
        """
        x2 = x1 + self.DX[dir_bit]
        y2 = y1 + self.DY[dir_bit]
        if not (self.in_bounds(x1, y1) and self.in_bounds(x2, y2)):
            raise IndexError(f"Cannot carve {dir_bit} from ({x1}, {y1})")

        self.rows[y1][x1] |= dir_bit
        self.rows[y2][x2] |= self.OPPOSITE[dir_bit]

    def has_passage(self, x: int, y: int, dir_bit: int) -> bool:
        """True if (x, y) opens toward dir_bit AND the neighbour is on the grid."""
        if not (self.rows[y][x] & dir_bit):
            return False
        return self.in_bounds(x + self.DX[dir_bit], y + self.DY[dir_bit])

    def set_visited(self, x: int, y: int, visited: bool = True):
        if visited:
            self.rows[y][x] |= self.VISITED
        else:
            self.rows[y][x] &= ~self.VISITED

    def is_visited(self, x: int, y: int) -> bool:
        return (self.rows[y][x] & self.VISITED) != 0

    def set_path(self, x: int, y: int):
        self.rows[y][x] |= self.PATH

    def is_path(self, x: int, y: int) -> bool:
        return (self.rows[y][x] & self.PATH) != 0

    def clear_transient(self):
        """Drops solver flags, leaving only passage bits."""
        for row in self.rows:
            for x in range(self.width):
                row[x] &= self.PASSAGES

    def passages(self) -> List[List[int]]:
        """Rows as plain lists with transient flags masked off."""
        return [[cell & self.PASSAGES for cell in row] for row in self.rows]

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction) for every open passage of (x, y),
        in LEFT, UP, DOWN, RIGHT order.
        """
        for dir_bit in (self.LEFT, self.UP, self.DOWN, self.RIGHT):
            if self.has_passage(x, y, dir_bit):
                yield (x + self.DX[dir_bit], y + self.DY[dir_bit], dir_bit)
