from array import array
from asciimaze.core.grid import Grid

class RowSetManager:
    """
    Disjoint-set labels for the row currently being carved.

    Two columns share a label when they are connected through passages
    carved so far. Labels are plain positive ints, one per column, so the
    whole partition costs O(width) memory.
    """

    __slots__ = ('width', 'labels')

    def __init__(self, width: int):
        if width <= 0:
            raise ValueError(f"Row width must be positive, got {width}")
        self.width = width
        # Start outside the 1..width range so the first reset never reuses them
        self.labels = array('I', [i + width + 1 for i in range(width)])

    def reset(self, row: array):
        """
        Prepares `row` for carving the next maze row.

        Columns that carried a DOWN passage keep their label and become UP.
        All other columns get a fresh label and are cleared to EMPTY.
        """
        next_label = 1
        for x in range(self.width):
            if row[x] & Grid.DOWN:
                row[x] = Grid.UP
            else:
                next_label = self.fresh_label(next_label)
                self.labels[x] = next_label
                row[x] = Grid.EMPTY

    def fresh_label(self, candidate: int) -> int:
        """Lowest label >= candidate not present anywhere in the row."""
        while candidate in self.labels:
            candidate += 1
        return candidate

    def union(self, a: int, b: int):
        """Merges set b into set a."""
        if a == b:
            return
        labels = self.labels
        for x in range(self.width):
            if labels[x] == b:
                labels[x] = a

    def same_set(self, x1: int, x2: int) -> bool:
        return self.labels[x1] == self.labels[x2]

    def label(self, x: int) -> int:
        return self.labels[x]

    def snapshot(self) -> array:
        return array('I', self.labels)
