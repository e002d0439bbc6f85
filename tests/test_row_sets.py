import unittest
import sys
import os
from array import array

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from asciimaze.core.grid import Grid
from asciimaze.core.row_sets import RowSetManager

class TestRowSetManager(unittest.TestCase):
    def test_initial_labels_outside_row_range(self):
        sets = RowSetManager(3)
        self.assertEqual(list(sets.labels), [4, 5, 6])

    def test_invalid_width(self):
        with self.assertRaises(ValueError):
            RowSetManager(0)

    def test_reset_fresh_row(self):
        sets = RowSetManager(3)
        row = array('B', [Grid.LEFT, Grid.RIGHT, Grid.EMPTY])
        sets.reset(row)
        self.assertEqual(list(sets.labels), [1, 2, 3])
        self.assertEqual(list(row), [Grid.EMPTY] * 3)

    def test_reset_keeps_down_columns(self):
        sets = RowSetManager(3)
        sets.reset(array('B', [0, 0, 0]))

        row = array('B', [Grid.DOWN | Grid.RIGHT, Grid.LEFT, Grid.DOWN])
        sets.reset(row)
        # Column 1 skips 1 (col 0), 2 (its own old label) and 3 (col 2)
        self.assertEqual(list(sets.labels), [1, 4, 3])
        self.assertEqual(list(row), [Grid.UP, Grid.EMPTY, Grid.UP])

    def test_fresh_labels_scan_forward(self):
        sets = RowSetManager(3)
        sets.labels = array('I', [1, 4, 3])
        sets.reset(array('B', [0, 0, 0]))
        # Never goes back below the last label handed out in this reset
        self.assertEqual(list(sets.labels), [2, 5, 6])

    def test_fresh_label_is_unused(self):
        sets = RowSetManager(4)
        sets.labels = array('I', [1, 2, 4, 4])
        self.assertEqual(sets.fresh_label(1), 3)
        self.assertEqual(sets.fresh_label(4), 5)

    def test_union(self):
        sets = RowSetManager(4)
        sets.labels = array('I', [1, 2, 1, 3])
        sets.union(3, 1)
        self.assertEqual(list(sets.labels), [3, 2, 3, 3])
        self.assertTrue(sets.same_set(0, 3))
        self.assertFalse(sets.same_set(0, 1))

    def test_snapshot_is_a_copy(self):
        sets = RowSetManager(2)
        snap = sets.snapshot()
        sets.union(1, sets.label(0))
        self.assertEqual(list(snap), [3, 4])

if __name__ == '__main__':
    unittest.main()
