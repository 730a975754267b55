"""
Tests for the DotGrid model: bounds policy and ring rotation.
"""

import unittest

from dotmatrix.grid import DotGrid


def _numbered(cols, rows):
    """Grid whose cell (x, y) holds y * 100 + x, for easy rotation checks."""
    grid = DotGrid(cols, rows, 0)
    for x in range(cols):
        for y in range(rows):
            grid.set(x, y, y * 100 + x)
    return grid


class TestDotGridAccess(unittest.TestCase):

    def setUp(self):
        self.grid = DotGrid(3, 2, 7)

    def test_initial_fill(self):
        self.assertEqual(self.grid.columns(), [[7, 7], [7, 7], [7, 7]])

    def test_set_and_get(self):
        self.assertTrue(self.grid.set(2, 1, 42))
        self.assertEqual(self.grid.get(2, 1), 42)

    def test_out_of_bounds_write_is_ignored(self):
        before = self.grid.columns()
        for x, y in [(-1, 0), (3, 0), (0, -1), (0, 2), (99, 99)]:
            self.assertFalse(self.grid.set(x, y, 1))
        self.assertEqual(self.grid.columns(), before)

    def test_out_of_bounds_read_raises(self):
        with self.assertRaises(IndexError):
            self.grid.get(3, 0)
        with self.assertRaises(IndexError):
            self.grid.get(-1, 0)

    def test_columns_is_a_copy(self):
        cols = self.grid.columns()
        cols[0][0] = 99
        self.assertEqual(self.grid.get(0, 0), 7)

    def test_fill(self):
        self.grid.fill(1)
        self.assertTrue(all(v == 1 for _, _, v in self.grid.iter_cells()))

    def test_iter_cells_is_row_major(self):
        order = [(x, y) for x, y, _ in self.grid.iter_cells()]
        self.assertEqual(order, [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)])

    def test_non_positive_dimensions_raise(self):
        with self.assertRaises(ValueError):
            DotGrid(0, 3, 0)
        with self.assertRaises(ValueError):
            DotGrid(3, -1, 0)


class TestDotGridRotation(unittest.TestCase):

    def test_shift_left_wraps_first_column(self):
        grid = _numbered(3, 2)
        grid.shift_left()
        self.assertEqual([grid.get(x, 0) for x in range(3)], [1, 2, 0])
        self.assertEqual([grid.get(x, 1) for x in range(3)], [101, 102, 100])

    def test_shift_right_wraps_last_column(self):
        grid = _numbered(3, 2)
        grid.shift_right()
        self.assertEqual([grid.get(x, 0) for x in range(3)], [2, 0, 1])

    def test_shift_up_wraps_first_row(self):
        grid = _numbered(2, 3)
        grid.shift_up()
        self.assertEqual([grid.get(0, y) for y in range(3)], [100, 200, 0])

    def test_shift_down_wraps_last_row(self):
        grid = _numbered(2, 3)
        grid.shift_down()
        self.assertEqual([grid.get(0, y) for y in range(3)], [200, 0, 100])

    def test_left_then_right_restores(self):
        grid = _numbered(4, 3)
        before = grid.columns()
        grid.shift_left()
        grid.shift_right()
        self.assertEqual(grid.columns(), before)

    def test_up_then_down_restores(self):
        grid = _numbered(4, 3)
        before = grid.columns()
        grid.shift_down()
        grid.shift_up()
        self.assertEqual(grid.columns(), before)

    def test_full_cycle_restores(self):
        grid = _numbered(5, 2)
        before = grid.columns()
        for _ in range(5):
            grid.shift_left()
        self.assertEqual(grid.columns(), before)


if __name__ == "__main__":
    unittest.main()
