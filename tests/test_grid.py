import unittest

from app_utils.grid import GridSpec, GridTooDense, build_cells, compute_layout
from config import COUNTDOWN_WIDGET, HABIT_WIDGET


class TestComputeLayout(unittest.TestCase):
    def test_31_day_month(self):
        spec = compute_layout(31, 3, HABIT_WIDGET.widget_width, HABIT_WIDGET.padding, HABIT_WIDGET.spacing)
        self.assertEqual(spec.cols_per_row, 11)
        self.assertEqual(spec.last_row_count, 9)
        self.assertEqual(spec.cell_size_px, 28)
        self.assertEqual(spec.row_counts, (11, 11, 9))

    def test_countdown_ten_days(self):
        w = COUNTDOWN_WIDGET
        spec = compute_layout(10, w.rows, w.widget_width, w.padding, w.spacing)
        self.assertEqual(spec.cols_per_row, 4)
        self.assertEqual(spec.last_row_count, 2)
        self.assertEqual(spec.cell_size_px, 79)

    def test_row_invariants_for_many_totals(self):
        for total in range(1, 400):
            with self.subTest(total=total):
                spec = compute_layout(total, 3, 10000, 8, 3)
                self.assertEqual(sum(spec.row_counts), total)
                self.assertGreaterEqual(spec.last_row_count, 1)
                self.assertLessEqual(spec.last_row_count, spec.cols_per_row)
                self.assertLessEqual(spec.rows_used, 3)
                if spec.rows_used == 3:
                    self.assertLess(spec.cols_per_row * 2, total)
                    self.assertLessEqual(total, spec.cols_per_row * 3)

    def test_small_totals_use_fewer_rows(self):
        self.assertEqual(compute_layout(1, 3, 342, 8, 3).row_counts, (1,))
        self.assertEqual(compute_layout(2, 3, 342, 8, 3).row_counts, (1, 1))
        self.assertEqual(compute_layout(3, 3, 342, 8, 3).row_counts, (1, 1, 1))
        self.assertEqual(compute_layout(4, 3, 342, 8, 3).row_counts, (2, 2))

    def test_zero_cells_is_empty_grid(self):
        spec = compute_layout(0, 3, 342, 8, 3)
        self.assertEqual(spec.row_counts, ())
        self.assertEqual(spec.rows_used, 0)
        self.assertEqual(build_cells(spec, lambda idx: True), [])

    def test_bad_arguments(self):
        with self.assertRaises(ValueError):
            compute_layout(-1, 3, 342, 8, 3)
        with self.assertRaises(ValueError):
            compute_layout(10, 0, 342, 8, 3)

    def test_too_dense(self):
        with self.assertRaises(GridTooDense) as ctx:
            compute_layout(300, 3, 342, 8, 3)
        self.assertEqual(ctx.exception.cols_per_row, 100)
        self.assertLess(ctx.exception.cell_size_px, 1)
        self.assertIsInstance(ctx.exception, ValueError)


class TestBuildCells(unittest.TestCase):
    def test_indices_are_row_major(self):
        spec = GridSpec(total_cells=7, rows=3, cols_per_row=3, last_row_count=1, cell_size_px=10)
        cells = build_cells(spec, lambda idx: idx < 4)
        self.assertEqual([len(r) for r in cells], [3, 3, 1])
        self.assertEqual([c.index for r in cells for c in r], list(range(7)))
        self.assertEqual(cells[1][0].row, 1)
        self.assertEqual(cells[1][0].col, 0)
        self.assertEqual(sum(c.filled for r in cells for c in r), 4)
        self.assertTrue(cells[1][0].filled)
        self.assertFalse(cells[1][1].filled)


if __name__ == "__main__":
    unittest.main()
