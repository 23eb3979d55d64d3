from __future__ import annotations

import unittest

from iconpick.grid import CELL_HEIGHT, CELL_WIDTH, cell_origin, cell_position, compute_grid, truncate_results


class GridLayoutTests(unittest.TestCase):
    def test_geometry_derives_from_terminal_size(self) -> None:
        geometry = compute_grid(84, 30)

        self.assertEqual(geometry.items_per_row, 10)
        self.assertEqual(geometry.visible_rows, 6)
        self.assertEqual(geometry.visible_capacity, 60)

    def test_tiny_terminal_keeps_one_column_and_no_rows(self) -> None:
        geometry = compute_grid(5, 3)

        self.assertEqual(geometry.items_per_row, 1)
        self.assertEqual(geometry.visible_capacity, 0)

    def test_truncation_yields_min_of_count_and_capacity_in_order(self) -> None:
        for columns, rows in ((20, 10), (84, 30), (12, 14), (5, 3)):
            geometry = compute_grid(columns, rows)
            for count in range(0, 40, 3):
                results = [f"set:icon{i}" for i in range(count)]
                with self.subTest(columns=columns, rows=rows, count=count):
                    truncated = truncate_results(results, geometry)
                    self.assertEqual(len(truncated), min(count, geometry.visible_capacity))
                    self.assertEqual(truncated, results[: len(truncated)])

    def test_index_maps_to_row_and_column(self) -> None:
        geometry = compute_grid(84, 30)

        self.assertEqual(cell_position(0, geometry), (0, 0))
        self.assertEqual(cell_position(9, geometry), (0, 9))
        self.assertEqual(cell_position(13, geometry), (1, 3))

    def test_cell_origin_uses_fixed_cell_geometry(self) -> None:
        geometry = compute_grid(84, 30)

        self.assertEqual(cell_origin(0, geometry), (3, 2))
        self.assertEqual(cell_origin(13, geometry), (3 + 3 * CELL_WIDTH, 2 + CELL_HEIGHT))

    def test_last_cell_fits_inside_terminal(self) -> None:
        for columns, rows in ((20, 10), (84, 30), (121, 47)):
            geometry = compute_grid(columns, rows)
            with self.subTest(columns=columns, rows=rows):
                x, y = cell_origin(geometry.visible_capacity - 1, geometry)
                self.assertLessEqual(x + CELL_WIDTH - 1, columns)
                self.assertLessEqual(y + CELL_HEIGHT - 1, rows - 5)


if __name__ == "__main__":
    unittest.main()
