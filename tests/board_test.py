"""Test cases for the grid model."""
import unittest

import numpy as np

from sudoku_site.errors import InvalidArgumentError
from sudoku_site.game_logic.board import (
    as_grid,
    can_place,
    clear,
    copy_grid,
    count_holes,
    format_board,
    grid_from_string,
    grid_to_string,
    is_filled,
    is_valid_partial,
    new_grid,
)
from tests.tools import PUZZLE, PUZZLE_STRING, SOLUTION, SOLUTION_STRING, fresh


class TestGridBasics(unittest.TestCase):
    def test_new_grid_is_empty(self):
        grid = new_grid()
        self.assertEqual(len(grid), 9)
        self.assertTrue(all(len(row) == 9 for row in grid))
        self.assertEqual(count_holes(grid), 81)

    def test_clear_zeroes_in_place(self):
        grid = fresh(SOLUTION)
        rows = list(grid)
        clear(grid)
        self.assertEqual(grid, new_grid())
        # same row objects, nothing reallocated
        self.assertTrue(all(a is b for a, b in zip(rows, grid)))

    def test_copy_is_independent(self):
        source = fresh(PUZZLE)
        duplicate = copy_grid(source)
        self.assertEqual(duplicate, source)
        duplicate[0][0] = 0
        duplicate[8][8] = 1
        self.assertEqual(source, PUZZLE)

    def test_copy_of_numpy_rows_is_independent(self):
        arr = np.array(PUZZLE)
        duplicate = copy_grid(arr)
        duplicate[0][0] = 0
        self.assertEqual(arr[0, 0], 5)

    def test_count_holes_and_is_filled(self):
        self.assertEqual(count_holes(SOLUTION), 0)
        self.assertEqual(count_holes(PUZZLE), 51)
        self.assertTrue(is_filled(SOLUTION))
        self.assertFalse(is_filled(PUZZLE))
        self.assertFalse(is_filled(None))


class TestCanPlace(unittest.TestCase):
    def test_rejects_value_in_row_column_or_box(self):
        self.assertFalse(can_place(PUZZLE, 0, 3, 3))  # row only, 3 is at (0, 1)
        self.assertFalse(can_place(PUZZLE, 0, 3, 4))  # column only, 4 is at (7, 3)
        self.assertFalse(can_place(PUZZLE, 1, 1, 8))  # box only, 8 is at (2, 2)

    def test_accepts_value_absent_everywhere(self):
        self.assertTrue(can_place(PUZZLE, 0, 2, 4))
        self.assertTrue(can_place(PUZZLE, 0, 2, 1))

    def test_box_origin(self):
        grid = new_grid()
        grid[4][4] = 7
        for r in range(3, 6):
            for c in range(3, 6):
                if (r, c) != (4, 4):
                    self.assertFalse(can_place(grid, r, c, 7))
        # diagonal neighbour outside the box, row and column
        self.assertTrue(can_place(grid, 2, 2, 7))
        self.assertTrue(can_place(grid, 6, 6, 7))

    def test_out_of_range_arguments(self):
        grid = new_grid()
        for row, col, value in [(-1, 0, 1), (0, 9, 1), (9, 0, 1), (0, 0, 0), (0, 0, 10)]:
            with self.subTest(row=row, col=col, value=value):
                self.assertFalse(can_place(grid, row, col, value))
        self.assertFalse(can_place(None, 0, 0, 1))

    def test_malformed_grid_or_arguments(self):
        grid = new_grid()
        for name, args in [
            ("short grid", ([[0] * 9] * 8, 8, 0, 1)),
            ("ragged grid", (new_grid()[:8] + [[0, 0, 0]], 8, 5, 1)),
            ("string value", (grid, 0, 0, "5")),
            ("float value", (grid, 0, 0, 5.0)),
            ("string row", (grid, "0", 0, 5)),
        ]:
            with self.subTest(name):
                self.assertFalse(can_place(*args))

    def test_numpy_grid(self):
        arr = np.array(PUZZLE)
        self.assertFalse(can_place(arr, 0, 3, 3))
        self.assertTrue(can_place(arr, 0, 2, 4))
        self.assertEqual(arr.tolist(), PUZZLE)

    def test_filled_cell_conflicts_with_itself(self):
        # The cell is not vacated by can_place
        self.assertFalse(can_place(SOLUTION, 0, 0, SOLUTION[0][0]))
        grid = fresh(SOLUTION)
        grid[0][0] = 0
        self.assertTrue(can_place(grid, 0, 0, SOLUTION[0][0]))


class TestIsValidPartial(unittest.TestCase):
    def test_valid_grids(self):
        self.assertTrue(is_valid_partial(new_grid()))
        self.assertTrue(is_valid_partial(PUZZLE))
        # every filled cell is vacated before it is checked
        self.assertTrue(is_valid_partial(SOLUTION))

    def test_duplicates(self):
        row_dup = new_grid()
        row_dup[3][0] = row_dup[3][8] = 4
        col_dup = new_grid()
        col_dup[0][5] = col_dup[7][5] = 2
        box_dup = new_grid()
        box_dup[6][6] = box_dup[8][8] = 9
        for name, grid in [("row", row_dup), ("column", col_dup), ("box", box_dup)]:
            with self.subTest(name):
                self.assertFalse(is_valid_partial(grid))

    def test_out_of_range_values(self):
        for value in (-1, 10):
            grid = new_grid()
            grid[2][2] = value
            with self.subTest(value=value):
                self.assertFalse(is_valid_partial(grid))
        self.assertFalse(is_valid_partial(None))

    def test_pure_and_idempotent(self):
        grid = fresh(PUZZLE)
        first = is_valid_partial(grid)
        second = is_valid_partial(grid)
        self.assertEqual(first, second)
        self.assertEqual(grid, PUZZLE)

        broken = fresh(PUZZLE)
        broken[0][2] = 5
        self.assertEqual(is_valid_partial(broken), is_valid_partial(broken))
        self.assertFalse(is_valid_partial(broken))

    def test_numpy_grid_is_not_modified(self):
        arr = np.array(PUZZLE)
        self.assertTrue(is_valid_partial(arr))
        self.assertTrue(is_valid_partial(arr))
        self.assertEqual(arr.tolist(), PUZZLE)

        dup = np.zeros((9, 9), dtype=int)
        dup[0, 0] = dup[0, 5] = 3
        self.assertFalse(is_valid_partial(dup))
        self.assertFalse(is_valid_partial(dup))
        self.assertEqual(dup[0, 0], 3)
        self.assertEqual(dup[0, 5], 3)

    def test_malformed_grids(self):
        bad_inputs = {
            "short": [[0] * 9] * 8,
            "ragged": PUZZLE[:8] + [[1, 2, 3]],
            "strings": [["1"] * 9 for _ in range(9)],
            "text": "not a grid",
        }
        for name, obj in bad_inputs.items():
            with self.subTest(name):
                self.assertFalse(is_valid_partial(obj))


class TestAsGrid(unittest.TestCase):
    def test_list_grid_is_returned_as_is(self):
        grid = fresh(PUZZLE)
        self.assertIs(as_grid(grid), grid)

    def test_numpy_and_tuples_are_converted(self):
        converted = as_grid(np.array(PUZZLE, dtype=np.int8))
        self.assertEqual(converted, PUZZLE)
        self.assertTrue(all(type(v) is int for row in converted for v in row))
        self.assertEqual(as_grid(tuple(tuple(row) for row in PUZZLE)), PUZZLE)

    def test_malformed(self):
        bad_inputs = {
            "none": None,
            "short": PUZZLE[:8],
            "ragged": PUZZLE[:8] + [[1, 2, 3]],
            "floats": [[0.5] * 9 for _ in range(9)],
            "strings": [["1"] * 9 for _ in range(9)],
            "flat": list(range(81)),
        }
        for name, obj in bad_inputs.items():
            with self.subTest(name):
                with self.assertRaises(InvalidArgumentError):
                    as_grid(obj)


class TestGridStrings(unittest.TestCase):
    def test_to_string(self):
        self.assertEqual(grid_to_string(SOLUTION), SOLUTION_STRING)
        self.assertEqual(len(grid_to_string(PUZZLE)), 81)

    def test_from_string_accepts_dots_and_whitespace(self):
        dotted = PUZZLE_STRING.replace("0", ".")
        spaced = "\n".join(dotted[i:i + 9] for i in range(0, 81, 9))
        self.assertEqual(grid_from_string(spaced), PUZZLE)
        self.assertEqual(grid_from_string(PUZZLE_STRING), PUZZLE)

    def test_from_string_rejects_bad_input(self):
        for text in (None, PUZZLE_STRING[:80], PUZZLE_STRING + "1", "x" + PUZZLE_STRING[1:]):
            with self.subTest(text=text):
                with self.assertRaises(InvalidArgumentError):
                    grid_from_string(text)

    def test_format_board(self):
        text = format_board(PUZZLE)
        lines = text.splitlines()
        self.assertEqual(len(lines), 13)  # 9 rows + 4 separators
        self.assertTrue(lines[1].startswith("|| 5 3 . | . 7 . | . . . "))


if __name__ == "__main__":
    unittest.main()
