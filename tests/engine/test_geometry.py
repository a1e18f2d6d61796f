import unittest

from ludo_engine.config import config
from ludo_engine.errors import InvariantViolation
from ludo_engine.geometry import (
    CANONICAL_PATH,
    HOME_CELLS,
    PATHS,
    SAFE_SPOTS,
    display_cell,
    in_bounds,
    is_safe,
    path_cell,
    rotate,
)
from ludo_engine.types import Color


class PathGeometryTests(unittest.TestCase):
    def test_every_path_cell_is_on_the_board(self):
        for color in Color:
            for i in range(config.PATH_LENGTH):
                self.assertTrue(in_bounds(path_cell(color, i)), (color, i))

    def test_red_path_is_canonical(self):
        self.assertEqual(len(CANONICAL_PATH), 56)
        for i, cell in enumerate(CANONICAL_PATH):
            self.assertEqual(path_cell(Color.RED, i), cell)

    def test_other_colors_are_quarter_turns(self):
        for color in Color:
            for i in range(config.PATH_LENGTH):
                x, y = path_cell(Color.RED, i)
                for _ in range(int(color)):
                    x, y = y, 14 - x
                self.assertEqual(path_cell(color, i), (x, y))

    def test_rotate_four_times_is_identity(self):
        for cell in CANONICAL_PATH:
            self.assertEqual(rotate(cell, 4), cell)

    def test_green_start_is_red_ring_cell(self):
        self.assertEqual(path_cell(Color.GREEN, 0), (1, 6))
        self.assertEqual(path_cell(Color.GREEN, 0), path_cell(Color.RED, 39))
        # Red 10 and green 23 share a cell; used by the capture tests
        self.assertEqual(path_cell(Color.RED, 10), (14, 6))
        self.assertEqual(path_cell(Color.GREEN, 23), (14, 6))

    def test_home_stretches_are_private(self):
        ring = {path_cell(c, i) for c in Color for i in range(config.HOME_STRETCH_START)}
        stretches = [
            {path_cell(c, i) for i in range(config.HOME_STRETCH_START, config.PATH_LENGTH)}
            for c in Color
        ]
        for idx, stretch in enumerate(stretches):
            self.assertEqual(len(stretch), 5)
            self.assertFalse(stretch & ring)
            for other in stretches[idx + 1 :]:
                self.assertFalse(stretch & other)

    def test_path_cell_undefined_for_home_and_finish(self):
        for index in (-1, 56, 57):
            with self.assertRaises(InvariantViolation):
                path_cell(Color.RED, index)

    def test_paths_are_read_only(self):
        self.assertIsInstance(PATHS, tuple)
        with self.assertRaises(TypeError):
            PATHS[0][0] = (0, 0)


class CellTests(unittest.TestCase):
    def test_safe_spots(self):
        self.assertEqual(len(SAFE_SPOTS), 8)
        ring = {path_cell(Color.RED, i) for i in range(config.HOME_STRETCH_START)}
        self.assertTrue(SAFE_SPOTS <= ring)
        for color in Color:
            self.assertTrue(is_safe(path_cell(color, 0)))
        self.assertFalse(is_safe((14, 6)))

    def test_home_cells(self):
        seen = set()
        for color in Color:
            self.assertEqual(len(HOME_CELLS[color]), 4)
            seen.update(HOME_CELLS[color])
        self.assertEqual(len(seen), 16)
        self.assertEqual(HOME_CELLS[Color.RED][0], (10, 1))

    def test_display_cell(self):
        self.assertEqual(display_cell(Color.BLUE, 2, -1), HOME_CELLS[Color.BLUE][2])
        self.assertEqual(display_cell(Color.RED, 0, 5), (9, 6))
        self.assertEqual(display_cell(Color.RED, 0, 56), path_cell(Color.RED, 55))


if __name__ == "__main__":
    unittest.main()
