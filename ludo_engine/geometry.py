"""
Static board geometry: per-color path cells, home cells and safe spots.

Coordinates are (x, y) cells on the 15x15 grid, top-left at (0, 0).
RED's path is the canonical one; every other color walks the same path
rotated a quarter turn about the board center per color index.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

from .config import config
from .errors import InvariantViolation
from .types import Cell, Color

# fmt: off
CANONICAL_PATH: Tuple[Cell, ...] = (
    (8, 1), (8, 2), (8, 3), (8, 4), (8, 5),
    (9, 6), (10, 6), (11, 6), (12, 6), (13, 6), (14, 6),
    (14, 7), (14, 8),
    (13, 8), (12, 8), (11, 8), (10, 8), (9, 8),
    (8, 9), (8, 10), (8, 11), (8, 12), (8, 13), (8, 14),
    (7, 14), (6, 14),
    (6, 13), (6, 12), (6, 11), (6, 10), (6, 9),
    (5, 8), (4, 8), (3, 8), (2, 8), (1, 8), (0, 8),
    (0, 7), (0, 6),
    (1, 6), (2, 6), (3, 6), (4, 6), (5, 6),
    (6, 5), (6, 4), (6, 3), (6, 2), (6, 1), (6, 0),
    (7, 0),
    # home stretch
    (7, 1), (7, 2), (7, 3), (7, 4), (7, 5),
)

HOME_CELLS: Dict[Color, Tuple[Cell, ...]] = {
    Color.RED:    ((10, 1), (12, 1), (10, 3), (12, 3)),
    Color.GREEN:  ((1, 1), (3, 1), (1, 3), (3, 3)),
    Color.YELLOW: ((1, 10), (3, 10), (1, 12), (3, 12)),
    Color.BLUE:   ((10, 10), (12, 10), (10, 12), (12, 12)),
}

SAFE_SPOTS: FrozenSet[Cell] = frozenset({
    (8, 1), (1, 6), (6, 13), (13, 8),
    (12, 6), (6, 2), (2, 8), (8, 12),
})
# fmt: on


def rotate(cell: Cell, times: int = 1) -> Cell:
    """Quarter-turn ``cell`` about the board center ``times`` times."""
    x, y = cell
    edge = config.BOARD_SIZE - 1
    for _ in range(times % 4):
        x, y = y, edge - x
    return x, y


def _build_paths() -> Tuple[Tuple[Cell, ...], ...]:
    if len(CANONICAL_PATH) != config.PATH_LENGTH:
        raise InvariantViolation(
            f"Canonical path has {len(CANONICAL_PATH)} cells, expected {config.PATH_LENGTH}"
        )
    return tuple(
        tuple(rotate(cell, int(color)) for cell in CANONICAL_PATH) for color in Color
    )


PATHS = _build_paths()


def path_cell(color: Color | int, index: int) -> Cell:
    """Board cell of ``color``'s path at ``index`` (0..55).

    Home (-1) and finish (56) have no path cell; callers special-case them.
    """
    if not 0 <= index <= config.LAST_PATH_INDEX:
        raise InvariantViolation(f"No path cell for index {index}")
    return PATHS[int(color)][index]


def home_cell(color: Color | int, token_id: int) -> Cell:
    cells = HOME_CELLS[Color(color)]
    if not 0 <= token_id < len(cells):
        raise InvariantViolation(f"No home cell for token id {token_id}")
    return cells[token_id]


def display_cell(color: Color | int, token_id: int, index: int) -> Cell:
    """Cell a token is shown on: home cell, path cell, or last path cell once finished."""
    if index == config.HOME_INDEX:
        return home_cell(color, token_id)
    if index == config.FINISH_INDEX:
        return path_cell(color, config.LAST_PATH_INDEX)
    return path_cell(color, index)


def is_safe(cell: Cell) -> bool:
    return tuple(cell) in SAFE_SPOTS


def on_shared_ring(index: int) -> bool:
    return 0 <= index < config.HOME_STRETCH_START


def in_bounds(cell: Cell) -> bool:
    x, y = cell
    return 0 <= x < config.BOARD_SIZE and 0 <= y < config.BOARD_SIZE
