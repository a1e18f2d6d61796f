"""
Presentation-side views of a snapshot: cell occupancy, a numpy grid and
a plain-text board.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np

from .config import config
from .geometry import PATHS, SAFE_SPOTS
from .state import GameSnapshot, TokenView
from .types import Cell, Color

CHANNEL_SAFE = 4
CHANNEL_TRACK = 5
NUM_CHANNELS = 6

GLYPHS = {
    Color.RED: "R",
    Color.GREEN: "G",
    Color.YELLOW: "Y",
    Color.BLUE: "B",
}


def occupancy(snapshot: GameSnapshot) -> Dict[Cell, List[TokenView]]:
    """Group tokens by the cell they are shown on, in color/token order."""
    cells: Dict[Cell, List[TokenView]] = {}
    for view in snapshot.tokens:
        cells.setdefault(view.cell, []).append(view)
    return cells


def build_grid(snapshot: GameSnapshot, out: np.ndarray | None = None) -> np.ndarray:
    """Build a (6, 15, 15) float32 grid indexed [channel, y, x].

    Channels:
    0-3: Token counts per color (RED, GREEN, YELLOW, BLUE)
    4: Safe spots (fixed)
    5: Track cells of any color (fixed)
    """
    shape = (NUM_CHANNELS, config.BOARD_SIZE, config.BOARD_SIZE)
    if out is not None:
        if out.shape != shape:
            raise ValueError(f"Expected grid of shape {shape}")
        grid = out
    else:
        grid = np.zeros(shape, dtype=np.float32)
    grid.fill(0.0)

    for view in snapshot.tokens:
        x, y = view.cell
        grid[int(view.color), y, x] += 1.0

    for x, y in SAFE_SPOTS:
        grid[CHANNEL_SAFE, y, x] = 1.0
    for path in PATHS:
        for x, y in path:
            grid[CHANNEL_TRACK, y, x] = 1.0
    return grid


def render_text(snapshot: GameSnapshot) -> str:
    """Render the board as 15 rows of glyphs.

    ``.`` off-track, ``+`` track, ``*`` safe spot, color letter for a single
    token (lowercase when it can move), digit for a stack.
    """
    grid = build_grid(snapshot)
    cells = occupancy(snapshot)
    counts = grid[: len(Color)].sum(axis=0)
    rows: List[str] = []
    for y in range(config.BOARD_SIZE):
        row = []
        for x in range(config.BOARD_SIZE):
            n = int(counts[y, x])
            if n > 1:
                row.append(str(min(n, 9)))
            elif n == 1:
                view = cells[(x, y)][0]
                glyph = GLYPHS[view.color]
                row.append(glyph.lower() if view.movable else glyph)
            elif grid[CHANNEL_SAFE, y, x]:
                row.append("*")
            elif grid[CHANNEL_TRACK, y, x]:
                row.append("+")
            else:
                row.append(".")
        rows.append(" ".join(row))
    return "\n".join(rows)
