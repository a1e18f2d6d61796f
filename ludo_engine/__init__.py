"""
Four-player Ludo rule engine.
Turn sequencing, dice resolution, movement, captures and win detection.
"""

from .board import build_grid, occupancy, render_text
from .config import config
from .dice import DiceSource, RandomDice, ScriptedDice
from .errors import IllegalIntent, InvariantViolation, LudoError
from .game import Game
from .geometry import HOME_CELLS, PATHS, SAFE_SPOTS, display_cell, path_cell
from .state import GameSnapshot, GameState, TokenView
from .token import Token
from .types import Color, IntentResult, MoveOutcome, TokenRef, TurnPhase

__all__ = [
    "Game",
    "GameState",
    "GameSnapshot",
    "TokenView",
    "Token",
    "TokenRef",
    "Color",
    "TurnPhase",
    "IntentResult",
    "MoveOutcome",
    "DiceSource",
    "RandomDice",
    "ScriptedDice",
    "LudoError",
    "IllegalIntent",
    "InvariantViolation",
    "PATHS",
    "HOME_CELLS",
    "SAFE_SPOTS",
    "path_cell",
    "display_cell",
    "build_grid",
    "occupancy",
    "render_text",
    "config",
]
