from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

Cell = Tuple[int, int]


class Color(IntEnum):
    RED = 0
    GREEN = 1
    YELLOW = 2
    BLUE = 3

    def next(self) -> "Color":
        return Color((int(self) + 1) % len(Color))


class TurnPhase(Enum):
    AWAITING_ROLL = "awaiting_roll"
    AWAITING_SELECTION = "awaiting_selection"
    GAME_OVER = "game_over"


@dataclass(frozen=True, slots=True)
class TokenRef:
    color: Color
    token_id: int


@dataclass(slots=True)
class MoveOutcome:
    """What a single applied move did to the board."""

    token: TokenRef
    old_index: int
    new_index: int
    captured: List[TokenRef] = field(default_factory=list)
    finished: bool = False
    winner: Optional[Color] = None
    bonus_turn: bool = False
    next_player: Optional[Color] = None


@dataclass(slots=True)
class IntentResult:
    """Result record returned by every intent call.

    Rejected intents carry ``accepted=False`` and a ``reason``; the game
    state is untouched in that case.
    """

    accepted: bool
    next_player: Color
    turn_phase: TurnPhase
    reason: Optional[str] = None
    dice_value: Optional[int] = None
    moved_token: Optional[TokenRef] = None
    captured_tokens: List[TokenRef] = field(default_factory=list)
    token_finished: bool = False
    bonus_turn: bool = False
    winner: Optional[Color] = None
    has_moves: bool = False
