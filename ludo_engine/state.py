from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .config import config
from .errors import InvariantViolation
from .token import Token
from .types import Cell, Color, TurnPhase


def _fresh_tokens() -> Dict[Color, List[Token]]:
    return {
        color: [Token(color, i) for i in range(config.TOKENS_PER_PLAYER)]
        for color in Color
    }


@dataclass(slots=True)
class GameState:
    """Mutable game state. Written only by the rule engine."""

    tokens: Dict[Color, List[Token]] = field(default_factory=_fresh_tokens)
    current_player: Color = Color.RED
    dice_value: int = 1
    turn_phase: TurnPhase = TurnPhase.AWAITING_ROLL
    winner: Optional[Color] = None
    just_captured: bool = False

    @property
    def game_over(self) -> bool:
        return self.winner is not None

    def token(self, color: Color | int, token_id: int) -> Token:
        if not 0 <= token_id < config.TOKENS_PER_PLAYER:
            raise InvariantViolation(f"No token with id {token_id}")
        return self.tokens[Color(color)][token_id]

    def all_tokens(self) -> Iterator[Token]:
        for color in Color:
            yield from self.tokens[color]

    def finished_count(self, color: Color | int) -> int:
        return sum(1 for t in self.tokens[Color(color)] if t.finished)


@dataclass(frozen=True, slots=True)
class TokenView:
    color: Color
    token_id: int
    path_index: int
    finished: bool
    cell: Cell
    movable: bool = False


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Read-only copy of the game state for presentation."""

    tokens: Tuple[TokenView, ...]
    current_player: Color
    dice_value: int
    turn_phase: TurnPhase
    winner: Optional[Color]

    def tokens_of(self, color: Color | int) -> Tuple[TokenView, ...]:
        color = Color(color)
        return tuple(t for t in self.tokens if t.color == color)

    def movable_tokens(self) -> Tuple[TokenView, ...]:
        return tuple(t for t in self.tokens if t.movable)
