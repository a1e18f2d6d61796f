from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set

from loguru import logger

from . import rules
from .config import config
from .dice import DiceSource, RandomDice
from .errors import IllegalIntent, InvariantViolation
from .geometry import display_cell
from .state import GameSnapshot, GameState, TokenView
from .types import Cell, Color, IntentResult, TurnPhase


@dataclass(slots=True)
class Game:
    """Intent boundary between a front end and the rule engine.

    Every intent runs to completion and returns an ``IntentResult``.
    Illegal intents are rejected without touching the state.
    """

    dice: DiceSource = field(default_factory=lambda: RandomDice(config.SEED))
    state: GameState = field(default_factory=GameState)

    def reset(self) -> None:
        self.state = GameState()
        logger.debug("New game")

    # --- Guards ---
    def _require_phase(self, phase: TurnPhase) -> None:
        if self.state.game_over:
            raise IllegalIntent(f"Game over, {self.state.winner.name} won")
        if self.state.turn_phase != phase:
            if phase == TurnPhase.AWAITING_ROLL:
                raise IllegalIntent("Select a token before rolling again")
            raise IllegalIntent("Roll the dice first")

    def _reject(self, reason: str) -> IntentResult:
        logger.warning(f"Rejected intent: {reason}")
        return IntentResult(
            accepted=False,
            reason=reason,
            next_player=self.state.current_player,
            turn_phase=self.state.turn_phase,
            winner=self.state.winner,
        )

    # --- Intents ---
    def request_roll(self) -> IntentResult:
        try:
            self._require_phase(TurnPhase.AWAITING_ROLL)
        except IllegalIntent as e:
            return self._reject(e.reason)

        state = self.state
        value = int(self.dice.roll())
        if not config.DICE_MIN <= value <= config.DICE_MAX:
            raise InvariantViolation(f"Dice source produced {value}")
        state.dice_value = value
        state.just_captured = False
        player = state.current_player

        movable = rules.legal_tokens(state, player, value)
        logger.debug(
            f"{player.name} rolled {value}, movable={[t.token_id for t in movable]}"
        )
        if movable:
            state.turn_phase = TurnPhase.AWAITING_SELECTION
            return IntentResult(
                accepted=True,
                next_player=player,
                turn_phase=state.turn_phase,
                dice_value=value,
                has_moves=True,
            )

        bonus, nxt = rules.resolve_no_move(state)
        return IntentResult(
            accepted=True,
            next_player=nxt,
            turn_phase=state.turn_phase,
            dice_value=value,
            bonus_turn=bonus,
        )

    def select_token(self, token_id: int) -> IntentResult:
        token = self.state.token(self.state.current_player, token_id)
        try:
            self._require_phase(TurnPhase.AWAITING_SELECTION)
            if not rules.can_move(token, self.state.dice_value):
                raise IllegalIntent(
                    f"{token.color.name} token {token_id} cannot move {self.state.dice_value}"
                )
        except IllegalIntent as e:
            return self._reject(e.reason)

        dice_value = self.state.dice_value
        outcome = rules.apply_move(self.state, token, dice_value)
        logger.debug(
            f"{token.color.name} token {token_id}: {outcome.old_index} -> {outcome.new_index}"
        )
        return IntentResult(
            accepted=True,
            next_player=outcome.next_player,
            turn_phase=self.state.turn_phase,
            dice_value=dice_value,
            moved_token=outcome.token,
            captured_tokens=list(outcome.captured),
            token_finished=outcome.finished,
            bonus_turn=outcome.bonus_turn,
            winner=outcome.winner,
        )

    def select_cell(self, cell: Cell) -> IntentResult:
        """Select the current player's first movable token shown on ``cell``."""
        cell = tuple(cell)
        try:
            self._require_phase(TurnPhase.AWAITING_SELECTION)
        except IllegalIntent as e:
            return self._reject(e.reason)
        for token in self.state.tokens[self.state.current_player]:
            if display_cell(
                token.color, token.token_id, token.path_index
            ) == cell and rules.can_move(token, self.state.dice_value):
                return self.select_token(token.token_id)
        return self._reject(f"No movable token at {cell}")

    # --- Queries ---
    def legal_tokens(self, color: Color | int, dice_value: int) -> Set[int]:
        return {t.token_id for t in rules.legal_tokens(self.state, color, dice_value)}

    def get_snapshot(self) -> GameSnapshot:
        state = self.state
        selecting = state.turn_phase == TurnPhase.AWAITING_SELECTION
        views = tuple(
            TokenView(
                color=t.color,
                token_id=t.token_id,
                path_index=t.path_index,
                finished=t.finished,
                cell=display_cell(t.color, t.token_id, t.path_index),
                movable=selecting
                and t.color == state.current_player
                and rules.can_move(t, state.dice_value),
            )
            for t in state.all_tokens()
        )
        return GameSnapshot(
            tokens=views,
            current_player=state.current_player,
            dice_value=state.dice_value,
            turn_phase=state.turn_phase,
            winner=state.winner,
        )

    def tokens_at(self, cell: Cell) -> List[TokenView]:
        cell = tuple(cell)
        return [v for v in self.get_snapshot().tokens if v.cell == cell]
