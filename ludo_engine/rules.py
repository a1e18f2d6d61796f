"""
Rule engine: move legality, move application, captures, win detection
and turn advancement. Functions here mutate only the GameState passed in.
"""

from __future__ import annotations

from typing import List, Tuple

from loguru import logger

from .config import config
from .errors import InvariantViolation
from .geometry import is_safe, on_shared_ring, path_cell
from .state import GameState
from .token import Token
from .types import Cell, Color, MoveOutcome, TurnPhase


def _check_dice(dice_value: int) -> None:
    if not config.DICE_MIN <= dice_value <= config.DICE_MAX:
        raise InvariantViolation(f"Dice value {dice_value} outside 1..6")


def can_move(token: Token, dice_value: int) -> bool:
    """Exact-fit legality: leaving home needs a 6, overshooting the finish is illegal."""
    _check_dice(dice_value)
    if token.finished:
        return False
    if token.at_home:
        return dice_value == config.EXIT_HOME_ROLL
    return token.path_index + dice_value <= config.FINISH_INDEX


def legal_tokens(state: GameState, color: Color | int, dice_value: int) -> List[Token]:
    return [t for t in state.tokens[Color(color)] if can_move(t, dice_value)]


def target_index(token: Token, dice_value: int) -> int:
    # Entering consumes the 6; it does not also advance by the pips.
    if token.at_home:
        return 0
    # can_move already enforces an exact fit, so the clamp never applies.
    return min(token.path_index + dice_value, config.FINISH_INDEX)


def capture_victims(state: GameState, mover: Color, cell: Cell) -> List[Token]:
    """Opposing tokens on the shared ring standing on ``cell``. Safe cells yield none."""
    if is_safe(cell):
        return []
    victims: List[Token] = []
    for color in Color:
        if color == mover:
            continue
        for t in state.tokens[color]:
            if t.finished or not on_shared_ring(t.path_index):
                continue
            if path_cell(color, t.path_index) == cell:
                victims.append(t)
    return victims


def turn_after(
    current: Color, dice_value: int, captured: bool, finished: bool
) -> Tuple[bool, Color]:
    """Return (bonus_turn, next_player)."""
    bonus = dice_value == config.BONUS_ROLL or captured or finished
    return bonus, current if bonus else current.next()


def resolve_no_move(state: GameState) -> Tuple[bool, Color]:
    """Advance or repeat the turn after a roll that left nothing to move."""
    bonus, nxt = turn_after(state.current_player, state.dice_value, False, False)
    state.current_player = nxt
    state.turn_phase = TurnPhase.AWAITING_ROLL
    return bonus, nxt


def apply_move(state: GameState, token: Token, dice_value: int) -> MoveOutcome:
    """Move ``token`` by ``dice_value`` and settle captures, win and turn order.

    The move must be legal; check ``can_move`` first.
    """
    if not can_move(token, dice_value):
        raise InvariantViolation(f"{token} cannot move with {dice_value}")

    mover = token.color
    old = token.path_index
    token.move_to(target_index(token, dice_value))
    outcome = MoveOutcome(token=token.ref, old_index=old, new_index=token.path_index)

    if token.finished:
        outcome.finished = True
        logger.info(f"{mover.name} token {token.token_id} reached home")
        if state.finished_count(mover) == config.TOKENS_PER_PLAYER:
            state.winner = mover
            state.turn_phase = TurnPhase.GAME_OVER
            outcome.winner = mover
            outcome.next_player = mover
            logger.info(f"{mover.name} wins")
            return outcome
    elif on_shared_ring(token.path_index):
        cell = path_cell(mover, token.path_index)
        for victim in capture_victims(state, mover, cell):
            victim.send_home()
            state.just_captured = True
            outcome.captured.append(victim.ref)
            logger.info(
                f"{mover.name} captured {victim.color.name} token {victim.token_id} at {cell}"
            )

    outcome.bonus_turn, outcome.next_player = turn_after(
        mover, dice_value, bool(outcome.captured), outcome.finished
    )
    state.current_player = outcome.next_player
    state.turn_phase = TurnPhase.AWAITING_ROLL
    return outcome
