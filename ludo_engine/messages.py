from .state import GameSnapshot
from .types import Color, IntentResult, TurnPhase


def status_line(snapshot: GameSnapshot) -> str:
    player = snapshot.current_player.name
    if snapshot.winner is not None:
        return f"{snapshot.winner.name} WINS!"
    if snapshot.turn_phase == TurnPhase.AWAITING_SELECTION:
        return f"{player} rolled {snapshot.dice_value} - Select token!"
    return f"{player}'s turn - Roll the dice!"


def describe(result: IntentResult, mover: Color) -> str:
    """One status line for the outcome of an intent made by ``mover``."""
    name = mover.name
    if not result.accepted:
        return f"Not allowed: {result.reason}"
    if result.winner is not None:
        return f"{result.winner.name} WINS!"

    if result.moved_token is None:
        if result.has_moves:
            return f"{name} rolled {result.dice_value} - Select token!"
        line = f"{name} rolled {result.dice_value} - No moves"
    elif result.captured_tokens:
        victims = sorted({ref.color.name for ref in result.captured_tokens})
        line = f"{name} captured {', '.join(victims)}!"
    elif result.token_finished:
        line = "Token reached home!"
    else:
        line = f"{name} moved token {result.moved_token.token_id}"

    if result.bonus_turn:
        return f"{line} {name} - Roll again!"
    return f"{line} {result.next_player.name}'s turn."
