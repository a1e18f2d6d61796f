# Exception types raised by the rule engine
class LudoError(Exception):
    """Base exception for rule engine errors."""

    pass


class IllegalIntent(LudoError):
    """Raised when a roll/select intent is not allowed in the current state.

    Caught at the intent boundary and turned into a rejected result.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class InvariantViolation(LudoError):
    """Raised when a caller breaks an engine invariant (programming error)."""

    pass
