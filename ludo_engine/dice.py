from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, Protocol, runtime_checkable

from .config import config
from .errors import InvariantViolation


@runtime_checkable
class DiceSource(Protocol):
    """Anything that yields dice values in 1..6."""

    def roll(self) -> int: ...


@dataclass(slots=True)
class RandomDice:
    """Uniform, independent draws from a seedable ``random.Random``."""

    seed: int | None = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def roll(self) -> int:
        return self.rng.randint(config.DICE_MIN, config.DICE_MAX)


@dataclass(slots=True)
class ScriptedDice:
    """Replays a fixed sequence of values; used for tests and replays."""

    values: Iterable[int] = ()
    _queue: Deque[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._queue = deque()
        self.extend(self.values)

    def extend(self, values: Iterable[int]) -> None:
        for v in values:
            v = int(v)
            if not config.DICE_MIN <= v <= config.DICE_MAX:
                raise InvariantViolation(f"Dice value {v} outside 1..6")
            self._queue.append(v)

    def remaining(self) -> int:
        return len(self._queue)

    def roll(self) -> int:
        if not self._queue:
            raise InvariantViolation("Scripted dice exhausted")
        return self._queue.popleft()
