from dataclasses import dataclass, field

from .config import config
from .errors import InvariantViolation
from .geometry import home_cell
from .types import Cell, Color, TokenRef


@dataclass(slots=True)
class Token:
    """Per-piece state. Holds state only; legality lives in the rules module.

    path_index: -1 = on its home cell, 0..55 = on its color's path,
    56 = finished (terminal).
    """

    color: Color
    token_id: int  # 0..3 per color
    home_cell: Cell = field(init=False)
    path_index: int = config.HOME_INDEX
    finished: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.color = Color(self.color)
        self.home_cell = home_cell(self.color, self.token_id)
        self._check_index(self.path_index)
        self.finished = self.path_index == config.FINISH_INDEX

    @staticmethod
    def _check_index(index: int) -> None:
        if not config.HOME_INDEX <= index <= config.FINISH_INDEX:
            raise InvariantViolation(f"path index {index} outside [-1, 56]")

    @property
    def ref(self) -> TokenRef:
        return TokenRef(self.color, self.token_id)

    @property
    def at_home(self) -> bool:
        return self.path_index == config.HOME_INDEX

    def move_to(self, new_index: int) -> None:
        if self.finished:
            raise InvariantViolation(f"{self} already finished")
        self._check_index(new_index)
        self.path_index = new_index
        if new_index == config.FINISH_INDEX:
            self.finished = True

    def send_home(self) -> None:
        if self.finished:
            raise InvariantViolation(f"Cannot send finished {self} home")
        self.path_index = config.HOME_INDEX

    def __str__(self) -> str:
        return f"Token({self.color.name}_{self.token_id} at {self.path_index})"
