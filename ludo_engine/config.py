import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


@dataclass(slots=True)
class Config:
    # --- Constants ---
    BOARD_SIZE: int = 15  # 15x15 cell grid
    NUM_PLAYERS: int = 4
    TOKENS_PER_PLAYER: int = 4
    PATH_LENGTH: int = 56  # 0..55 drawable path cells per color
    HOME_STRETCH_START: int = 51  # 51..55 private to each color
    HOME_INDEX: int = -1
    DICE_MIN: int = 1
    DICE_MAX: int = 6
    EXIT_HOME_ROLL: int = 6
    BONUS_ROLL: int = 6

    # Settings (env)
    SEED: int | None = _optional_int("LUDO_SEED")
    LOG_LEVEL: str = os.getenv("LUDO_LOG_LEVEL", "INFO")

    # Presentation pacing (cosmetic only, never read by the engine)
    ROLL_TICKS: int = int(os.getenv("ROLL_TICKS", 10))
    ROLL_TICK_MS: int = int(os.getenv("ROLL_TICK_MS", 80))
    NO_MOVE_DELAY_MS: int = int(os.getenv("NO_MOVE_DELAY_MS", 1000))
    MOVE_DELAY_MS: int = int(os.getenv("MOVE_DELAY_MS", 500))

    # Derived (populated in __post_init__ due to slots)
    FINISH_INDEX: int = 0
    LAST_PATH_INDEX: int = 0
    CENTER: int = 0

    def __post_init__(self):
        self.FINISH_INDEX = self.PATH_LENGTH
        self.LAST_PATH_INDEX = self.PATH_LENGTH - 1
        self.CENTER = self.BOARD_SIZE // 2

        if self.ROLL_TICKS < 0:
            raise ValueError("ROLL_TICKS must be >= 0")
        for name in ("ROLL_TICK_MS", "NO_MOVE_DELAY_MS", "MOVE_DELAY_MS"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")


config = Config()
