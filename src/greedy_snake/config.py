from dataclasses import dataclass, field
from enum import Enum
import os
from typing import Dict, List, Optional, Tuple

# ----- Grid -----
BOARD_SIZE = 20
CELL_SIZE = 24
HUD_HEIGHT = 36

# ----- Colors -----
BG     = (17, 24, 39)
BORDER = (20, 184, 166)
HEAD   = (74, 222, 128)
BODY   = (22, 163, 74)
FOOD   = (239, 68, 68)
TEXT   = (220, 220, 230)
MUTED  = (107, 114, 128)
GOLD   = (250, 204, 21)


# ----- Directions (dx, dy), y grows downward -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


OPPOSITE_DIRECTIONS: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# ----- Starting layout -----
MIN_BOARD_SIZE = 4   # smallest board holding the 3-cell start plus food


def initial_snake_position(board_size: int = BOARD_SIZE) -> List[Tuple[int, int]]:
    """Three cells centred on the board, head first, facing right."""
    c = board_size // 2
    return [(c, c), (c - 1, c), (c - 2, c)]


def initial_food_position(board_size: int = BOARD_SIZE) -> Tuple[int, int]:
    """Food shown on the start screen, down and to the right of the snake."""
    f = board_size * 3 // 4
    return (f, f)


INITIAL_SNAKE_POSITION: List[Tuple[int, int]] = initial_snake_position()
INITIAL_FOOD_POSITION: Tuple[int, int] = initial_food_position()
INITIAL_DIRECTION = Direction.RIGHT

# ----- Pacing & scoring -----
INITIAL_SPEED = 150   # ms between ticks
SPEED_INCREMENT = 5   # ms shaved off per food
MIN_SPEED = 50
FOOD_REWARD = 10

# ----- Persistence -----
HIGH_SCORE_KEY = "snakeHighScore"
HIGH_SCORE_ENV = "GREEDY_SNAKE_HIGHSCORE_FILE"
DEFAULT_HIGH_SCORE_FILE = os.path.join(os.path.expanduser("~"), ".greedy_snake", "highscore.json")


def default_high_score_file() -> str:
    return os.environ.get(HIGH_SCORE_ENV) or DEFAULT_HIGH_SCORE_FILE


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: Optional[int] = None
    initial_speed_ms: int = INITIAL_SPEED
    speed_increment_ms: int = SPEED_INCREMENT
    min_speed_ms: int = MIN_SPEED
    food_reward: int = FOOD_REWARD
    high_score_file: str = field(default_factory=default_high_score_file)

CFG = Config()
