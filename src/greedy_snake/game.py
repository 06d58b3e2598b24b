# game.py
from dataclasses import dataclass
from enum import Enum
import logging
import random
from typing import List, Optional, Sequence, Tuple

from .config import (
    BOARD_SIZE,
    MIN_BOARD_SIZE, INITIAL_DIRECTION,
    initial_snake_position, initial_food_position,
    OPPOSITE_DIRECTIONS,
    Direction, Config, CFG,
)
from .scores import HighScoreTracker

logger = logging.getLogger(__name__)

Coordinates = Tuple[int, int]


# ---------- Helpers ----------
def place_food(body: Sequence[Coordinates], rng: random.Random, board_size: int = BOARD_SIZE) -> Coordinates:
    """
    Sample random cells until one is free of the snake.
    Never returns if the body covers the whole board.
    """
    while True:
        fx = rng.randrange(board_size)
        fy = rng.randrange(board_size)
        if (fx, fy) not in body:
            return (fx, fy)

def in_bounds(pos: Coordinates, board_size: int = BOARD_SIZE) -> bool:
    x, y = pos
    return 0 <= x < board_size and 0 <= y < board_size


# ---------- State ----------
class GamePhase(Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class StepResult(Enum):
    IGNORED = "ignored"      # not playing
    MOVED = "moved"
    ATE = "ate"
    HIT_WALL = "hit_wall"
    HIT_SELF = "hit_self"


@dataclass(frozen=True)
class GameSnapshot:
    snake: Tuple[Coordinates, ...]   # head at index 0
    food: Coordinates
    direction: Direction
    score: int
    high_score: int
    phase: GamePhase
    speed: Optional[int]             # None while not playing

    @property
    def head(self) -> Coordinates:
        return self.snake[0]

    @property
    def is_new_record(self) -> bool:
        return (
            self.phase is GamePhase.GAME_OVER
            and self.score > 0
            and self.score >= self.high_score
        )


class SnakeGame:
    """
    Owns one snake session: body, direction, food, score, speed and phase.

    The engine doesn't look at the phase when changing direction; callers
    (see controls.InputFilter) are expected to only forward input while
    playing. `step()` is a no-op outside PLAYING.
    """

    def __init__(
        self,
        tracker: HighScoreTracker,
        rng: Optional[random.Random] = None,
        board_size: int = BOARD_SIZE,
        cfg: Config = CFG,
    ):
        if board_size < MIN_BOARD_SIZE:
            raise ValueError(f"board_size must be at least {MIN_BOARD_SIZE}, got {board_size}")
        self.tracker = tracker
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.board_size = board_size
        self.cfg = cfg

        self.snake: List[Coordinates] = initial_snake_position(board_size)
        self.food: Coordinates = initial_food_position(board_size)
        self.direction: Direction = INITIAL_DIRECTION
        self.speed: Optional[int] = None
        self.score = 0
        self.phase = GamePhase.NOT_STARTED

    # ---------- Lifecycle ----------
    def start(self) -> None:
        self.snake = initial_snake_position(self.board_size)
        self.food = place_food(self.snake, self.rng, self.board_size)
        self.direction = INITIAL_DIRECTION
        self.speed = self.cfg.initial_speed_ms
        self.score = 0
        self.phase = GamePhase.PLAYING
        logger.info("Game started (food at %s)", self.food)

    def restart(self) -> None:
        self.start()

    def end_game(self) -> None:
        self.speed = None
        self.phase = GamePhase.GAME_OVER
        logger.info("Game over with score %d", self.score)
        self.tracker.record(self.score)

    # ---------- Input ----------
    def set_direction(self, direction: Direction) -> bool:
        """Apply a new heading unless it is a 180° turn. Returns True if applied."""
        if direction is OPPOSITE_DIRECTIONS[self.direction]:
            return False
        self.direction = direction
        return True

    # ---------- Update ----------
    def step(self) -> StepResult:
        """
        Advance the game by one tick.

        Collisions are checked against the whole body before the tail moves,
        so stepping onto the cell the tail is leaving still counts as hitting
        yourself. On a collision the body is left as it was.
        """
        if self.phase is not GamePhase.PLAYING:
            return StepResult.IGNORED

        hx, hy = self.snake[0]
        new_head = (hx + self.direction.dx, hy + self.direction.dy)

        # Wall collision
        if not in_bounds(new_head, self.board_size):
            self.end_game()
            return StepResult.HIT_WALL

        # Self collision
        if new_head in self.snake:
            self.end_game()
            return StepResult.HIT_SELF

        self.snake.insert(0, new_head)

        if new_head == self.food:
            self.score += self.cfg.food_reward
            self.food = place_food(self.snake, self.rng, self.board_size)
            self.speed = max(self.cfg.min_speed_ms, self.speed - self.cfg.speed_increment_ms)
            logger.debug("Ate food: score=%d speed=%dms next food=%s", self.score, self.speed, self.food)
            return StepResult.ATE

        self.snake.pop()
        return StepResult.MOVED

    # ---------- Read-only view ----------
    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            snake=tuple(self.snake),
            food=self.food,
            direction=self.direction,
            score=self.score,
            high_score=self.tracker.high_score,
            phase=self.phase,
            speed=self.speed,
        )
