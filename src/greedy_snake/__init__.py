# src/greedy_snake/__init__.py
"""Grid snake: the game engine, its input filter and best-score tracking."""

from src.greedy_snake.config import Direction, OPPOSITE_DIRECTIONS
from src.greedy_snake.game import GamePhase, GameSnapshot, SnakeGame, StepResult, place_food
from src.greedy_snake.scores import HighScoreTracker, InMemoryScoreStore, JsonScoreStore

__all__ = [
    "Direction",
    "OPPOSITE_DIRECTIONS",
    "GamePhase",
    "GameSnapshot",
    "SnakeGame",
    "StepResult",
    "place_food",
    "HighScoreTracker",
    "InMemoryScoreStore",
    "JsonScoreStore",
]
