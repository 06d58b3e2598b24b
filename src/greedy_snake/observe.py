# observe.py
import numpy as np  # type: ignore

from .config import BOARD_SIZE
from .game import GameSnapshot

# Cell codes
EMPTY = 0
BODY = 1
HEAD = 2
FOOD = 3


def board_matrix(snapshot: GameSnapshot, board_size: int = BOARD_SIZE) -> np.ndarray:
    """
    Return the board as a (board_size, board_size) int8 array indexed [y, x].

    Food is drawn first so the snake wins any shared cell.
    """
    grid = np.full((board_size, board_size), EMPTY, dtype=np.int8)

    fx, fy = snapshot.food
    grid[fy, fx] = FOOD

    for x, y in snapshot.snake[1:]:
        grid[y, x] = BODY
    hx, hy = snapshot.head
    grid[hy, hx] = HEAD
    return grid
