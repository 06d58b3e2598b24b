"""Tests for the board matrix handed to renderers."""

import random

import numpy as np

from src.greedy_snake.config import BOARD_SIZE
from src.greedy_snake.game import SnakeGame
from src.greedy_snake.observe import BODY, EMPTY, FOOD, HEAD, board_matrix
from src.greedy_snake.scores import HighScoreTracker, InMemoryScoreStore


def make_game():
    return SnakeGame(HighScoreTracker(InMemoryScoreStore()), rng=random.Random(0))


def test_initial_board():
    """Start screen shows the initial snake and food, indexed [y, x]."""
    grid = board_matrix(make_game().snapshot())
    assert grid.shape == (BOARD_SIZE, BOARD_SIZE)
    assert grid.dtype == np.int8
    assert grid[10, 10] == HEAD
    assert grid[10, 9] == BODY
    assert grid[10, 8] == BODY
    assert grid[15, 15] == FOOD
    assert np.count_nonzero(grid) == 4


def test_board_follows_moves():
    """After a tick the vacated tail cell is empty again."""
    game = make_game()
    game.start()
    game.food = (0, 0)
    game.step()
    grid = board_matrix(game.snapshot())
    assert grid[10, 11] == HEAD
    assert grid[10, 10] == BODY
    assert grid[10, 8] == EMPTY
    assert grid[0, 0] == FOOD


def test_smaller_board():
    game = SnakeGame(HighScoreTracker(InMemoryScoreStore()), rng=random.Random(0), board_size=12)
    game.start()
    grid = board_matrix(game.snapshot(), board_size=12)
    assert grid.shape == (12, 12)
    assert np.count_nonzero(grid == FOOD) == 1
    assert np.count_nonzero(grid == HEAD) == 1
