# controls.py
from enum import Enum
from typing import Dict, Optional

from .config import Direction
from .game import GamePhase, SnakeGame

# Key names as reported by pygame.key.name()
KEY_BINDINGS: Dict[str, Direction] = {
    "up": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
}

START_KEYS = ("space", "return")
RESTART_KEYS = START_KEYS + ("r",)
QUIT_KEYS = ("escape",)


class Intent(Enum):
    TURN = "turn"
    START = "start"
    RESTART = "restart"
    QUIT = "quit"


class InputFilter:
    """
    Turns raw key presses and on-screen buttons into engine calls.

    Direction input only reaches the engine while a game is running; the
    engine itself then rejects reversals.
    """

    def __init__(self, game: SnakeGame):
        self.game = game

    def press(self, direction: Direction) -> bool:
        """Forward a direction if playing. Returns True if the engine accepted it."""
        if self.game.phase is not GamePhase.PLAYING:
            return False
        return self.game.set_direction(direction)

    def handle_key(self, key_name: str) -> Optional[Intent]:
        """Act on a key and report what it meant, or None if it was ignored."""
        key = key_name.lower()
        phase = self.game.phase

        if key in QUIT_KEYS:
            return Intent.QUIT

        direction = KEY_BINDINGS.get(key)
        if direction is not None:
            if phase is not GamePhase.PLAYING:
                return None
            if not self.game.set_direction(direction):
                return None
            return Intent.TURN

        if phase is GamePhase.NOT_STARTED and key in START_KEYS:
            self.game.start()
            return Intent.START
        if phase is GamePhase.GAME_OVER and key in RESTART_KEYS:
            self.game.restart()
            return Intent.RESTART
        return None
