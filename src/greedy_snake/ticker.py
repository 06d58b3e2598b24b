# ticker.py
from typing import Optional

from .game import SnakeGame, StepResult


class Ticker:
    """
    Calls `game.step()` every `game.speed` milliseconds.

    Poll it once per frame with the current clock. A change of speed cancels
    the pending tick and schedules the next one a full new interval later;
    a speed of None (game not running) stops ticking.
    """

    def __init__(self, game: SnakeGame):
        self.game = game
        self.interval: Optional[int] = None
        self.next_due: Optional[int] = None

    def _reschedule(self, now_ms: int) -> None:
        self.interval = self.game.speed
        self.next_due = None if self.interval is None else now_ms + self.interval

    def poll(self, now_ms: int) -> Optional[StepResult]:
        """Run at most one step if one is due. Returns its result, or None."""
        if self.game.speed != self.interval:
            self._reschedule(now_ms)
        if self.next_due is None or now_ms < self.next_due:
            return None

        result = self.game.step()

        if self.game.speed != self.interval:
            self._reschedule(now_ms)
        else:
            self.next_due += self.interval
            # Don't try to catch up on ticks missed during a stall.
            if self.next_due <= now_ms:
                self.next_due = now_ms + self.interval
        return result
