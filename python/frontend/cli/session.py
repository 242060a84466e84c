"""Key-driven game session shared by the terminal frontends."""

from __future__ import annotations

import random

from backend.engine.gameplay import GamePlay
from backend.engine.scheduler import ClockScheduler, ManualScheduler
from backend.models.difficulty import Difficulty

_DIFFICULTY_KEYS = {d.value: d for d in Difficulty}

_CURSOR_STEPS: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


class TerminalSession:
    """Maps action strings from ``input_handler`` onto the engine.

    The cursor is a tile index; it moves on the grid without wrapping.
    """

    def __init__(
        self,
        difficulty: Difficulty,
        *,
        scheduler: ManualScheduler | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.scheduler = scheduler if scheduler is not None else ClockScheduler()
        self.game = GamePlay(difficulty, scheduler=self.scheduler, rng=rng)
        self.cursor = 0

    def handle(self, key: str) -> bool:
        """Apply one action.  Returns False when the player wants to leave."""
        if key == "quit":
            return False
        if key in _CURSOR_STEPS:
            self._move_cursor(*_CURSOR_STEPS[key])
        elif key == "flip":
            self.game.click_tile(self.cursor)
        elif key in _DIFFICULTY_KEYS:
            self.game.start_game(_DIFFICULTY_KEYS[key])
            self.cursor = 0
        elif key == "restart":
            self.game.restart()
            self.cursor = 0
        return True

    def poll(self) -> bool:
        """Run due resolutions.  Returns True if the board changed."""
        if isinstance(self.scheduler, ClockScheduler):
            return self.scheduler.poll() > 0
        return False

    def _move_cursor(self, dr: int, dc: int) -> None:
        level = self.game.difficulty
        row, col = divmod(self.cursor, level.columns)
        row = min(max(row + dr, 0), level.rows - 1)
        col = min(max(col + dc, 0), level.columns - 1)
        self.cursor = row * level.columns + col
