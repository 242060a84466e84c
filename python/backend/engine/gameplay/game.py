"""Core gameplay logic: reveals tiles, compares pairs and resolves turns."""

from __future__ import annotations

import enum
import functools
import logging
import random
from dataclasses import dataclass
from typing import Callable

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameSnapshot, GameState
from backend.engine.scheduler import ManualScheduler, Scheduler
from backend.errors import TileIndexError
from backend.models.difficulty import DEFAULT_DIFFICULTY, Difficulty

logger = logging.getLogger(__name__)

MATCH_DELAY_MS = 600
MISMATCH_DELAY_MS = 900

Listener = Callable[[GameSnapshot], None]


class ResolutionKind(enum.Enum):
    MATCH = "match"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class Resolution:
    """A delayed turn outcome, tagged with the game it was scheduled for."""

    kind: ResolutionKind
    indices: tuple[int, int]
    generation: int

    @property
    def delay(self) -> int:
        if self.kind is ResolutionKind.MATCH:
            return MATCH_DELAY_MS
        return MISMATCH_DELAY_MS


class GamePlay:
    """Orchestrates memory games for one player.

    Clicks flip tiles immediately; the outcome of each pair is applied later
    by the scheduler.  Renderers read ``snapshot()`` or ``subscribe`` to be
    told after every change.
    """

    def __init__(
        self,
        difficulty: Difficulty | str = DEFAULT_DIFFICULTY,
        *,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.scheduler: Scheduler = scheduler if scheduler is not None else ManualScheduler()
        self._rng = rng if rng is not None else random.Random()
        self._listeners: list[Listener] = []
        self._generation = 0
        self.state: GameState
        self.start_game(difficulty)

    # -- lifecycle ------------------------------------------------------------

    def start_game(self, difficulty: Difficulty | str) -> None:
        """Replace the current game with a fresh board at *difficulty*.

        Resolutions still pending from the previous game are ignored when
        they fire.
        """
        level = Difficulty.parse(difficulty)
        tiles = GameGenerator.generate(level, self._rng)
        self._generation += 1
        self.state = GameState(level, tiles, self._generation)
        logger.debug("started %s game (generation %d)", level, self._generation)
        self._notify()

    def restart(self) -> None:
        self.start_game(self.state.difficulty)

    # -- clicks ---------------------------------------------------------------

    def click_tile(self, index: int) -> bool:
        """Flip the tile at *index*.

        Returns False without changing anything when the tile is already face
        up or two tiles are awaiting resolution.  Raises ``TileIndexError``
        for an index outside the board.
        """
        state = self.state
        if not 0 <= index < len(state.tiles):
            raise TileIndexError(index, len(state.tiles))

        tile = state.tiles[index]
        if tile.flipped or tile.matched or state.is_pending:
            return False

        tile.flipped = True
        state.selection.append(index)

        if state.is_pending:
            state.increment_attempts()
            first, second = state.selection
            if state.tiles[first].value == state.tiles[second].value:
                kind = ResolutionKind.MATCH
            else:
                kind = ResolutionKind.MISMATCH
            self._schedule(Resolution(kind, (first, second), state.generation))

        self._notify()
        return True

    # -- resolution -----------------------------------------------------------

    def _schedule(self, resolution: Resolution) -> None:
        logger.debug(
            "scheduling %s of %s in %d ms",
            resolution.kind.value, resolution.indices, resolution.delay,
        )
        self.scheduler.call_later(
            resolution.delay, functools.partial(self._resolve, resolution)
        )

    def _resolve(self, resolution: Resolution) -> None:
        state = self.state
        if resolution.generation != state.generation:
            logger.debug(
                "discarding stale %s from generation %d (current %d)",
                resolution.kind.value, resolution.generation, state.generation,
            )
            return

        for index in resolution.indices:
            tile = state.tiles[index]
            if resolution.kind is ResolutionKind.MATCH:
                tile.matched = True
            else:
                tile.flipped = False
        if resolution.kind is ResolutionKind.MATCH:
            state.increment_matched_pairs()
        state.selection.clear()

        logger.debug("applied %s of %s", resolution.kind.value, resolution.indices)
        if state.is_complete:
            logger.debug("all %d pairs matched in %d attempts", state.pair_count, state.attempts)
        self._notify()

    # -- observers ------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* with a snapshot after every change.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snap = self.state.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    # -- queries --------------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        return self.state.snapshot()

    @property
    def difficulty(self) -> Difficulty:
        return self.state.difficulty

    @property
    def is_complete(self) -> bool:
        return self.state.is_complete

    @property
    def is_pending(self) -> bool:
        return self.state.is_pending
