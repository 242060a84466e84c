"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.difficulty import Difficulty
from backend.models.tile import Tile, TileView


class GameState:
    """Holds the board, the current selection, and the counters.

    One instance exists per game; ``generation`` tells games apart so that
    resolutions scheduled against an earlier game can be recognised.
    """

    def __init__(self, difficulty: Difficulty, tiles: list[Tile], generation: int) -> None:
        self.difficulty = difficulty
        self.tiles = tiles
        self.generation = generation
        self.selection: list[int] = []
        self.attempts: int = 0
        self.matched_pairs: int = 0

    # -- counters -------------------------------------------------------------

    def increment_attempts(self) -> None:
        self.attempts += 1

    def increment_matched_pairs(self) -> None:
        self.matched_pairs += 1

    # -- queries --------------------------------------------------------------

    @property
    def pair_count(self) -> int:
        return self.difficulty.pairs

    @property
    def is_complete(self) -> bool:
        return self.matched_pairs == self.pair_count

    @property
    def is_pending(self) -> bool:
        """True while two tiles are face up awaiting resolution."""
        return len(self.selection) == 2

    def face_up_unmatched(self) -> int:
        return sum(1 for t in self.tiles if t.flipped and not t.matched)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            difficulty=self.difficulty,
            tiles=tuple(t.view() for t in self.tiles),
            selection=tuple(self.selection),
            attempts=self.attempts,
            matched_pairs=self.matched_pairs,
            pair_count=self.pair_count,
            generation=self.generation,
        )


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a ``GameState`` for renderers."""

    difficulty: Difficulty
    tiles: tuple[TileView, ...]
    selection: tuple[int, ...]
    attempts: int
    matched_pairs: int
    pair_count: int
    generation: int

    @property
    def is_complete(self) -> bool:
        return self.matched_pairs == self.pair_count

    @property
    def pending(self) -> bool:
        return len(self.selection) == 2
