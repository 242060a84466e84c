"""Generates shuffled memory boards."""

from __future__ import annotations

import random

from backend.models.difficulty import Difficulty
from backend.models.tile import Tile


class GameGenerator:
    """Builds boards holding each value ``1..pairs`` exactly twice."""

    @staticmethod
    def values(difficulty: Difficulty | str) -> list[int]:
        """Return the unshuffled values for *difficulty*: ``[1, 1, 2, 2, ...]``."""
        level = Difficulty.parse(difficulty)
        values: list[int] = []
        for value in range(1, level.pairs + 1):
            values.append(value)
            values.append(value)
        return values

    @staticmethod
    def shuffle(values: list, rng: random.Random) -> None:
        """Fisher-Yates shuffle of *values* in-place."""
        for i in range(len(values) - 1, 0, -1):
            j = rng.randint(0, i)
            values[i], values[j] = values[j], values[i]

    @staticmethod
    def generate(
        difficulty: Difficulty | str, rng: random.Random | None = None
    ) -> list[Tile]:
        """Return a freshly shuffled, face-down board for *difficulty*.

        Ids are assigned ``0..tiles-1`` in the post-shuffle order.  Pass a
        seeded ``random.Random`` for a reproducible board.
        """
        values = GameGenerator.values(difficulty)
        GameGenerator.shuffle(values, rng if rng is not None else random.Random())
        return [Tile(id=idx, value=value) for idx, value in enumerate(values)]
