"""Difficulty levels and their board dimensions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.errors import InvalidDifficultyError


@dataclass(frozen=True)
class Level:
    pairs: int
    columns: int
    label: str

    @property
    def tiles(self) -> int:
        return self.pairs * 2


class Difficulty(StrEnum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    # -- level table ----------------------------------------------------------

    @property
    def level(self) -> Level:
        return _LEVELS[self]

    @property
    def pairs(self) -> int:
        return self.level.pairs

    @property
    def tiles(self) -> int:
        return self.level.tiles

    @property
    def columns(self) -> int:
        return self.level.columns

    @property
    def rows(self) -> int:
        return self.tiles // self.columns

    @property
    def label(self) -> str:
        return self.level.label

    # -- parsing --------------------------------------------------------------

    @classmethod
    def parse(cls, value: Difficulty | str) -> Difficulty:
        """Return the level named by *value*.

        Accepts a member or its case-insensitive name, e.g. ``"Hard"``.
        Raises ``InvalidDifficultyError`` for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidDifficultyError(value)


_LEVELS: dict[Difficulty, Level] = {
    Difficulty.EASY: Level(pairs=4, columns=4, label="Easy"),
    Difficulty.NORMAL: Level(pairs=8, columns=4, label="Normal"),
    Difficulty.HARD: Level(pairs=16, columns=8, label="Hard"),
}

DEFAULT_DIFFICULTY = Difficulty.EASY
