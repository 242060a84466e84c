"""Exceptions raised by the memory game engine."""

from __future__ import annotations


class MemoryGameError(Exception):
    """Base class for engine errors."""


class InvalidDifficultyError(MemoryGameError, ValueError):
    """Raised when a difficulty name is not one of the known levels."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Unknown difficulty {value!r}; expected one of easy, normal, hard."
        )


class TileIndexError(MemoryGameError, IndexError):
    """Raised when a click targets an index outside the board."""

    def __init__(self, index: int, tile_count: int) -> None:
        self.index = index
        self.tile_count = tile_count
        super().__init__(
            f"Tile index {index} out of range for a {tile_count}-tile board."
        )
