"""Tile model for the memory game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Tile:
    """One cell of the board.

    ``id`` is stable for the lifetime of a board and doubles as a render
    key.  Exactly two tiles on a board share each ``value``.  A matched tile
    stays flipped.
    """

    id: int
    value: int
    flipped: bool = False
    matched: bool = False

    @property
    def face_up(self) -> bool:
        return self.flipped or self.matched

    def view(self) -> TileView:
        return TileView(
            id=self.id, value=self.value, flipped=self.flipped, matched=self.matched
        )


@dataclass(frozen=True)
class TileView:
    """Read-only copy of a tile handed to renderers."""

    id: int
    value: int
    flipped: bool
    matched: bool

    @property
    def face_up(self) -> bool:
        return self.flipped or self.matched
