from backend.models.difficulty import DEFAULT_DIFFICULTY, Difficulty, Level
from backend.models.tile import Tile, TileView

__all__ = ["DEFAULT_DIFFICULTY", "Difficulty", "Level", "Tile", "TileView"]
