from backend.engine.gamestate.state import GameSnapshot, GameState

__all__ = ["GameSnapshot", "GameState"]
