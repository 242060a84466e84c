from backend.engine.gameplay.game import (
    MATCH_DELAY_MS,
    MISMATCH_DELAY_MS,
    GamePlay,
    Resolution,
    ResolutionKind,
)

__all__ = [
    "MATCH_DELAY_MS",
    "MISMATCH_DELAY_MS",
    "GamePlay",
    "Resolution",
    "ResolutionKind",
]
