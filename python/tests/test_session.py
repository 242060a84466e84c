"""Terminal session tests: key actions mapped onto the engine."""

from __future__ import annotations

import random

from backend.engine.gameplay import MISMATCH_DELAY_MS
from backend.engine.scheduler import ManualScheduler
from backend.models.difficulty import Difficulty
from frontend.cli.input_handler import resolve_key
from frontend.cli.session import TerminalSession


def _session(difficulty: Difficulty = Difficulty.EASY) -> tuple[TerminalSession, ManualScheduler]:
    scheduler = ManualScheduler()
    return TerminalSession(difficulty, scheduler=scheduler, rng=random.Random(0)), scheduler


def test_cursor_moves_on_grid() -> None:
    session, _ = _session(Difficulty.NORMAL)  # 4 x 4
    for key in ("right", "right", "down"):
        session.handle(key)
    assert session.cursor == 6


def test_cursor_clamped_to_board() -> None:
    session, _ = _session(Difficulty.EASY)  # 2 rows x 4 columns
    for key in ("up", "left", "left"):
        session.handle(key)
    assert session.cursor == 0
    for _ in range(10):
        session.handle("right")
        session.handle("down")
    assert session.cursor == 7


def test_flip_clicks_tile_under_cursor() -> None:
    session, _ = _session()
    session.handle("right")
    session.handle("flip")
    assert session.game.state.tiles[1].flipped
    assert session.game.state.selection == [1]


def test_level_keys_start_new_game() -> None:
    session, scheduler = _session()
    session.handle("right")
    session.handle("flip")
    session.handle("down")
    session.handle("flip")

    session.handle("hard")
    assert session.game.difficulty is Difficulty.HARD
    assert session.cursor == 0
    assert len(session.game.state.tiles) == 32

    scheduler.advance(MISMATCH_DELAY_MS)
    assert session.game.state.attempts == 0
    assert not any(t.face_up for t in session.game.state.tiles)


def test_quit_ends_session() -> None:
    session, _ = _session()
    assert session.handle("quit") is False
    assert session.handle("restart") is True


def test_manual_scheduler_is_not_polled() -> None:
    session, _ = _session()
    assert session.poll() is False


def test_key_mapping() -> None:
    assert resolve_key(" ") == "flip"
    assert resolve_key("\r") == "flip"
    assert resolve_key("2") == "normal"
    assert resolve_key("W") == "up"
    assert resolve_key("x") == "x"
    assert resolve_key("\x07") == ""
