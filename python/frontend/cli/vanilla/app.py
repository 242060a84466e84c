"""Vanilla terminal frontend with no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Opens on a landing screen where the difficulty is picked.
"""

from __future__ import annotations

import random
import sys

from backend.engine.gamestate import GameSnapshot
from backend.models.difficulty import Difficulty
from frontend.cli.input_handler import get_key, get_key_timeout
from frontend.cli.session import TerminalSession


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_REV = "\033[7m"     # reverse video (cursor)
_R = "\033[0m"       # reset
_BG_SEL = "\033[42;30m"  # green bg, black fg (selected level)

_POLL_INTERVAL = 0.1


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _levels_line(selected: Difficulty) -> str:
    parts: list[str] = []
    for i, level in enumerate(Difficulty, 1):
        if level is selected:
            parts.append(f"{_BG_SEL} {i} {level.label} {_R}")
        else:
            parts.append(f"{_DIM}{i} {level.label}{_R}")
    return "  ".join(parts)


# -- board rendering ----------------------------------------------------------


def _render_board(snap: GameSnapshot, cursor: int) -> str:
    """Return an ANSI-coloured text grid; face-down tiles are blank."""
    columns = snap.difficulty.columns
    width = len(str(snap.pair_count))
    cell_w = width + 2
    sep = "+" + (("-" * cell_w + "+") * columns)

    lines: list[str] = [sep]
    for start in range(0, len(snap.tiles), columns):
        cells: list[str] = []
        for idx in range(start, start + columns):
            tile = snap.tiles[idx]
            text = f" {tile.value:>{width}} " if tile.face_up else " " * cell_w
            if idx == cursor:
                cells.append(f"{_REV}{text}{_R}")
            elif tile.matched:
                cells.append(f"{_G}{text}{_R}")
            elif tile.flipped:
                cells.append(f"{_Y}{text}{_R}")
            else:
                cells.append(text)
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _show_landing(selected: Difficulty) -> None:
    _clear()
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}          W E L C O M E !             {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()
    print(f"    {_levels_line(selected)}")
    print(f"    {_DIM}← → to change, Enter or 1-3 to play{_R}")
    print()
    print(f"    {_DIM}Q{_R}  Quit")
    print()


def _show_game(session: TerminalSession) -> None:
    snap = session.game.snapshot()
    _clear()
    print(f"  {_C}=== Memory Game ==={_R}")
    print()
    print(f"  {_levels_line(snap.difficulty)}")
    print()
    print(_render_board(snap, session.cursor))
    print()
    print(f"  Attempts: {_Y}{snap.attempts}{_R}")
    if snap.is_complete:
        print(f"  {_G}★ All pairs matched in {snap.attempts} attempts! ★{_R}")
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}Space{_R}: flip  |  "
        f"{_C}1-3{_R}: level  |  "
        f"{_C}R{_R}: restart  |  "
        f"{_C}Q{_R}: back"
    )
    sys.stdout.flush()


# -- game loop ----------------------------------------------------------------


def _play_game(difficulty: Difficulty, rng: random.Random) -> None:
    session = TerminalSession(difficulty, rng=rng)

    while True:
        _show_game(session)

        # Poll while waiting so pending resolutions redraw the board.
        while True:
            key = get_key_timeout(_POLL_INTERVAL)
            if key is not None:
                break
            if session.poll():
                _show_game(session)

        session.poll()
        if not session.handle(key):
            return


# -- landing loop -------------------------------------------------------------


def _landing_loop(difficulty: Difficulty, rng: random.Random) -> None:
    levels = list(Difficulty)
    selected = difficulty

    while True:
        _show_landing(selected)
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
            return
        elif key == "left":
            selected = levels[max(0, levels.index(selected) - 1)]
        elif key == "right":
            selected = levels[min(len(levels) - 1, levels.index(selected) + 1)]
        elif key in ("easy", "normal", "hard"):
            selected = Difficulty(key)
            _play_game(selected, rng)
        elif key == "flip":
            _play_game(selected, rng)


# -- public entry point -------------------------------------------------------


def run(difficulty: Difficulty = Difficulty.EASY, seed: int | None = None) -> None:
    """Launch the vanilla CLI on its landing screen."""
    _landing_loop(difficulty, random.Random(seed))
