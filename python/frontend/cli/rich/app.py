"""Rich terminal frontend using styled tables and panels.

Uses the ``rich`` library for output while sharing the input handler and
``TerminalSession`` with the vanilla CLI.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamestate import GameSnapshot
from backend.models.difficulty import Difficulty
from frontend.cli.input_handler import get_key, get_key_timeout
from frontend.cli.session import TerminalSession

console = Console()

_POLL_INTERVAL = 0.1


# -- widgets ------------------------------------------------------------------


def _levels(selected: Difficulty) -> Text:
    """Radio-style row of the three levels."""
    row = Text()
    for i, level in enumerate(Difficulty, 1):
        if i > 1:
            row.append("   ")
        if level is selected:
            row.append(f" ◉ {i} {level.label} ", style="bold green on #313244")
        else:
            row.append(f" ○ {i} {level.label} ", style="dim")
    return row


def _render_board(snap: GameSnapshot, cursor: int) -> Table:
    """Return a Rich Table of the grid; face-down tiles are blank."""
    width = len(str(snap.pair_count))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        show_lines=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    columns = snap.difficulty.columns
    for _ in range(columns):
        table.add_column(width=width + 1, justify="center")

    for start in range(0, len(snap.tiles), columns):
        cells: list[Text] = []
        for idx in range(start, start + columns):
            tile = snap.tiles[idx]
            label = str(tile.value) if tile.face_up else ""
            if tile.matched:
                style = "bold green"
            elif tile.flipped:
                style = "bold yellow"
            else:
                style = "white"
            if idx == cursor:
                style += " reverse"
                label = label or " "
            cells.append(Text(label, style=style))
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_landing(selected: Difficulty) -> None:
    console.clear()

    nav = Text("  ← →  change level   Enter / 1-3  play   Q  quit", style="dim")
    body = Group(
        Text(""),
        Align.center(_levels(selected)),
        Text(""),
        Align.center(nav),
        Text(""),
    )
    panel = Panel(
        body,
        title="[bold]W E L C O M E ![/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


def _draw_game(session: TerminalSession) -> None:
    console.clear()
    snap = session.game.snapshot()

    stats = Text()
    stats.append("  Attempts: ", style="dim")
    stats.append(str(snap.attempts), style="bold yellow")
    stats.append("    Pairs: ", style="dim")
    stats.append(f"{snap.matched_pairs}/{snap.pair_count}", style="bold yellow")

    parts = [
        Align.center(_levels(snap.difficulty)),
        Text(""),
        Align.center(_render_board(snap, session.cursor)),
        Align.center(stats),
    ]
    if snap.is_complete:
        banner = Text()
        banner.append("\n  ★ ", style="bold yellow")
        banner.append(
            f"All pairs matched in {snap.attempts} attempts!", style="bold green"
        )
        banner.append(" ★", style="bold yellow")
        parts.append(Align.center(banner))

    controls = Text()
    for key, action in (
        ("↑↓←→/WASD", "move"),
        ("Space", "flip"),
        ("1-3", "level"),
        ("R", "restart"),
        ("Q", "back"),
    ):
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f"  {action} ", style="dim")

    panel = Panel(
        Group(*parts),
        title="[bold cyan]Memory Game[/bold cyan]",
        border_style="bold green" if snap.is_complete else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _play_game(difficulty: Difficulty, rng: random.Random) -> None:
    session = TerminalSession(difficulty, rng=rng)

    while True:
        _draw_game(session)

        while True:
            key = get_key_timeout(_POLL_INTERVAL)
            if key is not None:
                break
            if session.poll():
                _draw_game(session)

        session.poll()
        if not session.handle(key):
            return


# -- landing loop -------------------------------------------------------------


def _landing_loop(difficulty: Difficulty, rng: random.Random) -> None:
    levels = list(Difficulty)
    selected = difficulty

    while True:
        _draw_landing(selected)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
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
    """Launch the Rich CLI on its landing screen."""
    _landing_loop(difficulty, random.Random(seed))
