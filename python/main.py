#!/usr/bin/env python3
"""Memory Match Game.

Usage::

    python main.py                     # interactive menu
    python main.py -f rich -d normal   # Rich terminal, 16 tiles
    python main.py -f pygame --seed 7  # Pygame GUI with a reproducible board
    python main.py -f pyqt -v          # PyQt GUI, debug logging
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.difficulty import DEFAULT_DIFFICULTY, Difficulty  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}

_MENU_CHOICES = {
    "1": Frontend.vanilla,
    "2": Frontend.rich,
    "3": Frontend.pygame,
    "4": Frontend.pyqt,
}


# -- helpers ------------------------------------------------------------------


def _launch(frontend: Frontend, difficulty: Difficulty, seed: Optional[int]) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(difficulty=difficulty, seed=seed)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _menu_loop(difficulty: Difficulty, seed: Optional[int]) -> None:
    while True:
        print()
        print("  ====================================")
        print("         M E M O R Y   G A M E        ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  4.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in _MENU_CHOICES:
            _launch(_MENU_CHOICES[choice], difficulty, seed)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    difficulty: Difficulty = typer.Option(
        DEFAULT_DIFFICULTY, "-d", "--difficulty",
        help="Starting difficulty.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the board shuffle for reproducible games.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine events at debug level.",
    ),
) -> None:
    """Memory Match Game."""
    _configure_logging(verbose)

    if frontend is None:
        _menu_loop(difficulty, seed)
        return

    _launch(frontend, difficulty, seed)


if __name__ == "__main__":
    app()
