"""PyQt6 GUI frontend, fully self-contained.

Landing page with difficulty selection and a game page that redraws
whenever the engine reports a change.  Resolutions are posted to the Qt
event loop through ``QtScheduler``.
"""

from __future__ import annotations

import random
import sys
from typing import Callable

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSpacerItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import GameSnapshot
from backend.models.difficulty import Difficulty

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_SUBTEXT = "#a6adc8"
_BLUE = "#89b4fa"
_BLUE_H = "#a4c4fc"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_PINK = "#f5c2e7"
_YELLOW = "#f9e2af"
_RED = "#f38ba8"
_RED_H = "#f5a0b8"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""


class QtScheduler:
    """Runs engine resolutions on the Qt event loop."""

    def call_later(self, delay: int, callback: Callable[[], None]) -> None:
        QTimer.singleShot(delay, callback)


def _btn_css(bg: str, hover: str, fg: str, radius: int = 8) -> str:
    return (
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:{radius}px; padding:6px 18px; font-weight:bold; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 14,
    min_w: int = 0,
    min_h: int = 44,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(_btn_css(bg, hover, fg))
    return btn


class _LevelRow(QHBoxLayout):
    """Radio-like row of difficulty buttons; exactly one is highlighted."""

    def __init__(self, on_pick: Callable[[Difficulty], None]) -> None:
        super().__init__()
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setSpacing(10)
        self._btns: dict[Difficulty, QPushButton] = {}
        for level in Difficulty:
            btn = _styled_btn(level.label, min_w=96, min_h=40, font_size=13)
            btn.clicked.connect(lambda _, lv=level: on_pick(lv))
            self.addWidget(btn)
            self._btns[level] = btn

    def highlight(self, selected: Difficulty) -> None:
        for level, btn in self._btns.items():
            if level is selected:
                btn.setStyleSheet(_btn_css(_GREEN, _GREEN_H, _BASE))
            else:
                btn.setStyleSheet(_btn_css(_SURFACE0, _SURFACE1, _TEXT))


# ═══════════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════════


class _LandingPage(QWidget):
    """Welcome screen; picking a level starts the game."""

    def __init__(self, selected: Difficulty, on_pick: Callable[[Difficulty], None]) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(12)
        root.setContentsMargins(30, 30, 30, 30)

        title = QLabel("Welcome!")
        title.setFont(QFont("Helvetica", 34, QFont.Weight.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(title)

        root.addSpacerItem(QSpacerItem(0, 24))

        sub = QLabel("Select difficulty")
        sub.setFont(QFont("Helvetica", 15))
        sub.setStyleSheet(f"color:{_SUBTEXT};")
        sub.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(sub)

        self.levels = _LevelRow(on_pick)
        self.levels.highlight(selected)
        root.addLayout(self.levels)

        root.addSpacerItem(QSpacerItem(0, 18))

        self.quit_btn = _styled_btn(
            "Q U I T", bg=_RED, hover=_RED_H, fg=_BASE, min_w=240, font_size=13
        )
        root.addWidget(self.quit_btn, alignment=Qt.AlignmentFlag.AlignCenter)


class _GamePage(QWidget):
    """Level selector, attempt counter, tile grid and completion banner."""

    def __init__(self, game: GamePlay) -> None:
        super().__init__()
        self.setObjectName("page")
        self.game = game

        root = QVBoxLayout(self)
        root.setSpacing(8)
        root.setContentsMargins(16, 10, 16, 10)

        t = QLabel("Memory Game")
        t.setFont(QFont("Helvetica", 17, QFont.Weight.Bold))
        t.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(t)

        self.levels = _LevelRow(game.start_game)
        root.addLayout(self.levels)

        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 13))
        self._stats.setStyleSheet(f"color:{_PINK};")
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        frame = QFrame()
        frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        self._grid = QGridLayout(frame)
        self._grid.setSpacing(6)
        self._grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(frame, alignment=Qt.AlignmentFlag.AlignCenter)
        self._btns: list[QPushButton] = []

        self._banner = QLabel()
        self._banner.setFont(QFont("Helvetica", 15, QFont.Weight.Bold))
        self._banner.setStyleSheet(f"color:{_GREEN};")
        self._banner.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._banner)

        hint = QLabel("Click tiles to flip     R  restart     M  menu     Esc  quit")
        hint.setFont(QFont("Helvetica", 11))
        hint.setStyleSheet(f"color:{_OVERLAY0};")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(hint)

        self._unsubscribe = game.subscribe(self.sync)
        self.sync(game.snapshot())

    # -- helpers --

    def _rebuild_grid(self, level: Difficulty) -> None:
        for b in self._btns:
            self._grid.removeWidget(b)
            b.deleteLater()
        self._btns = []

        tile_px = 84 if level.columns <= 4 else 60
        for idx in range(level.tiles):
            b = QPushButton()
            b.setFixedSize(tile_px, tile_px)
            b.setFont(QFont("Helvetica", max(12, tile_px // 3), QFont.Weight.Bold))
            b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            b.clicked.connect(lambda _, i=idx: self.game.click_tile(i))
            r, c = divmod(idx, level.columns)
            self._grid.addWidget(b, r, c)
            self._btns.append(b)

    def sync(self, snap: GameSnapshot) -> None:
        if len(self._btns) != len(snap.tiles):
            self._rebuild_grid(snap.difficulty)
        self.levels.highlight(snap.difficulty)

        for b, tile in zip(self._btns, snap.tiles):
            b.setText(str(tile.value) if tile.face_up else "")
            if tile.matched:
                b.setStyleSheet(_btn_css(_GREEN, _GREEN, _BASE))
            elif tile.flipped:
                b.setStyleSheet(_btn_css(_YELLOW, _YELLOW, _BASE))
            else:
                b.setStyleSheet(_btn_css(_BLUE, _BLUE_H, _BASE))

        self._stats.setText(f"Attempts: {snap.attempts}")
        if snap.is_complete:
            self._banner.setText(
                f"★  All pairs matched in {snap.attempts} attempts!  ★"
            )
        else:
            self._banner.setText("")

    def close_page(self) -> None:
        self._unsubscribe()


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════

_IDX_LANDING = 0
_IDX_GAME = 1


class _MainWindow(QMainWindow):
    def __init__(self, difficulty: Difficulty, seed: int | None) -> None:
        super().__init__()
        self._rng = random.Random(seed)
        self._scheduler = QtScheduler()
        self._game: GamePlay | None = None
        self._game_page: _GamePage | None = None

        self.setWindowTitle("Memory Game")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(560, 600)

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        self._landing = _LandingPage(difficulty, self._on_pick)
        self._landing.quit_btn.clicked.connect(self.close)
        self._stack.addWidget(self._landing)  # 0
        self._stack.addWidget(QWidget())  # 1, replaced on first game

        self._stack.setCurrentIndex(_IDX_LANDING)

    # -- navigation ---

    def _on_pick(self, level: Difficulty) -> None:
        self._landing.levels.highlight(level)
        if self._game is None:
            self._game = GamePlay(level, scheduler=self._scheduler, rng=self._rng)
            page = _GamePage(self._game)
            self._game_page = page
            old = self._stack.widget(_IDX_GAME)
            self._stack.removeWidget(old)
            old.deleteLater()
            self._stack.insertWidget(_IDX_GAME, page)
        else:
            self._game.start_game(level)
        self._stack.setCurrentIndex(_IDX_GAME)

    def _show_landing(self) -> None:
        if self._game is not None:
            self._landing.levels.highlight(self._game.difficulty)
        self._stack.setCurrentIndex(_IDX_LANDING)

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        idx = self._stack.currentIndex()

        if idx == _IDX_LANDING:
            if key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
                self.close()
        elif idx == _IDX_GAME and self._game is not None:
            if key == Qt.Key.Key_R:
                self._game.restart()
            elif key == Qt.Key.Key_M:
                self._show_landing()
            elif key == Qt.Key.Key_Escape:
                self.close()
        else:
            super().keyPressEvent(event)

    def closeEvent(self, ev) -> None:  # noqa: N802
        if self._game_page is not None:
            self._game_page.close_page()
        super().closeEvent(ev)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(difficulty: Difficulty = Difficulty.EASY, seed: int | None = None) -> None:
    """Launch the PyQt6 GUI (opens on the landing page)."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(difficulty, seed)
    window.show()
    qapp.exec()
