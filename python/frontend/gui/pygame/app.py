"""Pygame GUI frontend, fully self-contained.

Landing screen with difficulty selection, then the board with the level
selector, attempt counter and completion banner.  Resolutions are run by a
``ClockScheduler`` polled once per frame.
"""

from __future__ import annotations

import enum
import random

import pygame

from backend.engine.gameplay import GamePlay
from backend.engine.scheduler import ClockScheduler
from backend.models.difficulty import Difficulty

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 560, 640
TILE_GAP = 6
MARGIN = 20
BOARD_MAX = WIN_W - 2 * MARGIN  # max board width in px
BOARD_TOP = 130
FPS = 30


class _Screen(enum.Enum):
    LANDING = "landing"
    PLAYING = "playing"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, difficulty: Difficulty, seed: int | None = None) -> None:
        self._selected = difficulty
        self._rng = random.Random(seed)

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Memory Game")
        self._clock = pygame.time.Clock()
        self._scheduler = ClockScheduler()

        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._screen = _Screen.LANDING
        self._game: GamePlay | None = None

        self._landing_btns = self._level_btns(y=260)
        self._game_btns = self._level_btns(y=60)
        self._quit_btn = _Btn(
            (_cx(220), 360, 220, 42),
            "Q U I T",
            self._f_btn_sm,
            bg=COL_RED,
            hover=(255, 170, 185),
            fg=COL_BASE,
        )

    def _level_btns(self, y: int) -> dict[Difficulty, _Btn]:
        bw, bh, gap = 120, 40, 10
        levels = list(Difficulty)
        sx = _cx(len(levels) * bw + (len(levels) - 1) * gap)
        return {
            level: _Btn((sx + i * (bw + gap), y, bw, bh), level.label, self._f_btn_sm)
            for i, level in enumerate(levels)
        }

    # ── layout ──────────────────────────────────────────────────────────────

    def _tile_layout(self) -> tuple[int, int, int]:
        """Return (tile_px, origin_x, columns) for the current game."""
        columns = self._game.difficulty.columns  # type: ignore[union-attr]
        tile_px = min(96, (BOARD_MAX - (columns + 1) * TILE_GAP) // columns)
        total = columns * tile_px + (columns + 1) * TILE_GAP
        return tile_px, _cx(total) + TILE_GAP, columns

    def _tile_rect(self, idx: int, tpx: int, ox: int, columns: int) -> pygame.Rect:
        r, c = divmod(idx, columns)
        return pygame.Rect(
            ox + c * (tpx + TILE_GAP),
            BOARD_TOP + TILE_GAP + r * (tpx + TILE_GAP),
            tpx,
            tpx,
        )

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_levels(self, btns: dict[Difficulty, _Btn], selected: Difficulty) -> None:
        for level, btn in btns.items():
            btn.bg = COL_GREEN if level is selected else COL_SURFACE0
            btn.fg = COL_BASE if level is selected else COL_TEXT
            btn.draw(self._surf)

    def _draw_landing(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(self._surf, self._f_big.render("WELCOME!", True, COL_TEXT), 100)
        _blit_center(
            self._surf,
            self._f_body.render("Select difficulty", True, COL_SUBTEXT),
            220,
        )
        self._draw_levels(self._landing_btns, self._selected)
        self._quit_btn.draw(self._surf)

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        assert game is not None
        snap = game.snapshot()

        _blit_center(self._surf, self._f_title.render("Memory Game", True, COL_TEXT), 14)
        self._draw_levels(self._game_btns, snap.difficulty)
        _blit_center(
            self._surf,
            self._f_body.render(f"Attempts: {snap.attempts}", True, COL_PINK),
            106,
        )

        tpx, ox, columns = self._tile_layout()
        f_tile = pygame.font.SysFont("Helvetica", max(14, tpx // 3), bold=True)
        bottom = BOARD_TOP
        for idx, tile in enumerate(snap.tiles):
            rect = self._tile_rect(idx, tpx, ox, columns)
            bottom = rect.bottom
            if tile.matched:
                col = COL_GREEN
            elif tile.flipped:
                col = COL_YELLOW
            else:
                col = COL_BLUE
            pygame.draw.rect(self._surf, col, rect, border_radius=6)
            if tile.face_up:
                lbl = f_tile.render(str(tile.value), True, COL_BASE)
                self._surf.blit(
                    lbl,
                    (
                        rect.centerx - lbl.get_width() // 2,
                        rect.centery - lbl.get_height() // 2,
                    ),
                )

        if snap.is_complete:
            _blit_center(
                self._surf,
                self._f_title.render(
                    f"★  All pairs matched in {snap.attempts} attempts!  ★",
                    True,
                    COL_GREEN,
                ),
                bottom + 20,
            )

        _blit_center(
            self._surf,
            self._f_small.render(
                "Click tiles to flip     R  restart     Esc  menu", True, COL_OVERLAY0
            ),
            WIN_H - 30,
        )

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_landing(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in (*self._landing_btns.values(), self._quit_btn):
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for level, b in self._landing_btns.items():
                if b.hit(ev.pos):
                    self._start_game(level)
                    return True
            if self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_RETURN:
                self._start_game(self._selected)
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        game = self._game
        assert game is not None
        if ev.type == pygame.MOUSEMOTION:
            for b in self._game_btns.values():
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for level, b in self._game_btns.items():
                if b.hit(ev.pos):
                    self._start_game(level)
                    return True
            tpx, ox, columns = self._tile_layout()
            for idx in range(game.difficulty.tiles):
                if self._tile_rect(idx, tpx, ox, columns).collidepoint(ev.pos):
                    game.click_tile(idx)
                    return True
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_r:
                game.restart()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.LANDING
        return True

    # ── game state ──────────────────────────────────────────────────────────

    def _start_game(self, level: Difficulty) -> None:
        self._selected = level
        if self._game is None:
            self._game = GamePlay(level, scheduler=self._scheduler, rng=self._rng)
        else:
            self._game.start_game(level)
        self._screen = _Screen.PLAYING

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.LANDING: self._ev_landing,
            _Screen.PLAYING: self._ev_game,
        }
        _draw = {
            _Screen.LANDING: self._draw_landing,
            _Screen.PLAYING: self._draw_game,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                if not _dispatch[self._screen](ev):
                    running = False
                    break

            self._scheduler.poll()
            _draw[self._screen]()
            pygame.display.flip()
            self._clock.tick(FPS)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(difficulty: Difficulty = Difficulty.EASY, seed: int | None = None) -> None:
    """Launch the Pygame GUI (opens on the landing screen)."""
    app = PygameApp(difficulty, seed)
    app.run_loop()
