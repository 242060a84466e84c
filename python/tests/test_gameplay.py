"""Game engine tests.

Resolutions are driven by a ``ManualScheduler`` so delays are exact, and
boards come from seeded generators so pairs can be looked up by value.
"""

from __future__ import annotations

import random

import pytest

from backend.engine.gameplay import MATCH_DELAY_MS, MISMATCH_DELAY_MS, GamePlay
from backend.engine.gamestate import GameSnapshot
from backend.engine.scheduler import ManualScheduler
from backend.errors import InvalidDifficultyError, TileIndexError
from backend.models.difficulty import Difficulty


# -- helpers ------------------------------------------------------------------


def _new_game(
    difficulty: Difficulty = Difficulty.EASY, seed: int = 7
) -> tuple[GamePlay, ManualScheduler]:
    scheduler = ManualScheduler()
    game = GamePlay(difficulty, scheduler=scheduler, rng=random.Random(seed))
    return game, scheduler


def _pair(game: GamePlay, value: int) -> tuple[int, int]:
    """Indices of the two tiles holding *value*."""
    first, second = [i for i, t in enumerate(game.state.tiles) if t.value == value]
    return first, second


def _mismatch(game: GamePlay) -> tuple[int, int]:
    """Two face-down tiles with different values."""
    hidden = [i for i, t in enumerate(game.state.tiles) if not t.face_up]
    first = hidden[0]
    for other in hidden[1:]:
        if game.state.tiles[other].value != game.state.tiles[first].value:
            return first, other
    raise AssertionError("no mismatching face-down tiles left")


def _face_up_unmatched(game: GamePlay) -> int:
    return game.state.face_up_unmatched()


# -- start_game ---------------------------------------------------------------


@pytest.mark.parametrize("level", list(Difficulty), ids=lambda d: d.value)
def test_start_game_resets_state(level: Difficulty) -> None:
    game, _ = _new_game()
    game.start_game(level)

    assert game.difficulty is level
    assert len(game.state.tiles) == level.tiles
    assert game.state.selection == []
    assert game.state.attempts == 0
    assert game.state.matched_pairs == 0
    assert not game.is_complete


def test_default_difficulty_is_easy() -> None:
    game = GamePlay()
    assert game.difficulty is Difficulty.EASY
    assert len(game.state.tiles) == 8


def test_start_game_rejects_unknown_difficulty() -> None:
    game, _ = _new_game()
    with pytest.raises(InvalidDifficultyError):
        game.start_game("expert")
    assert game.difficulty is Difficulty.EASY


def test_restart_keeps_difficulty() -> None:
    game, _ = _new_game(Difficulty.NORMAL)
    game.click_tile(0)
    game.restart()
    assert game.difficulty is Difficulty.NORMAL
    assert game.state.selection == []
    assert not any(t.flipped for t in game.state.tiles)


# -- click_tile ---------------------------------------------------------------


def test_first_click_flips_tile() -> None:
    game, scheduler = _new_game()
    assert game.click_tile(3) is True
    assert game.state.tiles[3].flipped
    assert game.state.selection == [3]
    assert game.state.attempts == 0
    assert scheduler.pending == 0


def test_click_on_flipped_tile_is_noop() -> None:
    game, _ = _new_game()
    game.click_tile(3)
    assert game.click_tile(3) is False
    assert game.state.selection == [3]


def test_third_click_during_resolution_is_noop() -> None:
    game, scheduler = _new_game()
    a, b = _mismatch(game)
    game.click_tile(a)
    game.click_tile(b)
    other = next(i for i in range(8) if i not in (a, b))

    assert game.click_tile(other) is False
    assert not game.state.tiles[other].flipped
    assert _face_up_unmatched(game) == 2
    assert scheduler.pending == 1


def test_click_on_matched_tile_is_noop() -> None:
    game, scheduler = _new_game()
    a, b = _pair(game, 1)
    game.click_tile(a)
    game.click_tile(b)
    scheduler.advance(MATCH_DELAY_MS)

    assert game.click_tile(a) is False
    assert game.state.selection == []
    assert game.state.attempts == 1


@pytest.mark.parametrize("index", [-1, 8, 100])
def test_out_of_range_index_raises(index: int) -> None:
    game, _ = _new_game()
    with pytest.raises(TileIndexError):
        game.click_tile(index)


def test_attempts_count_comparisons() -> None:
    game, scheduler = _new_game()
    a, b = _mismatch(game)
    game.click_tile(a)
    game.click_tile(b)
    assert game.state.attempts == 1
    scheduler.advance(MISMATCH_DELAY_MS)

    c, d = _pair(game, 2)
    game.click_tile(c)
    assert game.state.attempts == 1
    game.click_tile(d)
    assert game.state.attempts == 2


# -- resolution ---------------------------------------------------------------


def test_match_resolves_after_delay() -> None:
    game, scheduler = _new_game()
    a, b = _pair(game, 3)
    game.click_tile(a)
    game.click_tile(b)

    scheduler.advance(MATCH_DELAY_MS - 1)
    assert not game.state.tiles[a].matched
    assert game.state.selection == [a, b]

    scheduler.advance(1)
    for i in (a, b):
        assert game.state.tiles[i].matched
        assert game.state.tiles[i].flipped
    assert game.state.matched_pairs == 1
    assert game.state.selection == []


def test_mismatch_flips_back_after_delay() -> None:
    game, scheduler = _new_game()
    a, b = _mismatch(game)
    game.click_tile(a)
    game.click_tile(b)

    scheduler.advance(MISMATCH_DELAY_MS - 1)
    assert game.state.tiles[a].flipped and game.state.tiles[b].flipped

    scheduler.advance(1)
    for i in (a, b):
        assert not game.state.tiles[i].flipped
        assert not game.state.tiles[i].matched
    assert game.state.matched_pairs == 0
    assert game.state.selection == []


def test_easy_walkthrough() -> None:
    game, scheduler = _new_game(Difficulty.EASY, seed=1)
    snap = game.snapshot()
    assert len(snap.tiles) == 8
    assert sorted(t.value for t in snap.tiles) == [1, 1, 2, 2, 3, 3, 4, 4]
    assert (snap.attempts, snap.matched_pairs) == (0, 0)

    a, b = _pair(game, 3)
    game.click_tile(a)
    game.click_tile(b)
    assert game.state.attempts == 1
    scheduler.advance(600)
    assert game.state.tiles[a].matched and game.state.tiles[b].matched
    assert game.state.matched_pairs == 1

    c, d = _mismatch(game)
    game.click_tile(c)
    game.click_tile(d)
    assert game.state.attempts == 2
    scheduler.advance(900)
    assert not game.state.tiles[c].flipped and not game.state.tiles[d].flipped
    assert game.state.matched_pairs == 1


# -- completion ---------------------------------------------------------------


@pytest.mark.parametrize("level", list(Difficulty), ids=lambda d: d.value)
def test_complete_after_all_pairs(level: Difficulty) -> None:
    game, scheduler = _new_game(level)
    for value in range(1, level.pairs + 1):
        assert not game.is_complete
        a, b = _pair(game, value)
        game.click_tile(a)
        game.click_tile(b)
        scheduler.advance(MATCH_DELAY_MS)

    assert game.is_complete
    assert game.state.matched_pairs == level.pairs
    assert game.state.attempts == level.pairs

    # Matched tiles stay inert; completion holds until the next game.
    assert all(game.click_tile(i) is False for i in range(level.tiles))
    assert game.is_complete

    game.start_game(level)
    assert not game.is_complete


# -- stale resolutions --------------------------------------------------------


def test_stale_mismatch_ignored_after_new_game() -> None:
    game, scheduler = _new_game(Difficulty.EASY)
    a, b = _mismatch(game)
    game.click_tile(a)
    game.click_tile(b)

    game.start_game(Difficulty.NORMAL)
    game.click_tile(a)
    before = game.snapshot()

    scheduler.advance(MISMATCH_DELAY_MS)
    assert scheduler.pending == 0
    assert game.snapshot() == before
    assert game.state.tiles[a].flipped
    assert game.state.selection == [a]


def test_stale_match_does_not_count() -> None:
    game, scheduler = _new_game(Difficulty.EASY)
    a, b = _pair(game, 1)
    game.click_tile(a)
    game.click_tile(b)

    game.start_game(Difficulty.EASY)
    scheduler.flush()

    assert game.state.matched_pairs == 0
    assert not any(t.matched for t in game.state.tiles)


def test_generation_increases_per_game() -> None:
    game, _ = _new_game()
    first = game.state.generation
    game.restart()
    game.start_game(Difficulty.HARD)
    assert game.state.generation == first + 2


# -- invariants under random play ---------------------------------------------


@pytest.mark.parametrize("seed", range(10))
def test_random_play_keeps_invariants(seed: int) -> None:
    rng = random.Random(seed)
    level = rng.choice(list(Difficulty))
    game, scheduler = _new_game(level, seed=seed)
    attempts = 0

    for _ in range(400):
        before = len(game.state.selection)
        if rng.random() < 0.3:
            scheduler.advance(rng.choice([100, 600, 900]))
        else:
            accepted = game.click_tile(rng.randrange(level.tiles))
            if accepted and before == 1:
                attempts += 1

        assert _face_up_unmatched(game) <= 2
        assert len(game.state.selection) <= 2
        assert game.state.attempts == attempts
        assert all(t.flipped for t in game.state.tiles if t.matched)
        matched = sum(1 for t in game.state.tiles if t.matched)
        assert matched == 2 * game.state.matched_pairs
        assert game.is_complete == (game.state.matched_pairs == level.pairs)

    assert scheduler.pending <= 1


# -- observers ----------------------------------------------------------------


def test_subscribers_receive_snapshots() -> None:
    game, scheduler = _new_game()
    seen: list[GameSnapshot] = []
    unsubscribe = game.subscribe(seen.append)

    a, b = _pair(game, 2)
    game.click_tile(a)
    game.click_tile(b)
    game.click_tile(a)  # no-op, no notification
    scheduler.advance(MATCH_DELAY_MS)

    assert len(seen) == 3
    assert seen[1].pending
    assert seen[-1].matched_pairs == 1
    assert seen[-1].tiles[a].matched

    unsubscribe()
    game.restart()
    assert len(seen) == 3


def test_snapshot_is_detached() -> None:
    game, _ = _new_game()
    snap = game.snapshot()
    game.click_tile(0)
    assert not snap.tiles[0].flipped
    assert snap.selection == ()
