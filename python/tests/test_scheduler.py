from __future__ import annotations

import pytest

from backend.engine.scheduler import ClockScheduler, ManualScheduler


class _FakeClock:
    def __init__(self) -> None:
        self.t = 100.0

    def __call__(self) -> float:
        return self.t


# -- ManualScheduler ----------------------------------------------------------


def test_tasks_fire_when_due() -> None:
    scheduler = ManualScheduler()
    fired: list[str] = []
    scheduler.call_later(600, lambda: fired.append("a"))

    assert scheduler.advance(599) == 0
    assert fired == []
    assert scheduler.advance(1) == 1
    assert fired == ["a"]
    assert scheduler.now == 600
    assert scheduler.pending == 0


def test_tasks_fire_in_due_order() -> None:
    scheduler = ManualScheduler()
    fired: list[str] = []
    scheduler.call_later(900, lambda: fired.append("slow"))
    scheduler.call_later(600, lambda: fired.append("fast"))
    scheduler.call_later(600, lambda: fired.append("fast2"))

    scheduler.advance(1000)
    assert fired == ["fast", "fast2", "slow"]


def test_task_scheduled_from_callback_uses_fire_time() -> None:
    scheduler = ManualScheduler()
    fired: list[int] = []

    def first() -> None:
        fired.append(scheduler.now)
        scheduler.call_later(100, lambda: fired.append(scheduler.now))

    scheduler.call_later(50, first)
    scheduler.advance(200)
    assert fired == [50, 150]


def test_flush_runs_everything() -> None:
    scheduler = ManualScheduler()
    fired: list[int] = []
    scheduler.call_later(900, lambda: fired.append(1))
    scheduler.call_later(10_000, lambda: fired.append(2))

    assert scheduler.flush() == 2
    assert fired == [1, 2]
    assert scheduler.now == 10_000


def test_negative_delay_rejected() -> None:
    with pytest.raises(ValueError):
        ManualScheduler().call_later(-1, lambda: None)


# -- ClockScheduler -----------------------------------------------------------


def test_clock_scheduler_polls_wall_time() -> None:
    clock = _FakeClock()
    scheduler = ClockScheduler(clock)
    fired: list[str] = []
    scheduler.call_later(600, lambda: fired.append("x"))

    clock.t += 0.5
    assert scheduler.poll() == 0
    clock.t += 0.1
    assert scheduler.poll() == 1
    assert fired == ["x"]


def test_clock_scheduler_delay_counts_from_scheduling_time() -> None:
    clock = _FakeClock()
    scheduler = ClockScheduler(clock)
    clock.t += 2.0
    fired: list[str] = []
    scheduler.call_later(900, lambda: fired.append("x"))

    clock.t += 0.8
    scheduler.poll()
    assert fired == []
    clock.t += 0.1
    scheduler.poll()
    assert fired == ["x"]
