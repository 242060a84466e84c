from backend.engine.scheduler.scheduler import ClockScheduler, ManualScheduler, Scheduler

__all__ = ["ClockScheduler", "ManualScheduler", "Scheduler"]
