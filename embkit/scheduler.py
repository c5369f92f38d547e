"""A cooperative tick-based task scheduler with software timers."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

Callback = Callable[[], None]


class SchedulerError(Exception):
    """Raised when a task or timer cannot be registered or addressed."""


@dataclass
class Task:
    """A periodic task and its run state."""

    period: int
    action: Callback
    init: Callback | None = None
    elapsed: int = 0
    running: bool = True
    stopped: bool = False


@dataclass
class Timer:
    """A one-shot countdown timer that fires a callback when it expires."""

    timeout: int
    callback: Callback | None = None
    count: int = 0
    started: bool = False


def milliseconds() -> int:
    """Processor time used by this process, in whole milliseconds."""
    return int(time.process_time() * 1000)


class Scheduler:
    """Runs registered tasks and timers on a fixed tick for a bounded time."""

    def __init__(
        self,
        tick: int,
        timeout: int,
        max_tasks: int,
        max_timers: int = 0,
        clock: Callable[[], int] | None = None,
    ) -> None:
        if tick <= 0:
            raise ValueError("tick must be positive")
        if max_tasks < 0 or max_timers < 0:
            raise ValueError("capacities must not be negative")
        self.tick = tick
        self.timeout = timeout
        self.max_tasks = max_tasks
        self.max_timers = max_timers
        self._clock = clock if clock is not None else milliseconds
        self._tasks: list[Task] = []
        self._timers: list[Timer] = []

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Registered tasks, in registration order."""
        return tuple(self._tasks)

    @property
    def timers(self) -> tuple[Timer, ...]:
        """Registered timers, in registration order."""
        return tuple(self._timers)

    def _is_valid_interval(self, interval: int) -> bool:
        return interval >= self.tick and interval % self.tick == 0

    def _task(self, task_id: int) -> Task:
        if not 1 <= task_id <= len(self._tasks):
            raise SchedulerError(f"unknown task id: {task_id}")
        return self._tasks[task_id - 1]

    def _timer(self, timer_id: int) -> Timer:
        if not 1 <= timer_id <= len(self._timers):
            raise SchedulerError(f"unknown timer id: {timer_id}")
        return self._timers[timer_id - 1]

    def register_task(self, init: Callback | None, task: Callback, period: int) -> int:
        """Register a periodic task and return its id, counted from 1."""
        if task is None:
            raise SchedulerError("task function is required")
        if not self._is_valid_interval(period):
            raise SchedulerError(
                f"period {period} must be a multiple of the tick {self.tick}"
            )
        if len(self._tasks) >= self.max_tasks:
            raise SchedulerError("no room for another task")
        self._tasks.append(Task(period=period, action=task, init=init))
        return len(self._tasks)

    def stop_task(self, task_id: int) -> None:
        """Stop a task so that it is no longer run."""
        entry = self._task(task_id)
        entry.stopped = True
        entry.running = False

    def start_task(self, task_id: int) -> None:
        """Resume a stopped task."""
        entry = self._task(task_id)
        entry.stopped = False
        entry.running = True

    def set_period(self, task_id: int, period: int) -> bool:
        """Change a task's period; return True if the task is currently stopped."""
        entry = self._task(task_id)
        entry.period = period
        return entry.stopped

    def register_timer(self, timeout: int, callback: Callback | None) -> int:
        """Register a stopped timer and return its id, counted from 1."""
        if len(self._timers) >= self.max_timers:
            raise SchedulerError("no room for another timer")
        if not self._is_valid_interval(timeout):
            raise SchedulerError(
                f"timeout {timeout} must be a multiple of the tick {self.tick}"
            )
        self._timers.append(Timer(timeout=timeout, callback=callback))
        return len(self._timers)

    def get_timer(self, timer_id: int) -> int:
        """Return the milliseconds left on a timer."""
        return self._timer(timer_id).count

    def reload_timer(self, timer_id: int, timeout: int) -> None:
        """Set a new timeout; a running timer restarts its count from it."""
        timer = self._timer(timer_id)
        timer.timeout = timeout
        if timer.started:
            timer.count = timeout

    def start_timer(self, timer_id: int) -> None:
        """Load a timer with its timeout and start counting down."""
        timer = self._timer(timer_id)
        timer.count = timer.timeout
        timer.started = True

    def stop_timer(self, timer_id: int) -> None:
        """Pause a timer, keeping its remaining count."""
        self._timer(timer_id).started = False

    def run_init(self) -> None:
        """Call the init function of every registered task that has one."""
        for task in self._tasks:
            if task.init is not None:
                task.init()

    def run_tasks(self) -> None:
        """Advance every task by one tick, running those whose period is due."""
        for task in self._tasks:
            if task.running and not task.stopped and self.tick <= task.period:
                if task.elapsed >= task.period:
                    task.elapsed = 0
                    task.action()
            task.elapsed += self.tick

    def run_timers(self) -> None:
        """Count every started timer down by one tick, firing expired ones."""
        for timer in self._timers:
            if not timer.started:
                continue
            timer.count -= self.tick
            if timer.count == 0:
                timer.started = False
                if timer.callback is not None:
                    timer.callback()

    def step(self) -> None:
        """Process one tick: tasks first, then timers."""
        self.run_tasks()
        self.run_timers()

    def start(self) -> None:
        """Run init functions, then tick until the clock passes the timeout."""
        tickstart = self._clock()
        self.run_init()
        while tickstart <= self.timeout:
            now = self._clock()
            if now - tickstart >= self.tick:
                tickstart = self._clock()
                self.step()