"""A clock application: one task keeps time, another displays it via a queue."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from embkit.msgqueue import MessageQueue, QueueFullError
from embkit.rtcc import Rtcc
from embkit.scheduler import Scheduler, milliseconds

QUEUE_CAPACITY = 6
DISPLAY_PERIOD = 500
CLOCK_PERIOD = 1000


@dataclass(frozen=True)
class _Reading:
    hour: int
    minutes: int
    seconds: int
    day: int
    wday: int
    month: int
    year: int


class ClockApp:
    """Runs a clock task every second and a display task every half second."""

    def __init__(
        self,
        timeout: int = 999999,
        tick: int = 100,
        output: TextIO | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.output = output if output is not None else sys.stdout
        self.rtcc = Rtcc()
        self.queue = MessageQueue(QUEUE_CAPACITY)
        self.scheduler = Scheduler(
            tick=tick,
            timeout=timeout,
            max_tasks=2,
            max_timers=0,
            clock=clock if clock is not None else milliseconds,
        )
        self.scheduler.register_task(self.init_display, self.display_task, DISPLAY_PERIOD)
        self.scheduler.register_task(self.init_clock, self.clock_task, CLOCK_PERIOD)

    def _print(self, text: str) -> None:
        self.output.write(text + "\n")

    def init_display(self) -> None:
        """Announce the display task."""
        self._print("Init task 500 millisecond")

    def init_clock(self) -> None:
        """Reset the clock to 23:59:58 on 31/12/1984 and announce the clock task."""
        self.rtcc = Rtcc()
        self.rtcc.set_time(23, 59, 58)
        self.rtcc.set_date(31, 12, 1984)
        self._print("Init task 1000 millisecond")

    def display_task(self) -> None:
        """Print the oldest queued reading, if there is one."""
        if self.queue.is_empty():
            return
        reading = self.queue.read()
        self._print(f"Time - {reading.hour}:{reading.minutes}:{reading.seconds}")
        self._print(f"Date - {reading.day}/{reading.month}/{reading.year}")

    def clock_task(self) -> None:
        """Advance the clock one second and queue the new time and date."""
        self.rtcc.tick()
        hour, minutes, seconds = self.rtcc.current_time()
        day, month, year, wday = self.rtcc.current_date()
        reading = _Reading(hour, minutes, seconds, day, wday, month, year)
        try:
            self.queue.write(reading)
        except QueueFullError:
            pass

    def run(self) -> None:
        """Run the scheduler until its timeout."""
        self.scheduler.start()


def main(argv: list[str] | None = None) -> int:
    """Run the clock application on the console."""
    parser = argparse.ArgumentParser(prog="embkit-clock")
    parser.add_argument("--timeout", type=int, default=999999,
                        help="run until the clock passes this many milliseconds")
    parser.add_argument("--tick", type=int, default=100, help="tick in milliseconds")
    args = parser.parse_args(argv)
    app = ClockApp(timeout=args.timeout, tick=args.tick)
    app.run()
    return 0