"""Embedded-style buffers, queues, scheduling, clock/calendar, frames and byte helpers."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "arrayops",
    "bits",
    "buffer",
    "dates",
    "frames",
    "games",
    "msgqueue",
    "rtcc",
    "scheduler",
]