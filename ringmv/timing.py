"""Monotonic wall-clock time stamps."""

import time


def time_stamp() -> float:
    """Return a monotonic time stamp in seconds."""
    return time.monotonic()


def time_resolution() -> float:
    """Return the resolution of the monotonic clock in seconds."""
    return time.get_clock_info("monotonic").resolution