"""Helpers for human move deadlines and search timing."""

import time


def deadline_after(seconds):
    """Absolute deadline `seconds` from now, or None for no limit."""
    if seconds is None or seconds <= 0:
        return None
    return time.time() + seconds


def time_remaining(deadline):
    return deadline - time.time()


def elapsed_since(start):
    return time.time() - start
