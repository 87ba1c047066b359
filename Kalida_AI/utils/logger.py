"""Lightweight logging utilities for games and search diagnostics."""

import datetime


def log_event(message, level=None):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    if level and level != "INFO":
        print(f"[{timestamp}] {level}: {message}")
    else:
        print(f"[{timestamp}] {message}")
