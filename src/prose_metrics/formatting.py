from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_time(word_count: int, wpm: int) -> str:
    """Render the time needed to get through ``word_count`` words at ``wpm``."""
    if word_count == 0:
        return "0 min"
    total_seconds = round_half_up(word_count / wpm * 60)
    minutes, seconds = divmod(total_seconds, 60)
    if minutes == 0:
        return f"{seconds} sec"
    if seconds == 0:
        return f"{minutes} min"
    return f"{minutes} min {seconds} sec"


def ordinal(n: int) -> str:
    """Render ``n`` with its English ordinal suffix (1st, 12th, 23rd, ...)."""
    if 11 <= n % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"
