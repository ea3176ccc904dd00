from __future__ import annotations

from datetime import date

from ..core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR


def format_time(hour: int, minute: int) -> str:
    """Format an hour/minute pair as zero-padded ``HH:MM``."""
    return f"{hour:02d}:{minute:02d}"


def parse_time(value: str) -> tuple[int, int]:
    """Parse ``HH:MM`` into ``(hour, minute)``."""
    hour_s, minute_s = value.strip().split(":")[:2]
    return int(hour_s), int(minute_s)


def minutes_to_hhmm(total_minutes: int) -> str:
    """Clock time for a minute offset from midnight, wrapping past 24:00."""
    total_minutes %= MINUTES_PER_DAY
    return format_time(total_minutes // MINUTES_PER_HOUR, total_minutes % MINUTES_PER_HOUR)


def hhmm_to_minutes(value: str) -> int:
    hour, minute = parse_time(value)
    return hour * MINUTES_PER_HOUR + minute


def add_minutes_to_time(value: str, minutes: int) -> str:
    return minutes_to_hhmm(hhmm_to_minutes(value) + minutes)


def format_interval(start_minutes: int, length_minutes: int) -> str:
    """``HH:MM-HH:MM`` window starting at ``start_minutes`` (both ends wrap)."""
    return f"{minutes_to_hhmm(start_minutes)}-{minutes_to_hhmm(start_minutes + length_minutes)}"


def hour_label(hour: int) -> str:
    return f"{hour}:00 - {hour + 1}:00"


def today_local() -> date:
    """Date stamped on saved distributions and export filenames."""
    return date.today()
