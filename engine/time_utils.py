"""HH:MM time-of-day helpers."""

from datetime import datetime, timedelta

TIME_FORMAT = "%H:%M"


def parse_time_of_day(value: str) -> datetime:
    """Parse an HH:MM string. Raises ValueError on malformed input."""
    return datetime.strptime(value.strip(), TIME_FORMAT)


def add_hours(time_of_day: str, hours: float) -> str:
    """Shift an HH:MM time by a number of hours, wrapping past midnight."""
    shifted = parse_time_of_day(time_of_day) + timedelta(hours=hours)
    return shifted.strftime(TIME_FORMAT)


def minutes_between(start: str, end: str) -> int:
    """Minutes from start to end; an end earlier than start is taken as the next day."""
    delta = parse_time_of_day(end) - parse_time_of_day(start)
    minutes = int(delta.total_seconds() // 60)
    if minutes < 0:
        minutes += 24 * 60
    return minutes


def now_time_of_day() -> str:
    return datetime.now().strftime(TIME_FORMAT)
