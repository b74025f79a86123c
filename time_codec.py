"""
Time string helpers: 12/24-hour normalization and minutes-of-day conversion.

All times are naive wall-clock values. A parsed swipe is an int in 0..1439.
"""
import re
from datetime import datetime, time

from swipe_errors import BadFormatError

MINUTES_PER_DAY = 24 * 60

PERIOD_PATTERN = re.compile(r'\s*(am|pm)\s*')
CLOCK_PATTERN = re.compile(r'([01]?[0-9]|2[0-3]):[0-5][0-9]')
LEADING_DIGITS = re.compile(r'\s*(\d+)')


def convert_to_24_hour(raw):
    """
    Convert a time string to canonical 24-hour "HH:MM".
    Strings without an am/pm marker are returned trimmed and are NOT
    validated here; that happens in the swipe cleaner.
    """
    text = raw.strip()
    lowered = text.lower()

    if not PERIOD_PATTERN.search(lowered):
        return text

    time_part, period = PERIOD_PATTERN.split(lowered, maxsplit=1)[:2]
    # hour and minute are the leading digits of the first two ':' pieces
    parts = time_part.split(':')
    hour_match = LEADING_DIGITS.match(parts[0])
    minute_match = LEADING_DIGITS.match(parts[1]) if len(parts) > 1 else None
    if hour_match is None or minute_match is None:
        raise BadFormatError(text, f"Invalid time format: {text}")

    hours = int(hour_match.group(1))
    minutes = int(minute_match.group(1))

    hour24 = hours
    if period == 'am':
        if hours == 12:
            hour24 = 0
    elif hours != 12:
        hour24 = hours + 12

    return f"{hour24:02d}:{minutes:02d}"


def is_clock_string(text):
    """True for H:MM / HH:MM within 00:00..23:59"""
    return CLOCK_PATTERN.fullmatch(text) is not None


def time_to_minutes(text):
    """Convert "HH:MM" to minutes since midnight (input assumed valid)"""
    hours, minutes = text.split(':')
    return int(hours) * 60 + int(minutes)


def minutes_to_time_str(minutes):
    """Convert a non-negative minute count to HH:MM (hours may exceed 23)"""
    if minutes < 0:
        raise ValueError(f"Cannot format negative duration: {minutes} minutes")
    hours = minutes // 60
    mins = minutes % 60
    return f"{hours:02d}:{mins:02d}"


def minutes_to_decimal_hours(minutes):
    return round(minutes / 60, 2)


def add_minutes_to_time(minute_of_day, minutes_to_add):
    """Clock time after adding minutes, wrapping past midnight"""
    return minutes_to_time_str((minute_of_day + minutes_to_add) % MINUTES_PER_DAY)


def to_minute_of_day(value):
    """
    Coerce an injected "now" into minutes since midnight.
    Accepts int minutes, "HH:MM" / "HH:MM AM/PM" strings, datetime.time
    and datetime.datetime.
    """
    if isinstance(value, datetime):
        return value.hour * 60 + value.minute
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    if isinstance(value, bool):
        raise TypeError("Current time must be minutes, a time string or a time object")
    if isinstance(value, int):
        if not 0 <= value < MINUTES_PER_DAY:
            raise ValueError(f"Minute of day out of range: {value}")
        return value
    if isinstance(value, str):
        text = convert_to_24_hour(value)
        if not is_clock_string(text):
            raise BadFormatError(text)
        return time_to_minutes(text)
    raise TypeError("Current time must be minutes, a time string or a time object")
