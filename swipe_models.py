"""
Result records for the working-hours calculations.

- Duration: a minute count with hours/minutes/HH:MM views
- DailyResult: breakdown of one complete day
- LiveResult: projection for a day still in progress
- WeeklyDay / WeeklyResult: per-day entries and weekly aggregates

All records are frozen; they are built once per calculation.
"""

from dataclasses import dataclass, field
from typing import Optional

from time_codec import minutes_to_time_str


@dataclass(frozen=True)
class Duration:
    """A span of minutes. Negative spans are kept raw but display as 00:00."""
    total_minutes: int

    @property
    def hours(self) -> int:
        return max(0, self.total_minutes) // 60

    @property
    def minutes(self) -> int:
        return max(0, self.total_minutes) % 60

    @property
    def clock(self) -> str:
        return minutes_to_time_str(max(0, self.total_minutes))

    def __str__(self):
        return self.clock


@dataclass(frozen=True)
class DailyResult:
    """Breakdown of a complete swipe sequence."""
    working: Duration
    office: Duration
    breaks: Duration
    missed: Duration
    emoji: str
    office_emoji: str
    sessions: int = 0


@dataclass(frozen=True)
class LiveResult:
    """Projection of an in-progress day at an injected current time."""
    current_time: str
    working: Duration
    office: Duration
    breaks: Duration
    remaining: Duration
    completion_time: str
    completion_message: str
    achievement_level: str
    progress_percentage: int
    is_currently_working: bool
    emoji: str


# Weekly day status values
STATUS_OK = 'ok'
STATUS_BLANK = 'blank'
STATUS_ERROR = 'error'


@dataclass(frozen=True)
class WeeklyDay:
    day: str
    working: Duration
    missed: Duration
    emoji: str
    status: str = STATUS_OK
    error: Optional[str] = None


@dataclass(frozen=True)
class WeeklyResult:
    """Seven day entries, Monday first, plus weekly aggregates."""
    days: tuple = field(default_factory=tuple)
    valid_days: int = 0
    average_working: Duration = Duration(0)
    average_missed: Duration = Duration(0)
    total_working: Duration = Duration(0)
    overall_emoji: str = ''
