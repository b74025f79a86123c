"""
Working hours calculator.

Computes, from a day's clock-in/clock-out swipes:
- Daily breakdown (working time, office span, breaks, missed time)
- Live projection for a day still in progress (needs an injected "now")
- Weekly aggregate over Monday..Sunday swipe strings

Swipes are paired in order: in, out, in, out, ...
"""
import logging
import math

from swipe_cleaner import MODE_COMPLETE, MODE_LIVE, clean_swipes
from swipe_errors import ClockInFutureError, NoValidSessionsError, SwipeError
from swipe_models import (
    STATUS_BLANK,
    STATUS_ERROR,
    STATUS_OK,
    DailyResult,
    Duration,
    LiveResult,
    WeeklyDay,
    WeeklyResult,
)
from time_codec import (
    MINUTES_PER_DAY,
    add_minutes_to_time,
    minutes_to_time_str,
    to_minute_of_day,
)

logger = logging.getLogger(__name__)

# Rule configuration
WORK_RULES = {
    'target_minutes': 8 * 60 + 30,          # daily working target (8:30)
    'office_target_minutes': 9 * 60,        # office span target (9:00)
    'max_rollover_session_minutes': 16 * 60,  # longest accepted past-midnight session
    'strict_rollover': False,               # fail instead of skipping out-of-bound sessions
}

DAYS = ['Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday']

# Performance indicators
EMOJI_CELEBRATE = '🎉'
EMOJI_HAPPY = '😊'
EMOJI_NEUTRAL = '😐'
EMOJI_MILD = '😕'
EMOJI_SAD = '😞'
EMOJI_APPLAUSE = '👏'
EMOJI_NO_DATA = '😴'
EMOJI_ERROR = '❌'
EMOJI_WORKING = '💼'
EMOJI_ON_BREAK = '☕'

# (extra minutes over target, glyph, title), highest first
ACHIEVEMENTS = [
    (150, '🏆', 'Workaholic Champion'),
    (90, '🥇', 'Gold Performer'),
    (30, '🥈', 'Silver Achiever'),
    (0, '🥉', 'Bronze Finisher'),
]

MESSAGE_KEEP_WORKING = 'If you continue working without breaks'
MESSAGE_RESUME = 'When you resume working (excluding current break time)'
ALREADY_COMPLETED = 'Already completed!'

# Sample inputs
EXAMPLE_DAY = {
    '24': '09:00, 12:30, 13:30, 18:00',
    '12': '09:00 AM, 12:30 PM, 01:30 PM, 06:00 PM',
}
EXAMPLE_WEEK = {
    '24': [
        '09:00, 12:30, 13:30, 18:00',
        '08:30, 12:00, 13:00, 17:30',
        '09:15, 12:45, 13:45, 18:15',
        '08:45, 12:15, 13:15, 17:45',
        '09:00, 12:30, 13:30, 17:00',
        '',
        '',
    ],
    '12': [
        '09:00 AM, 12:30 PM, 01:30 PM, 06:00 PM',
        '08:30 AM, 12:00 PM, 01:00 PM, 05:30 PM',
        '09:15 AM, 12:45 PM, 01:45 PM, 06:15 PM',
        '08:45 AM, 12:15 PM, 01:15 PM, 05:45 PM',
        '09:00 AM, 12:30 PM, 01:30 PM, 05:00 PM',
        '',
        '',
    ],
}


def round_half_up(value):
    return int(math.floor(value + 0.5))


class WorkingHoursCalculator:
    def __init__(self, rules=None):
        self.rules = dict(WORK_RULES)
        if rules:
            unknown = set(rules) - set(WORK_RULES)
            if unknown:
                raise ValueError(f"Unknown rule(s): {', '.join(sorted(unknown))}")
            self.rules.update(rules)

        for key in ('target_minutes', 'office_target_minutes', 'max_rollover_session_minutes'):
            if self.rules[key] <= 0:
                raise ValueError(f"Rule '{key}' must be a positive number of minutes, got {self.rules[key]}")

    @property
    def target(self):
        return self.rules['target_minutes']

    # ------------------------ Sessions & Breaks ------------------------
    def session_minutes(self, start, end):
        """
        Minutes worked between a punch-in and punch-out.
        An end at or before the start is read as the next day; such a session
        is only accepted up to the rollover bound. Returns None when rejected.
        """
        if end > start:
            return end - start

        session = end + MINUTES_PER_DAY - start
        if 0 < session <= self.rules['max_rollover_session_minutes']:
            return session

        pair = f"{minutes_to_time_str(start)} -> {minutes_to_time_str(end)}"
        if self.rules['strict_rollover']:
            raise NoValidSessionsError(
                f"Invalid working session {pair}: exceeds "
                f"{minutes_to_time_str(self.rules['max_rollover_session_minutes'])} past midnight."
            )
        logger.debug("Skipping out-of-bound session %s (%d mins)", pair, session)
        return None

    def sum_sessions(self, swipes):
        """Sum complete (in, out) pairs. Returns (minutes, accepted sessions)."""
        total_minutes = 0
        valid_sessions = 0
        for i in range(0, len(swipes) - 1, 2):
            session = self.session_minutes(swipes[i], swipes[i + 1])
            if session is None:
                continue
            total_minutes += session
            valid_sessions += 1
        return total_minutes, valid_sessions

    def sum_breaks(self, swipes):
        """Sum gaps between a punch-out and the next punch-in (positive only)"""
        total_break = 0
        for i in range(1, len(swipes) - 1, 2):
            gap = swipes[i + 1] - swipes[i]
            if gap > 0:
                total_break += gap
        return total_break

    # ------------------------ Indicators ------------------------
    def performance_emoji(self, working_minutes):
        target = self.target
        if working_minutes >= target + 60:
            return EMOJI_CELEBRATE
        if working_minutes >= target:
            return EMOJI_HAPPY
        if working_minutes >= target - 30:
            return EMOJI_NEUTRAL
        if working_minutes >= target - 120:
            return EMOJI_MILD
        return EMOJI_SAD

    def office_emoji(self, office_minutes):
        office_target = self.rules['office_target_minutes']
        if office_minutes >= office_target:
            return EMOJI_APPLAUSE
        if office_minutes >= office_target - 30:
            return EMOJI_NEUTRAL
        return EMOJI_MILD

    def achievement(self, working_minutes):
        """Return (glyph, title) for the live tracker"""
        extra = working_minutes - self.target
        if extra >= 0:
            for threshold, glyph, title in ACHIEVEMENTS:
                if extra >= threshold:
                    return glyph, title
        return self.performance_emoji(working_minutes), ''

    # ------------------------ Daily ------------------------
    def daily_from_swipes(self, swipes):
        """Daily breakdown from cleaned, even-length swipes"""
        working, sessions = self.sum_sessions(swipes)
        if sessions == 0:
            raise NoValidSessionsError()

        office = swipes[-1] - swipes[0]
        breaks = self.sum_breaks(swipes)
        missed = max(0, self.target - working)

        return DailyResult(
            working=Duration(working),
            office=Duration(office),
            breaks=Duration(breaks),
            missed=Duration(missed),
            emoji=self.performance_emoji(working),
            office_emoji=self.office_emoji(office),
            sessions=sessions,
        )

    def calculate_daily(self, raw):
        swipes = clean_swipes(raw, MODE_COMPLETE)
        return self.daily_from_swipes(swipes)

    # ------------------------ Live ------------------------
    def live_from_swipes(self, swipes, now_minutes):
        """Live projection from cleaned, odd-length swipes at now_minutes"""
        is_working = len(swipes) % 2 == 1
        last_swipe = swipes[-1]

        working, _ = self.sum_sessions(swipes)
        if is_working:
            if now_minutes < last_swipe:
                raise ClockInFutureError(minutes_to_time_str(now_minutes), minutes_to_time_str(last_swipe))
            working += now_minutes - last_swipe

        office = now_minutes - swipes[0]

        breaks = self.sum_breaks(swipes)
        if not is_working and len(swipes) > 1:
            current_break = now_minutes - last_swipe
            if current_break > 0:
                breaks += current_break

        target = self.target
        remaining = max(0, target - working)

        if remaining > 0:
            completion_time = add_minutes_to_time(now_minutes, remaining)
            completion_message = MESSAGE_KEEP_WORKING if is_working else MESSAGE_RESUME
        else:
            extra = working - target
            completion_time = ALREADY_COMPLETED
            completion_message = f"Completed {extra // 60}:{extra % 60:02d} extra!"

        progress = min(round_half_up(working / target * 100), 100)

        glyph, level = self.achievement(working)
        prefix = EMOJI_WORKING if is_working else EMOJI_ON_BREAK

        return LiveResult(
            current_time=minutes_to_time_str(now_minutes),
            working=Duration(working),
            office=Duration(office),
            breaks=Duration(breaks),
            remaining=Duration(remaining),
            completion_time=completion_time,
            completion_message=completion_message,
            achievement_level=level,
            progress_percentage=progress,
            is_currently_working=is_working,
            emoji=f"{prefix} {glyph}",
        )

    def calculate_live(self, raw, now):
        """now: minutes, "HH:MM" string, datetime.time or datetime.datetime"""
        now_minutes = to_minute_of_day(now)
        swipes = clean_swipes(raw, MODE_LIVE)
        return self.live_from_swipes(swipes, now_minutes)

    # ------------------------ Weekly ------------------------
    def sentinel_day(self, day, emoji, status, error=None):
        return WeeklyDay(
            day=day,
            working=Duration(0),
            missed=Duration(self.target),
            emoji=emoji,
            status=status,
            error=error,
        )

    def calculate_weekly(self, entries):
        """
        Weekly report over Monday..Sunday swipe strings.
        Never raises for bad day input: blank days and failing days become
        sentinel entries and are left out of the average.
        """
        if isinstance(entries, str):
            raise TypeError("Weekly entries must be a list of day strings, not a single string")
        entries = list(entries or [])
        if len(entries) > len(DAYS):
            logger.warning("Ignoring %d entries beyond Sunday", len(entries) - len(DAYS))
        entries = (entries + [''] * len(DAYS))[:len(DAYS)]

        days = []
        total_working = 0
        valid_days = 0

        for day, entry in zip(DAYS, entries):
            text = (entry or '').strip()
            if not text:
                days.append(self.sentinel_day(day, EMOJI_NO_DATA, STATUS_BLANK))
                continue

            try:
                daily = self.calculate_daily(text)
            except SwipeError as e:
                logger.warning("%s: %s", day, e)
                days.append(self.sentinel_day(day, EMOJI_ERROR, STATUS_ERROR, str(e)))
                continue

            working = daily.working.total_minutes
            total_working += working
            valid_days += 1
            days.append(WeeklyDay(
                day=day,
                working=daily.working,
                missed=daily.missed,
                emoji=self.performance_emoji(working),
                status=STATUS_OK,
            ))

        average = round_half_up(total_working / valid_days) if valid_days else 0

        return WeeklyResult(
            days=tuple(days),
            valid_days=valid_days,
            average_working=Duration(average),
            average_missed=Duration(max(0, self.target - average)),
            total_working=Duration(total_working),
            overall_emoji=self.performance_emoji(average),
        )


_default_calculator = WorkingHoursCalculator()


def compute_daily(raw):
    return _default_calculator.calculate_daily(raw)


def compute_live(raw, now):
    return _default_calculator.calculate_live(raw, now)


def compute_weekly(entries):
    return _default_calculator.calculate_weekly(entries)
