"""
Errors raised while parsing and calculating swipe data.

Every error is an input problem: the message is meant to be shown to the
user as-is. All of them derive from ValueError.
"""


class SwipeError(ValueError):
    """Base class for all swipe validation failures"""


class EmptyInputError(SwipeError):
    def __init__(self, message='No time entries provided'):
        super().__init__(message)


class BadFormatError(SwipeError):
    def __init__(self, token, message=None):
        self.token = token
        if message is None:
            message = (f"Invalid time format: {token}. Use HH:MM format (24-hour) "
                       f"or HH:MM AM/PM format (12-hour).")
        super().__init__(message)


class ParityError(SwipeError):
    """Swipe count does not match the requested mode"""

    def __init__(self, count, stage, message):
        self.count = count
        self.stage = stage
        super().__init__(message)


class OddCountError(ParityError):
    def __init__(self, count, stage):
        super().__init__(
            count, stage,
            f"Uneven swipes detected {stage} ({count} entries)! Time entries must be "
            f"in pairs (in/out). Please check your swipe data."
        )


class EvenCountError(ParityError):
    def __init__(self, count, stage):
        super().__init__(
            count, stage,
            f"Even number of swipes found {stage} ({count} entries). The live tracker "
            f"needs incomplete data; use the daily calculator for complete days."
        )


class NoValidDataError(SwipeError):
    def __init__(self, message='No valid working time found. All swipe pairs had same in/out times.'):
        super().__init__(message)


class NoValidSessionsError(SwipeError):
    def __init__(self, message='No valid working sessions found. Please check your swipe times.'):
        super().__init__(message)


class ClockInFutureError(SwipeError):
    def __init__(self, now, last_punch):
        self.now = now
        self.last_punch = last_punch
        super().__init__(
            f"Current time {now} cannot be before the last punch-in time {last_punch}. "
            f"Please check your data."
        )
