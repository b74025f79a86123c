"""
Swipe sequence validation and cleaning.

Turns a raw comma-separated swipe string into a list of minutes since
midnight, or raises a SwipeError. There is no partial success.
"""
import logging

from swipe_errors import (
    BadFormatError,
    EmptyInputError,
    EvenCountError,
    NoValidDataError,
    OddCountError,
)
from time_codec import convert_to_24_hour, is_clock_string, time_to_minutes

logger = logging.getLogger(__name__)

MODE_COMPLETE = 'complete'
MODE_LIVE = 'live'


def split_swipes(raw):
    """Split a swipe string on commas, drop blanks and normalize to HH:MM"""
    if raw is None:
        return []
    tokens = [token.strip() for token in raw.split(',')]
    return [convert_to_24_hour(token) for token in tokens if token]


def check_parity(entries, mode, stage):
    count = len(entries)
    if mode == MODE_COMPLETE and count % 2 != 0:
        raise OddCountError(count, stage)
    if mode == MODE_LIVE and count % 2 == 0:
        raise EvenCountError(count, stage)


def remove_same_time_pairs(entries):
    """
    Drop consecutive identical swipes as a pair (same-time in/out).
    Single left-to-right pass; after a dropped pair the scan resumes at the
    element following it.
    """
    cleaned = []
    skip_next = False
    for i, entry in enumerate(entries):
        if skip_next:
            skip_next = False
            continue
        if i < len(entries) - 1 and entry == entries[i + 1]:
            logger.debug("Dropping same-time swipe pair %s/%s at position %d", entry, entries[i + 1], i)
            skip_next = True
            continue
        cleaned.append(entry)
    return cleaned


def clean_swipes(raw, mode=MODE_COMPLETE):
    """
    Validate and clean a raw swipe string for the given mode.
    Parity is checked both before and after same-time pairs are removed.
    Returns the swipes as minutes since midnight.
    """
    if mode not in (MODE_COMPLETE, MODE_LIVE):
        raise ValueError(f"Unknown swipe mode: {mode}")

    entries = split_swipes(raw)
    if not entries:
        raise EmptyInputError()

    check_parity(entries, mode, 'before cleaning')

    for entry in entries:
        if not is_clock_string(entry):
            raise BadFormatError(entry)

    cleaned = remove_same_time_pairs(entries)
    if not cleaned:
        raise NoValidDataError()

    check_parity(cleaned, mode, 'after cleaning')

    return [time_to_minutes(entry) for entry in cleaned]
