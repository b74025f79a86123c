"""
Load a week of swipe strings from a spreadsheet.

Expected columns (header names are case-insensitive):
- Day: weekday name (Monday, Mon, ...)
- Swipes: comma-separated punch times for that day

Supported files: .xlsx / .xlsm (openpyxl) and .csv.
"""
import logging
import zipfile
from pathlib import Path

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from working_hours import DAYS

logger = logging.getLogger(__name__)

DAY_LOOKUP = {day[:3].lower(): index for index, day in enumerate(DAYS)}

EXCEL_SUFFIXES = ('.xlsx', '.xlsm')
CSV_SUFFIX = '.csv'


def read_sheet(filepath):
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Swipe sheet not found: {filepath}")

    suffix = path.suffix.lower()
    if suffix not in EXCEL_SUFFIXES + (CSV_SUFFIX,):
        raise ValueError(
            f"Unsupported swipe sheet type '{path.suffix or path.name}'. "
            f"Use one of: {', '.join(EXCEL_SUFFIXES + (CSV_SUFFIX,))}"
        )

    try:
        if suffix == CSV_SUFFIX:
            return pd.read_csv(path, dtype=str, keep_default_na=False)
        return pd.read_excel(path, engine="openpyxl", dtype=str)
    except (zipfile.BadZipFile, InvalidFileException, KeyError) as e:
        raise ValueError(f"Could not read swipe sheet {filepath}: {e}") from e


def cell_text(value):
    if value is None or pd.isna(value):
        return ''
    return str(value).strip()


def load_week_sheet(filepath):
    """Return seven swipe strings, Monday first. Missing days are blank."""
    df = read_sheet(filepath)

    columns = {str(col).strip().lower(): col for col in df.columns}
    missing = {'day', 'swipes'} - set(columns)
    if missing:
        raise ValueError(f"Swipe sheet must contain columns: {', '.join(sorted(missing))}")

    week = [''] * len(DAYS)
    for _, row in df.iterrows():
        day_name = cell_text(row[columns['day']])
        if not day_name:
            continue

        index = DAY_LOOKUP.get(day_name[:3].lower())
        if index is None:
            raise ValueError(f"Unknown day name in swipe sheet: '{day_name}'")
        if week[index]:
            logger.warning("Duplicate row for %s, keeping the last one", DAYS[index])

        week[index] = cell_text(row[columns['swipes']])

    logger.info("Loaded %d day(s) with swipes from %s", sum(1 for w in week if w), filepath)
    return week
