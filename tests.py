"""
Unit tests for the working hours calculator
"""
import argparse
import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from datetime import datetime, time

import openpyxl

from hours_cli import main as cli_main, parse_target
from swipe_cleaner import MODE_COMPLETE, MODE_LIVE, clean_swipes, remove_same_time_pairs
from swipe_errors import (
    BadFormatError,
    ClockInFutureError,
    EmptyInputError,
    EvenCountError,
    NoValidDataError,
    NoValidSessionsError,
    OddCountError,
    SwipeError,
)
from swipe_models import STATUS_BLANK, STATUS_ERROR, STATUS_OK, Duration
from time_codec import (
    add_minutes_to_time,
    convert_to_24_hour,
    minutes_to_decimal_hours,
    minutes_to_time_str,
    time_to_minutes,
    to_minute_of_day,
)
from week_sheet import load_week_sheet
from weekly_report import HEADERS, generate_weekly_excel
from working_hours import (
    EXAMPLE_WEEK,
    WorkingHoursCalculator,
    compute_daily,
    compute_live,
    compute_weekly,
)


class TestTimeCodec(unittest.TestCase):
    """Normalization and minute conversion"""

    # ==================== 12-hour Normalization ====================
    def test_normalize_morning(self):
        """09:00 AM becomes 09:00"""
        self.assertEqual(convert_to_24_hour("09:00 AM"), "09:00")

    def test_normalize_midnight(self):
        """12:00 AM becomes 00:00"""
        self.assertEqual(convert_to_24_hour("12:00 AM"), "00:00")

    def test_normalize_noon(self):
        """12:30 PM stays 12:30"""
        self.assertEqual(convert_to_24_hour("12:30 PM"), "12:30")

    def test_normalize_afternoon_without_space(self):
        """01:30pm becomes 13:30"""
        self.assertEqual(convert_to_24_hour("01:30pm"), "13:30")

    def test_normalize_pads_single_digits(self):
        """9:5 am is zero padded"""
        self.assertEqual(convert_to_24_hour(" 9:5 am "), "09:05")

    def test_normalize_24_hour_passthrough(self):
        """24-hour strings are only trimmed"""
        self.assertEqual(convert_to_24_hour(" 18:00 "), "18:00")

    def test_normalize_non_numeric(self):
        """Non-numeric hour in a 12-hour string is rejected"""
        with self.assertRaises(BadFormatError) as ctx:
            convert_to_24_hour("ab:00 PM")
        self.assertIn("ab:00 PM", str(ctx.exception))

    def test_normalize_uses_leading_digits(self):
        """Hour and minute are the leading digits of each ':' piece"""
        self.assertEqual(convert_to_24_hour("1_0:00 pm"), "13:00")
        self.assertEqual(convert_to_24_hour("1:2:3 pm"), "13:02")

    def test_normalize_missing_minutes(self):
        """A 12-hour string without minutes is rejected"""
        with self.assertRaises(BadFormatError):
            convert_to_24_hour("9 am")

    def test_normalize_does_not_validate_range(self):
        """13 PM normalizes to 25:00; range checks happen later"""
        self.assertEqual(convert_to_24_hour("13:00 PM"), "25:00")

    # ==================== Minute Conversion ====================
    def test_time_to_minutes(self):
        """20:37 is 1237 minutes"""
        self.assertEqual(time_to_minutes("20:37"), 20 * 60 + 37)

    def test_minutes_to_time_str(self):
        """570 minutes formats as 09:30"""
        self.assertEqual(minutes_to_time_str(570), "09:30")

    def test_minutes_to_time_str_over_a_day(self):
        """Durations above 24h keep counting hours"""
        self.assertEqual(minutes_to_time_str(42 * 60 + 30), "42:30")

    def test_minutes_to_time_str_negative(self):
        """Negative minutes are refused"""
        with self.assertRaises(ValueError):
            minutes_to_time_str(-5)

    def test_round_trip(self):
        """Every minute of the day survives format and parse"""
        for m in range(1440):
            self.assertEqual(time_to_minutes(minutes_to_time_str(m)), m)

    def test_add_minutes_wraps(self):
        """Adding past midnight wraps around"""
        self.assertEqual(add_minutes_to_time(23 * 60, 90), "00:30")

    def test_minutes_to_decimal_hours(self):
        """90 minutes = 1.5 hours"""
        self.assertEqual(minutes_to_decimal_hours(90), 1.5)

    def test_to_minute_of_day_inputs(self):
        """Current time accepted as int, string, time and datetime"""
        self.assertEqual(to_minute_of_day(900), 900)
        self.assertEqual(to_minute_of_day("15:00"), 900)
        self.assertEqual(to_minute_of_day("03:00 PM"), 900)
        self.assertEqual(to_minute_of_day(time(15, 0)), 900)
        self.assertEqual(to_minute_of_day(datetime(2024, 5, 6, 15, 0)), 900)

    def test_to_minute_of_day_rejects_bad_values(self):
        """Out of range or malformed current times are rejected"""
        with self.assertRaises(ValueError):
            to_minute_of_day(1440)
        with self.assertRaises(BadFormatError):
            to_minute_of_day("25:00")
        with self.assertRaises(TypeError):
            to_minute_of_day(15.5)


class TestSwipeCleaner(unittest.TestCase):
    """Validation and same-time pair removal"""

    def test_clean_complete_day(self):
        """Valid complete day is parsed into minutes"""
        self.assertEqual(clean_swipes("09:00, 12:30, 13:30, 18:00"), [540, 750, 810, 1080])

    def test_clean_mixed_formats(self):
        """12-hour and 24-hour entries can be mixed"""
        self.assertEqual(clean_swipes("09:00 AM, 12:30, 01:30 PM, 18:00"), [540, 750, 810, 1080])

    def test_blank_tokens_dropped(self):
        """Empty tokens between commas are ignored"""
        self.assertEqual(clean_swipes("09:00,, 18:00, "), [540, 1080])

    def test_empty_input(self):
        """Nothing but separators is empty input"""
        with self.assertRaises(EmptyInputError):
            clean_swipes(" , ,")

    def test_odd_count_complete_mode(self):
        """Odd swipes in complete mode fail before cleaning"""
        with self.assertRaises(OddCountError) as ctx:
            clean_swipes("09:00, 12:30, 13:30")
        self.assertEqual(ctx.exception.stage, "before cleaning")
        self.assertEqual(ctx.exception.count, 3)

    def test_even_count_live_mode(self):
        """Even swipes in live mode fail before cleaning"""
        with self.assertRaises(EvenCountError):
            clean_swipes("09:00, 12:30", MODE_LIVE)

    def test_bad_format_names_token(self):
        """Out of range token is reported verbatim"""
        with self.assertRaises(BadFormatError) as ctx:
            clean_swipes("09:00, 24:10")
        self.assertEqual(ctx.exception.token, "24:10")
        self.assertIn("24:10", str(ctx.exception))

    def test_bad_minutes(self):
        """Minutes above 59 are rejected"""
        with self.assertRaises(BadFormatError):
            clean_swipes("09:60, 10:00")

    def test_duplicate_pair_removed(self):
        """Same-time swipe pair is dropped entirely"""
        self.assertEqual(clean_swipes("09:00, 09:00, 13:00, 18:00"), [780, 1080])

    def test_dedup_does_not_cascade(self):
        """Three equal swipes drop one pair and keep the third"""
        self.assertEqual(remove_same_time_pairs(["a", "a", "a", "b"]), ["a", "b"])

    def test_dedup_is_textual(self):
        """Only textually identical neighbours are dropped"""
        self.assertEqual(remove_same_time_pairs(["9:00", "09:00"]), ["9:00", "09:00"])

    def test_all_pairs_removed(self):
        """Cleaning everything away is no valid data"""
        with self.assertRaises(NoValidDataError):
            clean_swipes("09:00, 09:00")

    def test_cleaning_keeps_parity(self):
        """Same-time pairs are removed two at a time"""
        cleaned = clean_swipes("09:00, 10:00, 10:00, 11:00, 11:00, 12:00", MODE_COMPLETE)
        self.assertEqual(cleaned, [540, 720])
        self.assertEqual(clean_swipes("09:00, 12:00, 12:00", MODE_LIVE), [540])

    def test_errors_are_value_errors(self):
        """All swipe errors can be caught as ValueError"""
        self.assertTrue(issubclass(SwipeError, ValueError))


class TestDailyCalculator(unittest.TestCase):
    """Complete day breakdown"""

    def test_standard_day(self):
        """Standard day with lunch break"""
        result = compute_daily("09:00, 12:30, 13:30, 18:00")
        self.assertEqual(result.working.total_minutes, 480)
        self.assertEqual(result.office.total_minutes, 540)
        self.assertEqual(result.breaks.total_minutes, 60)
        self.assertEqual(result.missed.total_minutes, 30)
        self.assertEqual(result.working.clock, "08:00")
        self.assertEqual(result.missed.clock, "00:30")
        self.assertEqual(result.emoji, "😐")
        self.assertEqual(result.office_emoji, "👏")
        self.assertEqual(result.sessions, 2)

    def test_twelve_hour_input(self):
        """12-hour input gives the same result"""
        result = compute_daily("09:00 AM, 12:30 PM, 01:30 PM, 06:00 PM")
        self.assertEqual(result.working.total_minutes, 480)

    def test_duplicate_pair_day(self):
        """Accidental double swipe leaves a single 5h session"""
        result = compute_daily("09:00, 09:00, 13:00, 18:00")
        self.assertEqual(result.working.total_minutes, 300)
        self.assertEqual(result.sessions, 1)

    def test_odd_count_fails(self):
        """Odd input never yields a result"""
        with self.assertRaises(OddCountError):
            compute_daily("09:00, 12:30, 13:30")

    def test_rollover_session(self):
        """Night shift across midnight is counted"""
        result = compute_daily("22:00, 06:00")
        self.assertEqual(result.working.total_minutes, 480)
        # office span is a plain subtraction and goes negative
        self.assertEqual(result.office.total_minutes, 6 * 60 - 22 * 60)
        self.assertEqual(result.office.clock, "00:00")

    def test_rollover_out_of_bound_skipped(self):
        """Sessions over 16h past midnight are skipped"""
        result = compute_daily("09:00, 12:00, 18:00, 12:00")
        self.assertEqual(result.working.total_minutes, 180)
        self.assertEqual(result.sessions, 1)

    def test_all_sessions_invalid(self):
        """Every session out of bound fails"""
        with self.assertRaises(NoValidSessionsError):
            compute_daily("18:00, 12:00")

    def test_strict_rollover(self):
        """Strict rules fail on the first out-of-bound session"""
        calculator = WorkingHoursCalculator({'strict_rollover': True})
        with self.assertRaises(NoValidSessionsError) as ctx:
            calculator.calculate_daily("09:00, 12:00, 18:00, 12:00")
        self.assertIn("18:00 -> 12:00", str(ctx.exception))

    def test_negative_break_ignored(self):
        """Breaks are only counted when positive"""
        result = compute_daily("20:00, 23:00, 01:00, 03:00")
        self.assertEqual(result.working.total_minutes, 300)
        self.assertEqual(result.breaks.total_minutes, 0)

    def test_working_not_above_office(self):
        """Without rollover working time never exceeds office span"""
        for raw in ["09:00, 12:30, 13:30, 18:00", "08:00, 08:30, 09:00, 17:45", "10:00, 11:00"]:
            result = compute_daily(raw)
            self.assertLessEqual(result.working.total_minutes, result.office.total_minutes)

    def test_emoji_tiers(self):
        """Five tier performance scale around 8:30"""
        calculator = WorkingHoursCalculator()
        self.assertEqual(calculator.performance_emoji(570), "🎉")
        self.assertEqual(calculator.performance_emoji(510), "😊")
        self.assertEqual(calculator.performance_emoji(480), "😐")
        self.assertEqual(calculator.performance_emoji(390), "😕")
        self.assertEqual(calculator.performance_emoji(389), "😞")

    def test_office_emoji_tiers(self):
        """Three tier office scale around 9:00"""
        calculator = WorkingHoursCalculator()
        self.assertEqual(calculator.office_emoji(540), "👏")
        self.assertEqual(calculator.office_emoji(510), "😐")
        self.assertEqual(calculator.office_emoji(509), "😕")

    def test_custom_target(self):
        """Missed time follows the configured target"""
        calculator = WorkingHoursCalculator({'target_minutes': 8 * 60})
        result = calculator.calculate_daily("09:00, 17:00")
        self.assertEqual(result.missed.total_minutes, 0)
        self.assertEqual(result.emoji, "😊")

    def test_unknown_rule(self):
        """Unknown rule names are rejected"""
        with self.assertRaises(ValueError):
            WorkingHoursCalculator({'target': 500})

    def test_non_positive_rules(self):
        """Zero or negative minute rules are rejected"""
        with self.assertRaises(ValueError):
            WorkingHoursCalculator({'target_minutes': 0})
        with self.assertRaises(ValueError):
            WorkingHoursCalculator({'max_rollover_session_minutes': -1})
        with self.assertRaises(ValueError):
            WorkingHoursCalculator({'office_target_minutes': 0})


class TestLiveProjector(unittest.TestCase):
    """In-progress day projection"""

    def test_working_projection(self):
        """Open punch-in counted up to now"""
        result = compute_live("09:00, 12:30, 13:30", "15:00")
        self.assertTrue(result.is_currently_working)
        self.assertEqual(result.working.total_minutes, 300)
        self.assertEqual(result.remaining.total_minutes, 210)
        self.assertEqual(result.completion_time, "18:30")
        self.assertEqual(result.completion_message, "If you continue working without breaks")
        self.assertEqual(result.office.total_minutes, 360)
        self.assertEqual(result.breaks.total_minutes, 60)
        self.assertEqual(result.current_time, "15:00")
        self.assertEqual(result.progress_percentage, 59)
        self.assertEqual(result.emoji, "💼 😞")
        self.assertEqual(result.achievement_level, "")

    def test_time_object_injected(self):
        """datetime.time is accepted as now"""
        result = compute_live("09:00", time(10, 0))
        self.assertEqual(result.working.total_minutes, 60)

    def test_clock_in_future(self):
        """Now before the open punch-in fails"""
        with self.assertRaises(ClockInFutureError):
            compute_live("09:00, 12:30, 13:30", "13:00")

    def test_even_count_fails(self):
        """Live mode needs an odd swipe count"""
        with self.assertRaises(EvenCountError):
            compute_live("09:00, 12:30", "15:00")

    def test_completion_wraps_midnight(self):
        """Completion past midnight wraps around"""
        result = compute_live("22:00", "23:00")
        self.assertEqual(result.remaining.total_minutes, 450)
        self.assertEqual(result.completion_time, "06:30")

    def test_already_completed(self):
        """Target met reports the surplus"""
        result = compute_live("08:00, 12:00, 12:30", "18:05")
        self.assertEqual(result.working.total_minutes, 575)
        self.assertEqual(result.remaining.total_minutes, 0)
        self.assertEqual(result.completion_time, "Already completed!")
        self.assertEqual(result.completion_message, "Completed 1:05 extra!")
        self.assertEqual(result.progress_percentage, 100)
        self.assertEqual(result.achievement_level, "Silver Achiever")
        self.assertEqual(result.emoji, "💼 🥈")

    def test_achievement_levels(self):
        """Four graduated levels over target"""
        calculator = WorkingHoursCalculator()
        self.assertEqual(calculator.achievement(510 + 150), ("🏆", "Workaholic Champion"))
        self.assertEqual(calculator.achievement(510 + 90), ("🥇", "Gold Performer"))
        self.assertEqual(calculator.achievement(510 + 30), ("🥈", "Silver Achiever"))
        self.assertEqual(calculator.achievement(510), ("🥉", "Bronze Finisher"))
        self.assertEqual(calculator.achievement(500), ("😐", ""))

    def test_break_state_projection(self):
        """An even sequence means on break; the open break is counted"""
        calculator = WorkingHoursCalculator()
        result = calculator.live_from_swipes([540, 750], 780)
        self.assertFalse(result.is_currently_working)
        self.assertEqual(result.working.total_minutes, 210)
        self.assertEqual(result.breaks.total_minutes, 30)
        self.assertEqual(result.completion_message,
                         "When you resume working (excluding current break time)")
        self.assertTrue(result.emoji.startswith("☕"))


class TestWeeklyAggregator(unittest.TestCase):
    """Monday..Sunday aggregation"""

    def test_all_blank(self):
        """Blank week is all no-data sentinels"""
        result = compute_weekly([""] * 7)
        self.assertEqual(len(result.days), 7)
        self.assertTrue(all(day.status == STATUS_BLANK for day in result.days))
        self.assertTrue(all(day.emoji == "😴" for day in result.days))
        self.assertEqual(result.valid_days, 0)
        self.assertEqual(result.average_working.total_minutes, 0)
        self.assertEqual(result.total_working.total_minutes, 0)
        self.assertEqual(result.average_missed.total_minutes, 510)
        self.assertEqual(result.days[0].missed.clock, "08:30")

    def test_one_bad_day(self):
        """A malformed day becomes an error sentinel"""
        week = ["09:00, 18:00"] * 7
        week[2] = "09:00, 25:00"
        result = compute_weekly(week)
        errors = [day for day in result.days if day.status == STATUS_ERROR]
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].day, "Wednesday")
        self.assertEqual(errors[0].emoji, "❌")
        self.assertIn("25:00", errors[0].error)
        self.assertEqual(result.valid_days, 6)
        self.assertEqual(result.total_working.total_minutes, 6 * 540)
        self.assertEqual(result.average_working.total_minutes, 540)
        self.assertEqual(result.average_missed.total_minutes, 0)
        self.assertEqual(result.overall_emoji, "😊")

    def test_example_week(self):
        """Sample week averages over the five working days"""
        result = compute_weekly(EXAMPLE_WEEK['12'])
        self.assertEqual([day.day for day in result.days][:2], ["Monday", "Tuesday"])
        self.assertEqual(result.valid_days, 5)
        self.assertEqual(result.total_working.total_minutes, 480 * 4 + 420)
        self.assertEqual(result.average_working.total_minutes, 468)
        self.assertEqual(result.average_missed.total_minutes, 42)
        self.assertEqual(result.days[0].status, STATUS_OK)
        self.assertEqual(result.days[5].status, STATUS_BLANK)

    def test_short_and_none_entries(self):
        """Short lists are padded and None is blank"""
        result = compute_weekly(["09:00, 17:30", None])
        self.assertEqual(len(result.days), 7)
        self.assertEqual(result.valid_days, 1)
        self.assertEqual(result.days[1].status, STATUS_BLANK)

    def test_average_rounds_half_up(self):
        """Average is rounded to the nearest minute"""
        result = compute_weekly(["09:00, 17:00", "09:00, 17:01"])
        self.assertEqual(result.average_working.total_minutes, 481)

    def test_single_string_rejected(self):
        """A bare string is not a list of days"""
        with self.assertRaises(TypeError):
            compute_weekly("09:00, 18:00")


class TestDuration(unittest.TestCase):
    def test_views(self):
        """Hours, minutes and clock views"""
        d = Duration(125)
        self.assertEqual((d.hours, d.minutes, d.clock, str(d)), (2, 5, "02:05", "02:05"))

    def test_negative_clamped(self):
        """Negative spans display as zero"""
        d = Duration(-30)
        self.assertEqual((d.hours, d.minutes, d.clock), (0, 0, "00:00"))
        self.assertEqual(d.total_minutes, -30)


class TestSheetAndExcel(unittest.TestCase):
    """Spreadsheet input and Excel report output"""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def write_sheet(self, rows, name="week.xlsx"):
        path = os.path.join(self.tmpdir, name)
        wb = openpyxl.Workbook()
        ws = wb.active
        for row in rows:
            ws.append(row)
        wb.save(path)
        return path

    def test_load_week_sheet_xlsx(self):
        """Days are placed Monday first, missing days blank"""
        path = self.write_sheet([
            ["Day", "Swipes"],
            ["Wednesday", "09:00, 18:00"],
            ["mon", "08:30, 17:30"],
            ["Friday", None],
        ])
        week = load_week_sheet(path)
        self.assertEqual(len(week), 7)
        self.assertEqual(week[0], "08:30, 17:30")
        self.assertEqual(week[2], "09:00, 18:00")
        self.assertEqual(week[4], "")

    def test_load_week_sheet_csv(self):
        """CSV sheets are read the same way"""
        path = os.path.join(self.tmpdir, "week.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write('day,swipes\nTuesday,"09:00, 12:00, 13:00, 18:00"\n')
        week = load_week_sheet(path)
        self.assertEqual(week[1], "09:00, 12:00, 13:00, 18:00")

    def test_load_week_sheet_missing_column(self):
        """Sheets without Swipes column are rejected"""
        path = self.write_sheet([["Day", "Times"], ["Monday", "09:00, 18:00"]])
        with self.assertRaises(ValueError):
            load_week_sheet(path)

    def test_load_week_sheet_unknown_day(self):
        """Unknown day names are rejected"""
        path = self.write_sheet([["Day", "Swipes"], ["Someday", "09:00, 18:00"]])
        with self.assertRaises(ValueError):
            load_week_sheet(path)

    def test_load_week_sheet_not_found(self):
        """Missing file raises FileNotFoundError"""
        with self.assertRaises(FileNotFoundError):
            load_week_sheet(os.path.join(self.tmpdir, "nope.xlsx"))

    def test_load_week_sheet_unsupported_suffix(self):
        """Old .xls workbooks are refused with a readable error"""
        path = os.path.join(self.tmpdir, "week.xls")
        with open(path, "wb") as f:
            f.write(b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 64)
        with self.assertRaises(ValueError) as ctx:
            load_week_sheet(path)
        self.assertIn(".xls", str(ctx.exception))

    def test_load_week_sheet_corrupt_workbook(self):
        """A .xlsx that is not a workbook raises ValueError"""
        path = os.path.join(self.tmpdir, "week.xlsx")
        with open(path, "wb") as f:
            f.write(b"not a zip file")
        with self.assertRaises(ValueError):
            load_week_sheet(path)

    def test_excel_file_generated(self):
        """Weekly report is written with a header and one row per day"""
        week = list(EXAMPLE_WEEK['24'])
        week[5] = "bad, 18:00"
        result = compute_weekly(week)
        output_file = os.path.join(self.tmpdir, "report.xlsx")
        generate_weekly_excel(result, output_file, week)

        self.assertTrue(os.path.exists(output_file))
        ws = openpyxl.load_workbook(output_file).active
        self.assertEqual([ws.cell(row=1, column=c).value for c in range(1, len(HEADERS) + 1)], HEADERS)
        self.assertEqual(ws.cell(row=2, column=1).value, "Monday")
        self.assertEqual(ws.cell(row=2, column=3).value, "08:00")
        self.assertEqual(ws.cell(row=2, column=4).value, 8.0)
        self.assertEqual(ws.cell(row=7, column=7).value, "❌")
        self.assertIn("bad", ws.cell(row=7, column=6).value)
        self.assertEqual(ws.cell(row=8, column=6).value, STATUS_BLANK)
        self.assertEqual(ws.cell(row=10, column=1).value, "Average")


class TestCommandLine(unittest.TestCase):
    """CLI front-end"""

    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli_main(list(argv))
        return code, out.getvalue()

    def test_daily(self):
        """Daily report is printed"""
        code, out = self.run_cli("daily", "09:00, 12:30, 13:30, 18:00")
        self.assertEqual(code, 0)
        self.assertIn("Working Time: 08:00", out)
        self.assertIn("Missed Time:  00:30", out)

    def test_daily_input_error(self):
        """Bad input exits with 1 and shows the message"""
        code, out = self.run_cli("daily", "09:00, 12:30, 13:30")
        self.assertEqual(code, 1)
        self.assertIn("Uneven swipes", out)

    def test_live_with_now(self):
        """Injected --now drives the projection"""
        code, out = self.run_cli("live", "09:00, 12:30, 13:30", "--now", "15:00")
        self.assertEqual(code, 0)
        self.assertIn("Completion:    18:30", out)

    def test_weekly_target(self):
        """--target changes the missed time"""
        code, out = self.run_cli("--target", "08:00", "weekly", "09:00, 17:00")
        self.assertEqual(code, 0)
        self.assertIn("Average Missed:  00:00", out)

    def test_weekly_excel(self):
        """Weekly report can be exported"""
        with tempfile.TemporaryDirectory() as tmpdir:
            output_file = os.path.join(tmpdir, "week.xlsx")
            code, _ = self.run_cli("weekly", "--example", "--excel", output_file)
            self.assertEqual(code, 0)
            self.assertTrue(os.path.exists(output_file))

    def test_weekly_bad_sheet(self):
        """Unreadable sheet exits with 1 and a data error"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "week.xls")
            with open(path, "wb") as f:
                f.write(b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1")
            code, out = self.run_cli("weekly", "--sheet", path)
        self.assertEqual(code, 1)
        self.assertIn("Data Error: Unsupported swipe sheet type", out)

    def test_weekly_sheet_missing_column(self):
        """Missing columns are reported without quoting"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "week.csv")
            with open(path, "w", encoding="utf-8") as f:
                f.write("day,times\nMonday,09:00\n")
            code, out = self.run_cli("weekly", "--sheet", path)
        self.assertEqual(code, 1)
        self.assertIn("Data Error: Swipe sheet must contain columns: swipes", out)

    def test_target_must_be_positive(self):
        """Zero targets are refused while parsing arguments"""
        for value in ("0", "00:00"):
            with self.assertRaises(argparse.ArgumentTypeError):
                parse_target(value)
        self.assertEqual(parse_target("08:30"), 510)

    def test_zero_target_exits_cleanly(self):
        """A zero target stops with a usage error, not a crash"""
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            cli_main(["--target", "00:00", "live", "09:00", "--now", "10:00"])
        self.assertNotEqual(ctx.exception.code, 0)
        self.assertIn("Target must be greater than zero", err.getvalue())


if __name__ == '__main__':
    unittest.main(verbosity=2)
