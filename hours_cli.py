"""
Command line front-end for the working hours calculator.

Examples:
    swipe-hours daily "09:00, 12:30, 13:30, 18:00"
    swipe-hours live "09:00 AM, 12:30 PM, 01:30 PM" --now 15:00
    swipe-hours weekly --sheet week.xlsx --excel report.xlsx
"""
import argparse
import logging
import sys
from datetime import datetime

from swipe_errors import EmptyInputError, SwipeError
from swipe_models import STATUS_ERROR
from time_codec import convert_to_24_hour, is_clock_string, time_to_minutes
from week_sheet import load_week_sheet
from weekly_report import generate_weekly_excel
from working_hours import EXAMPLE_DAY, EXAMPLE_WEEK, WorkingHoursCalculator

WIDTH = 70


def setup_logging(verbose=False):
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def parse_target(value):
    """Target as minutes or HH:MM"""
    text = value.strip()
    if text.isdigit():
        minutes = int(text)
    else:
        text = convert_to_24_hour(text)
        if not is_clock_string(text):
            raise argparse.ArgumentTypeError(f"Invalid target '{value}'. Use minutes or HH:MM")
        minutes = time_to_minutes(text)
    if minutes <= 0:
        raise argparse.ArgumentTypeError(f"Target must be greater than zero, got '{value}'")
    return minutes


def banner(title):
    print("\n" + "=" * WIDTH)
    print(title)
    print("=" * WIDTH)


def print_daily(result, swipes):
    banner(f"DAILY WORKING HOURS: {swipes}")
    print(f"\n  Working Time: {result.working.clock}  {result.emoji}")
    print(f"  Office Time:  {result.office.clock}  {result.office_emoji}")
    print(f"  Break Time:   {result.breaks.clock}")
    print(f"  Missed Time:  {result.missed.clock}")
    print(f"  Sessions:     {result.sessions}")
    print("=" * WIDTH)


def print_live(result, swipes):
    banner(f"LIVE TRACKER: {swipes}")
    state = "Working" if result.is_currently_working else "On break"
    print(f"\n  Current Time:  {result.current_time}  ({state})  {result.emoji}")
    print(f"  Working Time:  {result.working.clock}")
    print(f"  Office Time:   {result.office.clock}")
    print(f"  Break Time:    {result.breaks.clock}")
    print(f"  Remaining:     {result.remaining.clock}")
    print(f"  Completion:    {result.completion_time}")
    print(f"                 {result.completion_message}")
    print(f"  Progress:      {result.progress_percentage}%")
    if result.achievement_level:
        print(f"  Achievement:   {result.achievement_level}")
    print("=" * WIDTH)


def print_weekly(result):
    banner("WEEKLY OVERVIEW")
    print(f"\n{'Day':<12} {'Working':<10} {'Missed':<10} {'Emoji':<6}")
    print("-" * WIDTH)
    for day in result.days:
        line = f"{day.day:<12} {day.working.clock:<10} {day.missed.clock:<10} {day.emoji:<6}"
        if day.status == STATUS_ERROR:
            line += f" {day.error}"
        print(line)
    print("-" * WIDTH)
    print(f"\n  Average Working: {result.average_working.clock}  {result.overall_emoji}")
    print(f"  Average Missed:  {result.average_missed.clock}")
    print(f"  Total Weekly:    {result.total_working.clock}")
    print(f"  Valid Days:      {result.valid_days}")
    print("=" * WIDTH)


def create_parser():
    parser = argparse.ArgumentParser(
        prog='swipe-hours',
        description='Working hours breakdown from clock-in/clock-out swipes.',
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--target', type=parse_target, default=None,
                        help='Daily working target as HH:MM or minutes (default: 08:30)')
    parser.add_argument('--strict-rollover', action='store_true',
                        help='Fail on past-midnight sessions longer than 16 hours instead of skipping them')
    parser.add_argument('--format', choices=['24', '12'], default='24',
                        help='Clock format used by --example (default: 24)')
    parser.add_argument('--verbose', action='store_true', help='Show debug logging')

    subparsers = parser.add_subparsers(dest='command', required=True)

    daily = subparsers.add_parser('daily', help='Breakdown of a complete day')
    daily.add_argument('swipes', nargs='?', help='Comma-separated swipe times')
    daily.add_argument('--example', action='store_true', help='Use the sample day')

    live = subparsers.add_parser('live', help='Projection for a day in progress')
    live.add_argument('swipes', help='Comma-separated swipe times (odd count)')
    live.add_argument('--now', help='Current time as HH:MM (default: system clock)')

    weekly = subparsers.add_parser('weekly', help='Monday..Sunday overview')
    weekly.add_argument('days', nargs='*', help='Up to seven swipe strings, Monday first')
    weekly.add_argument('--sheet', help='Excel/CSV file with Day and Swipes columns')
    weekly.add_argument('--excel', help='Write the weekly report to this .xlsx file')
    weekly.add_argument('--example', action='store_true', help='Use the sample week')

    return parser


def run(args):
    rules = {}
    if args.target is not None:
        rules['target_minutes'] = args.target
    if args.strict_rollover:
        rules['strict_rollover'] = True
    calculator = WorkingHoursCalculator(rules)

    if args.command == 'daily':
        swipes = EXAMPLE_DAY[args.format] if args.example else args.swipes
        if not swipes:
            raise EmptyInputError()
        print_daily(calculator.calculate_daily(swipes), swipes)

    elif args.command == 'live':
        now = args.now if args.now else datetime.now()
        print_live(calculator.calculate_live(args.swipes, now), args.swipes)

    elif args.command == 'weekly':
        if args.example:
            week = list(EXAMPLE_WEEK[args.format])
        elif args.sheet:
            week = load_week_sheet(args.sheet)
        else:
            week = args.days
        result = calculator.calculate_weekly(week)
        print_weekly(result)
        if args.excel:
            generate_weekly_excel(result, args.excel, week)


def main(argv=None):
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        run(args)
    except SwipeError as e:
        print(f"\nInput Error: {e}", flush=True)
        return 1
    except FileNotFoundError as e:
        print(f"\nFile Error: {e}", flush=True)
        return 1
    except (KeyError, ValueError) as e:
        print(f"\nData Error: {e}", flush=True)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
