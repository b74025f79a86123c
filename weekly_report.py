"""
Excel export of a weekly working-hours report.
"""
import logging

import openpyxl
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from swipe_models import STATUS_ERROR
from time_codec import minutes_to_decimal_hours

logger = logging.getLogger(__name__)

HEADERS = [
    "Day",
    "Swipes",
    "Working Time",
    "Working Hours",
    "Missed Time",
    "Status",
    "Emoji",
]

COLUMN_WIDTHS = {'A': 12, 'B': 45, 'C': 14, 'D': 14, 'E': 12, 'F': 40, 'G': 8}


def generate_weekly_excel(result, output_filepath, swipes=None):
    """Write a WeeklyResult to an .xlsx file; swipes are the raw day strings"""
    swipes = list(swipes or [])
    swipes += [''] * (len(result.days) - len(swipes))

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Weekly Hours"

    header_font = Font(bold=True, color="FFFFFF")
    header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
    header_alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)
    summary_font = Font(bold=True)

    data_alignment = Alignment(horizontal="left", vertical="center")
    center_alignment = Alignment(horizontal="center", vertical="center")

    border = Border(
        left=Side(style='thin'),
        right=Side(style='thin'),
        top=Side(style='thin'),
        bottom=Side(style='thin')
    )

    for col, header in enumerate(HEADERS, 1):
        cell = ws.cell(row=1, column=col)
        cell.value = header
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = header_alignment
        cell.border = border

    for letter, width in COLUMN_WIDTHS.items():
        ws.column_dimensions[letter].width = width

    row = 2
    for day, day_swipes in zip(result.days, swipes):
        status = day.error if day.status == STATUS_ERROR else day.status
        values = [
            day.day,
            (day_swipes or '').strip(),
            day.working.clock,
            minutes_to_decimal_hours(day.working.total_minutes),
            day.missed.clock,
            status,
            day.emoji,
        ]
        for col, value in enumerate(values, 1):
            cell = ws.cell(row=row, column=col)
            cell.value = value
            cell.border = border
            if col in [1, 2, 6]:  # Text columns
                cell.alignment = data_alignment
            else:
                cell.alignment = center_alignment
            if col == 4:
                cell.number_format = '0.00'
        row += 1

    summary = [
        ("Average", result.average_working, result.overall_emoji),
        ("Average Missed", result.average_missed, ''),
        ("Total", result.total_working, ''),
    ]
    row += 1
    for label, duration, emoji in summary:
        ws.cell(row=row, column=1).value = label
        ws.cell(row=row, column=3).value = duration.clock
        ws.cell(row=row, column=4).value = minutes_to_decimal_hours(duration.total_minutes)
        ws.cell(row=row, column=4).number_format = '0.00'
        ws.cell(row=row, column=7).value = emoji
        for col in range(1, len(HEADERS) + 1):
            ws.cell(row=row, column=col).font = summary_font
            ws.cell(row=row, column=col).border = border
        row += 1

    ws.cell(row=row, column=1).value = "Valid Days"
    ws.cell(row=row, column=3).value = result.valid_days
    ws.cell(row=row, column=1).font = summary_font

    ws.freeze_panes = 'A2'

    wb.save(output_filepath)
    logger.info("Excel file generated: %s", output_filepath)
