from io import BytesIO
from typing import Iterable, List
from zoneinfo import ZoneInfo

import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Font, PatternFill

from app.core.config import settings
from app.models.db_models import Booking

SHEET_NAME = "Bookings"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# (header, width) in column order
REPORT_COLUMNS = [
    ("S.No", 8),
    ("Name", 25),
    ("Email", 30),
    ("Phone", 15),
    ("Date", 20),
    ("Time Slot", 20),
    ("Booked On", 22),
]

HEADER_FONT = Font(bold=True, color="FFFFFF")
HEADER_FILL = PatternFill(fill_type="solid", fgColor="667EEA")
HEADER_ALIGNMENT = Alignment(horizontal="center", vertical="center")


def format_booked_on(booking: Booking, tz_name: str = None, fmt: str = None) -> str:
    """createdAt in the report timezone, e.g. '15 Feb 2026, 03:30 PM'."""
    tz = ZoneInfo(tz_name or settings.REPORT_TIMEZONE)
    return booking.created_at.astimezone(tz).strftime(fmt or settings.REPORT_DATETIME_FORMAT)


def clean_cell_text(value: str) -> str:
    """Drops control characters openpyxl refuses to write into a worksheet."""
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def build_report_frame(bookings: Iterable[Booking]) -> pd.DataFrame:
    rows: List[list] = []
    for index, booking in enumerate(bookings, start=1):
        rows.append([
            index,
            clean_cell_text(booking.name),
            clean_cell_text(booking.email),
            clean_cell_text(booking.phone),
            clean_cell_text(booking.date),
            clean_cell_text(booking.time_slot),
            format_booked_on(booking),
        ])
    return pd.DataFrame(rows, columns=[header for header, _ in REPORT_COLUMNS])


def generate_bookings_report(bookings: Iterable[Booking]) -> bytes:
    """
    Renders bookings as an .xlsx workbook: one header row, then one row per
    booking in the given order. An empty list yields a header-only sheet.
    """
    frame = build_report_frame(bookings)

    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        frame.to_excel(writer, sheet_name=SHEET_NAME, index=False)

        worksheet = writer.sheets[SHEET_NAME]
        for column_index, (_, width) in enumerate(REPORT_COLUMNS, start=1):
            header_cell = worksheet.cell(row=1, column=column_index)
            header_cell.font = HEADER_FONT
            header_cell.fill = HEADER_FILL
            header_cell.alignment = HEADER_ALIGNMENT
            worksheet.column_dimensions[header_cell.column_letter].width = width
        worksheet.row_dimensions[1].height = 25

        # Customer text starting with "=" is stored as text, never as a formula
        for row in worksheet.iter_rows(min_row=2):
            for cell in row:
                if cell.data_type == "f":
                    cell.data_type = "s"

        writer.book.properties.creator = settings.PROJECT_NAME

    return buffer.getvalue()
