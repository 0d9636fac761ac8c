import csv
import logging
import os
import re
from typing import Any, Dict, List, Tuple

from openpyxl import Workbook, load_workbook

from app.api.registration.models import AttendeeRecord

logger = logging.getLogger(__name__)

SAMPLE_SHEET_NAME = "Attendees"
SAMPLE_HEADERS = ["Name", "Department", "SAP ID", "Table No"]
SAMPLE_ATTENDEES = [
    ("satish", "Technology", "50012345", 1),
    ("paresh", "Technology", "50012346", 1),
    ("nithin", "EHS", "50012347", 2),
    ("aswin", "PPC", "50012348", 3),
    ("nandhini", "Production", "50012349", 4),
    ("anupriya", "HR", "50012350", 5),
    ("rajiv", "Quality", "50012351", 6),
    ("abishanth", "Engineering", "50012352", 7),
    ("vignesh", "Finance", "50012353", 8),
    ("ayyapa", "Procurement", "50012354", 9),
    ("baskhar", "QBM", "50012355", 10),
    ("vijay", "HR", "50012356", 5),
]

COLUMN_ALIASES = {
    "name": ("name",),
    "identifier": ("sapid", "sap", "identifier", "id"),
    "assignment": ("tableno", "table", "assignment"),
    "department": ("department", "dept"),
}


class SpreadsheetError(Exception):
    pass


def cell_to_text(value: Any) -> str:
    """Render a cell the way it reads in the sheet (50012345.0 -> "50012345")."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _cell_to_assignment(value: Any):
    if isinstance(value, bool) or value is None:
        return cell_to_text(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return cell_to_text(value)


def _normalize_header(header: Any) -> str:
    return re.sub(r"[\s_\-]+", "", cell_to_text(header)).lower()


def _resolve_columns(headers: List[Any]) -> Dict[str, int]:
    normalized = [_normalize_header(h) for h in headers]
    columns = {}
    for field, aliases in COLUMN_ALIASES.items():
        for alias in aliases:
            if alias in normalized:
                columns[field] = normalized.index(alias)
                break
    return columns


def _read_xlsx(path: str) -> List[Tuple[Any, ...]]:
    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        worksheet = workbook.worksheets[0]
        return [tuple(row) for row in worksheet.iter_rows(values_only=True)]
    finally:
        workbook.close()


def _read_csv(path: str) -> List[Tuple[Any, ...]]:
    with open(path, newline="", encoding="utf-8-sig") as f:
        return [tuple(row) for row in csv.reader(f)]


def read_table(path: str) -> List[Tuple[Any, ...]]:
    """Return every row of the first sheet, header row included."""
    ext = os.path.splitext(path)[1].lower()
    if ext == ".csv":
        return _read_csv(path)
    return _read_xlsx(path)


def rows_to_records(rows: List[Tuple[Any, ...]]) -> Tuple[AttendeeRecord, ...]:
    if not rows:
        raise SpreadsheetError("Spreadsheet has no header row")

    columns = _resolve_columns(list(rows[0]))
    if "identifier" not in columns:
        raise SpreadsheetError("Spreadsheet has no SAP ID column")

    def cell(row, field):
        index = columns.get(field)
        if index is None or index >= len(row):
            return None
        return row[index]

    records = []
    for row in rows[1:]:
        if all(cell_to_text(value) == "" for value in row):
            continue
        records.append(
            AttendeeRecord(
                name=cell_to_text(cell(row, "name")),
                identifier=cell_to_text(cell(row, "identifier")),
                assignment=_cell_to_assignment(cell(row, "assignment")),
                department=cell_to_text(cell(row, "department")),
            )
        )
    return tuple(records)


def write_sample_database(path: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = SAMPLE_SHEET_NAME
    worksheet.append(SAMPLE_HEADERS)
    for row in SAMPLE_ATTENDEES:
        worksheet.append(list(row))
    workbook.save(path)
    logger.info("Sample attendee database created at %s", path)


def _warn_duplicates(records: Tuple[AttendeeRecord, ...]) -> None:
    seen = set()
    for record in records:
        if record.identifier in seen:
            logger.warning(
                "Duplicate SAP ID %s in attendee database, first row wins",
                record.identifier,
            )
        seen.add(record.identifier)


def load_attendees(path: str, seed_sample: bool = True) -> Tuple[AttendeeRecord, ...]:
    """
    Load the attendee directory from a spreadsheet.
    Never raises: an unreadable source yields an empty directory.
    """
    try:
        if not os.path.exists(path):
            if not seed_sample:
                logger.warning("Attendee database %s not found", path)
                return ()
            logger.warning("Attendee database not found, creating sample database")
            write_sample_database(path)

        records = rows_to_records(read_table(path))
    except Exception as e:
        logger.error("Error loading attendee database %s: %s", path, e)
        return ()

    _warn_duplicates(records)
    logger.info("Loaded %d attendees from %s", len(records), path)
    return records
