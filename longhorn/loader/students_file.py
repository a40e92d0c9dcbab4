"""
Student file loading for the Longhorn Network.

Expected format, one student per line:

    name,age,gender,year,major,gpa,roommatePrefs,internships

Roommate preferences and internships are ';'-separated within their field.
Lines starting with '#' are ignored and a leading header row is skipped.
"""

from __future__ import annotations

import csv
import os
from typing import Iterable, List, Optional, Sequence

from ..config import DATA_FILE, LIST_FIELD_SEPARATOR, STUDENT_FIELD_COUNT
from ..log import get_logger
from ..models.student import Student

logger = get_logger(__name__)


def _parse_int(raw: str) -> int:
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return 0


def _parse_float(raw: str) -> float:
    try:
        return float(str(raw).strip())
    except (TypeError, ValueError):
        return 0.0


def _parse_list_field(raw: Optional[str]) -> List[str]:
    raw = (raw or "").strip()
    if not raw:
        return []
    return [t.strip() for t in raw.split(LIST_FIELD_SEPARATOR) if t.strip()]


def _is_header(line: str) -> bool:
    low = line.lower()
    return "name" in low and "age" in low


def parse_student_row(fields: Sequence[str]) -> Student:
    """Build a Student from one row of raw fields; short rows are blank-padded."""
    parts = list(fields)
    if len(parts) < STUDENT_FIELD_COUNT:
        logger.debug("Padding short row (%d fields): %r", len(parts), parts)
        parts = parts + [""] * (STUDENT_FIELD_COUNT - len(parts))

    return Student(
        name=parts[0].strip(),
        age=_parse_int(parts[1]),
        gender=parts[2].strip(),
        year=_parse_int(parts[3]),
        major=parts[4].strip(),
        gpa=_parse_float(parts[5]),
        roommate_preferences=_parse_list_field(parts[6]),
        previous_internships=_parse_list_field(parts[7]),
    )


def parse_student_lines(lines: Iterable[str]) -> List[Student]:
    """Parse an iterable of text lines into students, in order."""
    students: List[Student] = []
    first = True
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if first:
            first = False
            if _is_header(line):
                continue
        row = next(csv.reader([line], skipinitialspace=True), [])
        students.append(parse_student_row(row))
    return students


def parse_students(path: str) -> List[Student]:
    """Read a student file; I/O errors propagate to the caller."""
    with open(path, "r", encoding="utf-8") as f:
        students = parse_student_lines(f)
    logger.info("Loaded %d students from %s", len(students), path)
    return students


def load_population(path: Optional[str] = None) -> List[Student]:
    """Load students from `path` or the configured data file."""
    path = path or DATA_FILE
    if not os.path.exists(path):
        raise FileNotFoundError(f"Student data file not found: {path}")
    return parse_students(path)
