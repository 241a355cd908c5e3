"""
Enrollment parsing.

This module converts raw enrollment records from the storage layer into
EnrollmentRecord objects.
"""

import json
import logging

from ..models import EnrollmentRecord, EnrollmentStatus

logger = logging.getLogger(__name__)

_STATUS_ALIASES = {
    "completed": EnrollmentStatus.COMPLETED,
    "planned": EnrollmentStatus.PLANNED,
    "in_progress": EnrollmentStatus.IN_PROGRESS,
    "in-progress": EnrollmentStatus.IN_PROGRESS,
    "in progress": EnrollmentStatus.IN_PROGRESS,
}


class EnrollmentParser:
    """
    Parses raw enrollment records.

    Each raw record looks like:
        {"code": "HUM101", "status": "completed", "year": 1}

    STATUS HANDLING:
    Status strings are matched case-insensitively. Records with any other
    status are dropped with a warning, since the engines only understand
    COMPLETED, PLANNED and IN_PROGRESS.

    YEAR HANDLING:
    Years must be positive integers. Anything else becomes None, which
    keeps the record but leaves it out of the yearly load check.

    Duplicate records are kept as-is; the engines count each one.
    """

    def parse_record(self, data: dict):
        """Parse one record. Returns None if the record is unusable."""
        if not isinstance(data, dict):
            logger.warning("Dropping enrollment that is not an object: %r", data)
            return None
        code = data.get("code") or data.get("course_code")
        if not code:
            logger.warning("Dropping enrollment without a course code: %r", data)
            return None

        raw_status = data.get("status")
        if isinstance(raw_status, EnrollmentStatus):
            status = raw_status
        else:
            status = _STATUS_ALIASES.get(str(raw_status).strip().lower())
        if status is None:
            logger.warning("Dropping enrollment %s with unknown status %r", code, raw_status)
            return None

        year = data.get("year")
        if isinstance(year, bool) or not isinstance(year, int) or year <= 0:
            if year is not None:
                logger.warning("Ignoring invalid year %r for %s", year, code)
            year = None

        return EnrollmentRecord(course_code=code, status=status, year=year)

    def parse(self, records) -> list:
        """Parse a list of raw records, dropping unusable ones."""
        enrollments = []
        for data in records:
            record = self.parse_record(data)
            if record is not None:
                enrollments.append(record)
        return enrollments

    def load(self, path) -> list:
        """
        Load enrollments from a JSON file.

        The file holds either a list of records or {"enrollments": [...]}.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, dict):
            data = data.get("enrollments", [])
        return self.parse(data)
