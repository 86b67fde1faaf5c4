"""
File-backed leave repository.

Reads a delimited export of the leave list.  The first non-blank line is a
header; each data row has at least six fields:

    <unused>, employee name, leave type, from date, to date, status

Fields may be quoted to embed the delimiter, e.g. ``"Smith, John"``.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from hrm_e2e.models import LeaveRequest, LeaveStatus, LeaveType, parse_date

logger = logging.getLogger(__name__)

MIN_FIELDS = 6


class CsvLeaveRepository:
    """
    ``LeaveRepository`` over a delimited text file.

    The file is re-read on every call so that a file rewritten between
    scenario steps is picked up.
    """

    def __init__(self, csv_file_path: str | Path, delimiter: str = ","):
        self.csv_file_path = Path(csv_file_path)
        self.delimiter = delimiter

    def parse_line(self, line: str) -> list[str]:
        """Split one line into fields, honouring quoted delimiters."""
        return next(csv.reader([line], delimiter=self.delimiter), [])

    def get_leave_requests(self, employee_name: str | None = None) -> list[LeaveRequest]:
        """
        Read the file and build a request per data row.

        Args:
            employee_name: Keep only rows whose employee name contains this text.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValidationError: If a row carries an invalid date.
        """
        if not self.csv_file_path.exists():
            raise FileNotFoundError(f"Leave records file not found: {self.csv_file_path}")

        lines = [
            line
            for line in self.csv_file_path.read_text(encoding="utf-8").splitlines()
            if line.strip()
        ]
        leave_requests = []
        # Skip header row
        for line in lines[1:]:
            fields = self.parse_line(line)
            if len(fields) < MIN_FIELDS:
                logger.debug("Skipping short row in %s: %r", self.csv_file_path, line)
                continue

            name = fields[1].strip()
            if employee_name and employee_name not in name:
                continue

            leave_requests.append(
                LeaveRequest(
                    leave_type=LeaveType.from_label(fields[2].strip()),
                    from_date=parse_date(fields[3]),
                    to_date=parse_date(fields[4]),
                    employee_name=name,
                    status=LeaveStatus.from_label(fields[5].strip()),
                )
            )
        return leave_requests

    def get_leave_request_by_employee(self, employee_name: str) -> LeaveRequest | None:
        requests = self.get_leave_requests(employee_name)
        return requests[0] if requests else None
