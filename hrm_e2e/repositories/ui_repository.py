"""
Live-UI leave repository.

Reads leave requests straight out of the Leave List table through a
``LeaveListPage``.  The table has no comment column, so requests built here
never carry a comment.
"""

from __future__ import annotations

import logging

from hrm_e2e.models import LeaveRequest, LeaveStatus, LeaveType, parse_date
from hrm_e2e.pages.leave_list_page import LeaveListPage
from hrm_e2e.selectors.leave import LeaveTableColumns

logger = logging.getLogger(__name__)

DATE_RANGE_SEPARATOR = " to "


class UiLeaveRepository:
    """
    ``LeaveRepository`` backed by the Leave List page of a live session.

    The Leave List opens filtered to pending requests, so callers looking for
    requests in another state pass that state as *status*.
    """

    def __init__(self, leave_list_page: LeaveListPage, status: LeaveStatus | None = None):
        self.leave_list_page = leave_list_page
        self.status = status

    def get_leave_requests(self, employee_name: str | None = None) -> list[LeaveRequest]:
        """
        Search the leave list and parse every result row.

        Args:
            employee_name: Employee autocomplete filter, skipped when None.
        """
        self.leave_list_page.search_leave(employee_name, self.status)

        leave_requests = []
        for cells in self.leave_list_page.read_table_rows():
            if len(cells) < LeaveTableColumns.MIN_CELLS:
                continue
            leave_request = self._parse_row(cells)
            if leave_request is not None:
                leave_requests.append(leave_request)
        return leave_requests

    def get_leave_request_by_employee(self, employee_name: str) -> LeaveRequest | None:
        requests = self.get_leave_requests(employee_name)
        return requests[0] if requests else None

    @staticmethod
    def _parse_row(cells: list[str]) -> LeaveRequest | None:
        # "2025-03-10 to 2025-03-12", or a single date for one-day leave
        date_range = cells[LeaveTableColumns.DATE_RANGE].strip()
        if not date_range:
            logger.warning("Skipping leave row without dates: %r", cells)
            return None
        parts = date_range.split(DATE_RANGE_SEPARATOR)
        from_date = parse_date(parts[0])
        to_date = parse_date(parts[1]) if len(parts) > 1 else from_date

        return LeaveRequest(
            leave_type=LeaveType.from_label(cells[LeaveTableColumns.LEAVE_TYPE].strip()),
            from_date=from_date,
            to_date=to_date,
            employee_name=cells[LeaveTableColumns.EMPLOYEE_NAME].strip(),
            status=LeaveStatus.from_label(cells[LeaveTableColumns.STATUS].strip()),
        )
