"""
Leave repository contract.

Scenario code asks a ``LeaveRepository`` for leave requests without knowing
whether they come from a file export or the live leave list, so the same
assertions run against either source.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from hrm_e2e.models import LeaveRequest


@runtime_checkable
class LeaveRepository(Protocol):
    """Read access to leave requests."""

    def get_leave_requests(self, employee_name: str | None = None) -> list[LeaveRequest]:
        """Return the requests visible to the caller, optionally for one employee."""
        ...

    def get_leave_request_by_employee(self, employee_name: str) -> LeaveRequest | None:
        """Return the first request for *employee_name*, or None."""
        ...
