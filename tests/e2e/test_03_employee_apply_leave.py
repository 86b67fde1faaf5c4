"""
Employee scenario: apply for leave and see it pending.

The employee signs in with the ESS login recorded by the admin scenario
(or ``EMPLOYEE_USERNAME``/``EMPLOYEE_PASSWORD`` when the side-file has
none).
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

import pytest

from hrm_e2e.models import LeaveRequest, LeaveStatus
from hrm_e2e.pages import LeaveApplyPage
from hrm_e2e.state import LeaveRecord, utc_now_iso

logger = logging.getLogger(__name__)

pytestmark = pytest.mark.e2e

LEAVE_COMMENT = "Automation test - Annual leave request for family vacation"


@pytest.fixture
def signed_in_employee(employee_credentials):
    if employee_credentials is None:
        pytest.skip("No employee credentials found; run the admin scenarios first")
    return employee_credentials


class TestEmployeeAppliesForLeave:
    """Steps 5 and 6: Apply form and My Leave."""

    def test_step_05_employee_applies_for_leave(
        self, signed_in_employee, employee_page, hrm_base_url, timeouts, state_file
    ):
        # Arrange - three days starting five days from today
        from_date = date.today() + timedelta(days=5)
        leave_request = LeaveRequest.create_fmla_leave(
            from_date, from_date + timedelta(days=2), LEAVE_COMMENT
        )
        leave_apply_page = LeaveApplyPage(employee_page, hrm_base_url, timeouts)

        # Act
        leave_apply_page.apply_leave(leave_request)

        # Assert - the success toast was confirmed by apply_leave
        state_file.update(
            lambda state: setattr(
                state,
                "leave_request",
                LeaveRecord(
                    from_date=leave_request.from_date_formatted,
                    to_date=leave_request.to_date_formatted,
                    comment=leave_request.comment,
                    applied_at=utc_now_iso(),
                ),
            )
        )
        logger.info(
            "Leave applied from %s to %s",
            leave_request.from_date_formatted,
            leave_request.to_date_formatted,
        )

    def test_step_06_employee_sees_request_pending(
        self, signed_in_employee, employee_page, hrm_base_url, timeouts
    ):
        # Arrange
        leave_apply_page = LeaveApplyPage(employee_page, hrm_base_url, timeouts)

        # Act / Assert
        leave_apply_page.verify_leave_status(LeaveStatus.PENDING_APPROVAL.value)
        logger.info("Verified leave status is %r", LeaveStatus.PENDING_APPROVAL.value)
