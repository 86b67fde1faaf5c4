"""
Leave Apply Page Driver.

Covers the employee's side of the leave workflow: the Apply form and the
My Leave list.
"""

from __future__ import annotations

import logging

from playwright.sync_api import Page

from hrm_e2e.models import LeaveRequest
from hrm_e2e.pages.base_page import BasePage, Timeouts
from hrm_e2e.selectors.leave import LeaveSelectors

logger = logging.getLogger(__name__)


class LeaveApplyPage(BasePage):
    """
    Page driver for Leave > Apply and Leave > My Leave.

    Provides methods for:
    - Submitting a leave application
    - Reading the status of the employee's own requests
    """

    def __init__(self, page: Page, base_url: str, timeouts: Timeouts | None = None):
        super().__init__(page, base_url, timeouts)

    def navigate(self) -> "LeaveApplyPage":
        self.click_and_settle(LeaveSelectors.LEAVE_MENU)
        return self

    def navigate_to_apply(self) -> "LeaveApplyPage":
        self.navigate()
        self.click_and_settle(LeaveSelectors.APPLY_TAB)
        return self

    def navigate_to_my_leave(self) -> "LeaveApplyPage":
        self.navigate()
        self.click_and_settle(LeaveSelectors.MY_LEAVE_TAB)
        return self

    def apply_leave(self, leave_request: LeaveRequest) -> None:
        """
        Fill and submit the Apply Leave form.

        Dates are typed in ISO format, which is the input format of the
        OrangeHRM date pickers.

        Args:
            leave_request: Type, date range and optional comment to submit.
        """
        logger.info(
            "Applying for %s leave %s to %s",
            leave_request.leave_type.value,
            leave_request.from_date_formatted,
            leave_request.to_date_formatted,
        )
        self.navigate_to_apply()

        self.select_option(
            LeaveSelectors.LEAVE_TYPE_DROPDOWN,
            LeaveSelectors.leave_type_option(leave_request.leave_type.value),
        )
        self.page.locator(LeaveSelectors.FROM_DATE_INPUT).fill(leave_request.from_date_formatted)
        self.page.locator(LeaveSelectors.TO_DATE_INPUT).fill(leave_request.to_date_formatted)

        if leave_request.comment:
            self.page.locator(LeaveSelectors.COMMENTS_TEXTAREA).fill(leave_request.comment)

        self.page.locator(LeaveSelectors.APPLY_BUTTON).click()
        self.wait_for_confirmation(LeaveSelectors.SUCCESS_TOAST)

    def get_leave_status(self, row: int = 1) -> str:
        """Return the status text of *row* (1-based) of the currently shown table."""
        self.wait_for_element(LeaveSelectors.LEAVE_TABLE_ROW)
        cell = self.wait_for_element(LeaveSelectors.leave_status_cell(row))
        return (cell.first.text_content() or "").strip()

    def verify_leave_status(self, expected_status: str) -> None:
        """Assert that the newest request in My Leave shows *expected_status*."""
        self.navigate_to_my_leave()
        self.wait_for_element(LeaveSelectors.LEAVE_TABLE_ROW)
        self.assert_text_contains(LeaveSelectors.leave_status_cell(1), expected_status)
