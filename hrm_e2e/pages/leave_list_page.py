"""
Leave List Page Driver.

This driver encapsulates the supervisor/admin view of leave requests:
filtering the list, reading table rows and approving requests.

Table rows are read by fixed cell offset (see ``LeaveTableColumns``); the
offsets mirror the OrangeHRM table layout.
"""

from __future__ import annotations

import logging

from playwright.sync_api import Page

from hrm_e2e.models import LeaveStatus
from hrm_e2e.pages.base_page import BasePage, Timeouts
from hrm_e2e.selectors.leave import LeaveSelectors

logger = logging.getLogger(__name__)


class LeaveListPage(BasePage):
    """
    Page driver for Leave > Leave List.

    Provides methods for:
    - Filtering by employee and status
    - Extracting table rows
    - Approving requests
    - Record-count and status assertions
    """

    def __init__(self, page: Page, base_url: str, timeouts: Timeouts | None = None):
        super().__init__(page, base_url, timeouts)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate(self) -> "LeaveListPage":
        self.click_and_settle(LeaveSelectors.LEAVE_MENU)
        return self

    def navigate_to_leave_list(self) -> "LeaveListPage":
        self.navigate()
        self.click_and_settle(LeaveSelectors.LEAVE_LIST_TAB)
        return self

    # -------------------------------------------------------------------------
    # Filters
    # -------------------------------------------------------------------------

    def filter_by_employee(self, employee_name: str) -> "LeaveListPage":
        self.select_autocomplete(
            LeaveSelectors.EMPLOYEE_NAME_INPUT,
            employee_name,
            LeaveSelectors.autocomplete_option(employee_name),
        )
        return self

    def filter_by_status(self, status: LeaveStatus) -> "LeaveListPage":
        self.select_option(
            LeaveSelectors.STATUS_DROPDOWN,
            LeaveSelectors.status_option(LeaveStatus(status).value),
        )
        return self

    def search_leave(
        self, employee_name: str | None = None, status: LeaveStatus | None = None
    ) -> "LeaveListPage":
        """
        Open the leave list, apply the given filters and run the search.

        Args:
            employee_name: Employee autocomplete filter, skipped when None.
            status: Status filter, skipped when None.

        Returns:
            Self for method chaining.
        """
        self.navigate_to_leave_list()
        if employee_name:
            self.filter_by_employee(employee_name)
        if status:
            self.filter_by_status(status)
        self.click_and_settle(LeaveSelectors.SEARCH_BUTTON)
        # The counter is re-rendered once the search response is in
        self.wait_for_element(LeaveSelectors.RECORDS_FOUND_TEXT)
        return self

    # -------------------------------------------------------------------------
    # Page Actions
    # -------------------------------------------------------------------------

    def approve_leave(self, row: int = 1) -> None:
        """
        Approve the request in *row* (1-based) of the current result table.

        Blocks until the success toast appears.
        """
        logger.info("Approving leave request in row %d", row)
        self.wait_for_element(LeaveSelectors.LEAVE_TABLE_ROW)
        self.page.locator(LeaveSelectors.approve_button(row)).click()
        self.wait_for_confirmation(LeaveSelectors.SUCCESS_TOAST)
        self.wait_for_page_load()

    # -------------------------------------------------------------------------
    # Data Extraction
    # -------------------------------------------------------------------------

    def read_table_rows(self) -> list[list[str]]:
        """
        Read the current result table.

        Returns:
            One list of stripped cell texts per row, in table order.
        """
        rows = []
        for row in self.page.locator(LeaveSelectors.LEAVE_TABLE_ROW).all():
            cells = row.locator(LeaveSelectors.TABLE_CELL).all_text_contents()
            rows.append([cell.strip() for cell in cells])
        return rows

    def get_leave_status(self, row: int = 1) -> str:
        self.wait_for_element(LeaveSelectors.LEAVE_TABLE_ROW)
        cell = self.wait_for_element(LeaveSelectors.leave_status_cell(row))
        return (cell.first.text_content() or "").strip()

    def get_leave_records_count(self) -> int:
        return self.get_records_found_count(LeaveSelectors.RECORDS_FOUND_TEXT)

    # -------------------------------------------------------------------------
    # Assertions
    # -------------------------------------------------------------------------

    def verify_leave_status(self, expected_status: str, row: int = 1) -> None:
        self.wait_for_element(LeaveSelectors.LEAVE_TABLE_ROW)
        self.assert_text_contains(LeaveSelectors.leave_status_cell(row), expected_status)

    def verify_leave_exists(self, employee_name: str) -> None:
        self.search_leave(employee_name)
        self.assert_records_found(selector=LeaveSelectors.RECORDS_FOUND_TEXT)
