"""
PIM Page Driver.

Encapsulates employee creation, employee search and the Report-to tab
where supervisors are assigned.
"""

from __future__ import annotations

import logging

from playwright.sync_api import Page

from hrm_e2e.models import Employee, SystemUser
from hrm_e2e.pages.base_page import BasePage, Timeouts
from hrm_e2e.selectors.pim import PimSelectors

logger = logging.getLogger(__name__)


class PimPage(BasePage):
    """
    Page driver for the PIM module.

    Provides methods for:
    - Adding employees (optionally with login details)
    - Searching the employee list and opening a profile
    - Assigning and verifying supervisors
    """

    def __init__(self, page: Page, base_url: str, timeouts: Timeouts | None = None):
        super().__init__(page, base_url, timeouts)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate(self) -> "PimPage":
        self.click_and_settle(PimSelectors.PIM_MENU)
        return self

    def navigate_to_add_employee(self) -> "PimPage":
        self.navigate()
        self.click_and_settle(PimSelectors.ADD_EMPLOYEE_TAB)
        return self

    def navigate_to_employee_list(self) -> "PimPage":
        self.navigate()
        self.click_and_settle(PimSelectors.EMPLOYEE_LIST_TAB)
        return self

    # -------------------------------------------------------------------------
    # Page Actions
    # -------------------------------------------------------------------------

    def create_employee(self, employee: Employee, login: SystemUser | None = None) -> str:
        """
        Add an employee through the Add Employee form.

        Args:
            employee: Names to enter.
            login: When given, "Create Login Details" is switched on and the
                account's username and password are entered as well.

        Returns:
            The employee id OrangeHRM pre-filled on the form.
        """
        logger.info("Creating employee %s", employee.full_name)
        self.navigate_to_add_employee()

        self.page.locator(PimSelectors.FIRST_NAME_INPUT).fill(employee.first_name)
        if employee.middle_name:
            self.page.locator(PimSelectors.MIDDLE_NAME_INPUT).fill(employee.middle_name)
        self.page.locator(PimSelectors.LAST_NAME_INPUT).fill(employee.last_name)

        # Auto-generated; read it before saving navigates away
        employee_id = self.page.locator(PimSelectors.EMPLOYEE_ID_INPUT).input_value()

        if login is not None:
            self.page.locator(PimSelectors.CREATE_LOGIN_TOGGLE).click()
            self.wait_for_element(PimSelectors.USERNAME_INPUT).fill(login.username)
            self.page.locator(PimSelectors.PASSWORD_INPUT).fill(login.password)
            self.page.locator(PimSelectors.CONFIRM_PASSWORD_INPUT).fill(login.password)

        self.page.locator(PimSelectors.SAVE_BUTTON).click()
        self.wait_for_confirmation(PimSelectors.SUCCESS_TOAST)
        logger.info("Employee %s created with id %s", employee.full_name, employee_id)
        return employee_id

    def search_employee(self, employee_name: str) -> "PimPage":
        self.navigate_to_employee_list()
        self.select_autocomplete(
            PimSelectors.SEARCH_EMPLOYEE_NAME_INPUT,
            employee_name,
            PimSelectors.autocomplete_option(employee_name),
        )
        self.click_and_settle(PimSelectors.SEARCH_BUTTON)
        return self

    def open_employee_profile(self, employee_name: str) -> "PimPage":
        self.search_employee(employee_name)
        self.wait_for_element(PimSelectors.employee_name_cell(employee_name))
        self.click_and_settle(PimSelectors.employee_name_cell(employee_name))
        return self

    def open_report_to_tab(self) -> "PimPage":
        self.click_and_settle(PimSelectors.REPORT_TO_TAB)
        return self

    def assign_supervisor(self, supervisor_name: str, reporting_method: str = "Direct") -> None:
        """
        Add a supervisor on the open employee profile's Report-to tab.

        Args:
            supervisor_name: Existing employee to report to.
            reporting_method: Reporting Method option label.
        """
        logger.info("Assigning supervisor %s (%s)", supervisor_name, reporting_method)
        self.open_report_to_tab()
        self.page.locator(PimSelectors.ADD_SUPERVISOR_BUTTON).click()

        self.wait_for_element(PimSelectors.SUPERVISOR_NAME_INPUT)
        self.select_autocomplete(
            PimSelectors.SUPERVISOR_NAME_INPUT,
            supervisor_name,
            PimSelectors.autocomplete_option(supervisor_name),
        )
        self.select_option(
            PimSelectors.REPORTING_METHOD_DROPDOWN,
            PimSelectors.reporting_method_option(reporting_method),
        )

        self.page.locator(PimSelectors.SUPERVISOR_SAVE_BUTTON).click()
        self.wait_for_confirmation(PimSelectors.SUPERVISOR_SUCCESS_TOAST)

    # -------------------------------------------------------------------------
    # Assertions
    # -------------------------------------------------------------------------

    def verify_employee_created(self, employee_name: str) -> None:
        """Assert that searching for the employee finds exactly one record."""
        self.search_employee(employee_name)
        self.assert_records_found(1, PimSelectors.RECORDS_FOUND_TEXT)

    def verify_supervisor_assigned(self, supervisor_name: str) -> None:
        """Assert that the open profile lists *supervisor_name* under Assigned Supervisors."""
        self.open_report_to_tab()
        self.assert_visible(PimSelectors.assigned_supervisor_cell(supervisor_name))
