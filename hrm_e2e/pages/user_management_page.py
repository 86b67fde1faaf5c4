"""User Management page driver (Admin > User Management > Users)."""

from __future__ import annotations

import logging

from playwright.sync_api import Page

from hrm_e2e.models import SystemUser
from hrm_e2e.pages.base_page import BasePage, Timeouts
from hrm_e2e.selectors.admin import AdminSelectors

logger = logging.getLogger(__name__)


class UserManagementPage(BasePage):
    """
    Page driver for system-user administration.

    Provides methods for:
    - Creating system users bound to an employee
    - Searching users by username
    """

    def __init__(self, page: Page, base_url: str, timeouts: Timeouts | None = None):
        super().__init__(page, base_url, timeouts)

    def navigate(self) -> "UserManagementPage":
        self.click_and_settle(AdminSelectors.ADMIN_MENU)
        return self

    def navigate_to_users(self) -> "UserManagementPage":
        self.navigate()
        self.page.locator(AdminSelectors.USER_MANAGEMENT_MENU).hover()
        self.click_and_settle(AdminSelectors.USERS_MENU_ITEM)
        return self

    def create_system_user(self, system_user: SystemUser) -> None:
        """
        Fill and save the Add User form.

        Args:
            system_user: Account to create; its employee must already exist.
        """
        logger.info(
            "Creating %s user %s for %s",
            system_user.user_role.value,
            system_user.username,
            system_user.employee_name,
        )
        self.navigate_to_users()
        self.click_and_settle(AdminSelectors.ADD_BUTTON)

        self.select_option(
            AdminSelectors.USER_ROLE_DROPDOWN,
            AdminSelectors.user_role_option(system_user.user_role.value),
        )
        self.select_autocomplete(
            AdminSelectors.EMPLOYEE_NAME_INPUT,
            system_user.employee_name,
            AdminSelectors.autocomplete_option(system_user.employee_name),
        )
        self.select_option(
            AdminSelectors.STATUS_DROPDOWN,
            AdminSelectors.status_option(system_user.status.value),
        )

        self.page.locator(AdminSelectors.USERNAME_INPUT).fill(system_user.username)
        self.page.locator(AdminSelectors.PASSWORD_INPUT).fill(system_user.password)
        self.page.locator(AdminSelectors.CONFIRM_PASSWORD_INPUT).fill(system_user.password)

        self.page.locator(AdminSelectors.SAVE_BUTTON).click()
        self.wait_for_confirmation(AdminSelectors.SUCCESS_TOAST)

    def search_user(self, username: str) -> "UserManagementPage":
        self.navigate_to_users()
        self.page.locator(AdminSelectors.SEARCH_USERNAME_INPUT).fill(username)
        self.click_and_settle(AdminSelectors.SEARCH_BUTTON)
        return self

    def verify_user_created(self, username: str) -> None:
        """Assert that searching for *username* finds exactly one record."""
        self.search_user(username)
        self.assert_records_found(1, AdminSelectors.RECORDS_FOUND_TEXT)
