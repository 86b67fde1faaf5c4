"""Login page driver for OrangeHRM authentication."""

from __future__ import annotations

import logging

from playwright.sync_api import Page

from hrm_e2e.pages.base_page import BasePage, Timeouts
from hrm_e2e.selectors.login import LoginSelectors

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    """
    Page driver for the sign-in screen.

    Provides methods for:
    - Entering credentials
    - Submitting the login form
    - Confirming the session is authenticated
    """

    URL_PATH = LoginSelectors.LOGIN_PATH

    def __init__(self, page: Page, base_url: str, timeouts: Timeouts | None = None):
        super().__init__(page, base_url, timeouts)

    def navigate(self) -> "LoginPage":
        """
        Navigate to the login page.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.URL_PATH)
        self.wait_for_page_load()
        return self

    def login(self, username: str, password: str) -> None:
        """
        Fill credentials and submit the login form.

        Args:
            username: Username to enter.
            password: Password to enter.
        """
        logger.info("Logging in as %s", username)
        self.page.locator(LoginSelectors.USERNAME_INPUT).fill(username)
        self.page.locator(LoginSelectors.PASSWORD_INPUT).fill(password)
        self.page.locator(LoginSelectors.LOGIN_BUTTON).click()

    def expect_logged_in(self) -> None:
        """Wait for the user menu that every role sees after signing in."""
        self.wait_for_element(LoginSelectors.USER_DROPDOWN, self.timeouts.login)

    def is_logged_in(self) -> bool:
        return self.page.locator(LoginSelectors.USER_DROPDOWN).first.is_visible()

    def get_error_message(self) -> str:
        """Return the "Invalid credentials" style alert text, if any."""
        alert = self.page.locator(LoginSelectors.ERROR_ALERT).first
        if not alert.is_visible():
            return ""
        return (alert.text_content() or "").strip()
