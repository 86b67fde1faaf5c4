"""
Base Page class for the Page Object Model.

This class provides the primitives shared by all OrangeHRM page drivers:
navigation, readiness waits, the ``oxd`` dropdown and autocomplete widgets,
confirmation toasts and the "Records Found" counter.

Key Concepts Demonstrated:
- Base class pattern for code reuse
- Readiness predicates instead of fixed sleeps
- Surfacing application-side failures (error toasts) as exceptions
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass

from playwright.sync_api import Locator, Page, expect

from hrm_e2e.errors import UiActionError

logger = logging.getLogger(__name__)

_RECORDS_FOUND = re.compile(r"\((\d+)\)")
_ANY_RECORDS_FOUND = re.compile(r"\(\d+\) Records? Found")


@dataclass(frozen=True)
class Timeouts:
    """
    Wait budgets in milliseconds.

    Attributes:
        action: Save/apply/approve until the confirmation toast shows.
        login: Credentials submitted until the post-login landmark shows.
        autocomplete: Text typed until the matching suggestion shows.
        element: Any other element wait.
    """

    action: int = 10000
    login: int = 5000
    autocomplete: int = 5000
    element: int = 10000

    @classmethod
    def from_config(cls, config) -> "Timeouts":
        return cls(
            action=config.ACTION_TIMEOUT_MS,
            login=config.LOGIN_TIMEOUT_MS,
            autocomplete=config.AUTOCOMPLETE_TIMEOUT_MS,
            element=config.ACTION_TIMEOUT_MS,
        )


class BasePage:
    """
    Base class for all page drivers.

    Attributes:
        page: Playwright page instance (one browser session).
        base_url: Base URL of the OrangeHRM instance.
        timeouts: Wait budgets for this driver.
    """

    SUCCESS_TOAST = ".oxd-toast--success"
    ERROR_TOAST = ".oxd-toast--error"
    RECORDS_FOUND_TEXT = ".orangehrm-horizontal-padding span.oxd-text--span"

    def __init__(self, page: Page, base_url: str, timeouts: Timeouts | None = None):
        """
        Initialize the base page.

        Args:
            page: Playwright page instance.
            base_url: Base URL of the application.
            timeouts: Wait budgets; defaults apply when omitted.
        """
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.timeouts = timeouts or Timeouts()

    # -------------------------------------------------------------------------
    # Navigation Methods
    # -------------------------------------------------------------------------

    def navigate_to(self, path: str = "") -> None:
        """
        Navigate to a specific path.

        Args:
            path: URL path relative to base URL.
        """
        self.page.goto(f"{self.base_url}{path}")

    def click_and_settle(self, selector: str) -> None:
        """Click an element and wait for the resulting requests to finish."""
        self.page.locator(selector).click()
        self.wait_for_page_load()

    # -------------------------------------------------------------------------
    # Wait Methods
    # -------------------------------------------------------------------------

    def wait_for_page_load(self) -> None:
        """Wait for the network to go idle."""
        self.page.wait_for_load_state("networkidle")

    def wait_for_element(self, selector: str, timeout: int | None = None) -> Locator:
        """
        Wait for an element to be visible.

        Args:
            selector: Locator string.
            timeout: Maximum wait in milliseconds; the element budget by default.

        Returns:
            The now-visible locator.
        """
        locator = self.page.locator(selector)
        locator.first.wait_for(state="visible", timeout=timeout or self.timeouts.element)
        return locator

    def wait_for_confirmation(self, success_selector: str | None = None) -> None:
        """
        Block until the success toast or the error toast appears.

        Raises:
            UiActionError: If the error toast appeared.
            playwright.sync_api.TimeoutError: If neither appeared in time.
        """
        success_selector = success_selector or self.SUCCESS_TOAST
        either = self.page.locator(f"{success_selector}, {self.ERROR_TOAST}")
        either.first.wait_for(state="visible", timeout=self.timeouts.action)

        error_toast = self.page.locator(self.ERROR_TOAST)
        if error_toast.first.is_visible():
            message = (error_toast.first.text_content() or "").strip()
            logger.error("Action rejected by the application: %s", message)
            raise UiActionError(message or "The application reported an error")

    # -------------------------------------------------------------------------
    # Widget Helpers
    # -------------------------------------------------------------------------

    def select_option(self, dropdown_selector: str, option_selector: str) -> None:
        """Open an ``oxd-select`` dropdown and pick an option once it is rendered."""
        self.page.locator(dropdown_selector).click()
        option = self.wait_for_element(option_selector, self.timeouts.element)
        option.first.click()

    def select_autocomplete(self, input_selector: str, text: str, option_selector: str) -> None:
        """
        Type into an autocomplete field and pick the matching suggestion.

        Args:
            input_selector: The text input.
            text: Text to type.
            option_selector: Suggestion locator, usually a substring match on *text*.
        """
        self.page.locator(input_selector).fill(text)
        option = self.wait_for_element(option_selector, self.timeouts.autocomplete)
        option.first.click()

    # -------------------------------------------------------------------------
    # Data Extraction
    # -------------------------------------------------------------------------

    def get_records_found_count(self, selector: str | None = None) -> int:
        """
        Read the "(N) Records Found" counter above a list table.

        Returns:
            N, or 0 when the counter shows "No Records Found".
        """
        text = self.page.locator(selector or self.RECORDS_FOUND_TEXT).first.text_content() or ""
        match = _RECORDS_FOUND.search(text)
        return int(match.group(1)) if match else 0

    # -------------------------------------------------------------------------
    # Assertion Methods
    # -------------------------------------------------------------------------

    def assert_visible(self, selector: str) -> None:
        """Assert that the element becomes visible within the element budget."""
        expect(self.page.locator(selector).first).to_be_visible(timeout=self.timeouts.element)

    def assert_text_contains(self, selector: str, expected: str) -> None:
        """
        Assert that the element's text contains *expected*.

        Retries until the text matches or the element budget runs out, so a
        table that is still re-rendering does not fail the check.
        """
        expect(self.page.locator(selector).first).to_contain_text(
            expected, timeout=self.timeouts.element
        )

    def assert_records_found(self, expected: int | None = None, selector: str | None = None) -> None:
        """
        Assert the "(N) Records Found" counter.

        Args:
            expected: Exact N, or None for "at least one record".
            selector: Counter locator; the standard list counter by default.
        """
        counter = self.page.locator(selector or self.RECORDS_FOUND_TEXT).first
        text = _ANY_RECORDS_FOUND if expected is None else f"({expected})"
        expect(counter).to_contain_text(text, timeout=self.timeouts.element)

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def take_screenshot(self, name: str, directory: str = "test-results/screenshots") -> str:
        """
        Take a screenshot of the current page.

        Args:
            name: Name for the screenshot file.
            directory: Target directory, created when missing.

        Returns:
            Path to the saved screenshot.
        """
        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, f"{name}.png")
        self.page.screenshot(path=path)
        return path
