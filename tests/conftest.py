"""
Shared pytest fixtures for the OrangeHRM E2E suite.

This module contains fixtures that are shared across the unit and e2e
suites: test-data factories and a browser-free stand-in for a Playwright
page.

Key Concepts Demonstrated:
- Test data factories backed by Faker
- Mock objects standing in for the browser
- Temporary side-files for state hand-off tests
"""

from __future__ import annotations

from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest
from faker import Faker

from hrm_e2e.models import Employee, LeaveRequest, LeaveStatus, LeaveType, SystemUser
from hrm_e2e.state import StateFile

# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def employee_factory():
    """
    Factory fixture for creating Employee instances.

    Returns:
        Function that creates an Employee with random or given names.

    Example:
        def test_something(employee_factory):
            employee = employee_factory(first_name="Jane")
    """

    def _create_employee(
        first_name: str | None = None,
        last_name: str | None = None,
        middle_name: str | None = None,
    ) -> Employee:
        return Employee.create(
            first_name or fake.first_name(),
            last_name or fake.last_name(),
            middle_name,
        )

    return _create_employee


@pytest.fixture
def leave_request_factory():
    """
    Factory fixture for creating LeaveRequest instances.

    Defaults to a three-day FMLA leave starting next week.
    """

    def _create_leave_request(
        leave_type: LeaveType = LeaveType.FMLA,
        from_date: date | None = None,
        days: int = 3,
        comment: str | None = None,
        employee_name: str | None = None,
        status: LeaveStatus = LeaveStatus.PENDING_APPROVAL,
    ) -> LeaveRequest:
        start = from_date or date.today() + timedelta(days=7)
        return LeaveRequest(
            leave_type=leave_type,
            from_date=start,
            to_date=start + timedelta(days=days - 1),
            comment=comment,
            employee_name=employee_name,
            status=status,
        )

    return _create_leave_request


@pytest.fixture
def ess_user(employee_factory) -> SystemUser:
    """An ESS account for a freshly generated employee."""
    employee = employee_factory()
    return SystemUser.create_ess_user(
        employee.full_name,
        f"emp{fake.numerify('######')}",
        "TestPass123!",
    )


# -----------------------------------------------------------------------------
# Browser Stand-ins
# -----------------------------------------------------------------------------

def _make_locator(selector: str) -> MagicMock:
    locator = MagicMock(name=f"locator({selector})")
    # .first resolves to the same element so assertions need not care
    locator.first = locator
    locator.is_visible.return_value = False
    locator.text_content.return_value = ""
    locator.input_value.return_value = ""
    locator.all.return_value = []
    locator.all_text_contents.return_value = []
    return locator


@pytest.fixture
def fake_page() -> MagicMock:
    """
    MagicMock standing in for ``playwright.sync_api.Page``.

    ``page.locator(selector)`` returns one mock per selector, kept in
    ``page.locators`` so tests can configure and inspect it.  Locators
    default to invisible, empty-text elements.
    """
    page = MagicMock(name="page")
    page.locators = {}

    def _locator(selector: str) -> MagicMock:
        if selector not in page.locators:
            page.locators[selector] = _make_locator(selector)
        return page.locators[selector]

    page.locator.side_effect = _locator
    return page


@pytest.fixture
def state_file(tmp_path) -> StateFile:
    """Side-file in a temporary directory."""
    return StateFile(tmp_path / "test-data.json")


@pytest.fixture
def fake_expect(monkeypatch) -> MagicMock:
    """
    Stand-in for Playwright's ``expect`` as used by the page drivers.

    ``expect`` only accepts real locators, so driver assertions are
    recorded here instead: ``fake_expect.call_args`` holds the locator and
    ``fake_expect.return_value`` the matcher calls.
    """
    assertion = MagicMock(name="expect")
    monkeypatch.setattr("hrm_e2e.pages.base_page.expect", assertion)
    return assertion
