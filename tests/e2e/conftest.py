"""Playwright fixtures for the OrangeHRM leave-workflow scenarios."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator

import pytest
from playwright.sync_api import Browser, Page

from hrm_e2e.config import (
    Config,
    RoleCredentials,
    browser_launch_args,
    get_config,
    get_credentials,
    get_employee_credentials,
)
from hrm_e2e.live_app import wait_for_app_reachable
from hrm_e2e.pages import LoginPage, Timeouts
from hrm_e2e.state import StateFile

logger = logging.getLogger(__name__)

SCREENSHOT_PAGE_FIXTURES = ("page", "admin_page", "employee_page", "supervisor_page")


@pytest.fixture(scope="session")
def hrm_config() -> type[Config]:
    return get_config()


@pytest.fixture(scope="session")
def hrm_base_url(hrm_config: type[Config]) -> str:
    """
    Return the OrangeHRM base URL once it answers.

    The scenarios need a live instance; when none is reachable every test
    using a role page is skipped instead of timing out in the browser.
    """
    base_url = hrm_config.BASE_URL.rstrip("/")
    try:
        wait_for_app_reachable(base_url, timeout=hrm_config.REACHABILITY_TIMEOUT)
    except RuntimeError as exc:
        pytest.skip(f"{exc}; set HRM_BASE_URL to a running instance")
    return base_url


@pytest.fixture(scope="session")
def browser_type_launch_args(
    browser_type_launch_args: dict, hrm_config: type[Config], pytestconfig: pytest.Config
) -> dict:
    return browser_launch_args(
        browser_type_launch_args, hrm_config, headed=pytestconfig.getoption("--headed")
    )


@pytest.fixture(scope="session")
def browser_context_args(hrm_config: type[Config]) -> dict:
    args = {
        "viewport": {"width": hrm_config.VIEWPORT_WIDTH, "height": hrm_config.VIEWPORT_HEIGHT},
        "ignore_https_errors": True,
    }
    if hrm_config.RECORD_VIDEO:
        args["record_video_dir"] = str(hrm_config.VIDEO_DIR)
    return args


@pytest.fixture(scope="session")
def timeouts(hrm_config: type[Config]) -> Timeouts:
    return Timeouts.from_config(hrm_config)


@pytest.fixture(scope="session")
def state_file(hrm_config: type[Config]) -> StateFile:
    """The side-file shared by the numbered scenario modules."""
    return StateFile(hrm_config.STATE_FILE)


def _role_page(
    browser: Browser,
    browser_context_args: dict,
    base_url: str,
    timeouts: Timeouts,
    credentials: RoleCredentials | None,
) -> Generator[Page, None, None]:
    """Open a fresh context on the login page and sign in when credentials exist."""
    context = browser.new_context(**browser_context_args)
    page = context.new_page()

    login_page = LoginPage(page, base_url, timeouts)
    login_page.navigate()
    if credentials is not None:
        login_page.login(credentials.username, credentials.password)
        login_page.expect_logged_in()

    yield page
    context.close()


@pytest.fixture
def admin_page(
    browser: Browser, browser_context_args: dict, hrm_base_url: str, timeouts: Timeouts
) -> Generator[Page, None, None]:
    credentials = get_credentials("admin")
    if credentials is None:
        pytest.fail("ADMIN_USERNAME and ADMIN_PASSWORD must be set")
    yield from _role_page(browser, browser_context_args, hrm_base_url, timeouts, credentials)


@pytest.fixture
def employee_credentials(state_file: StateFile) -> RoleCredentials | None:
    """The ESS login created by the admin scenario, else the environment's."""
    return get_employee_credentials(state_file.load())


@pytest.fixture
def employee_page(
    browser: Browser,
    browser_context_args: dict,
    hrm_base_url: str,
    timeouts: Timeouts,
    employee_credentials: RoleCredentials | None,
) -> Generator[Page, None, None]:
    yield from _role_page(
        browser, browser_context_args, hrm_base_url, timeouts, employee_credentials
    )


@pytest.fixture
def supervisor_credentials() -> RoleCredentials | None:
    return get_credentials("supervisor")


@pytest.fixture
def supervisor_page(
    browser: Browser,
    browser_context_args: dict,
    hrm_base_url: str,
    timeouts: Timeouts,
    supervisor_credentials: RoleCredentials | None,
) -> Generator[Page, None, None]:
    yield from _role_page(
        browser, browser_context_args, hrm_base_url, timeouts, supervisor_credentials
    )


def open_pages(funcargs: dict) -> dict[str, Page]:
    """The page fixtures a test requested, by fixture name."""
    return {
        name: funcargs[name] for name in SCREENSHOT_PAGE_FIXTURES if funcargs.get(name) is not None
    }


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a screenshot of every open page on test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        screenshot_dir = str(get_config().SCREENSHOT_DIR)
        os.makedirs(screenshot_dir, exist_ok=True)
        test_name = item.name.replace("/", "_").replace("::", "_")
        for fixture_name, page in open_pages(item.funcargs).items():
            screenshot_path = f"{screenshot_dir}/{test_name}_{fixture_name}.png"
            try:
                page.screenshot(path=screenshot_path)
                logger.info("Screenshot saved: %s", screenshot_path)
            except Exception as exc:  # pragma: no cover - best effort logging
                logger.warning("Failed to capture screenshot: %s", exc)
