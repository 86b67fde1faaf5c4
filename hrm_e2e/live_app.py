"""Reachability helpers for the target OrangeHRM instance."""

from __future__ import annotations

import time

import requests

from hrm_e2e.selectors.login import LoginSelectors


def is_app_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when the login page responds with 200."""
    try:
        response = requests.get(f"{url.rstrip('/')}{LoginSelectors.LOGIN_PATH}", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_app_reachable(url: str, timeout: int = 30, interval: int = 2) -> None:
    """
    Poll the login page until it responds or *timeout* seconds pass.

    Raises:
        RuntimeError: If the application never answered.
    """
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_app_reachable(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"OrangeHRM at {url} not reachable after {timeout}s")
