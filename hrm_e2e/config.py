"""
Suite configuration.

Defines environment-specific configuration classes for the E2E suite.
Each class captures where the HR application lives, how the browser is
launched, and how long UI waits may take.  The ``get_config`` factory
selects the right class based on the ``HRM_ENV`` environment variable (or
an explicit key).

Role credentials are deliberately *not* class attributes: scenario modules
create the employee login during the run, so ``get_credentials`` reads the
environment at call time.

Key Concepts Demonstrated:
- Class-based configuration with inheritance for DRY defaults
- Environment-variable overrides (a local ``.env`` file is honoured)
- Separate CI configuration with headless browsers and video capture
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from hrm_e2e.state import ScenarioState

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """
    Base (shared) configuration for the suite.

    All environment-specific classes inherit from ``Config`` so that
    common defaults only need to be stated once.
    """

    # Public OrangeHRM demo; override to point at a self-hosted instance.
    BASE_URL: str = os.environ.get("HRM_BASE_URL", "https://opensource-demo.orangehrmlive.com")

    HEADLESS: bool = _env_bool("HRM_HEADLESS", True)
    VIEWPORT_WIDTH: int = int(os.environ.get("HRM_VIEWPORT_WIDTH", "1280"))
    VIEWPORT_HEIGHT: int = int(os.environ.get("HRM_VIEWPORT_HEIGHT", "720"))

    # Upper bound for a save/apply/approve to show its confirmation toast.
    ACTION_TIMEOUT_MS: int = int(os.environ.get("HRM_ACTION_TIMEOUT_MS", "10000"))
    LOGIN_TIMEOUT_MS: int = int(os.environ.get("HRM_LOGIN_TIMEOUT_MS", "5000"))
    # The autocomplete widgets debounce input before querying the backend.
    AUTOCOMPLETE_TIMEOUT_MS: int = int(os.environ.get("HRM_AUTOCOMPLETE_TIMEOUT_MS", "5000"))

    # Seconds to wait for the application to answer before the e2e suite is skipped.
    REACHABILITY_TIMEOUT: int = int(os.environ.get("HRM_REACHABILITY_TIMEOUT", "30"))

    STATE_FILE: Path = Path(os.environ.get("HRM_STATE_FILE", str(BASE_DIR / "test-data.json")))
    SCREENSHOT_DIR: Path = Path(os.environ.get("HRM_SCREENSHOT_DIR", "test-results/screenshots"))

    RECORD_VIDEO: bool = _env_bool("HRM_RECORD_VIDEO", False)
    VIDEO_DIR: Path = Path(os.environ.get("HRM_VIDEO_DIR", "test-results/videos"))

    # Existing demo-data employee used as the supervisor of the created employee.
    SUPERVISOR_NAME: str = os.environ.get("HRM_SUPERVISOR_NAME", "Odis Adalwin")

    # Optional delimited export of the leave list, read by the file-backed repository.
    LEAVE_RECORDS_FILE: str | None = os.environ.get("HRM_LEAVE_RECORDS_FILE") or None


class LocalConfig(Config):
    """
    Local-debugging overrides.

    Shows the browser window so a developer can watch the workflow.
    """

    HEADLESS: bool = _env_bool("HRM_HEADLESS", False)


class CIConfig(Config):
    """
    CI overrides.

    Always headless, and keeps a video of every session so failures on a
    build agent can be replayed.
    """

    HEADLESS: bool = True
    RECORD_VIDEO: bool = _env_bool("HRM_RECORD_VIDEO", True)


# Lookup table mapping environment name strings to their config classes.
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": Config,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Return the configuration class for the given environment.

    Args:
        env: One of ``"local"``, ``"ci"`` or ``"default"``.  When *None*,
            the ``HRM_ENV`` environment variable is consulted, falling back
            to ``"default"`` if unset.

    Returns:
        The ``Config`` subclass matching the requested environment, or
        ``Config`` itself if the key is unrecognised.
    """
    if env is None:
        env = os.environ.get("HRM_ENV", "default")
    return config.get(env, config["default"])


def browser_launch_args(defaults: dict, cfg: type[Config], headed: bool = False) -> dict:
    """Apply the configured headless mode unless ``--headed`` was given."""
    if headed:
        return defaults
    return {**defaults, "headless": cfg.HEADLESS}


ROLES = ("admin", "employee", "supervisor")


@dataclass(frozen=True)
class RoleCredentials:
    """Username/password pair for one role."""

    username: str
    password: str


def get_credentials(role: str) -> RoleCredentials | None:
    """
    Read the credentials for *role* from the environment.

    ``admin`` reads ``ADMIN_USERNAME``/``ADMIN_PASSWORD`` and so on.

    Returns:
        The credentials, or ``None`` when either variable is unset or blank.
    """
    if role not in ROLES:
        raise ValueError(f"Unknown role: {role!r}")
    prefix = role.upper()
    username = os.environ.get(f"{prefix}_USERNAME", "").strip()
    password = os.environ.get(f"{prefix}_PASSWORD", "")
    if not username or not password:
        return None
    return RoleCredentials(username=username, password=password)


def get_employee_credentials(state: ScenarioState | None = None) -> RoleCredentials | None:
    """
    Credentials for the employee role.

    The ESS login recorded in the side-file wins over
    ``EMPLOYEE_USERNAME``/``EMPLOYEE_PASSWORD``, so a fresh run signs in as
    the employee it just created.
    """
    if state is not None and state.system_user is not None:
        return RoleCredentials(
            username=state.system_user.username, password=state.system_user.password
        )
    return get_credentials("employee")
