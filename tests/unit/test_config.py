"""Unit tests for configuration lookup and credential loading."""

import pytest

from hrm_e2e.config import (
    CIConfig,
    Config,
    LocalConfig,
    RoleCredentials,
    browser_launch_args,
    get_config,
    get_credentials,
    get_employee_credentials,
)
from hrm_e2e.state import ScenarioState, SystemUserRecord

pytestmark = pytest.mark.unit


class TestGetConfig:
    """Tests for environment-based config selection."""

    @pytest.mark.parametrize(
        "env, expected", [("local", LocalConfig), ("ci", CIConfig), ("default", Config), ("bogus", Config)]
    )
    def test_explicit_env(self, env, expected):
        assert get_config(env) is expected

    def test_reads_hrm_env(self, monkeypatch):
        monkeypatch.setenv("HRM_ENV", "ci")

        assert get_config() is CIConfig

    def test_ci_is_always_headless(self):
        assert CIConfig.HEADLESS is True


class TestBrowserLaunchArgs:
    """Tests for merging the configured headless mode into launch args."""

    def test_configured_headless_applied(self):
        args = browser_launch_args({"slow_mo": 50}, CIConfig)

        assert args == {"slow_mo": 50, "headless": True}

    def test_headed_flag_keeps_plugin_args(self):
        # Arrange
        defaults = {"headless": False}

        # Act
        args = browser_launch_args(defaults, CIConfig, headed=True)

        # Assert
        assert args == {"headless": False}


class TestGetCredentials:
    """Tests for per-role credentials read at call time."""

    def test_credentials_from_environment(self, monkeypatch):
        monkeypatch.setenv("ADMIN_USERNAME", " Admin ")
        monkeypatch.setenv("ADMIN_PASSWORD", "admin123")

        assert get_credentials("admin") == RoleCredentials(username="Admin", password="admin123")

    @pytest.mark.parametrize("username, password", [("", "secret123"), ("janedoe", ""), ("   ", "x")])
    def test_incomplete_credentials_are_absent(self, monkeypatch, username, password):
        monkeypatch.setenv("SUPERVISOR_USERNAME", username)
        monkeypatch.setenv("SUPERVISOR_PASSWORD", password)

        assert get_credentials("supervisor") is None

    def test_unset_credentials_are_absent(self, monkeypatch):
        monkeypatch.delenv("EMPLOYEE_USERNAME", raising=False)
        monkeypatch.delenv("EMPLOYEE_PASSWORD", raising=False)

        assert get_credentials("employee") is None

    def test_unknown_role_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown role"):
            get_credentials("manager")


class TestGetEmployeeCredentials:
    """Tests for the side-file taking precedence over the environment."""

    def test_side_file_login_wins_over_environment(self, monkeypatch):
        # Arrange
        monkeypatch.setenv("EMPLOYEE_USERNAME", "envuser")
        monkeypatch.setenv("EMPLOYEE_PASSWORD", "envpass123")
        state = ScenarioState(
            system_user=SystemUserRecord(username="emp1700000000", password="TestPass123!")
        )

        # Act
        credentials = get_employee_credentials(state)

        # Assert
        assert credentials == RoleCredentials(username="emp1700000000", password="TestPass123!")

    @pytest.mark.parametrize("state", [None, ScenarioState()])
    def test_environment_used_without_side_file_login(self, monkeypatch, state):
        monkeypatch.setenv("EMPLOYEE_USERNAME", "envuser")
        monkeypatch.setenv("EMPLOYEE_PASSWORD", "envpass123")

        assert get_employee_credentials(state) == RoleCredentials(
            username="envuser", password="envpass123"
        )

    def test_no_credentials_anywhere(self, monkeypatch):
        monkeypatch.delenv("EMPLOYEE_USERNAME", raising=False)
        monkeypatch.delenv("EMPLOYEE_PASSWORD", raising=False)

        assert get_employee_credentials(ScenarioState()) is None
