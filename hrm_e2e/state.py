"""
Scenario side-file.

The leave workflow is split across scenario modules that may run as
separate pytest invocations, so each module hands its results to the next
through a JSON file::

    {
      "schemaVersion": 1,
      "employee": {"firstName", "lastName", "fullName", "employeeId"},
      "systemUser": {"username", "password"},
      "supervisor": {"name", "assignedAt"},
      "leaveRequest": {"fromDate", "toDate", "comment", "appliedAt",
                       "approvedAt", "approvedBy"},
      "createdAt": "..."
    }

A missing section means the step that writes it has not run yet.  Writes go
to a temporary file in the same directory which is then renamed over the
target, so a reader never sees half a document.  Modules are still expected
to run one after another.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from hrm_e2e.errors import StateFileError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


@dataclass
class EmployeeRecord:
    first_name: str
    last_name: str
    full_name: str
    employee_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "fullName": self.full_name,
            "employeeId": self.employee_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmployeeRecord":
        return cls(
            first_name=data["firstName"],
            last_name=data["lastName"],
            full_name=data["fullName"],
            employee_id=data.get("employeeId"),
        )


@dataclass
class SystemUserRecord:
    username: str
    password: str

    def to_dict(self) -> dict[str, Any]:
        return {"username": self.username, "password": self.password}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SystemUserRecord":
        return cls(username=data["username"], password=data["password"])


@dataclass
class SupervisorRecord:
    name: str
    assigned_at: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "assignedAt": self.assigned_at}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SupervisorRecord":
        return cls(name=data["name"], assigned_at=data["assignedAt"])


@dataclass
class LeaveRecord:
    """The leave request applied for by the employee, plus approval metadata."""

    from_date: str
    to_date: str
    comment: str | None = None
    applied_at: str | None = None
    approved_at: str | None = None
    approved_by: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = {
            "fromDate": self.from_date,
            "toDate": self.to_date,
            "comment": self.comment,
            "appliedAt": self.applied_at,
        }
        if self.approved_at is not None:
            data["approvedAt"] = self.approved_at
            data["approvedBy"] = self.approved_by
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LeaveRecord":
        return cls(
            from_date=data["fromDate"],
            to_date=data["toDate"],
            comment=data.get("comment"),
            applied_at=data.get("appliedAt"),
            approved_at=data.get("approvedAt"),
            approved_by=data.get("approvedBy"),
        )


_SECTIONS = (
    ("employee", "employee", EmployeeRecord),
    ("system_user", "systemUser", SystemUserRecord),
    ("supervisor", "supervisor", SupervisorRecord),
    ("leave_request", "leaveRequest", LeaveRecord),
)


@dataclass
class ScenarioState:
    """Everything the scenario modules have recorded so far."""

    employee: EmployeeRecord | None = None
    system_user: SystemUserRecord | None = None
    supervisor: SupervisorRecord | None = None
    leave_request: LeaveRecord | None = None
    created_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"schemaVersion": SCHEMA_VERSION}
        for attribute, key, _ in _SECTIONS:
            record = getattr(self, attribute)
            if record is not None:
                data[key] = record.to_dict()
        if self.created_at is not None:
            data["createdAt"] = self.created_at
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScenarioState":
        # Files written before versioning carry no schemaVersion
        version = data.get("schemaVersion", 1)
        if not isinstance(version, int) or version > SCHEMA_VERSION:
            raise StateFileError(
                f"Unsupported side-file schema version {version!r} (supported: {SCHEMA_VERSION})"
            )

        state = cls(created_at=data.get("createdAt"))
        for attribute, key, record_type in _SECTIONS:
            section = data.get(key)
            if section is None:
                continue
            try:
                setattr(state, attribute, record_type.from_dict(section))
            except (KeyError, TypeError) as exc:
                raise StateFileError(f"Malformed {key!r} section in side-file") from exc
        return state


class StateFile:
    """
    Read/write access to the side-file.

    Attributes:
        path: Location of the JSON document.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> ScenarioState:
        """
        Read the side-file.

        Returns:
            The recorded state, or an empty state when the file is absent.

        Raises:
            StateFileError: If the file is not valid JSON or has an
                unsupported schema version.
        """
        if not self.path.exists():
            return ScenarioState()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise StateFileError(f"Side-file {self.path} is not valid JSON") from exc
        if not isinstance(data, dict):
            raise StateFileError(f"Side-file {self.path} does not hold a JSON object")
        return ScenarioState.from_dict(data)

    def save(self, state: ScenarioState) -> None:
        """Atomically replace the side-file with *state*."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(state.to_dict(), indent=2)

        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.info("Scenario state saved to %s", self.path)

    def update(self, mutator: Callable[[ScenarioState], None]) -> ScenarioState:
        """
        Load the state, let *mutator* change it in place, and save it.

        Returns:
            The saved state.
        """
        state = self.load()
        mutator(state)
        self.save(state)
        return state

    def clear(self) -> None:
        """Delete the side-file if present."""
        if self.path.exists():
            self.path.unlink()
