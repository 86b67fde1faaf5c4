"""
Domain value objects for the OrangeHRM workflows.

These classes carry the data the page drivers type into the UI and read
back out of it.  Invariants are checked at construction so that a bad
fixture fails before a browser is ever opened.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum

from hrm_e2e.errors import ValidationError

logger = logging.getLogger(__name__)


def format_date(value: date) -> str:
    """Format a date as ``YYYY-MM-DD``, the format the OrangeHRM date inputs accept."""
    return value.isoformat()


def parse_date(text: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` string into a date.

    Raises:
        ValidationError: If the text is not a valid calendar date.
    """
    try:
        return date.fromisoformat(text.strip())
    except (AttributeError, ValueError) as exc:
        raise ValidationError(f"Invalid date: {text!r}") from exc


class LeaveType(str, Enum):
    """Leave types offered by the demo tenant, valued by their UI labels."""

    FMLA = "CAN - FMLA"
    PERSONAL = "CAN - Personal"

    @classmethod
    def from_label(cls, text: str, strict: bool = False) -> "LeaveType":
        """
        Map free text from the UI or an export to a leave type.

        Matching is by substring so that tenant prefixes such as ``"CAN - "``
        do not matter.

        Unknown text maps to ``FMLA`` and is logged, unless *strict*.
        """
        if "FMLA" in text:
            return cls.FMLA
        if "Personal" in text:
            return cls.PERSONAL
        if strict:
            raise ValidationError(f"Unrecognised leave type: {text!r}")
        logger.warning("Unrecognised leave type %r, defaulting to %s", text, cls.FMLA.value)
        return cls.FMLA


class LeaveStatus(str, Enum):
    """Leave statuses as rendered in the leave tables."""

    PENDING_APPROVAL = "Pending Approval"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    CANCELLED = "Cancelled"

    @classmethod
    def from_label(cls, text: str, strict: bool = False) -> "LeaveStatus":
        """
        Map status text to a status.

        The table cell may carry a day count, e.g. ``"Approved (3.00)"``, so
        matching is by substring.  Unknown text maps to ``PENDING_APPROVAL``
        and is logged, unless *strict*.
        """
        for keyword, status in (
            ("Pending", cls.PENDING_APPROVAL),
            ("Approved", cls.APPROVED),
            ("Rejected", cls.REJECTED),
            ("Cancelled", cls.CANCELLED),
        ):
            if keyword in text:
                return status
        if strict:
            raise ValidationError(f"Unrecognised leave status: {text!r}")
        logger.warning(
            "Unrecognised leave status %r, defaulting to %s", text, cls.PENDING_APPROVAL.value
        )
        return cls.PENDING_APPROVAL


class UserRole(str, Enum):
    """System-user roles."""

    ADMIN = "Admin"
    ESS = "ESS"


class UserStatus(str, Enum):
    """System-user account states."""

    ENABLED = "Enabled"
    DISABLED = "Disabled"


def _require_text(value: str | None, message: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(message)
    return value.strip()


def _coerce(enum_type, value, field: str):
    try:
        return enum_type(value)
    except ValueError as exc:
        raise ValidationError(f"Invalid {field}: {value!r}") from exc


@dataclass(frozen=True)
class Employee:
    """
    An employee record as entered in PIM.

    Attributes:
        first_name: Required, stored trimmed.
        last_name: Required, stored trimmed.
        middle_name: Optional, stored trimmed.
        employee_id: Identifier assigned by OrangeHRM, known after creation.
    """

    first_name: str
    last_name: str
    middle_name: str | None = None
    employee_id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "first_name", _require_text(self.first_name, "First name is required"))
        object.__setattr__(self, "last_name", _require_text(self.last_name, "Last name is required"))
        middle = self.middle_name.strip() if self.middle_name else None
        object.__setattr__(self, "middle_name", middle or None)

    @property
    def full_name(self) -> str:
        """Names joined by single spaces, middle name only when present."""
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(part for part in parts if part)

    def with_employee_id(self, employee_id: str) -> "Employee":
        """Return a copy carrying the id OrangeHRM assigned."""
        return replace(self, employee_id=employee_id)

    @classmethod
    def create(cls, first_name: str, last_name: str, middle_name: str | None = None) -> "Employee":
        return cls(first_name=first_name, last_name=last_name, middle_name=middle_name)


class LeaveRequest:
    """
    A leave request.

    Everything except ``status`` is fixed at construction; ``status``
    follows the request through approval in the external system.
    """

    def __init__(
        self,
        leave_type: LeaveType,
        from_date: date,
        to_date: date,
        comment: str | None = None,
        employee_name: str | None = None,
        status: LeaveStatus = LeaveStatus.PENDING_APPROVAL,
    ):
        from_date = self._as_date(from_date, "Invalid from date")
        to_date = self._as_date(to_date, "Invalid to date")
        if from_date > to_date:
            raise ValidationError("From date cannot be after to date")

        self._leave_type = _coerce(LeaveType, leave_type, "leave type")
        self._from_date = from_date
        self._to_date = to_date
        self._comment = comment
        self._employee_name = employee_name
        self.status = status

    @staticmethod
    def _as_date(value: object, message: str) -> date:
        # datetime subclasses date; keep only the calendar day
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        raise ValidationError(message)

    @property
    def status(self) -> LeaveStatus:
        return self._status

    @status.setter
    def status(self, value: LeaveStatus) -> None:
        self._status = _coerce(LeaveStatus, value, "leave status")

    @property
    def leave_type(self) -> LeaveType:
        return self._leave_type

    @property
    def from_date(self) -> date:
        return self._from_date

    @property
    def to_date(self) -> date:
        return self._to_date

    @property
    def comment(self) -> str | None:
        return self._comment

    @property
    def employee_name(self) -> str | None:
        return self._employee_name

    @property
    def from_date_formatted(self) -> str:
        return format_date(self._from_date)

    @property
    def to_date_formatted(self) -> str:
        return format_date(self._to_date)

    @property
    def duration_days(self) -> int:
        """Calendar days covered, both ends inclusive."""
        return (self._to_date - self._from_date).days + 1

    @classmethod
    def create_fmla_leave(
        cls, from_date: date, to_date: date, comment: str | None = None
    ) -> "LeaveRequest":
        return cls(LeaveType.FMLA, from_date, to_date, comment=comment)

    def _key(self) -> tuple:
        return (
            self._leave_type,
            self._from_date,
            self._to_date,
            self._comment,
            self._employee_name,
            self._status,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LeaveRequest):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # status is mutable

    def __repr__(self) -> str:
        return (
            f"<LeaveRequest {self._employee_name or '-'}: {self._leave_type.value} "
            f"{self.from_date_formatted}..{self.to_date_formatted} [{self._status.value}]>"
        )


@dataclass(frozen=True)
class SystemUser:
    """
    An OrangeHRM login account linked to an employee.

    Attributes:
        user_role: Admin or ESS (employee self-service).
        employee_name: Employee the account belongs to.
        status: Enabled or disabled.
        username: At least 5 characters after trimming.
        password: At least 7 characters.
    """

    user_role: UserRole
    employee_name: str
    status: UserStatus
    username: str
    password: str

    def __post_init__(self) -> None:
        if self.username is None or len(self.username.strip()) < 5:
            raise ValidationError("Username must be at least 5 characters")
        if self.password is None or len(self.password) < 7:
            raise ValidationError("Password must be at least 7 characters")
        employee_name = _require_text(self.employee_name, "Employee name is required")

        object.__setattr__(self, "user_role", _coerce(UserRole, self.user_role, "user role"))
        object.__setattr__(self, "status", _coerce(UserStatus, self.status, "user status"))
        object.__setattr__(self, "employee_name", employee_name)
        object.__setattr__(self, "username", self.username.strip())

    @classmethod
    def create_ess_user(cls, employee_name: str, username: str, password: str) -> "SystemUser":
        return cls(
            user_role=UserRole.ESS,
            employee_name=employee_name,
            status=UserStatus.ENABLED,
            username=username,
            password=password,
        )
