"""Leave-request data sources behind one ``LeaveRepository`` contract."""

from hrm_e2e.repositories.base import LeaveRepository
from hrm_e2e.repositories.csv_repository import CsvLeaveRepository
from hrm_e2e.repositories.ui_repository import UiLeaveRepository

__all__ = ["CsvLeaveRepository", "LeaveRepository", "UiLeaveRepository"]
