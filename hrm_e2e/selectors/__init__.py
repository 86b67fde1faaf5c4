"""
Locator maps for the OrangeHRM UI, one class per feature area.

Static elements are upper-case string constants; parameterised elements are
static methods returning a locator string.  A stale locator only shows up as
a timeout in the page driver that uses it.
"""

from hrm_e2e.selectors.admin import AdminSelectors
from hrm_e2e.selectors.leave import LeaveSelectors, LeaveTableColumns
from hrm_e2e.selectors.login import LoginSelectors
from hrm_e2e.selectors.pim import PimSelectors

__all__ = [
    "AdminSelectors",
    "LeaveSelectors",
    "LeaveTableColumns",
    "LoginSelectors",
    "PimSelectors",
]
