"""
Page drivers for the OrangeHRM UI.

Each driver wraps one Playwright page and exposes business-level actions
(create employee, apply for leave, approve leave) built from the selector
maps in ``hrm_e2e.selectors``.
"""

from hrm_e2e.pages.base_page import BasePage, Timeouts
from hrm_e2e.pages.leave_apply_page import LeaveApplyPage
from hrm_e2e.pages.leave_list_page import LeaveListPage
from hrm_e2e.pages.login_page import LoginPage
from hrm_e2e.pages.pim_page import PimPage
from hrm_e2e.pages.user_management_page import UserManagementPage

__all__ = [
    "BasePage",
    "LeaveApplyPage",
    "LeaveListPage",
    "LoginPage",
    "PimPage",
    "Timeouts",
    "UserManagementPage",
]
