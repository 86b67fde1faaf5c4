"""Leave module locators."""

from hrm_e2e.selectors.xpath import xpath_literal

_TABLE_CARD = '(//div[contains(@class, "oxd-table-card")])'


class LeaveTableColumns:
    """
    0-based cell offsets of a leave table row.

    These mirror the fixed column layout of the OrangeHRM leave tables and
    break if that layout changes.
    """

    EMPLOYEE_NAME = 1
    LEAVE_TYPE = 2
    DATE_RANGE = 3
    STATUS = 5

    MIN_CELLS = 6


class LeaveSelectors:
    """Locators for Apply, My Leave and Leave List."""

    # Navigation
    LEAVE_MENU = 'a[href="/web/index.php/leave/viewLeaveModule"]'
    APPLY_TAB = 'a[href="/web/index.php/leave/applyLeave"]'
    MY_LEAVE_TAB = 'a[href="/web/index.php/leave/viewMyLeaveList"]'
    LEAVE_LIST_TAB = 'a[href="/web/index.php/leave/viewLeaveList"]'

    # Apply Leave form
    LEAVE_TYPE_DROPDOWN = '//label[text()="Leave Type"]/../..//div[contains(@class, "oxd-select-text")]'
    FROM_DATE_INPUT = '//label[text()="From Date"]/../..//input'
    TO_DATE_INPUT = '//label[text()="To Date"]/../..//input'
    COMMENTS_TEXTAREA = 'textarea[placeholder="Type comment here"]'
    APPLY_BUTTON = 'button[type="submit"]'
    SUCCESS_TOAST = ".oxd-toast--success"

    # My Leave / Leave List filters
    EMPLOYEE_NAME_INPUT = '//label[text()="Employee Name"]/../..//input'
    STATUS_DROPDOWN = (
        '//label[contains(text(), "Show Leave with Status")]/../..'
        '//div[contains(@class, "oxd-select-text")]'
    )
    SEARCH_BUTTON = 'button[type="submit"]'

    # Leave table
    LEAVE_TABLE_ROW = ".oxd-table-body .oxd-table-card"
    TABLE_CELL = "div.oxd-table-cell"
    RECORDS_FOUND_TEXT = ".orangehrm-horizontal-padding span.oxd-text--span"

    @staticmethod
    def leave_type_option(leave_type: str) -> str:
        return f'//div[@role="option"]//span[contains(text(), {xpath_literal(leave_type)})]'

    @staticmethod
    def status_option(status: str) -> str:
        return f'//div[@role="option"]//span[text()={xpath_literal(status)}]'

    @staticmethod
    def leave_status_cell(row: int) -> str:
        return f'xpath={_TABLE_CARD}[{row}]//div[contains(@class, "oxd-table-cell")][6]'

    @staticmethod
    def approve_button(row: int) -> str:
        return (
            f'xpath={_TABLE_CARD}[{row}]'
            '//button[contains(@class, "oxd-icon-button")]//i[contains(@class, "bi-check")]'
        )

    @staticmethod
    def autocomplete_option(name: str) -> str:
        return f'//div[@role="option"]//span[contains(text(), {xpath_literal(name)})]'
