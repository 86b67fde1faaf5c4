"""PIM (employee records) locators."""

from hrm_e2e.selectors.xpath import xpath_literal


class PimSelectors:
    """Locators for adding, searching and editing employees."""

    # Navigation
    PIM_MENU = 'a[href="/web/index.php/pim/viewPimModule"]'
    ADD_EMPLOYEE_TAB = 'a[href="/web/index.php/pim/addEmployee"]'
    EMPLOYEE_LIST_TAB = 'a[href="/web/index.php/pim/viewEmployeeList"]'

    # Add Employee form
    FIRST_NAME_INPUT = 'input[name="firstName"]'
    MIDDLE_NAME_INPUT = 'input[name="middleName"]'
    LAST_NAME_INPUT = 'input[name="lastName"]'
    EMPLOYEE_ID_INPUT = '//label[text()="Employee Id"]/../..//input'
    CREATE_LOGIN_TOGGLE = '//span[contains(@class, "oxd-switch-input")]'
    USERNAME_INPUT = '//label[text()="Username"]/../..//input'
    PASSWORD_INPUT = '//label[text()="Password"]/../..//input'
    CONFIRM_PASSWORD_INPUT = '//label[text()="Confirm Password"]/../..//input'
    SAVE_BUTTON = 'button[type="submit"]'
    SUCCESS_TOAST = ".oxd-toast--success"

    # Employee list
    SEARCH_EMPLOYEE_NAME_INPUT = '//label[text()="Employee Name"]/../..//input'
    SEARCH_BUTTON = 'button[type="submit"]'
    RECORDS_FOUND_TEXT = ".orangehrm-horizontal-padding span.oxd-text--span"

    # Report-to tab
    REPORT_TO_TAB = '//a[text()="Report-to"]'
    ADD_SUPERVISOR_BUTTON = '//h6[text()="Assigned Supervisors"]/following::button[1]'
    SUPERVISOR_NAME_INPUT = '//label[text()="Name"]/../..//input'
    REPORTING_METHOD_DROPDOWN = (
        '//label[text()="Reporting Method"]/../..//div[contains(@class, "oxd-select-text")]'
    )
    SUPERVISOR_SAVE_BUTTON = 'button[type="submit"]'
    SUPERVISOR_SUCCESS_TOAST = ".oxd-toast--success"

    @staticmethod
    def employee_name_cell(name: str) -> str:
        return f'//div[contains(@class, "oxd-table-cell") and text()={xpath_literal(name)}]'

    @staticmethod
    def reporting_method_option(method: str) -> str:
        return f'//div[@role="option" and text()={xpath_literal(method)}]'

    @staticmethod
    def assigned_supervisor_cell(name: str) -> str:
        return (
            '//h6[text()="Assigned Supervisors"]/following::div[contains(@class, "oxd-table-body")][1]'
            f'//div[contains(@class, "oxd-table-cell") and contains(., {xpath_literal(name)})]'
        )

    @staticmethod
    def autocomplete_option(name: str) -> str:
        return f'//div[@role="option"]//span[contains(text(), {xpath_literal(name)})]'
