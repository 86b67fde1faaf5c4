"""Admin > User Management locators."""

from hrm_e2e.selectors.xpath import xpath_literal


class AdminSelectors:
    """Locators for the system-user list and the Add User form."""

    # Navigation
    ADMIN_MENU = 'a[href="/web/index.php/admin/viewAdminModule"]'
    USER_MANAGEMENT_MENU = '//span[text()="User Management "]'
    USERS_MENU_ITEM = '//a[text()="Users"]'

    # Add User form
    ADD_BUTTON = '//button[normalize-space()="Add"]'
    USER_ROLE_DROPDOWN = '//label[text()="User Role"]/../..//div[contains(@class, "oxd-select-text")]'
    EMPLOYEE_NAME_INPUT = '//label[text()="Employee Name"]/../..//input'
    STATUS_DROPDOWN = '//label[text()="Status"]/../..//div[contains(@class, "oxd-select-text")]'
    USERNAME_INPUT = '//label[text()="Username"]/../..//input'
    PASSWORD_INPUT = '//label[text()="Password"]/../..//input'
    CONFIRM_PASSWORD_INPUT = '//label[text()="Confirm Password"]/../..//input'
    SAVE_BUTTON = 'button[type="submit"]'
    SUCCESS_TOAST = ".oxd-toast--success"

    # User list
    SEARCH_USERNAME_INPUT = '//label[text()="Username"]/../..//input'
    SEARCH_BUTTON = 'button[type="submit"]'
    RECORDS_FOUND_TEXT = ".orangehrm-horizontal-padding span.oxd-text--span"

    @staticmethod
    def user_role_option(role: str) -> str:
        return f'//div[@role="option"]//span[text()={xpath_literal(role)}]'

    @staticmethod
    def status_option(status: str) -> str:
        return f'//div[@role="option"]//span[text()={xpath_literal(status)}]'

    @staticmethod
    def autocomplete_option(name: str) -> str:
        return f'//div[@role="option"]//span[contains(text(), {xpath_literal(name)})]'
