"""Login page locators."""


class LoginSelectors:
    """Locators for the sign-in form and the post-login landmark."""

    LOGIN_PATH = "/web/index.php/auth/login"

    USERNAME_INPUT = 'input[name="username"]'
    PASSWORD_INPUT = 'input[name="password"]'
    LOGIN_BUTTON = 'button[type="submit"]'
    ERROR_ALERT = ".oxd-alert-content-text"

    # Rendered for every role once authenticated
    USER_DROPDOWN = ".oxd-userdropdown-name"
