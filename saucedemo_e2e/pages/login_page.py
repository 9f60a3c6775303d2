from saucedemo_e2e.errors import ElementNotVisible
from saucedemo_e2e.pages.base_page import BasePage


class LoginPage(BasePage):
    """Login screen: credentials form and the error banner."""

    def __init__(self, page, logger, settings):
        super().__init__(page, logger, settings)
        self.logger.info("Initializing login page")

    @property
    def username_field(self):
        return self.page.locator("[data-test='username']")

    @property
    def password_field(self):
        return self.page.locator("[data-test='password']")

    @property
    def login_button(self):
        return self.page.locator("[data-test='login-button']")

    @property
    def error_message(self):
        return self.page.locator("[data-test='error']")

    @property
    def error_button(self):
        return self.page.locator(".error-button")

    def navigate(self):
        url = self.settings.base_url
        self.logger.info("Navigating to login page", url=url)
        try:
            self.page.goto(url)
            self.wait_for_page_load(url)
            self.wait_for_visible(self.login_button, "login button")
        except Exception:
            self.logger.error("Error navigating to login page", exc_info=True)
            raise
        self.logger.info("Successfully navigated to login page")

    def is_page_loaded(self):
        """Login button visible (waited for), then the URL is the base URL."""
        self.logger.info("Checking login page loading")
        try:
            self.wait_for_visible(self.login_button, "login button")
        except ElementNotVisible:
            return False
        loaded = self.current_url.rstrip('/') == self.settings.base_url.rstrip('/')
        self.logger.info("Page load check", expected=self.settings.base_url, loaded=loaded,
                         url=self.current_url)
        return loaded

    def login_user(self, username, password):
        """Fill both fields and submit; empty values are submitted as they are."""
        self.logger.info("Starting authentication", username=username)
        try:
            self.fill(self.username_field, username, "username field")
            self.fill(self.password_field, password, "password field")
            self.click(self.login_button, "login to system button")
        except Exception:
            self.logger.error("Error during authentication", username=username, exc_info=True)
            raise
        self.logger.info("Authentication submitted", username=username)

    def is_error_message_displayed(self):
        return self.is_visible(self.error_message, "error message")

    def get_error_message(self):
        return self.get_text(self.error_message, "authentication error message")

    def close_error_message(self):
        self.logger.info("Closing error message")
        if self.is_visible(self.error_button, "error close button"):
            self.click(self.error_button, "close error message button")

    def clear_login_fields(self):
        self.logger.info("Clearing login fields")
        try:
            self.fill(self.username_field, "", "clear username field")
            self.fill(self.password_field, "", "clear password field")
        except Exception:
            self.logger.error("Error clearing login fields", exc_info=True)
            raise
        self.logger.info("Login fields cleared")

    def is_login_button_enabled(self):
        return self.is_enabled(self.login_button, "login button")
