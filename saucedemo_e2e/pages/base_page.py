"""
Base page with the element helpers every page object is built from.

Each helper takes a Locator plus a human description that only shows up in
the logs. Driver errors are logged and re-raised unchanged; the visibility
and enabled checks are the only helpers that answer False instead, for any
error raised while checking.
"""
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from saucedemo_e2e.errors import ElementNotVisible


class BasePage:

    def __init__(self, page, logger, settings):
        """
        Args:
            page: Playwright page (borrowed; owned by the test harness)
            logger: Bound structlog logger for this test
            settings: Session Settings
        """
        self.page = page
        self.logger = logger
        self.settings = settings

    @property
    def current_url(self):
        return self.page.url

    def page_path_contains(self, fragment):
        return fragment in self.page.url

    def wait_for_page_load(self, url, timeout=None):
        timeout = self.settings.default_timeout_ms if timeout is None else timeout
        self.logger.info("Waiting for page load", url=url)
        try:
            self.page.wait_for_url(url, timeout=timeout)
        except Exception:
            self.logger.error("Error waiting for page", url=url, exc_info=True)
            raise
        self.logger.info("Page successfully loaded", url=url)

    def wait_for_visible(self, locator, description='element', timeout=None):
        self.logger.info("Waiting for element to appear", element=description)
        try:
            locator.wait_for(state='visible', timeout=timeout)
        except PlaywrightTimeoutError as exc:
            self.logger.error("Element did not become visible", element=description,
                              exc_info=True)
            raise ElementNotVisible(description, timeout) from exc
        except Exception:
            self.logger.error("Error waiting for element", element=description,
                              exc_info=True)
            raise
        self.logger.info("Element became visible", element=description)

    def click(self, locator, description):
        self.logger.info("Performing click", element=description)
        try:
            locator.click()
        except Exception:
            self.logger.error("Error during click", element=description, exc_info=True)
            raise
        self.logger.info("Click successfully performed", element=description)

    def fill(self, locator, text, description):
        self.logger.info("Filling field", element=description, text=text)
        try:
            locator.fill(text)
        except Exception:
            self.logger.error("Error filling field", element=description, exc_info=True)
            raise
        self.logger.info("Field successfully filled", element=description)

    def get_text(self, locator, description):
        """Trimmed text content of the element, empty string when it has none."""
        self.logger.info("Getting element text", element=description)
        try:
            text = (locator.text_content() or '').strip()
        except Exception:
            self.logger.error("Error getting element text", element=description,
                              exc_info=True)
            raise
        self.logger.info("Retrieved element text", element=description, text=text)
        return text

    def is_visible(self, locator, description):
        self.logger.info("Checking element visibility", element=description)
        try:
            visible = locator.is_visible()
        except Exception:
            self.logger.warning("Visibility check failed, treating as not visible",
                                element=description, exc_info=True)
            return False
        self.logger.info("Element visibility", element=description, visible=visible)
        return visible

    def is_enabled(self, locator, description):
        self.logger.info("Checking element is enabled", element=description)
        try:
            enabled = locator.is_enabled()
        except Exception:
            self.logger.warning("Enabled check failed, treating as disabled",
                                element=description, exc_info=True)
            return False
        self.logger.info("Element enabled", element=description, enabled=enabled)
        return enabled

    def count(self, locator, description):
        self.logger.info("Counting elements", element=description)
        try:
            found = locator.count()
        except Exception:
            self.logger.error("Error counting elements", element=description, exc_info=True)
            raise
        self.logger.info("Elements counted", element=description, count=found)
        return found

    def check_page_loaded(self, marker, description, path_fragment):
        """Marker element visible, then the URL contains path_fragment."""
        try:
            self.wait_for_visible(marker, description)
        except ElementNotVisible:
            return False
        loaded = self.page_path_contains(path_fragment)
        self.logger.info("Page load check", expected=path_fragment, loaded=loaded,
                         url=self.page.url)
        return loaded

    def pause(self, ms, reason):
        """Fixed delay; every one in the suite goes through here so it shows in the log."""
        if ms <= 0:
            return
        self.logger.info("Pausing", ms=ms, reason=reason)
        self.page.wait_for_timeout(ms)
