"""
Browser lifecycle for one test: browser -> context -> page.

Every step logs what it does; failures are logged and re-raised as-is,
nothing here retries.
"""

from saucedemo_e2e.config import BrowserKind

# Chromium switches; the other engines reject unknown arguments
CHROMIUM_ARGS = [
    '--start-maximized',
    '--disable-blink-features=AutomationControlled',
    '--disable-extensions',
]


class BrowserFactory:
    """Creates and closes Playwright browsers, contexts and pages."""

    def __init__(self, settings, logger):
        self.settings = settings
        self.logger = logger

    def launch_options(self, kind, headless):
        options = {
            'headless': headless,
            'slow_mo': self.settings.slow_mo_ms,
        }
        if kind is BrowserKind.CHROMIUM:
            options['args'] = list(CHROMIUM_ARGS)
        return options

    def create_browser(self, playwright, kind=None, headless=None):
        """
        Launch a browser of the given kind.

        Args:
            playwright: Started Playwright handle (sync API)
            kind: BrowserKind or its name; defaults to the configured browser
            headless: Defaults to the configured HEADLESS flag

        Returns:
            playwright.sync_api.Browser
        """
        # Parsing happens before anything is launched
        kind = BrowserKind.parse(kind if kind is not None else self.settings.browser)
        headless = self.settings.headless if headless is None else headless
        self.logger.info("Creating browser", browser=kind.value, headless=headless)

        browser_type = getattr(playwright, kind.value)
        try:
            browser = browser_type.launch(**self.launch_options(kind, headless))
        except Exception:
            self.logger.error("Error creating browser", browser=kind.value, exc_info=True)
            raise
        self.logger.info("Browser successfully created", browser=kind.value)
        return browser

    def context_options(self, width, height):
        options = {
            'viewport': {'width': width, 'height': height},
            'ignore_https_errors': True,
            'accept_downloads': True,
        }
        if self.settings.record_video:
            options['record_video_dir'] = str(self.settings.videos_dir)
            options['record_video_size'] = {'width': width, 'height': height}
        return options

    def create_context(self, browser, viewport_width=None, viewport_height=None):
        width = viewport_width or self.settings.viewport_width
        height = viewport_height or self.settings.viewport_height
        self.logger.info("Creating browser context", viewport=f"{width}x{height}")
        try:
            context = browser.new_context(**self.context_options(width, height))
        except Exception:
            self.logger.error("Error creating browser context", exc_info=True)
            raise
        self.logger.info("Browser context successfully created")
        return context

    def create_page(self, context):
        self.logger.info("Creating new browser page")
        try:
            page = context.new_page()
            page.set_default_timeout(self.settings.default_timeout_ms)
            page.set_default_navigation_timeout(self.settings.default_timeout_ms)
        except Exception:
            self.logger.error("Error creating browser page", exc_info=True)
            raise
        self.logger.info("Browser page successfully created",
                         timeout_ms=self.settings.default_timeout_ms)
        return page

    def close_context(self, context):
        if context is None:
            return
        self.logger.info("Closing browser context")
        try:
            context.close()
        except Exception:
            self.logger.error("Error closing browser context", exc_info=True)
            raise
        self.logger.info("Browser context successfully closed")

    def close_browser(self, browser):
        if browser is None:
            return
        self.logger.info("Closing browser")
        try:
            browser.close()
        except Exception:
            self.logger.error("Error closing browser", exc_info=True)
            raise
        self.logger.info("Browser successfully closed")
