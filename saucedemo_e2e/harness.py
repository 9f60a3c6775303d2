"""
Per-test browser harness.

Owns the Playwright handle, browser, context and page of exactly one test,
plus the page objects bound to that page. Built in setup, torn down in
reverse order; a failed setup cleans up whatever was already created before
re-raising, so a test never starts half-initialized.
"""
from datetime import datetime
from pathlib import Path

from playwright.sync_api import sync_playwright

from saucedemo_e2e.browser import BrowserFactory
from saucedemo_e2e.pages import CartPage, LoginPage, ProductsPage
from saucedemo_e2e.reporting import add_attachment
from saucedemo_e2e.strings import sanitize_file_name


def has_failed(node):
    """True when the setup or call report stored on the item failed."""
    for phase in ('setup', 'call'):
        report = getattr(node, f"rep_{phase}", None)
        if report is not None and report.failed:
            return True
    return False


class BrowserHarness:

    def __init__(self, settings, logger, playwright_factory=sync_playwright):
        self.settings = settings
        self.logger = logger
        self.browser_factory = BrowserFactory(settings, logger)
        self._playwright_factory = playwright_factory

        self.playwright = None
        self.browser = None
        self.context = None
        self.page = None

        self.login_page = None
        self.products_page = None
        self.cart_page = None

    def start(self):
        self.logger.info("=== TEST INITIALIZATION START ===")
        try:
            self.playwright = self._playwright_factory().start()
            self.logger.info("Playwright successfully initialized")

            self.browser = self.browser_factory.create_browser(self.playwright)
            self.context = self.browser_factory.create_context(self.browser)
            self.page = self.browser_factory.create_page(self.context)

            self.init_page_objects()
        except Exception:
            self.logger.error("Critical error during test initialization", exc_info=True)
            self.cleanup()
            raise
        self.logger.info("=== TEST INITIALIZATION COMPLETED ===")
        return self

    def init_page_objects(self):
        if self.page is None:
            raise RuntimeError("Page was not created")
        self.login_page = LoginPage(self.page, self.logger, self.settings)
        self.products_page = ProductsPage(self.page, self.logger, self.settings)
        self.cart_page = CartPage(self.page, self.logger, self.settings)
        self.logger.info("All page objects initialized")

    def ensure_ready(self):
        if self.page is None:
            raise RuntimeError("Page is not initialized")
        if None in (self.login_page, self.products_page, self.cart_page):
            raise RuntimeError("Page objects are not initialized")

    def screenshot_path(self, test_name, now=None):
        timestamp = (now or datetime.now()).strftime('%Y-%m-%d_%H-%M-%S')
        file_name = f"{sanitize_file_name(test_name)}_{timestamp}.png"
        return Path(self.settings.screenshots_dir) / file_name

    def capture_failure_screenshot(self, test_name):
        """
        Save a full-page screenshot for a failed test.

        Returns:
            (path, png bytes), or None when there is no page or capturing
            failed. Never raises: a broken screenshot must not hide the
            test failure.
        """
        if self.page is None:
            return None
        path = self.screenshot_path(test_name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            content = self.page.screenshot(path=str(path), full_page=True)
        except Exception:
            self.logger.warning("Error creating screenshot", test=test_name, exc_info=True)
            return None
        self.logger.info("Screenshot saved", path=str(path))
        return path, content

    def finish(self, node):
        """
        Teardown for one test: log the outcome, screenshot and attach on
        failure, then clean up. A failing screenshot or attachment is logged
        and cleanup still runs.
        """
        failed = has_failed(node)
        self.logger.info(f"=== TEST COMPLETION: {node.name} ===")
        self.logger.info("Test result", outcome="failed" if failed else "passed")

        if failed:
            self.logger.error("Test completed with error", nodeid=node.nodeid)
            captured = self.capture_failure_screenshot(node.name)
            if captured is not None:
                path, content = captured
                try:
                    add_attachment(node, f"Screenshot_{node.name}", "image/png", content)
                except Exception:
                    self.logger.warning("Failed to add screenshot to report", path=str(path),
                                        exc_info=True)

        self.cleanup()
        self.logger.info("=== RESOURCE CLEANUP COMPLETED ===")

    def cleanup(self):
        """Close context, browser and Playwright, in that order. Never raises."""
        try:
            self.browser_factory.close_context(self.context)
        except Exception:
            self.logger.error("Error during resource cleanup", resource='context')
        self.context = None

        try:
            self.browser_factory.close_browser(self.browser)
        except Exception:
            self.logger.error("Error during resource cleanup", resource='browser')
        self.browser = None

        if self.playwright is not None:
            try:
                self.playwright.stop()
            except Exception:
                self.logger.error("Error during resource cleanup", resource='playwright',
                                  exc_info=True)
            self.playwright = None

        self.page = None
        self.login_page = self.products_page = self.cart_page = None
