import pytest

from saucedemo_e2e.config import load_settings
from saucedemo_e2e.data import Users
from saucedemo_e2e.harness import BrowserHarness
from saucedemo_e2e.log import configure_logging, get_logger, shutdown_logging
from saucedemo_e2e.reporting import attach_to_report


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase report on the item and flush queued report attachments."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
    attach_to_report(item, report, get_logger('reporting', test=item.name))


@pytest.fixture(scope="session")
def settings():
    """Run configuration, read once per session (per worker under xdist)"""
    return load_settings()


@pytest.fixture(scope="session")
def logging_pipeline(settings):
    log_file = configure_logging(settings.log_dir, settings.log_level)
    yield log_file
    shutdown_logging()


@pytest.fixture
def run_logger(request, logging_pipeline):
    logger = get_logger('tests', test=request.node.name)
    logger.info("Starting test", nodeid=request.node.nodeid)
    return logger


@pytest.fixture
def harness(request, settings, run_logger):
    """
    Browser, context and page for one test, with the page objects bound to it.

    On teardown a failed test gets a full-page screenshot attached to the
    HTML report before everything is closed.
    """
    browser_harness = BrowserHarness(settings, run_logger).start()

    yield browser_harness

    browser_harness.finish(request.node)


@pytest.fixture
def login_page(harness):
    return harness.login_page


@pytest.fixture
def products_page(harness):
    return harness.products_page


@pytest.fixture
def cart_page(harness):
    return harness.cart_page


@pytest.fixture
def logged_in(harness, login_page, products_page):
    """Standard user logged in and looking at the catalog"""
    harness.ensure_ready()
    login_page.navigate()
    login_page.login_user(Users.STANDARD.username, Users.STANDARD.password)
    assert products_page.is_page_loaded(), "Standard user should land on the products page"
    return products_page
