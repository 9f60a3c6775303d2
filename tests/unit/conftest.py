from unittest.mock import MagicMock

import pytest

from saucedemo_e2e.config import Settings


class FakePage:
    """Stands in for a Playwright Page; one MagicMock locator per selector."""

    def __init__(self, url=''):
        self.url = url
        self.locators = {}
        self.goto = MagicMock()
        self.wait_for_url = MagicMock()
        self.wait_for_timeout = MagicMock()
        self.screenshot = MagicMock(return_value=b'\x89PNG')

    def locator(self, selector):
        if selector not in self.locators:
            self.locators[selector] = MagicMock(name=selector)
        return self.locators[selector]


@pytest.fixture
def fake_page():
    return FakePage()


@pytest.fixture
def logger():
    return MagicMock(name='logger')


@pytest.fixture
def unit_settings(tmp_path):
    return Settings(results_dir=tmp_path / 'test-results', log_dir=tmp_path / 'logs')
