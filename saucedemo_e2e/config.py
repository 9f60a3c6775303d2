# config.py
# Test run configuration, read once per session from the environment.
# A .env file in the working directory is loaded first; real environment
# variables always win over it.

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from saucedemo_e2e.errors import ConfigurationError, UnsupportedBrowserKind

DEFAULT_BASE_URL = 'https://www.saucedemo.com/'

_TRUE_VALUES = {'true', '1', 'yes', 'on'}
_FALSE_VALUES = {'false', '0', 'no', 'off'}


class BrowserKind(Enum):
    CHROMIUM = 'chromium'
    FIREFOX = 'firefox'
    WEBKIT = 'webkit'

    @classmethod
    def parse(cls, text):
        """Resolve a browser name (any case, surrounding blanks ignored)."""
        if isinstance(text, cls):
            return text
        normalized = (text or '').strip().lower()
        for kind in cls:
            if kind.value == normalized:
                return kind
        raise UnsupportedBrowserKind(text)


def parse_bool(name, raw, default):
    if raw is None or raw.strip() == '':
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be true or false, got {raw!r}")


def parse_int(name, raw, default):
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    browser: BrowserKind = BrowserKind.CHROMIUM
    headless: bool = False
    viewport_width: int = 1920
    viewport_height: int = 1080
    default_timeout_ms: int = 30000
    slow_mo_ms: int = 100
    record_video: bool = True
    results_dir: Path = Path('test-results')
    log_dir: Path = Path('logs')
    log_level: str = 'INFO'
    # Fixed pauses (ms) applied after sorting and between cart removals
    sort_settle_ms: int = 1000
    cart_removal_delay_ms: int = 500
    # Read by the launchers, never by the suite itself
    max_retries: int = 2
    enable_parallel: bool = True

    @property
    def screenshots_dir(self):
        return self.results_dir / 'screenshots'

    @property
    def videos_dir(self):
        return self.results_dir / 'videos'

    def url(self, path=''):
        """Absolute URL for a path on the site under test."""
        return self.base_url.rstrip('/') + '/' + path.lstrip('/')

    @classmethod
    def from_env(cls, environ=None):
        """Build settings from a mapping of variables (defaults to os.environ)."""
        env = os.environ if environ is None else environ
        get = env.get
        return cls(
            base_url=get('BASE_URL') or DEFAULT_BASE_URL,
            browser=BrowserKind.parse(get('BROWSER') or 'chromium'),
            headless=parse_bool('HEADLESS', get('HEADLESS'), False),
            viewport_width=parse_int('VIEWPORT_WIDTH', get('VIEWPORT_WIDTH'), 1920),
            viewport_height=parse_int('VIEWPORT_HEIGHT', get('VIEWPORT_HEIGHT'), 1080),
            default_timeout_ms=parse_int('DEFAULT_TIMEOUT', get('DEFAULT_TIMEOUT'), 30000),
            slow_mo_ms=parse_int('SLOW_MO', get('SLOW_MO'), 100),
            record_video=parse_bool('RECORD_VIDEO', get('RECORD_VIDEO'), True),
            results_dir=Path(get('TEST_RESULTS_DIR') or 'test-results'),
            log_dir=Path(get('LOG_DIR') or 'logs'),
            log_level=(get('LOG_LEVEL') or 'INFO').upper(),
            sort_settle_ms=parse_int('SORT_SETTLE_MS', get('SORT_SETTLE_MS'), 1000),
            cart_removal_delay_ms=parse_int(
                'CART_REMOVAL_DELAY_MS', get('CART_REMOVAL_DELAY_MS'), 500),
            max_retries=parse_int('MAX_RETRIES', get('MAX_RETRIES'), 2),
            enable_parallel=parse_bool('ENABLE_PARALLEL', get('ENABLE_PARALLEL'), True),
        )


def load_settings(dotenv_path=None):
    """Load .env (without overriding the real environment) and read Settings."""
    load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)
    return Settings.from_env()
