from pathlib import Path

import pytest

from saucedemo_e2e.config import BrowserKind, Settings, load_settings
from saucedemo_e2e.errors import ConfigurationError, UnsupportedBrowserKind


def test_defaults_from_empty_environment():
    settings = Settings.from_env({})

    assert settings.base_url == 'https://www.saucedemo.com/'
    assert settings.browser is BrowserKind.CHROMIUM
    assert settings.headless is False
    assert (settings.viewport_width, settings.viewport_height) == (1920, 1080)
    assert settings.default_timeout_ms == 30000
    assert settings.slow_mo_ms == 100
    assert settings.sort_settle_ms == 1000
    assert settings.cart_removal_delay_ms == 500
    assert settings.screenshots_dir == Path('test-results') / 'screenshots'
    assert settings.videos_dir == Path('test-results') / 'videos'


def test_environment_overrides():
    settings = Settings.from_env({
        'BROWSER': 'Firefox',
        'HEADLESS': 'TRUE',
        'VIEWPORT_WIDTH': '1280',
        'VIEWPORT_HEIGHT': '720',
        'DEFAULT_TIMEOUT': '5000',
        'RECORD_VIDEO': 'no',
        'TEST_RESULTS_DIR': 'out',
        'LOG_LEVEL': 'debug',
        'MAX_RETRIES': '0',
    })

    assert settings.browser is BrowserKind.FIREFOX
    assert settings.headless is True
    assert (settings.viewport_width, settings.viewport_height) == (1280, 720)
    assert settings.default_timeout_ms == 5000
    assert settings.record_video is False
    assert settings.screenshots_dir == Path('out') / 'screenshots'
    assert settings.log_level == 'DEBUG'
    assert settings.max_retries == 0


@pytest.mark.parametrize("text,kind", [
    ('chromium', BrowserKind.CHROMIUM),
    (' WebKit ', BrowserKind.WEBKIT),
    ('firefox', BrowserKind.FIREFOX),
    (BrowserKind.WEBKIT, BrowserKind.WEBKIT),
])
def test_browser_kind_parse(text, kind):
    assert BrowserKind.parse(text) is kind


@pytest.mark.parametrize("text", ['opera', 'chrome', '', None])
def test_unknown_browser_kind_rejected(text):
    with pytest.raises(UnsupportedBrowserKind) as excinfo:
        BrowserKind.parse(text)
    assert excinfo.value.kind == text


def test_unknown_browser_rejected_at_configuration_time():
    with pytest.raises(UnsupportedBrowserKind):
        Settings.from_env({'BROWSER': 'safari'})


@pytest.mark.parametrize("env", [
    {'HEADLESS': 'maybe'},
    {'VIEWPORT_WIDTH': 'wide'},
    {'SORT_SETTLE_MS': '1.5'},
])
def test_malformed_values_raise_configuration_error(env):
    with pytest.raises(ConfigurationError):
        Settings.from_env(env)


def test_configuration_error_is_a_value_error():
    assert issubclass(UnsupportedBrowserKind, ValueError)


def test_url_joins_paths():
    settings = Settings(base_url='https://shop.example/')
    assert settings.url('inventory.html') == 'https://shop.example/inventory.html'
    assert settings.url('/cart.html') == 'https://shop.example/cart.html'


def test_dotenv_never_overrides_real_environment(tmp_path, monkeypatch):
    env_file = tmp_path / '.env'
    env_file.write_text('VIEWPORT_WIDTH=800\nSLOW_MO=250\n')
    monkeypatch.setenv('VIEWPORT_WIDTH', '1280')
    # setenv before delenv so the variable .env introduces is removed afterwards
    monkeypatch.setenv('SLOW_MO', '0')
    monkeypatch.delenv('SLOW_MO')
    monkeypatch.delenv('BROWSER', raising=False)

    settings = load_settings(env_file)

    assert settings.viewport_width == 1280
    assert settings.slow_mo_ms == 250
