"""
Sauce Demo end-to-end test framework.

Page objects, browser lifecycle and logging helpers shared by the test
suites under tests/. Import from here as: from saucedemo_e2e import ...
"""

from saucedemo_e2e.config import BrowserKind, Settings, load_settings
from saucedemo_e2e.errors import (
    CartIndexOutOfRange,
    ConfigurationError,
    ElementNotVisible,
    SauceDemoError,
    UnsupportedBrowserKind,
)

__version__ = "0.1.0"

__all__ = [
    "BrowserKind",
    "CartIndexOutOfRange",
    "ConfigurationError",
    "ElementNotVisible",
    "SauceDemoError",
    "Settings",
    "UnsupportedBrowserKind",
    "load_settings",
]
