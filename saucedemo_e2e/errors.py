"""Exceptions raised by the framework itself (driver errors pass through untouched)."""


class SauceDemoError(Exception):
    pass


class ConfigurationError(SauceDemoError, ValueError):
    pass


class UnsupportedBrowserKind(ConfigurationError):
    def __init__(self, kind):
        self.kind = kind
        super().__init__(
            f"Unsupported browser type: {kind!r} (expected chromium, firefox or webkit)"
        )


class ElementNotVisible(SauceDemoError):
    def __init__(self, description, timeout_ms=None):
        self.description = description
        self.timeout_ms = timeout_ms
        message = f"Element did not become visible: {description}"
        if timeout_ms is not None:
            message += f" (waited {timeout_ms}ms)"
        super().__init__(message)


class CartIndexOutOfRange(SauceDemoError, IndexError):
    def __init__(self, index, count):
        self.index = index
        self.count = count
        super().__init__(f"Index {index} exceeds number of items in cart {count}")
