"""Custom exceptions for simple_ui.

- SimpleUIError: Base exception for all simple_ui errors
- MenuInvariantError: A dispatch index escaped input validation
- ConfigurationError: The config file could not be read
"""


class SimpleUIError(Exception):
    """Base exception for all simple_ui errors."""

    pass


class MenuInvariantError(SimpleUIError):
    """Raised when a menu is asked to dispatch an unregistered index.

    Input readers reject out-of-range selections before dispatch, so this
    signals a programming error rather than bad user input.
    """

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Option {index} is outside the registered range [0, {size})")


class ConfigurationError(SimpleUIError):
    """Raised when the config file exists but cannot be parsed."""

    pass
