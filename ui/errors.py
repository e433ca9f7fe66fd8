class PagedMenuException(Exception):
    """A base exception class."""

    def __init__(self, msg):
        super().__init__(msg)


class InvalidArgument(PagedMenuException, ValueError):
    """Raised when a required argument is missing."""

    def __init__(self, param, msg=None):
        super().__init__(msg or f"{param} must not be None.")
        self.param = param


class OutOfRange(PagedMenuException, ValueError):
    """Raised when an argument is outside of its allowed range."""

    def __init__(self, param, value=None, msg=None):
        super().__init__(msg or f"{param} is out of range (got {value!r}).")
        self.param = param
        self.value = value


class ConfigurationError(PagedMenuException):
    """Raised when a page formatter cannot produce valid content with its current configuration."""
    pass
