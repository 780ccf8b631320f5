class FormattingError(Exception):
    """Base class for errors raised by the formatting helpers."""

    pass


class InvalidDateError(FormattingError, ValueError):
    """Raised when a value cannot be parsed into a valid date/time."""

    pass


class NotANumberError(FormattingError, ValueError):
    """Raised when a decimal value is neither null/absent nor a finite number."""

    pass
