"""
Utility functions package.

Exposes helpers for date, string, numeric and sequence formatting.
"""

from .exceptions import FormattingError, InvalidDateError, NotANumberError
from .formatters import (
    MISSING,
    decimal_formatting,
    format_render_string,
    locale_date_string,
    pad_zeros,
    resolve_locale,
)
from .sequences import chunk_array

__all__ = [
    'FormattingError', 'InvalidDateError', 'NotANumberError',
    'MISSING', 'pad_zeros', 'locale_date_string', 'format_render_string',
    'decimal_formatting', 'resolve_locale', 'chunk_array',
]
