"""
Utility functions for date/time, string and numeric formatting.

- pad_zeros: sign-aware zero padding of integers.
- locale_date_string: ISO-8601 date/time string with explicit timezone offset.
- format_render_string: join scalar values with a delimiter, skipping nulls.
- decimal_formatting: round a decimal value and render it in the user's locale.
"""

import logging
import math
from typing import Any, Callable, Iterable, Optional, Union
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal
from config.settings import Settings
from .exceptions import InvalidDateError, NotANumberError

logger = logging.getLogger(__name__)

# Marks an argument that was not passed at all, as opposed to an explicit None
MISSING: Any = object()

DateLike = Union[datetime, date, str]
NumberLike = Union[float, int, str, Decimal]


def pad_zeros(num: int, length: int) -> str:
    """
    Left-pad an integer with zeros to ``length`` digits.

    The minus sign of a negative number is placed before the padded
    magnitude and does not count toward ``length``. Longer numbers are
    never truncated.

    Example:
      pad_zeros(5, 3)   -> "005"
      pad_zeros(-5, 2)  -> "-05"
      pad_zeros(123, 2) -> "123"
    """
    if num < 0:
        return "-" + str(abs(num)).rjust(length, "0")
    return str(num).rjust(length, "0")


def _attach_timezone(dt: datetime, tz) -> datetime:
    if dt.tzinfo is None:
        # pytz-style timezone (has .localize) vs zoneinfo (no .localize)
        if hasattr(tz, "localize"):
            return tz.localize(dt)
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def _parse_date(value: DateLike, tz) -> datetime:
    """Turn a date-like value into an aware datetime in ``tz``."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time.min)
    elif isinstance(value, str):
        # Undo URL escaping of the offset sign and normalize 'Z' for fromisoformat
        s = value.strip().replace("%2b", "+").replace("%2B", "+")
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(s)
        except ValueError as e:
            logger.debug(f"Failed to parse date '{value}': {e}")
            raise InvalidDateError(f"Invalid date: {value!r}") from e
    else:
        logger.debug(f"Unsupported date type: {type(value).__name__}")
        raise InvalidDateError(f"Invalid date: {value!r}")

    try:
        return _attach_timezone(dt, tz)
    except (OverflowError, ValueError) as e:
        logger.debug(f"Failed to convert date '{value}' to {tz}: {e}")
        raise InvalidDateError(f"Invalid date: {value!r}") from e


def _format_offset(dt: datetime, is_url_param: bool) -> str:
    offset_minutes = int(dt.utcoffset().total_seconds() / 60)
    if offset_minutes == 0:
        return "Z"

    if offset_minutes > 0:
        sign = "%2b" if is_url_param else "+"
    else:
        sign = "-"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return f"{sign}{pad_zeros(hours, 2)}:{pad_zeros(minutes, 2)}"


def locale_date_string(
    date_value: DateLike,
    *,
    is_url_param: bool = False,
    min_time: bool = False,
    max_time: bool = False,
    tz=None
) -> str:
    """
    Render a date-like value as ``YYYY-MM-DDTHH:MM:SS<offset>`` in local time.

    - Accepts datetime, date (local midnight) or an ISO-8601 string; a
      trailing 'Z' means UTC and an escaped '%2b' is read as '+'.
    - Naive values are interpreted in ``tz``, aware ones are converted to it.
      ``tz`` defaults to Settings.SERVER_TZ.
    - ``min_time`` forces 00:00:00, ``max_time`` forces 23:59:59
      (``min_time`` wins when both are set).
    - The offset is 'Z' for UTC, otherwise ±HH:MM; with ``is_url_param``
      the '+' sign is written as '%2b'.

    Raises:
        InvalidDateError: the value cannot be parsed into a date/time
    """
    tz = tz or Settings.SERVER_TZ
    dt = _parse_date(date_value, tz)

    year = dt.year
    month = pad_zeros(dt.month, 2)
    day = pad_zeros(dt.day, 2)

    if min_time:
        hours = mins = secs = pad_zeros(0, 2)
    elif max_time:
        hours, mins, secs = "23", "59", "59"
    else:
        hours = pad_zeros(dt.hour, 2)
        mins = pad_zeros(dt.minute, 2)
        secs = pad_zeros(dt.second, 2)

    timezone = _format_offset(dt, is_url_param)

    return f"{year}-{month}-{day}T{hours}:{mins}:{secs}{timezone}"


def format_render_string(delimiter: Optional[str] = None) -> Callable[..., str]:
    """
    Build a renderer joining scalar values with ``delimiter`` (default ", ").

    The renderer skips None values entirely, so no empty placeholders or
    dangling delimiters appear in the result.

    Example:
      format_render_string()("a", None, "b") -> "a, b"
      format_render_string(" / ")(1, 2)      -> "1 / 2"
    """
    if delimiter is None:
        delimiter = Settings.DEFAULT_DELIMITER

    def render(*values: Any) -> str:
        return delimiter.join(str(v) for v in values if v is not None and v is not MISSING)

    return render


def resolve_locale(locales: Optional[Iterable[str]] = None) -> Locale:
    """
    Pick the rendering locale: first preferred locale, else Settings.DEFAULT_LOCALE.

    Tags may be written 'de-DE', 'de_DE' or POSIX style 'de_DE.UTF-8'.
    """
    candidates = list(Settings.PREFERRED_LOCALES if locales is None else locales)
    tag = candidates[0] if candidates else Settings.DEFAULT_LOCALE
    try:
        return Locale.parse(_normalize_locale_tag(tag))
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(f"Unusable locale '{tag}' ({e}), falling back to '{Settings.DEFAULT_LOCALE}'")
        return Locale.parse(_normalize_locale_tag(Settings.DEFAULT_LOCALE))


def _normalize_locale_tag(tag: str) -> str:
    # Drop encoding/modifier suffixes: de_DE.UTF-8, sr_RS@latin
    return tag.split(".")[0].split("@")[0].replace("-", "_")


def _round_decimal(d: Decimal, decimals: int) -> Decimal:
    """
    Round half-up to ``decimals`` places and drop insignificant trailing zeros.

    Negative zero is normalized to plain zero for prettier display.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, d.adjusted() + decimals + 2)
        rounded = d.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
        if rounded == 0:
            return Decimal(0)
        if rounded == rounded.to_integral():
            return rounded.quantize(Decimal(1))
        return rounded.normalize()


def decimal_formatting(
    value: Optional[NumberLike] = MISSING,
    *,
    use_dash_for_nulls: bool = False,
    number_of_decimals: Optional[int] = None,
    locales: Optional[Iterable[str]] = None
) -> Optional[str]:
    """
    Round a decimal value and render it with locale-appropriate separators.

    - No value passed -> None (nothing to render).
    - None -> "0", or "-" when ``use_dash_for_nulls`` is set.
    - Otherwise the value is parsed via str (int, float, numeric str or
      Decimal), rounded half-up to ``number_of_decimals`` places (falsy,
      including 0, falls back to Settings.DEFAULT_DECIMALS), stripped of
      trailing zeros and formatted in the locale chosen by resolve_locale().

    Example:
      decimal_formatting(1234.56789, locales=["en-US"]) -> "1,234.568"
      decimal_formatting("1234.5", locales=["de-DE"])   -> "1.234,5"

    Raises:
        NotANumberError: the value is not a finite number
    """
    if value is MISSING:
        return None
    if value is None:
        return "-" if use_dash_for_nulls else "0"

    if isinstance(value, bool):
        logger.debug(f"Rejected boolean decimal value: {value!r}")
        raise NotANumberError(f"Not a number: {value!r}")
    try:
        d = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        logger.debug(f"Failed to parse decimal '{value}': {e}")
        raise NotANumberError(f"Not a number: {value!r}") from e
    # Beyond the float range the value is infinite for any host number parser
    if not d.is_finite() or not math.isfinite(float(d)):
        logger.debug(f"Rejected non-finite decimal value: {value!r}")
        raise NotANumberError(f"Not a number: {value!r}")

    decimals = number_of_decimals or Settings.DEFAULT_DECIMALS
    try:
        rounded = _round_decimal(d, int(decimals))
    except InvalidOperation as e:
        logger.debug(f"Failed to round decimal '{value}' to {decimals} places: {e}")
        raise NotANumberError(f"Not a number: {value!r}") from e

    return format_decimal(rounded, locale=resolve_locale(locales), decimal_quantization=False)
