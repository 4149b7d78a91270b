"""Current date/time rendered as human-readable strings.

Each formatter reads the clock and the environment on every call:

1. When the matching override (``DATE_FORMAT``, ``TIME_FORMAT`` or
   ``DATETIME_FORMAT``) is set, "now" is rendered with that LDML pattern
   (``yyyy-MM-dd HH:mm`` style) and the *locales* argument is ignored.
2. Otherwise Babel renders "now" for the requested locale with a fixed
   field set: year, long month name and day for dates; hour and minute
   for times; all five for the combined form.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from babel import Locale, UnknownLocaleError, default_locale
from babel.dates import format_date, format_datetime, format_time, get_datetime_format

from datefmt.config.settings import load_format_settings

logger = logging.getLogger(__name__)

LocalesArg = str | Locale | Sequence[str] | None

# Explicit patterns are rendered the way date-fns does without a locale.
PATTERN_LOCALE = "en_US"
FALLBACK_LOCALE = "en_US"

# Tags meaning "no preference"; they select the process locale.
UNDETERMINED_TAGS = ("und", "root")

# "long" is the CLDR date format carrying a full-width month name.
DATE_LENGTH = "long"
TIME_FORMAT = "short"
DATETIME_GLUE = "long"


def _now() -> datetime:
    """Current local time, timezone-aware."""
    return datetime.now().astimezone()


def _parse_tag(tag: str) -> Locale | None:
    """Parse one CLDR or BCP47 tag; None when Babel has no data for it.

    Malformed tags raise ``ValueError``.
    """
    tag = tag.strip()
    if tag in UNDETERMINED_TAGS:
        return None
    try:
        return Locale.parse(tag, sep="-" if "-" in tag else "_")
    except UnknownLocaleError:
        logger.debug("Skipping unknown locale %r", tag)
        return None


def _process_locale() -> Locale:
    process_tag = default_locale("LC_TIME")
    if process_tag:
        try:
            return Locale.parse(process_tag)
        except (UnknownLocaleError, ValueError):
            logger.debug("Process locale %r unknown to Babel", process_tag)
    return Locale.parse(FALLBACK_LOCALE)


def resolve_locale(locales: LocalesArg = None) -> Locale:
    """Turn a caller-supplied locale selection into a Babel ``Locale``.

    Accepts a single tag (CLDR or BCP47 notation) or a sequence of tags;
    the first tag Babel knows wins. Unknown tags, ``und``/``root``, and
    ``None`` fall through to the process locale (``LC_TIME``/``LANG``),
    then ``en_US``. A malformed tag raises ``ValueError``.
    """
    if isinstance(locales, Locale):
        return locales
    tags = [locales] if isinstance(locales, str) else list(locales or ())
    for tag in tags:
        parsed = _parse_tag(tag)
        if parsed is not None:
            return parsed
    return _process_locale()


def _format_pattern(now: datetime, pattern: str) -> str:
    return format_datetime(now, pattern, locale=PATTERN_LOCALE)


def _format_date(now: datetime, locale: Locale) -> str:
    return format_date(now, DATE_LENGTH, locale=locale)


def _format_time(now: datetime, locale: Locale) -> str:
    return format_time(now, TIME_FORMAT, locale=locale)


def get_current_date_as_string(locales: LocalesArg = None) -> str:
    """Return today's date, e.g. ``October 19, 2026`` for ``en_US``."""
    pattern = load_format_settings().date_format
    now = _now()
    if pattern is not None:
        return _format_pattern(now, pattern)
    return _format_date(now, resolve_locale(locales))


def get_current_time_as_string(locales: LocalesArg = None) -> str:
    """Return the current time of day, e.g. ``3:45 PM`` for ``en_US``."""
    pattern = load_format_settings().time_format
    now = _now()
    if pattern is not None:
        return _format_pattern(now, pattern)
    return _format_time(now, resolve_locale(locales))


def get_current_datetime_as_string(locales: LocalesArg = None) -> str:
    """Return the current date and time.

    The locale's long date-time glue joins the two halves, which gives
    ``October 19, 2026 at 3:45 PM`` for ``en_US``.
    """
    pattern = load_format_settings().datetime_format
    now = _now()
    if pattern is not None:
        return _format_pattern(now, pattern)
    locale = resolve_locale(locales)
    glue = get_datetime_format(DATETIME_GLUE, locale=locale)
    return (
        glue.replace("'", "")
        .replace("{0}", _format_time(now, locale))
        .replace("{1}", _format_date(now, locale))
    )
