"""DateService — ServiceResult wrappers around the date and locale helpers.

The CLI talks to this class only. Expected failures (bad ISO input,
malformed locale tags, broken patterns) become ``ServiceError`` codes instead of
exceptions.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING

from datefmt.config.settings import load_format_settings
from datefmt.domain.locales import unicode_bcp47_to_cldr, unicode_cldr_to_bcp47
from datefmt.domain.periods import Period, subtract_date
from datefmt.services import current
from datefmt.services.result import ServiceResult

if TYPE_CHECKING:
    from datefmt.config.settings import DateFmtSettings

logger = logging.getLogger(__name__)


_NOW_FORMATTERS = {
    "date": current.get_current_date_as_string,
    "time": current.get_current_time_as_string,
    "datetime": current.get_current_datetime_as_string,
}
NOW_KINDS = tuple(_NOW_FORMATTERS)


def parse_iso(value: str) -> date:
    """Parse an ISO-8601 date or date-time string.

    Plain ``YYYY-MM-DD`` yields a ``date``; anything with a time part
    yields a ``datetime``.
    """
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        return datetime.fromisoformat(text)


class DateService:
    """Date arithmetic, locale conversion, and "now" formatting for the CLI."""

    def __init__(self, settings: DateFmtSettings) -> None:
        self._settings = settings

    def subtract(self, value: str, period: str) -> ServiceResult:
        """Move the ISO date *value* back by one *period*."""
        op = "subtract"
        try:
            parsed = parse_iso(value)
        except ValueError as exc:
            return ServiceResult.failure(
                op, "INVALID_DATE", f"Not an ISO-8601 date: {value!r}", reason=str(exc)
            )

        warnings: list[str] = []
        applied = Period.parse(period) is not None
        if not applied:
            logger.debug("Unrecognized period %r; returning input unchanged", period)
            choices = ", ".join(p.value for p in Period)
            warnings.append(f"Unknown period '{period}' (expected one of: {choices})")

        try:
            shifted = subtract_date(parsed, period)
        except (OverflowError, ValueError) as exc:
            return ServiceResult.failure(
                op,
                "DATE_OUT_OF_RANGE",
                f"{value} minus one {period} is outside the supported calendar range",
                reason=str(exc),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": parsed.isoformat(),
                "period": period,
                "result": shifted.isoformat(),
                "applied": applied,
            },
            warnings=warnings,
        )

    def to_bcp47(self, locale: str) -> ServiceResult:
        """Convert a CLDR locale tag to BCP47."""
        return ServiceResult(
            ok=True,
            op="to_bcp47",
            data={"input": locale, "result": unicode_cldr_to_bcp47(locale)},
        )

    def to_cldr(self, locale: str) -> ServiceResult:
        """Convert a BCP47 locale tag to CLDR."""
        return ServiceResult(
            ok=True,
            op="to_cldr",
            data={"input": locale, "result": unicode_bcp47_to_cldr(locale)},
        )

    def now(self, kind: str = "datetime", locale: str | None = None) -> ServiceResult:
        """Render the current date, time, or both.

        Falls back to the configured ``[locale] default`` when *locale*
        is None. An explicit pattern from the environment wins over both.
        """
        op = "now"
        formatter = _NOW_FORMATTERS.get(kind)
        if formatter is None:
            return ServiceResult.failure(
                op, "INVALID_KIND", f"Unknown kind '{kind}'", choices=sorted(_NOW_FORMATTERS)
            )

        pattern = getattr(load_format_settings(), f"{kind}_format")
        if pattern is not None:
            try:
                value = formatter()
            except (KeyError, ValueError) as exc:
                return ServiceResult.failure(
                    op, "INVALID_PATTERN", f"Invalid {kind} pattern: {pattern!r}", reason=str(exc)
                )
            return ServiceResult(
                ok=True,
                op=op,
                data={"kind": kind, "value": value, "source": "pattern", "locale": None},
            )

        requested = locale if locale is not None else self._settings.locale.default
        try:
            resolved = current.resolve_locale(requested)
        except ValueError as exc:
            return ServiceResult.failure(
                op, "INVALID_LOCALE", f"Invalid locale tag: {requested}", reason=str(exc)
            )
        logger.debug("Formatting %s for locale %s", kind, resolved)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "kind": kind,
                "value": formatter(resolved),
                "source": "locale",
                "locale": str(resolved),
            },
        )
