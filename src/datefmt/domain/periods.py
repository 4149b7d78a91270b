"""Calendar period selectors and one-step backward date arithmetic.

Month and year steps follow ``dateutil.relativedelta`` rules: the day is
clamped to the last valid day of the target month, so 2024-03-31 minus one
month is 2024-02-29 and 2024-02-29 minus one year is 2023-02-28.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import TypeVar

from dateutil.relativedelta import relativedelta

D = TypeVar("D", bound=date)


class Period(StrEnum):
    """Calendar unit subtracted by :func:`subtract_date`."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @classmethod
    def parse(cls, value: str) -> Period | None:
        """Return the member whose value is exactly *value*, or None.

        Examples:
            >>> Period.parse("week")
            <Period.WEEK: 'week'>
            >>> Period.parse("Week") is None
            True
        """
        try:
            return cls(value)
        except ValueError:
            return None


_STEPS: dict[Period, relativedelta] = {
    Period.DAY: relativedelta(days=1),
    Period.WEEK: relativedelta(weeks=1),
    Period.MONTH: relativedelta(months=1),
    Period.YEAR: relativedelta(years=1),
}


def subtract_date(value: D, period: Period | str) -> D:
    """Return *value* moved back by one *period*.

    Works for ``date`` and ``datetime`` (naive or aware); time of day and
    tzinfo are kept as-is. An unrecognized *period* returns *value*
    unchanged.

    Examples:
        >>> subtract_date(date(2024, 3, 1), "day")
        datetime.date(2024, 2, 29)
        >>> subtract_date(date(2024, 3, 31), Period.MONTH)
        datetime.date(2024, 2, 29)
        >>> subtract_date(date(2024, 3, 31), "fortnight")
        datetime.date(2024, 3, 31)
    """
    selected = Period.parse(period)
    if selected is None:
        return value
    return value - _STEPS[selected]
