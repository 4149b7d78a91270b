"""datefmt — date arithmetic and locale-aware date/time formatting helpers."""

from __future__ import annotations

from datefmt.domain.locales import unicode_bcp47_to_cldr, unicode_cldr_to_bcp47
from datefmt.domain.periods import Period, subtract_date
from datefmt.services.current import (
    get_current_date_as_string,
    get_current_datetime_as_string,
    get_current_time_as_string,
)

__version__ = "0.1.0"

__all__ = [
    "Period",
    "__version__",
    "get_current_date_as_string",
    "get_current_datetime_as_string",
    "get_current_time_as_string",
    "subtract_date",
    "unicode_bcp47_to_cldr",
    "unicode_cldr_to_bcp47",
]
