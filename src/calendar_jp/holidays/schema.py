"""
Schema definitions for the Japanese holiday domain.

- DOMAIN constant used in log events
- Logic enum for computed-date rule identifiers
- WEEKDAYS in the order used for weekday matching
- Supported year span of the packaged rule table
"""

from enum import Enum


DOMAIN = "holidays.jp"

LOCALE = "japan"

# Years covered by the packaged rule table and the equinox tables
FIRST_SUPPORTED_YEAR = 1948
LAST_SUPPORTED_YEAR = 2099


class Logic(str, Enum):
    """Symbolic identifiers for computed-date rules.

    The bridge-holiday value keeps the historical misspelling used by the
    rule documents.
    """

    VERNAL_EQUINOX_DAY = "Vernal Equinox Day"
    AUTUMNAL_EQUINOX_DAY = "Autumnal Equinox Day"
    NATIONAL_HOLIDAY = "Natinal Holiday"
    HOLIDAY_IN_LIEU = "Holiday in lieu"
    HOLIDAY_IN_LIEU_2007 = "Holiday in lieu(2007)"

    @classmethod
    def values(cls) -> list[str]:
        return [e.value for e in cls]


# Logics evaluated by the substitute pass, against the completed primary map
SUBSTITUTE_LOGICS = frozenset({
    Logic.NATIONAL_HOLIDAY.value,
    Logic.HOLIDAY_IN_LIEU.value,
    Logic.HOLIDAY_IN_LIEU_2007.value,
})


# Index matches date.weekday() (Monday == 0)
WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

MONDAY = 0
SUNDAY = 6


def weekday_name(weekday: int) -> str:
    """Lowercase English name for ``date.weekday()``."""
    return WEEKDAYS[weekday]
