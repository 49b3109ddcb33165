"""
Japanese Holiday Domain — rule-table driven public holiday calendar.

This domain manages:
- The ordered holiday rule table and its validation
- Equinox day lookup tables
- Per-year expansion of rules into a date -> title map
- Substitute (in-lieu) and bridge holidays

Source type: Static JSON rule document (packaged or user-supplied)
"""

from calendar_jp.holidays.calendar import CalendarJp, Holiday
from calendar_jp.holidays.equinox import (
    EQUINOX_UNKNOWN,
    autumnal_equinox_day,
    vernal_equinox_day,
)
from calendar_jp.holidays.expander import (
    build_holiday_map,
    expand_primary,
    resolve_substitutes,
)
from calendar_jp.holidays.rules import DayRange, HolidayRule, YearRange, validate_rule
from calendar_jp.holidays.schema import DOMAIN, WEEKDAYS, Logic
from calendar_jp.holidays.store import RuleStore

__all__ = [
    "DOMAIN",
    "EQUINOX_UNKNOWN",
    "WEEKDAYS",
    "CalendarJp",
    "DayRange",
    "Holiday",
    "HolidayRule",
    "Logic",
    "RuleStore",
    "YearRange",
    "autumnal_equinox_day",
    "build_holiday_map",
    "expand_primary",
    "resolve_substitutes",
    "validate_rule",
    "vernal_equinox_day",
]
