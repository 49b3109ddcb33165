"""calendar-jp -- Japanese public holidays (1948–2099) from a declarative rule table.

    >>> from calendar_jp import CalendarJp
    >>> CalendarJp().get_holiday("2025-01-01")
    '元日'
"""

from calendar_jp.core.errors import (
    CalendarError,
    DuplicateRuleError,
    RuleParseError,
    RuleSourceError,
    RuleValidationError,
)
from calendar_jp.holidays import CalendarJp, Holiday, HolidayRule, Logic

__version__ = "0.1.0"

__all__ = [
    "CalendarError",
    "CalendarJp",
    "DuplicateRuleError",
    "Holiday",
    "HolidayRule",
    "Logic",
    "RuleParseError",
    "RuleSourceError",
    "RuleValidationError",
    "__version__",
]
