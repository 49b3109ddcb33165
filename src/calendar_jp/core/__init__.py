"""calendar-jp core -- errors, logging, settings and caching primitives.

Architecture::

    errors.py      Structured error hierarchy (CalendarError, RuleValidationError)
    logging.py     structlog configuration and logger factory
    settings.py    CalendarSettings (pydantic-settings, CALENDAR_JP_ prefix)
    cache.py       YearCache -- per-year memoization of holiday maps
"""

from calendar_jp.core.cache import YearCache
from calendar_jp.core.errors import (
    CalendarError,
    ConfigError,
    DuplicateRuleError,
    ErrorCategory,
    ErrorContext,
    RuleParseError,
    RuleSourceError,
    RuleValidationError,
)

__all__ = [
    "YearCache",
    "CalendarError",
    "ConfigError",
    "DuplicateRuleError",
    "ErrorCategory",
    "ErrorContext",
    "RuleParseError",
    "RuleSourceError",
    "RuleValidationError",
]
