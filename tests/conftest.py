"""
Shared pytest fixtures for calendar-jp tests.

This module provides:
- A calendar built from the packaged rule table
- A small hand-written rule table for engine-level tests
- Paths to fixture files
- Quiet structlog configuration for the whole session
"""

from pathlib import Path

import pytest

from calendar_jp.core.logging import configure_logging
from calendar_jp.holidays.calendar import CalendarJp
from calendar_jp.holidays.rules import HolidayRule

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    configure_logging(level="WARNING", json_format=False, add_timestamp=False)


@pytest.fixture
def calendar() -> CalendarJp:
    """Calendar over the packaged rule table."""
    return CalendarJp()


@pytest.fixture
def reference_csv() -> Path:
    return FIXTURES / "syukujitsu_sample.csv"


@pytest.fixture
def new_years_rule() -> dict:
    return {
        "name": "元日",
        "title": "元日",
        "yearRange": {"begin": 1948, "end": 9999},
        "month": 1,
        "date": 1,
    }


@pytest.fixture
def mini_rules() -> list[HolidayRule]:
    """
    A reduced table exercising every rule kind.

    2008: May 3 (Sat), May 4 (Sun), May 5 (Mon) are holidays, so May 6
    is a substitute under the 2007 rule.
    """
    rows = [
        {"name": "元日", "title": "元日", "yearRange": {"begin": 1948, "end": 9999},
         "month": 1, "date": 1},
        {"name": "成人の日", "title": "成人の日", "yearRange": {"begin": 2000, "end": 9999},
         "month": 1, "dateRange": {"begin": 8, "end": 14}, "weekday": "Monday"},
        {"name": "春分の日", "title": "春分の日", "yearRange": {"begin": 1948, "end": 9999},
         "month": 3, "logic": "Vernal Equinox Day"},
        {"name": "憲法記念日", "title": "憲法記念日", "yearRange": {"begin": 1948, "end": 9999},
         "month": 5, "date": 3},
        {"name": "みどりの日", "title": "みどりの日", "yearRange": {"begin": 2007, "end": 9999},
         "month": 5, "date": 4},
        {"name": "こどもの日", "title": "こどもの日", "yearRange": {"begin": 1948, "end": 9999},
         "month": 5, "date": 5},
        {"name": "秋分の日", "title": "秋分の日", "yearRange": {"begin": 1948, "end": 9999},
         "month": 9, "logic": "Autumnal Equinox Day"},
        {"name": "国民の休日", "title": "国民の休日", "yearRange": {"begin": 1985, "end": 9999},
         "logic": "Natinal Holiday"},
        {"name": "振替休日", "title": "振替休日", "yearRange": {"begin": 1973, "end": 2007},
         "logic": "Holiday in lieu"},
        {"name": "振替休日2007", "title": "振替休日", "yearRange": {"begin": 2007, "end": 9999},
         "logic": "Holiday in lieu(2007)"},
    ]
    return [HolidayRule.from_dict(row) for row in rows]
