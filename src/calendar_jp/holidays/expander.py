"""
Pure expansion functions: rule table + year -> holiday map.

All functions are pure; the rule sequence is only read.

Calculation Contracts:
- expand_primary: fixed-date, weekday-window and equinox rules
- resolve_substitutes: bridge and in-lieu holidays over the primary map
- build_holiday_map: both passes, flattened to "YYYY-MM-DD" -> title

Precedence: rules are evaluated in table order and a later match
overwrites an earlier one for the same date, so rule order in the table
is significant.

Years must lie strictly inside ``datetime.MINYEAR``..``datetime.MAXYEAR``
so that the day before January 1 and the day after December 31 exist.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator, Sequence

from calendar_jp.holidays.equinox import autumnal_equinox_day, vernal_equinox_day
from calendar_jp.holidays.rules import HolidayRule
from calendar_jp.holidays.schema import MONDAY, SUBSTITUTE_LOGICS, SUNDAY, Logic

ONE_DAY = timedelta(days=1)


def iter_year_days(year: int) -> Iterator[date]:
    """Every date of ``year`` in ascending order."""
    current = date(year, 1, 1)
    while current.year == year:
        yield current
        current += ONE_DAY


def active_rules(year: int, rules: Sequence[HolidayRule]) -> list[HolidayRule]:
    """Rules whose year range contains ``year``, in table order."""
    return [rule for rule in rules if rule.applies_to_year(year)]


# =============================================================================
# PRIMARY PASS
# =============================================================================


def _primary_match(
    rule: HolidayRule,
    d: date,
    vernal_day: int,
    autumnal_day: int,
) -> bool:
    if rule.month and rule.month != d.month:
        return False

    if rule.date and rule.date == d.day:
        return True

    if rule.date_range is not None and rule.date_range.contains(d.day):
        return rule.matches_weekday(d.weekday())

    if rule.logic == Logic.VERNAL_EQUINOX_DAY:
        return d.day == vernal_day
    if rule.logic == Logic.AUTUMNAL_EQUINOX_DAY:
        return d.day == autumnal_day

    # Bridge and lieu logics need the completed primary map
    return False


def expand_primary(
    year: int,
    rules: Sequence[HolidayRule],
    vernal_day: int,
    autumnal_day: int,
) -> dict[date, str]:
    """
    Expand fixed-date, weekday-window and equinox rules for one year.

    Args:
        year: Calendar year
        rules: Rule table in precedence order
        vernal_day: March day of the vernal equinox
        autumnal_day: September day of the autumnal equinox

    Returns:
        Date -> title of the last matching rule, ascending by date
    """
    candidates = active_rules(year, rules)
    holidays: dict[date, str] = {}

    for d in iter_year_days(year):
        title = None
        for rule in candidates:
            if _primary_match(rule, d, vernal_day, autumnal_day):
                title = rule.title
        if title:
            holidays[d] = title

    return holidays


# =============================================================================
# SUBSTITUTE PASS
# =============================================================================


def _follows_sunday_holiday(holidays: dict[date, str], prev: date) -> bool:
    """Walk back from ``prev`` through consecutive holidays looking for a Sunday."""
    current = prev
    while current in holidays:
        if current.weekday() == SUNDAY:
            return True
        current -= ONE_DAY
    return False


def resolve_substitutes(
    year: int,
    rules: Sequence[HolidayRule],
    primary: dict[date, str],
) -> dict[date, str]:
    """
    Add bridge and in-lieu holidays to a copy of the primary map.

    Days are visited in ascending order and only days without a holiday are
    considered. Each day looks up its neighbours in the map as built so far,
    so a substitute placed earlier in the pass is visible to later days.

    - Natinal Holiday: the day before and the day after are both holidays.
    - Holiday in lieu: the day is a Monday and Sunday was a holiday.
    - Holiday in lieu(2007): the previous day is a holiday with a different
      title than this rule, and the run of holidays ending there contains a
      Sunday.

    Args:
        year: Calendar year
        rules: Rule table in precedence order
        primary: Output of expand_primary for the same year

    Returns:
        New date -> title map including substitutes
    """
    candidates = [
        rule for rule in active_rules(year, rules)
        if rule.logic in SUBSTITUTE_LOGICS
    ]
    holidays = dict(primary)
    if not candidates:
        return holidays

    for d in iter_year_days(year):
        if d in holidays:
            continue

        prev = d - ONE_DAY
        prev_title = holidays.get(prev)
        next_title = holidays.get(d + ONE_DAY)

        title = None
        for rule in candidates:
            if rule.logic == Logic.NATIONAL_HOLIDAY:
                if prev_title is not None and next_title is not None:
                    title = rule.title
            elif rule.logic == Logic.HOLIDAY_IN_LIEU:
                if prev_title is not None and d.weekday() == MONDAY:
                    title = rule.title
            elif rule.logic == Logic.HOLIDAY_IN_LIEU_2007:
                if (
                    prev_title is not None
                    and prev_title != rule.title
                    and _follows_sunday_holiday(holidays, prev)
                ):
                    title = rule.title
        if title:
            holidays[d] = title

    return holidays


# =============================================================================
# FULL EXPANSION
# =============================================================================


def build_holiday_map(year: int, rules: Sequence[HolidayRule]) -> dict[str, str]:
    """
    Run both passes for ``year`` and flatten to ``"YYYY-MM-DD"`` -> title.

    The result is ordered by date.
    """
    primary = expand_primary(
        year,
        rules,
        vernal_equinox_day(year),
        autumnal_equinox_day(year),
    )
    holidays = resolve_substitutes(year, rules, primary)
    return {d.isoformat(): holidays[d] for d in sorted(holidays)}
