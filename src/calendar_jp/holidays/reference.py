"""
Cross-check against the official holiday list.

The Cabinet Office publishes every national holiday since 1955 as a CSV::

    国民の祝日・休日月日,国民の祝日・休日名称
    1955/1/1,元日
    ...

The official file names substitute and bridge days generically as
「休日」; those rows match when the calendar reports either 振替休日 or
国民の休日. Other rows match when the calendar reports any holiday, since
official names of one-off ceremonies differ from the rule titles.

The official download is Shift_JIS (cp932); pass ``encoding`` accordingly.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Iterable, Iterator

from calendar_jp.core.errors import RuleParseError
from calendar_jp.holidays.calendar import CalendarJp

GENERIC_HOLIDAY = "休日"
GENERIC_HOLIDAY_TITLES = frozenset({"振替休日", "国民の休日"})


@dataclass(frozen=True)
class ReferenceHoliday:
    """One row of the official list."""

    date: date
    name: str


@dataclass(frozen=True)
class Mismatch:
    date: date
    expected: str
    actual: str | None


@dataclass
class VerificationResult:
    """Outcome of comparing the official list with a calendar."""

    total: int = 0
    matched: int = 0
    mismatches: list[Mismatch] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.mismatches


def parse_reference_rows(rows: Iterable[list[str]]) -> Iterator[ReferenceHoliday]:
    """
    Parse CSV rows (header included) into reference holidays.

    Blank rows are skipped. Dates are ``YYYY/M/D``.

    Raises:
        RuleParseError: a row has an unparseable date
    """
    for line_no, row in enumerate(rows, start=1):
        if line_no == 1 or not row or not row[0].strip():
            continue
        if len(row) < 2 or not row[1].strip():
            continue
        try:
            year, month, day = (int(part) for part in row[0].strip().split("/"))
            holiday_date = date(year, month, day)
        except ValueError as e:
            raise RuleParseError(
                f"Invalid date on line {line_no}: {row[0]!r}", cause=e
            ).with_context(line=line_no)
        yield ReferenceHoliday(date=holiday_date, name=row[1].strip())


def read_reference_csv(path: Path | str, *, encoding: str = "utf-8") -> list[ReferenceHoliday]:
    """Read the official holiday CSV."""
    with open(path, newline="", encoding=encoding) as f:
        return list(parse_reference_rows(csv.reader(f)))


def matches(reference: ReferenceHoliday, actual: str | None) -> bool:
    if reference.name == GENERIC_HOLIDAY:
        return actual in GENERIC_HOLIDAY_TITLES
    return actual is not None


def verify(calendar: CalendarJp, references: Iterable[ReferenceHoliday]) -> VerificationResult:
    """Look up every reference date in ``calendar`` and collect mismatches."""
    result = VerificationResult()
    for reference in references:
        result.total += 1
        actual = calendar.get_holiday(reference.date.isoformat())
        if matches(reference, actual):
            result.matched += 1
        else:
            result.mismatches.append(
                Mismatch(date=reference.date, expected=reference.name, actual=actual)
            )
    return result
