"""
Holiday rule model and the rule-table validator.

A rule's "kind" is the combination of optional fields it populates:

    date                  fixed day-of-month (optionally within ``month``)
    date_range + weekday  "the Nth <weekday>" window within ``month``
    logic                 computed date (equinox, bridge, lieu)

Rules are plain records; the expander evaluates them with straight-line
predicate checks in table order.

The JSON document uses camelCase keys (``yearRange``, ``dateRange``);
``HolidayRule.from_dict`` accepts both camelCase and snake_case and
``to_dict`` writes camelCase.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from calendar_jp.core.errors import RuleValidationError
from calendar_jp.holidays.schema import WEEKDAYS, Logic


# =============================================================================
# DATA STRUCTURES
# =============================================================================


@dataclass
class YearRange:
    """Inclusive year validity window."""

    begin: int | None = None
    end: int | None = None

    def contains(self, year: int) -> bool:
        if self.begin is None or self.end is None:
            return False
        return self.begin <= year <= self.end

    def to_dict(self) -> dict[str, Any]:
        return {"begin": self.begin, "end": self.end}


@dataclass
class DayRange:
    """Inclusive day-of-month bounds."""

    begin: int | None = None
    end: int | None = None

    def contains(self, day: int) -> bool:
        if not self.begin or not self.end:
            return False
        return self.begin <= day <= self.end

    def to_dict(self) -> dict[str, Any]:
        return {"begin": self.begin, "end": self.end}


@dataclass
class HolidayRule:
    """One row of the holiday rule table."""

    name: str
    title: str
    year_range: YearRange | None = None
    month: int | None = None
    date: int | None = None
    date_range: DayRange | None = None
    weekday: str | None = None
    logic: str | None = None

    def applies_to_year(self, year: int) -> bool:
        return self.year_range is not None and self.year_range.contains(year)

    def matches_weekday(self, weekday: int) -> bool:
        """True when no weekday is set or it names ``date.weekday()``."""
        if not self.weekday:
            return True
        return self.weekday.lower() == WEEKDAYS[weekday]

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> HolidayRule:
        """
        Create a HolidayRule from a JSON-shaped dict.

        Field values are copied as given; ``validate_rule`` reports wrongly
        typed values in its usual check order.
        """
        if not isinstance(d, Mapping):
            raise RuleValidationError(
                f"Rule must be an object, got {type(d).__name__}", value=d
            )

        return cls(
            name=d.get("name", ""),
            title=d.get("title", ""),
            year_range=_range(_pick(d, "yearRange", "year_range"), YearRange),
            month=d.get("month"),
            date=d.get("date"),
            date_range=_range(_pick(d, "dateRange", "date_range"), DayRange),
            weekday=d.get("weekday"),
            logic=d.get("logic"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON document shape, omitting unset fields."""
        result: dict[str, Any] = {"name": self.name, "title": self.title}
        if self.year_range is not None:
            result["yearRange"] = self.year_range.to_dict()
        if self.month is not None:
            result["month"] = self.month
        if self.date is not None:
            result["date"] = self.date
        if self.date_range is not None:
            result["dateRange"] = self.date_range.to_dict()
        if self.weekday is not None:
            result["weekday"] = self.weekday
        if self.logic is not None:
            result["logic"] = self.logic
        return result


def _pick(d: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if d.get(key) is not None:
            return d[key]
    return None


def _range(value: Any, range_cls: type) -> Any:
    if not isinstance(value, Mapping):
        return value
    return range_cls(begin=value.get("begin"), end=value.get("end"))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def coerce_rule(rule: HolidayRule | Mapping[str, Any]) -> HolidayRule:
    """Accept a HolidayRule or a JSON-shaped dict."""
    if isinstance(rule, HolidayRule):
        return rule
    return HolidayRule.from_dict(rule)


# =============================================================================
# VALIDATION
# =============================================================================


def validate_rule(rule: HolidayRule) -> None:
    """
    Validate a rule, raising on the first violated constraint.

    Checks run in a fixed order so the reported error is deterministic:

        name → title → yearRange → yearRange.begin → yearRange.end →
        begin ≤ end → month → date → dateRange bounds → dateRange order →
        weekday → date/weekday exclusion → logic

    A value of the wrong type fails at its own field's position in that
    order. Only ``date`` and ``weekday`` are checked for mutual exclusion;
    other contradictory combinations (``date`` with ``dateRange``, ``logic``
    with ``date``) are accepted.

    Raises:
        RuleValidationError: with ``field`` naming the offending attribute
    """
    def fail(message: str, field: str, value: Any = None) -> RuleValidationError:
        error = RuleValidationError(message, field=field, value=value)
        if isinstance(rule.name, str) and rule.name:
            error.context.rule_name = rule.name
        return error

    def require_int(value: Any, field: str) -> None:
        if value is not None and not _is_int(value):
            raise fail(f"{field} must be an integer", field, value)

    for field in ("name", "title"):
        value = getattr(rule, field)
        if not value:
            raise fail(f"Rule {field} is required", field)
        if not isinstance(value, str):
            raise fail(f"{field} must be a string", field, value)

    year_range = rule.year_range
    if year_range is None:
        raise fail("yearRange is required", "yearRange")
    if not isinstance(year_range, YearRange):
        raise fail("yearRange must be an object with begin and end", "yearRange", year_range)
    require_int(year_range.begin, "yearRange.begin")
    if not year_range.begin:
        raise fail("yearRange.begin is required", "yearRange.begin", year_range.begin)
    require_int(year_range.end, "yearRange.end")
    if not year_range.end:
        raise fail("yearRange.end is required", "yearRange.end", year_range.end)
    if year_range.begin > year_range.end:
        raise fail(
            "yearRange.begin must be less than or equal to yearRange.end",
            "yearRange",
            (year_range.begin, year_range.end),
        )

    require_int(rule.month, "month")
    if rule.month is not None and not 1 <= rule.month <= 12:
        raise fail("month must be between 1 and 12", "month", rule.month)
    require_int(rule.date, "date")
    if rule.date is not None and not 1 <= rule.date <= 31:
        raise fail("date must be between 1 and 31", "date", rule.date)

    date_range = rule.date_range
    if date_range is not None:
        if not isinstance(date_range, DayRange):
            raise fail("dateRange must be an object with begin and end", "dateRange", date_range)
        require_int(date_range.begin, "dateRange")
        require_int(date_range.end, "dateRange")
        if not date_range.begin or not date_range.end:
            raise fail(
                "dateRange.begin and dateRange.end are required",
                "dateRange",
                (date_range.begin, date_range.end),
            )
        if date_range.begin > date_range.end:
            raise fail(
                "dateRange.begin must be less than or equal to dateRange.end",
                "dateRange",
                (date_range.begin, date_range.end),
            )

    if rule.weekday is not None and (
        not isinstance(rule.weekday, str) or rule.weekday.lower() not in WEEKDAYS
    ):
        raise fail(
            f"weekday must be one of {', '.join(WEEKDAYS)}", "weekday", rule.weekday
        )

    if rule.date is not None and rule.weekday is not None:
        raise fail("date and weekday cannot both be set", "weekday", rule.weekday)

    if rule.logic is not None and rule.logic not in Logic.values():
        raise fail(
            f"logic must be one of {', '.join(Logic.values())}", "logic", rule.logic
        )
