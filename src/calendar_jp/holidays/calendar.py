"""
CalendarJp — Japanese public holiday calendar (1948–2099).

Owns a rule store and a per-year cache. Lookups build a year's holiday
map on first use (equinox days, primary pass, substitute pass) and serve
later lookups from the cache. Any rule mutation clears the whole cache.

Error regimes:
- Lookups (get_holiday, get_holiday_map, is_holiday, holidays) never
  raise; bad input yields None / {} / False / [].
- Mutations (add_rule, update_rule) raise RuleValidationError or
  DuplicateRuleError and leave the rule table unchanged. remove_rule never
  raises; update_rule of an unknown name is a silent no-op.

An instance may be shared across threads: the store and cache are guarded
by one lock.

Usage:
    >>> from calendar_jp import CalendarJp
    >>> calendar = CalendarJp()
    >>> calendar.get_holiday("2008-05-06")
    '振替休日'
    >>> calendar.get_holiday("2024-07-16") is None
    True
"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from pathlib import Path
from typing import Any, Iterable, Mapping

from calendar_jp.core.cache import YearCache
from calendar_jp.core.logging import get_logger
from calendar_jp.core.settings import CalendarSettings
from calendar_jp.holidays.expander import build_holiday_map
from calendar_jp.holidays.rules import HolidayRule, coerce_rule, validate_rule
from calendar_jp.holidays.schema import DOMAIN
from calendar_jp.holidays.sources import load_rules
from calendar_jp.holidays.store import RuleStore

logger = get_logger(__name__)

_YMD = re.compile(r"^(\d{4})-\d{2}-\d{2}$", re.ASCII)


@dataclass(frozen=True)
class Holiday:
    """A single holiday: calendar date and display title."""

    date: date
    title: str

    @property
    def ymd(self) -> str:
        return self.date.isoformat()


def _supported_year(year: Any) -> bool:
    # The substitute pass looks one day past either end of the year
    if isinstance(year, bool) or not isinstance(year, int):
        return False
    return MINYEAR < year < MAXYEAR


class CalendarJp:
    """Japanese holiday calendar backed by an ordered rule table."""

    def __init__(
        self,
        rules: Iterable[HolidayRule | Mapping[str, Any]] | None = None,
        *,
        rules_path: Path | str | None = None,
        cache_enabled: bool = True,
    ):
        """
        Args:
            rules: Explicit rule table; each rule is validated. Takes
                precedence over ``rules_path``.
            rules_path: JSON rule document to load instead of the packaged table
            cache_enabled: Memoize per-year maps
        """
        if rules is not None:
            loaded = [coerce_rule(rule) for rule in rules]
            for rule in loaded:
                validate_rule(rule)
            source_name = "explicit"
        else:
            payload = load_rules(rules_path)
            loaded = payload.rules
            source_name = payload.metadata.source_name

        self._store = RuleStore(loaded)
        self._cache = YearCache()
        self._cache_enabled = cache_enabled
        self._lock = threading.RLock()

        logger.info(
            "rule_table_loaded",
            domain=DOMAIN,
            source=source_name,
            rules=len(self._store),
        )

    @classmethod
    def from_settings(cls, settings: CalendarSettings | None = None) -> CalendarJp:
        """Build a calendar from ``CALENDAR_JP_*`` configuration."""
        settings = settings or CalendarSettings()
        return cls(rules_path=settings.rules_path, cache_enabled=settings.cache_enabled)

    # ------------------------------------------------------------------ #
    # Lookups
    # ------------------------------------------------------------------ #

    def get_holiday(self, date_string: str) -> str | None:
        """Holiday title for ``"YYYY-MM-DD"``, or None."""
        if not isinstance(date_string, str):
            return None
        match = _YMD.match(date_string)
        if match is None:
            logger.debug("holiday_lookup_rejected", value=date_string)
            return None
        return self.get_holiday_map(int(match.group(1))).get(date_string)

    def get_holiday_map(self, year: int) -> dict[str, str]:
        """``"YYYY-MM-DD"`` -> title for every holiday of ``year``, ordered by date."""
        if not _supported_year(year):
            return {}

        with self._lock:
            holidays = self._cache.get(year) if self._cache_enabled else None
            if holidays is None:
                holidays = build_holiday_map(year, self._store.list())
                logger.debug("year_map_built", year=year, holidays=len(holidays))
                if self._cache_enabled:
                    self._cache.set(year, holidays)
            return dict(holidays)

    def is_holiday(self, value: date | str) -> bool:
        """True when ``value`` (a date or ``"YYYY-MM-DD"``) is a holiday."""
        if isinstance(value, date):
            if not _supported_year(value.year):
                return False
            value = value.isoformat()
        return self.get_holiday(value) is not None

    def holidays(self, year: int) -> list[Holiday]:
        """Holidays of ``year`` as ordered records."""
        return [
            Holiday(date=date.fromisoformat(ymd), title=title)
            for ymd, title in self.get_holiday_map(year).items()
        ]

    # ------------------------------------------------------------------ #
    # Rule table
    # ------------------------------------------------------------------ #

    def add_rule(self, rule: HolidayRule | Mapping[str, Any]) -> None:
        """Validate and append a rule. Raises on invalid rules and duplicate names."""
        with self._lock:
            added = self._store.add(rule)
            self._invalidate()
        logger.info("rule_added", rule=added.name, rules=len(self._store))

    def remove_rule(self, name: str) -> None:
        """Remove every rule named ``name``. Never raises."""
        with self._lock:
            removed = self._store.remove(name)
            self._invalidate()
        logger.info("rule_removed", rule=name, removed=removed, rules=len(self._store))

    def update_rule(self, rule: HolidayRule | Mapping[str, Any]) -> None:
        """Replace the rule with the same name. Unknown names are ignored."""
        with self._lock:
            rule = coerce_rule(rule)
            updated = self._store.update(rule)
            self._invalidate()
        if updated:
            logger.info("rule_updated", rule=rule.name)
        else:
            logger.debug("rule_update_ignored", rule=rule.name)

    def list_rules(self) -> list[HolidayRule]:
        """The live rule table, in precedence order."""
        return self._store.list()

    def _invalidate(self) -> None:
        if self._cache.size():
            logger.debug("year_cache_cleared", years=self._cache.years())
        self._cache.clear()
