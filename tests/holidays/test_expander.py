"""
Tests for the expansion passes.

Uses the reduced rule table from conftest so every expected map can be
checked by hand against a wall calendar.
"""

from datetime import date

from calendar_jp.holidays.equinox import EQUINOX_UNKNOWN
from calendar_jp.holidays.expander import (
    active_rules,
    build_holiday_map,
    expand_primary,
    iter_year_days,
    resolve_substitutes,
)
from calendar_jp.holidays.rules import HolidayRule


def _fixed(title: str, month: int, day: int, **extra) -> HolidayRule:
    return HolidayRule.from_dict({
        "name": extra.pop("name", title),
        "title": title,
        "yearRange": extra.pop("yearRange", {"begin": 1948, "end": 9999}),
        "month": month,
        "date": day,
        **extra,
    })


def _logic(name: str, title: str, logic: str) -> HolidayRule:
    return HolidayRule.from_dict({
        "name": name,
        "title": title,
        "yearRange": {"begin": 1948, "end": 9999},
        "logic": logic,
    })


class TestHelpers:
    def test_iter_year_days_leap_year(self):
        days = list(iter_year_days(2024))
        assert len(days) == 366
        assert days[0] == date(2024, 1, 1)
        assert days[-1] == date(2024, 12, 31)

    def test_active_rules_keeps_order(self, mini_rules):
        names = [rule.name for rule in active_rules(2006, mini_rules)]
        assert "みどりの日" not in names
        assert "振替休日2007" not in names
        assert names.index("元日") < names.index("振替休日")


class TestExpandPrimary:
    def test_mini_table_2008(self, mini_rules):
        holidays = expand_primary(2008, mini_rules, 20, 23)
        assert holidays == {
            date(2008, 1, 1): "元日",
            date(2008, 1, 14): "成人の日",
            date(2008, 3, 20): "春分の日",
            date(2008, 5, 3): "憲法記念日",
            date(2008, 5, 4): "みどりの日",
            date(2008, 5, 5): "こどもの日",
            date(2008, 9, 23): "秋分の日",
        }
        assert list(holidays) == sorted(holidays)

    def test_unknown_equinox_matches_nothing(self, mini_rules):
        holidays = expand_primary(2008, mini_rules, EQUINOX_UNKNOWN, EQUINOX_UNKNOWN)
        assert date(2008, 3, 20) not in holidays
        assert all(d.month not in (3, 9) for d in holidays)

    def test_last_match_wins(self):
        rules = [_fixed("first", 5, 3, name="a"), _fixed("second", 5, 3, name="b")]
        assert expand_primary(2024, rules, 20, 22) == {date(2024, 5, 3): "second"}

    def test_rule_outside_year_range_ignored(self):
        rules = [_fixed("山の日", 8, 11, yearRange={"begin": 2016, "end": 9999})]
        assert expand_primary(2015, rules, 21, 23) == {}
        assert expand_primary(2016, rules, 20, 22) == {date(2016, 8, 11): "山の日"}

    def test_weekday_window(self, mini_rules):
        # January 2006: Mondays fall on the 2nd, 9th, 16th
        holidays = expand_primary(2006, mini_rules, 21, 23)
        assert holidays[date(2006, 1, 9)] == "成人の日"
        assert date(2006, 1, 2) not in holidays
        assert date(2006, 1, 16) not in holidays

    def test_date_without_month_matches_every_month(self):
        rules = [HolidayRule.from_dict({
            "name": "x", "title": "x", "yearRange": {"begin": 2024, "end": 2024}, "date": 15,
        })]
        assert len(expand_primary(2024, rules, 20, 22)) == 12

    def test_substitute_logics_do_not_fire(self, mini_rules):
        holidays = expand_primary(2008, mini_rules, 20, 23)
        assert "振替休日" not in holidays.values()
        assert "国民の休日" not in holidays.values()


class TestResolveSubstitutes:
    def test_does_not_mutate_primary(self, mini_rules):
        primary = expand_primary(2008, mini_rules, 20, 23)
        snapshot = dict(primary)
        resolve_substitutes(2008, mini_rules, primary)
        assert primary == snapshot

    def test_lieu_2007_after_sunday_run(self, mini_rules):
        primary = expand_primary(2008, mini_rules, 20, 23)
        holidays = resolve_substitutes(2008, mini_rules, primary)
        assert holidays[date(2008, 5, 6)] == "振替休日"
        # A substitute does not chain onto another substitute
        assert date(2008, 5, 7) not in holidays
        assert len(holidays) == len(primary) + 1

    def test_pre_2007_monday_rule(self, mini_rules):
        primary = expand_primary(2006, mini_rules, 21, 23)
        holidays = resolve_substitutes(2006, mini_rules, primary)
        assert holidays[date(2006, 1, 2)] == "振替休日"
        assert date(2006, 1, 10) not in holidays

    def test_bridge_between_holidays(self, mini_rules):
        primary = expand_primary(1988, mini_rules, 20, 23)
        holidays = resolve_substitutes(1988, mini_rules, primary)
        assert holidays[date(1988, 5, 4)] == "国民の休日"

    def test_bridge_not_before_rule_start(self, mini_rules):
        primary = expand_primary(1984, mini_rules, 20, 23)
        holidays = resolve_substitutes(1984, mini_rules, primary)
        assert date(1984, 5, 4) not in holidays

    def test_later_rule_wins_on_same_day(self):
        # 2008-05-04 is a Sunday; 05-05 sits between two holidays
        primary_rules = [_fixed("X", 5, 4), _fixed("Y", 5, 6)]
        bridge = _logic("国民の休日", "国民の休日", "Natinal Holiday")
        lieu = _logic("振替休日", "振替休日", "Holiday in lieu(2007)")

        rules = primary_rules + [bridge, lieu]
        holidays = resolve_substitutes(2008, rules, expand_primary(2008, rules, 20, 23))
        assert holidays[date(2008, 5, 5)] == "振替休日"

        rules = primary_rules + [lieu, bridge]
        holidays = resolve_substitutes(2008, rules, expand_primary(2008, rules, 20, 23))
        assert holidays[date(2008, 5, 5)] == "国民の休日"

    def test_no_substitute_rules_returns_copy(self):
        rules = [_fixed("元日", 1, 1)]
        primary = expand_primary(2023, rules, 21, 23)
        holidays = resolve_substitutes(2023, rules, primary)
        assert holidays == primary
        assert holidays is not primary


class TestBuildHolidayMap:
    def test_mini_table_2008(self, mini_rules):
        assert build_holiday_map(2008, mini_rules) == {
            "2008-01-01": "元日",
            "2008-01-14": "成人の日",
            "2008-03-20": "春分の日",
            "2008-05-03": "憲法記念日",
            "2008-05-04": "みどりの日",
            "2008-05-05": "こどもの日",
            "2008-05-06": "振替休日",
            "2008-09-23": "秋分の日",
        }

    def test_keys_are_ordered(self, mini_rules):
        keys = list(build_holiday_map(2006, mini_rules))
        assert keys == sorted(keys)

    def test_empty_table(self):
        assert build_holiday_map(2024, []) == {}
