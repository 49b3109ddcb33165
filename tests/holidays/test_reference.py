"""Tests for the official holiday list cross-check."""

from datetime import date

import pytest

from calendar_jp.core.errors import RuleParseError
from calendar_jp.holidays.reference import (
    ReferenceHoliday,
    matches,
    parse_reference_rows,
    read_reference_csv,
    verify,
)


class TestParseReferenceRows:
    def test_skips_header_and_blank_rows(self):
        rows = [
            ["国民の祝日・休日月日", "国民の祝日・休日名称"],
            [],
            ["2024/1/1", "元日"],
            ["", ""],
            ["2024/2/12", "休日"],
        ]
        assert list(parse_reference_rows(rows)) == [
            ReferenceHoliday(date(2024, 1, 1), "元日"),
            ReferenceHoliday(date(2024, 2, 12), "休日"),
        ]

    def test_bad_date(self):
        rows = [["header", "header"], ["2024/13/1", "元日"]]
        with pytest.raises(RuleParseError) as exc_info:
            list(parse_reference_rows(rows))
        assert exc_info.value.context.metadata["line"] == 2


class TestMatches:
    def test_generic_name_needs_substitute_title(self):
        reference = ReferenceHoliday(date(2024, 2, 12), "休日")
        assert matches(reference, "振替休日")
        assert matches(reference, "国民の休日")
        assert not matches(reference, "建国記念の日")
        assert not matches(reference, None)

    def test_named_holiday_needs_any_title(self):
        reference = ReferenceHoliday(date(1959, 4, 10), "結婚の儀")
        assert matches(reference, "皇太子明仁親王の結婚の儀")
        assert not matches(reference, None)


class TestVerify:
    def test_sample_csv_matches_packaged_table(self, calendar, reference_csv):
        references = read_reference_csv(reference_csv)
        result = verify(calendar, references)
        assert result.total == len(references) > 100
        assert result.ok, result.mismatches[:5]

    def test_reports_mismatches(self, calendar):
        references = [
            ReferenceHoliday(date(2024, 1, 1), "元日"),
            ReferenceHoliday(date(2024, 7, 16), "海の日"),
        ]
        result = verify(calendar, references)
        assert result.matched == 1
        assert not result.ok
        (mismatch,) = result.mismatches
        assert mismatch.date == date(2024, 7, 16)
        assert mismatch.actual is None
