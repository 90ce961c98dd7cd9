"""
Tests for the relative date vocabulary.
"""

from datetime import date

import pytest

from shipments.services.relative_dates import find_relative_date, month_bounds

# A Wednesday
TODAY = date(2025, 5, 14)


def resolve(text, today=TODAY, fiscal_start=10):
    found = find_relative_date(text, today, fiscal_start)
    return (found.date_from.isoformat(), found.date_to.isoformat()) if found else None


class TestRelativeDates:

    @pytest.mark.parametrize("text, expected", [
        ("last 7 days", ("2025-05-07", "2025-05-14")),
        ("آخر 30 يوم", ("2025-04-14", "2025-05-14")),
        ("next 10 days", ("2025-05-14", "2025-05-24")),
        ("خلال 10 أيام القادمة", ("2025-05-14", "2025-05-24")),
        ("this month", ("2025-05-01", "2025-05-31")),
        ("الشهر الماضي", ("2025-04-01", "2025-04-30")),
        ("next month", ("2025-06-01", "2025-06-30")),
        ("هذه السنة", ("2025-01-01", "2025-12-31")),
        ("last year", ("2024-01-01", "2024-12-31")),
        ("الربع 1", ("2025-01-01", "2025-03-31")),
        ("this quarter", ("2025-04-01", "2025-06-30")),
        ("yesterday", ("2025-05-13", "2025-05-13")),
        ("اليوم", ("2025-05-14", "2025-05-14")),
        ("tomorrow", ("2025-05-15", "2025-05-15")),
        ("this week", ("2025-05-11", "2025-05-17")),
        ("next week", ("2025-05-18", "2025-05-24")),
        ("last week", ("2025-05-04", "2025-05-10")),
    ])
    def test_phrases(self, text, expected):
        """Each phrase resolves to an inclusive range."""
        assert resolve(text) == expected

    def test_day_count_before_named_period(self):
        """'last 30 days' is not read as 'last ...' anything else."""
        assert resolve("last 30 days this month") == ("2025-04-14", "2025-05-14")

    def test_match_span(self):
        """The span covers just the phrase."""
        found = find_relative_date("rice last month", TODAY)
        assert "rice last month"[found.start:found.end] == "last month"

    def test_last_month_across_new_year(self):
        """January's previous month is December of the year before."""
        assert resolve("last month", today=date(2025, 1, 20)) == ("2024-12-01", "2024-12-31")

    def test_week_on_sunday(self):
        """On a Sunday 'this week' starts today."""
        assert resolve("this week", today=date(2025, 5, 11)) == ("2025-05-11", "2025-05-17")

    def test_fiscal_year_after_start_month(self):
        """From October on, the fiscal year is the one that just began."""
        assert resolve("fiscal year", today=date(2025, 11, 2)) == ("2025-10-01", "2026-09-30")

    def test_fiscal_year_starting_january(self):
        """A January start makes the fiscal year the calendar year."""
        assert resolve("fy", fiscal_start=1) == ("2025-01-01", "2025-12-31")

    def test_no_phrase(self):
        assert find_relative_date("rice from india", TODAY) is None
        assert find_relative_date("", TODAY) is None

    def test_word_boundaries(self):
        """'fy' inside a word is not a fiscal year."""
        assert find_relative_date("fyber", TODAY) is None

    def test_out_of_range_count(self):
        """Day counts that overflow the calendar are skipped."""
        assert find_relative_date("next 99999999999 days", TODAY) is None

    def test_month_bounds_leap_year(self):
        assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
