"""
Relative Date Vocabulary

Closed set of phrases like "last 30 days", "this quarter" or "الأسبوع
الماضي" that resolve to an inclusive (date_from, date_to) range around an
injected ``today``. Rules are checked in order and the first match wins:
day-count phrases come before named periods.

Weeks run Sunday → Saturday, the working week used by the trade desk.
"""

import calendar
import logging
import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Optional, Tuple

logger = logging.getLogger(__name__)

DateRange = Tuple[date, date]


@dataclass(frozen=True)
class RelativeDateMatch:
    """A matched phrase, its span in the text and the resolved range."""
    start: int
    end: int
    date_from: date
    date_to: date


# ─── Calendar helpers ─────────────────────────────────────────

def month_bounds(year: int, month: int) -> DateRange:
    """First and last day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def _shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _days_since_sunday(today: date) -> int:
    # date.weekday(): Monday=0 … Sunday=6
    return (today.weekday() + 1) % 7


# ─── Range computations ───────────────────────────────────────

def _last_n_days(today, match, fiscal_start):
    return today - timedelta(days=int(match.group(1))), today


def _next_n_days(today, match, fiscal_start):
    return today, today + timedelta(days=int(match.group(1)))


def _this_month(today, match, fiscal_start):
    return month_bounds(today.year, today.month)


def _last_month(today, match, fiscal_start):
    return month_bounds(*_shift_month(today.year, today.month, -1))


def _next_month(today, match, fiscal_start):
    return month_bounds(*_shift_month(today.year, today.month, 1))


def _this_year(today, match, fiscal_start):
    return date(today.year, 1, 1), date(today.year, 12, 31)


def _last_year(today, match, fiscal_start):
    return date(today.year - 1, 1, 1), date(today.year - 1, 12, 31)


def _quarter_bounds(year: int, quarter: int) -> DateRange:
    first_month = (quarter - 1) * 3 + 1
    return date(year, first_month, 1), month_bounds(year, first_month + 2)[1]


def _numbered_quarter(today, match, fiscal_start):
    return _quarter_bounds(today.year, int(match.group(1)))


def _this_quarter(today, match, fiscal_start):
    return _quarter_bounds(today.year, (today.month - 1) // 3 + 1)


def _fiscal_year(today, match, fiscal_start):
    start_year = today.year if today.month >= fiscal_start else today.year - 1
    end_year, end_month = _shift_month(start_year, fiscal_start, 11)
    return date(start_year, fiscal_start, 1), month_bounds(end_year, end_month)[1]


def _yesterday(today, match, fiscal_start):
    day = today - timedelta(days=1)
    return day, day


def _today(today, match, fiscal_start):
    return today, today


def _tomorrow(today, match, fiscal_start):
    day = today + timedelta(days=1)
    return day, day


def _next_week(today, match, fiscal_start):
    start = today + timedelta(days=7 - _days_since_sunday(today))
    return start, start + timedelta(days=6)


def _last_week(today, match, fiscal_start):
    end = today - timedelta(days=_days_since_sunday(today) + 1)
    return end - timedelta(days=6), end


def _this_week(today, match, fiscal_start):
    start = today - timedelta(days=_days_since_sunday(today))
    return start, start + timedelta(days=6)


# ─── Rule table ───────────────────────────────────────────────

def _rule(pattern: str) -> "re.Pattern":
    return re.compile(rf"(?<!\w)(?:{pattern})(?!\w)", re.IGNORECASE)


_DAYS = r"days?|يوم|ايام|أيام"

RangeRule = Callable[[date, "re.Match", int], DateRange]

RELATIVE_DATE_RULES: Tuple[Tuple["re.Pattern", RangeRule], ...] = (
    (_rule(rf"(?:last|past|آخر|اخر)\s+(\d+)\s+(?:{_DAYS})"), _last_n_days),
    (_rule(rf"(?:next|خلال)\s+(\d+)\s+(?:{_DAYS})(?:\s+(?:القادمة|القادم|المقبلة))?"), _next_n_days),
    (_rule(r"this\s+month|هذا\s+الشهر|الشهر\s+الحالي"), _this_month),
    (_rule(r"last\s+month|الشهر\s+الماضي|الشهر\s+السابق"), _last_month),
    (_rule(r"next\s+month|الشهر\s+القادم|الشهر\s+المقبل"), _next_month),
    (_rule(r"this\s+year|هذه\s+السنة|هذا\s+العام|السنة\s+الحالية"), _this_year),
    (_rule(r"last\s+year|السنة\s+الماضية|العام\s+الماضي"), _last_year),
    (re.compile(r"(?<!\w)(?:q|quarter|الربع|ربع)\s*([1-4])(?!\d)", re.IGNORECASE), _numbered_quarter),
    (_rule(r"this\s+quarter|هذا\s+الربع|الربع\s+الحالي"), _this_quarter),
    (_rule(r"fiscal\s+year|fy|السنة\s+المالية"), _fiscal_year),
    (_rule(r"yesterday|الأمس|أمس|امس"), _yesterday),
    (_rule(r"today|اليوم"), _today),
    (_rule(r"tomorrow|غداً|غدا"), _tomorrow),
    (_rule(r"next\s+week|الأسبوع\s+القادم|الاسبوع\s+القادم|الأسبوع\s+المقبل|الاسبوع\s+المقبل"), _next_week),
    (_rule(r"last\s+week|الأسبوع\s+الماضي|الاسبوع\s+الماضي"), _last_week),
    (_rule(r"this\s+week|هذا\s+الأسبوع|هذا\s+الاسبوع"), _this_week),
)


def find_relative_date(text: str, today: date, fiscal_year_start_month: int = 10) -> Optional[RelativeDateMatch]:
    """
    Resolve the first relative-date phrase in ``text``.

    Examples (today = 2025-05-14, a Wednesday):
        "last 30 days"     → 2025-04-14 .. 2025-05-14
        "الأسبوع الماضي"   → 2025-05-04 .. 2025-05-10
        "fiscal year"      → 2024-10-01 .. 2025-09-30
    """
    if not text:
        return None

    for pattern, compute in RELATIVE_DATE_RULES:
        match = pattern.search(text)
        if not match:
            continue
        try:
            date_from, date_to = compute(today, match, fiscal_year_start_month)
        except (OverflowError, ValueError):
            # "last 99999999 days" runs off the calendar
            logger.debug(f"Ignoring out-of-range date phrase {match.group(0)!r}")
            continue
        return RelativeDateMatch(match.start(), match.end(), date_from, date_to)

    return None
