"""
Finance Search Parser

Parses the transactions search bar (Arabic, English or mixed):

    "دخول آخر 30 يوم"            → direction in, last 30 days
    "expenses November 2025"      → direction out, 2025-11-01 .. 2025-11-30
    "bank transfer > 1000"        → type bank_transfer, amount > 1000
    "exchange Abu Yazan"          → type exchange, general term "Abu Yazan"
    "highest amounts this month"  → amount_usd desc, 1st of month .. today

Unlike the shipment parser, "this month" and "this year" end today:
transactions are never dated in the future.
"""

import logging
import math
import re
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import List, Optional, Tuple

from shipments.services.query_parser import NumericConstraint
from shipments.services.relative_dates import month_bounds
from shipments.services.trade_gazetteers import (
    COMPARISON_PHRASES,
    MONTH_ALTERNATION,
    get_month_number,
    phrase_alternation,
)

logger = logging.getLogger(__name__)


# ─── Vocabulary ──────────────────────────────────────────────

INCOME_KEYWORDS = ["income", "incoming", "revenue", "received", "in",
                   "دخول", "دخل", "إيراد", "ايراد", "إيرادات", "وارد"]
EXPENSE_KEYWORDS = ["expense", "expenses", "outgoing", "payment", "payments", "paid", "out",
                    "خروج", "مصروف", "مصروفات", "صادر", "دفع", "مدفوع"]

TRANSACTION_TYPES = {
    "bank transfer": "bank_transfer",
    "transfer": "bank_transfer",
    "bank": "bank_transfer",
    "حوالة بنكية": "bank_transfer",
    "حوالة": "bank_transfer",
    "بنكية": "bank_transfer",
    "exchange": "exchange",
    "صراف": "exchange",
    "cash": "cash",
    "نقد": "cash",
    "نقدا": "cash",
    "check": "check",
    "cheque": "check",
    "شيك": "check",
    "credit card": "credit_card",
    "card": "credit_card",
    "credit": "credit_card",
    "بطاقة": "credit_card",
}

AMOUNT_KEYWORDS = ["amount", "مبلغ", "المبلغ", "قيمة", "القيمة"]

# (pattern, column, direction); first match wins
SORT_RULES = (
    (r"highest|largest|[أا]على|ال[أا]على", "amount_usd", "desc"),
    (r"lowest|smallest|[أا]قل|ال[أا]قل", "amount_usd", "asc"),
    (r"newest|latest|[أا]حدث|ال[أا]حدث", "transaction_date", "desc"),
    (r"oldest|[أا]قدم|ال[أا]قدم", "transaction_date", "asc"),
)
_SORT_NOUN = r"(?:\s+(?:amounts?|transactions?|المبالغ|مبالغ|المعاملات|معاملات))?"


def _words(phrases) -> "re.Pattern":
    """Whole-word, case-insensitive alternation; Arabic may carry "ال"."""
    return re.compile(rf"(?<!\w)(?:ال)?({phrase_alternation(phrases)})(?!\w)", re.IGNORECASE)


_INCOME = _words(INCOME_KEYWORDS)
_EXPENSE = _words(EXPENSE_KEYWORDS)
_TRANSACTION_TYPE = _words(TRANSACTION_TYPES)
_TYPE_LOOKUP = {" ".join(keyword.lower().split()): value for keyword, value in TRANSACTION_TYPES.items()}

_NUMBER = r"(?P<num>\d+(?:,\d{3})*(?:\.\d+)?)"
_AMOUNT_PREFIX = rf"(?:(?:{phrase_alternation(AMOUNT_KEYWORDS)})\s*)?"
_AMOUNT_PATTERNS = tuple(
    (re.compile(rf"(?<!\w){_AMOUNT_PREFIX}(?:{phrase})\s*\$?\s*{_NUMBER}", re.IGNORECASE), operator)
    for phrase, operator in COMPARISON_PHRASES
) + (
    (re.compile(rf"{_AMOUNT_PREFIX}(?P<op><=|>=|<|>|=)\s*\$?\s*{_NUMBER}", re.IGNORECASE), None),
)

_SORT_PATTERNS = tuple(
    (re.compile(rf"(?<!\w)(?:{pattern}){_SORT_NOUN}(?!\w)", re.IGNORECASE), column, direction)
    for pattern, column, direction in SORT_RULES
)

_LAST_N_DAYS = re.compile(r"(?<!\w)(?:last|past|آخر|اخر)\s+(\d+)\s+(?:days?|يوم|ايام|أيام)(?!\w)", re.IGNORECASE)
_THIS_MONTH = re.compile(r"(?<!\w)(?:this\s+month|هذا\s+الشهر|الشهر\s+الحالي)(?!\w)", re.IGNORECASE)
_LAST_MONTH = re.compile(r"(?<!\w)(?:last\s+month|الشهر\s+الماضي|الشهر\s+السابق)(?!\w)", re.IGNORECASE)
_THIS_YEAR = re.compile(r"(?<!\w)(?:this\s+year|هذا\s+العام|هذه\s+السنة)(?!\w)", re.IGNORECASE)

_YEAR = re.compile(r"(?<![\d.,])20\d{2}(?!\d|[.,]\d)")
_MONTH = re.compile(rf"(?<!\w)({MONTH_ALTERNATION})(?!\w)", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedFinanceSearch:
    """Structured transactions search; every field optional."""
    general_term: Optional[str] = None
    direction: Optional[str] = None
    transaction_types: Optional[Tuple[str, ...]] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    amount_usd: Optional[NumericConstraint] = None
    sort_column: Optional[str] = None
    sort_direction: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for API response (present fields only)."""
        result = {}
        for field_name, wire_name in FINANCE_WIRE_NAMES.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            if isinstance(value, NumericConstraint):
                value = value.to_dict()
            elif isinstance(value, tuple):
                value = list(value)
            result[wire_name] = value
        return result


FINANCE_WIRE_NAMES = {
    "general_term": "generalTerm",
    "direction": "direction",
    "transaction_types": "transactionTypes",
    "date_from": "dateFrom",
    "date_to": "dateTo",
    "amount_usd": "amountUsd",
    "sort_column": "sortColumn",
    "sort_direction": "sortDirection",
}


def _remove(text: str, span: Tuple[int, int]) -> str:
    return " ".join((text[:span[0]] + " " + text[span[1]:]).split())


class FinanceSearchParser:
    """
    Transactions search parser.

    Each step removes what it recognised so the leftover text can be used
    as a free-text search over description, party and fund names.
    """

    # ─── Public API ──────────────────────────────────────────────

    def parse(self, query: Optional[str], today: Optional[date] = None) -> ParsedFinanceSearch:
        """
        Parse a transactions search sentence.

        Pipeline:
        1. Smart dates ("last 30 days", "this month")
        2. Amount comparison ("amount > 1000", "أكثر من 500")
        3. Month / year ("November 2025", "2024")
        4. Sort words ("highest", "الأحدث")
        5. Direction (income vs expense)
        6. Transaction types
        7. Residue → general term
        """
        text = " ".join((query or "").split())
        if not text:
            return ParsedFinanceSearch()

        today = today or date.today()
        result = ParsedFinanceSearch()

        text, result = self._extract_smart_date(text, result, today)
        text, result = self._extract_amount(text, result)
        if result.date_from is None:
            text, result = self._extract_month_year(text, result, today)
        text, result = self._extract_sort(text, result)
        text, result = self._extract_direction(text, result)
        text, result = self._extract_transaction_types(text, result)

        residue = text.strip(" ,،")
        if residue:
            result = replace(result, general_term=residue)

        logger.debug(f"Parsed finance search {query!r} → {', '.join(result.to_dict()) or 'nothing'}")
        return result

    # ─── Steps ───────────────────────────────────────────────────

    def _extract_smart_date(self, text: str, result: ParsedFinanceSearch, today: date):
        match = _LAST_N_DAYS.search(text)
        if match:
            try:
                start = today - timedelta(days=int(match.group(1)))
            except OverflowError:
                logger.debug(f"Ignoring out-of-range date phrase {match.group(0)!r}")
            else:
                return _remove(text, match.span()), self._with_range(result, start, today)

        match = _THIS_MONTH.search(text)
        if match:
            return _remove(text, match.span()), self._with_range(result, today.replace(day=1), today)

        match = _LAST_MONTH.search(text)
        if match:
            last_day = today.replace(day=1) - timedelta(days=1)
            return _remove(text, match.span()), self._with_range(result, last_day.replace(day=1), last_day)

        match = _THIS_YEAR.search(text)
        if match:
            return _remove(text, match.span()), self._with_range(result, date(today.year, 1, 1), today)

        return text, result

    def _extract_amount(self, text: str, result: ParsedFinanceSearch):
        best = None
        for pattern, operator in _AMOUNT_PATTERNS:
            match = pattern.search(text)
            if match and (best is None or match.start() < best[0].start()):
                best = (match, operator or match.group("op"))
        if best is None:
            return text, result

        match, operator = best
        value = float(match.group("num").replace(",", ""))
        if not math.isfinite(value):
            return text, result
        return _remove(text, match.span()), replace(result, amount_usd=NumericConstraint(operator, value))

    def _extract_month_year(self, text: str, result: ParsedFinanceSearch, today: date):
        """A month alone uses the current year; a year alone covers the whole year."""
        year_match = _YEAR.search(text)
        year = int(year_match.group(0)) if year_match else None
        if year_match:
            text = _remove(text, year_match.span())

        month_match = _MONTH.search(text)
        if month_match:
            text = _remove(text, month_match.span())
            start, end = month_bounds(year or today.year, get_month_number(month_match.group(1)))
            return text, self._with_range(result, start, end)

        if year is not None:
            return text, self._with_range(result, date(year, 1, 1), date(year, 12, 31))
        return text, result

    def _extract_sort(self, text: str, result: ParsedFinanceSearch):
        for pattern, column, direction in _SORT_PATTERNS:
            match = pattern.search(text)
            if match:
                result = replace(result, sort_column=column, sort_direction=direction)
                return _remove(text, match.span()), result
        return text, result

    def _extract_direction(self, text: str, result: ParsedFinanceSearch):
        """Direction is set only when exactly one side is mentioned."""
        income = bool(_INCOME.search(text))
        expense = bool(_EXPENSE.search(text))

        if income and not expense:
            result = replace(result, direction="in")
        elif expense and not income:
            result = replace(result, direction="out")

        text = _EXPENSE.sub(" ", _INCOME.sub(" ", text))
        return " ".join(text.split()), result

    def _extract_transaction_types(self, text: str, result: ParsedFinanceSearch):
        types: List[str] = []
        for match in _TRANSACTION_TYPE.finditer(text):
            value = _TYPE_LOOKUP[" ".join(match.group(1).lower().split())]
            if value not in types:
                types.append(value)

        if not types:
            return text, result
        text = " ".join(_TRANSACTION_TYPE.sub(" ", text).split())
        return text, replace(result, transaction_types=tuple(types))

    @staticmethod
    def _with_range(result: ParsedFinanceSearch, start: date, end: date) -> ParsedFinanceSearch:
        return replace(result, date_from=start.isoformat(), date_to=end.isoformat())


FINANCE_SEARCH_EXAMPLES = {
    "ar": [
        "دخول آخر 30 يوم",
        "مصروفات نوفمبر 2025",
        "حوالة بنكية أكثر من 1000",
        "صراف أبو يزن",
        "أعلى المبالغ هذا الشهر",
    ],
    "en": [
        "income last 30 days",
        "expenses November 2025",
        "bank transfer > 1000",
        "exchange Abu Yazan",
        "highest amounts this month",
    ],
}


def get_finance_search_examples(language: str = "ar") -> List[str]:
    return list(FINANCE_SEARCH_EXAMPLES.get(language, FINANCE_SEARCH_EXAMPLES["ar"]))


# Singleton instance
finance_parser = FinanceSearchParser()
