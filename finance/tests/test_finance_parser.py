"""
Tests for the Finance Search Parser

Run with: python -m pytest finance/tests/test_finance_parser.py -v
"""

from datetime import date

import pytest

from finance.services.finance_parser import (
    FinanceSearchParser,
    ParsedFinanceSearch,
    get_finance_search_examples,
)
from shipments.services.query_parser import NumericConstraint

TODAY = date(2025, 5, 14)


class TestFinanceSearchParser:

    @pytest.fixture
    def parser(self):
        return FinanceSearchParser()

    def parse(self, parser, query):
        return parser.parse(query, today=TODAY)

    # ==========================================================================
    # Direction
    # ==========================================================================

    def test_income_last_days(self, parser):
        """'دخول آخر 30 يوم' → income, last 30 days."""
        result = self.parse(parser, "دخول آخر 30 يوم")
        assert result.direction == "in"
        assert (result.date_from, result.date_to) == ("2025-04-14", "2025-05-14")
        assert result.general_term is None

    def test_expense(self, parser):
        assert self.parse(parser, "expenses").direction == "out"

    def test_both_directions_cancel(self, parser):
        """Mentioning income and expense sets no direction."""
        assert self.parse(parser, "income and expense").direction is None

    def test_direction_is_whole_word(self, parser):
        """'in' inside 'invoice' is not a direction."""
        result = self.parse(parser, "invoice")
        assert result.direction is None
        assert result.general_term == "invoice"

    # ==========================================================================
    # Transaction types
    # ==========================================================================

    def test_bank_transfer_with_amount(self, parser):
        """'bank transfer > 1000' → one type and an amount."""
        result = self.parse(parser, "bank transfer > 1000")
        assert result.transaction_types == ("bank_transfer",)
        assert result.amount_usd == NumericConstraint(">", 1000.0)
        assert result.general_term is None

    def test_arabic_transfer_with_amount_phrase(self, parser):
        result = self.parse(parser, "حوالة بنكية أكثر من 1000")
        assert result.transaction_types == ("bank_transfer",)
        assert result.amount_usd == NumericConstraint(">", 1000.0)

    def test_types_deduplicated_in_order(self, parser):
        result = self.parse(parser, "cash or cheque or cash")
        assert result.transaction_types == ("cash", "check")
        assert result.general_term == "or or"

    def test_exchange_with_party(self, parser):
        result = self.parse(parser, "exchange Abu Yazan")
        assert result.transaction_types == ("exchange",)
        assert result.general_term == "Abu Yazan"

    # ==========================================================================
    # Dates
    # ==========================================================================

    def test_month_and_year(self, parser):
        """'expenses November 2025' → the whole of November."""
        result = self.parse(parser, "expenses November 2025")
        assert result.direction == "out"
        assert (result.date_from, result.date_to) == ("2025-11-01", "2025-11-30")
        assert result.general_term is None

    def test_arabic_month_and_year(self, parser):
        result = self.parse(parser, "مصروفات نوفمبر 2025")
        assert result.direction == "out"
        assert (result.date_from, result.date_to) == ("2025-11-01", "2025-11-30")

    def test_year_alone(self, parser):
        result = self.parse(parser, "2024")
        assert (result.date_from, result.date_to) == ("2024-01-01", "2024-12-31")

    def test_month_alone_uses_current_year(self, parser):
        result = self.parse(parser, "february")
        assert (result.date_from, result.date_to) == ("2025-02-01", "2025-02-28")

    def test_this_month_ends_today(self, parser):
        result = self.parse(parser, "this month")
        assert (result.date_from, result.date_to) == ("2025-05-01", "2025-05-14")

    def test_last_month(self, parser):
        result = self.parse(parser, "الشهر الماضي")
        assert (result.date_from, result.date_to) == ("2025-04-01", "2025-04-30")

    def test_this_year_ends_today(self, parser):
        result = self.parse(parser, "this year")
        assert (result.date_from, result.date_to) == ("2025-01-01", "2025-05-14")

    # ==========================================================================
    # Amount and sort
    # ==========================================================================

    def test_amount_keyword(self, parser):
        result = self.parse(parser, "amount <= 250.5")
        assert result.amount_usd == NumericConstraint("<=", 250.5)
        assert result.general_term is None

    def test_amount_is_not_a_year(self, parser):
        """The amount is read before the year."""
        result = self.parse(parser, "amount > 2025 2024")
        assert result.amount_usd == NumericConstraint(">", 2025.0)
        assert result.date_from == "2024-01-01"

    def test_highest_amounts_this_month(self, parser):
        result = self.parse(parser, "أعلى المبالغ هذا الشهر")
        assert (result.sort_column, result.sort_direction) == ("amount_usd", "desc")
        assert result.date_from == "2025-05-01"
        assert result.general_term is None

    def test_oldest(self, parser):
        result = self.parse(parser, "oldest transactions")
        assert (result.sort_column, result.sort_direction) == ("transaction_date", "asc")

    # ==========================================================================
    # Output
    # ==========================================================================

    def test_empty(self, parser):
        assert parser.parse("") == ParsedFinanceSearch()
        assert parser.parse(None).to_dict() == {}

    def test_to_dict(self, parser):
        data = self.parse(parser, "income cash amount > 500").to_dict()
        assert data == {
            "direction": "in",
            "transactionTypes": ["cash"],
            "amountUsd": {"operator": ">", "value": 500},
        }

    @pytest.mark.parametrize("query", ["<>", "amount > ", "2099999", "آخر 99999999999 يوم", "و"])
    def test_never_raises(self, parser, query):
        assert isinstance(self.parse(parser, query), ParsedFinanceSearch)

    def test_examples_parse(self, parser):
        for language in ("ar", "en"):
            examples = get_finance_search_examples(language)
            assert len(examples) == 5
            for example in examples:
                assert self.parse(parser, example).to_dict()
