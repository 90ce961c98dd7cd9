"""
Tests for merging a parsed search with the manual listing filters.
"""

from datetime import date

from shipments.services.listing_query import ManualFilters, build_listing_params
from shipments.services.query_parser import NumericConstraint, ParsedQuery, QueryParser


class TestBuildListingParams:

    def test_empty(self):
        """Nothing parsed, nothing set: paging and default sort only."""
        assert build_listing_params(ParsedQuery()) == {
            "page": 1,
            "limit": 20,
            "sortBy": "eta",
            "sortDir": "asc",
        }

    def test_parsed_fields(self):
        parsed = ParsedQuery(
            general_term="رز",
            origins=("الهند", "الصين"),
            destinations=("العراق",),
            excluded_products=("بسمتي", "رز ياسمين"),
            total_value=NumericConstraint("<", 50000.0),
        )
        params = build_listing_params(parsed)
        assert params["search"] == "رز"
        assert params["pol"] == "الهند,الصين"
        assert params["pod"] == "العراق"
        assert params["excludeProduct"] == "بسمتي,رز ياسمين"
        assert params["totalValueOp"] == "<"
        assert params["totalValue"] == 50000

    def test_products_joined(self):
        params = build_listing_params(ParsedQuery(products=("rice", "pepper")))
        assert params["product"] == "rice,pepper"
        assert "search" not in params

    def test_comma_separated_query_joins_cleanly(self):
        """Every joined value splits back into the parsed items."""
        parsed = QueryParser().parse("rice, pepper and sugar from India, China", today=date(2025, 5, 14))
        params = build_listing_params(parsed)
        assert params["pol"] == "الهند,الصين"
        assert params["product"].split(",") == ["رز", "فلفل", "سكر"]

    def test_manual_value_beats_parsed(self):
        """A manual widget value overrides the parsed one."""
        parsed = ParsedQuery(total_value=NumericConstraint("<", 50000.0))
        params = build_listing_params(parsed, ManualFilters(total_value=20000.0))
        assert params["totalValueOp"] == "<"
        assert params["totalValue"] == 20000

    def test_manual_operator_beats_parsed(self):
        parsed = ParsedQuery(weight=NumericConstraint(">", 10.0))
        params = build_listing_params(parsed, ManualFilters(weight_op="<=", weight=5.5))
        assert (params["weightOp"], params["weight"]) == ("<=", 5.5)

    def test_operator_without_value_dropped(self):
        """An operator alone is not a filter."""
        params = build_listing_params(ParsedQuery(), ManualFilters(balance_op=">"))
        assert "balanceOp" not in params
        assert "balance" not in params

    def test_quick_filters_when_nothing_parsed(self):
        manual = ManualFilters(origin="مصر", destination="دبي", product="sugar", status="delivered")
        params = build_listing_params(ParsedQuery(), manual)
        assert (params["pol"], params["pod"], params["product"]) == ("مصر", "دبي", "sugar")
        assert params["status"] == "delivered"

    def test_parsed_places_beat_quick_filters(self):
        parsed = ParsedQuery(origins=("الهند",))
        params = build_listing_params(parsed, ManualFilters(origin="مصر"))
        assert params["pol"] == "الهند"

    def test_month_year_without_range(self):
        params = build_listing_params(ParsedQuery(month=3, year=2025))
        assert (params["etaMonth"], params["etaYear"]) == (3, 2025)
        assert "etaFrom" not in params

    def test_parsed_range(self):
        parsed = ParsedQuery(date_from="2025-01-01", date_to="2025-03-31")
        params = build_listing_params(parsed)
        assert (params["etaFrom"], params["etaTo"]) == ("2025-01-01", "2025-03-31")
        assert "etaMonth" not in params

    def test_manual_range_beats_parsed(self):
        parsed = ParsedQuery(date_from="2025-01-01", date_to="2025-03-31")
        manual = ManualFilters(date_from="2025-06-01")
        params = build_listing_params(parsed, manual)
        assert params["etaFrom"] == "2025-06-01"
        assert "etaTo" not in params

    def test_manual_range_suppresses_month(self):
        params = build_listing_params(ParsedQuery(month=3), ManualFilters(date_to="2025-06-30"))
        assert "etaMonth" not in params
        assert params["etaTo"] == "2025-06-30"

    def test_parsed_sort_beats_manual(self):
        parsed = ParsedQuery(sort_column="balance_value_usd", sort_direction="desc")
        params = build_listing_params(parsed, ManualFilters(sort_column="weight_ton", sort_direction="asc"))
        assert (params["sortBy"], params["sortDir"]) == ("balance_value_usd", "desc")

    def test_clicked_column_beats_parsed_sort(self):
        parsed = ParsedQuery(sort_column="balance_value_usd", sort_direction="desc")
        manual = ManualFilters(sort_column="weight_ton", sort_direction="asc", sort_touched=True)
        params = build_listing_params(parsed, manual)
        assert (params["sortBy"], params["sortDir"]) == ("weight_ton", "asc")

    def test_paging_clamped(self):
        params = build_listing_params(ParsedQuery(), ManualFilters(page=0, limit=5000), max_page_size=100)
        assert (params["page"], params["limit"]) == (1, 100)
