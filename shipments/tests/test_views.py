"""
Tests for the shipment search API endpoints.

Run with: python -m pytest shipments/tests/test_views.py -v
"""

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def client():
    return APIClient()


class TestSearchParseView:

    def test_parse(self, client):
        response = client.get("/api/v1/shipments/search/parse/", {"q": "rice from India to Iraq", "lang": "en"})
        assert response.status_code == 200
        data = response.json()
        assert data["query"] == "rice from India to Iraq"
        assert data["parsed"] == {"generalTerm": "رز", "origins": ["الهند"], "destinations": ["العراق"]}
        assert data["summary"] == "رز from الهند to العراق"

    def test_missing_query(self, client):
        """No q is an empty parse, not an error."""
        response = client.get("/api/v1/shipments/search/parse/")
        assert response.status_code == 200
        assert response.json()["parsed"] == {}

    def test_query_sanitized(self, client):
        response = client.get("/api/v1/shipments/search/parse/", {"q": "<b>pepper</b>  value <5000"})
        data = response.json()
        assert data["query"] == "pepper value <5000"
        assert data["parsed"]["totalValue"] == {"operator": "<", "value": 5000}

    def test_unknown_language(self, client):
        response = client.get("/api/v1/shipments/search/parse/", {"q": "rice", "lang": "fr"})
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["detail"]["field"] == "lang"


class TestListingQueryView:

    def test_merges_manual_filters(self, client):
        response = client.get("/api/v1/shipments/search/listing/", {
            "q": "shipments to Mersin value less than 50000",
            "totalValue": "20000",
            "status": "in_transit",
            "page": "2",
        })
        assert response.status_code == 200
        params = response.json()["params"]
        assert params["pod"] == "مرسين"
        assert params["totalValueOp"] == "<"
        assert params["totalValue"] == 20000
        assert params["status"] == "in_transit"
        assert params["page"] == 2

    def test_sort_touched(self, client):
        response = client.get("/api/v1/shipments/search/listing/", {
            "q": "highest remaining balance",
            "sortBy": "weight_ton",
            "sortDir": "desc",
            "sortTouched": "true",
        })
        params = response.json()["params"]
        assert (params["sortBy"], params["sortDir"]) == ("weight_ton", "desc")

    def test_invalid_operator(self, client):
        response = client.get("/api/v1/shipments/search/listing/", {"weightOp": "!="})
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["detail"]["field"] == "weightOp"

    def test_non_numeric_value(self, client):
        response = client.get("/api/v1/shipments/search/listing/", {"balance": "lots"})
        assert response.status_code == 400
        assert body_field(response) == "balance"

    def test_backwards_date_range(self, client):
        response = client.get("/api/v1/shipments/search/listing/", {
            "etaFrom": "2025-06-01",
            "etaTo": "2025-01-01",
        })
        assert response.status_code == 400

    def test_limit_clamped(self, client):
        response = client.get("/api/v1/shipments/search/listing/", {"limit": "100000"})
        assert response.json()["params"]["limit"] == 100


class TestExamplesAndHealth:

    def test_examples(self, client):
        response = client.get("/api/v1/shipments/search/examples/", {"lang": "en"})
        assert response.status_code == 200
        data = response.json()
        assert data["language"] == "en"
        assert len(data["examples"]) == 6
        assert "from" in data["keywords"]["origin"]

    def test_examples_default_arabic(self, client):
        response = client.get("/api/v1/shipments/search/examples/")
        assert response.json()["language"] == "ar"

    def test_health(self, client):
        response = client.get("/api/v1/health/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_api_root(self, client):
        response = client.get("/api/")
        assert "shipments" in response.json()["endpoints"]


def body_field(response):
    return response.json()["detail"]["field"]
