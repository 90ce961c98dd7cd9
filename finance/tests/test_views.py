"""
Tests for the finance search API endpoints.
"""

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def client():
    return APIClient()


class TestFinanceSearchViews:

    def test_parse(self, client):
        response = client.get("/api/v1/finance/search/parse/", {"q": "bank transfer > 1000"})
        assert response.status_code == 200
        assert response.json()["parsed"] == {
            "transactionTypes": ["bank_transfer"],
            "amountUsd": {"operator": ">", "value": 1000},
        }

    def test_parse_empty(self, client):
        response = client.get("/api/v1/finance/search/parse/")
        assert response.json() == {"query": "", "parsed": {}}

    def test_examples(self, client):
        response = client.get("/api/v1/finance/search/examples/", {"lang": "ar"})
        assert response.status_code == 200
        assert response.json()["examples"][0] == "دخول آخر 30 يوم"

    def test_examples_bad_language(self, client):
        response = client.get("/api/v1/finance/search/examples/", {"lang": "de"})
        assert response.status_code == 400
