"""Tests for transactions API endpoints."""

import pytest


class TestTransactionsAPI:
    """Test list and create endpoints."""

    def test_list_transactions_empty(self, client):
        """Should return empty list."""
        response = client.get("/api/v1/transactions")
        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["total"] == 0

    def test_list_transactions_with_data(self, client, sample_transactions):
        """Should return numbered transactions, newest first."""
        response = client.get("/api/v1/transactions")
        data = response.json()
        assert data["total"] == 3
        assert [item["no"] for item in data["items"]] == [1, 2, 3]
        assert data["items"][0]["description"] == "Bonus"

    def test_create_transaction(self, client, sample_bank, sample_destination):
        response = client.post("/api/v1/transactions", json={
            "date": "2024-03-01",
            "description": "Listrik",
            "kind": "EXPENSE",
            "amount": "120.50",
            "destination_id": sample_destination.id,
            "bank_id": sample_bank.id,
        })
        assert response.status_code == 201
        data = response.json()
        assert data["is_bank"] is True
        assert data["kind"] == "EXPENSE"

    def test_create_transaction_unknown_source(self, client):
        response = client.post("/api/v1/transactions", json={
            "date": "2024-03-01",
            "kind": "INCOME",
            "amount": "10",
            "source_id": "does-not-exist",
        })
        assert response.status_code == 404

    def test_create_transaction_negative_amount(self, client):
        response = client.post("/api/v1/transactions", json={
            "date": "2024-03-01",
            "kind": "INCOME",
            "amount": "-10",
        })
        assert response.status_code == 422


class TestTransactionTableAPI:
    """Test the filtered, sorted and paginated table."""

    def test_default_view(self, client, sample_transactions):
        response = client.get("/api/v1/transactions/table")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert data["page"] == 1
        assert data["pages"] == 1
        assert data["page_size"] == 15
        assert float(data["total_balance"]) == 75

    def test_filter_by_kind(self, client, sample_transactions):
        response = client.get("/api/v1/transactions/table", params={"kind": "INCOME"})
        data = response.json()
        assert data["total"] == 2
        assert float(data["total_balance"]) == 125

    def test_filter_by_destination(self, client, sample_transactions):
        response = client.get("/api/v1/transactions/table", params={"destinations": ["Makan"]})
        data = response.json()
        assert [item["description"] for item in data["items"]] == ["Makan siang"]

    def test_sources_and_destinations_together_rejected(self, client, sample_transactions):
        response = client.get(
            "/api/v1/transactions/table",
            params={"sources": ["Gaji"], "destinations": ["Makan"]}
        )
        assert response.status_code == 422

    def test_amount_thresholds(self, client, sample_transactions):
        response = client.get("/api/v1/transactions/table", params={"amount_above": "25"})
        assert [i["description"] for i in response.json()["items"]] == ["Makan siang", "Gaji Januari"]

        response = client.get("/api/v1/transactions/table", params={"amount_equal": "25"})
        assert [i["description"] for i in response.json()["items"]] == ["Bonus"]

    def test_account_type(self, client, sample_transactions):
        response = client.get("/api/v1/transactions/table", params={"account": "CASH"})
        assert response.json()["total"] == 0

    def test_search(self, client, sample_transactions):
        response = client.get("/api/v1/transactions/table", params={"search": "gaji"})
        # "Gaji" matches the description of one row and the source of two
        assert response.json()["total"] == 2

    def test_date_window(self, client, sample_transactions):
        response = client.get("/api/v1/transactions/table", params={
            "start_date": "2024-01-02",
            "end_date": "2024-01-02",
        })
        assert [i["description"] for i in response.json()["items"]] == ["Makan siang"]

    def test_sort_and_paginate(self, client, sample_transactions):
        response = client.get("/api/v1/transactions/table", params={
            "sort_by": "amount",
            "direction": "desc",
            "page_size": 10,
        })
        data = response.json()
        assert [float(i["amount"]) for i in data["items"]] == [100, 50, 25]

    def test_page_past_end_is_empty(self, client, sample_transactions):
        response = client.get("/api/v1/transactions/table", params={"page": 5})
        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["total"] == 3

    def test_unknown_page_size(self, client):
        response = client.get("/api/v1/transactions/table", params={"page_size": 12})
        assert response.status_code == 422

    def test_all_sentinels(self, client, sample_transactions):
        response = client.get("/api/v1/transactions/table", params={
            "kind": "SEMUA",
            "account": "SEMUA",
            "amount_above": 0,
            "amount_below": 0,
            "amount_equal": 0,
        })
        assert response.json()["total"] == 3
