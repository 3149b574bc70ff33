"""
Tests for the error contract and its non-flat variant.
"""

import pytest

from fleetboard.core.errors import (
    FleetboardError,
    RecordNotFoundError,
    InvalidPayloadError,
)


@pytest.fixture
def detailed_errors(settings, monkeypatch):
    monkeypatch.setattr(settings, "flat_errors", False)
    return settings


class TestTaxonomy:
    
    def test_not_found_message(self):
        error = RecordNotFoundError("order", "O-9")
        assert str(error) == "order O-9 not found"
        assert error.status_code == 404
        assert isinstance(error, FleetboardError)
    
    def test_invalid_payload_status(self):
        assert InvalidPayloadError("bad").status_code == 400


class TestFlatErrors:
    
    async def test_not_found_is_500(self, client):
        response = await client.delete("/api/drivers/DRV-404")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}
    
    async def test_malformed_json_is_500(self, client):
        response = await client.patch(
            "/api/orders/bulk",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}


class TestDetailedErrors:
    
    async def test_not_found_is_404(self, client, detailed_errors):
        response = await client.patch("/api/orders/O-404", json={"status": "Delivered"})
        assert response.status_code == 404
        assert response.json() == {"error": "order O-404 not found"}
    
    async def test_validation_is_400(self, client, detailed_errors):
        response = await client.request("DELETE", "/api/orders/bulk", json={"ids": "O-1"})
        assert response.status_code == 400
        assert response.json() == {"error": "Malformed request"}


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "connected"}


async def test_root(client, settings):
    body = (await client.get("/")).json()
    assert body["service"] == settings.app_title
