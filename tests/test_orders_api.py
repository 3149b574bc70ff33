"""
Tests for the /api/orders endpoints.
"""

import pytest
from sqlalchemy import select

from fleetboard.models import Order


class TestListOrders:
    
    async def test_second_page_of_seven(self, client, seven_orders):
        response = await client.get("/api/orders?page=2&pageSize=5")
        assert response.status_code == 200
        
        body = response.json()
        assert len(body["data"]) == 2
        assert body["total"] == 7
        assert body["page"] == 2
        assert body["pageSize"] == 5
        assert body["totalPages"] == 2
    
    async def test_records_expose_business_key_as_id(self, client, seven_orders):
        body = (await client.get("/api/orders?pageSize=10")).json()
        
        assert len(body["data"]) == 7
        for item in body["data"]:
            assert item["id"] == item["orderId"]
            assert "serviceType" in item
            assert "createdAt" in item
    
    async def test_defaults(self, client, seven_orders):
        body = (await client.get("/api/orders")).json()
        assert body["page"] == 1
        assert body["pageSize"] == 5
        assert [o["id"] for o in body["data"]] == ["O-7", "O-6", "O-5", "O-4", "O-3"]
    
    @pytest.mark.parametrize("params", [
        "page=abc",
        "page=-1&pageSize=0",
        "pageSize=lots",
        "direction=up",
        "sort=notAField",
    ])
    async def test_malformed_params_do_not_fail(self, client, seven_orders, params):
        response = await client.get(f"/api/orders?{params}")
        assert response.status_code == 200
        body = response.json()
        assert body["page"] == 1
        assert body["pageSize"] == 5
        assert body["total"] == 7
    
    async def test_page_beyond_last(self, client, seven_orders):
        body = (await client.get("/api/orders?page=5&pageSize=5")).json()
        assert body["data"] == []
        assert body["total"] == 7
        assert body["totalPages"] == 2
    
    async def test_direction_without_sort_flips_default_order(self, client, seven_orders):
        body = (await client.get("/api/orders?direction=asc&pageSize=7")).json()
        assert [o["id"] for o in body["data"]] == [f"O-{i}" for i in range(1, 8)]
    
    @pytest.mark.parametrize("params,expected_count,expected_pages", [
        ("page=99999999999999999999", 0, 2),
        ("pageSize=99999999999999999999", 7, 1),
    ])
    async def test_out_of_range_numbers(self, client, seven_orders, params, expected_count, expected_pages):
        response = await client.get(f"/api/orders?{params}")
        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == expected_count
        assert body["total"] == 7
        assert body["totalPages"] == expected_pages
    
    async def test_sort_by_id_ascending(self, client, seven_orders):
        alias = (await client.get("/api/orders?sort=id&direction=asc&pageSize=7")).json()
        explicit = (await client.get("/api/orders?sort=orderId&direction=asc&pageSize=7")).json()
        
        ids = [o["id"] for o in alias["data"]]
        assert ids == [o["id"] for o in explicit["data"]]
        assert ids == sorted(ids)
    
    async def test_search(self, client, seven_orders):
        body = (await client.get("/api/orders?search=O-3")).json()
        assert body["total"] == 1
        assert body["data"][0]["id"] == "O-3"


class TestCreateOrder:
    
    async def test_create_echoes_record(self, client):
        response = await client.post("/api/orders", json={
            "orderId": "ORD-9001",
            "customer": "Acme Corp",
            "destination": "Seattle, WA",
            "status": "Pending",
            "priority": "High",
        })
        assert response.status_code == 200
        
        body = response.json()
        assert body["success"] is True
        assert body["data"]["id"] == "ORD-9001"
        assert body["data"]["serviceType"] == "Standard Delivery"
        
        listed = (await client.get("/api/orders")).json()
        assert listed["total"] == 1
    
    async def test_missing_fields_is_flat_error(self, client):
        response = await client.post("/api/orders", json={"orderId": "ORD-1"})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}


class TestUpdateOrder:
    
    async def test_patch_updates_given_fields_only(self, client, five_orders):
        original_destination = five_orders[0].destination
        
        response = await client.patch("/api/orders/O-1", json={"status": "Delivered"})
        assert response.status_code == 200
        
        body = response.json()
        assert body["id"] == "O-1"
        assert body["status"] == "Delivered"
        assert body["destination"] == original_destination
    
    async def test_patch_missing_order(self, client, five_orders):
        response = await client.patch("/api/orders/O-404", json={"status": "Delivered"})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}


class TestDeleteOrder:
    
    async def test_delete_returns_deleted_record(self, client, five_orders, db_session):
        response = await client.delete("/api/orders/O-2")
        assert response.status_code == 200
        assert response.json()["id"] == "O-2"
        
        result = await db_session.execute(select(Order).where(Order.order_id == "O-2"))
        assert result.scalar_one_or_none() is None
    
    async def test_delete_missing_order(self, client):
        response = await client.delete("/api/orders/O-404")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}


class TestBulkOrders:
    
    async def test_bulk_delete(self, client, five_orders):
        response = await client.request(
            "DELETE", "/api/orders/bulk", json={"ids": ["O-1", "O-2"]}
        )
        assert response.status_code == 200
        assert response.json() == {"count": 2}
        
        body = (await client.get("/api/orders")).json()
        assert body["total"] == 3
        remaining = {o["id"] for o in body["data"]}
        assert "O-1" not in remaining
        assert "O-2" not in remaining
    
    async def test_bulk_update_applies_status_only(self, client, five_orders):
        customers = {o.order_id: o.customer for o in five_orders}
        
        response = await client.patch("/api/orders/bulk", json={
            "ids": ["O-1", "O-3", "O-5"],
            "data": {"status": "Delayed", "customer": "Overwritten Inc", "other": "Y"},
        })
        assert response.status_code == 200
        assert response.json() == {"count": 3}
        
        body = (await client.get("/api/orders?pageSize=10")).json()
        by_id = {o["id"]: o for o in body["data"]}
        for key in ("O-1", "O-3", "O-5"):
            assert by_id[key]["status"] == "Delayed"
            assert by_id[key]["customer"] == customers[key]
            assert "other" not in by_id[key]
        for key in ("O-2", "O-4"):
            assert by_id[key]["customer"] == customers[key]
    
    async def test_bulk_update_without_status_changes_nothing(self, client, five_orders):
        statuses = {o.order_id: o.status for o in five_orders}
        
        response = await client.patch("/api/orders/bulk", json={
            "ids": ["O-1", "O-2", "O-404"],
            "data": {"priority": "Critical"},
        })
        assert response.status_code == 200
        assert response.json() == {"count": 2}
        
        body = (await client.get("/api/orders?pageSize=10")).json()
        for item in body["data"]:
            assert item["status"] == statuses[item["id"]]
    
    async def test_bulk_delete_without_ids_is_flat_error(self, client, five_orders):
        response = await client.request("DELETE", "/api/orders/bulk", json={})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}
    
    async def test_bulk_delete_unknown_ids(self, client, five_orders):
        response = await client.request("DELETE", "/api/orders/bulk", json={"ids": ["X-1"]})
        assert response.json() == {"count": 0}


async def test_bulk_update_rejects_non_string_status(client, five_orders):
    response = await client.patch(
        "/api/orders/bulk",
        json={"ids": ["O-1"], "data": {"status": {"nested": True}}},
    )
    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}


@pytest.mark.parametrize("status", [0, False])
async def test_bulk_update_rejects_falsy_non_string_status(client, five_orders, status):
    response = await client.patch(
        "/api/orders/bulk",
        json={"ids": ["O-1"], "data": {"status": status}},
    )
    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}
