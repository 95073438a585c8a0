# tests/items/test_items_routes.py
"""Tests for the item CRUD endpoints."""

import pytest
from httpx import AsyncClient

MILK = {"name": "Milk", "price": 3.99, "description": "1 litre"}
BREAD = {"name": "Bread", "price": 2.5}


class TestCreateItem:
    @pytest.mark.asyncio
    async def test_create_returns_item(self, client: AsyncClient) -> None:
        response = await client.post("/create-item/1", json=MILK)
        assert response.status_code == 200
        assert response.json() == MILK

    @pytest.mark.asyncio
    async def test_description_defaults_to_null(self, client: AsyncClient) -> None:
        response = await client.post("/create-item/2", json=BREAD)
        assert response.status_code == 200
        assert response.json() == {**BREAD, "description": None}

    @pytest.mark.asyncio
    async def test_duplicate_id_rejected(self, client: AsyncClient) -> None:
        await client.post("/create-item/1", json=MILK)

        response = await client.post("/create-item/1", json=BREAD)
        assert response.status_code == 400
        assert response.json() == {"detail": "Item ID already exists"}

        # Original item untouched
        stored = await client.get("/get-item/1")
        assert stored.json()["name"] == "Milk"

    @pytest.mark.asyncio
    async def test_missing_required_field(self, client: AsyncClient) -> None:
        response = await client.post("/create-item/1", json={"name": "Milk"})
        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == "Validation failed"
        assert any(err["field"] == "price" for err in data["errors"])

    @pytest.mark.asyncio
    async def test_negative_price_accepted(self, client: AsyncClient) -> None:
        response = await client.post("/create-item/3", json={"name": "Refund", "price": -1.0})
        assert response.status_code == 200
        assert response.json()["price"] == -1.0


class TestGetItem:
    @pytest.mark.asyncio
    async def test_create_then_get(self, client: AsyncClient) -> None:
        await client.post("/create-item/1", json=MILK)

        response = await client.get("/get-item/1")
        assert response.status_code == 200
        assert response.json() == MILK

    @pytest.mark.asyncio
    async def test_unknown_id(self, client: AsyncClient) -> None:
        response = await client.get("/get-item/99")
        assert response.status_code == 404
        assert response.json() == {"detail": "Item ID not found."}

    @pytest.mark.asyncio
    async def test_matching_name_filter(self, client: AsyncClient) -> None:
        await client.post("/create-item/1", json=MILK)

        response = await client.get("/get-item/1", params={"name": "Milk"})
        assert response.status_code == 200
        assert response.json()["name"] == "Milk"

    @pytest.mark.asyncio
    async def test_mismatched_name_filter(self, client: AsyncClient) -> None:
        await client.post("/create-item/1", json=MILK)

        response = await client.get("/get-item/1", params={"name": "Bread"})
        assert response.status_code == 404
        assert response.json() == {"detail": "Item name not found."}

    @pytest.mark.asyncio
    async def test_non_integer_id(self, client: AsyncClient) -> None:
        response = await client.get("/get-item/abc")
        assert response.status_code == 422
        error = response.json()["errors"][0]
        assert error["location"] == "path"
        assert error["field"] == "item_id"


class TestUpdateItem:
    @pytest.mark.asyncio
    async def test_price_only_update(self, client: AsyncClient) -> None:
        await client.post("/create-item/1", json=MILK)

        response = await client.put("/update-item/1", json={"price": 4.25})
        assert response.status_code == 200
        assert response.json() == {**MILK, "price": 4.25}

        stored = await client.get("/get-item/1")
        assert stored.json() == {**MILK, "price": 4.25}

    @pytest.mark.asyncio
    async def test_explicit_nulls_preserve_fields(self, client: AsyncClient) -> None:
        await client.post("/create-item/1", json=MILK)

        response = await client.put(
            "/update-item/1",
            json={"name": None, "price": None, "description": None},
        )
        assert response.status_code == 200
        assert response.json() == MILK

    @pytest.mark.asyncio
    async def test_update_every_field(self, client: AsyncClient) -> None:
        await client.post("/create-item/1", json=MILK)
        new = {"name": "Oat milk", "price": 4.49, "description": "Barista edition"}

        response = await client.put("/update-item/1", json=new)
        assert response.status_code == 200
        assert response.json() == new

    @pytest.mark.asyncio
    async def test_unknown_id(self, client: AsyncClient) -> None:
        response = await client.put("/update-item/5", json={"price": 1.0})
        assert response.status_code == 404
        assert response.json() == {"detail": "Item ID does not exist."}


class TestDeleteItem:
    @pytest.mark.asyncio
    async def test_delete_then_get(self, client: AsyncClient) -> None:
        await client.post("/create-item/1", json=MILK)

        response = await client.delete("/delete-item/1")
        assert response.status_code == 200
        assert response.json() == {"Success": "Item deleted!"}

        gone = await client.get("/get-item/1")
        assert gone.status_code == 404
        assert gone.json() == {"detail": "Item ID not found."}

    @pytest.mark.asyncio
    async def test_unknown_id(self, client: AsyncClient) -> None:
        response = await client.delete("/delete-item/7")
        assert response.status_code == 404
        assert response.json() == {"detail": "Item ID does not exist."}

    @pytest.mark.asyncio
    async def test_id_reusable_after_delete(self, client: AsyncClient) -> None:
        await client.post("/create-item/1", json=MILK)
        await client.delete("/delete-item/1")

        response = await client.post("/create-item/1", json=BREAD)
        assert response.status_code == 200
        assert response.json()["name"] == "Bread"


class TestAllItems:
    @pytest.mark.asyncio
    async def test_empty(self, client: AsyncClient) -> None:
        response = await client.get("/all-items")
        assert response.status_code == 200
        assert response.json() == {"items": []}

    @pytest.mark.asyncio
    async def test_lists_every_item(self, client: AsyncClient) -> None:
        await client.post("/create-item/1", json=MILK)
        await client.post("/create-item/2", json=BREAD)

        response = await client.get("/all-items")
        names = sorted(item["name"] for item in response.json()["items"])
        assert names == ["Bread", "Milk"]
