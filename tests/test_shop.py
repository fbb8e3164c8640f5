import pytest
from bson import ObjectId
from conftest import create_product, create_shop, place_order, set_order_status

from quickmart.errors.exceptions import BadRequest
from quickmart.models.shop import Shop
from quickmart.services.shop import ShopService


def test_get_shop_without_shop_returns_null(client, owner):
    headers, _ = owner

    r = client.get("/api/shops", headers=headers)
    assert r.status_code == 200
    assert r.get_json()["data"] == {"shop": None}


def test_upsert_creates_then_updates(client, owner):
    headers, user = owner

    r = client.post(
        "/api/shops",
        json={
            "name": "Test Mart",
            "address": "1 Main Road",
            "phone": "+1 555 000 1111",
            "email": "Shop@Example.com",
        },
        headers=headers,
    )
    assert r.status_code == 201
    assert r.get_json()["message"] == "Shop created successfully"
    shop = r.get_json()["data"]["shop"]
    assert shop["owner_id"] == user["id"]
    assert shop["email"] == "shop@example.com"
    assert shop["is_open"] is True

    r = client.post("/api/shops", json={"name": "Best Mart"}, headers=headers)
    assert r.status_code == 200
    assert r.get_json()["message"] == "Shop updated successfully"
    assert r.get_json()["data"]["shop"]["id"] == shop["id"]
    assert r.get_json()["data"]["shop"]["name"] == "Best Mart"
    assert Shop.objects.count() == 1


def test_create_shop_requires_contact_fields(client, owner):
    headers, _ = owner

    r = client.post("/api/shops", json={"name": "Half Mart"}, headers=headers)
    assert r.status_code == 400
    assert "address" in r.get_json()["message"]
    assert Shop.objects.count() == 0


def test_set_open(client, owner, shop):
    headers, _ = owner

    r = client.put("/api/shops/status", json={"is_open": False}, headers=headers)
    assert r.status_code == 200
    assert r.get_json()["data"]["shop"]["is_open"] is False


def test_set_open_without_shop(client, owner):
    headers, _ = owner

    r = client.put("/api/shops/status", json={"is_open": True}, headers=headers)
    assert r.status_code == 404
    assert r.get_json()["message"] == "Shop not found. Please create your shop first"


def test_stats_without_shop_are_zero(client, owner):
    headers, _ = owner

    r = client.get("/api/shops/stats", headers=headers)
    assert r.status_code == 200
    assert r.get_json()["data"]["stats"] == {
        "total_products": 0,
        "total_orders": 0,
        "pending_orders": 0,
        "total_revenue": 0,
    }


def test_stats_count_products_orders_and_revenue(
    client, owner, customer, courier, shop, product
):
    owner_headers, _ = owner
    customer_headers, _ = customer
    agent_headers, _ = courier
    create_product(client, owner_headers, name="Pear", price=1.0)

    delivered = place_order(client, customer_headers, shop["id"], product["id"], 4)
    place_order(client, customer_headers, shop["id"], product["id"], 1)
    for status in ("confirmed", "packed", "dispatched"):
        set_order_status(client, owner_headers, delivered["id"], status)
    client.put(f"/api/delivery/orders/{delivered['id']}/accept", headers=agent_headers)
    client.put(f"/api/delivery/orders/{delivered['id']}/deliver", headers=agent_headers)

    r = client.get("/api/shops/stats", headers=owner_headers)
    stats = r.get_json()["data"]["stats"]
    assert stats["total_products"] == 2
    assert stats["total_orders"] == 2
    assert stats["pending_orders"] == 1
    assert stats["total_revenue"] == 10.0


def test_shops_are_scoped_to_owner(client, register_user):
    first_headers, _ = register_user(role="shop_owner")
    second_headers, _ = register_user(role="shop_owner")
    first = create_shop(client, first_headers)
    second = create_shop(client, second_headers, name="Other Mart")

    assert first["id"] != second["id"]
    r = client.get("/api/shops", headers=second_headers)
    assert r.get_json()["data"]["shop"]["name"] == "Other Mart"


def test_put_is_an_upsert_alias(client, owner):
    headers, _ = owner

    r = client.put(
        "/api/shops",
        json={
            "name": "Test Mart",
            "address": "1 Main Road",
            "phone": "+1 555 000 1111",
            "email": "shop@example.com",
        },
        headers=headers,
    )
    assert r.status_code == 201

    r = client.put("/api/shops", json={"description": "Fresh food"}, headers=headers)
    assert r.status_code == 200
    assert r.get_json()["data"]["shop"]["description"] == "Fresh food"
    assert Shop.objects.count() == 1


def test_update_rejects_blank_required_fields(client, owner, shop):
    headers, _ = owner

    r = client.post("/api/shops", json={"name": "", "address": ""}, headers=headers)
    assert r.status_code == 400
    assert r.get_json()["message"] == "name can't be empty"

    r = client.put("/api/shops", json={"address": "   "}, headers=headers)
    assert r.status_code == 400
    assert r.get_json()["message"] == "address can't be empty"

    stored = Shop.objects.get(id=shop["id"])
    assert stored.name == "Test Mart"
    assert stored.address == "1 Main Road"


def test_concurrent_create_hits_unique_owner_index(monkeypatch, owner):
    _, user = owner
    owner_id = ObjectId(user["id"])
    # the lookup ran before the other request inserted its shop
    monkeypatch.setattr(
        ShopService, "find_shop_by_owner", staticmethod(lambda owner_id: None)
    )
    Shop(
        owner_id=owner_id,
        name="First Mart",
        address="1 Main Road",
        phone="+1 555 000 1111",
        email="first@example.com",
    ).save()

    with pytest.raises(BadRequest) as exc:
        ShopService.upsert_shop(
            owner_id,
            name="Second Mart",
            address="2 Main Road",
            phone="+1 555 000 2222",
            email="second@example.com",
        )
    assert exc.value.status == 400
    assert exc.value.message == "Shop already exists for this owner"
    assert [s.name for s in Shop.objects(owner_id=owner_id)] == ["First Mart"]
