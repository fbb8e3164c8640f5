from bson import ObjectId
from conftest import create_product, create_shop

from quickmart.models.product import Product


def test_create_product_requires_shop(client, owner):
    headers, _ = owner

    r = client.post(
        "/api/products",
        json={"name": "Apple", "price": 2.5, "unit": "kg", "category": "Fruits"},
        headers=headers,
    )
    assert r.status_code == 404
    assert r.get_json()["message"] == "Shop not found. Please create your shop first"


def test_list_products_without_shop_is_empty(client, owner):
    headers, _ = owner

    r = client.get("/api/products", headers=headers)
    assert r.status_code == 200
    assert r.get_json()["data"]["products"] == []


def test_create_product_forces_own_shop(client, owner, shop):
    headers, _ = owner

    product = create_product(
        client, headers, shop_id=str(ObjectId()), original_price=4.0, discount=25
    )
    assert product["shop_id"] == shop["id"]
    assert product["price"] == 2.5
    assert product["discounted_price"] == 3.0
    assert product["is_available"] is True

    r = client.get("/api/products", headers=headers)
    assert [p["id"] for p in r.get_json()["data"]["products"]] == [product["id"]]


def test_create_product_validates_unit(client, owner, shop):
    headers, _ = owner

    r = client.post(
        "/api/products",
        json={"name": "Apple", "price": 2.5, "unit": "crate", "category": "Fruits"},
        headers=headers,
    )
    assert r.status_code == 400
    assert r.get_json()["message"].startswith("Field 'unit' is not valid.")


def test_update_and_delete_own_product(client, owner, product):
    headers, _ = owner

    r = client.put(
        f"/api/products/{product['id']}",
        json={"price": 3.0, "is_available": False},
        headers=headers,
    )
    assert r.status_code == 200
    updated = r.get_json()["data"]["product"]
    assert updated["price"] == 3.0
    assert updated["is_available"] is False

    r = client.put(
        f"/api/products/{product['id']}/stock", json={"stock": 42}, headers=headers
    )
    assert r.status_code == 200
    assert r.get_json()["data"]["product"]["stock"] == 42

    r = client.delete(f"/api/products/{product['id']}", headers=headers)
    assert r.status_code == 200
    assert Product.objects.count() == 0


def test_cross_shop_writes_are_not_found(client, register_user, product):
    other_headers, _ = register_user(role="shop_owner")
    create_shop(client, other_headers, name="Rival Mart")

    r = client.put(
        f"/api/products/{product['id']}", json={"price": 0.1}, headers=other_headers
    )
    assert r.status_code == 404
    r = client.put(
        f"/api/products/{product['id']}/stock", json={"stock": 0}, headers=other_headers
    )
    assert r.status_code == 404
    r = client.delete(f"/api/products/{product['id']}", headers=other_headers)
    assert r.status_code == 404

    stored = Product.objects.get(id=product["id"])
    assert stored.price == 2.5
    assert stored.stock == 10


def test_malformed_product_id(client, owner, shop):
    headers, _ = owner

    r = client.put("/api/products/not-an-id", json={"price": 1}, headers=headers)
    assert r.status_code == 400
    assert r.get_json()["message"] == "Invalid ID format"


def test_negative_stock_is_rejected(client, owner, product):
    headers, _ = owner

    r = client.put(
        f"/api/products/{product['id']}/stock", json={"stock": -1}, headers=headers
    )
    assert r.status_code == 400


def test_update_rejects_blank_required_fields(client, owner, product):
    headers, _ = owner

    r = client.put(
        f"/api/products/{product['id']}",
        json={"name": "", "category": "  "},
        headers=headers,
    )
    assert r.status_code == 400
    assert r.get_json()["message"] == "name can't be empty"

    r = client.put(
        f"/api/products/{product['id']}", json={"category": "  "}, headers=headers
    )
    assert r.status_code == 400
    assert r.get_json()["message"] == "category can't be empty"

    stored = Product.objects.get(id=product["id"])
    assert stored.name == "Apple"
    assert stored.category == "Fruits"
