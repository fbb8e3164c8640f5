import itertools

import mongomock
import pytest

from quickmart import create_app
from quickmart.config import TestingConfig
from quickmart.extensions import close_mongoengine
from quickmart.models.delivery_agent import DeliveryAgent
from quickmart.models.order import Order
from quickmart.models.product import Product
from quickmart.models.shop import Shop
from quickmart.models.user import User

MODELS = (User, Shop, Product, Order, DeliveryAgent)

PASSWORD = "secret123"

_account_numbers = itertools.count(1)


@pytest.fixture(scope="session")
def app():
    app = create_app(TestingConfig, mongo_client_class=mongomock.MongoClient)
    yield app
    close_mongoengine()


@pytest.fixture(autouse=True)
def clean_db(app):
    for model in MODELS:
        model.drop_collection()
    yield


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register_user(client):
    counter = {"n": 0}

    def _register(role="customer", email=None, **overrides):
        counter["n"] += 1
        payload = {
            "name": f"User {counter['n']}",
            "email": email or f"user{counter['n']}@example.com",
            "password": PASSWORD,
            "phone": "+1 555 123 4567",
            "address": "12 Market Street",
            "role": role,
        }
        payload.update(overrides)
        r = client.post("/api/auth/register", json=payload)
        assert r.status_code == 201, r.get_json()
        data = r.get_json()["data"]
        return auth_header(data["token"]), data["user"]

    return _register


@pytest.fixture
def owner(register_user):
    return register_user(role="shop_owner")


@pytest.fixture
def customer(register_user):
    return register_user(role="customer")


@pytest.fixture
def agent(register_user):
    return register_user(role="delivery_agent")


def create_shop(client, headers, **overrides):
    payload = {
        "name": "Test Mart",
        "address": "1 Main Road",
        "phone": "+1 555 000 1111",
        "email": "shop@example.com",
    }
    payload.update(overrides)
    r = client.post("/api/shops", json=payload, headers=headers)
    assert r.status_code in (200, 201), r.get_json()
    return r.get_json()["data"]["shop"]


def create_product(client, headers, **overrides):
    payload = {
        "name": "Apple",
        "price": 2.5,
        "unit": "kg",
        "stock": 10,
        "category": "Fruits",
    }
    payload.update(overrides)
    r = client.post("/api/products", json=payload, headers=headers)
    assert r.status_code == 201, r.get_json()
    return r.get_json()["data"]["product"]


def place_order(client, headers, shop_id, product_id, quantity=2, **overrides):
    payload = {
        "shop_id": shop_id,
        "items": [{"product_id": product_id, "quantity": quantity}],
    }
    payload.update(overrides)
    r = client.post("/api/customer/orders", json=payload, headers=headers)
    assert r.status_code == 201, r.get_json()
    return r.get_json()["data"]["order"]


def set_order_status(client, headers, order_id, status):
    return client.put(
        f"/api/orders/{order_id}/status", json={"status": status}, headers=headers
    )


@pytest.fixture
def shop(client, owner):
    headers, _ = owner
    return create_shop(client, headers)


@pytest.fixture
def product(client, owner, shop):
    headers, _ = owner
    return create_product(client, headers)


@pytest.fixture
def order(client, customer, shop, product):
    headers, _ = customer
    return place_order(client, headers, shop["id"], product["id"])


@pytest.fixture
def dispatched_order(client, owner, order):
    headers, _ = owner
    for status in ("confirmed", "packed", "dispatched"):
        r = set_order_status(client, headers, order["id"], status)
        assert r.status_code == 200, r.get_json()
    return r.get_json()["data"]["order"]


def create_delivery_account(client, headers, **overrides):
    number = next(_account_numbers)
    payload = {
        "agency_name": "Fast Riders",
        "address": "7 Depot Lane",
        "license_number": f"dl-{number:04d}",
        "mobile_number": "+1 555 987 6543",
        "vehicle_type": "bike",
        "vehicle_number": f"ka-01-{number:04d}",
    }
    payload.update(overrides)
    return client.post("/api/delivery/create-account", json=payload, headers=headers)


@pytest.fixture
def courier(client, agent):
    headers, user = agent
    r = create_delivery_account(client, headers)
    assert r.status_code == 201, r.get_json()
    return headers, user
