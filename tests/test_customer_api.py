from datetime import datetime
from unittest.mock import MagicMock

import pytest

from core.exceptions import CustomerStoreError
from crud import customer as crud_customer


def _create(client, name="Ann", phone="555-0100"):
    r = client.post("/customers", json={"name": name, "phone": phone})
    assert r.status_code == 200, r.text
    return r.json()


def test_customer_lifecycle(client):
    ann = _create(client)
    assert ann["id"] == 1
    assert ann["active"] is True
    assert ann["created"]

    r = client.get("/customers/1")
    assert r.status_code == 200
    assert r.json() == ann

    r = client.post("/customers/1/block")
    assert r.status_code == 200
    assert r.json()["active"] is False

    r = client.delete("/customers/1")
    assert r.status_code == 200
    assert r.json() == {**ann, "active": False}

    r = client.get("/customers/1")
    assert r.status_code == 404
    assert r.text == "Not Found"


def test_unblock_restores_active(client):
    ann = _create(client)
    client.post(f"/customers/{ann['id']}/block")

    r = client.delete(f"/customers/{ann['id']}/block")
    assert r.status_code == 200
    assert r.json() == ann


def test_update_via_post_keeps_id_and_created(client):
    ann = _create(client)

    r = client.post("/customers", json={"id": ann["id"], "name": "Anna", "phone": "555-0199"})
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == ann["id"]
    assert body["created"] == ann["created"]
    assert (body["name"], body["phone"]) == ("Anna", "555-0199")


def test_update_of_missing_id_is_500(client):
    # 수정 분기의 없는 id 는 404 가 아니라 500
    r = client.post("/customers", json={"id": 77, "name": "Ghost", "phone": "0"})
    assert r.status_code == 500
    assert r.text == "Internal Server Error"


def test_lists(client):
    r = client.get("/customers")
    assert r.status_code == 200
    assert r.json() == []
    assert client.get("/customers/active").json() == []

    a = _create(client, "A", "1")
    b = _create(client, "B", "2")
    client.post(f"/customers/{a['id']}/block")

    all_ids = [c["id"] for c in client.get("/customers").json()]
    active = client.get("/customers/active").json()
    assert all_ids == [a["id"], b["id"]]
    assert [c["id"] for c in active] == [b["id"]]
    assert all(c["active"] for c in active)


@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/customers/404"),
        ("DELETE", "/customers/404"),
        ("POST", "/customers/404/block"),
        ("DELETE", "/customers/404/block"),
    ],
)
def test_missing_id_is_404(client, method, path):
    r = client.request(method, path)
    assert r.status_code == 404
    assert r.text == "Not Found"
    assert r.headers["content-type"].startswith("text/plain")


@pytest.mark.parametrize(
    "method, path, op",
    [
        ("GET", "/customers/abc", "get"),
        ("GET", "/customers/1.5", "get"),
        ("GET", "/customers/9223372036854775808", "get"),
        ("GET", "/customers/-9223372036854775809", "get"),
        ("GET", "/customers/1.0", "get"),
        ("GET", "/customers/%201", "get"),
        ("GET", "/customers/1%20", "get"),
        ("GET", "/customers/0x1", "get"),
        ("GET", "/customers/" + "9" * 5000, "get"),
        ("DELETE", "/customers/abc", "delete"),
        ("POST", "/customers/abc/block", "set_active"),
        ("DELETE", "/customers/abc/block", "set_active"),
    ],
)
def test_bad_id_is_400_without_store_call(client, monkeypatch, method, path, op):
    spy = MagicMock()
    monkeypatch.setattr(crud_customer, op, spy)

    r = client.request(method, path)
    assert r.status_code == 400
    assert r.text == "Bad Request"
    spy.assert_not_called()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"content": "{not json", "headers": {"content-type": "application/json"}},
        {"json": {"name": "Ann"}},
        {"json": {"phone": "555"}},
        {"json": {"name": 5, "phone": "555"}},
        {"json": {"id": "x", "name": "Ann", "phone": "555"}},
        {"json": {"id": "1", "name": "Ann", "phone": "555"}},
        {"json": {"id": 1.0, "name": "Ann", "phone": "555"}},
        {"json": ["Ann", "555"]},
    ],
    ids=["malformed", "no-phone", "no-name", "name-not-text", "id-not-int", "id-as-string", "id-as-float", "array"],
)
def test_bad_body_is_400_without_store_call(client, monkeypatch, kwargs):
    spy = MagicMock()
    monkeypatch.setattr(crud_customer, "save", spy)

    r = client.post("/customers", **kwargs)
    assert r.status_code == 400
    assert r.text == "Bad Request"
    spy.assert_not_called()


def test_store_failure_is_500_without_detail(client, monkeypatch):
    def boom(db):
        raise CustomerStoreError("list")

    monkeypatch.setattr(crud_customer, "list_customers", boom)

    r = client.get("/customers")
    assert r.status_code == 500
    assert r.text == "Internal Server Error"


def test_unknown_route_and_method(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert r.text == "Not Found"

    r = client.put("/customers")
    assert r.status_code == 405
    assert r.text == "Method Not Allowed"


def test_signed_decimal_id_is_accepted(client):
    ann = _create(client)

    r = client.get(f"/customers/+{ann['id']}")
    assert r.status_code == 200
    assert r.json() == ann


def test_created_is_rfc3339_with_offset(client):
    ann = _create(client)

    created = datetime.fromisoformat(ann["created"])
    assert created.tzinfo is not None
    assert client.get(f"/customers/{ann['id']}").json()["created"] == ann["created"]
