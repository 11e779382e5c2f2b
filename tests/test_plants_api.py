"""HTTP tests for the /plants routes."""

import sqlite3

FERN = {"name": "Fern", "quantity": 5, "wateringFrequency": 3, "hasFruit": False}


def _create(client, body):
    response = client.post("/plants", json=body)
    assert response.status_code == 201
    return response.json()


def test_create_and_get(client):
    created = _create(client, FERN)
    assert created == {"id": created["id"], **FERN}

    response = client.get(f"/plants/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


def test_create_ignores_client_id(client):
    first = _create(client, {"name": "Moss"})
    second = _create(client, {"id": first["id"], "name": "Ivy"})
    assert second["id"] != first["id"]
    assert client.get(f"/plants/{first['id']}").json()["name"] == "Moss"


def test_create_accepts_snake_case(client):
    created = _create(client, {"name": "Fig", "watering_frequency": 4, "has_fruit": True})
    assert created["wateringFrequency"] == 4
    assert created["hasFruit"] is True


def test_create_empty_body(client):
    created = _create(client, {})
    assert created == {
        "id": created["id"],
        "name": None,
        "quantity": None,
        "wateringFrequency": None,
        "hasFruit": None,
    }


def test_create_accepts_negative_quantity(client):
    assert _create(client, {"quantity": -3})["quantity"] == -3


def test_create_malformed_body(client):
    response = client.post("/plants", json={"quantity": "many"})
    assert response.status_code == 422


def test_list(client):
    assert client.get("/plants").json() == []
    fern = _create(client, FERN)
    moss = _create(client, {"name": "Moss"})
    assert client.get("/plants").json() == [fern, moss]


def test_get_missing_returns_empty_body(client):
    response = client.get("/plants/9999")
    assert response.status_code == 200
    assert response.content == b""


def test_partial_update(client):
    fern = _create(client, FERN)
    response = client.put(f"/plants/{fern['id']}", json={"quantity": 9})
    assert response.status_code == 200
    assert response.json() == {**fern, "quantity": 9}
    assert client.get(f"/plants/{fern['id']}").json() == {**fern, "quantity": 9}


def test_update_cannot_change_id(client):
    fern = _create(client, FERN)
    response = client.put(f"/plants/{fern['id']}", json={"id": 500, "name": "Big Fern"})
    assert response.json()["id"] == fern["id"]
    assert client.get("/plants/500").content == b""


def test_update_missing_returns_null(client):
    response = client.put("/plants/9999", json={"name": "Ghost"})
    assert response.status_code == 200
    assert response.json() is None
    assert client.get("/plants").json() == []


def test_delete_twice(client):
    fern = _create(client, FERN)
    first = client.delete(f"/plants/{fern['id']}")
    assert first.status_code == 200
    assert first.json() == fern
    assert client.get(f"/plants/{fern['id']}").content == b""

    second = client.delete(f"/plants/{fern['id']}")
    assert second.status_code == 200
    assert second.json() is None


def _seed(client):
    for body in (
        {"name": "Fern", "quantity": 5, "hasFruit": False},
        {"name": "Tomato", "quantity": 4, "hasFruit": True},
        {"name": "Lemon", "quantity": 12, "hasFruit": True},
        {"name": "Cactus", "quantity": 20, "hasFruit": False},
        {"name": "Strawberry", "quantity": 10, "hasFruit": True},
    ):
        _create(client, body)


def _search(client, **params):
    response = client.get("/plants/search", params=params)
    assert response.status_code == 200
    return [plant["name"] for plant in response.json()]


def test_search(client):
    _seed(client)
    assert _search(client) == []
    assert _search(client, hasFruit="true", maxQuantity=10) == ["Tomato"]
    assert _search(client, hasFruit="false", maxQuantity=10) == ["Fern"]
    assert _search(client, hasFruit="true") == ["Tomato", "Lemon", "Strawberry"]
    assert _search(client, hasFruit="false") == ["Fern", "Cactus"]
    assert _search(client, maxQuantity=12) == ["Fern", "Tomato", "Strawberry"]


def test_search_rejects_bad_parameter(client):
    assert client.get("/plants/search", params={"maxQuantity": "lots"}).status_code == 422


def test_strict_not_found(strict_client):
    assert strict_client.get("/plants/9999").status_code == 404
    assert strict_client.put("/plants/9999", json={"name": "Ghost"}).status_code == 404
    response = strict_client.delete("/plants/9999")
    assert response.status_code == 404
    assert response.json() == {"detail": "Plant not found"}


def test_storage_error_returns_500(client):
    with sqlite3.connect(client.app.state.db.path) as conn:
        conn.execute("DROP TABLE PLANTS")
    response = client.get("/plants")
    assert response.status_code == 500
    assert response.json() == {"detail": "Storage error"}


def test_storage_error_on_write_returns_500(client):
    with sqlite3.connect(client.app.state.db.path) as conn:
        conn.execute("DROP TABLE PLANTS")
    response = client.post("/plants", json=FERN)
    assert response.status_code == 500
    assert response.json() == {"detail": "Storage error"}


TOO_BIG = 10**20


def test_create_rejects_out_of_range_integers(client):
    assert client.post("/plants", json={"quantity": TOO_BIG}).status_code == 422
    assert client.post("/plants", json={"wateringFrequency": -TOO_BIG}).status_code == 422
    assert client.get("/plants").json() == []


def test_create_accepts_32_bit_limits(client):
    created = _create(client, {"quantity": 2**31 - 1, "wateringFrequency": -(2**31)})
    assert created["quantity"] == 2**31 - 1
    assert created["wateringFrequency"] == -(2**31)


def test_update_rejects_out_of_range_integers(client):
    fern = _create(client, FERN)
    response = client.put(f"/plants/{fern['id']}", json={"quantity": TOO_BIG})
    assert response.status_code == 422
    assert client.get(f"/plants/{fern['id']}").json() == fern


def test_search_rejects_out_of_range_threshold(client):
    response = client.get("/plants/search", params={"maxQuantity": str(TOO_BIG)})
    assert response.status_code == 422


def test_routes_reject_out_of_range_id(client):
    assert client.get(f"/plants/{TOO_BIG}").status_code == 422
    assert client.put(f"/plants/{TOO_BIG}", json={"name": "Ghost"}).status_code == 422
    assert client.delete(f"/plants/{TOO_BIG}").status_code == 422
