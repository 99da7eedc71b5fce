"""
HTTP tests for the ingredient routes.

Ingredient Catalogue Flow
=========================

1. CREATE   POST /api/ingredients          (bearer token)  -> 201 + Location
2. LIST     GET  /api/ingredients                          -> 200 [ ... ]
3. GET      GET  /api/ingredients/{id}                     -> 200 | 404
4. UPDATE   PUT  /api/ingredients/{id}     (bearer token)  -> 200 {success, message, data}
5. DELETE   DELETE /api/ingredients/{id}   (bearer token)  -> 200 {success, message}
"""

from fastapi.testclient import TestClient

from test_fixtures import client, db_session, auth_headers, make_token

BASE = "/api/ingredients"

FLOUR = {"name": "Flour", "unit_of_measure": "g", "description": "wheat flour"}


def create(client: TestClient, payload=None, headers=None):
    return client.post(BASE, json=payload or FLOUR, headers=headers or auth_headers())


def test_health_check(client: TestClient):
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["service"] == "RecetArre"


def test_list_empty(client: TestClient):
    r = client.get(BASE)
    assert r.status_code == 200
    assert r.json() == []


def test_create_returns_201_with_location(client: TestClient):
    r = create(client)

    assert r.status_code == 201
    body = r.json()
    assert body == {"id": body["id"], **FLOUR}
    assert r.headers["location"].endswith(f"{BASE}/{body['id']}")


def test_create_then_get_and_list(client: TestClient):
    created = create(client).json()

    r = client.get(f"{BASE}/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created

    r = client.get(BASE)
    assert r.json() == [created]


def test_create_optional_fields_default_to_null(client: TestClient):
    r = create(client, {"name": "Salt"})

    assert r.status_code == 201
    assert r.json()["unit_of_measure"] is None
    assert r.json()["description"] is None


def test_create_without_token_is_401(client: TestClient):
    r = client.post(BASE, json=FLOUR)

    assert r.status_code == 401
    assert r.headers["www-authenticate"] == "Bearer"
    assert r.json()["error"]["code"] == "UNAUTHENTICATED"
    assert client.get(BASE).json() == []


def test_create_with_invalid_token_is_401(client: TestClient):
    r = client.post(
        BASE, json=FLOUR, headers={"Authorization": "Bearer not-a-token"}
    )
    assert r.status_code == 401


def test_create_duplicate_name_is_400(client: TestClient):
    create(client)

    r = create(client, {"name": "FLOUR", "unit_of_measure": "kg", "description": ""})

    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "DUPLICATE_NAME"
    assert body["error"]["details"] == {"name": "FLOUR"}
    assert len(client.get(BASE).json()) == 1


def test_create_invalid_body_is_422(client: TestClient):
    r = create(client, {"name": "Ab", "unit_of_measure": "u" * 21})

    assert r.status_code == 422
    body = r.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    fields = {tuple(e["loc"])[-1] for e in body["error"]["details"]}
    assert fields == {"name", "unit_of_measure"}


def test_get_missing_is_404(client: TestClient):
    r = client.get(f"{BASE}/999")

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


def test_update_returns_wrapped_ingredient(client: TestClient):
    created = create(client).json()

    r = client.put(
        f"{BASE}/{created['id']}",
        json={"name": "Sugar", "unit_of_measure": "kg", "description": "cane sugar"},
        headers=auth_headers(),
    )

    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Ingredient updated successfully"
    assert body["data"] == {
        "id": created["id"],
        "name": "Sugar",
        "unit_of_measure": "kg",
        "description": "cane sugar",
    }
    assert client.get(f"{BASE}/{created['id']}").json()["name"] == "Sugar"


def test_update_to_existing_name_is_400(client: TestClient):
    flour = create(client).json()
    create(client, {"name": "Sugar"})

    r = client.put(
        f"{BASE}/{flour['id']}", json={"name": "sugar"}, headers=auth_headers()
    )

    assert r.status_code == 400
    assert r.json()["error"]["code"] == "DUPLICATE_NAME"


def test_update_missing_is_404(client: TestClient):
    r = client.put(f"{BASE}/12", json={"name": "Sugar"}, headers=auth_headers())
    assert r.status_code == 404


def test_update_without_token_is_401(client: TestClient):
    flour = create(client).json()

    r = client.put(f"{BASE}/{flour['id']}", json={"name": "Sugar"})

    assert r.status_code == 401
    assert client.get(f"{BASE}/{flour['id']}").json()["name"] == "Flour"


def test_delete_flow(client: TestClient):
    flour = create(client).json()

    r = client.delete(f"{BASE}/{flour['id']}", headers=auth_headers())
    assert r.status_code == 200
    assert r.json()["success"] is True
    assert r.json()["message"] == "Ingredient deleted"

    assert client.get(f"{BASE}/{flour['id']}").status_code == 404
    assert client.delete(f"{BASE}/{flour['id']}", headers=auth_headers()).status_code == 404


def test_delete_without_token_is_401(client: TestClient):
    flour = create(client).json()

    r = client.delete(f"{BASE}/{flour['id']}")

    assert r.status_code == 401
    assert client.get(f"{BASE}/{flour['id']}").status_code == 200


def test_any_authenticated_caller_may_mutate(client: TestClient):
    flour = create(client, headers=auth_headers("alice")).json()

    r = client.put(
        f"{BASE}/{flour['id']}",
        json={"name": "Flour", "unit_of_measure": "kg"},
        headers={"Authorization": f"Bearer {make_token('bob')}"},
    )

    assert r.status_code == 200


def test_request_id_header_is_set(client: TestClient):
    r = client.get(BASE)
    assert r.headers.get("x-request-id")
    assert r.headers.get("x-process-time")


def test_end_to_end_flow(client: TestClient):
    r = create(client)
    assert r.status_code == 201
    assert r.json()["id"] == 1

    r = create(client, {"name": "FLOUR", "unit_of_measure": "kg", "description": ""})
    assert r.status_code == 400

    r = client.put(
        f"{BASE}/1",
        json={"name": "Sugar", "unit_of_measure": "g", "description": "wheat flour"},
        headers=auth_headers(),
    )
    assert r.status_code == 200
    assert client.get(f"{BASE}/1").json()["name"] == "Sugar"

    assert client.delete(f"{BASE}/1", headers=auth_headers()).status_code == 200
    assert client.get(f"{BASE}/1").status_code == 404
