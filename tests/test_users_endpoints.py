from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi.testclient import TestClient

JOHN = {"name": "John Doe", "email": "john@example.com", "password": "pw123"}
MISSING_ID = "0123456789abcdef01234567"


def _create(client: TestClient, payload: dict[str, str] | None = None) -> dict[str, str]:
    response = client.post("/users", json=payload or JOHN)
    assert response.status_code == 201
    return response.json()["user"]


def test_create_user_success(client: TestClient) -> None:
    response = client.post("/users", json=JOHN)

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User added successfully"
    assert data["user"]["id"]
    assert data["user"]["name"] == JOHN["name"]
    assert data["user"]["email"] == JOHN["email"]
    assert data["user"]["password"] == JOHN["password"]


def test_create_user_duplicate_email(client: TestClient) -> None:
    _create(client)

    response = client.post("/users", json={**JOHN, "name": "Johnny"})

    assert response.status_code == 400
    assert "duplicate key" in response.json()["message"]


def test_create_user_missing_field(client: TestClient) -> None:
    response = client.post("/users", json={"name": "John Doe", "email": "john@example.com"})

    assert response.status_code == 400
    assert "password" in response.json()["message"]


def test_create_user_empty_field_is_rejected(client: TestClient) -> None:
    response = client.post("/users", json={**JOHN, "name": ""})

    assert response.status_code == 400
    assert "name" in response.json()["message"]


def test_create_user_stores_scalars_as_text(client: TestClient) -> None:
    response = client.post("/users", json={"name": 42, "email": "n@example.com", "password": True})

    assert response.status_code == 201
    user = response.json()["user"]
    assert user["name"] == "42"
    assert user["password"] == "true"


def test_create_user_structured_field_returns_bad_request(client: TestClient) -> None:
    response = client.post("/users", json={**JOHN, "email": {"address": "x"}})

    assert response.status_code == 400
    assert "email" in response.json()["message"]


def test_list_users_returns_all_created(client: TestClient) -> None:
    created = [
        _create(client, {"name": f"User {i}", "email": f"user{i}@example.com", "password": "pw"})
        for i in range(3)
    ]

    response = client.get("/users")

    assert response.status_code == 200
    assert response.json() == created


def test_list_users_empty(client: TestClient) -> None:
    response = client.get("/users")

    assert response.status_code == 200
    assert response.json() == []


def test_get_user_by_id(client: TestClient) -> None:
    user = _create(client)

    response = client.get(f"/users/{user['id']}")

    assert response.status_code == 200
    assert response.json() == user


def test_get_user_not_found(client: TestClient) -> None:
    response = client.get(f"/users/{MISSING_ID}")

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_update_user_partial(client: TestClient) -> None:
    user = _create(client)

    response = client.put(f"/users/{user['id']}", json={"name": "Jane"})

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "User updated successfully"
    assert data["user"] == {**user, "name": "Jane"}
    assert client.get(f"/users/{user['id']}").json() == {**user, "name": "Jane"}


def test_update_user_empty_values_keep_stored_fields(client: TestClient) -> None:
    user = _create(client)

    response = client.put(
        f"/users/{user['id']}", json={"name": "", "email": "", "password": None}
    )

    assert response.status_code == 200
    assert response.json()["user"] == user


def test_update_user_zero_and_false_keep_stored_fields(client: TestClient) -> None:
    user = _create(client)

    response = client.put(f"/users/{user['id']}", json={"name": 0, "password": False})

    assert response.status_code == 200
    assert response.json()["user"] == user


def test_update_user_numeric_value_is_stored_as_text(client: TestClient) -> None:
    user = _create(client)

    response = client.put(f"/users/{user['id']}", json={"name": 7})

    assert response.status_code == 200
    assert response.json()["user"] == {**user, "name": "7"}


def test_update_user_without_body_keeps_record(client: TestClient) -> None:
    user = _create(client)

    response = client.put(f"/users/{user['id']}")

    assert response.status_code == 200
    assert response.json()["user"] == user


def test_update_missing_user_without_body(client: TestClient) -> None:
    response = client.put(f"/users/{MISSING_ID}")

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_update_user_duplicate_email(client: TestClient) -> None:
    _create(client)
    other = _create(client, {"name": "Ann", "email": "ann@example.com", "password": "pw"})

    response = client.put(f"/users/{other['id']}", json={"email": JOHN["email"]})

    assert response.status_code == 400
    assert "duplicate key" in response.json()["message"]


def test_update_user_not_found(client: TestClient) -> None:
    response = client.put(f"/users/{MISSING_ID}", json={"name": "Jane"})

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_delete_user(client: TestClient) -> None:
    user = _create(client)

    response = client.delete(f"/users/{user['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "User deleted successfully"}
    assert client.get(f"/users/{user['id']}").status_code == 404


def test_delete_user_not_found(client: TestClient) -> None:
    response = client.delete(f"/users/{MISSING_ID}")

    assert response.status_code == 404


def test_failed_update_on_deleted_user_is_repeatable(client: TestClient) -> None:
    user = _create(client)
    assert client.delete(f"/users/{user['id']}").status_code == 200

    codes = {
        client.put(f"/users/{user['id']}", json={"name": "Jane"}).status_code
        for _ in range(3)
    }

    assert codes == {404}
