"""End-to-end tests for the /users endpoints."""

import datetime


def _create(client, **payload):
    body = {"name": "Ann", "email": "ann@example.com", "password": "secret1"}
    body.update(payload)
    response = client.post("/users", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def _ts(value):
    # fromisoformat only accepts a trailing "Z" from Python 3.11 on
    return datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestList:
    def test_empty(self, client):
        response = client.get("/users")
        assert response.status_code == 200
        assert response.json() == []

    def test_creation_order(self, client):
        _create(client, name="Bob", email="bob@example.com")
        _create(client, name="Ann", email="ann@example.com")
        assert [u["name"] for u in client.get("/users").json()] == ["Bob", "Ann"]


class TestCreate:
    def test_create_user(self, client, user_payload):
        response = client.post("/users", json=user_payload)

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], int)
        assert body["name"] == "Ann"
        assert body["email"] == "ann@example.com"
        assert body["email_verified_at"] is None
        assert "created_at" in body and "updated_at" in body
        assert "password" not in body
        assert "hashed_password" not in body

    def test_missing_fields(self, client):
        response = client.post("/users", json={"name": "Ann"})

        assert response.status_code == 422
        body = response.json()
        assert body["message"] == "The given data was invalid"
        assert body["errors"]["email"] == ["The email field is required."]
        assert body["errors"]["password"] == ["The password field is required."]
        assert "name" not in body["errors"]

    def test_duplicate_email(self, client, user_payload):
        _create(client)
        response = client.post("/users", json={**user_payload, "name": "Other", "email": "ANN@example.com"})

        assert response.status_code == 422
        assert response.json()["errors"] == {"email": ["The email has already been taken."]}
        assert len(client.get("/users").json()) == 1

    def test_profile_fields(self, client):
        body = _create(client, phone="+1 555 0100", gender="female", date_of_birth="1990-04-02")
        assert body["phone"] == "+1 555 0100"
        assert body["gender"] == "female"
        assert body["date_of_birth"] == "1990-04-02"

    def test_invalid_json(self, client):
        response = client.post("/users", content="{not json", headers={"Content-Type": "application/json"})
        assert response.status_code == 422
        assert response.json()["message"] == "The given data was invalid"
        assert "body" in response.json()["errors"]


class TestGet:
    def test_get_user(self, client):
        created = _create(client)
        response = client.get(f"/users/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_missing(self, client):
        response = client.get("/users/999")
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

    def test_non_integer_id(self, client):
        response = client.get("/users/abc")
        assert response.status_code == 422
        assert "user_id" in response.json()["errors"]

    def test_id_beyond_integer_range(self, client):
        response = client.get("/users/99999999999999999999")
        assert response.status_code == 422
        assert list(response.json()["errors"]) == ["user_id"]

    def test_non_positive_id(self, client):
        assert client.get("/users/0").status_code == 422
        assert client.put("/users/0", json={"name": "Nobody"}).status_code == 422
        assert client.delete("/users/0").status_code == 422


class TestUpdate:
    def test_partial_update(self, client):
        created = _create(client, phone="123")

        response = client.put(f"/users/{created['id']}", json={"name": "Annie"})

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Annie"
        assert body["email"] == "ann@example.com"
        assert body["phone"] == "123"
        assert body["created_at"] == created["created_at"]
        assert _ts(body["updated_at"]) > _ts(created["updated_at"])

    def test_patch_alias(self, client):
        created = _create(client)
        response = client.patch(f"/users/{created['id']}", json={"phone": "555"})
        assert response.status_code == 200
        assert response.json()["phone"] == "555"

    def test_keep_own_email(self, client):
        created = _create(client)
        response = client.put(f"/users/{created['id']}", json={"email": "ann@example.com", "name": "Ann B."})
        assert response.status_code == 200
        assert response.json()["name"] == "Ann B."

    def test_email_taken_by_other(self, client):
        _create(client)
        bob = _create(client, name="Bob", email="bob@example.com")

        response = client.put(f"/users/{bob['id']}", json={"email": "ann@example.com"})

        assert response.status_code == 422
        assert "email" in response.json()["errors"]
        assert client.get(f"/users/{bob['id']}").json()["email"] == "bob@example.com"

    def test_null_name_rejected(self, client):
        created = _create(client)
        response = client.put(f"/users/{created['id']}", json={"name": None})
        assert response.status_code == 422
        assert response.json()["errors"] == {"name": ["The name field must not be null."]}

    def test_missing(self, client):
        response = client.put("/users/999", json={"name": "Nobody"})
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

    def test_password_never_echoed(self, client):
        created = _create(client)
        response = client.put(f"/users/{created['id']}", json={"password": "brand-new"})
        assert response.status_code == 200
        assert "password" not in response.json()


class TestDelete:
    def test_delete_then_not_found(self, client):
        created = _create(client)

        response = client.delete(f"/users/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""

        assert client.get(f"/users/{created['id']}").status_code == 404
        assert client.delete(f"/users/{created['id']}").status_code == 404
        assert client.put(f"/users/{created['id']}", json={"name": "Again"}).status_code == 404

    def test_missing(self, client):
        response = client.delete("/users/999")
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

    def test_events_survive_their_creator(self, client, event_payload):
        user = _create(client)
        event = client.post("/events", json={**event_payload, "user_id": user["id"]}).json()

        assert client.delete(f"/users/{user['id']}").status_code == 204

        response = client.get(f"/events/{event['id']}")
        assert response.status_code == 200
        assert response.json()["user_id"] is None
