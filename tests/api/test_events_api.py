"""End-to-end tests for the /events endpoints."""

import datetime

UTC = datetime.timezone.utc


def _create(client, payload, **overrides):
    response = client.post("/events", json={**payload, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


def _ts(value):
    # fromisoformat only accepts a trailing "Z" from Python 3.11 on
    return datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestList:
    def test_empty(self, client):
        response = client.get("/events")
        assert response.status_code == 200
        assert response.json() == []

    def test_creation_order(self, client, event_payload):
        _create(client, event_payload, title="First")
        _create(client, event_payload, title="Second")
        assert [e["title"] for e in client.get("/events").json()] == ["First", "Second"]


class TestCreate:
    def test_create_event(self, client, event_payload):
        response = client.post("/events", json=event_payload)

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], int)
        assert body["title"] == "Launch party"
        assert body["description"] == "Drinks and demos"
        assert body["location"] == "Main hall"
        assert _ts(body["start_time"]) == datetime.datetime(2030, 5, 1, 18, 0, tzinfo=UTC)
        assert _ts(body["end_time"]) == datetime.datetime(2030, 5, 1, 21, 0, tzinfo=UTC)
        assert body["user_id"] is None
        assert set(body) == {"id", "title", "description", "location", "start_time", "end_time",
                             "user_id", "created_at", "updated_at"}

    def test_timestamps_carry_utc_offset(self, client, event_payload):
        body = _create(client, event_payload, start_time="2030-05-01T20:00:00+02:00",
                       end_time="2030-05-01T23:00:00+02:00")

        for field in ("start_time", "end_time", "created_at", "updated_at"):
            assert _ts(body[field]).utcoffset() == datetime.timedelta(0)
        assert _ts(body["start_time"]) == datetime.datetime(2030, 5, 1, 18, 0, tzinfo=UTC)
        assert client.get(f"/events/{body['id']}").json() == body

    def test_create_with_creator(self, client, event_payload, user_payload):
        user = client.post("/users", json=user_payload).json()
        body = _create(client, event_payload, user_id=user["id"])
        assert body["user_id"] == user["id"]

    def test_create_with_unknown_creator(self, client, event_payload):
        response = client.post("/events", json={**event_payload, "user_id": 999})
        assert response.status_code == 422
        assert response.json()["errors"] == {"user_id": ["The selected user id is invalid."]}
        assert client.get("/events").json() == []

    def test_creator_id_beyond_integer_range(self, client, event_payload):
        response = client.post("/events", json={**event_payload, "user_id": 99999999999999999999})
        assert response.status_code == 422
        assert list(response.json()["errors"]) == ["user_id"]
        assert client.get("/events").json() == []

    def test_create_missing_title(self, client, event_payload):
        payload = dict(event_payload)
        del payload["title"]
        response = client.post("/events", json=payload)
        assert response.status_code == 422
        assert response.json()["errors"] == {"title": ["The title field is required."]}

    def test_create_end_before_start(self, client, event_payload):
        response = client.post("/events", json={**event_payload, "end_time": "2030-05-01T17:00:00"})
        assert response.status_code == 422
        assert response.json()["errors"] == {
            "end_time": ["The end time must be a date after or equal to start time."]
        }


class TestGet:
    def test_get_event(self, client, event_payload):
        created = _create(client, event_payload)
        response = client.get(f"/events/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_event(self, client):
        response = client.get("/events/999")
        assert response.status_code == 404
        assert response.json() == {"message": "Event not found"}

    def test_id_beyond_integer_range(self, client):
        response = client.get("/events/99999999999999999999")
        assert response.status_code == 422
        assert list(response.json()["errors"]) == ["event_id"]

    def test_non_positive_id(self, client):
        assert client.get("/events/0").status_code == 422
        assert client.get("/events/-1").status_code == 422


class TestUpdate:
    def test_partial_update(self, client, event_payload):
        created = _create(client, event_payload)

        response = client.put(f"/events/{created['id']}", json={"location": "Rooftop"})

        assert response.status_code == 200
        body = response.json()
        assert body["location"] == "Rooftop"
        for field in ("title", "description", "start_time", "end_time", "created_at"):
            assert body[field] == created[field]
        assert _ts(body["updated_at"]) > _ts(created["updated_at"])

    def test_update_end_before_stored_start(self, client, event_payload):
        created = _create(client, event_payload)
        response = client.put(f"/events/{created['id']}", json={"end_time": "2030-05-01T10:00:00"})
        assert response.status_code == 422
        assert "end_time" in response.json()["errors"]
        assert client.get(f"/events/{created['id']}").json()["end_time"] == created["end_time"]

    def test_update_clears_description(self, client, event_payload):
        created = _create(client, event_payload)
        response = client.patch(f"/events/{created['id']}", json={"description": None})
        assert response.status_code == 200
        assert response.json()["description"] is None

    def test_update_missing_event(self, client):
        response = client.put("/events/999", json={"title": "Nothing"})
        assert response.status_code == 404
        assert response.json() == {"message": "Event not found"}

    def test_update_id_beyond_integer_range(self, client):
        response = client.put("/events/99999999999999999999", json={"title": "Nothing"})
        assert response.status_code == 422


class TestDelete:
    def test_delete_event(self, client, event_payload):
        created = _create(client, event_payload)

        response = client.delete(f"/events/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""

        assert client.get(f"/events/{created['id']}").status_code == 404
        assert client.delete(f"/events/{created['id']}").status_code == 404

    def test_delete_missing_event(self, client):
        response = client.delete("/events/999")
        assert response.status_code == 404
        assert response.json() == {"message": "Event not found"}

    def test_delete_id_beyond_integer_range(self, client):
        assert client.delete("/events/99999999999999999999").status_code == 422
