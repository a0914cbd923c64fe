"""Integration tests for the events HTTP API.

Run with: pytest tests/test_event_api.py -v
"""

import pytest
from rest_framework.test import APIClient

from events.models import Event

STANDUP = {
    "title": "Standup",
    "start": "2025-01-06T09:00:00Z",
    "end": "2025-01-06T09:30:00Z",
}
MOVE = {"start": "2025-01-07T14:00:00Z", "end": "2025-01-07T15:00:00Z"}


def create(api_client: APIClient, payload: dict = STANDUP) -> dict:
    response = api_client.post("/api/events", payload, format="json")
    assert response.status_code == 201, response.content
    return response.json()


@pytest.mark.django_db
class TestEventList:
    """Tests for GET /api/events"""

    def test_list_events_empty(self, api_client: APIClient):
        """Given no events, returns an empty list."""
        response = api_client.get("/api/events")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_events_returns_event_shape(self, api_client: APIClient):
        """Given events exist, returns them with every public field."""
        created = create(api_client)
        response = api_client.get("/api/events")
        assert response.status_code == 200
        assert response.json() == [created]
        assert set(created) == {"id", "title", "start", "end", "created_at", "updated_at"}

    def test_list_ignores_calendar_range_params(self, api_client: APIClient):
        """The calendar widget appends start/end query params; all events are returned."""
        create(api_client)
        response = api_client.get("/api/events", {"start": "2030-01-01", "end": "2030-02-01"})
        assert len(response.json()) == 1


@pytest.mark.django_db
class TestEventCreate:
    """Tests for POST /api/events"""

    def test_create_returns_event_with_id(self, api_client: APIClient):
        body = create(api_client)
        assert isinstance(body["id"], int)
        assert body["title"] == "Standup"
        assert body["start"] == "2025-01-06T09:00:00Z"
        assert body["end"] == "2025-01-06T09:30:00Z"
        assert Event.objects.filter(pk=body["id"]).exists()

    def test_create_all_day_selection(self, api_client: APIClient):
        """Date-only values from a month-view selection are accepted."""
        body = create(api_client, {"title": "Offsite", "start": "2025-01-06", "end": "2025-01-08"})
        assert body["start"] == "2025-01-06T00:00:00Z"
        assert body["end"] == "2025-01-08T00:00:00Z"

    def test_create_ignores_non_writable_fields(self, api_client: APIClient):
        body = create(api_client, {**STANDUP, "created_at": "2000-01-01T00:00:00Z"})
        assert not body["created_at"].startswith("2000")

    def test_create_end_before_start_returns_422(self, api_client: APIClient):
        response = api_client.post(
            "/api/events",
            {"title": "Standup", "start": "2025-01-06T10:00:00Z", "end": "2025-01-06T09:00:00Z"},
            format="json",
        )
        assert response.status_code == 422
        assert response.json()["errors"] == {
            "end": ["The end field must be a date after or equal to start."]
        }
        assert not Event.objects.exists()

    def test_create_missing_fields_returns_422(self, api_client: APIClient):
        response = api_client.post("/api/events", {}, format="json")
        assert response.status_code == 422
        body = response.json()
        assert body["message"] == "The given data was invalid"
        assert set(body["errors"]) == {"title", "start", "end"}

    def test_create_accepts_form_encoding(self, api_client: APIClient):
        response = api_client.post("/api/events", STANDUP)
        assert response.status_code == 201

    def test_create_out_of_range_timestamp_returns_422(self, api_client: APIClient):
        response = api_client.post(
            "/api/events",
            {"title": "x", "start": "9999-12-31T23:00:00-05:00", "end": "9999-12-31T23:30:00-05:00"},
            format="json",
        )
        assert response.status_code == 422
        assert set(response.json()["errors"]) == {"start", "end"}
        assert not Event.objects.exists()

    def test_create_offset_timestamp_is_stored_in_utc(self, api_client: APIClient):
        body = create(
            api_client,
            {"title": "x", "start": "2025-01-06T18:00:00+09:00", "end": "2025-01-06T18:30:00+09:00"},
        )
        assert body["start"] == "2025-01-06T09:00:00Z"

    def test_create_trims_title(self, api_client: APIClient):
        body = create(api_client, {**STANDUP, "title": "  Standup  "})
        assert body["title"] == "Standup"
        assert Event.objects.get(pk=body["id"]).title == "Standup"

    def test_create_malformed_json_returns_400(self, api_client: APIClient):
        response = api_client.post(
            "/api/events", "{not json", content_type="application/json"
        )
        assert response.status_code == 400


@pytest.mark.django_db
class TestEventUpdate:
    """Tests for PUT /api/events/{id}"""

    def test_update_moves_event(self, api_client: APIClient):
        created = create(api_client)
        response = api_client.put(f"/api/events/{created['id']}", MOVE, format="json")
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["title"] == "Standup"
        assert body["start"] == MOVE["start"]
        assert body["end"] == MOVE["end"]
        assert body["created_at"] == created["created_at"]

    def test_update_not_found(self, api_client: APIClient):
        """Given event does not exist, returns 404."""
        response = api_client.put(
            "/api/events/999",
            {"start": "2025-01-06T09:00:00Z", "end": "2025-01-06T09:30:00Z"},
            format="json",
        )
        assert response.status_code == 404
        assert response.json() == {
            "error": {"code": "EVENT_NOT_FOUND", "message": "Event not found"}
        }

    def test_update_invalid_range_leaves_row(self, api_client: APIClient):
        created = create(api_client)
        response = api_client.put(
            f"/api/events/{created['id']}",
            {"start": "2025-01-07T15:00:00Z", "end": "2025-01-07T14:00:00Z"},
            format="json",
        )
        assert response.status_code == 422
        assert "end" in response.json()["errors"]
        row = Event.objects.get(pk=created["id"])
        assert row.start.isoformat() == "2025-01-06T09:00:00+00:00"

    def test_update_missing_start_returns_422(self, api_client: APIClient):
        created = create(api_client)
        response = api_client.put(
            f"/api/events/{created['id']}", {"end": MOVE["end"]}, format="json"
        )
        assert response.status_code == 422
        assert list(response.json()["errors"]) == ["start"]


@pytest.mark.django_db
class TestEventDelete:
    """Tests for DELETE /api/events/{id}"""

    def test_delete_returns_success(self, api_client: APIClient):
        created = create(api_client)
        response = api_client.delete(f"/api/events/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"status": "success"}
        assert not Event.objects.exists()

    def test_delete_twice_returns_404(self, api_client: APIClient):
        created = create(api_client)
        api_client.delete(f"/api/events/{created['id']}")
        response = api_client.delete(f"/api/events/{created['id']}")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "EVENT_NOT_FOUND"

    def test_delete_malformed_id_returns_404(self, api_client: APIClient):
        response = api_client.delete("/api/events/not-a-number")
        assert response.status_code == 404


@pytest.mark.django_db
class TestNonObjectBodies:
    """A JSON body that is not an object is treated as empty."""

    def test_create_with_list_body_returns_422(self, api_client: APIClient):
        response = api_client.post("/api/events", [], format="json")
        assert response.status_code == 422
        assert set(response.json()["errors"]) == {"title", "start", "end"}
