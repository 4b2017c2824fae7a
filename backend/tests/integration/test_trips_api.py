"""HTTP-level tests for the trips CRUD endpoints."""

import pytest
from fastapi.testclient import TestClient

from braintrip.config import Settings
from braintrip.db import Database
from braintrip.main import create_app
from braintrip.services import AppServices
from tests.fakes import FakeClock

TRIP = {
    "city": "Paris",
    "cityLabel": "Paris, France",
    "cityPlaceId": "ChIJParis",
    "difficulty": "challenge",
    "score": 6,
    "totalQuestions": 8,
    "spots": [
        {"title": "Eiffel Tower", "category": "Landmark", "lat": 48.8584, "lng": 2.2945},
        {"title": "Louvre Museum", "description": "Art museum", "funFact": "Opened in 1793."},
    ],
}


@pytest.fixture
def client():
    settings = Settings()
    services = AppServices.build(settings, clock=FakeClock(), ai_factory=lambda s: None)
    app = create_app(settings=settings, services=services, database=Database("sqlite://"))
    with TestClient(app) as c:
        yield c


def _create(client: TestClient, **overrides) -> dict:
    response = client.post("/api/trips", json={**TRIP, **overrides})
    assert response.status_code == 201
    return response.json()


class TestTripsApi:
    def test_create_returns_trip_with_spots(self, client: TestClient) -> None:
        trip = _create(client)
        assert trip["city"] == "Paris"
        assert trip["cityLabel"] == "Paris, France"
        assert trip["mode"] == "quiz"
        assert trip["difficulty"] == "challenge"
        assert trip["score"] == 6
        assert trip["totalQuestions"] == 8
        assert "createdAt" in trip
        assert [s["title"] for s in trip["spots"]] == ["Eiffel Tower", "Louvre Museum"]
        assert [s["sortOrder"] for s in trip["spots"]] == [0, 1]
        assert trip["spots"][1]["category"] == "Other"
        assert trip["spots"][1]["funFact"] == "Opened in 1793."

    def test_create_requires_city(self, client: TestClient) -> None:
        response = client.post("/api/trips", json={"spots": []})
        assert response.status_code == 400
        assert response.json()["error"] == "city is required"

    def test_list_newest_first(self, client: TestClient) -> None:
        first = _create(client, city="Rome")
        second = _create(client, city="Tokyo")
        trips = client.get("/api/trips").json()
        assert [t["id"] for t in trips] == [second["id"], first["id"]]
        assert "spots" not in trips[0]

    def test_get_trip(self, client: TestClient) -> None:
        trip = _create(client)
        response = client.get(f"/api/trips/{trip['id']}")
        assert response.status_code == 200
        assert len(response.json()["spots"]) == 2

    def test_get_missing_trip_is_404(self, client: TestClient) -> None:
        response = client.get("/api/trips/999")
        assert response.status_code == 404
        assert response.json() == {"error": "Trip not found", "code": "NOT_FOUND"}

    def test_add_spots_skips_existing_titles(self, client: TestClient) -> None:
        trip = _create(client)
        response = client.post(
            f"/api/trips/{trip['id']}/spots",
            json={"spots": [{"title": "eiffel tower "}, {"title": "Musée d'Orsay"}]},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["added"] == 1
        assert [s["title"] for s in body["spots"]] == ["Eiffel Tower", "Louvre Museum", "Musée d'Orsay"]
        assert body["spots"][-1]["sortOrder"] == 2

    def test_add_spots_errors(self, client: TestClient) -> None:
        assert client.post("/api/trips/999/spots", json={"spots": [{"title": "X"}]}).status_code == 404
        trip = _create(client)
        response = client.post(f"/api/trips/{trip['id']}/spots", json={"spots": []})
        assert response.status_code == 400
        assert response.json()["error"] == "Spots array is required"

    def test_patch_only_sent_fields(self, client: TestClient) -> None:
        trip = _create(client, hotelLocation="Hotel Lutetia")
        response = client.patch(f"/api/trips/{trip['id']}", json={"score": 8})
        assert response.status_code == 200
        body = response.json()
        assert body["score"] == 8
        assert body["totalQuestions"] == 8
        assert body["hotelLocation"] == "Hotel Lutetia"

        cleared = client.patch(f"/api/trips/{trip['id']}", json={"hotelLocation": None}).json()
        assert "hotelLocation" not in cleared or cleared["hotelLocation"] is None
        assert cleared["score"] == 8

    def test_patch_missing_trip_is_404(self, client: TestClient) -> None:
        assert client.patch("/api/trips/999", json={"score": 1}).status_code == 404

    def test_delete_spot(self, client: TestClient) -> None:
        trip = _create(client)
        spot_id = trip["spots"][0]["id"]
        assert client.delete(f"/api/trips/{trip['id']}/spots/{spot_id}").status_code == 204
        spots = client.get(f"/api/trips/{trip['id']}").json()["spots"]
        assert [s["title"] for s in spots] == ["Louvre Museum"]

    def test_delete_spot_of_another_trip_is_ignored(self, client: TestClient) -> None:
        one = _create(client)
        other = _create(client, city="Rome")
        spot_id = one["spots"][0]["id"]
        assert client.delete(f"/api/trips/{other['id']}/spots/{spot_id}").status_code == 204
        assert len(client.get(f"/api/trips/{one['id']}").json()["spots"]) == 2

    def test_delete_trip(self, client: TestClient) -> None:
        trip = _create(client)
        assert client.delete(f"/api/trips/{trip['id']}").status_code == 204
        assert client.get(f"/api/trips/{trip['id']}").status_code == 404
        assert client.delete(f"/api/trips/{trip['id']}").status_code == 204
