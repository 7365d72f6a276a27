import pytest
from fastapi.testclient import TestClient

from tripwise.main import app
from tripwise.routers import comparisons, flights, safety, trips
from tripwise.services.comparison_service import ComparisonService
from tripwise.services.flight_service import FlightService
from tripwise.services.safety_service import SafetyService
from tripwise.services.trip_planner import TripPlannerService

from conftest import FakeAmadeus, FakeCurrency, FakeLLM, FakeNews, unavailable


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["amadeus"] in ("configured", "not configured")
    assert "openai_configured" in body
    assert "news_configured" in body


def test_generate_trip_missing_fields(client):
    resp = client.post("/api/generate-trip", json={"destination": "Goa"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["missing"] == ["name", "age", "people", "days", "budget", "transport"]


def test_generate_trip_offline(client, monkeypatch, trip_payload):
    monkeypatch.setattr(trips, "trip_planner_service", TripPlannerService(llm=FakeLLM(error=unavailable("LLM"))))
    resp = client.post("/api/generate-trip", json=trip_payload)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["metadata"]["source"] == "offline"
    assert data["budget"]["total"] == 38800


def test_generate_trip_without_credentials(client, monkeypatch, trip_payload):
    monkeypatch.setattr(trips, "trip_planner_service", TripPlannerService(llm=FakeLLM(configured=False)))
    resp = client.post("/api/generate-trip", json=trip_payload)
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "OpenAI API key not configured on server"}


def test_compare_destinations(client, monkeypatch):
    monkeypatch.setattr(comparisons, "comparison_service", ComparisonService(llm=FakeLLM(responses=["[]"])))
    resp = client.post(
        "/api/compare-destinations",
        json={"destinations": ["Paris", "Rome"], "priorities": ["food"], "budget": 100000, "duration": 5, "month": "May"},
    )
    assert resp.status_code == 200
    assert [c["destination"] for c in resp.json()["comparisons"]] == ["Paris", "Rome"]


def test_malformed_body_is_a_400(client):
    resp = client.post("/api/compare-destinations", json={"destinations": "Paris", "priorities": ["food"]})
    assert resp.status_code == 400
    assert resp.json()["invalid"] == ["destinations"]


def test_safety_parse_failure(client, monkeypatch):
    service = SafetyService(llm=FakeLLM(responses=["not json"]), news=FakeNews())
    monkeypatch.setattr(safety, "safety_service", service)
    resp = client.post("/api/check-destination-safety", json={"destination": "Goa"})
    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Failed to parse AI response"
    assert body["details"]


def test_safety_llm_outage(client, monkeypatch):
    service = SafetyService(llm=FakeLLM(error=unavailable("LLM")), news=FakeNews())
    monkeypatch.setattr(safety, "safety_service", service)
    resp = client.post("/api/check-destination-safety", json={"destination": "Goa"})
    assert resp.status_code == 502


def test_search_flights_estimated(client, monkeypatch):
    service = FlightService(amadeus=FakeAmadeus(flight_error=unavailable("Amadeus")), currency=FakeCurrency())
    monkeypatch.setattr(flights, "flight_service", service)
    resp = client.post(
        "/api/search-flights",
        json={"origin": "DEL", "destination": "GOI", "departureDate": "2025-03-01", "adults": 2, "currency": "USD"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["count"] == len(body["flights"])
    assert all(f["estimated"] for f in body["flights"])


def test_book_flight(client):
    resp = client.post(
        "/api/book-flight",
        json={"flightId": "6E123", "price": 4500, "currency": "INR", "passengerName": "Asha"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "acknowledged"
    assert body["reference"].startswith("FLT-")
    assert "₹4,500" in body["message"]


def test_book_hotel_rejects_bad_dates(client):
    resp = client.post(
        "/api/book-hotel",
        json={
            "hotelId": "H1", "hotelName": "Sea View", "totalPrice": 200, "currency": "USD",
            "guestName": "Asha", "checkInDate": "2025-01-12", "checkOutDate": "2025-01-10",
        },
    )
    assert resp.status_code == 400
    assert resp.json()["invalid"] == ["checkOutDate"]


def test_unexpected_error_is_internal(client, monkeypatch):
    class Broken:
        async def compare(self, payload):
            raise RuntimeError("boom")

    monkeypatch.setattr(comparisons, "comparison_service", Broken())
    resp = client.post("/api/compare-destinations", json={"destinations": ["A", "B"], "priorities": ["x"]})
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Internal server error"}
