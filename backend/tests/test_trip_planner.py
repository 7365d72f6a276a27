import json

import pytest

from tripwise.errors import CredentialMissingError, InputValidationError
from tripwise.services.fallback_synthesizer import BUDGET_COMPONENTS, FIRST_DAY_THEME, LAST_DAY_THEME
from tripwise.services.llm_client import TRIP_PRESET
from tripwise.services.trip_planner import TripPlannerService, normalize_budget, parse_trip_request

from conftest import FakeLLM, unavailable


# ─── Validation ───


def test_missing_fields_are_listed():
    with pytest.raises(InputValidationError) as exc:
        parse_trip_request({"destination": "Goa", "name": "  ", "days": 3})
    assert exc.value.missing == ["name", "age", "people", "budget", "transport"]


def test_days_accepts_free_text(trip_payload):
    request = parse_trip_request({**trip_payload, "days": "5 days", "age": "42"})
    assert request.days == 5
    assert request.age == 42
    assert request.hotel == "standard"


@pytest.mark.parametrize(
    "field,value",
    [("days", "a week"), ("days", 0), ("days", "-3"), ("transport", "car"), ("hotel", "palace"), ("budget", 10)],
)
def test_invalid_values_are_rejected(trip_payload, field, value):
    with pytest.raises(InputValidationError) as exc:
        parse_trip_request({**trip_payload, field: value})
    assert exc.value.invalid == [field]


async def test_llm_credential_is_required(trip_payload):
    service = TripPlannerService(llm=FakeLLM(configured=False))
    with pytest.raises(CredentialMissingError):
        await service.generate(trip_payload)


# ─── Offline fallback ───


async def test_provider_failure_returns_offline_plan(trip_payload):
    service = TripPlannerService(llm=FakeLLM(error=unavailable("LLM")))
    result = await service.generate(trip_payload)

    assert result["success"] is True
    plan = result["data"]
    assert plan["metadata"]["source"] == "offline"
    assert plan["metadata"]["requestId"]
    assert plan["destination"]["type"] == "beach"
    assert len(plan["dailyItinerary"]) == 3
    assert plan["budget"]["total"] == 38800


async def test_long_trip_builds_full_itinerary(trip_payload):
    service = TripPlannerService(llm=FakeLLM(error=unavailable("LLM")))
    plan = (await service.generate({**trip_payload, "days": "45 days"}))["data"]

    assert [d["day"] for d in plan["dailyItinerary"]] == list(range(1, 46))
    assert plan["dailyItinerary"][-1]["theme"] == LAST_DAY_THEME
    budget = plan["budget"]
    assert sum(budget[c] for c in BUDGET_COMPONENTS) == budget["total"]


async def test_unparseable_response_returns_offline_plan(trip_payload):
    service = TripPlannerService(llm=FakeLLM(responses=["Sorry, I can't help with that."]))
    result = await service.generate(trip_payload)
    assert result["data"]["metadata"]["source"] == "offline"


# ─── Live plan normalization ───


async def test_live_plan_is_normalized(trip_payload):
    live = {
        "destination": {"name": "Goa", "country": "India", "type": "beach"},
        "attractions": [{"name": "Baga Beach"}],
        "dailyItinerary": [{"day": 1, "theme": "Sun"}, {"day": 2, "theme": "Sand"}],
        "budget": {
            "accommodation": 5000.4, "food": 3000, "activities": 2000,
            "transport": 4000, "shopping": 1000, "total": 99999,
        },
        "tips": [],
    }
    llm = FakeLLM(responses=["```json\n" + json.dumps(live) + "\n```"])
    result = await TripPlannerService(llm=llm).generate(trip_payload)
    plan = result["data"]

    assert plan["metadata"]["source"] == "live"
    assert plan["metadata"]["model"] == "fake-model"
    assert plan["attractions"] == [{"name": "Baga Beach"}]
    # Wrong day count: replaced by the synthesized itinerary.
    assert [d["day"] for d in plan["dailyItinerary"]] == [1, 2, 3]
    assert plan["dailyItinerary"][0]["theme"] == FIRST_DAY_THEME
    assert plan["dailyItinerary"][-1]["theme"] == LAST_DAY_THEME
    assert plan["budget"]["total"] == 15000
    assert plan["tips"]
    assert plan["emergency"]["contacts"]
    assert llm.calls[0]["preset"] == TRIP_PRESET
    assert "Destination: Goa" in llm.calls[0]["user"]


async def test_live_itinerary_themes_are_enforced(trip_payload):
    itinerary = [{"day": i, "theme": f"Custom {i}"} for i in range(1, 4)]
    llm = FakeLLM(responses=[json.dumps({"dailyItinerary": itinerary})])
    plan = (await TripPlannerService(llm=llm).generate(trip_payload))["data"]
    themes = [d["theme"] for d in plan["dailyItinerary"]]
    assert themes == [FIRST_DAY_THEME, "Custom 2", LAST_DAY_THEME]


def test_budget_with_missing_components_uses_fallback():
    fallback = {c: 100 for c in BUDGET_COMPONENTS}
    fallback.update(total=500, breakdown="fallback")
    assert normalize_budget({"accommodation": 1, "food": "lots"}, fallback) == fallback
    assert normalize_budget("cheap", fallback) == fallback


def test_budget_total_is_exact_sum():
    fallback = {c: 0 for c in BUDGET_COMPONENTS}
    fallback.update(total=0, breakdown="fallback")
    budget = normalize_budget(
        {"accommodation": 10.6, "food": 20.4, "activities": 5, "transport": 1, "shopping": 0},
        fallback,
    )
    assert budget["total"] == 11 + 20 + 5 + 1 + 0
    assert budget["breakdown"] == "fallback"
