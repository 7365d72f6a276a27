"""Trip planner — LLM itinerary generation with offline synthesis as the safety net."""

import copy
import logging
import time
import uuid
from datetime import datetime, timezone

from tripwise.errors import CredentialMissingError, InputValidationError, ProviderUnavailable
from tripwise.schemas.trip import TripRequest
from tripwise.services.fallback_synthesizer import (
    BUDGET_COMPONENTS,
    FIRST_DAY_THEME,
    LAST_DAY_THEME,
    synthesize_trip_plan,
)
from tripwise.services.llm_client import TRIP_PRESET, LLMClient, llm_client
from tripwise.services.prompts import TRIP_SYSTEM, build_trip_prompt
from tripwise.services.text_recovery import recover_json
from tripwise.services.validation import build_model, extract_int, require_fields

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("destination", "name", "age", "people", "days", "budget", "transport")
PLAN_SECTIONS = (
    "destination",
    "attractions",
    "activities",
    "cuisine",
    "dailyItinerary",
    "budget",
    "accommodation",
    "transportation",
    "tips",
    "shopping",
    "emergency",
)


def parse_trip_request(payload: dict) -> TripRequest:
    """Validate a raw trip form into a TripRequest."""
    require_fields(payload, REQUIRED_FIELDS)

    days = extract_int(payload["days"])
    if days is None:
        raise InputValidationError("Invalid trip request", invalid=["days"])

    data = {
        "destination": str(payload["destination"]).strip(),
        "name": str(payload["name"]).strip(),
        "age": payload["age"],
        "people": payload["people"],
        "days": days,
        "budget": payload["budget"],
        "transport": str(payload["transport"]).strip().lower(),
        "hotel": (str(payload.get("hotel") or "").strip().lower() or "standard"),
        "activities": str(payload.get("activities") or "").strip(),
    }
    return build_model(TripRequest, data, "Invalid trip request")


# ─── Live plan normalization ───


def _itinerary_is_valid(itinerary, days: int) -> bool:
    if not isinstance(itinerary, list) or len(itinerary) != days:
        return False
    return all(
        isinstance(entry, dict) and entry.get("day") == idx
        for idx, entry in enumerate(itinerary, start=1)
    )


def _enforce_themes(itinerary: list[dict]) -> list[dict]:
    itinerary = [dict(entry) for entry in itinerary]
    itinerary[0]["theme"] = FIRST_DAY_THEME
    if len(itinerary) > 1:
        itinerary[-1]["theme"] = LAST_DAY_THEME
    return itinerary


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def normalize_budget(budget, fallback: dict) -> dict:
    """Re-total a live budget from its integer components, or use the fallback."""
    if not isinstance(budget, dict) or not all(
        _is_number(budget.get(c)) for c in BUDGET_COMPONENTS
    ):
        return copy.deepcopy(fallback)

    normalized = {c: round(budget[c]) for c in BUDGET_COMPONENTS}
    normalized["total"] = sum(normalized.values())
    normalized["breakdown"] = budget.get("breakdown") or fallback["breakdown"]
    return normalized


def normalize_plan(live: dict, fallback: dict, days: int) -> dict:
    """Merge a recovered plan with the synthesized one so every invariant holds."""
    plan = {}
    for section in PLAN_SECTIONS:
        value = live.get(section)
        expected_type = type(fallback[section])
        if value in (None, "", [], {}) or not isinstance(value, expected_type):
            plan[section] = copy.deepcopy(fallback[section])
        else:
            plan[section] = value

    if not _itinerary_is_valid(plan["dailyItinerary"], days):
        logger.info("Live itinerary did not match requested days, using synthesized itinerary")
        plan["dailyItinerary"] = copy.deepcopy(fallback["dailyItinerary"])
    plan["dailyItinerary"] = _enforce_themes(plan["dailyItinerary"])

    plan["budget"] = normalize_budget(plan["budget"], fallback["budget"])
    return plan


class TripPlannerService:
    """Generates trip plans from the LLM, filling gaps from offline synthesis."""

    def __init__(self, llm: LLMClient | None = None):
        self.llm = llm or llm_client

    async def generate(self, payload: dict) -> dict:
        request = parse_trip_request(payload)
        if not self.llm.is_configured:
            raise CredentialMissingError("OpenAI")

        start = time.monotonic()
        request_id = uuid.uuid4().hex
        logger.info(f"Generating trip plan for {request.destination} ({request.days} days)")

        fallback = synthesize_trip_plan(request)
        plan = await self._live_plan(request, fallback)

        if plan is None:
            plan = fallback
        else:
            plan["metadata"] = {
                "generatedAt": datetime.now(timezone.utc).isoformat(),
                "source": "live",
                "model": self.llm.model_name,
            }

        plan["metadata"]["processingTimeMs"] = round((time.monotonic() - start) * 1000)
        plan["metadata"]["requestId"] = request_id
        logger.info(
            f"Trip plan ready: {request.destination} source={plan['metadata']['source']} "
            f"in {plan['metadata']['processingTimeMs']}ms"
        )
        return {"success": True, "data": plan}

    async def _live_plan(self, request: TripRequest, fallback: dict) -> dict | None:
        try:
            text = await self.llm.complete_with(TRIP_PRESET, TRIP_SYSTEM, build_trip_prompt(request))
        except ProviderUnavailable as e:
            logger.warning(f"LLM unavailable, using offline plan: {e}")
            return None

        result = recover_json(text, expect="object")
        if not result.ok:
            logger.warning(f"Could not recover trip plan ({result.error}), using offline plan")
            return None
        return normalize_plan(result.value, fallback, request.days)


trip_planner_service = TripPlannerService()
