"""Trip planning router — AI itinerary generation."""

from fastapi import APIRouter

from tripwise.schemas.trip import TripGenerateRequest
from tripwise.services.trip_planner import trip_planner_service

router = APIRouter()


@router.post("/generate-trip")
async def generate_trip(req: TripGenerateRequest):
    """Generate a day-by-day trip plan; falls back to an offline plan when the model fails."""
    return await trip_planner_service.generate(req.model_dump())
