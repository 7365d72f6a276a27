"""Flight search router."""

from fastapi import APIRouter

from tripwise.schemas.travel import FlightSearchRequest
from tripwise.services.flight_service import flight_service

router = APIRouter()


@router.post("/search-flights")
async def search_flights(req: FlightSearchRequest):
    """Search flight offers; estimated offers are flagged with ``estimated``."""
    return await flight_service.search(req.model_dump())
