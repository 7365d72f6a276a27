"""Destination comparison router."""

from fastapi import APIRouter

from tripwise.schemas.destination import CompareDestinationsRequest
from tripwise.services.comparison_service import comparison_service

router = APIRouter()


@router.post("/compare-destinations")
async def compare_destinations(req: CompareDestinationsRequest):
    return await comparison_service.compare(req.model_dump())
