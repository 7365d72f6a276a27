"""Destination safety router — news-grounded travel safety verdicts."""

from fastapi import APIRouter

from tripwise.schemas.destination import SafetyCheckRequest
from tripwise.services.safety_service import safety_service

router = APIRouter()


@router.post("/check-destination-safety")
async def check_destination_safety(req: SafetyCheckRequest):
    return await safety_service.check(req.model_dump())
