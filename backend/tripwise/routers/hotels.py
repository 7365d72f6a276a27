"""Hotel search router."""

from fastapi import APIRouter

from tripwise.schemas.travel import HotelSearchRequest
from tripwise.services.hotel_service import hotel_service

router = APIRouter()


@router.post("/search-hotels")
async def search_hotels(req: HotelSearchRequest):
    return await hotel_service.search(req.model_dump())
