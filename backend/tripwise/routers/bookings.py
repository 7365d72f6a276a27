"""Booking router — acknowledges flight and hotel bookings without charging."""

from fastapi import APIRouter

from tripwise.schemas.travel import FlightBookingRequest, HotelBookingRequest
from tripwise.services.booking_service import acknowledge_flight, acknowledge_hotel

router = APIRouter()


@router.post("/book-flight")
async def book_flight(req: FlightBookingRequest):
    return acknowledge_flight(req.model_dump())


@router.post("/book-hotel")
async def book_hotel(req: HotelBookingRequest):
    return acknowledge_hotel(req.model_dump())
