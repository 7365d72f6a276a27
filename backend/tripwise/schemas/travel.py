from pydantic import BaseModel


class FlightSearchRequest(BaseModel):
    origin: str | None = None
    destination: str | None = None
    departureDate: str | None = None
    returnDate: str | None = None
    adults: int | str | None = None
    travelClass: str | None = None
    currency: str | None = None


class HotelSearchRequest(BaseModel):
    cityCode: str | None = None
    checkInDate: str | None = None
    checkOutDate: str | None = None
    adults: int | str | None = None
    rooms: int | str | None = None
    currency: str | None = None


class FlightBookingRequest(BaseModel):
    flightId: str | None = None
    price: float | None = None
    currency: str | None = None
    passengerName: str | None = None
    email: str | None = None


class HotelBookingRequest(BaseModel):
    hotelId: str | None = None
    hotelName: str | None = None
    totalPrice: float | None = None
    currency: str | None = None
    guestName: str | None = None
    email: str | None = None
    checkInDate: str | None = None
    checkOutDate: str | None = None
