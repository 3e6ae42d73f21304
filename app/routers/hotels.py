from fastapi import APIRouter

from app.schemas.responses import (
    BookingConfirmation,
    BookingRequest,
    HotelRatings,
    HotelRatingsResponse,
    PetDetails,
    RatingSentiments,
)

router = APIRouter(prefix="/api/hotels")

# Demo endpoints: nothing is reserved and ratings are not fetched upstream.
CANNED_BOOKING_ID = "BOOKING123"
DEFAULT_BOOKING_HOTEL_ID = "ACPAR419"
DEFAULT_GUEST_NAME = "John Doe"

CANNED_RATINGS = HotelRatings(
    hotelId="TELONMFS",
    overallRating=81,
    sentiments=RatingSentiments(
        staff=80,
        location=89,
        service=80,
        roomComforts=87,
        valueForMoney=75,
    ),
)


@router.post("/booking", response_model=BookingConfirmation)
async def create_booking(request: BookingRequest | None = None) -> BookingConfirmation:
    request = request or BookingRequest()
    return BookingConfirmation(
        bookingId=CANNED_BOOKING_ID,
        status="confirmed",
        hotelId=request.hotelId or DEFAULT_BOOKING_HOTEL_ID,
        guestName=request.guestName or DEFAULT_GUEST_NAME,
        petDetails=request.petDetails or PetDetails(),
    )


@router.get("/ratings", response_model=HotelRatingsResponse)
async def hotel_ratings() -> HotelRatingsResponse:
    return HotelRatingsResponse(data=CANNED_RATINGS)
