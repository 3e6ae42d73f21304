from datetime import datetime, timezone

from app.mappers.hotel_defaults import (
    build_pet_policy,
    build_pricing,
    clamp_rating,
    rooms_or_default,
    stars_from_category,
    urgency_for_rooms,
)
from app.schemas.hotelbeds import HotelBedsAvailabilityResponse, HotelBedsHotel
from app.schemas.hotels import (
    PROVIDER_DISPLAY_NAMES,
    HotelAvailability,
    HotelLocation,
    Provider,
    UnifiedHotelRecord,
)

DEFAULT_RATING = 4.2
DEFAULT_PRICE_FROM = 80.0
DEFAULT_PRICE_TO = 150.0
DEFAULT_AMENITIES = ["Free WiFi", "Restaurant", "Room Service"]
PET_AMENITIES = ["Pet Beds Available", "Pet Walking Service"]
DEFAULT_IMAGE = "https://images.unsplash.com/photo-1566073771259-6a8506099945?w=800&h=600&fit=crop"
PET_RESTRICTIONS = ["Advance booking required", "Pet carrier available"]


def _rooms_left(hotel: HotelBedsHotel) -> int:
    """Smallest allotment across all rates; the scarcest rate drives urgency."""
    allotments = [
        rate.allotment
        for room in hotel.rooms
        for rate in room.rates
        if rate.allotment is not None and rate.allotment >= 0
    ]
    return min(allotments) if allotments else rooms_or_default(None)


def _rating(hotel: HotelBedsHotel) -> float:
    if hotel.rating is not None:
        return clamp_rating(hotel.rating)
    stars = stars_from_category(hotel.categoryCode)
    return clamp_rating(stars if stars is not None else DEFAULT_RATING)


def normalize_hotelbeds_hotel(
    hotel: HotelBedsHotel,
    currency: str | None = None,
    now: datetime | None = None,
) -> UnifiedHotelRecord:
    """Map one Hotel Beds availability record onto the unified shape.

    `currency` is the response-level currency; Hotel Beds reports it once
    per search rather than per hotel.
    """
    native_id = hotel.code or "unknown"
    display = PROVIDER_DISPLAY_NAMES[Provider.hotelbeds]
    pet_policy = build_pet_policy(hotel.petFriendly, hotel.petFee, PET_RESTRICTIONS)
    rooms_left = _rooms_left(hotel)

    if hotel.amenities:
        amenities = list(hotel.amenities)
    elif pet_policy.allowed:
        amenities = PET_AMENITIES + DEFAULT_AMENITIES
    else:
        amenities = list(DEFAULT_AMENITIES)

    return UnifiedHotelRecord(
        id=f"{Provider.hotelbeds.value}_{native_id}",
        hotelId=native_id,
        provider=Provider.hotelbeds,
        name=f"{hotel.name or 'Unnamed Hotel'} ({display})",
        category=hotel.categoryName or "Standard",
        destination=hotel.destinationName or hotel.destinationCode or "Unknown",
        location=HotelLocation(
            latitude=hotel.latitude or 0.0,
            longitude=hotel.longitude or 0.0,
            address=hotel.zoneName or hotel.zoneCode,
        ),
        pricing=build_pricing(
            hotel.minRate if hotel.minRate is not None else hotel.totalNet,
            hotel.maxRate if hotel.maxRate is not None else hotel.totalSellingRate,
            hotel.currency or currency,
            DEFAULT_PRICE_FROM,
            DEFAULT_PRICE_TO,
        ),
        petPolicy=pet_policy,
        rating=_rating(hotel),
        amenities=amenities,
        images=[DEFAULT_IMAGE],
        availability=HotelAvailability(
            roomsLeft=rooms_left,
            urgencyLevel=urgency_for_rooms(rooms_left),
        ),
        lastUpdated=hotel.lastUpdated or now or datetime.now(timezone.utc),
    )


def normalize_hotelbeds_hotels(
    response: HotelBedsAvailabilityResponse | None,
    now: datetime | None = None,
) -> list[UnifiedHotelRecord]:
    if response is None:
        return []
    now = now or datetime.now(timezone.utc)
    return [
        normalize_hotelbeds_hotel(hotel, currency=response.currency, now=now)
        for hotel in response.hotel_list
    ]
