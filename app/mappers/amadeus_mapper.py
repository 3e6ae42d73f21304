from datetime import datetime, timezone

from app.mappers.hotel_defaults import (
    build_pet_policy,
    build_pricing,
    clamp_rating,
    parse_urgency,
    rooms_or_default,
)
from app.schemas.amadeus import AmadeusHotel, AmadeusHotelListResponse
from app.schemas.hotels import (
    PROVIDER_DISPLAY_NAMES,
    HotelAvailability,
    HotelLocation,
    Provider,
    UnifiedHotelRecord,
)

DEFAULT_RATING = 4.0
DEFAULT_PRICE_FROM = 100.0
DEFAULT_PRICE_TO = 120.0
DEFAULT_AMENITIES = ["Free WiFi", "Restaurant"]
DEFAULT_IMAGE = "https://images.unsplash.com/photo-1564013799919-ab600027ffc6?w=800&h=600&fit=crop"
PET_RESTRICTIONS = ["Advance booking required", "Vaccinations required"]


def _location(hotel: AmadeusHotel) -> HotelLocation:
    geo = hotel.geoCode
    address = hotel.address
    latitude = (geo.latitude if geo else None) or (address.latitude if address else None)
    longitude = (geo.longitude if geo else None) or (address.longitude if address else None)

    street = None
    if address:
        street = address.lines[0] if address.lines else address.cityName

    return HotelLocation(
        latitude=latitude or 0.0,
        longitude=longitude or 0.0,
        address=street,
    )


def _availability(hotel: AmadeusHotel) -> HotelAvailability:
    avail = hotel.availability
    rooms_left = rooms_or_default(
        avail.roomsAvailable if avail and avail.roomsAvailable is not None else hotel.roomsLeft
    )
    urgency = (avail.urgencyLevel if avail else None) or hotel.urgencyLevel
    return HotelAvailability(
        roomsLeft=rooms_left,
        urgencyLevel=parse_urgency(urgency, rooms_left),
    )


def normalize_amadeus_hotel(
    hotel: AmadeusHotel,
    now: datetime | None = None,
) -> UnifiedHotelRecord:
    """Map one Amadeus hotel record onto the unified shape."""
    native_id = hotel.hotelId or hotel.id or "unknown"
    display = PROVIDER_DISPLAY_NAMES[Provider.amadeus]
    pet_policy = build_pet_policy(hotel.petFriendly, hotel.petFee, PET_RESTRICTIONS)

    return UnifiedHotelRecord(
        id=f"{Provider.amadeus.value}_{native_id}",
        hotelId=native_id,
        provider=Provider.amadeus,
        name=f"{hotel.name or 'Unnamed Hotel'} ({display})",
        category=hotel.priceRange or "Standard",
        destination=(hotel.address.cityName if hotel.address else None) or "Unknown",
        location=_location(hotel),
        pricing=build_pricing(
            hotel.price,
            hotel.originalPrice,
            hotel.currency,
            DEFAULT_PRICE_FROM,
            DEFAULT_PRICE_TO,
        ),
        petPolicy=pet_policy,
        rating=clamp_rating(hotel.rating if hotel.rating is not None else DEFAULT_RATING),
        amenities=list(hotel.amenities) if hotel.amenities else list(DEFAULT_AMENITIES),
        images=list(hotel.images) if hotel.images else [DEFAULT_IMAGE],
        availability=_availability(hotel),
        lastUpdated=hotel.lastUpdate or now or datetime.now(timezone.utc),
    )


def normalize_amadeus_hotels(
    response: AmadeusHotelListResponse | None,
    now: datetime | None = None,
) -> list[UnifiedHotelRecord]:
    if response is None:
        return []
    now = now or datetime.now(timezone.utc)
    return [normalize_amadeus_hotel(hotel, now=now) for hotel in response.data]
