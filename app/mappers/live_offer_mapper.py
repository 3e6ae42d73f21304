from datetime import datetime, timedelta, timezone

from app.mappers.hotel_defaults import (
    PRICE_SPREAD,
    clamp_rating,
    parse_urgency,
    positive_or,
    rooms_or_default,
)
from app.schemas.amadeus import AmadeusHotelOffers, AmadeusHotelOffersResponse, AmadeusOffer
from app.schemas.live import LiveHotel, LiveOffer

DEFAULT_RATING = 4.0
DEFAULT_PRICE = 150.0
DEAL_WINDOW = timedelta(hours=24)
TRENDS = {"up", "down", "stable"}


def normalize_offer(offer: AmadeusOffer, fallback_price: float) -> LiveOffer:
    room = offer.room
    estimate = room.typeEstimated if room else None
    policies = offer.policies
    cancellation = policies.cancellation if policies else None
    return LiveOffer(
        id=offer.id or "unknown",
        roomType=(room.type if room else None)
        or (estimate.category if estimate else None)
        or "Standard Room",
        bedType=(estimate.bedType if estimate else None) or "Double",
        beds=(estimate.beds if estimate else None) or 1,
        price=positive_or(offer.price.total if offer.price else None, fallback_price),
        currency=(offer.price.currency if offer.price else None) or "USD",
        cancellationPolicy=(cancellation.deadline if cancellation else None) or "Standard",
        paymentType=(policies.paymentType if policies else None) or "AT_WEB",
    )


def normalize_live_hotel(entry: AmadeusHotelOffers, now: datetime | None = None) -> LiveHotel:
    """Map one hotel-offers entry onto a live inventory row.

    The headline price comes from the first offer; rooms, urgency and pet
    terms come from the inventory extensions when present.
    """
    now = now or datetime.now(timezone.utc)
    hotel = entry.hotel
    hotel_id = (hotel.hotelId if hotel else None) or entry.id or "unknown"
    first = entry.offers[0] if entry.offers else None
    price = positive_or(first.price.total if first and first.price else None, DEFAULT_PRICE)
    rooms_left = rooms_or_default(entry.roomsLeft)
    pet_friendly = entry.petFriendly is True
    trending = (entry.trending or "").strip().lower()

    return LiveHotel(
        id=entry.id or hotel_id,
        hotelId=hotel_id,
        name=(hotel.name if hotel else None) or "Unknown Hotel",
        rating=clamp_rating(hotel.rating if hotel and hotel.rating is not None else DEFAULT_RATING),
        available=entry.available if entry.available is not None else bool(entry.offers),
        roomsLeft=rooms_left,
        price=price,
        currency=(first.price.currency if first and first.price else None) or "USD",
        originalPrice=round(price * PRICE_SPREAD, 2),
        petFriendly=pet_friendly,
        petFee=max(float(entry.petFee or 0), 0.0) if pet_friendly else 0.0,
        lastUpdated=now,
        trending=trending if trending in TRENDS else "stable",
        urgencyLevel=parse_urgency(entry.urgencyLevel, rooms_left),
        dealExpires=now + DEAL_WINDOW,
        amenities=list(hotel.amenities or []) if hotel else [],
        offers=[normalize_offer(offer, price) for offer in entry.offers],
    )


def normalize_live_hotels(
    response: AmadeusHotelOffersResponse | None,
    now: datetime | None = None,
) -> list[LiveHotel]:
    if response is None or not response.data:
        return []
    now = now or datetime.now(timezone.utc)
    return [normalize_live_hotel(entry, now=now) for entry in response.data]
