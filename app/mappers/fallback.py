"""Hand-authored inventory served when live provider data is unavailable.

The records are written in each provider's native shape and pass through the
regular normalizers, so fallback output obeys the same invariants as live data.
"""

from datetime import datetime

from app.mappers.activity_mapper import normalize_activities
from app.mappers.amadeus_mapper import normalize_amadeus_hotels
from app.mappers.hotelbeds_mapper import normalize_hotelbeds_hotels
from app.mappers.live_offer_mapper import normalize_live_hotels
from app.mappers.transfer_mapper import normalize_transfers
from app.schemas.activities import ActivityRecord
from app.schemas.amadeus import AmadeusHotelListResponse, AmadeusHotelOffersResponse
from app.schemas.hotelbeds import (
    HotelBedsActivitiesResponse,
    HotelBedsAvailabilityResponse,
    HotelBedsTransfersResponse,
)
from app.schemas.hotels import UnifiedHotelRecord
from app.schemas.live import LiveHotel
from app.schemas.transfers import TransferRecord

FALLBACK_SOURCE = "fallback"


def amadeus_fallback_response() -> AmadeusHotelListResponse:
    return AmadeusHotelListResponse(
        data=[
            {
                "hotelId": "MCLONGHM",
                "name": "Pet Paradise Hotel London",
                "priceRange": "Superior",
                "geoCode": {"latitude": 51.5074, "longitude": -0.1278},
                "address": {
                    "countryCode": "GB",
                    "cityName": "London",
                    "lines": ["Central London"],
                },
                "price": 150,
                "originalPrice": 180,
                "currency": "EUR",
                "petFriendly": True,
                "petFee": 25,
                "rating": 4.5,
                "amenities": ["Pet Beds Available", "Dog Walking", "Veterinary Services Nearby"],
                "availability": {"roomsAvailable": 8, "urgencyLevel": "medium"},
            },
        ],
        meta={"count": 1},
    )


def hotelbeds_fallback_response() -> HotelBedsAvailabilityResponse:
    return HotelBedsAvailabilityResponse(
        hotels={
            "currency": "EUR",
            "total": 2,
            "hotels": [
                {
                    "code": "HTB001",
                    "name": "Madrid Pet Resort",
                    "categoryCode": "4EST",
                    "categoryName": "Premium",
                    "destinationCode": "MAD",
                    "destinationName": "Madrid",
                    "zoneName": "City Center",
                    "latitude": 40.4168,
                    "longitude": -3.7038,
                    "minRate": 120,
                    "maxRate": 250,
                    "petFriendly": True,
                    "petFee": 15,
                    "rating": 4.3,
                    "amenities": [
                        "Pet Beds",
                        "Dog Walking Area",
                        "Pet Sitting Service",
                        "Free WiFi",
                        "Restaurant",
                    ],
                    "rooms": [
                        {
                            "code": "DBL",
                            "name": "Double Room with Pet Amenities",
                            "rates": [
                                {
                                    "rateKey": "HTB001_DBL_001",
                                    "net": 180,
                                    "allotment": 5,
                                    "boardName": "Bed & Breakfast",
                                    "paymentType": "AT_HOTEL",
                                },
                            ],
                        },
                    ],
                },
                {
                    "code": "HTB002",
                    "name": "Barcelona Paws Hotel",
                    "categoryCode": "5LUX",
                    "categoryName": "Luxury",
                    "destinationCode": "BCN",
                    "destinationName": "Barcelona",
                    "zoneName": "Gothic Quarter",
                    "latitude": 41.3851,
                    "longitude": 2.1734,
                    "minRate": 200,
                    "maxRate": 400,
                    "petFriendly": True,
                    "petFee": 25,
                    "rating": 4.7,
                    "amenities": [
                        "Pet Spa",
                        "Grooming Service",
                        "Pet Food Menu",
                        "Balcony",
                        "Pool Access",
                    ],
                    "rooms": [
                        {
                            "code": "SUI",
                            "name": "Pet-Friendly Suite",
                            "rates": [
                                {
                                    "rateKey": "HTB002_SUI_001",
                                    "net": 280,
                                    "allotment": 12,
                                    "boardName": "Half Board",
                                    "paymentType": "AT_WEB",
                                },
                            ],
                        },
                    ],
                },
            ],
        },
    )


def amadeus_fallback_hotels(now: datetime | None = None) -> list[UnifiedHotelRecord]:
    return normalize_amadeus_hotels(amadeus_fallback_response(), now=now)


def hotelbeds_fallback_hotels(now: datetime | None = None) -> list[UnifiedHotelRecord]:
    return normalize_hotelbeds_hotels(hotelbeds_fallback_response(), now=now)


def fallback_hotels(now: datetime | None = None) -> list[UnifiedHotelRecord]:
    """All fallback records, Amadeus first, then Hotel Beds."""
    return amadeus_fallback_hotels(now=now) + hotelbeds_fallback_hotels(now=now)


def live_offers_fallback_response() -> AmadeusHotelOffersResponse:
    return AmadeusHotelOffersResponse(
        data=[
            {
                "id": "hotel_1",
                "hotel": {
                    "hotelId": "MCLONGHM",
                    "name": "Pet Paradise Hotel London",
                    "rating": 4.5,
                    "amenities": ["Pet Beds Available", "Dog Walking", "Veterinary Services Nearby"],
                },
                "available": True,
                "roomsLeft": 8,
                "urgencyLevel": "medium",
                "trending": "up",
                "petFriendly": True,
                "petFee": 25,
                "offers": [
                    {
                        "id": "offer_1",
                        "price": {"currency": "USD", "total": 150},
                        "policies": {
                            "paymentType": "AT_WEB",
                            "cancellation": {"deadline": "Free cancellation until 6 PM"},
                        },
                        "room": {
                            "type": "Superior Room",
                            "typeEstimated": {"beds": 1, "bedType": "King"},
                        },
                    },
                ],
            },
            {
                "id": "hotel_2",
                "hotel": {
                    "hotelId": "PAWSINN01",
                    "name": "Paws & Stay Downtown",
                    "rating": 4.2,
                    "amenities": ["Pet Sitting Service", "Pet Food Available", "Dog Walking"],
                },
                "available": True,
                "roomsLeft": 3,
                "urgencyLevel": "high",
                "trending": "stable",
                "petFriendly": True,
                "petFee": 0,
                "offers": [
                    {
                        "id": "offer_2",
                        "price": {"currency": "USD", "total": 120},
                        "policies": {
                            "paymentType": "AT_WEB",
                            "cancellation": {"deadline": "Free cancellation until 4 PM"},
                        },
                        "room": {
                            "type": "Deluxe Pet Suite",
                            "typeEstimated": {"beds": 1, "bedType": "Queen"},
                        },
                    },
                ],
            },
        ],
    )


def activities_fallback_response() -> HotelBedsActivitiesResponse:
    return HotelBedsActivitiesResponse(
        activities=[
            {
                "code": "ACT001",
                "name": "Madrid Pet-Friendly Walking Tour",
                "type": "Tour",
                "category": {"code": "CULT", "name": "Cultural"},
                "destination": {"code": "MAD", "name": "Madrid"},
                "country": {"code": "ES", "name": "Spain"},
                "modality": {"name": "Guided walking"},
                "description": "Explore Madrid's historic center and parks with your dog.",
                "duration": {"value": 3, "metric": "hours"},
                "amountsFrom": [
                    {"paxType": "ADULT", "ageFrom": 12, "ageTo": 99, "amount": 25, "currencyId": "EUR"},
                ],
                "languages": [{"code": "en", "name": "English"}, {"code": "es", "name": "Spanish"}],
                "operatingDays": [{"dayOfTheWeek": d} for d in range(1, 7)],
                "minPaxForReservation": 1,
                "maxPaxForReservation": 15,
                "petFriendly": True,
                "petFee": 5,
                "rating": 4.6,
            },
            {
                "code": "ACT002",
                "name": "Barcelona Dog Beach Day",
                "type": "Outdoor",
                "category": {"code": "BEACH", "name": "Beach"},
                "destination": {"code": "BCN", "name": "Barcelona"},
                "country": {"code": "ES", "name": "Spain"},
                "modality": {"name": "Beach"},
                "description": "A day at Barcelona's dog-friendly beach with a local guide.",
                "duration": {"value": 5, "metric": "hours"},
                "amountsFrom": [
                    {"paxType": "ADULT", "ageFrom": 16, "ageTo": 99, "amount": 40, "currencyId": "EUR"},
                ],
                "languages": [{"code": "en", "name": "English"}, {"code": "ca", "name": "Catalan"}],
                "minPaxForReservation": 1,
                "maxPaxForReservation": 10,
                "petFriendly": True,
                "petFee": 10,
                "rating": 4.8,
            },
            {
                "code": "ACT003",
                "name": "Pyrenees Hiking Adventure with Dogs",
                "type": "Adventure",
                "category": {"code": "NAT", "name": "Nature"},
                "destination": {"code": "HUE", "name": "Huesca"},
                "country": {"code": "ES", "name": "Spain"},
                "modality": {"name": "Mountain hiking"},
                "description": "A full-day mountain hike through the Pyrenees for active dogs.",
                "duration": {"value": 8, "metric": "hours"},
                "amountsFrom": [
                    {"paxType": "ADULT", "ageFrom": 18, "ageTo": 65, "amount": 75, "currencyId": "EUR"},
                ],
                "operatingDays": [{"dayOfTheWeek": 0}, {"dayOfTheWeek": 6}],
                "minPaxForReservation": 2,
                "maxPaxForReservation": 8,
                "petFriendly": True,
                "petFee": 15,
                "rating": 4.9,
            },
        ],
    )


def transfers_fallback_response() -> HotelBedsTransfersResponse:
    return HotelBedsTransfersResponse.model_validate(
        {
            "transfers": [
                {
                    "id": "TRF001",
                    "transferType": "PRIVATE",
                    "category": {"name": "Premium"},
                    "vehicle": {"name": "Sedan", "minPaxCapacity": 1, "maxPaxCapacity": 3},
                    "pickupInformation": {
                        "from": {"type": "IATA", "description": "Madrid Barajas Airport"},
                        "to": {"type": "ATLAS", "description": "Madrid City Center"},
                        "pickup": {"address": "Terminal 4 arrivals hall", "waitTime": 60},
                    },
                    "price": {"totalAmount": 65, "netAmount": 60, "currencyId": "EUR"},
                    "petFriendly": True,
                    "petFee": 10,
                    "rating": 4.7,
                },
                {
                    "id": "TRF002",
                    "transferType": "SHARED",
                    "category": {"name": "Standard"},
                    "vehicle": {"name": "Minivan", "minPaxCapacity": 1, "maxPaxCapacity": 8},
                    "pickupInformation": {
                        "from": {"type": "IATA", "description": "Barcelona El Prat Airport"},
                        "to": {"type": "ATLAS", "description": "Barcelona Hotels"},
                    },
                    "price": {"totalAmount": 25, "netAmount": 22, "currencyId": "EUR"},
                    "petFriendly": True,
                    "petFee": 5,
                    "rating": 4.3,
                },
                {
                    "id": "TRF003",
                    "transferType": "PRIVATE",
                    "category": {"name": "Luxury"},
                    "vehicle": {"name": "Luxury SUV", "minPaxCapacity": 1, "maxPaxCapacity": 6},
                    "pickupInformation": {
                        "from": {"type": "ATLAS", "description": "Seville City Center"},
                        "to": {"type": "ATLAS", "description": "Seville Countryside Estates"},
                        "pickup": {"pickupTime": "09:00", "checkPickup": {"mustCheckPickupTime": True}},
                    },
                    "price": {"totalAmount": 280, "netAmount": 260, "currencyId": "EUR"},
                    "petFriendly": True,
                    "petFee": 0,
                    "rating": 4.9,
                },
            ],
        }
    )


def fallback_live_hotels(now: datetime | None = None) -> list[LiveHotel]:
    return normalize_live_hotels(live_offers_fallback_response(), now=now)


def fallback_activities(now: datetime | None = None) -> list[ActivityRecord]:
    return normalize_activities(activities_fallback_response(), now=now)


def fallback_transfers(now: datetime | None = None) -> list[TransferRecord]:
    return normalize_transfers(transfers_fallback_response(), now=now)
