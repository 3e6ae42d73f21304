from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from app.mappers.hotelbeds_mapper import (
    DEFAULT_AMENITIES,
    PET_AMENITIES,
    normalize_hotelbeds_hotel,
    normalize_hotelbeds_hotels,
)
from app.schemas.hotelbeds import HotelBedsAvailabilityResponse, HotelBedsHotel
from app.schemas.hotels import Provider, UrgencyLevel

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _raw_hotel(**overrides) -> dict:
    hotel = {
        "code": 6613,
        "name": "Hotel Gran Via",
        "categoryCode": "4EST",
        "categoryName": "4 STARS",
        "destinationCode": "MAD",
        "destinationName": "Madrid",
        "zoneCode": 7,
        "zoneName": "Centro",
        "latitude": "40.4200",
        "longitude": "-3.7025",
        "minRate": "95.50",
        "maxRate": "180.00",
        "rooms": [
            {
                "code": "DBL.ST",
                "name": "Double Standard",
                "rates": [
                    {"rateKey": "k1", "net": "95.50", "allotment": 7, "boardName": "ROOM ONLY"},
                    {"rateKey": "k2", "net": "120.00", "allotment": 2, "boardName": "BED AND BREAKFAST"},
                ],
            },
        ],
    }
    hotel.update(overrides)
    return hotel


def test_full_record_with_string_numbers():
    hotel = HotelBedsHotel.model_validate(_raw_hotel())

    rec = normalize_hotelbeds_hotel(hotel, currency="EUR", now=NOW)

    assert rec.id == "hotelbeds_6613"
    assert rec.hotelId == "6613"
    assert rec.provider == Provider.hotelbeds
    assert rec.name == "Hotel Gran Via (Hotel Beds)"
    assert rec.category == "4 STARS"
    assert rec.destination == "Madrid"
    assert rec.location.latitude == 40.42
    assert rec.location.longitude == -3.7025
    assert rec.location.address == "Centro"
    assert rec.pricing.from_ == 95.5
    assert rec.pricing.to == 180.0
    assert rec.pricing.currency == "EUR"
    assert rec.rating == 4.0
    assert rec.availability.roomsLeft == 2
    assert rec.availability.urgencyLevel == UrgencyLevel.high
    assert rec.lastUpdated == NOW


def test_hotelbeds_payload_without_pet_flag_disallows_pets():
    rec = normalize_hotelbeds_hotel(HotelBedsHotel.model_validate(_raw_hotel()), now=NOW)

    assert rec.petPolicy.allowed is False
    assert rec.petPolicy.fee == 0
    assert rec.petPolicy.maxPets == 0
    assert rec.amenities == DEFAULT_AMENITIES


def test_pet_friendly_flag_enables_policy_and_pet_amenities():
    hotel = HotelBedsHotel.model_validate(_raw_hotel(petFriendly=True, petFee=12))

    rec = normalize_hotelbeds_hotel(hotel, now=NOW)

    assert rec.petPolicy.allowed is True
    assert rec.petPolicy.fee == 12
    assert rec.petPolicy.maxPets == 2
    assert "Pet carrier available" in rec.petPolicy.restrictions
    assert rec.amenities[: len(PET_AMENITIES)] == PET_AMENITIES


def test_empty_record_gets_defaults():
    rec = normalize_hotelbeds_hotel(HotelBedsHotel(), now=NOW)

    assert rec.id == "hotelbeds_unknown"
    assert rec.name == "Unnamed Hotel (Hotel Beds)"
    assert rec.category == "Standard"
    assert rec.destination == "Unknown"
    assert rec.location.latitude == 0.0
    assert rec.location.longitude == 0.0
    assert rec.pricing.from_ == 80
    assert rec.pricing.to == 150
    assert rec.rating == 4.2
    assert rec.availability.roomsLeft == 10
    assert rec.availability.urgencyLevel == UrgencyLevel.medium


def test_destination_code_used_when_name_missing():
    rec = normalize_hotelbeds_hotel(HotelBedsHotel(code="1", destinationCode="BCN"), now=NOW)
    assert rec.destination == "BCN"


def test_zone_code_used_when_zone_name_missing():
    hotel = HotelBedsHotel.model_validate({"code": "1", "zoneCode": 12})
    rec = normalize_hotelbeds_hotel(hotel, now=NOW)
    assert rec.location.address == "12"


def test_min_rate_only_derives_upper_bound():
    rec = normalize_hotelbeds_hotel(HotelBedsHotel(code="1", minRate=80), now=NOW)
    assert rec.pricing.from_ == 80
    assert rec.pricing.to == 96


def test_total_net_used_when_rates_missing():
    rec = normalize_hotelbeds_hotel(
        HotelBedsHotel(code="1", totalNet=110, totalSellingRate=130), now=NOW,
    )
    assert rec.pricing.from_ == 110
    assert rec.pricing.to == 130


def test_explicit_rating_wins_over_category():
    rec = normalize_hotelbeds_hotel(
        HotelBedsHotel(code="1", categoryCode="3EST", rating=4.6), now=NOW,
    )
    assert rec.rating == 4.6


def test_unparseable_category_uses_default_rating():
    rec = normalize_hotelbeds_hotel(HotelBedsHotel(code="1", categoryCode="HS"), now=NOW)
    assert rec.rating == 4.2


def test_rooms_left_defaults_without_allotment():
    hotel = HotelBedsHotel.model_validate(
        {"code": "1", "rooms": [{"code": "DBL", "rates": [{"rateKey": "k"}]}]},
    )
    rec = normalize_hotelbeds_hotel(hotel, now=NOW)
    assert rec.availability.roomsLeft == 10


def test_hotel_currency_overrides_response_currency():
    rec = normalize_hotelbeds_hotel(
        HotelBedsHotel(code="1", currency="GBP"), currency="EUR", now=NOW,
    )
    assert rec.pricing.currency == "GBP"


def test_blank_coordinates_are_treated_as_missing():
    hotel = HotelBedsHotel.model_validate({"code": "1", "latitude": "", "longitude": " "})
    rec = normalize_hotelbeds_hotel(hotel, now=NOW)
    assert rec.location.latitude == 0.0
    assert rec.location.longitude == 0.0


def test_normalize_response_uses_response_currency():
    response = HotelBedsAvailabilityResponse.model_validate(
        {"hotels": {"currency": "USD", "hotels": [_raw_hotel(), _raw_hotel(code=7)]}},
    )

    records = normalize_hotelbeds_hotels(response, now=NOW)

    assert [r.id for r in records] == ["hotelbeds_6613", "hotelbeds_7"]
    assert all(r.pricing.currency == "USD" for r in records)


def test_normalize_response_handles_none_and_missing_hotels():
    assert normalize_hotelbeds_hotels(None) == []
    assert normalize_hotelbeds_hotels(HotelBedsAvailabilityResponse()) == []
    assert normalize_hotelbeds_hotels(
        HotelBedsAvailabilityResponse.model_validate({"hotels": {"total": 0}}),
    ) == []


def test_normalization_is_idempotent_apart_from_timestamp():
    hotel = HotelBedsHotel.model_validate(_raw_hotel(petFriendly=True))

    first = normalize_hotelbeds_hotel(hotel, currency="EUR")
    second = normalize_hotelbeds_hotel(hotel, currency="EUR")

    assert first.model_dump(exclude={"lastUpdated"}) == second.model_dump(exclude={"lastUpdated"})


def test_non_finite_numbers_are_rejected():
    with pytest.raises(ValidationError):
        HotelBedsHotel.model_validate({"code": "1", "minRate": "Infinity"})
    with pytest.raises(ValidationError):
        HotelBedsHotel.model_validate({"code": "1", "rating": "NaN"})
