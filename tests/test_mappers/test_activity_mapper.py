from datetime import datetime, timezone

from app.mappers.activity_mapper import (
    DEFAULT_IMAGE,
    normalize_activities,
    normalize_activity,
)
from app.schemas.hotelbeds import HotelBedsActivitiesResponse, HotelBedsActivity

NOW = datetime(2026, 10, 19, tzinfo=timezone.utc)


def _activity(**fields) -> HotelBedsActivity:
    return HotelBedsActivity.model_validate(fields)


def test_full_activity():
    activity = _activity(
        code="E-E10-PARKGUELL",
        name="Park Guell Guided Tour",
        type="Tour",
        category={"code": "CULT", "name": "Sightseeing"},
        destination={"code": "BCN", "name": "Barcelona"},
        country={"code": "ES", "name": "Spain"},
        modality={"name": "Small group"},
        duration={"value": 1.5, "metric": "hours"},
        amountsFrom=[
            {"paxType": "CHILD", "ageFrom": 4, "ageTo": 11, "amount": 12, "currencyId": "EUR"},
            {"paxType": "ADULT", "ageFrom": 12, "ageTo": 80, "amount": 24, "currencyId": "EUR"},
        ],
        languages=[{"code": "en", "name": "English"}],
        operatingDays=[{"dayOfTheWeek": 1}, {"dayOfTheWeek": 3}],
        minPaxForReservation=2,
        maxPaxForReservation=12,
        content={"images": [{"imageUrl": "https://img/1.jpg"}]},
        petFriendly=True,
        petFee=8,
        rating=4.7,
    )

    record = normalize_activity(activity, now=NOW)

    assert record.code == "E-E10-PARKGUELL"
    assert record.category == "Sightseeing"
    assert record.destination == "Barcelona"
    assert record.duration.display == "1.5 hours"
    assert record.pricing.from_ == 12
    assert record.ageRestrictions.minAge == 12
    assert record.ageRestrictions.maxAge == 80
    assert record.capacity.min == 2
    assert record.capacity.max == 12
    assert record.schedule.operatingDays == ["Monday", "Wednesday"]
    assert record.images == ["https://img/1.jpg"]
    assert record.languages == ["English"]
    assert record.petPolicy.allowed is True
    assert record.petPolicy.fee == 8
    assert record.highlights[0] == "Small group experience"
    assert record.highlights[2] == "Pet-friendly activity"
    assert record.rating == 4.7
    assert record.lastUpdated == NOW


def test_sparse_activity_uses_defaults():
    record = normalize_activity(_activity(name="Sunset Kayak"), now=NOW)

    assert record.code == "unknown"
    assert record.type == "Tour"
    assert record.category == "Cultural"
    assert record.destination == "Unknown"
    assert record.country == "Spain"
    assert record.description == "Experience Sunset Kayak in beautiful location."
    assert record.duration.display == "2 hours"
    assert record.pricing.from_ == 30
    assert record.pricing.currency == "EUR"
    assert record.capacity.min == 1
    assert record.capacity.max == 20
    assert record.ageRestrictions.minAge == 18
    assert record.schedule.operatingDays == ["Daily"]
    assert record.images == [DEFAULT_IMAGE]
    assert record.languages == ["English", "Spanish"]
    assert record.rating == 4.5


def test_pets_only_when_flagged():
    record = normalize_activity(_activity(name="Museum", petFee=10), now=NOW)

    assert record.petPolicy.allowed is False
    assert record.petPolicy.fee == 0
    assert "Adults-only experience" in record.highlights


def test_invalid_weekdays_are_dropped():
    record = normalize_activity(
        _activity(operatingDays=[{"dayOfTheWeek": 9}, {"dayOfTheWeek": 0}]), now=NOW,
    )

    assert record.schedule.operatingDays == ["Sunday"]


def test_rating_is_clamped():
    assert normalize_activity(_activity(rating=7), now=NOW).rating == 5.0


def test_normalize_activities_handles_missing_payload():
    assert normalize_activities(None) == []
    assert normalize_activities(HotelBedsActivitiesResponse()) == []


def test_normalize_activities_shares_timestamp():
    response = HotelBedsActivitiesResponse.model_validate(
        {"activities": [{"code": "A"}, {"code": "B"}]}
    )

    records = normalize_activities(response, now=NOW)

    assert [r.code for r in records] == ["A", "B"]
    assert {r.lastUpdated for r in records} == {NOW}
