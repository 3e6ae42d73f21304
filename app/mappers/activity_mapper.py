from datetime import datetime, timezone

from app.mappers.hotel_defaults import build_pet_policy, clamp_rating, positive_or
from app.schemas.activities import (
    ActivityDuration,
    ActivityPricing,
    ActivityRecord,
    ActivitySchedule,
    AgeRestrictions,
    Capacity,
)
from app.schemas.hotelbeds import HotelBedsActivitiesResponse, HotelBedsActivity

DEFAULT_RATING = 4.5
DEFAULT_PRICE = 30.0
DEFAULT_DURATION = 2
DEFAULT_IMAGE = "https://images.unsplash.com/photo-1488646953014-85cb44e25828?w=800&h=600&fit=crop"
DEFAULT_LANGUAGES = ["English", "Spanish"]
PET_RESTRICTIONS = ["Must be leashed", "Vaccinations required", "Well-behaved pets only"]
WEEKDAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


def _duration(activity: HotelBedsActivity) -> ActivityDuration:
    source = activity.duration
    value = (source.value if source else None) or DEFAULT_DURATION
    unit = (source.metric if source else None) or "hours"
    return ActivityDuration(value=value, unit=unit, display=f"{value:g} {unit}")


def _operating_days(activity: HotelBedsActivity) -> list[str]:
    days = [
        WEEKDAYS[d.dayOfTheWeek]
        for d in activity.operatingDays
        if d.dayOfTheWeek is not None and 0 <= d.dayOfTheWeek < len(WEEKDAYS)
    ]
    return days or ["Daily"]


def _age_restrictions(activity: HotelBedsActivity) -> AgeRestrictions:
    adult = next((a for a in activity.amountsFrom if a.paxType == "ADULT"), None)
    return AgeRestrictions(
        minAge=(adult.ageFrom if adult else None) or 18,
        maxAge=(adult.ageTo if adult else None) or 99,
    )


def normalize_activity(
    activity: HotelBedsActivity,
    now: datetime | None = None,
) -> ActivityRecord:
    """Map one Hotel Beds activity onto the site's activity shape."""
    name = activity.name or "Unnamed Activity"
    destination = activity.destination.name if activity.destination else None
    first_amount = activity.amountsFrom[0] if activity.amountsFrom else None
    duration = _duration(activity)
    pet_policy = build_pet_policy(activity.petFriendly, activity.petFee, PET_RESTRICTIONS)
    images = [
        img.imageUrl for img in (activity.content.images if activity.content else [])
        if img.imageUrl
    ]
    modality = activity.modality.name if activity.modality else None

    return ActivityRecord(
        code=activity.code or "unknown",
        name=name,
        type=activity.type or "Tour",
        category=(activity.category.name if activity.category else None) or "Cultural",
        destination=destination or "Unknown",
        country=(activity.country.name if activity.country else None) or "Spain",
        description=activity.description or (
            f"Experience {name} in {destination or 'beautiful location'}."
        ),
        duration=duration,
        pricing=ActivityPricing(
            from_=positive_or(first_amount.amount if first_amount else None, DEFAULT_PRICE),
            currency=(first_amount.currencyId if first_amount else None) or "EUR",
        ),
        petPolicy=pet_policy,
        capacity=Capacity(
            min=activity.minPaxForReservation or 1,
            max=activity.maxPaxForReservation or 20,
        ),
        ageRestrictions=_age_restrictions(activity),
        schedule=ActivitySchedule(
            operatingDays=_operating_days(activity),
            frequency="Multiple times daily",
        ),
        images=images or [DEFAULT_IMAGE],
        rating=clamp_rating(activity.rating if activity.rating is not None else DEFAULT_RATING),
        languages=[lang.name for lang in activity.languages if lang.name] or list(DEFAULT_LANGUAGES),
        highlights=[
            f"{modality or 'Guided'} experience",
            f"Duration: {duration.display}",
            "Pet-friendly activity" if pet_policy.allowed else "Adults-only experience",
            "Professional guide included",
        ],
        lastUpdated=now or datetime.now(timezone.utc),
    )


def normalize_activities(
    response: HotelBedsActivitiesResponse | None,
    now: datetime | None = None,
) -> list[ActivityRecord]:
    if response is None or not response.activities:
        return []
    now = now or datetime.now(timezone.utc)
    return [normalize_activity(activity, now=now) for activity in response.activities]
