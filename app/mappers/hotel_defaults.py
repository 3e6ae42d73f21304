"""Defaulting policy shared by the provider normalizers."""

import re

from app.schemas.hotels import HotelPricing, PetPolicy, UrgencyLevel

PRICE_SPREAD = 1.2
DEFAULT_ROOMS_LEFT = 10
DEFAULT_MAX_PETS = 2
NO_PETS_RESTRICTIONS = ["Pets not allowed"]

_STARS_RE = re.compile(r"^\s*(\d)")


def _positive(value: float | None) -> float | None:
    if value is None or value <= 0:
        return None
    return float(value)


def positive_or(value: float | None, default: float) -> float:
    positive = _positive(value)
    return default if positive is None else positive


def build_pricing(
    low: float | None,
    high: float | None,
    currency: str | None,
    default_from: float,
    default_to: float,
) -> HotelPricing:
    """Build a price band that always satisfies from <= to.

    A single upstream value becomes `from` and `to` is derived from it.
    """
    low, high = _positive(low), _positive(high)
    if low is None and high is None:
        price_from, price_to = default_from, default_to
    elif low is None or high is None:
        price_from = low if low is not None else high
        price_to = round(price_from * PRICE_SPREAD, 2)
    else:
        price_from, price_to = low, max(low, high)
    return HotelPricing(from_=price_from, to=price_to, currency=currency or "EUR")


def build_pet_policy(
    pet_friendly: bool | None,
    pet_fee: float | None,
    restrictions: list[str],
) -> PetPolicy:
    if pet_friendly is not True:
        return PetPolicy(
            allowed=False, fee=0.0, restrictions=list(NO_PETS_RESTRICTIONS), maxPets=0,
        )
    return PetPolicy(
        allowed=True,
        fee=max(float(pet_fee or 0), 0.0),
        restrictions=list(restrictions),
        maxPets=DEFAULT_MAX_PETS,
    )


def clamp_rating(value: float) -> float:
    return min(max(float(value), 0.0), 5.0)


def stars_from_category(category_code: str | None) -> float | None:
    """'4EST' -> 4.0. Returns None when the code has no leading star count."""
    if not category_code:
        return None
    match = _STARS_RE.match(category_code)
    if not match:
        return None
    stars = int(match.group(1))
    return float(stars) if 0 < stars <= 5 else None


def urgency_for_rooms(rooms_left: int) -> UrgencyLevel:
    if rooms_left <= 5:
        return UrgencyLevel.high
    if rooms_left <= 10:
        return UrgencyLevel.medium
    return UrgencyLevel.low


def parse_urgency(value: str | None, rooms_left: int) -> UrgencyLevel:
    if value:
        try:
            return UrgencyLevel(value.strip().lower())
        except ValueError:
            pass
    return urgency_for_rooms(rooms_left)


def rooms_or_default(value: int | None) -> int:
    if value is None or value < 0:
        return DEFAULT_ROOMS_LEFT
    return value
