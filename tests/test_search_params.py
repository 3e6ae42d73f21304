from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from app.schemas.search import SearchParams


def test_defaults():
    params = SearchParams()

    assert params.destination == "MAD"
    assert params.checkIn == date.today() + timedelta(days=7)
    assert params.checkOut == date.today() + timedelta(days=9)
    assert params.adults == 2
    assert params.children == 0
    assert params.rooms == 1
    assert params.petFriendly is False
    assert params.maxPrice is None
    assert params.minRating is None
    assert not params.has_filters


def test_query_strings_are_coerced():
    params = SearchParams.model_validate(
        {
            "destination": "BCN",
            "checkIn": "2026-12-01",
            "checkOut": "2026-12-04",
            "adults": "3",
            "petFriendly": "true",
            "maxPrice": "150.5",
            "minRating": "4",
        }
    )

    assert params.checkIn == date(2026, 12, 1)
    assert params.adults == 3
    assert params.petFriendly is True
    assert params.maxPrice == 150.5
    assert params.minRating == 4.0
    assert params.has_filters


def test_blank_values_fall_back_to_defaults():
    params = SearchParams.model_validate({"destination": " ", "adults": "", "maxPrice": None})

    assert params.destination == "MAD"
    assert params.adults == 2
    assert params.maxPrice is None


@pytest.mark.parametrize(
    "field,value",
    [("maxPrice", "abc"), ("maxPrice", "nan"), ("minRating", "high"), ("adults", "two"), ("checkIn", "soon")],
)
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        SearchParams.model_validate({field: value})


def test_hotel_id_list():
    assert SearchParams(hotelIds=" A1, ,B2 ").hotel_id_list == ["A1", "B2"]
    assert SearchParams().hotel_id_list == []


def test_out_of_range_values_pass_through():
    params = SearchParams.model_validate(
        {"adults": "0", "rooms": "0", "maxPrice": "-5", "minRating": "6"}
    )

    assert params.adults == 0
    assert params.rooms == 0
    assert params.maxPrice == -5
    assert params.minRating == 6


@pytest.mark.parametrize(
    "value,expected",
    [("true", True), ("false", False), ("yes", False), ("1", False), ("on", False), ("maybe", False)],
)
def test_pet_flag_is_on_only_for_true(value, expected):
    assert SearchParams.model_validate({"petFriendly": value}).petFriendly is expected
