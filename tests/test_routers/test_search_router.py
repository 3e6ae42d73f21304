import json
from unittest.mock import patch

import httpx
import respx
from httpx import Response

AMADEUS_URL = "https://test.api.amadeus.com/v1/reference-data/locations/hotels/by-hotels"
HOTELBEDS_URL = "https://api.test.hotelbeds.com/hotel-api/1.0/hotels"


def _mock_amadeus(*hotels):
    return respx.get(AMADEUS_URL).mock(
        return_value=Response(200, json={"data": list(hotels), "meta": {"count": len(hotels)}})
    )


def _mock_hotelbeds(*hotels):
    return respx.post(HOTELBEDS_URL).mock(
        return_value=Response(
            200,
            json={"hotels": {"total": len(hotels), "currency": "EUR", "hotels": list(hotels)}},
        )
    )


def _mock_madrid_inventory():
    _mock_amadeus(
        {
            "hotelId": "AMMAD001",
            "name": "Gran Hotel Ingles",
            "address": {"cityName": "Madrid", "lines": ["Calle Echegaray 8"]},
            "price": 100,
            "petFriendly": True,
            "petFee": 20,
        }
    )
    _mock_hotelbeds(
        {
            "code": 6613,
            "name": "Hotel Gran Via",
            "categoryCode": "4EST",
            "destinationName": "Madrid",
            "minRate": "80.00",
            "maxRate": "140.00",
        }
    )


@respx.mock
async def test_unified_search_merges_providers(client):
    _mock_madrid_inventory()

    resp = await client.get("/api/search/unified", params={"destination": "MAD"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["totalCount"] == 2
    assert [h["pricing"]["from"] for h in body["data"]] == [80, 100]
    assert [h["provider"] for h in body["data"]] == ["hotelbeds", "amadeus"]
    assert body["meta"]["source"] == "multi_provider_api"
    assert body["meta"]["providers"] == ["amadeus", "hotelbeds"]
    assert body["meta"]["stats"]["providers"] == {"amadeus": 1, "hotelbeds": 1}
    assert body["meta"]["stats"]["priceRange"] == {"min": 80, "max": 100}
    assert body["meta"]["searchParams"]["destination"] == "MAD"
    assert "error" not in body


@respx.mock
async def test_unified_search_record_shape(client):
    _mock_madrid_inventory()

    resp = await client.get("/api/search/unified")

    hotel = resp.json()["data"][1]
    assert hotel["id"] == "amadeus_AMMAD001"
    assert hotel["name"] == "Gran Hotel Ingles (Amadeus)"
    assert hotel["location"]["address"] == "Calle Echegaray 8"
    assert hotel["pricing"] == {"from": 100, "to": 120, "currency": "EUR", "perNight": True}
    assert hotel["petPolicy"]["allowed"] is True
    assert hotel["petPolicy"]["fee"] == 20
    assert hotel["availability"] == {"roomsLeft": 10, "urgencyLevel": "medium"}


@respx.mock
async def test_unified_search_max_price_filters_everything(client):
    _mock_madrid_inventory()

    resp = await client.get("/api/search/unified", params={"destination": "MAD", "maxPrice": "50"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["data"] == []
    assert body["totalCount"] == 0
    assert body["meta"]["stats"]["totalHotels"] == 0


@respx.mock
async def test_unified_search_pet_filter(client):
    _mock_madrid_inventory()

    resp = await client.get("/api/search/unified", params={"petFriendly": "true"})

    body = resp.json()
    assert body["totalCount"] == 1
    assert all(h["petPolicy"]["allowed"] for h in body["data"])
    assert body["meta"]["stats"]["petFriendlyCount"] == 1
    assert body["meta"]["stats"]["providers"] == {"amadeus": 1, "hotelbeds": 1}


@respx.mock
async def test_unified_search_falls_back_when_providers_fail(client):
    respx.get(AMADEUS_URL).mock(return_value=Response(500, text="down"))
    respx.post(HOTELBEDS_URL).mock(side_effect=httpx.ConnectError("refused"))

    resp = await client.get("/api/search/unified")

    assert resp.status_code == 200
    body = resp.json()
    assert body["meta"]["source"] == "fallback"
    assert body["totalCount"] == len(body["data"]) > 0
    prices = [h["pricing"]["from"] for h in body["data"]]
    assert prices == sorted(prices)


@respx.mock
async def test_unified_search_one_provider_down(client):
    respx.get(AMADEUS_URL).mock(return_value=Response(200, text="<html>oops</html>"))
    _mock_hotelbeds({"code": "H1", "name": "Only Hotel", "minRate": 70})

    resp = await client.get("/api/search/unified")

    body = resp.json()
    assert body["meta"]["source"] == "hotelbeds_api"
    assert [h["id"] for h in body["data"]] == ["hotelbeds_H1"]


@respx.mock(assert_all_called=False)
async def test_unified_search_invalid_param_returns_error_envelope(client):
    route = _mock_amadeus()

    resp = await client.get("/api/search/unified", params={"maxPrice": "cheap"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["data"] == []
    assert body["totalCount"] == 0
    assert "maxPrice" in body["error"]
    assert route.call_count == 0


@respx.mock
async def test_unified_search_blank_params_use_defaults(client):
    _mock_madrid_inventory()

    resp = await client.get(
        "/api/search/unified", params={"destination": "", "maxPrice": "", "adults": ""},
    )

    body = resp.json()
    assert resp.status_code == 200
    assert body["meta"]["searchParams"]["destination"] == "MAD"
    assert body["meta"]["searchParams"]["adults"] == 2
    assert body["totalCount"] == 2


@respx.mock
async def test_unified_search_aggregation_failure_returns_500(client):
    _mock_madrid_inventory()

    with patch(
        "app.services.hotel_search.normalize_amadeus_hotels",
        side_effect=RuntimeError("boom"),
    ):
        resp = await client.get("/api/search/unified")

    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Failed to perform unified search"
    assert body["message"] == "boom"
    assert body["data"] == []
    assert body["totalCount"] == 0
    assert body["meta"]["providers"] == ["amadeus", "hotelbeds"]


@respx.mock
async def test_unified_search_non_finite_upstream_value_keeps_other_provider(client):
    respx.get(AMADEUS_URL).mock(
        return_value=Response(
            200, json={"data": [{"hotelId": "A1", "price": 100, "rating": "NaN"}]},
        )
    )
    _mock_hotelbeds({"code": "H1", "name": "Only Hotel", "minRate": 70})

    resp = await client.get("/api/search/unified")

    assert resp.status_code == 200
    body = resp.json()
    assert body["meta"]["source"] == "hotelbeds_api"
    assert [h["id"] for h in body["data"]] == ["hotelbeds_H1"]


@respx.mock
async def test_unified_search_out_of_range_values_reach_providers(client):
    _mock_amadeus({"hotelId": "A1", "price": 100, "rating": 4.5})
    hotelbeds = _mock_hotelbeds({"code": "H1", "minRate": 70})

    resp = await client.get("/api/search/unified", params={"adults": "0", "minRating": "6"})

    assert resp.status_code == 200
    body = resp.json()
    assert "error" not in body
    assert body["data"] == []
    assert body["meta"]["searchParams"]["adults"] == 0
    sent = json.loads(hotelbeds.calls.last.request.content)
    assert sent["occupancies"][0]["adults"] == 0


@respx.mock
async def test_unified_search_pet_flag_other_than_true_is_off(client):
    _mock_madrid_inventory()

    resp = await client.get("/api/search/unified", params={"petFriendly": "yes"})

    body = resp.json()
    assert resp.status_code == 200
    assert body["meta"]["searchParams"]["petFriendly"] is False
    assert body["totalCount"] == 2
